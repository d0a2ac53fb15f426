"""Test configuration and fixtures."""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import Mock

import pytest

from gitthing.credentials import CredentialsFile
from gitthing.profile import ProfileStore


@pytest.fixture
def temp_home(tmp_path: Path, monkeypatch) -> Generator[Path, None, None]:
    """Create a temporary home directory for testing."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    yield home


@pytest.fixture
def store(temp_home: Path) -> ProfileStore:
    """Create a profile store in the temporary home."""
    return ProfileStore()


@pytest.fixture
def credentials(temp_home: Path) -> CredentialsFile:
    """Credentials file in the temporary home."""
    return CredentialsFile()


@pytest.fixture
def mock_git_config() -> Mock:
    """Mock global Git configuration."""
    return Mock()
