"""Tests for running git-thing as a program."""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def no_git_env(tmp_path: Path) -> dict[str, str]:
    """Environment whose PATH holds no git executable."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    home = tmp_path / "home"
    home.mkdir()
    env = {
        "PATH": str(bin_dir),
        "HOME": str(home),
        "PYTHONPATH": os.pathsep.join(
            p for p in [str(PROJECT_ROOT), os.environ.get("PYTHONPATH", "")] if p
        ),
    }
    return env


def run_git_thing(env: dict[str, str], *args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-m", "gitthing", *args],
        env=env,
        capture_output=True,
        text=True,
        timeout=60,
    )


def test_list_without_git(no_git_env: dict[str, str]) -> None:
    """Test store-only commands work when git is not installed."""
    result = run_git_thing(no_git_env, "list")

    assert result.returncode == 0, result.stderr
    assert "No profiles found" in result.stdout
    assert "Traceback" not in result.stderr


def test_switch_without_git(no_git_env: dict[str, str]) -> None:
    """Test switching without git is a readable failure."""
    home = Path(no_git_env["HOME"])
    config_dir = home / ".config" / "git-thing"
    config_dir.mkdir(parents=True)
    (config_dir / "config.json").write_text(
        json.dumps(
            {
                "work": {
                    "username": "alice",
                    "email": "alice@x.com",
                    "access_token": "tok123",
                }
            }
        )
    )

    result = run_git_thing(no_git_env, "switch", "--profile", "work")

    assert result.returncode == 1
    assert "Failed to set git user.name" in result.stderr
    assert "Traceback" not in result.stderr
    assert "tok123" not in result.stdout + result.stderr
    assert not (home / ".git-credentials").exists()
