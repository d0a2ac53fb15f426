"""Profile storage for git-thing."""

import json
import logging
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .config import APP_NAME, CONFIG_FILE_NAME, CONFIG_ROOT, PRIVATE_FILE_MODE
from .exceptions import (
    ConfigParseError,
    ConfigReadError,
    ConfigWriteError,
    DirectoryCreateError,
    ProfileNotFoundError,
)
from .system import get_home_dir

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("username", "email", "access_token")


@dataclass
class Profile:
    """Git identity stored under a profile name."""
    username: str
    email: str
    access_token: str = field(repr=False)

    def to_dict(self) -> dict[str, str]:
        """Convert profile to dictionary for serialization."""
        return {
            "username": self.username,
            "email": self.email,
            "access_token": self.access_token,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Profile":
        """Create profile from dictionary.

        Raises:
            ValueError: If a field is missing or is not a string
        """
        if not isinstance(data, dict):
            raise ValueError("profile entry must be an object")
        for key in PROFILE_FIELDS:
            if not isinstance(data.get(key), str):
                raise ValueError(f"field '{key}' must be a string")
        return cls(
            username=data["username"],
            email=data["email"],
            access_token=data["access_token"],
        )


def _ensure_directory(directory: Path) -> None:
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreateError(
            f"Failed to create config directory: {directory}",
            path=directory,
            details=e.strerror,
        ) from e


def resolve_config_path() -> Path:
    """Get the profile store location, creating its directory if needed.

    Returns:
        ``<home>/.config/git-thing/config.json``
    """
    config_dir = get_home_dir() / CONFIG_ROOT / APP_NAME
    _ensure_directory(config_dir)
    return config_dir / CONFIG_FILE_NAME


class ProfileStore:
    """Persisted mapping of profile name to Profile.

    Every operation reads the file fresh and every mutation rewrites it
    whole, so no state is kept between calls.
    """

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize profile store.

        Args:
            config_path: Store file to use instead of the per-user default
        """
        if config_path is None:
            config_path = resolve_config_path()
        else:
            _ensure_directory(config_path.parent)
        self.config_path = config_path

    def load(self) -> dict[str, Profile]:
        """Load profiles from disk.

        A missing file is a first run and yields no profiles.
        """
        if not self.config_path.exists():
            logger.debug(f"No config file at {self.config_path}")
            return {}

        try:
            content = self.config_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigReadError(
                f"Failed to read config file: {self.config_path}",
                path=self.config_path,
                details=str(e),
            ) from e

        try:
            data = json.loads(content)
            if not isinstance(data, dict):
                raise ValueError("top level must be an object")
            profiles = {
                name: Profile.from_dict(profile_data)
                for name, profile_data in data.items()
            }
        except ValueError as e:
            # json.JSONDecodeError is a ValueError
            raise ConfigParseError(
                f"Failed to parse config file: {self.config_path}",
                path=self.config_path,
                details=str(e),
            ) from e

        logger.debug(f"Loaded {len(profiles)} profile(s) from {self.config_path}")
        return profiles

    def save(self, profiles: dict[str, Profile]) -> None:
        """Save profiles to disk, replacing the whole file."""
        data = {name: profile.to_dict() for name, profile in profiles.items()}
        content = json.dumps(data, indent=2, sort_keys=True) + "\n"

        directory = self.config_path.parent
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{CONFIG_FILE_NAME}.", dir=directory
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.chmod(tmp_name, PRIVATE_FILE_MODE)
            os.replace(tmp_name, self.config_path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise ConfigWriteError(
                f"Failed to write to config file: {self.config_path}",
                path=self.config_path,
                details=e.strerror,
            ) from e

        logger.debug(f"Saved {len(profiles)} profile(s) to {self.config_path}")

    def add_or_replace(self, name: str, profile: Profile) -> bool:
        """Insert or overwrite the profile stored under ``name``.

        Returns:
            True if an existing profile was replaced
        """
        profiles = self.load()
        replaced = name in profiles
        if replaced:
            logger.debug(f"Overwriting profile '{name}'")
        profiles[name] = profile
        self.save(profiles)
        return replaced

    def list_profiles(self) -> list[tuple[str, Profile]]:
        """Get all profiles sorted by name."""
        return sorted(self.load().items(), key=lambda item: item[0])

    def get_profile(self, name: str) -> Profile:
        """Get a profile by name."""
        profiles = self.load()
        if name not in profiles:
            raise ProfileNotFoundError(name)
        return profiles[name]

    def update_profile(
        self,
        name: str,
        username: str | None = None,
        email: str | None = None,
        access_token: str | None = None,
    ) -> Profile:
        """Change selected fields of an existing profile.

        Args:
            name: Profile name
            username: New username, or None to keep the current one
            email: New email, or None to keep the current one
            access_token: New token, or None to keep the current one

        Returns:
            The updated profile
        """
        profiles = self.load()
        if name not in profiles:
            raise ProfileNotFoundError(name)

        profile = profiles[name]
        if username is not None:
            profile.username = username
        if email is not None:
            profile.email = email
        if access_token is not None:
            profile.access_token = access_token

        self.save(profiles)
        return profile

    def delete_profile(self, name: str) -> None:
        """Delete a profile."""
        profiles = self.load()
        if name not in profiles:
            raise ProfileNotFoundError(name)
        del profiles[name]
        self.save(profiles)
