"""Custom exceptions for git-thing."""

from pathlib import Path


class GitThingError(Exception):
    """Base exception for git-thing."""

    def __init__(self, message: str, details: str | None = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class StoreError(GitThingError):
    """Profile store errors."""

    def __init__(
        self,
        message: str,
        path: Path | None = None,
        details: str | None = None,
    ) -> None:
        self.path = path
        super().__init__(message, details=details)


class HomeDirectoryUnresolvedError(StoreError):
    """The platform could not report a home directory."""
    pass


class DirectoryCreateError(StoreError):
    """The config directory could not be created."""
    pass


class ConfigReadError(StoreError):
    """The config file exists but could not be read."""
    pass


class ConfigParseError(StoreError):
    """The config file is not valid profile JSON."""
    pass


class ConfigWriteError(StoreError):
    """The config file could not be written."""
    pass


class ProfileNotFoundError(GitThingError):
    """No profile with the requested name."""

    def __init__(self, profile_name: str) -> None:
        self.profile_name = profile_name
        super().__init__(f"Profile '{profile_name}' not found")


class ExternalConfigUpdateError(GitThingError):
    """Git refused to update its global configuration."""
    pass


class CredentialsWriteError(GitThingError):
    """The credentials file could not be written."""
    pass
