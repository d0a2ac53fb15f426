"""Global Git configuration management."""

import logging
import os

# Resolve a missing git executable when a command runs, not at import
os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")

import git  # noqa: E402
from git.exc import CommandError  # noqa: E402

from .exceptions import ExternalConfigUpdateError  # noqa: E402

logger = logging.getLogger(__name__)


class GlobalGitConfig:
    """Sets identity values in Git's global configuration.

    Values are written with ``git config --global`` so Git itself decides
    where the global file lives.
    """

    def __init__(self, runner: git.Git | None = None) -> None:
        """Initialize global Git configuration manager.

        Args:
            runner: GitPython command wrapper; a fresh one is used if omitted
        """
        self.runner = runner if runner is not None else git.Git()

    def set_value(self, key: str, value: str) -> None:
        """Set a single global configuration key.

        Raises:
            ExternalConfigUpdateError: If git is missing or exits non-zero
        """
        logger.debug(f"Setting global git config {key}")
        try:
            self.runner.config("--global", key, value)
        except CommandError as e:
            raise ExternalConfigUpdateError(
                f"Failed to set git {key}",
                details=str(e).strip(),
            ) from e

    def get_value(self, key: str) -> str | None:
        """Get a global configuration key, or None if it is unset."""
        try:
            return self.runner.config("--global", "--get", key)
        except CommandError:
            logger.debug(f"Global git config {key} is not set")
            return None

    def set_identity(self, username: str, email: str) -> None:
        """Point the global ``user.name`` and ``user.email`` at an identity."""
        self.set_value("user.name", username)
        self.set_value("user.email", email)

    def get_identity(self) -> tuple[str | None, str | None]:
        """Get the global ``user.name`` and ``user.email``."""
        return self.get_value("user.name"), self.get_value("user.email")
