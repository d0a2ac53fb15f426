"""Credentials file management."""

import logging
import os
from pathlib import Path
from urllib.parse import quote

from .config import CREDENTIALS_FILE_NAME, CREDENTIALS_HOST, PRIVATE_FILE_MODE
from .exceptions import CredentialsWriteError
from .system import get_home_dir

logger = logging.getLogger(__name__)


def format_credentials_url(
    username: str,
    access_token: str,
    host: str = CREDENTIALS_HOST,
) -> str:
    """Build the token-embedded URL read by ``git credential-store``.

    Username and token are percent-encoded as URL userinfo.
    """
    return f"https://{quote(username, safe='')}:{quote(access_token, safe='')}@{host}"


class CredentialsFile:
    """The plain-text credentials file used by Git's store helper."""

    def __init__(self, path: Path | None = None) -> None:
        """Initialize credentials file.

        Args:
            path: File to manage; defaults to ``<home>/.git-credentials``
        """
        self.path = path if path is not None else get_home_dir() / CREDENTIALS_FILE_NAME

    def write(self, username: str, access_token: str) -> None:
        """Replace the file with a single credentials line.

        Raises:
            CredentialsWriteError: On any I/O error. The message never
                contains the token.
        """
        line = format_credentials_url(username, access_token) + "\n"
        try:
            fd = os.open(
                self.path,
                os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
                PRIVATE_FILE_MODE,
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(line)
            os.chmod(self.path, PRIVATE_FILE_MODE)
        except OSError as e:
            raise CredentialsWriteError(
                f"Failed to write credentials file: {self.path}",
                details=e.strerror,
            ) from e

        logger.debug(f"Wrote credentials for {username} to {self.path}")
