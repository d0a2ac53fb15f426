"""System helpers for git-thing."""

import logging
from pathlib import Path

from .exceptions import HomeDirectoryUnresolvedError

logger = logging.getLogger(__name__)


def get_home_dir() -> Path:
    """Get the user's home directory.

    Raises:
        HomeDirectoryUnresolvedError: If the platform cannot report one
    """
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        raise HomeDirectoryUnresolvedError(
            "Could not find home directory",
            details=str(e),
        ) from e

    logger.debug(f"Using home directory: {home}")
    return home
