"""Profile switching."""

import logging

from .credentials import CredentialsFile
from .exceptions import CredentialsWriteError
from .git import GlobalGitConfig
from .profile import Profile, ProfileStore

logger = logging.getLogger(__name__)


class Switcher:
    """Applies a stored profile to Git's global identity and credentials.

    The two external writes are not transactional. If the identity update
    succeeds and the credentials write fails, the identity stays updated and
    the failure is reported so the user can retry.
    """

    def __init__(
        self,
        store: ProfileStore,
        git_config: GlobalGitConfig,
        credentials: CredentialsFile,
    ) -> None:
        self.store = store
        self.git_config = git_config
        self.credentials = credentials

    def switch_to(self, name: str) -> Profile:
        """Switch the active identity to profile ``name``.

        Args:
            name: Profile name

        Returns:
            The applied profile

        Raises:
            ProfileNotFoundError: If no such profile exists; nothing is written
            ExternalConfigUpdateError: If git rejects the identity update;
                the credentials file is left untouched
            CredentialsWriteError: If the credentials file cannot be written
        """
        profile = self.store.get_profile(name)

        logger.debug(f"Applying identity of profile '{name}'")
        self.git_config.set_identity(profile.username, profile.email)

        try:
            self.credentials.write(profile.username, profile.access_token)
        except CredentialsWriteError as e:
            e.message = (
                f"{e.message} (git identity was already switched to "
                f"'{name}'; credentials are stale)"
            )
            raise

        logger.debug(f"Switched to profile '{name}'")
        return profile
