"""git-thing - Switch between multiple Git identities."""

from gitthing.cli import cli
from gitthing.profile import Profile, ProfileStore
from gitthing.switcher import Switcher
from gitthing.version import __version__

__all__ = ["Profile", "ProfileStore", "Switcher", "__version__", "cli"]
