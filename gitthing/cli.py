"""Command-line interface."""

import logging
import sys
from collections.abc import Callable
from functools import wraps
from pathlib import Path
from typing import Any, TypeVar, cast

import click

from .config import LOG_FORMAT
from .credentials import CredentialsFile
from .exceptions import GitThingError
from .git import GlobalGitConfig
from .profile import Profile, ProfileStore
from .switcher import Switcher
from .ui import (
    confirm_action,
    console,
    print_error,
    print_identity,
    print_info,
    print_profile_table,
    print_success,
    print_warning,
)
from .version import __version__

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def handle_errors(f: F) -> F:
    """Decorator to handle errors in CLI commands."""
    @wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except GitThingError as e:
            logger.debug(f"{type(e).__name__}: {e}")
            print_error(str(e), e.details)
            sys.exit(1)
        except (click.exceptions.Exit, click.ClickException, click.Abort):
            raise
        except Exception as e:
            logger.error(f"Unexpected error: {type(e).__name__}")
            logger.debug("Unexpected error traceback", exc_info=True)
            print_error(f"Unexpected error: {type(e).__name__}")
            sys.exit(1)
    return cast(F, wrapper)


def get_store(ctx: click.Context) -> ProfileStore:
    """Open the profile store selected by the group options."""
    return ProfileStore(config_path=ctx.obj.get("config_path"))


@click.group(invoke_without_command=True)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Profile store to use instead of ~/.config/git-thing/config.json",
)
@click.version_option(__version__, prog_name="git-thing")
@click.pass_context
def cli(ctx: click.Context, debug: bool, config_path: Path | None) -> None:
    """Switch between multiple Git identities."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
    if debug:
        logger.debug("Debug mode enabled")

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path

    if ctx.invoked_subcommand is None:
        console.print(
            "No valid command provided. Use --help for usage information."
        )


@cli.command()
@click.option(
    "--profilename", "-p", required=True,
    help="What you want to call this profile e.g. work.",
)
@click.option("--username", "-u", required=True, help="Your GitHub username.")
@click.option("--email", "-e", required=True, help="Your GitHub email.")
@click.option(
    "--personal-access-key", "-k", "access_token", required=True,
    help="Your GitHub personal access token.",
)
@click.pass_context
@handle_errors
def add(
    ctx: click.Context,
    profilename: str,
    username: str,
    email: str,
    access_token: str,
) -> None:
    """Add a new Git profile, replacing any profile with the same name."""
    store = get_store(ctx)
    replaced = store.add_or_replace(
        profilename,
        Profile(username=username, email=email, access_token=access_token),
    )
    if replaced:
        print_warning(f"Replaced existing profile '{profilename}'")
    print_success(f"Profile '{profilename}' added successfully!")


@cli.command(name="list")
@click.pass_context
@handle_errors
def list_profiles(ctx: click.Context) -> None:
    """List all Git profiles."""
    profiles = get_store(ctx).list_profiles()

    if not profiles:
        print_info("No profiles found. Create one with: git-thing add")
        return

    print_profile_table(profiles)


@cli.command()
@click.option(
    "--profile", "-p", "name", required=True,
    help="The name of the profile to switch to.",
)
@click.pass_context
@handle_errors
def switch(ctx: click.Context, name: str) -> None:
    """Switch to another Git profile."""
    switcher = Switcher(
        store=get_store(ctx),
        git_config=GlobalGitConfig(),
        credentials=CredentialsFile(),
    )
    switcher.switch_to(name)
    print_success(f"Switched to profile '{name}' successfully!")


@cli.command()
@click.option("--profile", "-p", "name", required=True, help="Profile to update.")
@click.option("--username", "-u", help="New GitHub username.")
@click.option("--email", "-e", help="New GitHub email.")
@click.option(
    "--personal-access-key", "-k", "access_token",
    help="New GitHub personal access token.",
)
@click.pass_context
@handle_errors
def update(
    ctx: click.Context,
    name: str,
    username: str | None = None,
    email: str | None = None,
    access_token: str | None = None,
) -> None:
    """Update fields of an existing Git profile."""
    if username is None and email is None and access_token is None:
        raise click.UsageError(
            "Please provide at least one of --username, --email or "
            "--personal-access-key"
        )

    get_store(ctx).update_profile(
        name, username=username, email=email, access_token=access_token
    )
    print_success(f"Profile '{name}' updated successfully")


@cli.command()
@click.option("--profile", "-p", "name", required=True, help="Profile to delete.")
@click.option("--yes", "-y", is_flag=True, help="Delete without confirmation")
@click.pass_context
@handle_errors
def delete(ctx: click.Context, name: str, yes: bool = False) -> None:
    """Delete a Git profile."""
    store = get_store(ctx)
    # Fail on unknown names before asking anything
    store.get_profile(name)

    if not yes and not confirm_action(
        f"Are you sure you want to delete profile '{name}'?", default=False
    ):
        print_info("Operation cancelled")
        return

    store.delete_profile(name)
    print_success(f"Profile '{name}' deleted successfully")


@cli.command()
@handle_errors
def current() -> None:
    """Show the global Git identity."""
    username, email = GlobalGitConfig().get_identity()
    print_identity(username, email)
