"""Console output for git-thing."""

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm
from rich.table import Table
from rich.theme import Theme

from .exceptions import GitThingError
from .profile import Profile

# Create a custom theme for consistent styling
theme = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "red",
        "success": "green",
        "path": "blue",
        "command": "green",
    }
)

console = Console(theme=theme)
err_console = Console(theme=theme, stderr=True)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message to stderr."""
    err_console.print(f"[error]Error:[/error] {escape(message)}")
    if details:
        err_console.print(f"[dim]{escape(details)}[/dim]")


def print_warning(message: str) -> None:
    """Print warning message."""
    console.print(f"[warning]Warning:[/warning] {escape(message)}")


def print_info(message: str) -> None:
    """Print info message."""
    console.print(f"[info]Info:[/info] {escape(message)}")


def print_success(message: str) -> None:
    """Print success message."""
    console.print(f"[success]Success:[/success] {escape(message)}")


def confirm_action(prompt: str, default: bool = True) -> bool:
    """Confirm an action with the user."""
    try:
        return Confirm.ask(escape(prompt), default=default)
    except KeyboardInterrupt:
        raise GitThingError("Operation cancelled by user") from None


def print_profile_table(profiles: list[tuple[str, Profile]]) -> None:
    """Print profiles in a table format. Tokens are never shown."""
    table = Table(
        title="Git Profiles",
        box=box.ROUNDED,
        header_style="bold cyan",
        border_style="blue",
    )

    table.add_column("Profile", style="cyan", no_wrap=True)
    table.add_column("Username", style="blue", no_wrap=True)
    table.add_column("Email", style="green", no_wrap=True)

    for name, profile in profiles:
        table.add_row(escape(name), escape(profile.username), escape(profile.email))

    console.print(table)
    console.print()


def print_identity(username: str | None, email: str | None) -> None:
    """Print the global Git identity."""
    table = Table(box=box.ROUNDED, show_header=False, border_style="blue")
    table.add_column("Key", style="dim")
    table.add_column("Value", style="green")
    table.add_row("user.name", escape(username) if username else "[dim]not set[/dim]")
    table.add_row("user.email", escape(email) if email else "[dim]not set[/dim]")
    console.print(table)
