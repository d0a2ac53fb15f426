"""Main entry point for direct module execution."""

from .cli import cli


def main() -> None:
    """Main entry point."""
    cli(obj={}, prog_name="git-thing")


if __name__ == "__main__":
    main()
