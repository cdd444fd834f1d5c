"""Main CLI application module."""

import typer

from .catalog_commands import register

app = typer.Typer(
    help="🛒 Storefront CLI - catalogue administration",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

register(app)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
