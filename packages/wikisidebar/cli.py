"""wikisidebar - Generate the _sidebar.md navigation file of a wiki.

Walks the wiki folder, keeps the supported documents and writes a nested
list of links, one collapsible block per folder.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from wikisidebar import __version__
from wikisidebar.generator import SIDEBAR_FILENAME, create_sidebar, display_message
from wikisidebar.models import MessageType
from wikisidebar.settings import SettingsError, apply_command_line_options, load_settings

# Initialize Rich console
console = Console()

# Initialize Typer app
app = typer.Typer(
    name="wikisidebar",
    help="Generate the _sidebar.md navigation file of a GitLab or docsify wiki",
    add_completion=False,
    rich_markup_mode="rich",
)


def handle_error(error: Exception, user_message: str | None = None) -> NoReturn:
    """Handle and display errors in a user-friendly way.

    Args:
        error: The exception that occurred
        user_message: Optional user-friendly explanation
    """
    error_msg = user_message or escape(str(error))
    display_message(error_msg, MessageType.ERROR)
    raise typer.Exit(1)


def configure_logging(verbose: bool) -> None:
    """Route diagnostics through Rich; DEBUG when verbose, warnings otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def version_callback(value: bool) -> None:
    """Print the version and exit."""
    if value:
        console.print(f"[bold cyan]wikisidebar[/bold cyan] version [bold green]{__version__}[/bold green]")
        raise typer.Exit(0)


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def generate(
    ctx: typer.Context,
    root: Annotated[
        Path | None,
        typer.Option(
            "--root",
            help="Wiki root folder (defaults to the current directory)",
            exists=True,
            file_okay=False,
            dir_okay=True,
            resolve_path=True,
        ),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option(
            "--strict", help="Fail on unsupported arguments instead of warning", rich_help_panel="Sidebar Options"
        ),
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose output")] = False,
    version: Annotated[
        bool | None,
        typer.Option("--version", help="Show version information", callback=version_callback, is_eager=True),
    ] = None,
) -> None:
    """Create or update the _sidebar.md file in the wiki root.

    Extra arguments: [bold]--keep-file-name[/bold] uses file names as titles
    instead of the markdown heading 1. Processing stops at the first
    unsupported argument.

    Args:
        ctx: Typer context; holds the extra command line arguments, in order
        root: Wiki root folder
        strict: Exit with an error on unsupported arguments
        verbose: Enable verbose output
        version: Show version information
    """
    configure_logging(verbose)
    wiki_root = root or Path.cwd().resolve()

    try:
        settings = load_settings(wiki_root)
    except SettingsError as e:
        display_message(
            f"Error in file [bold]{escape(str(e.path))}[/bold]\n"
            + f"File content:\n\n{escape(e.content)}\n\n"
            + escape(e.reason),
            MessageType.ERROR,
            title="Invalid Settings",
        )
        raise typer.Exit(1) from None

    settings, valid_args = apply_command_line_options(settings, ctx.args)
    if not valid_args and strict:
        display_message(
            "Unsupported command line arguments, nothing has been generated.",
            MessageType.ERROR,
            title="Invalid Arguments",
        )
        raise typer.Exit(1)

    display_message(
        f"Generating the {SIDEBAR_FILENAME} file for [bold cyan]{escape(str(wiki_root))}[/bold cyan]...",
        MessageType.INFO,
        title="Generating Sidebar",
    )

    try:
        sidebar_path = create_sidebar(settings)
    except OSError as e:
        handle_error(e, f"Cannot write the sidebar: {escape(str(e))}")

    display_message(
        f"File [bold cyan]{escape(str(sidebar_path))}[/bold cyan] has been created / updated",
        MessageType.SUCCESS,
        title="Sidebar Generated",
    )


if __name__ == "__main__":
    app()
