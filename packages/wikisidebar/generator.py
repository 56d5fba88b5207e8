"""Core generation logic for wikisidebar."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from rich.console import Console

from wikisidebar.models import MessageType, SidebarSettings
from wikisidebar.renderer import render_sidebar
from wikisidebar.scanner import scan_tree

# Name of the sidebar file used by GitLab wikis
SIDEBAR_FILENAME = "_sidebar.md"

# Initialize Rich console
console = Console()

logger = logging.getLogger(__name__)


def display_message(message: str, message_type: MessageType = MessageType.INFO, title: str | None = None) -> None:
    """Display a formatted message panel.

    Args:
        message: The message text to display
        message_type: Type of message (affects styling)
        title: Optional panel title (defaults to message type)
    """
    from rich.panel import Panel

    color, default_title = message_type.value
    panel_title = title or default_title

    console.print(
        Panel(message, title=f"[bold {color}]{panel_title}[/bold {color}]", border_style=color, padding=(1, 2))
    )


def generate_sidebar(settings: SidebarSettings, now: datetime | None = None) -> str:
    """Scan the wiki and return the sidebar content.

    Args:
        settings: Resolved settings.
        now: Timestamp of the warning banner (defaults to now).

    Returns:
        Content of the _sidebar.md file.
    """
    tree = scan_tree(settings)
    logger.debug("Found %d top-level entries under %s", len(tree), settings.root)
    return render_sidebar(tree, settings, now=now)


def create_sidebar(settings: SidebarSettings, now: datetime | None = None) -> Path:
    """Create or overwrite the _sidebar.md file in the wiki root.

    Args:
        settings: Resolved settings.
        now: Timestamp of the warning banner (defaults to now).

    Returns:
        Path to the written sidebar file.

    Raises:
        OSError: If the sidebar file cannot be written.
    """
    content = generate_sidebar(settings, now=now)

    sidebar_path = settings.root / SIDEBAR_FILENAME
    _ = sidebar_path.write_text(content, encoding="utf-8")
    logger.debug("Wrote %d characters to %s", len(content), sidebar_path)

    return sidebar_path
