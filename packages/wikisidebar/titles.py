"""Title resolution for sidebar entries."""

from __future__ import annotations

import re
from pathlib import Path

# "# MyTitle {#title}": the attribute block names the anchor, drop it
_ATTRIBUTES_PATTERN = re.compile(r"\{[^}]*\}")

_TRIM_CHARS = " \t\n\r\0\x0b#"


def get_heading_text(markdown: str, heading: str = "#") -> str:
    """Extract the text of the first heading of a markdown document.

    Args:
        markdown: Markdown content
        heading: Heading marker to look for, ``#`` for heading 1

    Returns:
        The heading text or an empty string when there is none.
    """
    pattern = re.compile(rf"^{re.escape(heading)} (.*)$", re.MULTILINE)
    if not (match := pattern.search(markdown)):
        return ""

    title = _ATTRIBUTES_PATTERN.sub("", match.group(1))
    return title.strip(_TRIM_CHARS)


def file_title(filename: str) -> str:
    """Title used when a document has no heading: its name without the ``.md`` suffix."""
    name = Path(filename).name
    return name.removesuffix(".md")


def resolve_title(path: Path, keep_file_name: bool = False) -> str:
    """Return the title displayed in the sidebar for a document.

    Markdown files use their heading 1 unless ``keep_file_name`` is set;
    every other document is displayed by its file name.

    Args:
        path: Path to the document
        keep_file_name: Always use the file name

    Returns:
        The display title.
    """
    title = file_title(path.name)
    if keep_file_name or path.suffix.upper() != ".MD":
        return title

    try:
        markdown = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError):
        return title

    return get_heading_text(markdown) or title
