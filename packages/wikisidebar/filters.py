"""Decide which files are mentioned in the sidebar."""

from __future__ import annotations

import logging
from pathlib import Path

from wikisidebar.models import SidebarSettings

# Documents the sidebar links to, compared upper-cased
SUPPORTED_EXTENSIONS: frozenset[str] = frozenset({"DOCX", "HTML", "MD", "PDF", "PPTX", "XLSX"})

# Folders never descended into
SKIPPED_DIRECTORIES: frozenset[str] = frozenset({".git"})

logger = logging.getLogger(__name__)


def file_extension(path: Path) -> str:
    """Return the upper-cased extension of a file, without the dot."""
    return path.suffix[1:].upper()


def is_skipped_directory(name: str) -> bool:
    """Check if a folder must be left out of the scan entirely.

    Args:
        name: Base name of the folder.

    Returns:
        True if the folder is never scanned.
    """
    return name in SKIPPED_DIRECTORIES


def is_excluded(path: Path, settings: SidebarSettings) -> bool:
    """Check if a file lives under one of the excluded folders.

    Args:
        path: Absolute path of the file.
        settings: Resolved settings.

    Returns:
        True if any exclude prefix matches, ignoring case.
    """
    filename = str(path).lower()
    return any(filename.startswith(prefix.lower()) for prefix in settings.exclude)


def should_be_ignored(path: Path, settings: SidebarSettings) -> bool:
    """Check if a file should be left out of the sidebar.

    The file is ignored when it is stored in the wiki root folder, when its
    extension is not supported or when it is stored in an excluded folder.
    A whitelisted file is always kept, whatever its location or extension.

    Args:
        path: Absolute path of the file.
        settings: Resolved settings.

    Returns:
        True when the file should be ignored.
    """
    if str(path) in settings.whitelist:
        return False

    # Files immediately under the root are never listed
    if path.parent == settings.root:
        logger.debug("Ignoring %s: stored in the wiki root", path)
        return True

    if file_extension(path) not in SUPPORTED_EXTENSIONS:
        logger.debug("Ignoring %s: unsupported extension", path)
        return True

    if is_excluded(path, settings):
        logger.debug("Ignoring %s: excluded folder", path)
        return True

    return False
