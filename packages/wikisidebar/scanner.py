"""Recursive scan of the wiki folder."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from wikisidebar.filters import is_skipped_directory, should_be_ignored
from wikisidebar.models import DirectoryNode, FileEntry, SidebarSettings

logger = logging.getLogger(__name__)


def scan_tree(settings: SidebarSettings, folder: Path | None = None) -> DirectoryNode:
    """Build the tree of documents found under a folder.

    Sub-folders without any eligible document are pruned. At each level,
    folders come first, then files; both sorted case-insensitively.

    Args:
        settings: Resolved settings.
        folder: Folder to scan; the wiki root when None.

    Returns:
        The folder node; empty when nothing under it should be listed.
    """
    folder = folder or settings.root
    return _scan_folder(settings, folder, frozenset())


def _scan_folder(settings: SidebarSettings, folder: Path, ancestors: frozenset[str]) -> DirectoryNode:
    """Scan one folder, skipping folders already entered on the current path."""
    node = DirectoryNode(name=folder.name)
    real_path = os.path.realpath(folder)
    if real_path in ancestors:
        logger.warning("Skipping %s: symbolic link loop", folder)
        return node
    ancestors = ancestors | {real_path}

    try:
        entries = list(folder.iterdir())
    except OSError as e:
        logger.warning("Cannot read folder %s: %s", folder, e)
        return node

    dirs: dict[str, DirectoryNode] = {}
    files: dict[str, FileEntry] = {}

    for entry in entries:
        if entry.is_dir():
            if is_skipped_directory(entry.name):
                continue
            subtree = _scan_folder(settings, entry, ancestors)
            # Only mention the folder when it holds documents
            if subtree:
                dirs[entry.name] = subtree
        elif entry.is_file() and not should_be_ignored(entry, settings):
            files[entry.name] = FileEntry(
                name=entry.name,
                relative_path=entry.relative_to(settings.root).as_posix(),
            )

    for name in sorted(dirs, key=str.casefold):
        node.children[name] = dirs[name]
    for name in sorted(files, key=str.casefold):
        node.children[name] = files[name]

    return node
