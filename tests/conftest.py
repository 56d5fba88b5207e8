"""Pytest configuration for wikisidebar tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from wikisidebar.models import SidebarSettings


def write_file(path: Path, content: str = "") -> Path:
    """Create a file and its parent folders.

    Args:
        path: File to create
        content: Text content of the file

    Returns:
        The created path
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def make_file() -> Callable[[Path, str], Path]:
    """Provide the file creation helper to tests.

    Returns:
        The write_file function
    """
    return write_file


@pytest.fixture
def wiki_root(tmp_path: Path) -> Path:
    """Provide an empty wiki root folder.

    Args:
        tmp_path: pytest temporary directory

    Returns:
        Resolved path to the wiki root
    """
    root = tmp_path.resolve() / "wiki"
    root.mkdir()
    return root


@pytest.fixture
def sample_wiki(wiki_root: Path) -> Path:
    """Provide a wiki with documents in several folders.

    Layout::

        README.md                 root-level file, never listed
        guide/intro.md            "# Introduction {#intro}"
        guide/setup.md            "# Setup"
        guide/Zebra.pdf
        guide/notes.txt           unsupported extension
        api/reference.md          no heading
        drafts/wip.md             "# Work in progress"
        empty/image.png           folder without documents
        .git/HEAD.md              never scanned

    Args:
        wiki_root: Empty wiki root

    Returns:
        Path to the wiki root
    """
    write_file(wiki_root / "README.md", "# Read me\n")
    write_file(wiki_root / "guide" / "intro.md", "Some preamble\n\n# Introduction {#intro}\n\nText\n")
    write_file(wiki_root / "guide" / "setup.md", "# Setup\n")
    write_file(wiki_root / "guide" / "Zebra.pdf", "%PDF-1.4")
    write_file(wiki_root / "guide" / "notes.txt", "notes")
    write_file(wiki_root / "api" / "reference.md", "Reference without heading\n")
    write_file(wiki_root / "drafts" / "wip.md", "# Work in progress\n")
    write_file(wiki_root / "empty" / "image.png", "")
    write_file(wiki_root / ".git" / "HEAD.md", "# Not a document\n")
    return wiki_root


@pytest.fixture
def default_settings(wiki_root: Path) -> SidebarSettings:
    """Provide default settings anchored at the wiki root.

    Args:
        wiki_root: Wiki root folder

    Returns:
        Settings without whitelist or exclusions
    """
    return SidebarSettings(root=wiki_root)
