"""Rendering of the sidebar tree to markdown."""

from __future__ import annotations

from datetime import datetime

from jinja2 import Environment

from wikisidebar.models import DirectoryNode, FileEntry, RenderedEntry, SidebarSettings
from wikisidebar.templates import (
    DIRECTORY_BLOCK_TEMPLATE,
    LINK_ITEM_TEMPLATE,
    SIDEBAR_MD_TEMPLATE,
    WARNING_TEMPLATE,
)
from wikisidebar.titles import resolve_title

# Indentation added for each nested folder
INDENT_STEP = " " * 9

LAST_UPDATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# The sidebar is markdown with inline HTML; titles are written as-is
_env = Environment(keep_trailing_newline=True, autoescape=False)


def capitalize_first(name: str) -> str:
    """Upper-case the first character only, ``userGuide`` -> ``UserGuide``."""
    return name[:1].upper() + name[1:]


def link_target(folder_name: str, filename: str) -> str:
    """Build the wiki link of a document.

    The ``.md`` suffix is removed since the wiki links to the rendered page,
    not to the markdown source.

    Args:
        folder_name: Folder of the document, relative to the wiki root
        filename: Base name of the document

    Returns:
        Link like ``./folder/document``.
    """
    target = "/".join(part for part in (".", folder_name, filename) if part)
    return target.removesuffix(".md")


def render_entry(entry: FileEntry, folder_name: str, settings: SidebarSettings) -> RenderedEntry:
    """Resolve the title and link of one document."""
    path = settings.root.joinpath(*entry.relative_path.split("/"))
    return RenderedEntry(
        title=resolve_title(path, settings.keep_file_name),
        link_target=link_target(folder_name, entry.name),
    )


def render_tree(tree: DirectoryNode, settings: SidebarSettings, folder_name: str = "", indent: str = "") -> str:
    """Render a folder and its descendants as nested HTML lists.

    Folders become collapsible ``<details>`` blocks. The documents of a
    folder are listed after its sub-folders, sorted on their title.

    Args:
        tree: Folder to render
        settings: Resolved settings
        folder_name: Folder path relative to the wiki root, ``/`` separated
        indent: Indentation of the current level

    Returns:
        The rendered markup for this level.
    """
    directory_template = _env.from_string(DIRECTORY_BLOCK_TEMPLATE)
    item_template = _env.from_string(LINK_ITEM_TEMPLATE)

    content = ""
    for directory in tree.directories:
        sub_folder = f"{folder_name}/{directory.name}" if folder_name else directory.name
        content += directory_template.render(
            indent=indent,
            name=directory.name,
            summary=capitalize_first(directory.name),
            children=render_tree(directory, settings, sub_folder, indent + INDENT_STEP),
        )

    entries = [render_entry(entry, folder_name, settings) for entry in tree.files]
    # Stable ordinal sort; documents sharing a title keep their tree order
    entries.sort(key=lambda entry: entry.title)

    for entry in entries:
        content += item_template.render(indent=indent, title=entry.title, link_target=entry.link_target)

    return content


def render_sidebar(tree: DirectoryNode, settings: SidebarSettings, now: datetime | None = None) -> str:
    """Render the complete _sidebar.md content.

    Args:
        tree: Root of the scanned tree
        settings: Resolved settings
        now: Timestamp written in the warning banner, current local time by default

    Returns:
        The sidebar document, wrapped in the "generated file" warning.
    """
    now = now or datetime.now()
    warning = _env.from_string(WARNING_TEMPLATE).render(last_update=now.strftime(LAST_UPDATE_FORMAT))
    content = render_tree(tree, settings)

    return _env.from_string(SIDEBAR_MD_TEMPLATE).render(warning=warning, content=content.lstrip("\n"))
