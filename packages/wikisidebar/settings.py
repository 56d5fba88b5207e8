"""Loading of the generate_wiki_sidebar.json settings file."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from wikisidebar.models import SettingsFile, SidebarSettings

SETTINGS_FILENAME = "generate_wiki_sidebar.json"
KEEP_FILE_NAME_FLAG = "--keep-file-name"

# Initialize Rich console for local output
console = Console()

logger = logging.getLogger(__name__)


class SettingsError(ValueError):
    """Raised when the settings file cannot be parsed.

    Attributes:
        path: Settings file that failed to load
        content: Raw content of that file
        reason: Message of the underlying parser error
    """

    def __init__(self, path: Path, content: str, reason: str) -> None:
        self.path = path
        self.content = content
        self.reason = reason
        super().__init__(f"Error in file {path}: {reason}")


def find_settings_file(root: Path) -> Path | None:
    """Locate the settings file of a wiki.

    The wiki root is searched first, then its ``.config`` sub-folder.

    Args:
        root: Wiki root folder.

    Returns:
        Path to the settings file or None if there is none.
    """
    for candidate in (root / SETTINGS_FILENAME, root / ".config" / SETTINGS_FILENAME):
        if candidate.is_file():
            return candidate
    return None


def normalize_path(root: Path, value: str, trailing_separator: bool = False) -> str:
    """Make a settings path absolute.

    ``chapter1/file.md`` becomes ``<root>/chapter1/file.md`` written with the
    platform separator.

    Args:
        root: Wiki root folder.
        value: Path relative to the root, ``/`` separated.
        trailing_separator: Append a separator so the result matches as a folder prefix.

    Returns:
        Absolute path as a string.
    """
    name = f"{root}{os.sep}{value.strip('/')}".replace("/", os.sep)
    if trailing_separator:
        name += os.sep
    return name


def load_settings(root: Path) -> SidebarSettings:
    """Load the settings of a wiki, falling back to defaults.

    Args:
        root: Wiki root folder.

    Returns:
        Resolved settings with absolute whitelist and exclude paths.

    Raises:
        SettingsError: If the settings file is not valid JSON or has an unexpected structure.
    """
    root = root.resolve()
    settings_path = find_settings_file(root)

    if settings_path is None:
        logger.debug("No %s found under %s, using defaults", SETTINGS_FILENAME, root)
        return SidebarSettings(root=root)

    try:
        content = settings_path.read_text(encoding="utf-8-sig")
        raw = SettingsFile.model_validate(json.loads(content))
    except UnicodeDecodeError as e:
        raw_content = settings_path.read_bytes().decode("utf-8", errors="replace")
        raise SettingsError(settings_path, raw_content, f"encoding error: {e}") from e
    except json.JSONDecodeError as e:
        raise SettingsError(settings_path, content, f"json_decode error: {e}") from e
    except ValidationError as e:
        raise SettingsError(settings_path, content, str(e)) from e

    logger.debug("Loaded settings from %s", settings_path)

    return SidebarSettings(
        root=root,
        whitelist=frozenset(normalize_path(root, value) for value in raw.whitelist),
        exclude=tuple(normalize_path(root, value, trailing_separator=True) for value in raw.exclude),
        keep_file_name=raw.keep_file_name,
    )


def apply_command_line_options(settings: SidebarSettings, args: Sequence[str]) -> tuple[SidebarSettings, bool]:
    """Apply extra command line arguments to the settings.

    Only ``--keep-file-name`` is recognized. The first unknown argument is
    reported and stops the processing of the remaining ones.

    Args:
        settings: Settings loaded from the settings file.
        args: Arguments following the program name.

    Returns:
        Tuple of (updated settings, whether every argument was valid)
    """
    for arg in args:
        if not arg:
            continue
        if arg == KEEP_FILE_NAME_FLAG:
            settings = settings.model_copy(update={"keep_file_name": True})
        else:
            console.print(f"[yellow]Invalid argument: {escape(arg)}[/yellow]", highlight=False)
            return settings, False
    return settings, True
