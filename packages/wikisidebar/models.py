"""Data models for wikisidebar."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


class MessageType(Enum):
    """Message types with associated display styles."""

    ERROR = ("red", "Error")
    SUCCESS = ("green", "Success")
    INFO = ("blue", "Info")
    WARNING = ("yellow", "Warning")


class SettingsFile(BaseModel):
    """Raw content of a generate_wiki_sidebar.json file.

    Paths are relative to the wiki root and use ``/`` as separator.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(populate_by_name=True, extra="ignore")

    whitelist: list[str] = Field(default_factory=list)
    exclude: list[str] = Field(default_factory=list)
    keep_file_name: bool = Field(False, alias="keepFileName")


class SidebarSettings(BaseModel):
    """Resolved settings for one run.

    Whitelist and exclude entries are absolute paths anchored at ``root``;
    exclude entries end with the platform separator so they act as folder
    prefixes.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    root: Path
    whitelist: frozenset[str] = frozenset()
    exclude: tuple[str, ...] = ()
    keep_file_name: bool = False


@dataclass(frozen=True)
class FileEntry:
    """A document kept in the sidebar tree.

    Attributes:
        name: Base name of the file
        relative_path: POSIX path relative to the wiki root
    """

    name: str
    relative_path: str


@dataclass
class DirectoryNode:
    """A folder of the sidebar tree; children are already ordered."""

    name: str
    children: dict[str, DirectoryNode | FileEntry] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.children)

    @property
    def directories(self) -> list[DirectoryNode]:
        """Child folders, in tree order."""
        return [child for child in self.children.values() if isinstance(child, DirectoryNode)]

    @property
    def files(self) -> list[FileEntry]:
        """Child documents, in tree order."""
        return [child for child in self.children.values() if isinstance(child, FileEntry)]


@dataclass(frozen=True)
class RenderedEntry:
    """One link of the sidebar."""

    title: str
    link_target: str
