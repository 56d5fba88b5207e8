"""Tests for sidebar generation and writing."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import pytest
from pytest_mock import MockerFixture
from wikisidebar.generator import SIDEBAR_FILENAME, create_sidebar, generate_sidebar
from wikisidebar.models import SidebarSettings
from wikisidebar.settings import load_settings


def _without_timestamp(content: str) -> list[str]:
    return [line for line in content.splitlines() if "Last updated:" not in line]


class TestCreateSidebar:
    """Test suite for create_sidebar function."""

    def test_sidebar_written(self, sample_wiki: Path) -> None:
        """Test that _sidebar.md is written in the wiki root.

        Tests: create_sidebar on the sample wiki
        How: Generate the sidebar and read the file back
        Why: The file is the only output of the tool

        Args:
            sample_wiki: Wiki with documents in several folders
        """
        # Act
        sidebar_path = create_sidebar(load_settings(sample_wiki), now=datetime(2024, 1, 2, 3, 4, 5))

        # Assert
        assert sidebar_path == sample_wiki / SIDEBAR_FILENAME
        content = sidebar_path.read_text(encoding="utf-8")
        assert "<details><!--guide-->" in content
        assert "<li>[Introduction](./guide/intro)</li>" in content
        assert "<li>[reference](./api/reference)</li>" in content
        assert "<li>[Work in progress](./drafts/wip)</li>" in content
        assert "notes.txt" not in content
        assert "README" not in content
        assert "empty" not in content

    def test_runs_are_reproducible(self, sample_wiki: Path) -> None:
        """Test that two runs differ only by their timestamp, the previous sidebar being ignored."""
        settings = load_settings(sample_wiki)

        first = create_sidebar(settings, now=datetime(2024, 1, 1)).read_text(encoding="utf-8")
        second = create_sidebar(settings, now=datetime(2025, 6, 30, 12, 0, 0)).read_text(encoding="utf-8")

        assert first != second
        assert _without_timestamp(first) == _without_timestamp(second)

    def test_existing_sidebar_overwritten(
        self, sample_wiki: Path, make_file: Callable[[Path, str], Path]
    ) -> None:
        """Test that a previous _sidebar.md is replaced."""
        make_file(sample_wiki / SIDEBAR_FILENAME, "old content")

        content = create_sidebar(load_settings(sample_wiki)).read_text(encoding="utf-8")

        assert "old content" not in content

    def test_write_error_propagates(self, default_settings: SidebarSettings, mocker: MockerFixture) -> None:
        """Test that write errors reach the caller."""
        mocker.patch("pathlib.Path.write_text", side_effect=PermissionError("read-only"))

        with pytest.raises(PermissionError, match="read-only"):
            create_sidebar(default_settings)


def test_generate_sidebar_keep_file_name(sample_wiki: Path) -> None:
    """Test that keep_file_name titles every document by its name."""
    settings = load_settings(sample_wiki).model_copy(update={"keep_file_name": True})

    content = generate_sidebar(settings)

    assert "<li>[intro](./guide/intro)</li>" in content
    assert "<li>[wip](./drafts/wip)</li>" in content
    assert not (sample_wiki / SIDEBAR_FILENAME).exists()
