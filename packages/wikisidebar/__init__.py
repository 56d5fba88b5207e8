"""wikisidebar - Generate the _sidebar.md navigation file of a wiki.

This package scans a folder of documentation files and writes a nested list
of links suitable for GitLab and docsify wiki viewers.
"""

from __future__ import annotations

__version__ = "1.0.0"

# Export main CLI app for entry point
from wikisidebar.cli import app

__all__ = ["__version__", "app"]
