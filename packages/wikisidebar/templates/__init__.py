"""Jinja2 templates used to render the sidebar."""

from wikisidebar.templates.sidebar_md_template import (
    DIRECTORY_BLOCK_TEMPLATE,
    LINK_ITEM_TEMPLATE,
    SIDEBAR_MD_TEMPLATE,
    WARNING_TEMPLATE,
)

__all__ = ["DIRECTORY_BLOCK_TEMPLATE", "LINK_ITEM_TEMPLATE", "SIDEBAR_MD_TEMPLATE", "WARNING_TEMPLATE"]
