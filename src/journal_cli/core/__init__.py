"""Functional core - pure business logic with no I/O."""

from .entry import (
    TEMPLATE_TOKEN,
    entry_dir,
    entry_filename,
    entry_heading_date,
    render_entry,
    today_utc,
)
from .templates import BOILERPLATE_FILES, JOURNAL_TEMPLATE

__all__ = [
    # Entries
    "TEMPLATE_TOKEN",
    "entry_dir",
    "entry_filename",
    "entry_heading_date",
    "render_entry",
    "today_utc",
    # Templates
    "BOILERPLATE_FILES",
    "JOURNAL_TEMPLATE",
]
