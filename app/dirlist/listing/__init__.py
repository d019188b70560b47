"""Directory listing engine.

This module provides metadata probing, directory scanning, name
sorting, and the long-format and grid renderers.
"""

from dirlist.listing.grid import GridGeometry, compute_geometry, render_across, render_columns
from dirlist.listing.long_format import ColumnWidths, format_mode, render_long
from dirlist.listing.models import (
    DirectoryEntry,
    DisplayMode,
    EntryKind,
    resolve_display_mode,
)
from dirlist.listing.prober import probe_entry
from dirlist.listing.scanner import DirectoryOpenError, DirectoryScanner, ListingError, sort_names
from dirlist.listing.views import list_across, list_columns, list_long, render_listing

__all__ = [
    "ColumnWidths",
    "DirectoryEntry",
    "DirectoryOpenError",
    "DirectoryScanner",
    "DisplayMode",
    "EntryKind",
    "GridGeometry",
    "ListingError",
    "compute_geometry",
    "format_mode",
    "list_across",
    "list_columns",
    "list_long",
    "probe_entry",
    "render_across",
    "render_columns",
    "render_listing",
    "render_long",
    "resolve_display_mode",
    "sort_names",
]
