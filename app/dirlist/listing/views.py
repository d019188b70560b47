"""Listing entry points.

Each entry point drives scanner, sorter and renderer for one directory
and returns the output lines. Long listings keep scan order; grid
listings are sorted by name.
"""

from dirlist.listing.grid import DEFAULT_SPACING, render_across, render_columns
from dirlist.listing.long_format import render_long
from dirlist.listing.models import DisplayMode
from dirlist.listing.scanner import DirectoryScanner, sort_names


def list_long(path: str) -> list[str]:
    """Render the long-format listing of a directory.

    Raises:
        DirectoryOpenError: If the directory cannot be opened.
    """
    return render_long(DirectoryScanner(path).scan_entries())


def list_columns(path: str, terminal_width: int, spacing: int = DEFAULT_SPACING) -> list[str]:
    """Render the down-then-across grid of a directory's visible names.

    Raises:
        DirectoryOpenError: If the directory cannot be opened.
    """
    names = sort_names(DirectoryScanner(path).scan_visible_names())
    return render_columns(names, terminal_width, spacing)


def list_across(path: str, terminal_width: int, spacing: int = DEFAULT_SPACING) -> list[str]:
    """Render the across (row-major) grid of a directory's visible names.

    Raises:
        DirectoryOpenError: If the directory cannot be opened.
    """
    names = sort_names(DirectoryScanner(path).scan_visible_names())
    return render_across(names, terminal_width, spacing)


def render_listing(
    mode: DisplayMode,
    path: str,
    terminal_width: int,
    spacing: int = DEFAULT_SPACING,
) -> list[str]:
    """Dispatch to the entry point for a display mode.

    Args:
        mode: Selected layout.
        path: Directory to list.
        terminal_width: Available terminal columns (ignored by long format).
        spacing: Gap between grid columns.

    Returns:
        Output lines without trailing newlines.

    Raises:
        DirectoryOpenError: If the directory cannot be opened.
    """
    if mode == DisplayMode.LONG:
        return list_long(path)
    if mode == DisplayMode.ACROSS:
        return list_across(path, terminal_width, spacing)
    return list_columns(path, terminal_width, spacing)
