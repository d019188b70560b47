"""Terminal width detection."""

import os
import sys

from dirlist.core.config import DEFAULT_FALLBACK_WIDTH


def get_terminal_width(fallback: int = DEFAULT_FALLBACK_WIDTH) -> int:
    """Return the column count of the terminal attached to stdout.

    Args:
        fallback: Width used when stdout is not a terminal, has no file
            descriptor, or reports zero columns.

    Returns:
        Terminal width in columns.
    """
    try:
        columns = os.get_terminal_size(sys.stdout.fileno()).columns
    except (AttributeError, OSError, ValueError):
        return fallback
    return columns or fallback
