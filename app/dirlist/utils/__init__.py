"""Utility modules for dirlist.

This module exports commonly used utility functions.
"""

from dirlist.utils.formatting import err_console, print_diagnostic, print_error
from dirlist.utils.terminal import get_terminal_width

__all__ = [
    "err_console",
    "get_terminal_width",
    "print_diagnostic",
    "print_error",
]
