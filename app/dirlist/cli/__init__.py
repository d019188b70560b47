"""CLI package for dirlist.

This package contains the Typer application.
"""

from dirlist.cli.main import app

__all__ = ["app"]
