"""dirlist - list one directory in long, column or across layout."""

__version__ = "1.3.0"
