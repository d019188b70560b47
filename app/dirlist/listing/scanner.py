"""Directory enumeration for listings.

Reads the immediate children of one directory. Long listings see
every entry except the directory itself; grid listings see only
visible names (no parent marker, no dotfiles). This asymmetry is
intentional and must be preserved.
"""

import logging
import os
from collections.abc import Iterable

from dirlist.listing.models import DirectoryEntry
from dirlist.listing.prober import probe_entry

logger = logging.getLogger(__name__)

SELF_ENTRY = "."
PARENT_ENTRY = ".."


class ListingError(Exception):
    """Base exception for listing errors."""


class DirectoryOpenError(ListingError):
    """Raised when a directory cannot be opened or read.

    Attributes:
        path: Directory path as given by the caller.
        reason: Operating system error description.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot open directory '{path}': {reason}")


def is_visible(name: str) -> bool:
    """Check if a name is shown in grid listings.

    Excludes ".", ".." and every other name starting with a dot.
    """
    return not name.startswith(".")


def sort_names(names: Iterable[str]) -> list[str]:
    """Sort names by byte-wise ordinal comparison.

    Args:
        names: Entry names to sort.

    Returns:
        New list ordered by the names' filesystem encoding.
    """
    return sorted(names, key=os.fsencode)


class DirectoryScanner:
    """Enumerates the children of a single directory.

    Enumeration order is whatever the operating system returns; the
    scanner never sorts. Each scan opens the directory afresh.

    Args:
        path: Directory to scan, used verbatim to build child paths.
    """

    def __init__(self, path: str) -> None:
        self._path = path

    @property
    def path(self) -> str:
        """Directory path being scanned."""
        return self._path

    def scan_entries(self) -> list[DirectoryEntry]:
        """Collect metadata for every entry except the directory itself.

        The parent marker ".." is reported first, followed by the
        directory's children (dotfiles included) in OS order.

        Returns:
            Probed entries in scan order.

        Raises:
            DirectoryOpenError: If the directory cannot be opened or read.
        """
        names = [PARENT_ENTRY, *self._read_names()]
        entries = [probe_entry(self._path, name) for name in names if name != SELF_ENTRY]
        logger.debug("Collected %d entries from %s", len(entries), self._path)
        return entries

    def scan_visible_names(self) -> list[str]:
        """Collect the names shown by grid listings.

        Returns:
            Visible names in OS order.

        Raises:
            DirectoryOpenError: If the directory cannot be opened or read.
        """
        return [name for name in self._read_names() if is_visible(name)]

    def _read_names(self) -> list[str]:
        """Read all child names from the directory.

        Raises:
            DirectoryOpenError: If the directory cannot be opened or read.
        """
        try:
            with os.scandir(self._path) as it:
                return [entry.name for entry in it]
        except OSError as e:
            reason = e.strerror or str(e)
            logger.debug("Cannot scan %s: %s", self._path, reason)
            raise DirectoryOpenError(self._path, reason) from e
