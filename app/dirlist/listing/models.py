"""Directory listing domain models.

This module defines the data structures produced by the directory
scanner and consumed by the renderers: entry kinds, display modes,
and the immutable per-entry metadata record.
"""

import stat
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

# Sentinel values substituted when metadata is unavailable
LOOKUP_FAILED = "?"
UNKNOWN_ACCOUNT = "UNKNOWN"
TIME_PLACEHOLDER = "??? ?? ??:??"

# Fixed-width output contracts
TIME_FIELD_WIDTH = 12
MODE_STRING_WIDTH = 10


class EntryKind(str, Enum):
    """File type of a directory entry, as reported by lstat.

    Attributes:
        REGULAR: Regular file.
        DIRECTORY: Directory.
        SYMLINK: Symbolic link (never followed).
        CHAR_DEVICE: Character special device.
        BLOCK_DEVICE: Block special device.
        FIFO: Named pipe.
        SOCKET: Unix domain socket.
        UNKNOWN: Type could not be determined (lstat failed or exotic type).
    """

    REGULAR = "regular"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    CHAR_DEVICE = "char_device"
    BLOCK_DEVICE = "block_device"
    FIFO = "fifo"
    SOCKET = "socket"
    UNKNOWN = "unknown"

    @classmethod
    def from_mode(cls, mode: int) -> "EntryKind":
        """Classify a raw st_mode value."""
        if stat.S_ISDIR(mode):
            return cls.DIRECTORY
        if stat.S_ISLNK(mode):
            return cls.SYMLINK
        if stat.S_ISCHR(mode):
            return cls.CHAR_DEVICE
        if stat.S_ISBLK(mode):
            return cls.BLOCK_DEVICE
        if stat.S_ISFIFO(mode):
            return cls.FIFO
        if stat.S_ISSOCK(mode):
            return cls.SOCKET
        if stat.S_ISREG(mode):
            return cls.REGULAR
        return cls.UNKNOWN

    @property
    def letter(self) -> str:
        """Type character used in position 0 of the mode string."""
        return _KIND_LETTERS.get(self, "-")


_KIND_LETTERS: dict[EntryKind, str] = {
    EntryKind.DIRECTORY: "d",
    EntryKind.SYMLINK: "l",
    EntryKind.CHAR_DEVICE: "c",
    EntryKind.BLOCK_DEVICE: "b",
    EntryKind.FIFO: "p",
    EntryKind.SOCKET: "s",
}


class DisplayMode(str, Enum):
    """Layout selected for a listing.

    Attributes:
        COLUMNS: Down-then-across grid (default).
        LONG: One metadata line per entry.
        ACROSS: Row-major grid with greedy wrapping.
    """

    COLUMNS = "columns"
    LONG = "long"
    ACROSS = "across"


def resolve_display_mode(selections: Iterable[DisplayMode]) -> DisplayMode:
    """Reduce a sequence of mode selections to the effective mode.

    The last selection wins; an empty sequence yields COLUMNS.

    Args:
        selections: Mode selections in the order they were given.

    Returns:
        The effective display mode.
    """
    mode = DisplayMode.COLUMNS
    for selection in selections:
        mode = selection
    return mode


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """Metadata for one child of a listed directory.

    Every field is always populated: lookups that fail are represented
    by sentinel values so renderers never need to handle missing data.

    Attributes:
        name: Base name of the entry (never ".").
        full_path: "directory/name", used for lookups only.
        kind: File type from lstat.
        mode: Raw st_mode (0 when lstat failed).
        link_count: Hard link count.
        owner: Owner account name, "UNKNOWN" or "?".
        group: Group name, "UNKNOWN" or "?".
        size: Size in bytes (0 when lstat failed).
        mtime: 12-character "Mon DD HH:MM" string or the placeholder.
        link_target: Symlink target, None unless kind is SYMLINK and readable.
    """

    name: str
    full_path: str
    kind: EntryKind
    mode: int
    link_count: int
    owner: str
    group: str
    size: int
    mtime: str
    link_target: str | None = None

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.name or self.name == ".":
            msg = f"Invalid entry name: {self.name!r}"
            raise ValueError(msg)
        if self.link_count < 0:
            msg = f"Link count cannot be negative, got {self.link_count}"
            raise ValueError(msg)
        if self.link_target is not None and self.kind != EntryKind.SYMLINK:
            msg = f"Only symlinks carry a link target: {self.name}"
            raise ValueError(msg)

    @classmethod
    def unknown(cls, name: str, full_path: str) -> "DirectoryEntry":
        """Create the sentinel entry used when lstat fails."""
        return cls(
            name=name,
            full_path=full_path,
            kind=EntryKind.UNKNOWN,
            mode=0,
            link_count=0,
            owner=LOOKUP_FAILED,
            group=LOOKUP_FAILED,
            size=0,
            mtime=TIME_PLACEHOLDER,
        )

    @property
    def permission_bits(self) -> int:
        """Permission, setuid, setgid and sticky bits."""
        return stat.S_IMODE(self.mode)

    @property
    def is_symlink(self) -> bool:
        """Check if this entry is a symbolic link."""
        return self.kind == EntryKind.SYMLINK
