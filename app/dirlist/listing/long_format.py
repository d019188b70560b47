"""Long-format rendering.

Produces one aligned metadata line per entry:
mode string, link count, owner, group, size, time, name and
(for readable symlinks) the link target.
"""

import stat
from collections.abc import Sequence
from dataclasses import dataclass

from dirlist.listing.models import DirectoryEntry, EntryKind

# (read bit, write bit, execute bit, special bit, special-with-x, special-without-x)
_PERMISSION_TRIADS: tuple[tuple[int, int, int, int, str, str], ...] = (
    (stat.S_IRUSR, stat.S_IWUSR, stat.S_IXUSR, stat.S_ISUID, "s", "S"),
    (stat.S_IRGRP, stat.S_IWGRP, stat.S_IXGRP, stat.S_ISGID, "s", "S"),
    (stat.S_IROTH, stat.S_IWOTH, stat.S_IXOTH, stat.S_ISVTX, "t", "T"),
)


def format_mode(kind: EntryKind, mode: int) -> str:
    """Render the 10-character mode string.

    Position 0 is the type letter; each following triad is
    read/write/execute, where the execute slot shows s/S (setuid,
    setgid) or t/T (sticky) when the special bit is set.

    Args:
        kind: Entry type.
        mode: Raw mode bits; only the permission and special bits are used.

    Returns:
        Mode string such as "drwxr-sr-t".
    """
    chars = [kind.letter]
    for read, write, execute, special, special_x, special_no_x in _PERMISSION_TRIADS:
        chars.append("r" if mode & read else "-")
        chars.append("w" if mode & write else "-")
        if mode & special:
            chars.append(special_x if mode & execute else special_no_x)
        else:
            chars.append("x" if mode & execute else "-")
    return "".join(chars)


@dataclass(frozen=True, slots=True)
class ColumnWidths:
    """Printed width of each variable-width long-format field."""

    links: int = 1
    owner: int = 1
    group: int = 1
    size: int = 1

    @classmethod
    def measure(cls, entries: Sequence[DirectoryEntry]) -> "ColumnWidths":
        """Compute the widest value of each field across all entries."""
        links = owner = group = size = 1
        for entry in entries:
            links = max(links, len(str(entry.link_count)))
            owner = max(owner, len(entry.owner))
            group = max(group, len(entry.group))
            size = max(size, len(str(entry.size)))
        return cls(links=links, owner=owner, group=group, size=size)


def format_long_line(entry: DirectoryEntry, widths: ColumnWidths) -> str:
    """Render a single long-format line.

    Args:
        entry: Entry to render.
        widths: Column widths shared by all lines of the listing.

    Returns:
        The line without a trailing newline.
    """
    line = (
        f"{format_mode(entry.kind, entry.mode)} "
        f"{entry.link_count:>{widths.links}} "
        f"{entry.owner:<{widths.owner}} "
        f"{entry.group:<{widths.group}} "
        f"{entry.size:>{widths.size}} "
        f"{entry.mtime} "
        f"{entry.name}"
    )
    if entry.link_target is not None:
        line += f" -> {entry.link_target}"
    return line


def render_long(entries: Sequence[DirectoryEntry]) -> list[str]:
    """Render entries as aligned long-format lines, in the given order."""
    widths = ColumnWidths.measure(entries)
    return [format_long_line(entry, widths) for entry in entries]
