"""Per-entry metadata lookup.

Collects lstat-derived metadata for a single path. Every lookup that
can fail (lstat, account database, time conversion, readlink) is
converted into a sentinel value so one bad entry never aborts a scan.
"""

import grp
import logging
import os
import pwd
import time

from dirlist.listing.models import (
    TIME_PLACEHOLDER,
    UNKNOWN_ACCOUNT,
    DirectoryEntry,
    EntryKind,
)

logger = logging.getLogger(__name__)


def probe_entry(directory: str, name: str) -> DirectoryEntry:
    """Collect metadata for one directory child.

    Uses lstat so symbolic links are reported as links rather than
    as their targets.

    Args:
        directory: Directory containing the entry, as given by the caller.
        name: Base name of the entry.

    Returns:
        Fully populated DirectoryEntry. When lstat fails the entry
        carries "?" owner/group, the time placeholder, size 0 and
        kind UNKNOWN.
    """
    full_path = f"{directory}/{name}"

    try:
        st = os.lstat(full_path)
    except OSError as e:
        logger.debug("lstat failed for %s: %s", full_path, e)
        return DirectoryEntry.unknown(name, full_path)

    kind = EntryKind.from_mode(st.st_mode)
    link_target = read_link_target(full_path) if kind == EntryKind.SYMLINK else None

    return DirectoryEntry(
        name=name,
        full_path=full_path,
        kind=kind,
        mode=st.st_mode,
        link_count=st.st_nlink,
        owner=resolve_owner(st.st_uid),
        group=resolve_group(st.st_gid),
        size=st.st_size,
        mtime=format_mtime(st.st_mtime),
        link_target=link_target,
    )


def resolve_owner(uid: int) -> str:
    """Map a numeric user id to its account name, or "UNKNOWN"."""
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return UNKNOWN_ACCOUNT


def resolve_group(gid: int) -> str:
    """Map a numeric group id to its group name, or "UNKNOWN"."""
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return UNKNOWN_ACCOUNT


def format_mtime(timestamp: float) -> str:
    """Format a modification time as the 12-character "Mon DD HH:MM" field.

    The field is the month, day and time portion of ctime() in local
    time, e.g. "Jan  5 09:03".

    Args:
        timestamp: Seconds since the epoch.

    Returns:
        The formatted field, or "??? ?? ??:??" if the timestamp cannot
        be converted.
    """
    try:
        text = time.ctime(timestamp)
    except (OverflowError, OSError, ValueError):
        return TIME_PLACEHOLDER
    # "Www Mmm dd hh:mm:ss yyyy"
    if len(text) < 16:
        return TIME_PLACEHOLDER
    return text[4:16]


def read_link_target(path: str) -> str | None:
    """Read a symlink target without ever raising.

    Args:
        path: Path of the symbolic link.

    Returns:
        The target text, or None if it cannot be read or is empty.
    """
    try:
        target = os.readlink(path)
    except OSError as e:
        logger.debug("readlink failed for %s: %s", path, e)
        return None
    return target or None
