"""Tests for listing domain models."""

import stat

import pytest
from dirlist.listing.models import (
    LOOKUP_FAILED,
    TIME_PLACEHOLDER,
    DirectoryEntry,
    DisplayMode,
    EntryKind,
    resolve_display_mode,
)


def _make_entry(**overrides: object) -> DirectoryEntry:
    """Create a regular-file DirectoryEntry with optional overrides."""
    fields: dict[str, object] = {
        "name": "notes.txt",
        "full_path": "/tmp/notes.txt",
        "kind": EntryKind.REGULAR,
        "mode": stat.S_IFREG | 0o644,
        "link_count": 1,
        "owner": "alice",
        "group": "staff",
        "size": 42,
        "mtime": "Jan  5 09:03",
    }
    fields.update(overrides)
    return DirectoryEntry(**fields)  # type: ignore[arg-type]


class TestEntryKind:
    """Tests for EntryKind classification."""

    @pytest.mark.parametrize(
        ("mode", "expected"),
        [
            (stat.S_IFREG | 0o644, EntryKind.REGULAR),
            (stat.S_IFDIR | 0o755, EntryKind.DIRECTORY),
            (stat.S_IFLNK | 0o777, EntryKind.SYMLINK),
            (stat.S_IFCHR | 0o620, EntryKind.CHAR_DEVICE),
            (stat.S_IFBLK | 0o660, EntryKind.BLOCK_DEVICE),
            (stat.S_IFIFO | 0o644, EntryKind.FIFO),
            (stat.S_IFSOCK | 0o755, EntryKind.SOCKET),
            (0, EntryKind.UNKNOWN),
        ],
    )
    def test_from_mode(self, mode: int, expected: EntryKind) -> None:
        """from_mode maps each file type to its kind."""
        assert EntryKind.from_mode(mode) == expected

    @pytest.mark.parametrize(
        ("kind", "letter"),
        [
            (EntryKind.REGULAR, "-"),
            (EntryKind.DIRECTORY, "d"),
            (EntryKind.SYMLINK, "l"),
            (EntryKind.CHAR_DEVICE, "c"),
            (EntryKind.BLOCK_DEVICE, "b"),
            (EntryKind.FIFO, "p"),
            (EntryKind.SOCKET, "s"),
            (EntryKind.UNKNOWN, "-"),
        ],
    )
    def test_letter(self, kind: EntryKind, letter: str) -> None:
        """Each kind has the expected mode-string letter."""
        assert kind.letter == letter


class TestDirectoryEntry:
    """Tests for DirectoryEntry validation and helpers."""

    def test_valid_entry(self) -> None:
        """A regular entry is created with the given fields."""
        entry = _make_entry()

        assert entry.name == "notes.txt"
        assert entry.link_target is None
        assert entry.is_symlink is False

    def test_permission_bits_strip_file_type(self) -> None:
        """permission_bits keeps only permission and special bits."""
        entry = _make_entry(mode=stat.S_IFREG | stat.S_ISUID | 0o755)

        assert entry.permission_bits == stat.S_ISUID | 0o755

    def test_empty_name_rejected(self) -> None:
        """Empty names are rejected."""
        with pytest.raises(ValueError, match="Invalid entry name"):
            _make_entry(name="")

    def test_self_entry_rejected(self) -> None:
        """The "." self entry is never a DirectoryEntry."""
        with pytest.raises(ValueError, match="Invalid entry name"):
            _make_entry(name=".")

    def test_negative_link_count_rejected(self) -> None:
        """Negative link counts are rejected."""
        with pytest.raises(ValueError, match="negative"):
            _make_entry(link_count=-1)

    def test_link_target_requires_symlink(self) -> None:
        """Only symlinks may carry a link target."""
        with pytest.raises(ValueError, match="Only symlinks"):
            _make_entry(link_target="elsewhere")

    def test_symlink_with_target(self) -> None:
        """Symlink entries keep their target."""
        entry = _make_entry(kind=EntryKind.SYMLINK, mode=stat.S_IFLNK | 0o777, link_target="x")

        assert entry.is_symlink is True
        assert entry.link_target == "x"

    def test_unknown_sentinel_fields(self) -> None:
        """unknown() fills every field with a placeholder."""
        entry = DirectoryEntry.unknown("ghost", "/tmp/ghost")

        assert entry.kind == EntryKind.UNKNOWN
        assert entry.owner == LOOKUP_FAILED
        assert entry.group == LOOKUP_FAILED
        assert entry.mtime == TIME_PLACEHOLDER
        assert entry.size == 0
        assert entry.link_count == 0
        assert entry.link_target is None


class TestResolveDisplayMode:
    """Tests for last-selection-wins mode resolution."""

    def test_no_selection_defaults_to_columns(self) -> None:
        """Without selections the grid layout is used."""
        assert resolve_display_mode([]) == DisplayMode.COLUMNS

    def test_single_selection(self) -> None:
        """A single selection is used as-is."""
        assert resolve_display_mode([DisplayMode.LONG]) == DisplayMode.LONG

    def test_last_selection_wins(self) -> None:
        """The last selection overrides earlier ones."""
        selections = [DisplayMode.LONG, DisplayMode.ACROSS, DisplayMode.LONG]

        assert resolve_display_mode(selections) == DisplayMode.LONG
        assert resolve_display_mode(selections[:2]) == DisplayMode.ACROSS
