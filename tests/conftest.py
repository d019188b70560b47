"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest


@pytest.fixture
def listing_dir(tmp_path: Path) -> Path:
    """Directory with files, a subdirectory, a dotfile and two symlinks.

    Layout:
        alpha.txt      (5 bytes)
        beta.txt       (0 bytes)
        docs/          (directory)
        .hidden        (dotfile)
        link -> alpha.txt
        dangling -> missing-target
    """
    (tmp_path / "alpha.txt").write_text("hello")
    (tmp_path / "beta.txt").write_text("")
    (tmp_path / "docs").mkdir()
    (tmp_path / ".hidden").write_text("secret")
    (tmp_path / "link").symlink_to("alpha.txt")
    (tmp_path / "dangling").symlink_to("missing-target")
    return tmp_path


@pytest.fixture
def empty_dir(tmp_path: Path) -> Path:
    """Empty directory."""
    target = tmp_path / "empty"
    target.mkdir()
    return target
