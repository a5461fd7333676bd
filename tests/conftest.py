"""Shared fixtures for trash-tool tests."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from trashtool.config import TrashConfig
from trashtool.fs.locations import TrashLocation, TrashType

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def root(tmp_path) -> Path:
    """Symlink-free temporary directory."""
    return tmp_path.resolve()


@pytest.fixture
def home(root) -> Path:
    """A fake home directory with an (empty) data directory."""
    home_dir = root / "home" / "user"
    (home_dir / ".local" / "share").mkdir(parents=True)
    return home_dir


@pytest.fixture
def mounts_file(root) -> Path:
    """Mount table listing only ``/``."""
    path = root / "mounts"
    path.write_text("rootfs / ext4 rw 0 0\n")
    return path


@pytest.fixture
def config(home, mounts_file) -> TrashConfig:
    """Config pointing the home trash into the fake home."""
    return TrashConfig(
        data_home=home / ".local" / "share",
        mounts_file=mounts_file,
        uid=os.getuid(),
    )


@pytest.fixture
def home_trash(config) -> TrashLocation:
    """The home trash of *config*, with its structure created."""
    location = TrashLocation(config.home_trash_path, TrashType.HOME)
    location.ensure_structure_exists()
    return location
