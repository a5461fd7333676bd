"""Tests for TrashConfig and data directory discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from trashtool.config import TrashConfig, default_data_home


class TestDefaultDataHome:
    def test_xdg_data_home(self, monkeypatch, tmp_path):
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
        assert default_data_home() == tmp_path

    def test_relative_xdg_ignored(self, monkeypatch, tmp_path):
        monkeypatch.setenv("XDG_DATA_HOME", "relative/data")
        monkeypatch.setenv("HOME", str(tmp_path))
        assert default_data_home() == tmp_path / ".local" / "share"

    def test_home_fallback(self, monkeypatch, tmp_path):
        monkeypatch.delenv("XDG_DATA_HOME", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))
        assert default_data_home() == tmp_path / ".local" / "share"

    def test_no_home(self, monkeypatch):
        monkeypatch.delenv("XDG_DATA_HOME", raising=False)

        def no_home():
            raise RuntimeError("Could not determine home directory.")

        monkeypatch.setattr(Path, "home", no_home)
        assert default_data_home() is None


class TestTrashConfig:
    def test_home_trash_path(self, tmp_path):
        config = TrashConfig(data_home=tmp_path)
        assert config.home_trash_path == tmp_path / "Trash"

    def test_no_data_home(self):
        assert TrashConfig(data_home=None).home_trash_path is None

    def test_strings_become_paths(self, tmp_path):
        config = TrashConfig(data_home=str(tmp_path), mounts_file=str(tmp_path / "mounts"))
        assert config.data_home == tmp_path
        assert config.mounts_file == tmp_path / "mounts"

    def test_invalid_color(self):
        with pytest.raises(ValueError, match="color"):
            TrashConfig(color="rainbow")
