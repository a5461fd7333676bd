"""Tests for the TrashCan facade."""

from __future__ import annotations

from pathlib import Path

import pytest

from trashtool import TrashCan
from trashtool.fs.exceptions import NoTrashDirectoriesError


class FakeSelector:
    """Selector that picks candidates by position, or cancels with ``None``."""

    def __init__(self, picks: list[int] | None) -> None:
        self.picks = picks
        self.candidates: list[tuple[str, str]] = []

    def select(self, candidates: list[tuple[str, str]]) -> list[str] | None:
        self.candidates = candidates
        if self.picks is None:
            return None
        return [candidates[i][1] for i in self.picks]


class FakeConfirmer:
    def __init__(self, answer: bool) -> None:
        self.answer = answer
        self.questions: list[str] = []

    def confirm(self, question: str) -> bool:
        self.questions.append(question)
        return self.answer


@pytest.fixture
def can(config) -> TrashCan:
    return TrashCan(config)


def _files(root: Path, *names: str) -> list[Path]:
    paths = []
    for name in names:
        path = root / name
        path.write_text(name)
        paths.append(path)
    return paths


# ---------------------------------------------------------------------------
# Trash
# ---------------------------------------------------------------------------


class TestTrash:
    def test_trash_several(self, root, can, config):
        paths = _files(root, "a.txt", "b.txt")
        results = can.trash(paths)

        assert [r.success for r in results] == [True, True]
        assert results[0].message == f"Trashed: {paths[0]}"
        assert results[0].trash_root == config.home_trash_path
        assert results[1].trashed_path == config.home_trash_path / "files" / "b.txt"
        assert not any(p.exists() for p in paths)

    def test_failure_does_not_stop_others(self, root, can):
        [good] = _files(root, "good.txt")
        results = can.trash([root / "missing.txt", good])

        assert [r.success for r in results] == [False, True]
        assert results[0].message.startswith("Could not determine trash location for")
        assert results[0].path == str(root / "missing.txt")
        assert not good.exists()

    def test_item_in_trash(self, root, can, config):
        [path] = _files(root, "a.txt")
        [result] = can.trash([path])
        [again] = can.trash([result.trashed_path])
        assert not again.success
        assert again.message.startswith("Failed to trash")
        assert "already in the trash" in again.message

    def test_unprepared_trash(self, root, can, config):
        config.home_trash_path.write_text("not a directory")
        [path] = _files(root, "a.txt")
        [result] = can.trash([path])
        assert not result.success
        assert result.message.startswith("Failed to prepare trash directory for")
        assert path.exists()


# ---------------------------------------------------------------------------
# Listing
# ---------------------------------------------------------------------------


class TestListing:
    def test_list_trash(self, root, can, config):
        (root / "dir").mkdir()
        can.trash([*_files(root, "b.txt", "a.txt"), root / "dir"])

        result = can.list_trash(config.home_trash_path)

        assert result.success
        assert [e.name for e in result.entries] == ["a.txt", "b.txt", "dir"]
        assert result.entries[2].is_directory
        assert result.entries[0].size_bytes == len("a.txt")
        assert result.path == config.home_trash_path / "files"

    def test_list_missing_files_dir(self, root, can):
        result = can.list_trash(root / "nowhere")
        assert result.success
        assert result.entries == []
        assert result.message == "Trash is empty"

    def test_list_symlink_entry(self, root, can, config):
        link = root / "link"
        link.symlink_to(root / "nowhere")
        can.trash([link])
        [entry] = can.list_trash(config.home_trash_path).entries
        assert entry.is_symlink
        assert not entry.is_directory

    def test_list_all_without_trash(self, can):
        with pytest.raises(NoTrashDirectoriesError):
            can.list_all()

    def test_list_all(self, root, can, home_trash):
        can.trash(_files(root, "a.txt"))
        [listing] = can.list_all()
        assert [e.name for e in listing.entries] == ["a.txt"]


# ---------------------------------------------------------------------------
# Restore
# ---------------------------------------------------------------------------


class TestRestore:
    def test_entries_sorted(self, root, can, home_trash):
        for name, date in (("b", "2024-02-01T00:00:00"), ("a", "2024-01-01T00:00:00")):
            (home_trash.files_path / name).write_text("")
            (home_trash.info_path / f"{name}.trashinfo").write_text(
                f"[Trash Info]\nPath={root / name}\nDeletionDate={date}\n"
            )
        assert [e.original_path.name for e in can.entries()] == ["a", "b"]

    def test_restore_interactive(self, root, can):
        paths = _files(root, "a.txt", "b.txt")
        can.trash(paths)
        selector = FakeSelector([1])

        results = can.restore_interactive(selector)

        assert len(selector.candidates) == 2
        [result] = results
        assert result.success
        picked = result.file_path
        assert picked.exists()
        assert result.message == f"Restored: {picked}"
        assert sum(p.exists() for p in paths) == 1

    def test_restore_interactive_cancelled(self, root, can):
        [path] = _files(root, "a.txt")
        can.trash([path])
        assert can.restore_interactive(FakeSelector(None)) == []
        assert not path.exists()

    def test_restore_interactive_nothing_to_restore(self, can):
        selector = FakeSelector([0])
        assert can.restore_interactive(selector) == []
        assert selector.candidates == []

    def test_restore_collision_reported(self, root, can):
        [path] = _files(root, "a.txt")
        can.trash([path])
        path.write_text("new")

        [result] = can.restore(can.entries())

        assert not result.success
        assert result.message.startswith(f"Failed to restore '{path}'")
        assert path.read_text() == "new"


# ---------------------------------------------------------------------------
# Empty
# ---------------------------------------------------------------------------


class TestEmpty:
    def test_already_empty(self, can, home_trash):
        [result] = can.empty([home_trash.root_path])
        assert result.success
        assert result.already_empty
        assert result.message == f"(0): {home_trash.root_path}"

    def test_unconditional(self, root, can, home_trash):
        can.trash(_files(root, "a.txt", "b.txt"))
        [result] = can.empty([home_trash.root_path])
        assert result.emptied
        assert result.item_count == 2
        assert result.message == f"Emptied trash at: {home_trash.root_path}"
        assert can.status(home_trash.root_path).is_empty

    def test_confirmed(self, root, can, home_trash):
        can.trash(_files(root, "a.txt"))
        confirmer = FakeConfirmer(True)
        shown: list[Path] = []

        [result] = can.empty([home_trash.root_path], confirm=confirmer, before_confirm=shown.append)

        assert result.emptied
        assert shown == [home_trash.root_path]
        assert confirmer.questions == [f"(1): {home_trash.root_path} - to empty?"]

    def test_declined(self, root, can, home_trash):
        can.trash(_files(root, "a.txt"))
        [result] = can.empty([home_trash.root_path], confirm=FakeConfirmer(False))
        assert result.success
        assert not result.emptied
        assert result.message == f"Kept trash at: {home_trash.root_path}"
        assert not can.status(home_trash.root_path).is_empty

    def test_no_confirmation_for_empty_trash(self, can, home_trash):
        confirmer = FakeConfirmer(True)
        can.empty([home_trash.root_path], confirm=confirmer)
        assert confirmer.questions == []

    def test_broken_trash_reported(self, root, can):
        [result] = can.empty([root / "not-a-trash"])
        assert not result.success
        assert "I/O error" in result.message
