"""Tests for the name-level differ."""

from treemirror import DiffResult, DirectoryEntry, EntryKind, diff_entries, diff_names


class TestDiffNames:
    def test_scenario_files(self):
        d = diff_names(["a.txt", "b.txt"], ["b.txt", "c.txt"])
        assert d.added == ["a.txt"]
        assert d.deleted == ["c.txt"]

    def test_identical_sides(self):
        d = diff_names(["a", "b"], ["b", "a"])
        assert d.in_sync
        assert d.total == 0

    def test_empty_target(self):
        d = diff_names(["a", "b"], [])
        assert sorted(d.added) == ["a", "b"]
        assert d.deleted == []

    def test_empty_source(self):
        d = diff_names([], ["a", "b"])
        assert d.added == []
        assert sorted(d.deleted) == ["a", "b"]

    def test_both_empty(self):
        assert diff_names([], []) == DiffResult()

    def test_case_sensitive(self):
        d = diff_names(["Readme.md"], ["readme.md"])
        assert d.added == ["Readme.md"]
        assert d.deleted == ["readme.md"]

    def test_set_properties(self):
        src = {"a", "b", "c", "d"}
        dst = {"c", "d", "e", "f", "g"}
        d = diff_names(src, dst)
        assert set(d.added) == src - dst
        assert set(d.deleted) == dst - src
        assert not set(d.added) & set(d.deleted)
        for common in src & dst:
            assert common not in d.added
            assert common not in d.deleted
        assert d.total == 5

    def test_accepts_generators(self):
        d = diff_names((n for n in ["x"]), (n for n in ["y"]))
        assert d.added == ["x"] and d.deleted == ["y"]


class TestDiffEntries:
    def test_uses_names(self):
        src = [DirectoryEntry("keep", EntryKind.DIRECTORY), DirectoryEntry("new", EntryKind.DIRECTORY)]
        dst = [DirectoryEntry("keep", EntryKind.DIRECTORY), DirectoryEntry("old", EntryKind.DIRECTORY)]
        d = diff_entries(src, dst)
        assert d.added == ["new"]
        assert d.deleted == ["old"]
