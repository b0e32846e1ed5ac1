"""
Tests for the optional byte-by-byte verification pass.
"""
from dupfinder.core import DuplicateGroup, FileRecord, split_by_content, verify_groups
from dupfinder.services.file_service import FileService


def by_content(contents):
    return lambda a, b: contents[a.path] == contents[b.path]


class TestSplitByContent:

    def test_identical_members_stay_together(self):
        group = DuplicateGroup("d", [FileRecord("/a", 3), FileRecord("/b", 3)])
        contents = {"/a": b"abc", "/b": b"abc"}

        result = split_by_content(group, by_content(contents))

        assert len(result) == 1
        assert [f.path for f in result[0].files] == ["/a", "/b"]

    def test_collision_splits_group_and_drops_singletons(self):
        """Simulated digest collision: two contents behind one digest."""
        group = DuplicateGroup("d", [
            FileRecord("/a", 3), FileRecord("/x", 3), FileRecord("/b", 3), FileRecord("/y", 3), FileRecord("/z", 3)
        ])
        contents = {"/a": b"aaa", "/b": b"aaa", "/x": b"xxx", "/y": b"xxx", "/z": b"zzz"}

        result = split_by_content(group, by_content(contents))

        assert [[f.path for f in g.files] for g in result] == [["/a", "/b"], ["/x", "/y"]]
        assert all(g.digest == "d" for g in result)

    def test_verify_groups_with_real_files(self, temp_dir):
        (temp_dir / "a").write_bytes(b"same")
        (temp_dir / "b").write_bytes(b"same")
        (temp_dir / "c").write_bytes(b"diff")
        group = DuplicateGroup("fake-collision", [
            FileRecord(str(temp_dir / name), 4) for name in ("a", "b", "c")
        ])

        result = verify_groups([group], FileService.files_identical)

        assert len(result) == 1
        assert [f.name for f in result[0].files] == ["a", "b"]

    def test_missing_file_is_never_identical(self, temp_dir):
        (temp_dir / "a").write_bytes(b"same")
        first = FileRecord(str(temp_dir / "a"), 4)
        gone = FileRecord(str(temp_dir / "gone"), 4)
        assert FileService.files_identical(first, gone) is False
