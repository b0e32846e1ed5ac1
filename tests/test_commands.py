"""
Integration tests for ScanCommand: scanner, hasher and grouper wired together.
"""
import pytest
from pathlib import Path
from unittest import mock
from dupfinder import ScanCommand, ScanParams, HashAlgorithmName
from dupfinder.core.errors import ConfigurationError
from dupfinder.core.hasher import HasherImpl
from dupfinder.services.file_service import FileService


def group_paths(result):
    return sorted(sorted(Path(f.path).name for f in g.files) for g in result.groups)


class TestScanCommand:

    def test_end_to_end_abc(self, abc_dir):
        """a.txt and b.txt hold "X", c.txt holds "Y"."""
        result = ScanCommand().execute(ScanParams(root_dir=str(abc_dir)))

        assert group_paths(result) == [["a.txt", "b.txt"]]
        assert result.stats.processed_files == 3
        assert result.stats.total_files == 3
        assert result.stats.duplicate_groups == 1
        assert result.stats.wasted_bytes == 1
        assert result.errors == {}

    def test_execute_returns_groups_and_stats(self, test_files, temp_dir):
        params = ScanParams(root_dir=str(temp_dir), extensions=[".txt"])
        result = ScanCommand().execute(params)

        assert group_paths(result) == [
            ["dup1_a.txt", "dup1_b.txt", "dup_in_subdir.txt"],
            ["dup2_a.txt", "dup2_b.txt"],
        ]
        assert result.stats.total_files == 9
        assert result.stats.processed_files == 8
        assert result.stats.total_bytes == 1024 * 3 + 2048 * 2 + 1500 + 2500
        assert result.stats.wasted_bytes == 1024 * 2 + 2048

    def test_rescan_is_idempotent(self, test_files, temp_dir):
        params = ScanParams(root_dir=str(temp_dir))
        first = ScanCommand().execute(params)
        second = ScanCommand().execute(params)

        assert group_paths(first) == group_paths(second)
        assert first.stats == second.stats

    def test_xxhash_algorithm_finds_same_groups(self, test_files, temp_dir):
        dual = ScanCommand().execute(ScanParams(root_dir=str(temp_dir)))
        xxh = ScanCommand().execute(ScanParams(root_dir=str(temp_dir), algorithm=HashAlgorithmName.XXH128))
        assert group_paths(dual) == group_paths(xxh)
        assert dual.stats == xxh.stats

    def test_empty_directory(self, temp_dir):
        result = ScanCommand().execute(ScanParams(root_dir=str(temp_dir)))
        assert result.groups == []
        assert result.stats.total_files == 0
        assert not result.has_duplicates

    def test_missing_directory_raises(self, temp_dir):
        with pytest.raises(ConfigurationError):
            ScanCommand().execute(ScanParams(root_dir=str(temp_dir / "missing")))

    def test_unreadable_file_is_skipped_and_reported(self, abc_dir):
        real_hash_file = HasherImpl.hash_file

        def flaky(self, path, chunk_size=8192):
            if path.endswith("b.txt"):
                raise PermissionError(13, "Permission denied", path)
            return real_hash_file(self, path, chunk_size)

        with mock.patch.object(HasherImpl, "hash_file", flaky):
            result = ScanCommand().execute(ScanParams(root_dir=str(abc_dir)))

        assert result.groups == []
        assert list(result.errors) == [str(abc_dir / "b.txt")]
        assert result.stats.processed_files == 3
        assert result.stats.total_files == 3
        assert result.stats.total_bytes == 3

    def test_unreadable_file_counts_in_stats_but_not_groups(self, abc_dir):
        real_hash_file = HasherImpl.hash_file

        def flaky(self, path, chunk_size=8192):
            if path.endswith("c.txt"):
                raise PermissionError(13, "Permission denied", path)
            return real_hash_file(self, path, chunk_size)

        with mock.patch.object(HasherImpl, "hash_file", flaky):
            result = ScanCommand().execute(ScanParams(root_dir=str(abc_dir)))

        assert group_paths(result) == [["a.txt", "b.txt"]]
        assert result.stats.processed_files == 3
        assert result.stats.total_bytes == 3
        assert result.stats.duplicate_groups == 1
        assert result.stats.wasted_bytes == 1
        assert str(abc_dir / "c.txt") in result.errors

    def test_verify_splits_colliding_groups(self, abc_dir):
        """Force every file onto one digest; verification separates the contents."""
        with mock.patch.object(HasherImpl, "hash_file", lambda self, path, chunk_size=8192: "collide"):
            unverified = ScanCommand().execute(ScanParams(root_dir=str(abc_dir)))
            verified = ScanCommand().execute(ScanParams(root_dir=str(abc_dir), verify=True))

        assert group_paths(unverified) == [["a.txt", "b.txt", "c.txt"]]
        assert unverified.stats.wasted_bytes == 2

        assert group_paths(verified) == [["a.txt", "b.txt"]]
        assert verified.stats.duplicate_groups == 1
        assert verified.stats.wasted_bytes == 1

    def test_progress_callback_invoked(self, abc_dir):
        events = []
        ScanCommand().execute(
            ScanParams(root_dir=str(abc_dir), verify=True),
            progress_callback=lambda stage, current, total: events.append(stage)
        )
        assert events.count("scanning") == 3
        assert events[-1] == "verifying"

    def test_verify_uses_file_service(self, abc_dir):
        with mock.patch.object(FileService, "files_identical", return_value=True) as compare:
            ScanCommand().execute(ScanParams(root_dir=str(abc_dir), verify=True))
        assert compare.called
