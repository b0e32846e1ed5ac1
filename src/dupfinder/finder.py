"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

finder.py

Embeddable interface for host applications that already hold file contents in memory
(an upload handler, a notebook, another tool's plugin system).

The host constructs a `DuplicateFinder`, feeds it files with `add_file`, asks for
`find_duplicates` and calls `reset` to start a new session with the same instance.
Results are plain dataclasses; `FindResult.to_dict()` converts them to the
JSON-friendly shape at the boundary.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from dupfinder.core.grouper import FileGrouperImpl
from dupfinder.core.hasher import HasherImpl
from dupfinder.core.interfaces import Hasher
from dupfinder.core.models import DuplicateGroup, FileRecord, ScanStats
from dupfinder.utils.convert_utils import ConvertUtils


@dataclass
class GroupSummary:
    id: int
    hash: str
    file_count: int
    file_size: str
    wasted_space: str
    files: List[FileRecord] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "hash": self.hash,
            "fileCount": self.file_count,
            "fileSize": self.file_size,
            "wastedSpace": self.wasted_space,
            "files": [
                {"name": f.name, "path": f.path, "size": f.size}
                for f in self.files
            ],
        }


@dataclass
class ResultStats:
    total_files: int
    total_size: str
    duplicate_groups: int
    wasted_space: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalFiles": self.total_files,
            "totalSize": self.total_size,
            "duplicateGroups": self.duplicate_groups,
            "wastedSpace": self.wasted_space,
        }


@dataclass
class FindResult:
    groups: List[GroupSummary]
    stats: ResultStats

    def to_dict(self) -> Dict[str, Any]:
        return {
            "groups": [group.to_dict() for group in self.groups],
            "stats": self.stats.to_dict(),
        }


def build_find_result(groups: List[DuplicateGroup], stats: ScanStats) -> FindResult:
    """Numbers groups from 1 in the given order and formats sizes as MB strings."""
    summaries = [
        GroupSummary(
            id=group_id,
            hash=group.digest,
            file_count=group.file_count,
            file_size=ConvertUtils.bytes_to_mb(group.representative_size),
            wasted_space=ConvertUtils.bytes_to_mb(group.wasted_bytes),
            files=list(group.files),
        )
        for group_id, group in enumerate(groups, 1)
    ]
    return FindResult(
        groups=summaries,
        stats=ResultStats(
            total_files=stats.total_files,
            total_size=ConvertUtils.bytes_to_mb(stats.total_bytes),
            duplicate_groups=len(summaries),
            wasted_space=ConvertUtils.bytes_to_mb(sum(group.wasted_bytes for group in groups)),
        ),
    )


class DuplicateFinder:
    """
    Accumulates in-memory files for one host session.
    """

    def __init__(self, hasher: Optional[Hasher] = None):
        self._grouper = FileGrouperImpl(hasher or HasherImpl())

    def add_file(self, name: str, path: str, content: Union[bytes, str]) -> str:
        """
        Ingests the full content of one file. Text content is UTF-8 encoded.
        Returns the content digest.
        """
        if isinstance(content, str):
            content = content.encode("utf-8")
        record = FileRecord(path=path, size=len(content), name=name)
        return self._grouper.add(record, content=content)

    def find_duplicates(self) -> FindResult:
        groups = self._grouper.collect_duplicates()
        return build_find_result(groups, self._grouper.stats())

    def stats(self) -> ScanStats:
        return self._grouper.stats()

    def reset(self) -> None:
        self._grouper.reset()
