"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Digest-keyed aggregator: collects FileRecords under their content digest,
keeps running totals and reports duplicate groups with wasted-space statistics.
"""

import threading
from collections import defaultdict
from typing import List, Dict, Optional

from dupfinder.core.interfaces import FileGrouper, Hasher
from dupfinder.core.models import FileRecord, DuplicateGroup, ScanStats
from dupfinder.core.hasher import HasherImpl


class FileGrouperImpl(FileGrouper):
    """
    A concrete FileGrouper.
    Uses an injected Hasher instance for flexibility and testability.

    Two states: empty (after construction or reset) and accumulating
    (after the first add). Queries are valid in both and never change state.
    """

    def __init__(self, hasher: Hasher = None):
        self.hasher = hasher or HasherImpl()
        self._groups: Dict[str, List[FileRecord]] = defaultdict(list)
        self._total_files = 0
        self._total_bytes = 0
        self._lock = threading.Lock()

    @property
    def is_empty(self) -> bool:
        return self._total_files == 0

    def add(self, record: FileRecord, content: Optional[bytes] = None,
            digest: Optional[str] = None) -> str:
        """
        Appends `record` under its digest and updates the totals.
        Pass either the raw `content` (hashed here) or a precomputed `digest`.
        Returns the digest used as the grouping key.
        """
        if (content is None) == (digest is None):
            raise ValueError("Exactly one of 'content' or 'digest' must be given")

        if digest is None:
            digest = self.hasher.hash_bytes(content)

        with self._lock:
            self._groups[digest].append(record)
            self._total_files += 1
            self._total_bytes += record.size
        return digest

    def collect_duplicates(self) -> List[DuplicateGroup]:
        """Every digest with two or more members. Group order is not significant."""
        with self._lock:
            return [
                DuplicateGroup(digest=digest, files=list(files))
                for digest, files in self._groups.items()
                if len(files) >= 2
            ]

    def stats(self, total_files: Optional[int] = None) -> ScanStats:
        """
        Derived from the current mapping at call time.
        Args:
            total_files: Pre-filter file count known to the caller; defaults to the processed count.
        """
        groups = self.collect_duplicates()
        with self._lock:
            processed = self._total_files
            total_bytes = self._total_bytes

        return ScanStats(
            total_files=processed if total_files is None else total_files,
            processed_files=processed,
            duplicate_groups=len(groups),
            total_bytes=total_bytes,
            wasted_bytes=sum(group.wasted_bytes for group in groups),
        )

    def reset(self) -> None:
        with self._lock:
            self._groups.clear()
            self._total_files = 0
            self._total_bytes = 0
