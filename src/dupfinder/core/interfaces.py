"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate finder.
These protocols enforce structural typing using Python's `typing.Protocol` to ensure
consistency across modules while maintaining flexibility and modularity.

Key Components:
---------------
- HashAlgorithm: Streaming hash state (update / hexdigest).
- Hasher: Interface for turning bytes, streams and files into digests.
- FileScanner: Interface for walking a directory tree and yielding file records.
- FileGrouper: Interface for the digest -> files aggregator.
- ReportSink: Anything that accepts formatted report lines.
- TranslatorProtocol: Label lookup for report output.
"""

from typing import Protocol, List, Optional, Callable, Iterable, Iterator, BinaryIO
from dupfinder.core.models import FileRecord, DuplicateGroup, ScanStats


# ===== Interfaces =====

class TranslatorProtocol(Protocol):
    def tr(self, key: str) -> str:
        ...


class HashAlgorithm(Protocol):
    """
    Interface for streaming hash algorithms.

    Feeding the same bytes in any chunking must produce the same digest.
    """

    def update(self, data: bytes) -> None:
        """Feeds the next chunk of bytes into the hash state."""
        ...

    def hexdigest(self) -> str:
        """Returns the digest of everything fed so far."""
        ...


class Hasher(Protocol):
    """Interface for hashing in-memory content, binary streams and files."""
    def hash_bytes(self, data: bytes) -> str: ...
    def hash_stream(self, stream: BinaryIO, chunk_size: int = ...) -> str: ...
    def hash_file(self, path: str, chunk_size: int = ...) -> str: ...


class FileScanner(Protocol):
    """
    Interface for walking file systems and collecting file records.
    """
    total_files: int

    def scan(
        self,
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> Iterator[FileRecord]:
        """
        Yield records for regular files that pass the extension filter.

        Args:
            progress_callback: Optional callback for reporting progress (stage, current, total).

        Raises:
            ConfigurationError: root is missing or is not a directory.
            TraversalError: the walk itself failed.
        """
        ...


class FileGrouper(Protocol):
    """
    Interface for the digest-keyed aggregator.
    """
    def add(self, record: FileRecord, content: Optional[bytes] = None,
            digest: Optional[str] = None) -> str: ...

    def collect_duplicates(self) -> List[DuplicateGroup]: ...

    def stats(self, total_files: Optional[int] = None) -> ScanStats: ...

    def reset(self) -> None: ...


class ReportSink(Protocol):
    """Destination for formatted report lines (console, file, buffer)."""
    def write_lines(self, lines: Iterable[str]) -> None: ...
