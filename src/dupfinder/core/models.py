"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for scanning, content hashing and duplicate grouping.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional
import os
from enum import Enum

from dupfinder.core.errors import ConfigurationError


DEFAULT_CHUNK_SIZE = 8192


# =============================
# Enums
# =============================

class HashAlgorithmName(Enum):
    """
    Content hash used as the grouping key.
    """
    DUAL = "dual"
    XXH128 = "xxh128"

    def __repr__(self) -> str:
        return self.value


class DirectorySortOrder(Enum):
    NAME = "name"
    COUNT = "count"
    SIZE = "size"


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class FileRecord:
    """
    A single scanned file. Immutable once created.
    """
    path: str
    size: int  # in bytes
    name: str = ""

    def __post_init__(self):
        if self.size < 0:
            raise ValueError(f"File size cannot be negative: {self.size}")
        if not self.name:
            object.__setattr__(self, "name", os.path.basename(self.path))

    def __repr__(self):
        return f"<FileRecord path={self.path}, size={self.size}>"


@dataclass
class DuplicateGroup:
    """
    Files sharing one content digest, in insertion (scan) order.
    The first member stands in for the whole group in size statistics.
    """
    digest: str
    files: List[FileRecord] = field(default_factory=list)

    @property
    def file_count(self) -> int:
        return len(self.files)

    @property
    def representative_size(self) -> int:
        """Size of the first-encountered member."""
        return self.files[0].size if self.files else 0

    @property
    def wasted_bytes(self) -> int:
        """Bytes reclaimable by keeping one member, approximated with the first member's size."""
        if not self.is_duplicate():
            return 0
        return self.representative_size * (self.file_count - 1)

    def is_duplicate(self) -> bool:
        """True if this group contains at least two files."""
        return self.file_count >= 2

    def __repr__(self):
        return f"<DuplicateGroup digest={self.digest}, count={len(self.files)}>"


@dataclass(frozen=True)
class ScanStats:
    """
    Aggregate counts for one scan or one accumulation session.
    """
    total_files: int = 0
    processed_files: int = 0
    duplicate_groups: int = 0
    total_bytes: int = 0
    wasted_bytes: int = 0


@dataclass
class ScanResult:
    groups: List[DuplicateGroup]
    stats: ScanStats
    errors: Dict[str, str] = field(default_factory=dict)  # path -> message

    @property
    def has_duplicates(self) -> bool:
        return bool(self.groups)


def normalize_extensions(extensions: List[str]) -> List[str]:
    """Lowercase, strip and dot-prefix extensions; drop empty entries."""
    normalized = []
    for ext in extensions:
        ext = ext.strip().lower()
        if ext and not ext.startswith('.'):
            ext = f".{ext}"
        if ext and ext not in normalized:
            normalized.append(ext)
    return normalized


"""
DTO for scan parameters with built-in validation.
Interface-agnostic, used by the CLI and by library callers.
"""

@dataclass
class ScanParams:
    """Parameters for one directory scan."""
    root_dir: str
    extensions: List[str] = field(default_factory=list)
    algorithm: HashAlgorithmName = HashAlgorithmName.DUAL
    verify: bool = False
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root_dir:
            raise ConfigurationError("Root directory cannot be empty")

        if self.chunk_size <= 0:
            raise ConfigurationError("Chunk size must be positive")

        self.extensions = normalize_extensions(self.extensions)

    @staticmethod
    def from_extension_string(
            root_dir: str,
            extensions_str: Optional[str] = "",
            algorithm: HashAlgorithmName = HashAlgorithmName.DUAL,
            verify: bool = False,
    ) -> 'ScanParams':
        """
        Factory method to create params from a comma-separated extension list
        such as "txt,.JPG".
        """
        ext_list = [
            ext.strip() for ext in extensions_str.split(",") if ext.strip()
        ] if extensions_str else []

        return ScanParams(
            root_dir=root_dir,
            extensions=ext_list,
            algorithm=algorithm,
            verify=verify,
        )
