"""
Core duplicate-detection engine: hashing, grouping and scanning.

This package contains the performance-critical foundation of dupfinder:
- FileScannerImpl: recursive directory traversal with an extension filter
- HasherImpl + DualHashAlgorithmImpl: streaming dual 64-bit content hash
- FileGrouperImpl: digest -> files aggregator with wasted-space statistics
- verify_groups: optional byte-by-byte confirmation of hash groups
- Models: FileRecord, DuplicateGroup, ScanStats and configuration objects

All components are pure Python with no I/O of their own except the scanner and hash_file.
"""

from .errors import DupfinderError, ConfigurationError, TraversalError
from .models import (
    FileRecord, DuplicateGroup, ScanStats, ScanParams, ScanResult,
    HashAlgorithmName, DirectorySortOrder)
from .hasher import HasherImpl, DualHashAlgorithmImpl, XXHashAlgorithmImpl, compute_digest
from .grouper import FileGrouperImpl
from .scanner import FileScannerImpl
from .verifier import split_by_content, verify_groups

__all__ = [
    "DupfinderError",
    "ConfigurationError",
    "TraversalError",
    "FileRecord",
    "DuplicateGroup",
    "ScanStats",
    "ScanParams",
    "ScanResult",
    "HashAlgorithmName",
    "DirectorySortOrder",
    "HasherImpl",
    "DualHashAlgorithmImpl",
    "XXHashAlgorithmImpl",
    "compute_digest",
    "FileGrouperImpl",
    "FileScannerImpl",
    "split_by_content",
    "verify_groups",
]
