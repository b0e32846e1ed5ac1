"""
dupfinder: duplicate file finder based on content hashing.

Core features:
- Streaming dual 64-bit content hash (optional xxHash3 128)
- Duplicate groups with wasted-space statistics
- Optional byte-by-byte verification of every group
- CLI report (table or JSON) and an embeddable in-memory finder
"""

# Get version
try:
    from importlib.metadata import version as _version
    __version__ = _version("dupfinder")
except Exception:
    from pathlib import Path as _Path
    try:
        import tomllib  # Python 3.11+
    except ImportError:
        import tomli as tomllib  # Python < 3.11: pip install tomli

    with open(_Path(__file__).resolve().parents[2] / "pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public API: only what users should import directly
from dupfinder.commands import ScanCommand
from dupfinder.core import (
    FileRecord, DuplicateGroup, ScanStats, ScanParams, ScanResult, HashAlgorithmName,
    compute_digest)
from dupfinder.finder import DuplicateFinder, FindResult
from dupfinder.report import ReportBuilder, StreamSink, ListSink
from dupfinder.utils.convert_utils import ConvertUtils

__all__ = [
    "ScanCommand",
    "FileRecord",
    "DuplicateGroup",
    "ScanStats",
    "ScanParams",
    "ScanResult",
    "HashAlgorithmName",
    "compute_digest",
    "DuplicateFinder",
    "FindResult",
    "ReportBuilder",
    "StreamSink",
    "ListSink",
    "ConvertUtils",
    "__version__",
]
