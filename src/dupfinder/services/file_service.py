"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/file_service.py
File system queries used after the scan: live size lookups for the report
and byte-by-byte comparison for the optional verification pass.
"""
import filecmp
import logging
import os

from dupfinder.core.models import FileRecord

logger = logging.getLogger(__name__)


class FileService:
    """
    Small, failure-tolerant file system helpers.
    """

    @staticmethod
    def get_size(file_path: str) -> int:
        """Current size of a file in bytes, or 0 if it can no longer be queried."""
        try:
            return os.path.getsize(file_path)
        except OSError as e:
            logger.debug(f"Could not get size of {file_path}: {e}")
            return 0

    @staticmethod
    def files_identical(first: FileRecord, second: FileRecord) -> bool:
        """
        Byte-by-byte comparison of two scanned files.
        Unreadable files are never considered identical.
        """
        if first.size != second.size:
            return False
        try:
            return filecmp.cmp(first.path, second.path, shallow=False)
        except OSError as e:
            logger.warning(f"Could not compare {first.path} and {second.path}: {e}")
            return False
