"""
Unified command orchestrator for directory scans.
This is the SINGLE source of truth for the scan workflow, used by the CLI and by library callers.
"""
import dataclasses
import logging
from typing import Optional, Callable, Dict

from dupfinder.core.grouper import FileGrouperImpl
from dupfinder.core.hasher import HasherImpl
from dupfinder.core.models import ScanParams, ScanResult
from dupfinder.core.scanner import FileScannerImpl
from dupfinder.core.verifier import verify_groups
from dupfinder.services.file_service import FileService

logger = logging.getLogger(__name__)


class ScanCommand:
    """
    Orchestrates the whole scan:
    1. Walk the root directory with the extension filter
    2. Stream every matching file through the hasher, one file at a time
    3. Insert (record, digest) into the grouper
    4. Optionally confirm each group byte by byte
    5. Return groups, statistics and per-file read errors

    Usage:
        params = ScanParams.from_extension_string("/home/user", "jpg,png")
        result = ScanCommand().execute(params, progress_callback=printer)
    """

    def execute(
            self,
            params: ScanParams,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> ScanResult:
        """
        Execute a scan with given parameters.

        Args:
            params: Validated scan parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None

        Returns:
            ScanResult with duplicate groups, statistics and read errors

        Raises:
            ConfigurationError: If the root is missing or not a directory
            TraversalError: If walking the directory fails; no partial result is returned
        """
        hasher = HasherImpl.for_algorithm(params.algorithm)
        grouper = FileGrouperImpl(hasher)
        scanner = FileScannerImpl(root_dir=params.root_dir, extensions=params.extensions)
        errors: Dict[str, str] = {}
        scanned_bytes = 0

        for record in scanner.scan(progress_callback=progress_callback):
            scanned_bytes += record.size
            try:
                digest = hasher.hash_file(record.path, params.chunk_size)
            except OSError as e:
                logger.warning(f"Skipping unreadable file {record.path}: {e}")
                errors[record.path] = str(e)
                continue
            grouper.add(record, digest=digest)

        groups = grouper.collect_duplicates()
        # Unreadable files are left out of the groups but still count as processed
        stats = dataclasses.replace(
            grouper.stats(total_files=scanner.total_files),
            processed_files=scanner.processed_files,
            total_bytes=scanned_bytes,
        )

        if params.verify:
            groups = verify_groups(groups, FileService.files_identical)
            stats = dataclasses.replace(
                stats,
                duplicate_groups=len(groups),
                wasted_bytes=sum(group.wasted_bytes for group in groups),
            )
            if progress_callback:
                progress_callback('verifying', len(groups), len(groups))

        logger.debug(
            f"Scan finished: {stats.processed_files} files hashed, {stats.duplicate_groups} duplicate groups"
        )
        return ScanResult(groups=groups, stats=stats, errors=errors)
