"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Implements recursive file discovery with an extension filter.
Features:
- Uses os.walk for fast traversal and pathlib.Path for path handling
- Counts every regular file seen (before filtering)
- Yields FileRecord objects for files passing the extension filter
- Any error raised by the walk itself aborts the scan with TraversalError
"""

import os
from typing import List, Optional, Callable, Iterator
from pathlib import Path
import logging

from dupfinder.core.errors import ConfigurationError, TraversalError
from dupfinder.core.interfaces import FileScanner
from dupfinder.core.models import FileRecord, normalize_extensions

logger = logging.getLogger(__name__)


class FileScannerImpl(FileScanner):
    """
    Scans directories recursively and filters files by extension.

    Attributes:
        root_dir: Root directory to scan
        extensions: Allowed file extensions, normalised to lowercase with a leading dot
        total_files: Regular files seen by the last scan, before filtering
        processed_files: Files yielded by the last scan
    """

    def __init__(self, root_dir: str, extensions: Optional[List[str]] = None):
        self.root_dir = root_dir
        self.extensions = normalize_extensions(extensions) if extensions else []
        self.total_files = 0
        self.processed_files = 0

    def validate_root(self) -> Path:
        root_path = Path(self.root_dir)
        if not root_path.exists():
            error_msg = f"Directory does not exist: {self.root_dir}"
            logger.error(error_msg)
            raise ConfigurationError(error_msg)
        if not root_path.is_dir():
            error_msg = f"Not a directory: {self.root_dir}"
            logger.error(error_msg)
            raise ConfigurationError(error_msg)
        return root_path

    def scan(self,
             progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
             ) -> Iterator[FileRecord]:
        """
        Validates the root eagerly, then returns a lazy iterator over matching files.
        """
        root_path = self.validate_root()
        logger.debug(f"Root directory: {self.root_dir}")
        logger.debug(f"Filters: extensions={self.extensions}")
        self.total_files = 0
        self.processed_files = 0
        return self._walk(root_path, progress_callback)

    def _walk(self, root_path: Path,
              progress_callback: Optional[Callable[[str, int, Optional[int]], None]]
              ) -> Iterator[FileRecord]:
        def on_error(error: OSError):
            raise TraversalError(error.filename or str(root_path), error)

        for root, dirs, files in os.walk(str(root_path), onerror=on_error):
            # Stable order so repeated scans of an unchanged tree match
            dirs.sort()
            for filename in sorted(files):
                path = Path(root) / filename
                if not path.is_file():
                    continue

                self.total_files += 1
                if not self._extension_passes(path):
                    logger.debug(f"Skipping {path} (extension not allowed)")
                    continue

                try:
                    size = path.stat().st_size
                except OSError as e:
                    raise TraversalError(str(path), e) from e

                self.processed_files += 1
                if progress_callback:
                    progress_callback('scanning', self.processed_files, None)
                yield FileRecord(path=str(path), size=size, name=filename)

        logger.debug(
            f"Scan completed. {self.total_files} files found, {self.processed_files} matching filters."
        )

    def _extension_passes(self, path: Path) -> bool:
        """
        Check if file matches any of the allowed extensions.
        Args:
            path: Path object pointing to the file
        Returns:
            True if file has one of the allowed extensions
        """
        if not self.extensions:
            return True
        return path.suffix.lower() in self.extensions
