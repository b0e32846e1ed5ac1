#!/usr/bin/env python3
"""
dupfinder CLI: command line interface for duplicate file detection.
Walks a directory tree, groups files by content hash and prints a report.
Nothing is ever deleted or moved: the tool only reports.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from pathlib import Path
from typing import List, Optional, NoReturn, TextIO
import logging

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

# === EARLY DEPENDENCY VALIDATION ===
_MISSING_DEPS = []
try:
    import xxhash
except ImportError:
    _MISSING_DEPS.append("xxhash")

if _MISSING_DEPS:
    print("❌ Missing required dependencies:", file=sys.stderr)
    print(f"   pip install {' '.join(_MISSING_DEPS)}", file=sys.stderr)
    sys.exit(1)

# === NORMAL IMPORTS (after validation) ===
from dupfinder.core.errors import ConfigurationError, TraversalError
from dupfinder.core.models import ScanParams, ScanResult
from dupfinder.commands import ScanCommand
from dupfinder.report import ReportBuilder, StreamSink, render_json, summarize_directories
from dupfinder.translator import DictTranslator, LANGUAGE_CHOICES
from dupfinder.aliases import (
    ALGORITHM_ALIASES, ALGORITHM_CHOICES, ALGORITHM_HELP_TEXT,
    DIRECTORY_SORT_ALIASES, DIRECTORY_SORT_CHOICES, DIRECTORY_SORT_HELP_TEXT,
    FORMAT_CHOICES, EPILOG_TEXT
)


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False
        self.translator = DictTranslator()

        # Fix encoding for Windows consoles to prevent UnicodeEncodeError
        for stream in (sys.stdout, sys.stderr):
            if hasattr(stream, "reconfigure"):
                stream.reconfigure(encoding='utf-8')

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="dupfinder",
            description="dupfinder: find duplicate files by content hash",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        # Checked in run() so a missing directory exits with status 1
        parser.add_argument(
            "directory",
            nargs="?",
            help="Directory to scan recursively"
        )

        # Filtering options
        parser.add_argument(
            "--ext", "-x",
            default="",
            type=str,
            metavar="EXT1,EXT2",
            help="Comma-separated extensions to include (e.g., .jpg,.png,txt)"
        )

        # Output options
        parser.add_argument(
            "--output", "-o",
            default=None,
            type=str,
            metavar="FILE",
            help="Save the report to a file instead of printing it"
        )
        parser.add_argument(
            "--format",
            choices=FORMAT_CHOICES,
            default="table",
            help="Report format. Default: table"
        )
        parser.add_argument(
            "--by-directory",
            choices=DIRECTORY_SORT_CHOICES,
            default=None,
            dest="by_directory",
            help=DIRECTORY_SORT_HELP_TEXT
        )
        parser.add_argument(
            "--lang",
            choices=LANGUAGE_CHOICES,
            default="en",
            help="Report language. Default: en"
        )

        # Detection options
        parser.add_argument(
            "--algorithm",
            choices=ALGORITHM_CHOICES,
            default="dual",
            help=ALGORITHM_HELP_TEXT
        )
        parser.add_argument(
            "--verify",
            action="store_true",
            help="Compare group members byte by byte before reporting them as duplicates"
        )

        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress non-essential output"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show progress and debug logging"
        )
        return parser

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        return CLIApplication.build_parser().parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if not args.directory:
            CLIApplication.build_parser().print_help(sys.stdout)
            sys.exit(1)

        root_path = Path(args.directory)
        if not root_path.exists() or not root_path.is_dir():
            self.error_exit(self.translator.tr("invalid_directory"))

        if args.quiet and args.verbose:
            self.warning("--quiet and --verbose both given; using --verbose")

    def create_params(self, args: argparse.Namespace) -> ScanParams:
        """Create ScanParams from CLI arguments."""
        try:
            return ScanParams.from_extension_string(
                root_dir=args.directory,
                extensions_str=args.ext,
                algorithm=ALGORITHM_ALIASES[args.algorithm],
                verify=args.verify,
            )
        except ConfigurationError as e:
            self.error_exit(f"Parameter error: {e}")

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.verbose:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(
                f"\r  [{stage}] {current}/{total} ({percent:.1f}%)"
            )
        else:
            sys.stderr.write(f"\r  [{stage}] {current} files processed...")
        sys.stderr.flush()

    def run_scan(self, params: ScanParams) -> ScanResult:
        """Execute the scan; traversal failures are fatal."""
        command = ScanCommand()
        try:
            result = command.execute(
                params,
                progress_callback=self.progress_callback if self.verbose else None
            )
        except TraversalError as e:
            self.error_exit(self.translator.tr("traversal_failed").format(error=e))
        except ConfigurationError:
            self.error_exit(self.translator.tr("invalid_directory"))

        if self.verbose:
            sys.stderr.write("\n")

        for path, error in result.errors.items():
            self.warning(f"Could not read {path}: {error}")

        return result

    def build_report(self, result: ScanResult, args: argparse.Namespace) -> List[str]:
        if args.format == "json":
            return render_json(result)

        builder = ReportBuilder(self.translator)
        lines = builder.build(result)
        if args.by_directory:
            summaries = summarize_directories(result.groups, DIRECTORY_SORT_ALIASES[args.by_directory])
            lines = lines + [""] + builder.directory_lines(summaries)
        return lines

    def open_output(self, output_path: Optional[str]) -> Optional[TextIO]:
        """Open the report file, or return None to use stdout."""
        if not output_path:
            return None
        try:
            output = open(output_path, "w", encoding="utf-8")
        except OSError:
            self.warning(self.translator.tr("output_open_failed"))
            return None
        self.info(self.translator.tr("saving_report").format(path=output_path))
        return output

    def info(self, message: str) -> None:
        if not self.quiet:
            print(message)

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv=None) -> None:
        """Main entry point."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet and not args.verbose
        self.translator = DictTranslator(args.lang)

        if self.verbose:
            logging.getLogger().setLevel(logging.DEBUG)

        self.validate_args(args)
        params = self.create_params(args)
        result = self.run_scan(params)
        lines = self.build_report(result, args)

        output = self.open_output(args.output)
        if output is None:
            StreamSink(sys.stdout).write_lines(lines)
        else:
            with output:
                StreamSink(output).write_lines(lines)
            self.info(self.translator.tr("report_saved"))

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\n✅ Completed in {elapsed:.2f} seconds", file=sys.stderr)


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)")
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
