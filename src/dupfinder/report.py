"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

report.py
Turns scan results into report lines and writes them to a sink.
Report generation never knows whether the lines end up on the console or in a file.
"""
import json
import re
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Set, TextIO

from dupfinder.core.interfaces import ReportSink, TranslatorProtocol
from dupfinder.core.models import DuplicateGroup, ScanResult, ScanStats, DirectorySortOrder
from dupfinder.finder import build_find_result
from dupfinder.services.file_service import FileService
from dupfinder.utils.convert_utils import ConvertUtils

GROUP_WIDTH = 10
SIZE_WIDTH = 20
HASH_WIDTH = 35
SEPARATOR = "-" * 150


# =============================
# Sinks
# =============================

class StreamSink(ReportSink):
    """Writes lines to any text stream (sys.stdout, an opened file, io.StringIO)."""

    def __init__(self, stream: TextIO):
        self.stream = stream

    def write_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.stream.write(line + "\n")
        self.stream.flush()


class ListSink(ReportSink):
    """Keeps lines in memory."""

    def __init__(self):
        self.lines: List[str] = []

    def write_lines(self, lines: Iterable[str]) -> None:
        self.lines.extend(lines)


# =============================
# Directory summary
# =============================

@dataclass
class DirectorySummary:
    path: str
    files: List[str] = field(default_factory=list)
    group_ids: Set[int] = field(default_factory=set)
    total_bytes: int = 0

    @property
    def file_count(self) -> int:
        return len(self.files)


def directory_of(file_path: str) -> str:
    """Parent directory with '/' separators; '/' for bare file names."""
    parts = re.split(r"[/\\]", file_path)
    return "/".join(parts[:-1]) if len(parts) > 1 else "/"


def summarize_directories(
        groups: List[DuplicateGroup],
        sort_by: DirectorySortOrder = DirectorySortOrder.COUNT
) -> List[DirectorySummary]:
    """
    Aggregates duplicate-group members per directory.
    Group ids follow the order of `groups`, starting at 1.
    """
    summaries = {}
    for group_id, group in enumerate(groups, 1):
        for file in group.files:
            dir_path = directory_of(file.path)
            summary = summaries.setdefault(dir_path, DirectorySummary(path=dir_path))
            summary.files.append(file.path)
            summary.group_ids.add(group_id)
            summary.total_bytes += file.size

    result = list(summaries.values())
    if sort_by == DirectorySortOrder.NAME:
        result.sort(key=lambda s: s.path)
    elif sort_by == DirectorySortOrder.SIZE:
        result.sort(key=lambda s: s.total_bytes, reverse=True)
    else:
        result.sort(key=lambda s: s.file_count, reverse=True)
    return result


# =============================
# Report builder
# =============================

class ReportBuilder:
    """
    Builds the plain-text report: statistics block, then the duplicate table
    (or a single "no duplicates" line).

    Args:
        translator: Label lookup
        size_lookup: Returns the current size of a path; used for the table rows
    """

    def __init__(self, translator: TranslatorProtocol,
                 size_lookup: Callable[[str], int] = FileService.get_size):
        self.translator = translator
        self.size_lookup = size_lookup

    def stats_lines(self, stats: ScanStats) -> List[str]:
        tr = self.translator.tr
        return [
            tr("stats_header"),
            f"{tr('total_files')}: {stats.total_files}",
            f"{tr('processed_files')}: {stats.processed_files}",
            f"{tr('duplicate_groups')}: {stats.duplicate_groups}",
            f"{tr('total_space')}: {ConvertUtils.bytes_to_mb(stats.total_bytes)}",
            f"{tr('duplicate_space')}: {ConvertUtils.bytes_to_mb(stats.wasted_bytes)}",
            f"{tr('reclaimable_space')}: {ConvertUtils.bytes_to_mb(stats.wasted_bytes)}",
            "",
        ]

    def table_lines(self, groups: List[DuplicateGroup]) -> List[str]:
        tr = self.translator.tr
        if not groups:
            return [tr("no_duplicates")]

        lines = [
            f"{tr('col_group'):<{GROUP_WIDTH}}{tr('col_size'):<{SIZE_WIDTH}}"
            f"{tr('col_hash'):<{HASH_WIDTH}}{tr('col_file')}",
            SEPARATOR,
        ]
        for group_number, group in enumerate(groups, 1):
            for index, file in enumerate(group.files):
                number_cell = str(group_number) if index == 0 else ""
                hash_cell = group.digest if index == 0 else ""
                size_cell = ConvertUtils.bytes_to_mb(self.size_lookup(file.path))
                lines.append(
                    f"{number_cell:<{GROUP_WIDTH}}{size_cell:<{SIZE_WIDTH}}"
                    f"{hash_cell:<{HASH_WIDTH}}{file.path}"
                )
            lines.append("")
        return lines

    def build(self, result: ScanResult) -> List[str]:
        return self.stats_lines(result.stats) + self.table_lines(result.groups)

    def directory_lines(self, summaries: List[DirectorySummary]) -> List[str]:
        tr = self.translator.tr
        if not summaries:
            return []

        lines = [
            tr("dir_header"),
            f"{tr('dir_col_files'):<10}{tr('dir_col_groups'):<10}{tr('dir_col_size'):<15}"
            f"{tr('dir_col_directory')}",
        ]
        for summary in summaries:
            display_path = tr("root_dir") if summary.path == "/" else summary.path
            lines.append(
                f"{summary.file_count:<10}{len(summary.group_ids):<10}"
                f"{ConvertUtils.bytes_to_human(summary.total_bytes):<15}{display_path}"
            )
        lines.append("")
        return lines


def render_json(result: ScanResult) -> List[str]:
    """The scan result in the structured shape used by the embeddable finder."""
    find_result = build_find_result(result.groups, result.stats)
    return json.dumps(find_result.to_dict(), indent=2, ensure_ascii=False).splitlines()
