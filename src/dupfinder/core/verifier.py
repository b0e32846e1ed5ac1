"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/verifier.py
Optional confirmation pass: splits a hash group into sub-groups whose members
are byte-identical, so a digest collision is never reported as a duplicate.
"""

import logging
from typing import Callable, List

from dupfinder.core.models import DuplicateGroup, FileRecord

logger = logging.getLogger(__name__)


def split_by_content(
        group: DuplicateGroup,
        compare: Callable[[FileRecord, FileRecord], bool]
) -> List[DuplicateGroup]:
    """
    Partition `group` by `compare` (True when two records have equal content).
    Each member is compared against the first member of every existing
    partition, so scan order is preserved inside partitions.
    Partitions with a single member are dropped.
    """
    partitions: List[List[FileRecord]] = []
    for record in group.files:
        for partition in partitions:
            if compare(partition[0], record):
                partition.append(record)
                break
        else:
            partitions.append([record])

    if len(partitions) > 1:
        logger.warning(f"Digest collision in group {group.digest}: {len(partitions)} distinct contents")

    return [
        DuplicateGroup(digest=group.digest, files=partition)
        for partition in partitions
        if len(partition) >= 2
    ]


def verify_groups(
        groups: List[DuplicateGroup],
        compare: Callable[[FileRecord, FileRecord], bool]
) -> List[DuplicateGroup]:
    verified = []
    for group in groups:
        verified.extend(split_by_content(group, compare))
    return verified
