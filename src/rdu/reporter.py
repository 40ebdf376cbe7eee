"""Disk usage reporting: scan, order and print."""

import logging

from rdu.display import show_records
from rdu.scanner import PathLike, get_disk_usage, sort_records

logger = logging.getLogger(__name__)


def log_disk_usage(
    path: PathLike,
    max_depth: int = 0,
    human_readable: bool = False,
    sort: bool = False,
) -> None:
    """
    Print disk usage for a file or directory.

    Args:
        path: File or directory to measure
        max_depth: Deepest level to report (0 = root only)
        human_readable: Show B/K/M/G units instead of raw bytes
        sort: Order lines by ascending size instead of traversal order
    """
    records = get_disk_usage(path, max_depth)
    logger.debug("Reporting %d records for %s", len(records), path)

    show_records(sort_records(records, sort), human_readable)
