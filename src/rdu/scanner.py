"""Disk scanning functionality for rdu."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Union

from rdu.errors import (
    DirectoryExpectedError,
    FileExpectedError,
    MetadataUnavailableError,
    PathNotFoundError,
    SubtreeUnreadableError,
)
from rdu.models import SizeRecord

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def expand_path(path: str) -> Path:
    """Expand ~ and environment variables in path."""
    return Path(os.path.expanduser(os.path.expandvars(path)))


def normalize_path_arg(path: str, windows: Optional[bool] = None) -> str:
    """Rewrite path separators to the host platform convention.

    ``/`` becomes ``\\`` on Windows and ``\\`` becomes ``/`` everywhere else.
    """
    if windows is None:
        windows = os.name == "nt"
    if windows:
        return path.replace("/", "\\")
    return path.replace("\\", "/")


def get_file_size(path: PathLike, depth: int = 0) -> SizeRecord:
    """
    Get the size of a single regular file.

    Args:
        path: Path to a regular file
        depth: Depth of the file relative to the scan root

    Returns:
        SizeRecord for the file

    Raises:
        FileExpectedError: path is a directory, missing, or not a regular file
        MetadataUnavailableError: the file's metadata could not be read
    """
    path = Path(path)
    if not path.is_file():
        raise FileExpectedError(str(path))

    try:
        size = path.stat().st_size
    except OSError as e:
        raise MetadataUnavailableError(str(path), e.strerror or str(e)) from e

    return SizeRecord(path=str(path), size=size, depth=depth)


def _list_dir(path: Path) -> list[os.DirEntry]:
    """List the immediate children of a directory, closing the handle before returning."""
    try:
        with os.scandir(path) as entries:
            return list(entries)
    except OSError as e:
        raise SubtreeUnreadableError(str(path), e.strerror or str(e)) from e


@dataclass
class _DirFrame:
    """A directory whose children are still being visited."""

    path: Path
    depth: int
    entries: list
    key: tuple[int, int]
    index: int = 0
    total: int = 0


def _dir_key(st: os.stat_result) -> tuple[int, int]:
    """Identity of a directory on disk."""
    return st.st_dev, st.st_ino


def walk_directory(path: PathLike, depth: int = 0) -> tuple[list[SizeRecord], int]:
    """
    Calculate the size of a directory and everything beneath it.

    Children are visited depth-first with an explicit stack. Each directory's
    own record is emitted after the records of all of its children.
    Unreadable subdirectories and files are logged and skipped, so the
    totals of their parents are undercounted rather than the scan failing.
    Symbolic links are followed; a link back to a directory that is still
    being visited is skipped with a warning.

    Args:
        path: Directory to scan
        depth: Depth assigned to the directory itself

    Returns:
        Tuple of (records, total_bytes)

    Raises:
        DirectoryExpectedError: path is not a directory
        SubtreeUnreadableError: path itself cannot be listed
    """
    root = Path(path)
    if not root.is_dir():
        raise DirectoryExpectedError(str(root))

    records: list[SizeRecord] = []
    try:
        root_key = _dir_key(root.stat())
    except OSError as e:
        raise SubtreeUnreadableError(str(root), e.strerror or str(e)) from e
    stack = [_DirFrame(root, depth, _list_dir(root), root_key)]

    while stack:
        frame = stack[-1]

        if frame.index >= len(frame.entries):
            # All children visited: close out this directory
            stack.pop()
            records.append(
                SizeRecord(path=str(frame.path), size=frame.total, depth=frame.depth, is_dir=True)
            )
            if stack:
                stack[-1].total += frame.total
            continue

        entry = frame.entries[frame.index]
        frame.index += 1
        child = Path(entry.path)
        child_depth = frame.depth + 1

        try:
            is_dir = entry.is_dir()
            is_file = not is_dir and entry.is_file()
            key = _dir_key(entry.stat()) if is_dir else None
        except OSError as e:
            logger.warning("Skipping %s: %s", child, e)
            continue

        if is_dir:
            ancestor = next((f for f in stack if f.key == key), None)
            if ancestor is not None:
                logger.warning("Skipping %s: links back to %s", child, ancestor.path)
                continue
            try:
                entries = _list_dir(child)
            except SubtreeUnreadableError as e:
                logger.warning("Skipping subtree: %s", e)
                continue
            stack.append(_DirFrame(child, child_depth, entries, key))
        elif is_file:
            try:
                record = get_file_size(child, child_depth)
            except (FileExpectedError, MetadataUnavailableError) as e:
                logger.warning("Skipping file: %s", e)
                continue
            frame.total += record.size
            records.append(record)
        elif entry.is_symlink():
            logger.debug("Skipping broken symlink %s", child)
        else:
            logger.debug("Skipping special file %s", child)

    return records, records[-1].size


def filter_by_depth(records: Iterable[SizeRecord], max_depth: int) -> list[SizeRecord]:
    """Keep only records at or above max_depth, preserving order."""
    return [r for r in records if r.depth <= max_depth]


def sort_records(records: Iterable[SizeRecord], sort: bool = True) -> list[SizeRecord]:
    """Order records by ascending size (stable) when sort is set."""
    if not sort:
        return list(records)
    return sorted(records, key=lambda r: r.size)


def get_disk_usage(path: PathLike, max_depth: int = 0) -> list[SizeRecord]:
    """
    Get disk usage for a file or directory.

    A directory is walked in full and the records deeper than max_depth are
    dropped afterwards, so directory totals always include everything beneath
    them. A file yields a single record at depth 0.

    Args:
        path: File or directory to measure
        max_depth: Deepest level to report (0 = root only)

    Returns:
        List of SizeRecords in traversal order
    """
    path = Path(path)

    if path.is_dir():
        records, total = walk_directory(path)
        logger.debug("Scanned %s: %d entries, %d bytes", path, len(records), total)
        return filter_by_depth(records, max_depth)

    if not path.exists():
        raise PathNotFoundError(str(path))

    return [get_file_size(path, 0)]
