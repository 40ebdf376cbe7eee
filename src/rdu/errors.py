"""Errors raised while measuring disk usage."""

from typing import Optional


class DiskUsageError(Exception):
    """Base class for rdu errors. Carries the offending path."""

    def __init__(self, path: str, message: Optional[str] = None) -> None:
        self.path = str(path)
        super().__init__(message or f"{self.__class__.__name__}: {self.path}")


class PathNotFoundError(DiskUsageError):
    """The requested root path does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(path, f"Path does not exist: {path}")


class DirectoryExpectedError(DiskUsageError):
    """A directory-only operation received a file or missing path."""

    def __init__(self, path: str) -> None:
        super().__init__(path, f"Not a directory: {path}")


class FileExpectedError(DiskUsageError):
    """A file-only operation received a directory or missing path."""

    def __init__(self, path: str) -> None:
        super().__init__(path, f"Not a regular file: {path}")


class MetadataUnavailableError(DiskUsageError):
    """File metadata could not be read."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(path, f"Cannot read metadata for {path}: {reason}")


class SubtreeUnreadableError(DiskUsageError):
    """A directory could not be listed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(path, f"Cannot read directory {path}: {reason}")
