"""Error types raised or reported during input resolution."""

from __future__ import annotations

from pathlib import Path


def _reason(cause: BaseException) -> str:
    if isinstance(cause, OSError) and cause.strerror:
        return cause.strerror
    return str(cause)


class ResolutionError(Exception):
    """Base class for all input resolution errors."""


class PathResolutionError(ResolutionError):
    """
    A raw path string could not be canonicalized (missing path, permission
    denied, broken or looping symlink chain).
    """

    def __init__(self, raw: str, cause: BaseException) -> None:
        self.raw: str = raw
        self.cause: BaseException = cause
        super().__init__(f"{raw} -- {_reason(cause)}")


class DirectoryReadError(ResolutionError):
    """The contents of a directory could not be listed."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        self.path: Path = path
        self.cause: BaseException = cause
        super().__init__(f"Cannot read directory {path}: {_reason(cause)}")


class EntryReadError(ResolutionError):
    """A single directory entry could not be inspected."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        self.path: Path = path
        self.cause: BaseException = cause
        super().__init__(f"Cannot read entry {path}: {_reason(cause)}")


class ArgumentConflictError(ResolutionError, ValueError):
    """A line range was requested together with more than one input."""
