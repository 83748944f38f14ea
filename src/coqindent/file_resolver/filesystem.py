"""
Filesystem access used by input resolution.

Everything the resolver needs from the disk goes through the small
`FileSystem` protocol, so tests can drive traversal against an in-memory tree.
"""

from __future__ import annotations

import errno
import os
import stat
from pathlib import Path
from typing import Protocol

from coqindent.file_resolver.types import PathKind


class FileSystem(Protocol):
    """
    Read-only view of a filesystem.
    """

    def resolve(self, raw: str | Path) -> Path:
        """
        Return the canonical absolute form of `raw`, following symlinks.
        Raises `OSError` (or `ValueError` for malformed strings) if the path
        does not exist or cannot be resolved.
        """
        ...

    def kind(self, path: Path) -> PathKind:
        """Classify `path`, following symlinks. Never raises."""
        ...

    def list_dir(self, path: Path) -> list[Path]:
        """Return the direct children of `path`. Raises `OSError` on failure."""
        ...


class OsFileSystem:
    """`FileSystem` backed by the real operating system."""

    def resolve(self, raw: str | Path) -> Path:
        if str(raw) == "":
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), "")
        try:
            return Path(raw).resolve(strict=True)
        except RuntimeError as e:
            # Older Pythons report symlink loops as RuntimeError.
            raise OSError(errno.ELOOP, os.strerror(errno.ELOOP), str(raw)) from e

    def kind(self, path: Path) -> PathKind:
        try:
            mode = os.stat(path).st_mode
        except (OSError, ValueError):
            return PathKind.MISSING
        if stat.S_ISREG(mode):
            return PathKind.FILE
        if stat.S_ISDIR(mode):
            return PathKind.DIR
        return PathKind.OTHER

    def list_dir(self, path: Path) -> list[Path]:
        with os.scandir(path) as entries:
            return [path / entry.name for entry in entries]
