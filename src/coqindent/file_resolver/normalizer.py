"""Canonicalization of raw path strings."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

from coqindent.file_resolver.errors import PathResolutionError
from coqindent.file_resolver.filesystem import FileSystem, OsFileSystem


class PathNormalizer:
    """
    Turns raw, user-spelled paths into canonical absolute paths: symlinks
    followed, `.` and `..` removed. Canonical paths are the identity used for
    exclusion and deduplication, so a relative path, an absolute path and a
    symlink to the same file all normalize to the same value.
    """

    def __init__(self, fs: FileSystem | None = None) -> None:
        self._fs: FileSystem = fs if fs is not None else OsFileSystem()

    def normalize(self, raw: str | Path) -> Path:
        """
        Canonicalize `raw`. The path must exist.

        Raises `PathResolutionError` carrying the original string and the
        underlying cause.
        """
        try:
            return self._fs.resolve(raw)
        except (OSError, ValueError) as e:
            raise PathResolutionError(str(raw), e) from e

    def normalize_all(
        self,
        raws: Iterable[str | Path],
        on_error: Callable[[PathResolutionError], None] | None = None,
    ) -> set[Path]:
        """
        Canonicalize each entry, dropping the ones that fail. Failures are
        passed to `on_error` if given, otherwise ignored.
        """
        result: set[Path] = set()
        for raw in raws:
            try:
                result.add(self.normalize(raw))
            except PathResolutionError as e:
                if on_error is not None:
                    on_error(e)
        return result
