"""
Lazy, worklist-driven traversal of candidate paths.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

from coqindent.file_resolver.defaults import SOURCE_EXTENSION
from coqindent.file_resolver.errors import (
    DirectoryReadError,
    EntryReadError,
    PathResolutionError,
    ResolutionError,
)
from coqindent.file_resolver.filesystem import FileSystem, OsFileSystem
from coqindent.file_resolver.normalizer import PathNormalizer
from coqindent.file_resolver.types import PathKind, Visit


class TraversalEngine:
    """
    Produces every non-excluded regular file reachable from a set of canonical
    candidate paths, each exactly once and in no particular order.

    Directories are expanded one level at a time: their children go back into
    the worklist and are classified on later steps. During expansion only
    subdirectories and files ending in `extension` are kept. Excluded paths
    are matched by exact equality and are neither produced nor expanded.

    Read failures never escape. An unlistable directory counts as empty and an
    unreadable entry is skipped; both are reported to `on_error` if provided.

    The engine is a single-pass iterator and cannot be restarted.
    """

    def __init__(
        self,
        candidates: Iterable[Path],
        excludes: Iterable[Path] = (),
        *,
        fs: FileSystem | None = None,
        extension: str = SOURCE_EXTENSION,
        on_error: Callable[[ResolutionError], None] | None = None,
    ) -> None:
        self._fs: FileSystem = fs if fs is not None else OsFileSystem()
        self._normalizer: PathNormalizer = PathNormalizer(self._fs)
        self._excludes: frozenset[Path] = frozenset(excludes)
        self._extension: str = extension
        self._on_error: Callable[[ResolutionError], None] | None = on_error
        self._worklist: list[Path] = []
        # Everything ever pushed, so a path reached twice (or through a
        # symlink cycle) is only classified once.
        self._admitted: set[Path] = set()
        for path in candidates:
            self._admit(path)

    def __iter__(self) -> Iterator[Path]:
        return self

    def __next__(self) -> Path:
        while True:
            visit = self.step()
            if visit is None:
                raise StopIteration
            if not visit.is_dir:
                return visit.path

    def step(self) -> Visit | None:
        """
        Classify the next candidate. Returns a file visit, or a directory
        visit once its children have been queued, or `None` when the worklist
        is exhausted. Excluded, vanished and special paths are skipped.
        """
        while self._worklist:
            path = self._worklist.pop()
            if path in self._excludes:
                continue
            kind = self._fs.kind(path)
            if kind is PathKind.FILE:
                return Visit(path)
            if kind is PathKind.DIR:
                self._expand(path)
                return Visit(path, is_dir=True)
        return None

    def _expand(self, directory: Path) -> None:
        try:
            children = self._fs.list_dir(directory)
        except OSError as e:
            self._report(DirectoryReadError(directory, e))
            return

        for child in children:
            kind = self._fs.kind(child)
            if kind is PathKind.DIR or (
                kind is PathKind.FILE and child.suffix == self._extension
            ):
                try:
                    canonical = self._normalizer.normalize(child)
                except PathResolutionError as e:
                    self._report(EntryReadError(child, e.cause))
                    continue
                self._admit(canonical)

    def _admit(self, path: Path) -> None:
        if path not in self._admitted:
            self._admitted.add(path)
            self._worklist.append(path)

    def _report(self, error: ResolutionError) -> None:
        if self._on_error is not None:
            self._on_error(error)
