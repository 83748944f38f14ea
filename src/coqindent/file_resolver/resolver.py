"""
FileResolver: main entry point for input resolution.

Resolves a mix of files, directories and the stdin marker into a deduplicated,
unordered set of inputs, applying the configured exclusions.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

from coqindent.file_resolver.defaults import STDIN_MARKER
from coqindent.file_resolver.errors import PathResolutionError, ResolutionError
from coqindent.file_resolver.filesystem import FileSystem, OsFileSystem
from coqindent.file_resolver.ignore import load_tool_ignore
from coqindent.file_resolver.normalizer import PathNormalizer
from coqindent.file_resolver.traversal import TraversalEngine
from coqindent.file_resolver.types import FileResolverConfig, ResolvedInputs


class FileResolver:
    """
    Canonicalizes inputs and exclusions, then drains a `TraversalEngine`.

    Inputs that cannot be canonicalized are dropped and passed to
    `on_warning`. Exclusion entries that cannot be canonicalized are dropped
    silently. Traversal read errors go to `on_error`.
    """

    def __init__(
        self,
        config: FileResolverConfig | None = None,
        *,
        fs: FileSystem | None = None,
        cwd: Path | None = None,
    ) -> None:
        self._config: FileResolverConfig = config if config is not None else FileResolverConfig()
        self._fs: FileSystem = fs if fs is not None else OsFileSystem()
        self._normalizer: PathNormalizer = PathNormalizer(self._fs)
        self._cwd: Path | None = cwd

    def excluded_paths(self) -> frozenset[Path]:
        """Canonical exclusion set from the config and the tool ignore file."""
        raw = list(self._config.exclude)
        if self._config.respect_ignore_file:
            start = self._cwd if self._cwd is not None else Path.cwd()
            raw.extend(load_tool_ignore(self._config.tool_name, start))
        return frozenset(self._normalizer.normalize_all(raw))

    def resolve(
        self,
        inputs: Iterable[str],
        *,
        on_warning: Callable[[PathResolutionError], None] | None = None,
        on_error: Callable[[ResolutionError], None] | None = None,
    ) -> ResolvedInputs:
        """
        Resolve raw input strings. `-` becomes the stdin marker; every other
        entry is canonicalized and traversed.
        """
        raw_inputs = set(inputs)
        stdin = STDIN_MARKER in raw_inputs
        raw_inputs.discard(STDIN_MARKER)

        candidates = self._normalizer.normalize_all(sorted(raw_inputs), on_error=on_warning)
        engine = TraversalEngine(
            candidates,
            self.excluded_paths(),
            fs=self._fs,
            extension=self._config.extension,
            on_error=on_error,
        )
        return ResolvedInputs(engine, stdin=stdin)
