"""
Self-contained input resolution for coqindent.

Turns command-line inputs (files, directories, `-` for stdin) into a
deduplicated set of canonical `.v` files, honoring an exact-path exclusion
list. No imports from `coqindent` outside this package.

Usage::

    from coqindent.file_resolver import FileResolver, FileResolverConfig

    config = FileResolverConfig(exclude=["theories/Extracted"])
    resolver = FileResolver(config)
    inputs = resolver.resolve([".", "extra/Lemma.v", "-"])
"""

from coqindent.file_resolver.defaults import SOURCE_EXTENSION, STDIN_MARKER
from coqindent.file_resolver.errors import (
    ArgumentConflictError,
    DirectoryReadError,
    EntryReadError,
    PathResolutionError,
    ResolutionError,
)
from coqindent.file_resolver.filesystem import FileSystem, OsFileSystem
from coqindent.file_resolver.normalizer import PathNormalizer
from coqindent.file_resolver.resolver import FileResolver
from coqindent.file_resolver.traversal import TraversalEngine
from coqindent.file_resolver.types import (
    FileResolverConfig,
    Input,
    PathKind,
    ResolvedInputs,
    Visit,
)

__all__ = [
    "SOURCE_EXTENSION",
    "STDIN_MARKER",
    "ArgumentConflictError",
    "DirectoryReadError",
    "EntryReadError",
    "FileResolver",
    "FileResolverConfig",
    "FileSystem",
    "Input",
    "OsFileSystem",
    "PathKind",
    "PathNormalizer",
    "PathResolutionError",
    "ResolutionError",
    "ResolvedInputs",
    "TraversalEngine",
    "Visit",
]
