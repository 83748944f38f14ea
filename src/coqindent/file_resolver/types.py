"""Configuration and result types for input resolution."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from coqindent.file_resolver.defaults import SOURCE_EXTENSION, STDIN_MARKER, TOOL_NAME


@dataclass
class FileResolverConfig:
    """
    Configuration for input resolution.

    `exclude` holds raw path strings; each is canonicalized independently and
    entries that do not resolve exclude nothing. `tool_name` determines the
    ignore file name (e.g., `.coqindentignore`).
    """

    tool_name: str = TOOL_NAME
    extension: str = SOURCE_EXTENSION
    exclude: list[str] = field(default_factory=list)
    respect_ignore_file: bool = True


class PathKind(Enum):
    """What a path names at the moment it is checked."""

    FILE = "file"
    DIR = "dir"
    OTHER = "other"
    MISSING = "missing"


@dataclass(frozen=True)
class Visit:
    """One classified candidate: a regular file, or a directory that was expanded."""

    path: Path
    is_dir: bool = False


@dataclass(frozen=True)
class Input:
    """A unit of work for the indenter: standard input, or one canonical file."""

    path: Path | None = None

    @classmethod
    def stdin(cls) -> Input:
        return cls(None)

    @classmethod
    def file(cls, path: Path) -> Input:
        return cls(path)

    @property
    def is_stdin(self) -> bool:
        return self.path is None

    def __str__(self) -> str:
        return STDIN_MARKER if self.path is None else str(self.path)


class ResolvedInputs:
    """
    Deduplicated, unordered set of inputs. `len()` counts the stdin marker
    along with resolved files, which is what line-range validation needs.
    """

    def __init__(self, files: Iterable[Path] = (), *, stdin: bool = False) -> None:
        self._files: frozenset[Path] = frozenset(files)
        self._stdin: bool = stdin

    @property
    def stdin(self) -> bool:
        return self._stdin

    @property
    def files(self) -> frozenset[Path]:
        return self._files

    def inputs(self) -> frozenset[Input]:
        items = {Input.file(p) for p in self._files}
        if self._stdin:
            items.add(Input.stdin())
        return frozenset(items)

    def __iter__(self) -> Iterator[Input]:
        return iter(self.inputs())

    def __len__(self) -> int:
        return len(self._files) + (1 if self._stdin else 0)

    def __contains__(self, item: object) -> bool:
        return item in self.inputs()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResolvedInputs):
            return NotImplemented
        return self._files == other._files and self._stdin == other._stdin

    def __hash__(self) -> int:
        return hash((self._files, self._stdin))

    def __repr__(self) -> str:
        return f"ResolvedInputs(files={sorted(self._files)!r}, stdin={self._stdin!r})"
