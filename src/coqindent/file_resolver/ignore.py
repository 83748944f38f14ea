"""Tool-specific ignore file handling (`.coqindentignore`)."""

from __future__ import annotations

from pathlib import Path


def _read_ignore_file(path: Path) -> list[str] | None:
    """
    Read the non-blank, non-comment lines of an ignore file. Returns `None`
    if the file is missing, unreadable, not UTF-8, or has no entries.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None
    lines = [line.strip() for line in text.splitlines()]
    lines = [line for line in lines if line and not line.startswith("#")]
    return lines or None


def find_tool_ignore(tool_name: str, start_dir: Path) -> Path | None:
    """
    Walk up from `start_dir` looking for `.{tool_name}ignore` (e.g., `.coqindentignore`).
    Returns the first one found, or `None`.
    """
    ignore_name = f".{tool_name}ignore"
    current = start_dir.resolve()
    while True:
        candidate = current / ignore_name
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def load_tool_ignore(tool_name: str, start_dir: Path) -> list[str]:
    """
    Exclusion entries from the nearest tool ignore file, as path strings
    anchored at the ignore file's directory. Empty if there is none.
    """
    ignore_file = find_tool_ignore(tool_name, start_dir)
    if ignore_file is None:
        return []
    lines = _read_ignore_file(ignore_file)
    if not lines:
        return []
    return [str(ignore_file.parent / line) for line in lines]
