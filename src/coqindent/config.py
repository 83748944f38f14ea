"""
TOML-based config file loading for coqindent.

Searches for `.coqindent.toml`, `coqindent.toml`, or `pyproject.toml [tool.coqindent]`
walking up from the current directory. Config values are merged with CLI flags
using three-way precedence: explicit CLI flags > config file > built-in defaults.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, TypeVar, cast

if sys.version_info >= (3, 11):
    import tomllib  # pyright: ignore[reportUnreachable]
else:
    import tomli as tomllib  # type: ignore[no-redef]  # pyright: ignore[reportUnreachable]


@dataclass
class CoqIndentConfig:
    """
    Parsed config from a TOML file. Fields are `None` when not set in the config,
    allowing the merge logic to distinguish "not configured" from "explicitly set
    to default value".

    Relative `exclude` entries are anchored at the config file's directory.
    """

    exclude: list[str] | None = None
    check: bool | None = None
    respect_ignore_file: bool | None = None


# Config file search order (first match wins within each directory level)
_CONFIG_FILENAMES = [".coqindent.toml", "coqindent.toml", "pyproject.toml"]

# Mapping from TOML kebab-case keys to Python snake_case field names
_KEBAB_TO_SNAKE: dict[str, str] = {
    "respect-ignore-file": "respect_ignore_file",
}

_VALID_FIELDS = {f.name for f in fields(CoqIndentConfig)}


def find_config_file(start_dir: Path) -> Path | None:
    """
    Walk up from `start_dir` looking for a config file. Returns the first
    found, or `None`. Search order per directory: `.coqindent.toml` >
    `coqindent.toml` > `pyproject.toml` (only if it has `[tool.coqindent]`).
    """
    current = start_dir.resolve()
    while True:
        for filename in _CONFIG_FILENAMES:
            candidate = current / filename
            if candidate.is_file():
                if filename == "pyproject.toml":
                    if _pyproject_has_coqindent_section(candidate):
                        return candidate
                else:
                    return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def _pyproject_has_coqindent_section(path: Path) -> bool:
    """Check if a pyproject.toml has a [tool.coqindent] section."""
    try:
        data = tomllib.loads(path.read_text())
        return "coqindent" in data.get("tool", {})
    except (tomllib.TOMLDecodeError, OSError):
        return False


def load_config(config_path: Path) -> CoqIndentConfig:
    """
    Load a `CoqIndentConfig` from a TOML file. Supports both standalone
    `coqindent.toml` / `.coqindent.toml` and `pyproject.toml` (extracts
    `[tool.coqindent]`). TOML kebab-case keys are mapped to Python snake_case.
    """
    data = tomllib.loads(config_path.read_text())

    if config_path.name == "pyproject.toml":
        data = data.get("tool", {}).get("coqindent", {})

    config = _parse_config_data(data)
    if config.exclude is not None:
        base = config_path.resolve().parent
        config.exclude = [str(base / entry) for entry in config.exclude]
    return config


def _parse_config_data(data: dict[str, Any]) -> CoqIndentConfig:
    """Parse a flat or sectioned TOML dict into CoqIndentConfig."""
    # Flatten sections, e.g. [file-discovery] merges into top level
    flat: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, dict):
            for sub_key, sub_value in cast(dict[str, Any], value).items():
                flat[sub_key] = sub_value
        else:
            flat[key] = value

    mapped: dict[str, Any] = {}
    for key, value in flat.items():
        snake_key = _KEBAB_TO_SNAKE.get(key, key.replace("-", "_"))
        if snake_key in _VALID_FIELDS:
            mapped[snake_key] = value

    return CoqIndentConfig(**mapped)


_T = TypeVar("_T")


def merge_cli_with_config(
    cli_opts: _T,
    config: CoqIndentConfig | None,
    explicit_flags: set[str],
) -> _T:
    """
    Merge CLI options with config file settings.

    Precedence: explicit CLI flags > config file > built-in defaults.
    `exclude` is additive: config entries are appended to the CLI's.
    """
    if config is None:
        return cli_opts

    for cfg_field in fields(CoqIndentConfig):
        cfg_value = getattr(config, cfg_field.name)
        if cfg_value is None:
            continue

        if cfg_field.name == "exclude":
            current = getattr(cli_opts, "exclude", None) or []
            setattr(cli_opts, "exclude", [*current, *cfg_value])
            continue

        if cfg_field.name in explicit_flags:
            continue

        if hasattr(cli_opts, cfg_field.name):
            setattr(cli_opts, cfg_field.name, cfg_value)

    return cli_opts
