"""
Default values for input resolution.
"""

from __future__ import annotations

# Files discovered inside directories are only kept when they carry this suffix.
SOURCE_EXTENSION: str = ".v"

# Reserved input value meaning "read from standard input".
STDIN_MARKER: str = "-"

TOOL_NAME: str = "coqindent"
