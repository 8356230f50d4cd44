"""Project detection and small text helpers."""

from __future__ import annotations

import math
import unicodedata
from os import PathLike
from pathlib import Path

_UNITS = ("B", "KB", "MB", "GB", "TB")
_THRESHOLD = 1024.0

_ESCAPES = {"\t": "→", "\r": "↵", "\n": "⏎"}


def is_rust_project(path: str | PathLike) -> bool:
    """Whether the directory looks like a Rust project."""
    root = Path(path)
    return (root / "Cargo.toml").exists() or (root / "src" / "main.rs").exists()


def is_xylux_project(path: str | PathLike) -> bool:
    """Whether the directory looks like a Xylux project."""
    root = Path(path)
    return (root / "xylux.toml").exists() or (root / "scripts").exists()


def find_project_root(path: str | PathLike) -> Path | None:
    """Walk up from the path to the nearest project directory, if any."""
    start = Path(path)
    for candidate in (start, *start.parents):
        if is_rust_project(candidate) or is_xylux_project(candidate):
            return candidate
    return None


def format_file_size(size: int) -> str:
    """Format a byte count in human-readable units."""
    if size == 0:
        return "0 B"
    value = float(size)
    unit_index = min(int(math.floor(math.log10(value) / math.log10(_THRESHOLD))), len(_UNITS) - 1)
    if unit_index == 0:
        return f"{size} {_UNITS[0]}"
    return f"{value / _THRESHOLD ** unit_index:.1f} {_UNITS[unit_index]}"


def _escape_char(c: str) -> str:
    if c in _ESCAPES:
        return _ESCAPES[c]
    if unicodedata.category(c) == "Cc":
        return f"\\u{ord(c):04x}"
    return c


def escape_text(text: str) -> str:
    """Make whitespace and control characters visible for terminal display."""
    return "".join(_escape_char(c) for c in text)