"""Status bar state and file type detection."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path

_FILE_TYPES = {
    "rs": "Rust",
    "toml": "TOML",
    "json": "JSON",
    "md": "Markdown",
    "txt": "Plain Text",
    "py": "Python",
    "js": "JavaScript",
    "ts": "TypeScript",
    "html": "HTML",
    "css": "CSS",
    "xml": "XML",
    "yaml": "YAML",
    "yml": "YAML",
    "sh": "Shell Script",
    "bat": "Batch File",
    "ps1": "PowerShell",
    "c": "C",
    "cpp": "C++",
    "cxx": "C++",
    "cc": "C++",
    "h": "C/C++ Header",
    "hpp": "C/C++ Header",
    "java": "Java",
    "go": "Go",
    "php": "PHP",
    "rb": "Ruby",
    "swift": "Swift",
    "kt": "Kotlin",
    "cs": "C#",
    "fs": "F#",
    "scala": "Scala",
    "clj": "Clojure",
    "hs": "Haskell",
    "elm": "Elm",
    "ex": "Elixir",
    "exs": "Elixir",
    "erl": "Erlang",
    "lua": "Lua",
    "r": "R",
    "m": "MATLAB",
    "sql": "SQL",
    "dockerfile": "Dockerfile",
}

PLAIN_TEXT = "Plain Text"


def detect_file_type(path: str | PathLike) -> str:
    """Human-readable language name for a file, from its extension."""
    suffix = Path(path).suffix
    if not suffix:
        return PLAIN_TEXT
    extension = suffix[1:]
    return _FILE_TYPES.get(extension.lower(), extension.upper())


@dataclass
class StatusBar:
    """What the status bar shows: message, file, cursor and file properties."""

    status_message: str = "Ready"
    current_file: Path | None = None
    cursor_position: tuple[int, int] = (1, 1)
    is_modified: bool = False
    file_type: str = PLAIN_TEXT
    encoding: str = "UTF-8"
    line_ending: str = "LF"

    def set_current_file(self, path: str | PathLike | None) -> None:
        """Show a new file and update the file type to match it."""
        self.current_file = None if path is None else Path(path)
        self.file_type = PLAIN_TEXT if path is None else detect_file_type(path)

    def render(self) -> str:
        """The status bar as one line of text: left part, then right part."""
        left = [self.status_message]
        if self.current_file is not None:
            name = self.current_file.name or "Unknown"
            left.append(f"{name} ●" if self.is_modified else name)
        right = []
        if self.is_modified:
            right.append("Modified")
        line, column = self.cursor_position
        right.extend([f"Ln {line}, Col {column}", self.file_type, self.encoding, self.line_ending])
        return f"{' | '.join(left)}    {' | '.join(right)}"


def _count_lines(content: str) -> int:
    if not content:
        return 0
    return content.count("\n") + (0 if content.endswith("\n") else 1)


@dataclass
class StatusInfo:
    """Summary of a buffer for display, with 1-based cursor coordinates."""

    message: str = "Ready"
    file_path: Path | None = None
    cursor_line: int = 1
    cursor_column: int = 1
    is_modified: bool = False
    total_lines: int = 1
    total_characters: int = 0
    selection_length: int = 0

    def update_from_buffer(
        self, content: str, cursor_line: int, cursor_column: int, is_modified: bool
    ) -> None:
        """Take cursor (0-based), modification state and text counts from a buffer."""
        self.cursor_line = cursor_line + 1
        self.cursor_column = cursor_column + 1
        self.is_modified = is_modified
        self.total_lines = max(_count_lines(content), 1)
        self.total_characters = len(content)