"""Editable text buffer with a line/column cursor, and the editor colour theme."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path

RGB = tuple[int, int, int]


@dataclass(frozen=True)
class IdTheme:
    """Colours used by the IDE, as RGB triples."""

    background: RGB = (30, 30, 30)
    text: RGB = (220, 220, 220)
    selection: RGB = (80, 120, 200)
    cursor: RGB = (255, 255, 255)
    line_numbers: RGB = (120, 120, 120)
    status_bar: RGB = (40, 40, 40)
    menu_bar: RGB = (50, 50, 50)
    border: RGB = (60, 60, 60)


def _text_lines(content: str) -> list[str]:
    """Split text into lines; a final line ending does not start a new line."""
    if not content:
        return []
    terminated = content.endswith("\n")
    parts = content.split("\n")
    last = parts.pop()
    lines = [part.removesuffix("\r") for part in parts]
    if not terminated:
        lines.append(last)
    return lines


@dataclass
class FileBuffer:
    """Text of one file together with its cursor and modification state."""

    path: Path | None = None
    content: str = ""
    modified: bool = False
    cursor_line: int = 0
    cursor_column: int = 0
    scroll_offset: float = 0.0

    @classmethod
    def from_file(cls, path: str | PathLike, content: str) -> FileBuffer:
        """A clean buffer holding the given file's content."""
        return cls(path=Path(path), content=content)

    def get_lines(self) -> list[str]:
        """The buffer's lines; an empty buffer has one empty line."""
        if not self.content:
            return [""]
        return _text_lines(self.content)

    def insert_char(self, c: str) -> None:
        """Insert a character at the cursor and advance the cursor."""
        new_lines = []
        for i, line in enumerate(_text_lines(self.content)):
            if i == self.cursor_line:
                if self.cursor_column <= len(line):
                    line = line[: self.cursor_column] + c + line[self.cursor_column :]
                    self.cursor_column += 1
                else:
                    line += c
                    self.cursor_column = len(line)
            new_lines.append(line)
        self.content = "\n".join(new_lines)
        self.modified = True

    def insert_newline(self) -> None:
        """Split the current line at the cursor and move to the new line."""
        new_lines: list[str] = []
        for i, line in enumerate(_text_lines(self.content)):
            if i == self.cursor_line:
                split = min(self.cursor_column, len(line))
                new_lines.append(line[:split])
                new_lines.append(line[split:])
                self.cursor_line += 1
                self.cursor_column = 0
            else:
                new_lines.append(line)
        if not new_lines:
            new_lines = ["", ""]
            self.cursor_line = 1
            self.cursor_column = 0
        self.content = "\n".join(new_lines)
        self.modified = True

    def delete_char(self) -> None:
        """Delete the character before the cursor, joining lines at a line start."""
        new_lines: list[str] = []
        for i, line in enumerate(_text_lines(self.content)):
            if i == self.cursor_line:
                if 0 < self.cursor_column <= len(line):
                    line = line[: self.cursor_column - 1] + line[self.cursor_column :]
                    self.cursor_column -= 1
                elif self.cursor_column == 0 and i > 0 and new_lines:
                    self.cursor_column = len(new_lines[-1])
                    new_lines[-1] += line
                    self.cursor_line -= 1
                    continue
            new_lines.append(line)
        if new_lines:
            self.content = "\n".join(new_lines)
            self.modified = True

    def move_cursor_left(self) -> None:
        """Move left, wrapping to the end of the previous line."""
        if self.cursor_column > 0:
            self.cursor_column -= 1
        elif self.cursor_line > 0:
            self.cursor_line -= 1
            lines = _text_lines(self.content)
            if self.cursor_line < len(lines):
                self.cursor_column = len(lines[self.cursor_line])

    def move_cursor_right(self) -> None:
        """Move right, wrapping to the start of the next line."""
        lines = _text_lines(self.content)
        if self.cursor_line < len(lines):
            if self.cursor_column < len(lines[self.cursor_line]):
                self.cursor_column += 1
            elif self.cursor_line + 1 < len(lines):
                self.cursor_line += 1
                self.cursor_column = 0

    def move_cursor_up(self) -> None:
        """Move up one line, keeping the column within the line."""
        if self.cursor_line > 0:
            self.cursor_line -= 1
            lines = _text_lines(self.content)
            if self.cursor_line < len(lines):
                self.cursor_column = min(self.cursor_column, len(lines[self.cursor_line]))

    def move_cursor_down(self) -> None:
        """Move down one line, keeping the column within the line."""
        lines = _text_lines(self.content)
        if self.cursor_line + 1 < len(lines):
            self.cursor_line += 1
            self.cursor_column = min(self.cursor_column, len(lines[self.cursor_line]))

    def get_display_name(self) -> str:
        """File name for tabs and titles, with a star when modified."""
        if self.path is None:
            name = "Untitled"
        else:
            name = self.path.name
            if not name or name == "..":
                name = "Unknown"
        return f"{name} *" if self.modified else name