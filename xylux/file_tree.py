"""File explorer tree: directory listing, expansion and selection."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

_ICONS = {
    "rs": "🦀",
    "toml": "⚙️",
    "json": "📋",
    "md": "📄",
    "txt": "📄",
    "png": "🖼️",
    "jpg": "🖼️",
    "jpeg": "🖼️",
    "gif": "🖼️",
    "mp3": "🎵",
    "wav": "🎵",
    "ogg": "🎵",
    "mp4": "🎬",
    "avi": "🎬",
    "mkv": "🎬",
    "zip": "📦",
    "tar": "📦",
    "gz": "📦",
    "exe": "⚡",
    "bin": "⚡",
}

DEFAULT_ICON = "📄"
FOLDER_ICON = "📁"
OPEN_FOLDER_ICON = "📂"


def file_icon(path: str | PathLike) -> str:
    """Icon for a file, chosen by its extension."""
    return _ICONS.get(Path(path).suffix[1:].lower(), DEFAULT_ICON)


def _default_root() -> Path:
    try:
        return Path.cwd()
    except OSError:
        return Path(".")


def _list_dir(directory: Path) -> list[Path]:
    try:
        return list(directory.iterdir())
    except OSError:
        return []


@dataclass(frozen=True)
class TreeEntry:
    """One row of the tree."""

    path: Path
    name: str
    is_dir: bool
    icon: str
    expanded: bool = False
    selected: bool = False
    children: tuple[TreeEntry, ...] = ()


@dataclass
class FileTree:
    """Explorer rooted at one directory, with expanded folders and a selected file."""

    root_directory: Path = field(default_factory=_default_root)
    expanded_dirs: set[Path] = field(default_factory=set)
    selected_file: Path | None = None

    def __post_init__(self) -> None:
        self.root_directory = Path(self.root_directory)

    def set_root_directory(self, path: str | PathLike) -> None:
        """Show another directory, collapsing everything and clearing the selection."""
        self.root_directory = Path(path)
        self.expanded_dirs.clear()
        self.selected_file = None

    def entries(self) -> list[TreeEntry]:
        """Top-level entries, folders first, each group by name; expanded folders list their contents."""
        paths = sorted(_list_dir(self.root_directory), key=lambda p: (not p.is_dir(), p.name))
        return [self._top_entry(p) for p in paths]

    def _top_entry(self, path: Path) -> TreeEntry:
        name = path.name or "?"
        if path.is_dir():
            expanded = path in self.expanded_dirs
            children = tuple(self._child_entry(p) for p in sorted(_list_dir(path))) if expanded else ()
            icon = OPEN_FOLDER_ICON if expanded else FOLDER_ICON
            return TreeEntry(path, name, True, icon, expanded=expanded, children=children)
        return TreeEntry(path, name, False, file_icon(path), selected=path == self.selected_file)

    def _child_entry(self, path: Path) -> TreeEntry:
        name = path.name or "?"
        if path.is_dir():
            return TreeEntry(path, name, True, FOLDER_ICON)
        return TreeEntry(path, name, False, file_icon(path), selected=path == self.selected_file)

    def toggle(self, path: str | PathLike) -> bool:
        """Expand or collapse a folder; returns whether it is now expanded."""
        path = Path(path)
        if path in self.expanded_dirs:
            self.expanded_dirs.discard(path)
            return False
        self.expanded_dirs.add(path)
        return True

    def select(self, path: str | PathLike) -> Path:
        """Select a file and return it as the file to open."""
        self.selected_file = Path(path)
        return self.selected_file

    def go_up(self) -> None:
        """Move the root to its parent directory, if it has one."""
        parent = self.root_directory.parent
        if parent != self.root_directory:
            self.set_root_directory(parent)