"""Menu bar and context menu layouts, and the actions their items trigger."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto


class MenuAction(Enum):
    """Actions that a menu item can trigger."""

    NONE = auto()
    # File menu
    NEW_FILE = auto()
    OPEN_FILE = auto()
    OPEN_FOLDER = auto()
    SAVE = auto()
    SAVE_AS = auto()
    SAVE_ALL = auto()
    CLOSE_FILE = auto()
    CLOSE_ALL = auto()
    EXIT = auto()
    # Edit menu
    UNDO = auto()
    REDO = auto()
    CUT = auto()
    COPY = auto()
    PASTE = auto()
    SELECT_ALL = auto()
    FIND = auto()
    REPLACE = auto()
    # View menu
    TOGGLE_FILE_EXPLORER = auto()
    TOGGLE_TERMINAL = auto()
    TOGGLE_OUTPUT = auto()
    ZOOM_IN = auto()
    ZOOM_OUT = auto()
    RESET_ZOOM = auto()
    # Run menu
    BUILD = auto()
    RUN = auto()
    TEST = auto()
    CLEAN = auto()
    # Tools menu
    TOGGLE_SPECIALIZED_TOOLS = auto()
    COMMAND_PALETTE = auto()
    SETTINGS = auto()
    FORMAT_DOCUMENT = auto()
    GO_TO_LINE = auto()
    # Help menu
    SHOW_DOCUMENTATION = auto()
    SHOW_SHORTCUTS = auto()
    CHECK_UPDATES = auto()
    ABOUT = auto()


@dataclass(frozen=True)
class MenuItem:
    """A clickable entry; items without a behaviour yet carry MenuAction.NONE."""

    label: str
    action: MenuAction = MenuAction.NONE


@dataclass(frozen=True)
class Menu:
    """A titled menu; None entries stand for separators."""

    title: str
    items: tuple[MenuItem | None, ...]

    def entries(self) -> Iterator[MenuItem]:
        """The clickable items, separators skipped."""
        return (item for item in self.items if item is not None)

    def action_for(self, label: str) -> MenuAction:
        """The action of the item with this label."""
        for item in self.entries():
            if item.label == label:
                return item.action
        raise KeyError(label)


_A = MenuAction
_SEP = None


def menu_bar() -> tuple[Menu, ...]:
    """The main window's menus, left to right."""
    return (
        Menu(
            "File",
            (
                MenuItem("New File", _A.NEW_FILE),
                MenuItem("Open File...", _A.OPEN_FILE),
                MenuItem("Open Folder...", _A.OPEN_FOLDER),
                _SEP,
                MenuItem("Save", _A.SAVE),
                MenuItem("Save As...", _A.SAVE_AS),
                MenuItem("Save All", _A.SAVE_ALL),
                _SEP,
                MenuItem("Close File", _A.CLOSE_FILE),
                MenuItem("Close All", _A.CLOSE_ALL),
                _SEP,
                MenuItem("Exit", _A.EXIT),
            ),
        ),
        Menu(
            "Edit",
            (
                MenuItem("Undo", _A.UNDO),
                MenuItem("Redo", _A.REDO),
                _SEP,
                MenuItem("Cut", _A.CUT),
                MenuItem("Copy", _A.COPY),
                MenuItem("Paste", _A.PASTE),
                _SEP,
                MenuItem("Select All", _A.SELECT_ALL),
                MenuItem("Find...", _A.FIND),
                MenuItem("Replace...", _A.REPLACE),
            ),
        ),
        Menu(
            "View",
            (
                MenuItem("File Explorer", _A.TOGGLE_FILE_EXPLORER),
                MenuItem("Terminal", _A.TOGGLE_TERMINAL),
                MenuItem("Output Panel", _A.TOGGLE_OUTPUT),
                _SEP,
                MenuItem("Zoom In", _A.ZOOM_IN),
                MenuItem("Zoom Out", _A.ZOOM_OUT),
                MenuItem("Reset Zoom", _A.RESET_ZOOM),
            ),
        ),
        Menu(
            "Run",
            (
                MenuItem("Build Project", _A.BUILD),
                MenuItem("Run Project", _A.RUN),
                MenuItem("Test Project", _A.TEST),
                _SEP,
                MenuItem("Clean Build", _A.CLEAN),
            ),
        ),
        Menu(
            "Tools",
            (
                MenuItem("🔧 Specialized Tools", _A.TOGGLE_SPECIALIZED_TOOLS),
                _SEP,
                MenuItem("Command Palette", _A.COMMAND_PALETTE),
                MenuItem("Settings", _A.SETTINGS),
                _SEP,
                MenuItem("Format Document", _A.FORMAT_DOCUMENT),
                MenuItem("Go to Line...", _A.GO_TO_LINE),
            ),
        ),
        Menu(
            "Help",
            (
                MenuItem("Documentation", _A.SHOW_DOCUMENTATION),
                MenuItem("Keyboard Shortcuts", _A.SHOW_SHORTCUTS),
                _SEP,
                MenuItem("Check for Updates", _A.CHECK_UPDATES),
                MenuItem("About", _A.ABOUT),
            ),
        ),
    )


def editor_context_items() -> Menu:
    """Right-click menu of the editor."""
    return Menu(
        "Context",
        (
            MenuItem("Cut", _A.CUT),
            MenuItem("Copy", _A.COPY),
            MenuItem("Paste", _A.PASTE),
            _SEP,
            MenuItem("Select All", _A.SELECT_ALL),
            _SEP,
            MenuItem("Go to Line...", _A.GO_TO_LINE),
            MenuItem("Format Document", _A.FORMAT_DOCUMENT),
        ),
    )


def file_context_items() -> Menu:
    """Right-click menu of the file explorer."""
    return Menu(
        "File Context",
        (
            MenuItem("Open", _A.OPEN_FILE),
            _SEP,
            MenuItem("New File", _A.NEW_FILE),
            MenuItem("New Folder"),
            _SEP,
            MenuItem("Rename"),
            MenuItem("Delete"),
        ),
    )