# xylux

This package is the non-graphical core of an editor for Rust projects
and Alux scripts. It has no user interface of its own. It provides the
models and helpers that an interface is built on.

## Modules

- `xylux.buffer`: `FileBuffer` holds a file's content, the cursor
  (line and column, counted from 0) and a modified flag. It can insert
  and delete characters and line breaks, move the cursor, and give a
  display name such as `"main.rs *"`. `IdTheme` holds the editor colours
  as RGB triples.
- `xylux.file_tree`: `FileTree` lists a root directory with folders
  first, each group sorted by name. It remembers which folders are
  expanded (`toggle`) and which file is selected (`select`), and it can
  move to the parent directory (`go_up`). `entries()` returns `TreeEntry`
  rows, and an expanded folder lists its children in them. `file_icon`
  chooses an icon from a file's extension.
- `xylux.statusbar`: `StatusBar` holds the status message, the current
  file, the cursor position, the modified state, the file type, the
  encoding and the line ending. `render()` returns all of this as one
  line of text. `StatusInfo` summarises a buffer, with the cursor
  counted from 1 and the line and character totals.
  `detect_file_type` maps an extension to a language name. An extension
  it does not know is returned in upper case.
- `xylux.menu`: the `MenuAction` enum. `menu_bar()` returns the File,
  Edit, View, Run, Tools and Help menus. `editor_context_items()` and
  `file_context_items()` return the right-click menus. Each is a `Menu`
  of `MenuItem`s, with `None` standing for a separator, and
  `Menu.action_for(label)` looks up an item's action.
- `xylux.tool_models`: records for the Rust and Alux panels, such as
  `CargoInfo`, `CrateDependency`, `BuildTarget`, `TestResult`,
  `ClippyWarning`, `AluxModule`, `AluxFunction` and `AluxSyntaxError`,
  and the enums they use.
- `xylux.tools`: `ToolsWindow` holds the tool panels' visibility flags
  and data. `update_rust_tools_from_project` and
  `update_alux_tools_from_project` fill the panels from a project
  object (anything with `name` and `config_path`) and the list of open
  files. Without a project they fall back to built-in sample data.
- `xylux.utils`: project detection (`is_rust_project`,
  `is_xylux_project`, `find_project_root`), `format_file_size` and
  `escape_text`.
- `xylux.features`: `has_clipboard`, `has_network`, `has_debug`, and the
  language servers and build tools found on `PATH`
  (`available_language_servers`, `available_build_tools`).

## Examples

```python
from xylux.utils import find_project_root, format_file_size, escape_text

root = find_project_root("game/src/deep")  # Path of the nearest project folder, or None
format_file_size(1536)                      # "1.5 KB"
escape_text("a\tb\nc")                      # "a→b⏎c"
```

```python
from xylux.buffer import FileBuffer

buf = FileBuffer.from_file("main.rs", "fn main() {}")
buf.insert_char("x")
buf.get_display_name()   # "main.rs *"
buf.get_lines()          # ["xfn main() {}"]
```

```python
from xylux.statusbar import StatusBar, detect_file_type

detect_file_type("lib.rs")      # "Rust"
detect_file_type("config.yml")  # "YAML"

bar = StatusBar()
bar.set_current_file("src/main.rs")
bar.file_type                   # "Rust"
```

```python
from xylux.menu import MenuAction, menu_bar

file_menu = menu_bar()[0]
file_menu.action_for("Save") is MenuAction.SAVE   # True
```

## What it does not do

- It draws no windows and has no command to start. Rendering, input
  handling and dialogs are left to the program that uses it.
- It does not read or write files for the editor. `FileBuffer` works
  on text that it is given.
- It does not run builds, tests or language servers. The tool panels
  show data that is passed to them, or sample data.
- `xylux.platforms` is empty. No per-platform configuration or data
  directories, terminal size or raw-mode helpers are included.

## Requirements

Python 3.10 or later. The package uses only the standard library.
Install the `test` extra to run the tests with pytest.