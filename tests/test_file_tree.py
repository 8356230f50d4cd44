from pathlib import Path

import pytest

from xylux.file_tree import FileTree, file_icon


@pytest.fixture
def tree_dir(tmp_path):
    (tmp_path / "b_dir").mkdir()
    (tmp_path / "a_dir").mkdir()
    (tmp_path / "a_dir" / "inner.toml").write_text("")
    (tmp_path / "a_dir" / "sub").mkdir()
    (tmp_path / "z.rs").write_text("fn main() {}")
    (tmp_path / "c.txt").write_text("notes")
    return tmp_path


@pytest.mark.parametrize(
    ("name", "icon"),
    [
        ("main.rs", "🦀"),
        ("Cargo.toml", "⚙️"),
        ("data.json", "📋"),
        ("photo.PNG", "🖼️"),
        ("song.ogg", "🎵"),
        ("archive.gz", "📦"),
        ("tool.exe", "⚡"),
        ("README", "📄"),
        ("odd.unknown", "📄"),
    ],
)
def test_file_icon(name, icon):
    assert file_icon(name) == icon


def test_entries_folders_first_then_by_name(tree_dir):
    tree = FileTree(tree_dir)
    entries = tree.entries()
    assert [e.name for e in entries] == ["a_dir", "b_dir", "c.txt", "z.rs"]
    assert [e.is_dir for e in entries] == [True, True, False, False]
    assert entries[0].icon == "📁"
    assert entries[3].icon == "🦀"
    assert all(e.children == () for e in entries)


def test_toggle_expands_and_collapses(tree_dir):
    tree = FileTree(tree_dir)
    assert tree.toggle(tree_dir / "a_dir") is True
    expanded = tree.entries()[0]
    assert expanded.expanded
    assert expanded.icon == "📂"
    assert {c.name for c in expanded.children} == {"inner.toml", "sub"}
    sub = next(c for c in expanded.children if c.name == "sub")
    assert sub.is_dir and sub.icon == "📁"
    assert tree.toggle(tree_dir / "a_dir") is False
    assert tree.entries()[0].children == ()


def test_select_marks_entry(tree_dir):
    tree = FileTree(tree_dir)
    opened = tree.select(tree_dir / "z.rs")
    assert opened == tree_dir / "z.rs"
    assert tree.selected_file == tree_dir / "z.rs"
    selected = [e.name for e in tree.entries() if e.selected]
    assert selected == ["z.rs"]


def test_set_root_directory_clears_state(tree_dir):
    tree = FileTree(tree_dir)
    tree.toggle(tree_dir / "a_dir")
    tree.select(tree_dir / "c.txt")
    tree.set_root_directory(tree_dir / "a_dir")
    assert tree.root_directory == tree_dir / "a_dir"
    assert tree.expanded_dirs == set()
    assert tree.selected_file is None


def test_go_up_moves_to_parent(tree_dir):
    tree = FileTree(tree_dir / "a_dir")
    tree.toggle(tree_dir / "a_dir" / "sub")
    tree.go_up()
    assert tree.root_directory == tree_dir
    assert tree.expanded_dirs == set()


def test_go_up_at_filesystem_root_stays():
    root = Path(Path.cwd().anchor)
    tree = FileTree(root)
    tree.go_up()
    assert tree.root_directory == root


def test_missing_directory_has_no_entries(tmp_path):
    tree = FileTree(tmp_path / "missing")
    assert tree.entries() == []


def test_default_root_is_current_directory():
    assert FileTree().root_directory == Path.cwd()