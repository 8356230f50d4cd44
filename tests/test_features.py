import stat

from xylux.features import (
    available_build_tools,
    available_language_servers,
    has_clipboard,
    has_debug,
    has_network,
)


def _make_executable(directory, name):
    target = directory / name
    target.write_text("")
    target.chmod(target.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


def test_default_features_enabled():
    assert has_clipboard() is True
    assert has_network() is True


def test_debug_enabled_under_assertions():
    assert has_debug() is True


def test_language_servers_without_alux(tmp_path, monkeypatch):
    monkeypatch.setenv("PATH", str(tmp_path))
    assert available_language_servers() == ["rust-analyzer"]


def test_language_servers_with_alux(tmp_path, monkeypatch):
    _make_executable(tmp_path, "alux-lsp")
    monkeypatch.setenv("PATH", str(tmp_path))
    assert available_language_servers() == ["rust-analyzer", "alux-lsp"]


def test_no_build_tools(tmp_path, monkeypatch):
    monkeypatch.setenv("PATH", str(tmp_path))
    assert available_build_tools() == []


def test_build_tools_found(tmp_path, monkeypatch):
    for name in ("cargo", "xylux", "wasm-pack"):
        _make_executable(tmp_path, name)
    monkeypatch.setenv("PATH", str(tmp_path))
    assert available_build_tools() == ["cargo", "xylux-cli", "wasm-pack"]


def test_build_tools_partial(tmp_path, monkeypatch):
    _make_executable(tmp_path, "wasm-pack")
    monkeypatch.setenv("PATH", str(tmp_path))
    assert available_build_tools() == ["wasm-pack"]