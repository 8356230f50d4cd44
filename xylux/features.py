"""Runtime feature and tool detection."""

from __future__ import annotations

import shutil

CLIPBOARD_ENABLED = True
NETWORK_ENABLED = True
DEBUG_ENABLED = False


def has_clipboard() -> bool:
    """Whether clipboard support is available."""
    return CLIPBOARD_ENABLED


def has_network() -> bool:
    """Whether network features are available."""
    return NETWORK_ENABLED


def has_debug() -> bool:
    """Whether debug features are enabled."""
    return DEBUG_ENABLED or __debug__


def available_language_servers() -> list[str]:
    """Language servers the IDE can use."""
    servers = ["rust-analyzer"]
    if shutil.which("alux-lsp") is not None:
        servers.append("alux-lsp")
    return servers


def available_build_tools() -> list[str]:
    """Build tools found on PATH."""
    candidates = (("cargo", "cargo"), ("xylux", "xylux-cli"), ("wasm-pack", "wasm-pack"))
    return [label for command, label in candidates if shutil.which(command) is not None]