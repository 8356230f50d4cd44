"""Editor core for Rust and Alux projects: buffers, file tree, status bar, menus and tool panels."""

__version__ = "0.1.0"