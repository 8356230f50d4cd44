"""State of the specialised tools window for Rust and Alux development."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Any

from xylux.tool_models import (
    AluxModule,
    AluxScriptInfo,
    AluxTools,
    BuildTarget,
    BuildTargetType,
    CargoInfo,
    CrateDependency,
    RustTools,
)

_ALUX_EXTENSIONS = frozenset({".alux", ".alx"})


def _target_type(path: Path) -> BuildTargetType:
    if path.name == "lib.rs":
        return BuildTargetType.LIBRARY
    return BuildTargetType.BINARY


@dataclass
class ToolsWindow:
    """Panels and their data shown by the specialised tools window."""

    rust_tools: RustTools = field(default_factory=RustTools)
    alux_tools: AluxTools = field(default_factory=AluxTools)
    show_rust_panel: bool = True
    show_alux_panel: bool = True
    show_cargo_info: bool = True
    show_dependencies: bool = True
    show_build_targets: bool = False
    show_test_results: bool = False
    show_clippy_warnings: bool = True
    show_alux_modules: bool = True
    show_alux_functions: bool = False
    show_alux_variables: bool = False
    show_alux_errors: bool = True
    show_runtime_info: bool = False
    window_open: bool = False

    def toggle(self) -> None:
        """Open the window if closed, close it if open."""
        self.window_open = not self.window_open

    def update_rust_tools(self) -> None:
        """Fill the Rust panel with the built-in sample data."""
        self.rust_tools.cargo_info = CargoInfo(
            project_name="xylux-ide",
            version="0.1.0",
            authors=["Equipo Xylux"],
            edition="2021",
            features=["default", "clipboard"],
            manifest_path=Path("Cargo.toml"),
        )
        self.rust_tools.dependencies = [
            CrateDependency(name="eframe", version="0.28"),
            CrateDependency(name="egui", version="0.28"),
        ]

    def update_alux_tools(self) -> None:
        """Fill the Alux panel with the built-in sample data."""
        self.alux_tools.script_info = AluxScriptInfo(
            script_name="main",
            version="1.0.0",
            author="Developer",
            description="Main Alux script",
            entry_point=Path("main.alux"),
            dependencies=["core", "math"],
        )

    def update_rust_tools_from_project(
        self,
        project: Any | None,
        active_file: str | PathLike,
        open_files: Iterable[str | PathLike],
    ) -> None:
        """Describe the project's Rust side; without a project, use the sample data."""
        if project is None:
            self.update_rust_tools()
            return
        self.rust_tools.cargo_info = CargoInfo(
            project_name=project.name,
            version="0.1.0",
            authors=["Project Author"],
            edition="2021",
            features=["default"],
            manifest_path=project.config_path,
        )
        rust_files = (p for p in map(Path, open_files) if p.suffix == ".rs")
        self.rust_tools.build_targets = [
            BuildTarget(name=p.stem, target_type=_target_type(p), path=p) for p in rust_files
        ]

    def update_alux_tools_from_project(
        self,
        project: Any | None,
        active_file: str | PathLike,
        open_files: Iterable[str | PathLike],
    ) -> None:
        """Describe the project's Alux side; without a project, use the sample data."""
        if project is None:
            self.update_alux_tools()
            return
        files = [Path(p) for p in open_files]
        entry_point = next(
            (p for p in files if "main" in p.name and p.suffix == ".alux"),
            None,
        )
        self.alux_tools.script_info = AluxScriptInfo(
            script_name=project.name,
            version="1.0.0",
            author="Project Author",
            description="Alux script project",
            entry_point=entry_point,
            dependencies=["core", "math"],
        )
        self.alux_tools.modules = [
            AluxModule(
                name=p.stem,
                path=p,
                exports=["main", "init"],
                imports=["core", "math"],
                line_count=100,
            )
            for p in files
            if p.suffix in _ALUX_EXTENSIONS
        ]