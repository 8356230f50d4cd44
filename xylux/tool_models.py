"""Data shown by the specialised Rust and Alux tool panels."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from pathlib import Path


class BuildTargetType(Enum):
    """Kind of Cargo build target."""

    BINARY = "binary"
    LIBRARY = "library"
    EXAMPLE = "example"
    TEST = "test"
    BENCHMARK = "benchmark"

    @property
    def icon(self) -> str:
        return {
            BuildTargetType.BINARY: "🎯",
            BuildTargetType.LIBRARY: "📚",
            BuildTargetType.EXAMPLE: "📝",
            BuildTargetType.TEST: "🧪",
            BuildTargetType.BENCHMARK: "📊",
        }[self]


class TestStatus(Enum):
    """Outcome of one test."""

    __test__ = False

    PASSED = "passed"
    FAILED = "failed"
    IGNORED = "ignored"
    RUNNING = "running"

    @property
    def icon(self) -> str:
        return {
            TestStatus.PASSED: "✅",
            TestStatus.FAILED: "❌",
            TestStatus.IGNORED: "⏭️",
            TestStatus.RUNNING: "⏳",
        }[self]

    @property
    def color(self) -> str:
        return {
            TestStatus.PASSED: "green",
            TestStatus.FAILED: "red",
            TestStatus.IGNORED: "yellow",
            TestStatus.RUNNING: "blue",
        }[self]


class ClippySeverity(Enum):
    """Severity of a Clippy diagnostic."""

    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"
    HELP = "help"

    @property
    def icon(self) -> str:
        return {
            ClippySeverity.ERROR: "❌",
            ClippySeverity.WARNING: "⚠️",
            ClippySeverity.NOTE: "ℹ️",
            ClippySeverity.HELP: "💡",
        }[self]

    @property
    def color(self) -> str:
        return {
            ClippySeverity.ERROR: "red",
            ClippySeverity.WARNING: "yellow",
            ClippySeverity.NOTE: "blue",
            ClippySeverity.HELP: "green",
        }[self]


class AluxVisibility(Enum):
    """Visibility of an Alux function."""

    PUBLIC = "public"
    PRIVATE = "private"
    MODULE = "module"


class AluxScope(Enum):
    """Scope of an Alux variable."""

    GLOBAL = "global"
    FUNCTION = "function"
    BLOCK = "block"
    MODULE = "module"


class AluxErrorType(Enum):
    """Kind of Alux diagnostic."""

    SYNTAX_ERROR = "syntax_error"
    TYPE_ERROR = "type_error"
    NAME_ERROR = "name_error"
    RUNTIME_ERROR = "runtime_error"
    WARNING = "warning"

    @property
    def icon(self) -> str:
        return {
            AluxErrorType.SYNTAX_ERROR: "❌",
            AluxErrorType.TYPE_ERROR: "🔢",
            AluxErrorType.NAME_ERROR: "📛",
            AluxErrorType.RUNTIME_ERROR: "💥",
            AluxErrorType.WARNING: "⚠️",
        }[self]

    @property
    def color(self) -> str:
        return "yellow" if self is AluxErrorType.WARNING else "red"


@dataclass
class CargoInfo:
    """Package metadata of a Cargo project."""

    project_name: str = ""
    version: str = ""
    authors: list[str] = field(default_factory=list)
    edition: str = ""
    features: list[str] = field(default_factory=list)
    manifest_path: Path | None = None


@dataclass
class CrateDependency:
    """A dependency declared by the project."""

    name: str
    version: str
    features: list[str] = field(default_factory=list)
    optional: bool = False
    dev_dependency: bool = False


@dataclass
class BuildTarget:
    """A binary, library or other Cargo target."""

    name: str
    target_type: BuildTargetType
    path: Path
    features: list[str] = field(default_factory=list)


@dataclass
class TestResult:
    """Result of running one test."""

    __test__ = False

    name: str
    status: TestStatus
    duration: timedelta = timedelta(0)
    output: str = ""


@dataclass
class ClippyWarning:
    """A Clippy diagnostic at a file position."""

    file: Path
    line: int
    column: int
    message: str
    lint_name: str
    severity: ClippySeverity


@dataclass
class RustfmtConfig:
    """Formatter settings."""

    edition: str = ""
    max_width: int = 0
    tab_spaces: int = 0
    use_small_heuristics: bool = False
    newline_style: str = ""


@dataclass
class RustTools:
    """Everything the Rust panel shows."""

    cargo_info: CargoInfo = field(default_factory=CargoInfo)
    dependencies: list[CrateDependency] = field(default_factory=list)
    build_targets: list[BuildTarget] = field(default_factory=list)
    test_results: list[TestResult] = field(default_factory=list)
    clippy_warnings: list[ClippyWarning] = field(default_factory=list)
    rustfmt_config: RustfmtConfig = field(default_factory=RustfmtConfig)


@dataclass
class AluxScriptInfo:
    """Metadata of an Alux script."""

    script_name: str = ""
    version: str = ""
    author: str = ""
    description: str = ""
    entry_point: Path | None = None
    dependencies: list[str] = field(default_factory=list)


@dataclass
class AluxModule:
    """An Alux module with its exports and imports."""

    name: str
    path: Path
    exports: list[str] = field(default_factory=list)
    imports: list[str] = field(default_factory=list)
    line_count: int = 0


@dataclass
class AluxParameter:
    """A parameter of an Alux function."""

    name: str
    param_type: str
    default_value: str | None = None

    @property
    def signature(self) -> str:
        """The parameter as written: name, type and any default."""
        text = f"{self.name}: {self.param_type}"
        return text if self.default_value is None else f"{text} = {self.default_value}"


@dataclass
class AluxFunction:
    """An Alux function definition."""

    name: str
    parameters: list[AluxParameter] = field(default_factory=list)
    return_type: str = ""
    visibility: AluxVisibility = AluxVisibility.PRIVATE
    line: int = 0
    module: str = ""


@dataclass
class AluxVariable:
    """An Alux variable and its current value."""

    name: str
    var_type: str
    value: str
    scope: AluxScope
    line: int = 0
    mutable: bool = False

    @property
    def mutability_icon(self) -> str:
        return "🔄" if self.mutable else "🔒"


@dataclass
class AluxSyntaxError:
    """A diagnostic in an Alux file."""

    file: Path
    line: int
    column: int
    message: str
    error_type: AluxErrorType
    suggestion: str | None = None


@dataclass
class AluxRuntimeInfo:
    """Statistics of the Alux runtime."""

    memory_usage: int = 0
    execution_time: timedelta = timedelta(0)
    active_objects: int = 0
    call_stack_depth: int = 0
    gc_collections: int = 0


@dataclass
class AluxTools:
    """Everything the Alux panel shows."""

    script_info: AluxScriptInfo = field(default_factory=AluxScriptInfo)
    modules: list[AluxModule] = field(default_factory=list)
    functions: list[AluxFunction] = field(default_factory=list)
    variables: list[AluxVariable] = field(default_factory=list)
    syntax_errors: list[AluxSyntaxError] = field(default_factory=list)
    runtime_info: AluxRuntimeInfo = field(default_factory=AluxRuntimeInfo)