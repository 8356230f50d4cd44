from datetime import timedelta
from pathlib import Path

from xylux import tool_models as tm


def _warning(severity):
    return tm.ClippyWarning(
        file=Path("src/lib.rs"),
        line=1,
        column=1,
        message="msg",
        lint_name="clippy::lint",
        severity=severity,
    )


def _alux_error(error_type):
    return tm.AluxSyntaxError(
        file=Path("main.alux"),
        line=1,
        column=1,
        message="msg",
        error_type=error_type,
        suggestion=None,
    )


def test_rust_tools_defaults_are_empty():
    tools = tm.RustTools()
    assert tools.dependencies == []
    assert tools.build_targets == []
    assert tools.test_results == []
    assert tools.clippy_warnings == []
    assert tools.cargo_info == tm.CargoInfo()
    assert tools.cargo_info.manifest_path is None
    assert tools.rustfmt_config.max_width == 0


def test_default_lists_not_shared():
    first = tm.RustTools()
    second = tm.RustTools()
    first.dependencies.append(tm.CrateDependency("egui", "0.28"))
    assert second.dependencies == []
    a = tm.AluxTools()
    b = tm.AluxTools()
    a.script_info.dependencies.append("core")
    assert b.script_info.dependencies == []


def test_alux_tools_defaults():
    tools = tm.AluxTools()
    assert tools.modules == []
    assert tools.runtime_info.execution_time == timedelta(0)
    assert tools.script_info.entry_point is None


def test_build_target_icons():
    def icon(kind):
        return tm.BuildTarget("t", kind, Path("src/t.rs")).target_type.icon

    assert icon(tm.BuildTargetType.BINARY) == "🎯"
    assert icon(tm.BuildTargetType.LIBRARY) == "📚"
    assert icon(tm.BuildTargetType.BENCHMARK) == "📊"


def test_test_status_icons_and_colors():
    passed = tm.TestResult("ok", tm.TestStatus.PASSED).status
    failed = tm.TestResult("bad", tm.TestStatus.FAILED).status
    assert passed.icon == "✅"
    assert passed.color == "green"
    assert failed.icon == "❌"
    assert failed.color == "red"


def test_clippy_severity_icons():
    assert _warning(tm.ClippySeverity.WARNING).severity.icon == "⚠️"
    assert _warning(tm.ClippySeverity.HELP).severity.icon == "💡"


def test_alux_error_colors():
    assert _alux_error(tm.AluxErrorType.WARNING).error_type.color == "yellow"
    others = set(tm.AluxErrorType) - {tm.AluxErrorType.WARNING}
    assert {_alux_error(e).error_type.color for e in others} == {"red"}
    assert _alux_error(tm.AluxErrorType.NAME_ERROR).error_type.icon == "📛"


def test_parameter_signature():
    plain = tm.AluxParameter("speed", "float")
    with_default = tm.AluxParameter("speed", "float", "1.0")
    assert plain.signature == "speed: float"
    assert with_default.signature == "speed: float = 1.0"


def test_variable_mutability_icon():
    mutable = tm.AluxVariable("x", "int", "1", tm.AluxScope.GLOBAL, mutable=True)
    frozen = tm.AluxVariable("x", "int", "1", tm.AluxScope.GLOBAL)
    assert mutable.mutability_icon == "🔄"
    assert frozen.mutability_icon == "🔒"


def test_records_hold_values():
    target = tm.BuildTarget("main", tm.BuildTargetType.BINARY, Path("src/main.rs"))
    assert target.path == Path("src/main.rs")
    assert target.features == []
    result = tm.TestResult("it_works", tm.TestStatus.IGNORED)
    assert result.duration == timedelta(0)
    assert result.output == ""
    dep = tm.CrateDependency("eframe", "0.28")
    assert dep.optional is False and dep.dev_dependency is False