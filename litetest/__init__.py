"""litetest - a minimal marker-based unit test runner.

Mark classes with ``@lite_class`` and test methods with ``@lite_test``,
then queue, execute and report them with a ``TestDriver``:

    driver = TestDriver("src", "myproject.tests")
    driver.run("parser", recurse=True)
"""

from pathlib import Path
from typing import Optional, TextIO, Union

from .asserts import (
    AssertFailed,
    assert_equals,
    assert_not_equals,
    assert_not_null,
    assert_null,
    assert_true,
    fail,
)
from .config import DriverConfig, load_config
from .markers import lite_class, lite_test
from .model import FailureDetail, FailureKind, Outcome, RunSummary, TestUnit
from .runner import RunState, TestDriver, TestExecutor


def run_tests(
    target: str = "",
    recurse: Optional[bool] = None,
    full_trace: Optional[bool] = None,
    require_type_marker: Optional[bool] = None,
    *,
    project_root: Optional[Union[str, Path]] = None,
    config_path: Optional[Union[str, Path]] = None,
    stream: Optional[TextIO] = None,
) -> Optional[RunSummary]:
    """Run the tests under ``target`` with a driver built from the project config.

    Returns:
        Summary of the run.
    """
    config = load_config(config_path, project_root)
    driver = TestDriver(project_root=project_root, config=config, stream=stream)
    return driver.run(target, recurse, full_trace, require_type_marker)


__all__ = [
    "AssertFailed",
    "DriverConfig",
    "FailureDetail",
    "FailureKind",
    "Outcome",
    "RunState",
    "RunSummary",
    "TestDriver",
    "TestExecutor",
    "TestUnit",
    "assert_equals",
    "assert_not_equals",
    "assert_not_null",
    "assert_null",
    "assert_true",
    "fail",
    "lite_class",
    "lite_test",
    "load_config",
    "run_tests",
]
