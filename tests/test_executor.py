"""Tests for test executor."""

import logging

import pytest

from litetest.discovery import TargetScanner
from litetest.model import FailureKind, Outcome, TestUnit
from litetest.runner import TestExecutor


@pytest.fixture
def executor() -> TestExecutor:
    return TestExecutor()


@pytest.fixture
def fault_units(scanner: TargetScanner) -> dict[str, TestUnit]:
    """Fresh units from the faults sample, keyed by method name."""
    return {u.method_name: u for u in scanner.enumerate("fault_pkg.faults")}


def test_passing_method_is_passed(executor: TestExecutor, fault_units) -> None:
    """A method that returns normally passes."""
    unit = fault_units["check_passes"]

    assert executor.run(unit) is True
    assert unit.outcome is Outcome.PASSED
    assert unit.failure is None
    assert unit.completed_at is not None


def test_assert_helper_failure_is_assertion(executor: TestExecutor, fault_units) -> None:
    """A failed litetest assertion is classified as an assertion failure."""
    unit = fault_units["check_assert_helper"]

    executor.run(unit)

    assert unit.outcome is Outcome.FAILED
    assert unit.failure.kind is FailureKind.ASSERTION
    assert unit.failure.error_type == "litetest.asserts.AssertFailed"
    assert "expected:<1> but was:<2>" in unit.failure.message
    assert "numbers differ" in unit.failure.message


def test_plain_assert_is_assertion(executor: TestExecutor, fault_units) -> None:
    """A bare assert statement also counts as an assertion failure."""
    unit = fault_units["check_plain_assert"]

    executor.run(unit)

    assert unit.failure.kind is FailureKind.ASSERTION
    assert unit.failure.error_type == "AssertionError"
    assert unit.failure.message == "plain assert"


def test_other_exception_is_unexpected_fault(executor: TestExecutor, fault_units) -> None:
    """Any other exception is an unexpected fault."""
    unit = fault_units["check_divides"]

    executor.run(unit)

    assert unit.outcome is Outcome.FAILED
    assert unit.failure.kind is FailureKind.UNEXPECTED
    assert unit.failure.error_type == "ZeroDivisionError"


def test_failure_frames(executor: TestExecutor, fault_units) -> None:
    """Relevant frames hold the test method and the raising frame; harness frames are dropped."""
    unit = fault_units["check_nested_fault"]

    executor.run(unit)

    relevant = unit.failure.relevant_frames
    assert len(relevant) == 2
    assert relevant[0].endswith("in check_nested_fault")
    assert relevant[1].endswith("in _explode")
    assert unit.failure.full_trace == relevant
    assert not any("executor.py" in frame for frame in unit.failure.full_trace)


def test_uninstantiable_class_stays_not_run(
    executor: TestExecutor, fault_units, caplog: pytest.LogCaptureFixture
) -> None:
    """A constructor failure is logged and the unit is left not-run."""
    unit = fault_units["check_never_runs"]

    with caplog.at_level(logging.ERROR, logger="litetest"):
        assert executor.run(unit) is False

    assert unit.outcome is Outcome.NOT_RUN
    assert unit.completed_at is None
    assert "Could not instantiate fault_pkg.faults.Unbuildable" in caplog.text


def test_fresh_instance_per_unit(executor: TestExecutor, fault_units) -> None:
    """Units of the same class never share an instance."""
    from fault_pkg.faults import Stateful

    before = Stateful.instances
    first, second = fault_units["check_first"], fault_units["check_second"]

    assert executor.run_all([first, second]) == 2

    assert first.passed and second.passed
    assert Stateful.instances - before == 2


def test_failure_does_not_stop_later_units(executor: TestExecutor, fault_units) -> None:
    """Every unit is run even when earlier ones fail."""
    units = sorted(fault_units.values())

    invoked = executor.run_all(units)

    assert invoked == len(units) - 1
    assert [u.method_name for u in units if not u.has_run] == ["check_never_runs"]


def test_unit_cannot_run_twice(executor: TestExecutor, fault_units) -> None:
    """An outcome is set exactly once."""
    unit = fault_units["check_passes"]
    executor.run(unit)

    with pytest.raises(RuntimeError, match="already passed"):
        executor.run(unit)


def test_system_exit_is_unexpected_fault(executor: TestExecutor, scanner: TargetScanner) -> None:
    """sys.exit() inside a test fails that unit and later units still run."""
    units = sorted(scanner.enumerate("fault_pkg.exits"))

    assert executor.run_all(units) == 2

    exiting, later = units
    assert exiting.outcome is Outcome.FAILED
    assert exiting.failure.kind is FailureKind.UNEXPECTED
    assert exiting.failure.error_type == "SystemExit"
    assert exiting.failure.message == "3"
    assert later.passed
