"""Tests for the result model."""

from datetime import datetime

import pytest

from litetest.model import FailureDetail, FailureKind, Outcome, RunSummary, TestUnit


class Owner:
    def check_a(self):
        pass

    def check_b(self):
        pass


class Other:
    def check_a(self):
        pass


def _raise_value_error():
    raise ValueError("bad value")


def test_identity_uses_class_method_and_req_id() -> None:
    """Units with the same key are equal and hash alike."""
    first = TestUnit(Owner, Owner.check_a, "REQ-1")
    second = TestUnit(Owner, Owner.check_a, "REQ-1")

    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1
    assert first != TestUnit(Owner, Owner.check_a, "REQ-2")


def test_ordering_is_lexicographic_on_key() -> None:
    """Units sort by class name, then method name, then requirement id."""
    units = [
        TestUnit(Owner, Owner.check_b),
        TestUnit(Owner, Owner.check_a, "REQ-2"),
        TestUnit(Other, Other.check_a),
        TestUnit(Owner, Owner.check_a, "REQ-1"),
    ]

    ordered = [(u.owner.__name__, u.method_name, u.req_id) for u in sorted(units)]

    assert ordered == [
        ("Other", "check_a", ""),
        ("Owner", "check_a", "REQ-1"),
        ("Owner", "check_a", "REQ-2"),
        ("Owner", "check_b", ""),
    ]


def test_class_name_is_module_qualified() -> None:
    unit = TestUnit(Owner, Owner.check_a)

    assert unit.class_name == f"{__name__}.Owner"
    assert unit.key == (f"{__name__}.Owner", "check_a", "")


def test_outcome_transitions_once() -> None:
    """An outcome leaves not-run exactly once and never reverts."""
    unit = TestUnit(Owner, Owner.check_a)
    assert unit.outcome is Outcome.NOT_RUN
    assert unit.short_result() == "check_a --> NOT RUN"

    unit.mark_passed()

    assert unit.short_result() == "check_a --> SUCCESS"
    with pytest.raises(RuntimeError):
        unit.mark_failed(FailureDetail(kind=FailureKind.UNEXPECTED, error_type="X"))
    assert unit.outcome is Outcome.PASSED


def test_stamp_format() -> None:
    unit = TestUnit(Owner, Owner.check_a)
    assert unit.stamp is None

    unit.completed_at = datetime(2016, 2, 20, 9, 5, 3)

    assert unit.stamp == "20160220_090503"


def test_failure_detail_from_exception() -> None:
    """Failure detail keeps type, message and frames."""
    try:
        _raise_value_error()
    except ValueError as e:
        detail = FailureDetail.from_exception(
            e, FailureKind.UNEXPECTED, "test_failure_detail_from_exception"
        )

    assert detail.error_type == "ValueError"
    assert detail.message == "bad value"
    assert detail.relevant_frames[0].endswith("in test_failure_detail_from_exception")
    assert detail.relevant_frames[-1].endswith("in _raise_value_error")
    assert detail.short_text().splitlines()[:2] == ["ValueError", "bad value"]
    assert detail.trace_text().splitlines()[2:] == detail.full_trace


def test_failure_detail_without_message() -> None:
    detail = FailureDetail(kind=FailureKind.ASSERTION, error_type="AssertionError")

    assert detail.short_text() == "AssertionError"


def test_run_summary_partitions() -> None:
    """Summary counts passed, failed and not-run units."""
    passed = TestUnit(Owner, Owner.check_a)
    passed.mark_passed()
    failed = TestUnit(Owner, Owner.check_b)
    failed.mark_failed(FailureDetail(kind=FailureKind.ASSERTION, error_type="AssertionError"))
    not_run = TestUnit(Other, Other.check_a)

    summary = RunSummary(units=(not_run, passed, failed))

    assert summary.total_count == 3
    assert summary.passed == [passed]
    assert summary.failed == [failed]
    assert summary.not_run == [not_run]
    assert not summary.all_passed


def test_empty_summary_is_success() -> None:
    assert RunSummary().all_passed
    assert RunSummary().total_count == 0
