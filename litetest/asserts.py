"""Minimal assertion helpers.

Failed assertions raise :class:`AssertFailed`, which the executor
classifies as an assertion failure rather than an unexpected fault.
Every helper takes an optional message that is appended to the failure.
"""

from typing import Any, NoReturn, Optional


class AssertFailed(AssertionError):
    """Raised when a litetest assertion does not hold."""


def fail(message: Optional[str] = None) -> NoReturn:
    """Fail the current test unconditionally."""
    if message is None:
        raise AssertFailed()
    raise AssertFailed(message)


def assert_true(condition: bool, message: Optional[str] = None) -> None:
    if not condition:
        fail(message)


def assert_equals(expected: Any, actual: Any, message: Optional[str] = None) -> None:
    if expected is None and actual is None:
        return
    if expected is None or expected != actual:
        fail(_should_match_message(expected, actual, message))


def assert_not_equals(expected: Any, actual: Any, message: Optional[str] = None) -> None:
    if expected is None and actual is None:
        fail(_should_differ_message(expected, actual, message))
    if expected is not None and expected == actual:
        fail(_should_differ_message(expected, actual, message))


def assert_null(obj: Any, message: Optional[str] = None) -> None:
    if obj is not None:
        fail(message or f"Expected: <None> but was: {obj!r}")


def assert_not_null(obj: Any, message: Optional[str] = None) -> None:
    assert_true(obj is not None, message)


def _should_match_message(expected: Any, actual: Any, message: Optional[str]) -> str:
    formatted = f"\n{message}" if message else ""
    return f"expected:<{expected!r}> but was:<{actual!r}>{formatted}"


def _should_differ_message(expected: Any, actual: Any, message: Optional[str]) -> str:
    formatted = f"\n{message}" if message else ""
    return f"expected:<{expected!r}> to be different from:<{actual!r}>{formatted}"
