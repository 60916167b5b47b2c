"""Tests for the assertion helpers."""

import pytest

from litetest.asserts import (
    AssertFailed,
    assert_equals,
    assert_not_equals,
    assert_not_null,
    assert_null,
    assert_true,
    fail,
)


def test_assert_failed_is_an_assertion_error() -> None:
    assert issubclass(AssertFailed, AssertionError)


def test_fail() -> None:
    with pytest.raises(AssertFailed, match="^boom$"):
        fail("boom")

    with pytest.raises(AssertFailed) as excinfo:
        fail()
    assert str(excinfo.value) == ""


def test_assert_true() -> None:
    assert_true(1 < 2)

    with pytest.raises(AssertFailed, match="not ordered"):
        assert_true(2 < 1, "not ordered")


def test_assert_equals() -> None:
    assert_equals([1, 2], [1, 2])
    assert_equals(None, None)

    with pytest.raises(AssertFailed) as excinfo:
        assert_equals("a", "b", "letters")
    assert str(excinfo.value) == "expected:<'a'> but was:<'b'>\nletters"

    with pytest.raises(AssertFailed, match="expected:<None> but was:<0>"):
        assert_equals(None, 0)


def test_assert_not_equals() -> None:
    assert_not_equals(1, 2)
    assert_not_equals(None, 0)

    with pytest.raises(AssertFailed, match="to be different from:<3>"):
        assert_not_equals(3, 3)
    with pytest.raises(AssertFailed):
        assert_not_equals(None, None)


def test_assert_null() -> None:
    assert_null(None)
    assert_not_null(0)

    with pytest.raises(AssertFailed, match="but was: 'x'"):
        assert_null("x")
    with pytest.raises(AssertFailed, match="missing"):
        assert_not_null(None, "missing")
