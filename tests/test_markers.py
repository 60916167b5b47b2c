"""Tests for the class and method markers."""

from litetest.markers import TestMarker, get_test_marker, is_test_class, lite_class, lite_test


def test_bare_and_called_forms() -> None:
    @lite_test
    def bare(self):
        pass

    @lite_test(req_id="REQ-3")
    def called(self):
        pass

    assert get_test_marker(bare) == TestMarker()
    assert get_test_marker(called) == TestMarker(req_id="REQ-3")


def test_unmarked_function() -> None:
    def plain(self):
        pass

    assert get_test_marker(plain) is None


def test_class_marker_is_not_inherited() -> None:
    @lite_class
    class Base:
        pass

    class Child(Base):
        pass

    assert is_test_class(Base)
    assert not is_test_class(Child)
    assert is_test_class(lite_class(Child))
