"""Test markers for litetest.

Classes decorated with ``@lite_class`` are scanned for tests. Methods
decorated with ``@lite_test`` are candidates for testing; to actually be
queued they must also be public and take no arguments besides ``self``.

    @lite_class
    class ParserChecks:
        @lite_test(req_id="REQ-12")
        def parses_empty_input(self):
            assert_equals([], parse(""))
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar

CLASS_MARKER_ATTR = "__lite_class__"
TEST_MARKER_ATTR = "__lite_test__"

T = TypeVar("T")
F = TypeVar("F", bound=Callable[..., Any])


@dataclass(frozen=True)
class TestMarker:
    """Marking attached to a test method."""

    __test__ = False

    req_id: str = ""


def lite_class(cls: type[T]) -> type[T]:
    """Mark a class as a test class."""
    setattr(cls, CLASS_MARKER_ATTR, True)
    return cls


def lite_test(func: Optional[F] = None, *, req_id: str = ""):
    """Mark a method as a test method.

    Usable bare (``@lite_test``) or with a requirement id
    (``@lite_test(req_id="REQ-1")``).

    Args:
        func: Method being decorated when used without arguments.
        req_id: Free-text requirement identifier for traceability.
    """
    marker = TestMarker(req_id=req_id or "")

    def decorate(f):
        setattr(f, TEST_MARKER_ATTR, marker)
        return f

    if func is not None:
        return decorate(func)
    return decorate


def is_test_class(cls: type) -> bool:
    """Whether ``cls`` itself carries the class marker (inherited ones don't count)."""
    return bool(vars(cls).get(CLASS_MARKER_ATTR, False))


def get_test_marker(func: Any) -> Optional[TestMarker]:
    """Return the test marker of ``func``, or None if it isn't marked."""
    marker = getattr(func, TEST_MARKER_ATTR, None)
    if isinstance(marker, TestMarker):
        return marker
    return None
