"""Result model for litetest runs.

A ``TestUnit`` is both the identity of a discovered test and the holder of
its outcome; the driver's queue doubles as the result set.
"""

import functools
import traceback
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Optional

STAMP_FORMAT = "%Y%m%d_%H%M%S"


class Outcome(str, Enum):
    """Outcome of a single test unit."""
    NOT_RUN = "not-run"
    PASSED = "passed"
    FAILED = "failed"


class FailureKind(str, Enum):
    """Classification of a failed test unit."""
    ASSERTION = "assertion-failure"
    UNEXPECTED = "unexpected-fault"


@dataclass
class FailureDetail:
    """Diagnostic context captured from a failing test."""
    kind: FailureKind
    error_type: str
    message: str = ""
    relevant_frames: list[str] = field(default_factory=list)
    full_trace: list[str] = field(default_factory=list)

    @classmethod
    def from_exception(
        cls,
        exc: BaseException,
        kind: FailureKind,
        method_name: str,
        skip_file: Optional[str] = None,
    ) -> "FailureDetail":
        """Build failure detail from a raised exception.

        Args:
            exc: The exception raised by the test.
            kind: Assertion failure or unexpected fault.
            method_name: Name of the test method, used to pick relevant frames.
            skip_file: Source file whose frames are harness frames and are dropped.

        Returns:
            FailureDetail with both short and full frame listings.
        """
        frames = [
            frame for frame in traceback.extract_tb(exc.__traceback__)
            if skip_file is None or frame.filename != skip_file
        ]
        rendered = [_format_frame(frame) for frame in frames]

        relevant = [
            text for frame, text in zip(frames, rendered)
            if frame.name == method_name
        ]
        # innermost frame shows where the failure was actually raised
        if rendered and (not relevant or relevant[-1] != rendered[-1]):
            relevant.append(rendered[-1])

        exc_type = type(exc)
        if exc_type.__module__ == "builtins":
            error_type = exc_type.__qualname__
        else:
            error_type = f"{exc_type.__module__}.{exc_type.__qualname__}"

        return cls(
            kind=kind,
            error_type=error_type,
            message=str(exc),
            relevant_frames=relevant,
            full_trace=rendered,
        )

    def short_text(self) -> str:
        """Exception type, message and the frames inside the test method."""
        return "\n".join(self._header() + self.relevant_frames)

    def trace_text(self) -> str:
        """Exception type, message and every frame below the harness."""
        return "\n".join(self._header() + self.full_trace)

    def _header(self) -> list[str]:
        lines = [self.error_type]
        if self.message:
            lines.append(self.message)
        return lines


@functools.total_ordering
class TestUnit:
    """One discovered test: owning class, method and requirement id.

    Identity, hashing and ordering use only
    ``(owner qualified name, method name, req_id)``.
    """

    __test__ = False

    def __init__(self, owner: type, method: Callable[..., Any], req_id: str = ""):
        self.owner = owner
        self.method = method
        self.req_id = req_id or ""
        self.outcome = Outcome.NOT_RUN
        self.failure: Optional[FailureDetail] = None
        self.completed_at: Optional[datetime] = None
        self.duration: float = 0.0

    @property
    def class_name(self) -> str:
        """Qualified name of the owning class (``module.Class``)."""
        return f"{self.owner.__module__}.{self.owner.__qualname__}"

    @property
    def method_name(self) -> str:
        return self.method.__name__

    @property
    def key(self) -> tuple[str, str, str]:
        return (self.class_name, self.method_name, self.req_id)

    @property
    def has_run(self) -> bool:
        return self.outcome is not Outcome.NOT_RUN

    @property
    def passed(self) -> bool:
        return self.outcome is Outcome.PASSED

    @property
    def stamp(self) -> Optional[str]:
        """Completion time as ``YYYYmmdd_HHMMSS``."""
        if self.completed_at is None:
            return None
        return self.completed_at.strftime(STAMP_FORMAT)

    def mark_passed(self) -> None:
        self._transition(Outcome.PASSED)

    def mark_failed(self, failure: FailureDetail) -> None:
        self._transition(Outcome.FAILED)
        self.failure = failure

    def short_result(self) -> str:
        """``method --> STATUS`` line for the report."""
        if self.outcome is Outcome.PASSED:
            status = "SUCCESS"
        elif self.outcome is Outcome.FAILED:
            status = "FAILURE"
        else:
            status = "NOT RUN"
        return f"{self.method_name} --> {status}"

    def _transition(self, outcome: Outcome) -> None:
        if self.outcome is not Outcome.NOT_RUN:
            raise RuntimeError(
                f"{self.class_name}.{self.method_name} already {self.outcome.value}"
            )
        self.outcome = outcome

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TestUnit):
            return NotImplemented
        return self.key == other.key

    def __lt__(self, other: "TestUnit") -> bool:
        if not isinstance(other, TestUnit):
            return NotImplemented
        return self.key < other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        req = f" [{self.req_id}]" if self.req_id else ""
        return f"<TestUnit {self.class_name}.{self.method_name}{req} {self.outcome.value}>"


@dataclass(frozen=True)
class RunSummary:
    """Read-only view over an executed queue, in canonical order."""
    units: tuple[TestUnit, ...] = ()
    duration_ms: int = 0

    @property
    def passed(self) -> list[TestUnit]:
        return [u for u in self.units if u.outcome is Outcome.PASSED]

    @property
    def failed(self) -> list[TestUnit]:
        return [u for u in self.units if u.outcome is Outcome.FAILED]

    @property
    def not_run(self) -> list[TestUnit]:
        return [u for u in self.units if u.outcome is Outcome.NOT_RUN]

    @property
    def total_count(self) -> int:
        return len(self.units)

    @property
    def passed_count(self) -> int:
        return len(self.passed)

    @property
    def failed_count(self) -> int:
        return len(self.failed)

    @property
    def not_run_count(self) -> int:
        return len(self.not_run)

    @property
    def all_passed(self) -> bool:
        return all(u.passed for u in self.units)


def _format_frame(frame: traceback.FrameSummary) -> str:
    return f"{frame.filename}:{frame.lineno} in {frame.name}"
