"""Test driver - queues, executes and reports test units.

The basic steps to running tests are:
1. Mark test classes and methods with ``@lite_class`` / ``@lite_test``
2. Queue the packages, modules or classes to test with ``queue()``
3. Run the queued tests with ``execute()``
4. Print the results with ``report()``
5. ``reset()`` before queueing a new batch

``run()`` performs all of these steps for a single target.
"""

import logging
import sys
import time
from enum import Enum
from pathlib import Path
from typing import Optional, TextIO, Union

from ..config.schema import DriverConfig
from ..discovery.paths import clean_path, dotted_to_path, join_dotted
from ..discovery.scanner import TargetScanner
from ..model import RunSummary, TestUnit
from ..reporting.text_reporter import NOT_EXECUTED_MESSAGE, TextReporter
from .executor import TestExecutor

logger = logging.getLogger(__name__)

MISUSE_MESSAGE = (
    "Tests have already been executed. Call reset() before you queue "
    "or run a new batch of tests."
)


class RunState(str, Enum):
    """Lifecycle state of a driver."""
    IDLE = "idle"
    QUEUED = "queued"
    EXECUTED = "executed"


class TestDriver:
    """Owns the test queue and drives discovery, execution and reporting.

    The queue is keyed by unit identity, so queueing the same target twice
    adds nothing the second time. Units are always executed and reported
    sorted by (class name, method name, requirement id).
    """

    __test__ = False

    def __init__(
        self,
        path_to_src: Optional[str] = None,
        local_test_root: Optional[str] = None,
        *,
        project_root: Optional[Union[str, Path]] = None,
        config: Optional[DriverConfig] = None,
        stream: Optional[TextIO] = None,
        executor: Optional[TestExecutor] = None,
    ):
        """Initialize test driver.

        Args:
            path_to_src: Dot- or slash-separated path from the project root to
                the source root, e.g. "src" or "app.src.main". Defaults to
                the config's ``src_path``.
            local_test_root: Dotted package prefix applied to every queued
                target. Defaults to the config's ``local_test_root``.
            project_root: Project base directory. Defaults to the current
                working directory.
            config: Defaults for recurse, type-marker and trace options.
            stream: Where reports are written. Defaults to stdout.
            executor: Executor used to run units.
        """
        self.config = config or DriverConfig()
        if path_to_src is None:
            path_to_src = self.config.src_path
        if local_test_root is None:
            local_test_root = self.config.local_test_root

        self.project_root = Path(project_root) if project_root else Path.cwd()
        self.src_root = dotted_to_path(self.project_root, clean_path(path_to_src))
        self.local_test_root = clean_path(local_test_root)
        self.stream = stream
        self.executor = executor or TestExecutor()

        self._scanner = TargetScanner(self.src_root)
        self._reporter = TextReporter(self.local_test_root)
        self._queue: dict[tuple[str, str, str], TestUnit] = {}
        self._state = RunState.IDLE
        self._duration_ms = 0

        logger.info("New driver src path: %s", self.src_root)
        logger.info("New driver test root: %s", self.local_test_root or "<none>")

    @property
    def state(self) -> RunState:
        return self._state

    @property
    def has_run(self) -> bool:
        return self._state is RunState.EXECUTED

    @property
    def units(self) -> tuple[TestUnit, ...]:
        """Queued units in canonical order."""
        return tuple(sorted(self._queue.values()))

    def summary(self) -> Optional[RunSummary]:
        """Structured results of the last execution, or None before executing."""
        if not self.has_run:
            return None
        return RunSummary(units=self.units, duration_ms=self._duration_ms)

    def queue(
        self,
        target: str = "",
        recurse: Optional[bool] = None,
        require_type_marker: Optional[bool] = None,
    ) -> int:
        """Queue the test units of a package, module or class.

        Test units are methods that are marked with ``@lite_test``, are
        public and take no arguments, on classes whose name doesn't contain
        "Lite" (and, unless disabled, that are marked with ``@lite_class``).

        Args:
            target: Dot- or slash-separated target. The local test root is
                prefixed to it.
            recurse: Also queue tests in sub-packages.
            require_type_marker: Only scan classes marked with ``@lite_class``.

        Returns:
            Number of units newly added to the queue.
        """
        if self._state is RunState.EXECUTED:
            logger.warning(MISUSE_MESSAGE)
            return 0

        if recurse is None:
            recurse = self.config.recurse
        if require_type_marker is None:
            require_type_marker = self.config.require_type_marker

        full_target = join_dotted(self.local_test_root, clean_path(target))
        discovered = self._scanner.enumerate(full_target, recurse, require_type_marker)

        added = 0
        for unit in discovered:
            if unit.key not in self._queue:
                self._queue[unit.key] = unit
                added += 1

        self._state = RunState.QUEUED
        logger.info(
            "Scanning %sfound %d new tests.",
            f"{full_target} " if full_target else "",
            added,
        )
        return added

    def execute(self) -> Optional[RunSummary]:
        """Execute every queued unit in canonical order.

        Nothing is printed; use ``report()`` to see the results.

        Returns:
            Summary of the run, or None if the driver was already executed.
        """
        if self._state is RunState.EXECUTED:
            logger.warning(MISUSE_MESSAGE)
            return None

        start_time = time.time()
        units = self.units
        invoked = self.executor.run_all(units)
        self._duration_ms = int((time.time() - start_time) * 1000)
        self._state = RunState.EXECUTED

        if invoked != len(units):
            logger.warning("%d of %d tests could not be run", len(units) - invoked, len(units))
        return self.summary()

    def report(self, verbose: Optional[bool] = None) -> Optional[RunSummary]:
        """Print the results of ``execute()``.

        Args:
            verbose: Print the full trace for each failure instead of the
                frames inside the test method.

        Returns:
            The reported summary, or None if nothing has been executed.
        """
        stream = self.stream or sys.stdout
        if not self.has_run:
            stream.write(NOT_EXECUTED_MESSAGE + "\n")
            return None

        if verbose is None:
            verbose = self.config.full_trace

        summary = self.summary()
        self._reporter.write(summary, stream, full_trace=verbose)
        return summary

    def reset(self) -> None:
        """Clear the queue in preparation for new tests."""
        self._queue.clear()
        self._state = RunState.IDLE
        self._duration_ms = 0

    def run(
        self,
        target: str = "",
        recurse: Optional[bool] = None,
        full_trace: Optional[bool] = None,
        require_type_marker: Optional[bool] = None,
    ) -> Optional[RunSummary]:
        """Queue, execute, report and reset for a single target.

        Returns:
            Summary of the run, or None if the driver was already executed.
        """
        self.queue(target, recurse, require_type_marker)
        summary = self.execute()
        self.report(full_trace)
        self.reset()
        return summary
