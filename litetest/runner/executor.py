"""Test executor - runs a single test unit in isolation.

For each unit:
1. Instantiate the owning class (fresh instance per unit)
2. Invoke the test method with no arguments
3. Classify the outcome (pass / assertion failure / unexpected fault)
4. Stamp completion time
"""

import logging
import time
from datetime import datetime
from typing import Iterable

from ..model import FailureDetail, FailureKind, TestUnit

logger = logging.getLogger(__name__)


class TestExecutor:
    """Executes test units, containing every test failure in the unit itself."""

    __test__ = False

    def run(self, unit: TestUnit) -> bool:
        """Execute one test unit.

        A class that cannot be instantiated is a harness problem, not a test
        failure: it is logged and the unit stays not-run.

        Args:
            unit: Unit to execute. Its outcome, failure detail, timestamp
                and duration are updated in place.

        Returns:
            True if the test method was invoked.
        """
        try:
            instance = unit.owner()
        except KeyboardInterrupt:
            raise
        except BaseException:
            logger.exception(
                "Could not instantiate %s for %s", unit.class_name, unit.method_name
            )
            return False

        start_time = time.perf_counter()
        try:
            unit.method(instance)
        except AssertionError as e:
            unit.mark_failed(self._failure(unit, e, FailureKind.ASSERTION))
        except KeyboardInterrupt:
            raise
        except BaseException as e:
            # only KeyboardInterrupt aborts the run; SystemExit is a fault like any other
            unit.mark_failed(self._failure(unit, e, FailureKind.UNEXPECTED))
        else:
            unit.mark_passed()
        finally:
            unit.duration = time.perf_counter() - start_time
            unit.completed_at = datetime.now()

        return True

    def run_all(self, units: Iterable[TestUnit]) -> int:
        """Execute units in the given order.

        Returns:
            Number of units whose test method was invoked.
        """
        return sum(1 for unit in units if self.run(unit))

    def _failure(
        self, unit: TestUnit, error: BaseException, kind: FailureKind
    ) -> FailureDetail:
        logger.debug("%s.%s failed: %r", unit.class_name, unit.method_name, error)
        return FailureDetail.from_exception(
            error, kind, unit.method_name, skip_file=__file__
        )
