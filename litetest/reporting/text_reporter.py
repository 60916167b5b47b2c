"""Plain-text report for litetest runs."""

from typing import TextIO

from ..discovery.paths import strip_prefix
from ..model import FailureKind, RunSummary, TestUnit

RESULTS_BANNER = "====================\n=== Test Results ===\n===================="
FAILURES_BANNER = (
    "===========================\n"
    "=== Errors for Failures ===\n"
    "==========================="
)
SUCCESS_BANNER = " ==== SUCCESS!! ==== "
FAILURE_BANNER = " ==== FAILURE... ==== "
NOT_EXECUTED_MESSAGE = "Tests have not yet been executed..."


class TextReporter:
    """Renders a RunSummary as the human-readable results listing."""

    def __init__(self, local_test_root: str = ""):
        """Initialize text reporter.

        Args:
            local_test_root: Dotted prefix stripped from class names.
        """
        self.local_test_root = local_test_root

    def render(self, summary: RunSummary, full_trace: bool = False) -> str:
        """Render the report.

        Args:
            summary: Executed run, units in canonical order.
            full_trace: Show every frame for failures instead of the
                frames inside the test method.

        Returns:
            Report text ending with a newline.
        """
        lines = ["", RESULTS_BANNER]
        for unit in summary.units:
            lines.append(f"{self.display_class(unit)}.{unit.short_result()}")

        lines += ["", FAILURES_BANNER]
        for unit in summary.failed:
            lines += ["", self._failure_header(unit)]
            if full_trace:
                lines.append(unit.failure.trace_text())
            else:
                lines.append(unit.failure.short_text())
        for unit in summary.not_run:
            lines += [
                "",
                f">> {self.display_class(unit)}.{unit.method_name} <<",
                f"Not run: {unit.class_name} could not be instantiated",
            ]

        lines += ["", SUCCESS_BANNER if summary.all_passed else FAILURE_BANNER]
        lines.append(f"Tests Run: {summary.total_count}")
        lines.append(f"Tests Failed: {summary.failed_count}")
        if summary.not_run_count:
            lines.append(f"Tests Not Run: {summary.not_run_count}")
        return "\n".join(lines) + "\n"

    def write(self, summary: RunSummary, stream: TextIO, full_trace: bool = False) -> None:
        """Write the rendered report to a text stream."""
        stream.write(self.render(summary, full_trace))
        stream.flush()

    def display_class(self, unit: TestUnit) -> str:
        """Class name relative to the local test root."""
        return strip_prefix(unit.class_name, self.local_test_root)

    def _failure_header(self, unit: TestUnit) -> str:
        header = f">> {self.display_class(unit)}.{unit.method_name} <<"
        if unit.failure.kind is FailureKind.UNEXPECTED:
            header += " [unexpected]"
        return header
