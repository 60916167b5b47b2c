"""JSON report generator for litetest results.

Generates structured JSON reports from an executed run.
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from ..model import RunSummary, TestUnit


class JsonReporter:
    """Generates JSON reports from test run summaries."""

    def generate(
        self,
        summary: RunSummary,
        target: str = "",
        full_trace: bool = False,
    ) -> dict[str, Any]:
        """Generate a JSON report from test results.

        Args:
            summary: Executed run.
            target: Target that was queued.
            full_trace: Include every frame instead of the relevant ones.

        Returns:
            Report dictionary ready for JSON serialization.
        """
        report = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "target": target,
            "status": "passed" if summary.all_passed else "failed",
            "summary": {
                "total": summary.total_count,
                "passed": summary.passed_count,
                "failed": summary.failed_count,
                "not_run": summary.not_run_count,
                "duration_ms": summary.duration_ms,
            },
            "tests": [self._unit_entry(unit, full_trace) for unit in summary.units],
        }

        return report

    def save(self, report: dict[str, Any], path: Path) -> Path:
        """Save report to a JSON file.

        Args:
            report: Report dictionary.
            path: Output file path.

        Returns:
            Path to the saved file.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2, ensure_ascii=False)

        return path

    def to_json_string(self, report: dict[str, Any], pretty: bool = True) -> str:
        """Convert report to JSON string.

        Args:
            report: Report dictionary.
            pretty: If True, format with indentation.

        Returns:
            JSON string.
        """
        if pretty:
            return json.dumps(report, indent=2, ensure_ascii=False)
        return json.dumps(report, ensure_ascii=False)

    def generate_cli_output(
        self,
        report: dict[str, Any],
        report_path: Optional[str] = None,
    ) -> dict[str, Any]:
        """Generate the CLI envelope for a report.

        {
            "success": bool,
            "command": "test",
            "data": { ... },
            "message": str
        }

        Args:
            report: Test report dictionary.
            report_path: Path where report was saved.

        Returns:
            Envelope dictionary.
        """
        summary = report["summary"]
        all_passed = report["status"] == "passed"

        data: dict[str, Any] = {
            "target": report["target"],
            "total_tests": summary["total"],
            "passed": summary["passed"],
            "failed": summary["failed"],
            "not_run": summary["not_run"],
            "duration_ms": summary["duration_ms"],
            "tests": report["tests"],
        }

        if report_path:
            data["report_path"] = report_path

        if summary["not_run"]:
            message = (
                f"{summary['failed']} of {summary['total']} tests failed, "
                f"{summary['not_run']} not run"
            )
        elif not all_passed:
            message = f"{summary['failed']} of {summary['total']} tests failed"
        else:
            message = "All tests passed"

        return {
            "success": all_passed,
            "command": "test",
            "data": data,
            "message": message,
        }

    def _unit_entry(self, unit: TestUnit, full_trace: bool) -> dict[str, Any]:
        failure = unit.failure
        frames = None
        if failure is not None:
            frames = failure.full_trace if full_trace else failure.relevant_frames
        return {
            "class": unit.class_name,
            "method": unit.method_name,
            "req_id": unit.req_id,
            "status": unit.outcome.value,
            "kind": failure.kind.value if failure else None,
            "error_type": failure.error_type if failure else None,
            "message": failure.message if failure else None,
            "frames": frames,
            "completed_at": unit.completed_at.isoformat() if unit.completed_at else None,
            "duration_ms": int(unit.duration * 1000),
        }
