"""Models for check results and the run summary."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Literal

ResultStatus = Literal["PASS", "FAIL"]


@dataclass(frozen=True, kw_only=True)
class TestResult:
    """Outcome of a single logical assertion recorded by the runner."""

    __test__ = False

    name: str
    status: ResultStatus
    message: str
    timestamp: datetime
    data: Any = None

    @property
    def passed(self) -> bool:
        return self.status == "PASS"

    def to_dict(self) -> dict[str, Any]:
        """Serialize in the exported result shape."""
        return {
            "test": self.name,
            "status": self.status,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
            "data": self.data,
        }


@dataclass(frozen=True, kw_only=True)
class Summary:
    """Aggregate report derived from the result log."""

    total: int
    passed: int
    failed: int
    success_rate: str
    execution_time_ms: int
    results: Sequence[TestResult]

    @property
    def failed_results(self) -> Sequence[TestResult]:
        """Failed results in insertion order."""
        return [result for result in self.results if not result.passed]

    @classmethod
    def from_results(
        cls, results: Sequence[TestResult], execution_time_ms: int
    ) -> "Summary":
        """Aggregate results; an empty log has a success rate of 0.0."""
        total = len(results)
        passed = sum(1 for result in results if result.passed)
        success_rate = f"{passed / total * 100:.1f}" if total else "0.0"
        return cls(
            total=total,
            passed=passed,
            failed=total - passed,
            success_rate=success_rate,
            execution_time_ms=execution_time_ms,
            results=tuple(results),
        )

    def to_dict(self) -> dict[str, Any]:
        """Format the summary and every result for JSON output."""
        return {
            "summary": {
                "total": self.total,
                "passed": self.passed,
                "failed": self.failed,
                "successRate": self.success_rate,
                "executionTime": self.execution_time_ms,
            },
            "results": [result.to_dict() for result in self.results],
        }
