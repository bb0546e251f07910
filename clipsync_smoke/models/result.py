"""Models for test execution results."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(frozen=True, kw_only=True)
class TestResult:
    """Outcome of a single test case.

    The details string is free-form and only meant for humans reading the report.
    """

    __test__ = False

    name: str
    success: bool
    details: str = ""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(kw_only=True)
class TestRunSummary:
    """Aggregate of every result recorded during one run."""

    __test__ = False

    total: int = 0
    passed: int = 0
    failed: int = 0
    details: list[TestResult] = field(default_factory=list)

    def record(self, result: TestResult) -> None:
        """Append a result and update the counters."""
        self.total += 1
        if result.success:
            self.passed += 1
        else:
            self.failed += 1
        self.details.append(result)

    @property
    def success_rate(self) -> float:
        """Percentage of passing results, 0.0 for an empty run."""
        if not self.total:
            return 0.0
        return self.passed / self.total * 100

    @property
    def failures(self) -> Sequence[TestResult]:
        return [result for result in self.details if not result.success]
