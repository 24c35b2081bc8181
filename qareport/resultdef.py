"""Type definitions of recorded results and their summaries."""

from dataclasses import dataclass, field
from typing import Optional

from qareport.testcasedef import Priority, TestStatus


@dataclass(frozen=True)
class TestResult:
    """Class to hold the outcome of a single test case."""
    __test__ = False

    name: str                         # test name
    status: TestStatus                # test outcome
    duration: int                     # test duration in milliseconds
    category: str                     # classification label, e.g. Functional
    priority: Priority                # severity classification
    description: str = ''             # human-readable description of the test
    error: Optional[str] = None       # failure message (if any)
    screenshot: Optional[str] = None  # path to a screenshot taken on failure (if any)


@dataclass
class BucketCounts:
    """Counts of the results falling into one category or priority."""

    total: int = 0
    passed: int = 0
    failed: int = 0
    skipped: int = 0

    def add(self, status: TestStatus):
        self.total += 1
        if status == TestStatus.PASSED:
            self.passed += 1
        elif status == TestStatus.FAILED:
            self.failed += 1
        else:
            self.skipped += 1


@dataclass
class TestSummary:
    """Rollup of a sequence of test results."""
    __test__ = False

    total: int = 0
    passed: int = 0
    failed: int = 0
    skipped: int = 0
    duration: int = 0          # sum of all test durations in milliseconds
    success_rate: float = 0.0  # percentage of tests that passed
    # Both are in order of first appearance of each key
    categories: dict[str, BucketCounts] = field(default_factory=dict)
    priorities: dict[str, BucketCounts] = field(default_factory=dict)


TestResults = list[TestResult]


class ResultsFormatError(ValueError):
    """A results file could not be understood."""
