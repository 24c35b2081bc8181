"""Compute rollups of test results"""

import io
from typing import Iterable, List, Sequence

from qareport.resultdef import BucketCounts, TestResult, TestSummary
from qareport.testcasedef import TestStatus


def compute(results: Iterable[TestResult]) -> TestSummary:
    """Summarize a sequence of test results.

    This has no hidden state so the same input always gives an equal summary.
    Categories and priorities appear in the summary in the order they are first seen.
    """
    summary = TestSummary()
    for result in results:
        summary.total += 1
        if result.status == TestStatus.PASSED:
            summary.passed += 1
        elif result.status == TestStatus.FAILED:
            summary.failed += 1
        else:
            summary.skipped += 1
        summary.duration += result.duration
        summary.categories.setdefault(result.category, BucketCounts()).add(result.status)
        summary.priorities.setdefault(result.priority.name, BucketCounts()).add(result.status)

    summary.success_rate = summary.passed / summary.total * 100 if summary.total else 0.0
    return summary


def success_percent(bucket: BucketCounts) -> float:
    """Return the percentage of passed tests in the bucket, or 0 if it's empty."""
    return bucket.passed / bucket.total * 100 if bucket.total else 0.0


def format_duration(ms: float) -> str:
    """Format a duration in milliseconds in a human-readable way.

    Fractions of a second are dropped.
    """
    seconds = int(ms // 1000)
    minutes = seconds // 60
    hours = minutes // 60
    if hours:
        return f'{hours}h {minutes % 60}m {seconds % 60}s'
    if minutes:
        return f'{minutes}m {seconds % 60}s'
    return f'{seconds}s'


def show_totals(summary: TestSummary, results: Sequence[TestResult], details: bool = False):
    print(''.join(summarize_totals(summary, results, details)))


def summarize_totals(summary: TestSummary, results: Sequence[TestResult],
                     details: bool = False) -> List[str]:
    f = io.StringIO()
    print('TEST EXECUTION SUMMARY', file=f)
    print('=' * 50, file=f)
    print('Total Tests:', summary.total, file=f)
    print('Passed:', summary.passed, file=f)
    print('Failed:', summary.failed, file=f)
    print('Skipped:', summary.skipped, file=f)
    print(f'Success Rate: {summary.success_rate:.1f}%', file=f)
    print('Total Duration:', format_duration(summary.duration), file=f)
    print('=' * 50, file=f)
    if details and summary.failed:
        print('FAILED TESTS:', file=f)
        for test in results:
            if test.status == TestStatus.FAILED:
                print(f'{test.name} ({test.category})', file=f)
                if test.error:
                    print(f'   Error: {test.error}', file=f)
    f.seek(0)
    return f.readlines()
