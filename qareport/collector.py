"""Accumulate test results over a single test run."""

import datetime
import logging
from typing import Optional

from qareport.resultdef import TestResult


class ResultCollector:
    """Append-only store of the results of one test run.

    Results are kept in the order they were recorded so reports list them in a stable order.
    One collector is created per run and owned by whatever lifecycle object drives that run.
    """

    def __init__(self, started: Optional[datetime.datetime] = None):
        self.started = started or datetime.datetime.now(tz=datetime.timezone.utc)
        self._results = []  # type: list[TestResult]

    def record(self, result: TestResult):
        """Add the result of one completed test.

        Duplicate test names are kept as separate entries.
        """
        if not isinstance(result, TestResult):
            raise TypeError(f'Expected a TestResult, not {type(result).__name__}')
        logging.debug('Recording result #%d: %s', len(self._results) + 1, result.name)
        self._results.append(result)

    def all(self) -> tuple[TestResult, ...]:  # noqa: A003
        """Return all recorded results in insertion order."""
        return tuple(self._results)

    def __len__(self) -> int:
        return len(self._results)
