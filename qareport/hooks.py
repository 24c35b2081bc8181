"""Lifecycle hooks through which a test harness reports its results.

A harness constructs one ReportHooks per test run and calls after_scenario() once per
completed scenario, in order, then after_all() once at the end of the run.
"""

import datetime
import logging
from typing import Iterable, Optional, Union

from qareport import log
from qareport import report
from qareport import reportfiles
from qareport import summarize
from qareport import tags
from qareport.collector import ResultCollector
from qareport.resultdef import TestResult
from qareport.testcasedef import TestStatus

# Map of harness status strings to the status recorded for them.
# Cucumber marks scenarios with missing or incomplete step definitions as pending or
# undefined; they were not actually run so they count as skipped.
HARNESS_STATUS = {
    'passed': TestStatus.PASSED,
    'failed': TestStatus.FAILED,
    'ambiguous': TestStatus.FAILED,
    'skipped': TestStatus.SKIPPED,
    'pending': TestStatus.SKIPPED,
    'undefined': TestStatus.SKIPPED,
    'unknown': TestStatus.SKIPPED,
}

# Error recorded for a failed scenario that didn't supply one
DEFAULT_ERROR = 'Test failed'


def parse_status(status: Union[str, TestStatus]) -> TestStatus:
    """Convert a harness status string into a TestStatus."""
    if isinstance(status, TestStatus):
        return status
    try:
        return HARNESS_STATUS[status.strip().lower()]
    except KeyError:
        logging.warning('Unknown test status %s; treating it as skipped', status)
        return TestStatus.SKIPPED


def make_result(name: str, scenario_tags: Iterable[str], status: Union[str, TestStatus],
                duration: float, error: Optional[str] = None,
                screenshot: Optional[str] = None) -> TestResult:
    """Create a TestResult for a scenario, classifying it by its tags.

    Args:
        name: scenario name
        scenario_tags: tags attached to the scenario, e.g. @functional
        status: outcome as reported by the harness
        duration: run time in milliseconds
        error: failure message, if any
        screenshot: path to a failure screenshot, if any
    """
    scenario_tags = list(scenario_tags)
    test_status = parse_status(status)
    if test_status == TestStatus.FAILED:
        error = error or DEFAULT_ERROR
    else:
        # Only failures carry an error message
        error = None
    category = tags.category_from_tags(scenario_tags)
    return TestResult(
        name=name,
        status=test_status,
        duration=max(0, round(duration)),
        category=category,
        priority=tags.priority_from_tags(scenario_tags),
        description=tags.description_for_category(category),
        error=error,
        screenshot=screenshot)


class ReportHooks:
    """Collect results from a running test suite and produce its reports."""

    def __init__(self, collector: Optional[ResultCollector] = None):
        self.collector = collector if collector is not None else ResultCollector()

    def add_result(self, result: TestResult):
        """Record an already-classified result."""
        self.collector.record(result)
        logging.info('%s', log.format_result(result))
        if result.error:
            logging.info('   Error: %s', result.error)

    def after_scenario(self, name: str, scenario_tags: Iterable[str],
                       status: Union[str, TestStatus], duration: float,
                       error: Optional[str] = None,
                       screenshot: Optional[str] = None) -> TestResult:
        """Record the outcome of one scenario.

        The arguments are the same as for make_result().
        """
        result = make_result(name, scenario_tags, status, duration, error, screenshot)
        self.add_result(result)
        return result

    def render(self, now: Optional[datetime.datetime] = None) -> reportfiles.ReportSet:
        """Render all reports for the results recorded so far."""
        now = now or datetime.datetime.now(tz=datetime.timezone.utc)
        results = self.collector.all()
        summary = summarize.compute(results)
        return reportfiles.ReportSet(
            html=report.render_html(summary, results, started=self.collector.started,
                                    finished=now, now=now),
            executive_summary=report.render_executive_summary(summary, results, now=now),
            json_doc=report.render_json(summary, now=now))

    def after_all(self, outdir: Optional[str] = None,
                  write: bool = True) -> reportfiles.ReportSet:
        """Produce the reports at the end of the test run.

        Args:
            outdir: directory in which to write reports, defaulting to the configured one
            write: whether to write the reports to files at all
        """
        logging.info('Generating reports for %d tests', len(self.collector))
        reports = self.render()
        if write:
            reportfiles.write_reports(reports, outdir)
        else:
            logging.info('Not writing reports')
        return reports
