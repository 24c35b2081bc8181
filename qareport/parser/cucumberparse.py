"""Parses Cucumber JSON report files.

These are written by the cucumber "json" formatter (e.g. --format json:cucumber-report.json).
The file holds a list of features, each holding a list of scenarios in "elements", each of
which holds a list of steps with their results. Hooks show up as hidden steps and count
towards the duration and result of the scenario.
"""

import json
import logging
from typing import Any, TextIO

from qareport import hooks
from qareport.resultdef import ResultsFormatError, TestResults

# Durations are reported in nanoseconds
NS_PER_MS = 1_000_000

# Step results that make a scenario fail
FAILED_STEPS = frozenset(('failed', 'ambiguous'))

# Step results that mean a scenario was not completely run
SKIPPED_STEPS = frozenset(('skipped', 'pending', 'undefined', 'unknown'))


def tag_names(element: dict[str, Any]) -> list[str]:
    return [t['name'] for t in element.get('tags', []) if isinstance(t, dict) and 'name' in t]


def scenario_status(steps: list[dict[str, Any]]) -> tuple[str, str]:
    """Determine the overall result of a scenario from its steps.

    Returns: tuple of status string, error message of the first failed step
    """
    statuses = []
    error = ''
    for step in steps:
        result = step.get('result', {})
        status = result.get('status', 'unknown')
        statuses.append(status)
        if status in FAILED_STEPS and not error:
            error = result.get('error_message', '')
    if any(s in FAILED_STEPS for s in statuses):
        return 'failed', error
    if any(s in SKIPPED_STEPS for s in statuses):
        return 'skipped', ''
    if not statuses:
        logging.debug('Scenario has no steps')
    return 'passed', ''


def scenario_duration(steps: list[dict[str, Any]]) -> float:
    """Return the total duration of all steps in milliseconds."""
    return sum(step.get('result', {}).get('duration', 0) for step in steps) / NS_PER_MS


def parse_data(data: Any) -> TestResults:
    """Parse an already-decoded Cucumber JSON report.

    Raises ResultsFormatError if the data does not look like a Cucumber report.
    """
    if not isinstance(data, list) or not all(
            isinstance(feature, dict) and 'elements' in feature for feature in data):
        raise ResultsFormatError('Not a Cucumber JSON report')

    results = []  # type: TestResults
    for feature in data:
        feature_tags = tag_names(feature)
        logging.debug('Found feature %s', feature.get('name', ''))
        for element in feature['elements']:
            if element.get('type') == 'background':
                # Background steps are also included in each scenario
                continue
            steps = element.get('steps', [])
            status, error = scenario_status(steps)
            # Scenarios usually repeat the tags of their feature but this is not guaranteed
            scenario_tags = list(dict.fromkeys(feature_tags + tag_names(element)))
            results.append(hooks.make_result(
                element.get('name', ''), scenario_tags, status,
                scenario_duration(steps), error or None))
    return results


def parse_report(f: TextIO) -> TestResults:
    """Parse a Cucumber JSON report file."""
    try:
        data = json.load(f)
    except json.JSONDecodeError as e:
        raise ResultsFormatError(f'Invalid JSON in Cucumber report: {e}') from e
    return parse_data(data)
