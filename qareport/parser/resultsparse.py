"""Parses plain results JSON files.

These hold a list of test results as written by harness scripts, either directly or in a
"results" member of an object:

  [{"name": "Homepage loads", "status": "PASSED", "duration": 2500, "category": "Functional",
    "priority": "HIGH", "description": "...", "error": "..."}, ...]

Only name and status are required.
"""

import json
import logging
from typing import Any, TextIO

from qareport import config
from qareport import hooks
from qareport.resultdef import ResultsFormatError, TestResult, TestResults
from qareport.testcasedef import Priority, TestStatus

# Optional members that must hold text when present
TEXT_FIELDS = ('category', 'description', 'error', 'screenshot')


def parse_entry(entry: dict[str, Any]) -> TestResult:
    """Convert one decoded result entry into a TestResult."""
    if not isinstance(entry, dict) or 'name' not in entry or 'status' not in entry:
        raise ResultsFormatError(f'Invalid result entry: {entry!r:.80}')

    try:
        duration = int(entry.get('duration') or 0)
    except (TypeError, ValueError) as e:
        raise ResultsFormatError(f'Invalid duration in result {entry["name"]}') from e
    if duration < 0:
        raise ResultsFormatError(f'Negative duration in result {entry["name"]}')

    priority = str(entry.get('priority') or config.get('default_priority')).upper()
    if priority not in Priority.__members__:
        raise ResultsFormatError(f'Invalid priority {priority} in result {entry["name"]}')

    for key in TEXT_FIELDS:
        if entry.get(key) is not None and not isinstance(entry[key], str):
            raise ResultsFormatError(f'Invalid {key} in result {entry["name"]}; must be a string')

    status = hooks.parse_status(str(entry['status']))
    return TestResult(
        name=str(entry['name']),
        status=status,
        duration=duration,
        category=entry.get('category') or config.get('default_category'),
        priority=Priority[priority],
        description=entry.get('description') or '',
        # An error is meaningless on a test that didn't fail
        error=(entry.get('error') or hooks.DEFAULT_ERROR) if status == TestStatus.FAILED else None,
        screenshot=entry.get('screenshot') or None)


def parse_data(data: Any) -> TestResults:
    """Parse an already-decoded results list.

    Raises ResultsFormatError if the data does not look like a results list.
    """
    if isinstance(data, dict) and isinstance(data.get('results'), list):
        data = data['results']
    if not isinstance(data, list):
        raise ResultsFormatError('Not a results list')
    results = [parse_entry(entry) for entry in data]
    logging.debug('Found %d results', len(results))
    return results


def parse_results(f: TextIO) -> TestResults:
    """Parse a results JSON file."""
    try:
        data = json.load(f)
    except json.JSONDecodeError as e:
        raise ResultsFormatError(f'Invalid JSON in results file: {e}') from e
    return parse_data(data)
