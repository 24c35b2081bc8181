"""Parse test results files."""

import importlib
import json
import logging
import sys
from typing import Any, Callable, TextIO

from qareport import config
from qareport import summarize
from qareport.resultdef import ResultsFormatError, TestResults

# Format name that tries all known parsers
AUTO_FORMAT = 'auto'


def get_parser(fmt: str) -> Callable[[Any], TestResults]:
    """Return the configured parsing function for a format name."""
    parsers = config.get('result_parsers')
    if fmt not in parsers:
        raise ResultsFormatError(f'Unknown results format {fmt}')
    mod, _, func = config.expandstr(parsers[fmt]).rpartition('.')
    if not mod:
        raise ResultsFormatError(f'Invalid result_parsers entry {parsers[fmt]}; '
                                 'must have at least one dot')
    logging.debug('Using %s.%s()', mod, func)
    return getattr(importlib.import_module(mod), func)


def parse_data(data: Any, fmt: str = AUTO_FORMAT) -> TestResults:
    """Parse decoded JSON data in the given format.

    With the auto format, every configured parser is tried in order and the results of the
    first one that accepts the data are returned.
    """
    if fmt != AUTO_FORMAT:
        return get_parser(fmt)(data)

    for name in config.get('result_parsers'):
        try:
            results = get_parser(name)(data)
        except ResultsFormatError as e:
            logging.debug('Not in %s format: %s', name, e)
            continue
        logging.info('Found %d results in %s format', len(results), name)
        return results
    raise ResultsFormatError('Results are not in any known format')


def parse_text(text: str, fmt: str = AUTO_FORMAT) -> TestResults:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ResultsFormatError(f'Invalid JSON: {e}') from e
    return parse_data(data, fmt)


def parse_file(f: TextIO, fmt: str = AUTO_FORMAT) -> TestResults:
    """Parse a results file in the given format."""
    return parse_text(f.read(), fmt)


# Debug interface
def main():
    logging.basicConfig(level=logging.DEBUG, format='%(levelno)s %(filename)s: %(message)s',)
    results = parse_file(sys.stdin)
    summarize.show_totals(summarize.compute(results), results, details=True)


if __name__ == '__main__':
    main()
