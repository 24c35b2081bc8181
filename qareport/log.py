"""Logging setup and formatting of result log lines
"""

import argparse
import logging
import os
import shlex
import sys
from typing import Optional

from qareport.resultdef import TestResult
from qareport.testcasedef import TestStatus

STATUS_ICONS = {
    TestStatus.PASSED: '✅',
    TestStatus.FAILED: '❌',
    TestStatus.SKIPPED: '⏭️',
}


def calling_program() -> str:
    "Return the name of the program that started us"
    return os.path.basename(sys.argv[0])


def format_result(result: TestResult) -> str:
    "Return a one-line description of a test result for logging"
    return (f'{STATUS_ICONS[result.status]} {result.name} ({result.category}) - '
            f'{result.status.name} in {result.duration}ms')


def setup(args: argparse.Namespace, program: Optional[str] = None):
    """Set up the logging subsystem in a consistent way.

    program defaults to the program invoking this run.
    Per-test results are logged at INFO level so they are only shown with --verbose.
    If args.log_file is set, messages are also appended to that file with timestamps,
    at the same level.
    """
    if not program:
        program = shlex.quote(calling_program())
    # Escape percents to pass through format()
    program = program.replace('%', '%%')
    if args.debug:
        level = logging.DEBUG
        fmt = program + ' %(levelno)s %(filename)s: %(message)s'
    elif args.verbose:
        level = logging.INFO
        fmt = program + ' %(message)s'
    else:
        level = logging.WARNING
        fmt = '%(filename)s: %(message)s'
    logging.basicConfig(level=level, format=fmt)

    if getattr(args, 'log_file', None):
        handler = logging.FileHandler(args.log_file, encoding='utf-8')
        handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(message)s'))
        handler.setLevel(level)
        root = logging.getLogger()
        # basicConfig() leaves the level alone if logging was already configured
        root.setLevel(min(root.level or level, level))
        root.addHandler(handler)
