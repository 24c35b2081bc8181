"""Test case data."""

from enum import IntEnum


class TestStatus(IntEnum):
    """Enumeration of all possible outcomes of a test."""
    __test__ = False

    PASSED = 1   # test succeeded
    FAILED = 2   # test failed
    SKIPPED = 3  # test was not run to completion


class Priority(IntEnum):
    """Severity classification of a test."""

    HIGH = 1
    MEDIUM = 2
    LOW = 3
