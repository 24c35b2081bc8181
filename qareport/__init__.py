"""Test result aggregation and reporting for end-to-end UI test suites."""

__version__ = '1.0.0'
