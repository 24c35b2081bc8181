"""Functions to set up common argument parsers."""

import argparse
import ast
from typing import Optional

from qareport import config


class StoreMultipleConstAction(argparse.Action):
    """Store the value of the const to multiple attributes.

    const holds the value to store (defaults to True) and attrs is an iterable
    of attribute names to store the value, in addition to dest.
    """

    def __init__(self,
                 option_strings,
                 dest: str,
                 const: bool = True,
                 attrs: Optional[list[str]] = None,
                 default=None,
                 required: bool = False,
                 help=None,     # noqa: A002
                 metavar=None):
        super().__init__(
            option_strings=option_strings,
            dest=dest,
            nargs=0,
            const=const,
            default=default,
            required=required,
            help=help)
        self.attrs = attrs if attrs else []

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, self.const)
        for attr in self.attrs:
            setattr(namespace, attr, self.const)


class OverrideConfigAction(argparse.Action):
    """argparsing action that adds a configuration override.

    The value is a Python literal, so strings must be quoted, e.g. --set "report_title='Nightly'"
    """
    def __init__(self,
                 option_strings,
                 dest: str,
                 default=None,
                 required: bool = False,
                 help=None):     # noqa: A002
        super().__init__(
            option_strings=option_strings,
            dest=dest,
            nargs=1,
            default=default,
            required=required,
            metavar='NAME=VALUE',
            help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        for assignment in values:
            try:
                name, rawval = assignment.split('=', 1)
            except ValueError as e:
                raise argparse.ArgumentError(self, f'Missing = in {assignment}') from e
            # Let any exceptions through here since they provide detail about the problem
            val = ast.literal_eval(rawval) if rawval else ''
            config.add_override(name, val)


def arguments_config(parser: argparse.ArgumentParser):
    """Add arguments needed for manipulating the configuration."""
    parser.add_argument(
        '--set',
        action=OverrideConfigAction,
        help='Override a config value')


def arguments_logging(parser: argparse.ArgumentParser):
    """Add arguments needed for logging."""
    parser.add_argument(
        '--dry-run',
        action='store_true',
        help="Go through the motions but don't write any reports")
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Show more log messages, including each test result')
    parser.add_argument(
        '--debug',
        action=StoreMultipleConstAction,
        attrs=['verbose'],
        help='Show debug level log messages')
    parser.add_argument(
        '--log-file',
        help='Also append log messages to this file')


def arguments_report(parser: argparse.ArgumentParser):
    """Add arguments needed for generating reports."""
    parser.add_argument(
        '--outdir',
        help='Directory in which to write reports (default from the report_dir config)')
    parser.add_argument(
        '--details',
        action='store_true',
        help='List failed tests in the console summary')
