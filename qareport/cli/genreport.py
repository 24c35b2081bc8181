"""Generate test reports from test results files."""

import argparse
import logging
import sys
from contextlib import nullcontext

import requests

from qareport import argparsing
from qareport import config
from qareport import log
from qareport import netreq
from qareport import summarize
from qareport.hooks import ReportHooks
from qareport.parser import parse
from qareport.resultdef import ResultsFormatError, TestResults


def parse_args(args=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description='Summarize test results and generate HTML, Markdown and JSON reports')
    argparsing.arguments_logging(parser)
    argparsing.arguments_config(parser)
    argparsing.arguments_report(parser)
    parser.add_argument(
        '--format',
        default=parse.AUTO_FORMAT,
        choices=[parse.AUTO_FORMAT, *config.get('result_parsers')],
        help='Format of the results files')
    parser.add_argument(
        '--url',
        action='append',
        default=[],
        help='URL of a results file to retrieve; use once per URL')
    parser.add_argument(
        '--fail-on-failure',
        action='store_true',
        help='Exit with an error status if any test failed')
    parser.add_argument('files', nargs='*', type=argparse.FileType('r'))
    args = parser.parse_args(args=args)
    if not args.files and not args.url:
        args.files = [sys.stdin]
    return args


def load_results(args: argparse.Namespace) -> TestResults:
    """Parse all results files and URLs given on the command line, in order."""
    results = []  # type: TestResults
    for f in args.files:
        logging.info('Parsing %s', f.name)
        # stdin is left open for the caller
        with (nullcontext(f) if f is sys.stdin else f):
            results.extend(parse.parse_file(f, args.format))
    if args.url:
        session = netreq.Session()
        for url in args.url:
            results.extend(parse.parse_text(netreq.fetch_text(url, session), args.format))
    return results


def main(argv=None) -> int:
    args = parse_args(argv)
    log.setup(args)

    try:
        results = load_results(args)
    except (ResultsFormatError, requests.exceptions.RequestException) as e:
        logging.error('Could not read results: %s', e)
        return 1

    hooks = ReportHooks()
    for result in results:
        hooks.add_result(result)
    reports = hooks.after_all(args.outdir, write=not args.dry_run)

    results = hooks.collector.all()
    summary = summarize.compute(results)
    summarize.show_totals(summary, results, details=args.details)
    for path in reports.paths:
        print('Report saved to', path)

    if args.fail_on_failure and summary.failed:
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
