"""Write rendered reports to files."""

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Optional

from qareport import config


@dataclass
class ReportSet:
    """The rendered content of all reports for one test run."""

    html: str                # HTML client report
    executive_summary: str   # Markdown executive summary
    json_doc: dict[str, Any]  # JSON summary document
    paths: list[str] = field(default_factory=list)  # files the reports were written to


def report_dir(outdir: Optional[str] = None) -> str:
    """Return the directory in which to write reports."""
    return os.path.expanduser(outdir or config.expand('report_dir'))


def write_file(path: str, content: str):
    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)
    logging.info('Report saved to %s', path)


def write_reports(reports: ReportSet, outdir: Optional[str] = None) -> list[str]:
    """Write all reports into a directory, creating it if necessary.

    Returns: list of paths of the files that were written
    """
    outdir = report_dir(outdir)
    os.makedirs(outdir, exist_ok=True)

    paths = [os.path.join(outdir, config.expand(name))
             for name in ('html_report_name', 'summary_report_name', 'json_report_name')]
    html_path, summary_path, json_path = paths
    write_file(html_path, reports.html)
    write_file(summary_path, reports.executive_summary)
    write_file(json_path, json.dumps(reports.json_doc, indent=2, ensure_ascii=False) + '\n')
    reports.paths = paths
    return paths
