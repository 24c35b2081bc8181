"""Render test summaries into reports.

All functions here only build strings (or JSON-compatible objects) from already-computed
data; writing them anywhere is up to the caller.
"""

import datetime
import io
import textwrap
from html import escape
from typing import Any, Optional, Sequence

import qareport
from qareport import config
from qareport import summarize
from qareport.resultdef import BucketCounts, TestResult, TestSummary
from qareport.testcasedef import Priority, TestStatus

# strftime() format string including time zone
TIMEZ_FMT = '%a, %d %b %Y %H:%M:%S %z'

CATEGORY_ICONS = {
    'Functional': '🔧',
    'UI/UX': '🎨',
    'Responsive': '📱',
    'Performance': '⚡',
    'Accessibility': '♿',
    'Cross-Browser': '🌐',
    'Mobile': '📱',
    'Desktop': '💻',
    'Tablet': '📟',
}
DEFAULT_CATEGORY_ICON = '📋'

PRIORITY_ICONS = {
    'HIGH': '🔴',
    'MEDIUM': '🟡',
    'LOW': '🟢',
}
DEFAULT_PRIORITY_ICON = '⚪'

# Text describing each overall assessment level
ASSESSMENTS = {
    'EXCELLENT': '🟢 **EXCELLENT** - The website is performing exceptionally well with minimal '
                 'issues.',
    'GOOD': '🟡 **GOOD** - The website is generally working well with some minor issues to '
            'address.',
    'FAIR': '🟠 **FAIR** - The website has several issues that need attention before launch.',
    'POOR': '🔴 **POOR** - The website has significant issues that require immediate attention.',
}

HTML_STYLE = """\
    <style>
    * {margin: 0; padding: 0; box-sizing: border-box;}
    body {
        font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
        line-height: 1.6;
        color: #333;
        background-color: #f5f5f5;
    }
    .container {max-width: 1200px; margin: 0 auto; padding: 20px;}
    .header {
        background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
        color: white;
        padding: 30px;
        border-radius: 10px;
        margin-bottom: 30px;
        text-align: center;
    }
    .header h1 {font-size: 2.5em; margin-bottom: 10px;}
    .summary-cards {
        display: grid;
        grid-template-columns: repeat(auto-fit, minmax(250px, 1fr));
        gap: 20px;
        margin-bottom: 30px;
    }
    .card {
        background: white;
        padding: 25px;
        border-radius: 10px;
        box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1);
        text-align: center;
    }
    .card.success {border-left: 5px solid #28a745;}
    .card.warning {border-left: 5px solid #ffc107;}
    .card.danger  {border-left: 5px solid #dc3545;}
    .card.info    {border-left: 5px solid #17a2b8;}
    .card h3 {font-size: 2.5em; margin-bottom: 10px;}
    .progress-bar {
        width: 100%;
        height: 20px;
        background-color: #e9ecef;
        border-radius: 10px;
        overflow: hidden;
        margin: 10px 0;
    }
    .progress-fill {height: 100%; background: linear-gradient(90deg, #28a745, #20c997);}
    .status-indicator {
        display: inline-block;
        width: 12px;
        height: 12px;
        border-radius: 50%;
        margin-right: 8px;
    }
    .status-passed  {background-color: #28a745;}
    .status-failed  {background-color: #dc3545;}
    .status-skipped {background-color: #ffc107;}
    .section {
        background: white;
        padding: 25px;
        border-radius: 10px;
        box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1);
        margin-bottom: 20px;
    }
    .section h2 {margin-bottom: 20px; padding-bottom: 10px; border-bottom: 2px solid #f0f0f0;}
    .category-grid {
        display: grid;
        grid-template-columns: repeat(auto-fit, minmax(300px, 1fr));
        gap: 15px;
    }
    .category-item {
        background: #f8f9fa;
        padding: 15px;
        border-radius: 8px;
        border-left: 4px solid #007bff;
    }
    .test-list {list-style: none;}
    .test-item {padding: 8px 0; border-bottom: 1px solid #eee;}
    .test-item:last-child {border-bottom: none;}
    .test-name {font-weight: 500; margin-bottom: 5px;}
    .test-description {color: #666; font-size: 0.9em;}
    .test-error {color: #dc3545; font-size: 0.8em; margin-top: 5px;}
    .priority-badge {
        display: inline-block;
        padding: 2px 8px;
        border-radius: 12px;
        font-size: 0.8em;
        font-weight: bold;
        margin-left: 10px;
    }
    .priority-high   {background-color: #dc3545; color: white;}
    .priority-medium {background-color: #ffc107; color: #333;}
    .priority-low    {background-color: #28a745; color: white;}
    .footer {
        text-align: center;
        padding: 20px;
        color: #666;
        background: white;
        border-radius: 10px;
        margin-top: 30px;
    }
    @media (max-width: 768px) {
        .summary-cards, .category-grid {grid-template-columns: 1fr;}
    }
    </style>
"""


def category_icon(category: str) -> str:
    return CATEGORY_ICONS.get(category, DEFAULT_CATEGORY_ICON)


def priority_icon(priority: str) -> str:
    return PRIORITY_ICONS.get(priority, DEFAULT_PRIORITY_ICON)


def group_by_category(results: Sequence[TestResult]) -> dict[str, list[TestResult]]:
    """Group results by category.

    Categories are in order of first appearance and results keep their original order within
    each category.
    """
    groups = {}  # type: dict[str, list[TestResult]]
    for result in results:
        groups.setdefault(result.category, []).append(result)
    return groups


def _now(now: Optional[datetime.datetime]) -> datetime.datetime:
    return now or datetime.datetime.now(tz=datetime.timezone.utc)


def _progress_bar(percent: float) -> str:
    return (f'<div class="progress-bar"><div class="progress-fill" style="width: {percent:.1f}%">'
            '</div></div>')


def _bucket_item(title: str, bucket: BucketCounts) -> str:
    """Return the HTML for one category or priority box.

    title must be already-escaped HTML.
    """
    return (f'<div class="category-item">\n'
            f'<h4>{title}</h4>\n'
            f'<p><strong>Total:</strong> {bucket.total} | <strong>Passed:</strong> {bucket.passed}'
            f' | <strong>Failed:</strong> {bucket.failed}'
            f' | <strong>Skipped:</strong> {bucket.skipped}</p>\n'
            f'{_progress_bar(summarize.success_percent(bucket))}\n'
            f'</div>')


def _test_item(test: TestResult) -> str:
    status = test.status.name.lower()
    priority = test.priority.name
    item = (f'<li class="test-item">\n'
            f'<div class="test-name"><span class="status-indicator status-{status}"'
            f' title="{test.status.name}"></span>{escape(test.name)}'
            f'<span class="priority-badge priority-{priority.lower()}">{priority}</span></div>\n'
            f'<div class="test-description">{escape(test.description)}</div>\n')
    if test.error:
        item += f'<div class="test-error">Error: {escape(test.error)}</div>\n'
    if test.screenshot:
        item += (f'<div class="test-description">Screenshot: '
                 f'<a href="{escape(test.screenshot)}">{escape(test.screenshot)}</a></div>\n')
    return item + '</li>'


def render_html(summary: TestSummary, results: Sequence[TestResult],
                started: Optional[datetime.datetime] = None,
                finished: Optional[datetime.datetime] = None,
                now: Optional[datetime.datetime] = None) -> str:
    """Render a self-contained HTML client report.

    Args:
        summary: summary computed over results
        results: individual results, in the order in which they were recorded
        started: when the test run started, if known
        finished: when the test run finished, defaulting to now
        now: time at which the report is generated, defaulting to the current time
    """
    now = _now(now)
    finished = finished or now
    average = summary.duration / summary.total if summary.total else 0
    title = escape(config.get('report_title'))

    f = io.StringIO()
    print(textwrap.dedent(f"""\
        <!DOCTYPE html>
        <html lang="en">
        <head>
        <meta charset="UTF-8">
        <meta name="viewport" content="width=device-width, initial-scale=1.0">
        <meta name="generator" content="qareport {qareport.__version__}">
        <title>{title} - Client Summary</title>"""), file=f)
    print(textwrap.dedent(HTML_STYLE), end='', file=f)
    print(textwrap.dedent(f"""\
        </head>
        <body>
        <div class="container">
        <div class="header">
        <h1>{title}</h1>
        <p>Comprehensive Quality Assurance Summary</p>
        <p><strong>Generated:</strong> {escape(now.strftime(TIMEZ_FMT))}</p>
        </div>

        <div class="summary-cards">
        <div class="card success"><h3>{summary.passed}</h3><p>Tests Passed</p></div>
        <div class="card danger"><h3>{summary.failed}</h3><p>Tests Failed</p></div>
        <div class="card info"><h3>{summary.total}</h3><p>Total Tests</p></div>
        <div class="card warning"><h3>{summary.success_rate:.1f}%</h3><p>Success Rate</p>
        {_progress_bar(summary.success_rate)}
        </div>
        </div>

        <div class="section">
        <h2>Overall Performance</h2>
        <div class="category-grid">
        <div class="category-item">
        <h4>Test Duration</h4>
        <p><strong>Total Time:</strong> {summarize.format_duration(summary.duration)}</p>
        <p><strong>Average per Test:</strong> {summarize.format_duration(average)}</p>
        </div>
        <div class="category-item">
        <h4>Execution Time</h4>
        <p><strong>Started:</strong> {escape(started.strftime(TIMEZ_FMT)) if started else 'unknown'}</p>
        <p><strong>Completed:</strong> {escape(finished.strftime(TIMEZ_FMT))}</p>
        </div>
        </div>
        </div>
        """), file=f)

    print('<div class="section">\n<h2>Test Categories</h2>\n<div class="category-grid">', file=f)
    for category, bucket in summary.categories.items():
        print(_bucket_item(f'{category_icon(category)} {escape(category)}', bucket), file=f)
    print('</div>\n</div>\n', file=f)

    print('<div class="section">\n<h2>Priority Breakdown</h2>\n<div class="category-grid">', file=f)
    for priority, bucket in summary.priorities.items():
        print(_bucket_item(f'{priority_icon(priority)} {escape(priority)} Priority', bucket), file=f)
    print('</div>\n</div>\n', file=f)

    print('<div class="section">\n<h2>Detailed Test Results</h2>\n<div class="category-grid">',
          file=f)
    for category, tests in group_by_category(results).items():
        print('<div class="category-item">', file=f)
        print(f'<h4>{category_icon(category)} {escape(category)}</h4>', file=f)
        print('<ul class="test-list">', file=f)
        for test in tests:
            print(_test_item(test), file=f)
        print('</ul>\n</div>', file=f)
    print('</div>\n</div>\n', file=f)

    print(textwrap.dedent(f"""\
        <div class="footer">
        <p>For technical details, please contact the QA team</p>
        <p>This report was automatically generated by qareport {qareport.__version__}</p>
        </div>
        </div>
        </body>
        </html>"""), file=f)
    return f.getvalue()


def assessment(success_rate: float) -> str:
    """Return the name of the overall assessment level for a success rate."""
    for threshold, level in config.get('assessment_thresholds'):
        if success_rate >= threshold:
            return level
    return 'POOR'


def critical_issues(results: Sequence[TestResult]) -> list[str]:
    """Return Markdown list items describing failed high-priority tests."""
    return [f'- **{test.name}:** {test.description}'
            + (f' (Error: {test.error})' if test.error else '')
            for test in results
            if test.status == TestStatus.FAILED and test.priority == Priority.HIGH]


def working_categories(results: Sequence[TestResult]) -> list[str]:
    """Return the categories with at least one passed test, in order of first appearance."""
    return list(dict.fromkeys(test.category for test in results
                              if test.status == TestStatus.PASSED))


def recommendations(summary: TestSummary) -> list[str]:
    recs = []
    if summary.success_rate < config.get('production_success_rate'):
        recs.append('🔧 **Immediate Action Required:** Address failed tests before production '
                    'deployment')
    if summary.failed:
        recs.append('📋 **Review Failed Tests:** Investigate and fix all failed test cases')
    if summary.skipped:
        recs.append('⏭️ **Complete Skipped Tests:** Run skipped tests to ensure full coverage')
    if summary.duration > config.get('slow_suite_ms'):
        recs.append('⚡ **Performance Optimization:** Consider optimizing slow-running tests')
    if not recs:
        recs.append('✅ **Ready for Production:** All tests passing, website is ready for launch')
    return recs


def render_executive_summary(summary: TestSummary, results: Sequence[TestResult],
                             now: Optional[datetime.datetime] = None) -> str:
    """Render a condensed Markdown summary aimed at non-technical readers."""
    now = _now(now)
    issues = critical_issues(results) or ['✅ No critical issues found.']
    working = ([f'- **{category}:** All core functionality working correctly'
                for category in working_categories(results)]
               or ['- No test category has passing tests yet.'])

    f = io.StringIO()
    print(textwrap.dedent(f"""\
        # {config.get('project_name')} - Executive Summary

        ## 📊 Key Metrics
        - **Total Tests Executed:** {summary.total}
        - **Success Rate:** {summary.success_rate:.1f}%
        - **Tests Passed:** {summary.passed}
        - **Tests Failed:** {summary.failed}
        - **Tests Skipped:** {summary.skipped}
        - **Total Duration:** {summarize.format_duration(summary.duration)}

        ## 🎯 Overall Assessment
        {ASSESSMENTS[assessment(summary.success_rate)]}
        """), file=f)
    print('## 🚨 Critical Issues', file=f)
    print('\n'.join(issues) + '\n', file=f)
    print("## ✅ What's Working Well", file=f)
    print('\n'.join(working) + '\n', file=f)
    print('## 📋 Recommendations', file=f)
    print('\n'.join(f'- {rec}' for rec in recommendations(summary)) + '\n', file=f)
    print('## 📈 Category Performance', file=f)
    for category, bucket in summary.categories.items():
        print(f'- **{category}:** {bucket.passed}/{bucket.total} passed '
              f'({summarize.success_percent(bucket):.1f}%)', file=f)
    print('\n---', file=f)
    print(f'*Report generated on {now.strftime(TIMEZ_FMT)}*', file=f)
    return f.getvalue()


def _bucket_dict(bucket: BucketCounts) -> dict[str, int]:
    return {'total': bucket.total, 'passed': bucket.passed, 'failed': bucket.failed,
            'skipped': bucket.skipped}


def render_json(summary: TestSummary, now: Optional[datetime.datetime] = None) -> dict[str, Any]:
    """Return the summary and run metadata as a JSON-serializable object."""
    return {
        'summary': {
            'total': summary.total,
            'passed': summary.passed,
            'failed': summary.failed,
            'skipped': summary.skipped,
            'duration': summary.duration,
            'successRate': summary.success_rate,
            'categories': {k: _bucket_dict(v) for k, v in summary.categories.items()},
            'priorities': {k: _bucket_dict(v) for k, v in summary.priorities.items()},
        },
        'generatedAt': _now(now).isoformat(),
        'metadata': {
            'project': config.get('project_name'),
            'version': config.get('project_version'),
            'framework': config.get('framework_name'),
            'generator': f'qareport {qareport.__version__}',
        },
    }
