"""Test report rendering."""

import datetime
import json
import unittest

from qareport import report
from qareport import summarize
from qareport.testcasedef import Priority, TestStatus

from .util import make_result, patch_config_get

NOW = datetime.datetime(2024, 6, 3, 14, 30, 0, tzinfo=datetime.timezone.utc)


def sample_results():
    return [
        make_result('Homepage loads', TestStatus.PASSED, 2500, 'Functional', Priority.HIGH,
                    description='Verifies the homepage'),
        make_result('Mobile menu', TestStatus.PASSED, 1000, 'Responsive', Priority.MEDIUM),
        make_result('Contact form', TestStatus.FAILED, 3000, 'Functional', Priority.HIGH,
                    error='Timeout 30000ms exceeded', description='Validates the form'),
        make_result('Safari layout', TestStatus.FAILED, 2000, 'Cross-Browser', Priority.MEDIUM,
                    error='flexbox broken'),
        make_result('Hover effects', TestStatus.SKIPPED, 0, 'UI/UX', Priority.LOW),
        make_result('Navigation', TestStatus.PASSED, 500, 'Functional', Priority.HIGH),
    ]


class TestRenderHtml(unittest.TestCase):
    """Test report.render_html."""

    def test_document(self):
        results = sample_results()
        html = report.render_html(summarize.compute(results), results, now=NOW)
        self.assertTrue(html.startswith('<!DOCTYPE html>'))
        self.assertTrue(html.rstrip().endswith('</html>'))
        self.assertIn('<h3>3</h3><p>Tests Passed</p>', html)
        self.assertIn('<h3>2</h3><p>Tests Failed</p>', html)
        self.assertIn('<h3>6</h3><p>Total Tests</p>', html)
        self.assertIn('<h3>50.0%</h3>', html)
        self.assertIn('Mon, 03 Jun 2024 14:30:00 +0000', html)
        self.assertIn('<strong>Total Time:</strong> 9s', html)
        self.assertIn('<strong>Average per Test:</strong> 1s', html)
        self.assertIn('Error: Timeout 30000ms exceeded', html)
        self.assertIn('priority-high', html)
        self.assertIn('status-skipped', html)

    def test_category_progress(self):
        results = sample_results()
        html = report.render_html(summarize.compute(results), results, now=NOW)
        # Functional is 2 of 3 passed
        self.assertIn('style="width: 66.7%"', html)
        # Cross-Browser and UI/UX have no passes
        self.assertIn('style="width: 0.0%"', html)

    def test_empty(self):
        html = report.render_html(summarize.compute([]), [], now=NOW)
        self.assertIn('<h3>0.0%</h3>', html)
        self.assertIn('<strong>Average per Test:</strong> 0s', html)
        self.assertIn('<strong>Started:</strong> unknown', html)

    def test_group_order(self):
        results = sample_results()
        html = report.render_html(summarize.compute(results), results, now=NOW)
        detail = html[html.index('Detailed Test Results'):]
        # Grouped by category in order of first appearance, then insertion order within it
        positions = [detail.index(name) for name in
                     ('Homepage loads', 'Contact form', 'Navigation', 'Mobile menu',
                      'Safari layout', 'Hover effects')]
        self.assertEqual(sorted(positions), positions)

    def test_escaping(self):
        results = [
            make_result('<script>alert(1)</script>', TestStatus.FAILED,
                        category='A & B', error='expected "<div>"'),
        ]
        html = report.render_html(summarize.compute(results), results, now=NOW)
        self.assertNotIn('<script>', html)
        self.assertIn('&lt;script&gt;alert(1)&lt;/script&gt;', html)
        self.assertIn('A &amp; B', html)
        self.assertIn('expected &quot;&lt;div&gt;&quot;', html)

    def test_title(self):
        with patch_config_get('report_title', 'Nightly <run>'):
            html = report.render_html(summarize.compute([]), [], now=NOW)
        self.assertIn('<h1>Nightly &lt;run&gt;</h1>', html)


class TestGroupByCategory(unittest.TestCase):

    def test_group(self):
        results = sample_results()
        groups = report.group_by_category(results)
        self.assertEqual(['Functional', 'Responsive', 'Cross-Browser', 'UI/UX'], list(groups))
        self.assertEqual(['Homepage loads', 'Contact form', 'Navigation'],
                         [r.name for r in groups['Functional']])


class TestExecutiveSummary(unittest.TestCase):
    """Test report.render_executive_summary."""

    def test_assessment(self):
        for rate, level in [
            (100, 'EXCELLENT'),
            (95, 'EXCELLENT'),
            (94.9, 'GOOD'),
            (85, 'GOOD'),
            (70, 'FAIR'),
            (69.99, 'POOR'),
            (0, 'POOR'),
        ]:
            with self.subTest(rate=rate):
                self.assertEqual(level, report.assessment(rate))

    def test_summary(self):
        results = sample_results()
        text = report.render_executive_summary(summarize.compute(results), results, now=NOW)
        self.assertIn('- **Total Tests Executed:** 6', text)
        self.assertIn('- **Success Rate:** 50.0%', text)
        self.assertIn('- **Tests Skipped:** 1', text)
        self.assertIn('**POOR**', text)
        # Only failed HIGH priority tests are critical
        self.assertIn('- **Contact form:** Validates the form (Error: Timeout 30000ms exceeded)',
                      text)
        self.assertNotIn('**Safari layout:**', text)
        self.assertIn('- **Functional:** All core functionality working correctly', text)
        self.assertIn('- **Responsive:** All core functionality working correctly', text)
        self.assertNotIn('- **UI/UX:** All core', text)
        self.assertIn('- **Functional:** 2/3 passed (66.7%)', text)
        self.assertIn('- **UI/UX:** 0/1 passed (0.0%)', text)
        self.assertIn('Immediate Action Required', text)
        self.assertIn('Review Failed Tests', text)
        self.assertIn('Complete Skipped Tests', text)
        self.assertNotIn('Performance Optimization', text)
        self.assertNotIn('Ready for Production', text)
        self.assertIn('*Report generated on Mon, 03 Jun 2024 14:30:00 +0000*', text)

    def test_all_passed(self):
        results = [make_result('a'), make_result('b', category='Mobile')]
        text = report.render_executive_summary(summarize.compute(results), results, now=NOW)
        self.assertIn('**EXCELLENT**', text)
        self.assertIn('No critical issues found.', text)
        self.assertIn('Ready for Production', text)
        self.assertNotIn('Immediate Action Required', text)

    def test_slow(self):
        results = [make_result('slow', duration=300001)]
        recs = report.recommendations(summarize.compute(results))
        self.assertEqual(1, len(recs))
        self.assertIn('Performance Optimization', recs[0])

        results = [make_result('ok', duration=300000)]
        recs = report.recommendations(summarize.compute(results))
        self.assertIn('Ready for Production', recs[0])

    def test_empty(self):
        text = report.render_executive_summary(summarize.compute([]), [], now=NOW)
        self.assertIn('- **Total Tests Executed:** 0', text)
        self.assertIn('**POOR**', text)
        self.assertIn('No critical issues found.', text)
        self.assertIn('No test category has passing tests yet.', text)


class TestRenderJson(unittest.TestCase):
    """Test report.render_json."""

    def test_json(self):
        results = sample_results()
        doc = report.render_json(summarize.compute(results), now=NOW)
        # Must survive serialization
        doc = json.loads(json.dumps(doc))
        self.assertEqual('2024-06-03T14:30:00+00:00', doc['generatedAt'])
        self.assertEqual({'project': 'Website Testing', 'version': '1.0.0',
                          'framework': 'Playwright + Cucumber'},
                         {k: v for k, v in doc['metadata'].items() if k != 'generator'})
        summary = doc['summary']
        self.assertEqual(6, summary['total'])
        self.assertEqual(3, summary['passed'])
        self.assertEqual(2, summary['failed'])
        self.assertEqual(1, summary['skipped'])
        self.assertEqual(9000, summary['duration'])
        self.assertAlmostEqual(50.0, summary['successRate'])
        self.assertEqual({'total': 3, 'passed': 2, 'failed': 1, 'skipped': 0},
                         summary['categories']['Functional'])
        self.assertEqual({'total': 1, 'passed': 0, 'failed': 0, 'skipped': 1},
                         summary['priorities']['LOW'])

    def test_empty(self):
        doc = report.render_json(summarize.compute([]), now=NOW)
        self.assertEqual(0, doc['summary']['successRate'])
        self.assertEqual({}, doc['summary']['categories'])
