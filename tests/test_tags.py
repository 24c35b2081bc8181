"""Test tags."""

import unittest

from qareport import tags
from qareport.testcasedef import Priority

from .util import patch_config_get


class TestCategory(unittest.TestCase):
    """Test tags.category_from_tags."""

    def test_categories(self):
        for scenario_tags, category in [
            (['@functional'], 'Functional'),
            (['@ui-ux'], 'UI/UX'),
            (['@cross-browser', '@functional'], 'Cross-Browser'),
            (['@smoke', '@tablet'], 'Tablet'),
            (['responsive'], 'Responsive'),
            (['@Performance'], 'Performance'),
            (['@smoke'], 'General'),
            ([], 'General'),
        ]:
            with self.subTest(tags=scenario_tags):
                self.assertEqual(category, tags.category_from_tags(scenario_tags))

    def test_configured_default(self):
        with patch_config_get('default_category', 'Other'):
            self.assertEqual('Other', tags.category_from_tags(['@smoke']))


class TestPriority(unittest.TestCase):
    """Test tags.priority_from_tags."""

    def test_priorities(self):
        for scenario_tags, priority in [
            (['@critical'], Priority.HIGH),
            (['@high'], Priority.HIGH),
            (['@medium'], Priority.MEDIUM),
            (['@low'], Priority.LOW),
            # explicit priority wins over the type of test
            (['@functional', '@low'], Priority.LOW),
            (['@ui-ux', '@critical'], Priority.HIGH),
            # implied by type of test
            (['@functional'], Priority.HIGH),
            (['@performance'], Priority.HIGH),
            (['@responsive'], Priority.MEDIUM),
            (['@accessibility', '@functional'], Priority.MEDIUM),
            (['@mobile'], Priority.MEDIUM),
            ([], Priority.MEDIUM),
        ]:
            with self.subTest(tags=scenario_tags):
                self.assertEqual(priority, tags.priority_from_tags(scenario_tags))

    def test_configured_default(self):
        with patch_config_get('default_priority', 'LOW'):
            self.assertEqual(Priority.LOW, tags.priority_from_tags(['@smoke']))


class TestDescription(unittest.TestCase):
    """Test tags.description_for_category."""

    def test_known(self):
        self.assertEqual('Tests desktop-specific features and layout',
                         tags.description_for_category('Desktop'))

    def test_unknown(self):
        self.assertEqual('General website testing', tags.description_for_category('General'))
