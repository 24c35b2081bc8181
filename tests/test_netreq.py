"""Test netreq."""

import unittest
from unittest.mock import Mock

import requests

from qareport import netreq


class TestFetchText(unittest.TestCase):

    def test_fetch(self):
        session = Mock()
        session.get.return_value.text = '[]'
        self.assertEqual('[]', netreq.fetch_text('https://ci.example.com/report.json', session))
        session.get.assert_called_once_with('https://ci.example.com/report.json',
                                            timeout=netreq.TIMEOUT)
        session.get.return_value.raise_for_status.assert_called_once_with()

    def test_http_error(self):
        session = Mock()
        session.get.return_value.raise_for_status.side_effect = netreq.HTTPError('404')
        with self.assertRaises(requests.exceptions.HTTPError):
            netreq.fetch_text('https://ci.example.com/missing.json', session)


class TestSession(unittest.TestCase):

    def test_configuration(self):
        with netreq.Session() as session:
            self.assertTrue(session.headers['User-Agent'].startswith('qareport/'))
            retries = session.get_adapter('https://ci.example.com/').max_retries
            self.assertEqual(4, retries.total)
            self.assertIn(503, retries.status_forcelist)
