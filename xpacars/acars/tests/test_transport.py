#!/usr/bin/env python3
# xpacars/acars/tests/test_transport.py

import unittest
from unittest.mock import MagicMock, patch

import requests

from xpacars.acars.data_models import TransportResponse
from xpacars.acars.exceptions import TransportError
from xpacars.acars.transport import HttpTransport

URL = "http://acars.example.com/api"

class TestHttpTransport(unittest.TestCase):
    def setUp(self):
        self.session = MagicMock()
        self.session.headers = {}
        self.transport = HttpTransport(timeout=10.0, max_redirects=50,
                                       user_agent="xpacars/1.0.0", session=self.session)

    def test_session_settings(self):
        self.assertEqual(self.session.max_redirects, 50)
        self.assertEqual(self.session.headers["User-Agent"], "xpacars/1.0.0")

    def test_post_returns_status_and_body(self):
        self.session.post.return_value = MagicMock(status_code=201, content=b"42\n")

        response = self.transport.post(URL, "application/vnd.xpacars.flight", b"1\nC172\nTF-ABC\nCessna\n")

        self.assertEqual(response, TransportResponse(status_code=201, body=b"42\n"))
        self.session.post.assert_called_once_with(
            URL,
            data=b"1\nC172\nTF-ABC\nCessna\n",
            headers={"Content-Type": "application/vnd.xpacars.flight"},
            timeout=10.0,
        )

    def test_http_error_status_is_returned(self):
        self.session.post.return_value = MagicMock(status_code=500, content=b"boom")

        response = self.transport.post(URL, "application/vnd.xpacars.position", b"1\n")

        self.assertEqual(response.status_code, 500)

    def test_connection_error_becomes_transport_error(self):
        self.session.post.side_effect = requests.exceptions.ConnectionError("Connection refused")

        with self.assertRaises(TransportError) as ctx:
            self.transport.post(URL, "application/vnd.xpacars.position", b"1\n")
        self.assertEqual(ctx.exception.url, URL)
        self.assertIsInstance(ctx.exception.__cause__, requests.exceptions.ConnectionError)

    def test_timeout_becomes_transport_error(self):
        self.session.post.side_effect = requests.exceptions.ReadTimeout("read timed out")

        with self.assertRaises(TransportError):
            self.transport.post(URL, "application/vnd.xpacars.position", b"1\n")

    def test_redirect_loop_becomes_transport_error(self):
        self.session.post.side_effect = requests.exceptions.TooManyRedirects("Exceeded 50 redirects.")

        with self.assertRaises(TransportError):
            self.transport.post(URL, "application/vnd.xpacars.position", b"1\n")

    def test_bad_url_becomes_transport_error(self):
        transport = HttpTransport()

        with self.assertRaises(TransportError):
            transport.post("not a url", "application/vnd.xpacars.position", b"1\n")
        transport.close()

    def test_close_releases_session(self):
        with self.transport:
            pass
        self.session.close.assert_called_once_with()

class TestDefaultSession(unittest.TestCase):
    @patch("xpacars.acars.transport.requests.Session")
    def test_default_session_is_configured(self, mock_session_cls):
        mock_session = mock_session_cls.return_value
        mock_session.headers = {}

        transport = HttpTransport()

        self.assertEqual(transport.timeout, 10.0)
        self.assertEqual(mock_session.max_redirects, 50)
        self.assertTrue(mock_session.headers["User-Agent"].startswith("xpacars/"))

if __name__ == '__main__':
    unittest.main()
