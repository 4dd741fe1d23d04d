"""Tests for the HTTP fetcher."""

from unittest.mock import MagicMock

import pytest
import requests

from webstarter.tools.fetcher import Fetcher


def _session(text="node_modules/\n", error=None):
    response = MagicMock()
    response.text = text
    if error is not None:
        response.raise_for_status.side_effect = error
    session = MagicMock()
    session.get.return_value = response
    return session


@pytest.mark.unit
class TestFetcher:

    def test_returns_body(self):
        session = _session()

        assert Fetcher(timeout=5, session=session).fetch_text("https://x.test/a") == "node_modules/\n"
        session.get.assert_called_once_with("https://x.test/a", timeout=5)

    def test_http_error_returns_none(self, capsys):
        session = _session(error=requests.HTTPError("404 Client Error"))

        assert Fetcher(session=session).fetch_text("https://x.test/a") is None
        assert "404" in capsys.readouterr().err

    def test_connection_error_returns_none_without_retry(self):
        session = MagicMock()
        session.get.side_effect = requests.ConnectionError("offline")

        assert Fetcher(session=session).fetch_text("https://x.test/a") is None
        assert session.get.call_count == 1
