"""Fetcher: plain HTTP GET for small text resources."""

import sys

import requests


class Fetcher:
    """Downloads a text file. No retries: a failed request is final."""

    def __init__(self, timeout=30.0, session=None):
        self._timeout = timeout
        self._session = session or requests.Session()

    def fetch_text(self, url):
        """Return the response body, or None if the request failed."""
        try:
            response = self._session.get(url, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            print(f"Error: could not fetch {url}: {e}", file=sys.stderr)
            return None
        return response.text
