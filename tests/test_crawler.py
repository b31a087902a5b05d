"""Tests for the page fetcher."""

from unittest.mock import Mock, patch

import pytest
import requests

from localseo.config import DEFAULT_USER_AGENT, Config
from localseo.crawler import PageFetcher, PageFetchError


def make_session(*responses):
    """Create a mock session returning (or raising) the given responses."""
    session = Mock()
    session.headers = {}
    session.get.side_effect = list(responses)
    return session


def response(status_code: int, text: str = "") -> Mock:
    return Mock(status_code=status_code, text=text)


class TestPageFetcher:
    """Test cases for PageFetcher."""

    def test_fetcher_initialization(self):
        fetcher = PageFetcher()

        assert fetcher.user_agent == DEFAULT_USER_AGENT
        assert fetcher.session.headers["User-Agent"] == DEFAULT_USER_AGENT
        assert fetcher.session.headers["Accept-Language"].startswith("ja-JP")

    def test_fetcher_custom_user_agent(self):
        fetcher = PageFetcher(user_agent="CustomBot/1.0", session=make_session())

        assert fetcher.session.headers["User-Agent"] == "CustomBot/1.0"

    def test_from_config(self):
        config = Config(timeout=5, max_retries=2, retry_wait=0.0, user_agent="Bot/2.0")
        fetcher = PageFetcher.from_config(config)

        assert fetcher.timeout == 5
        assert fetcher.max_retries == 2
        assert fetcher.user_agent == "Bot/2.0"

    def test_fetch_success(self):
        session = make_session(response(200, "<html></html>"))
        fetcher = PageFetcher(session=session, timeout=7)

        result = fetcher.fetch("https://example.com/")

        assert result.success is True
        assert result.html == "<html></html>"
        assert result.status_code == 200
        assert result.error is None
        session.get.assert_called_once_with(
            "https://example.com/", timeout=7, allow_redirects=True
        )

    @pytest.mark.parametrize("status_code", [401, 403])
    def test_blocked_not_retried(self, status_code):
        session = make_session(response(status_code))
        fetcher = PageFetcher(session=session, max_retries=3, retry_wait=0)

        result = fetcher.fetch("https://example.com/")

        assert result.status == "blocked"
        assert str(status_code) in result.error
        assert session.get.call_count == 1

    def test_not_found_not_retried(self):
        session = make_session(response(404))
        fetcher = PageFetcher(session=session, max_retries=3, retry_wait=0)

        result = fetcher.fetch("https://example.com/missing")

        assert result.status == "error"
        assert "404" in result.error
        assert session.get.call_count == 1

    def test_server_error_retried(self):
        session = make_session(response(500), response(200, "<html>ok</html>"))
        fetcher = PageFetcher(session=session, max_retries=2, retry_wait=0)

        result = fetcher.fetch("https://example.com/")

        assert result.success is True
        assert session.get.call_count == 2

    @patch("localseo.crawler.time.sleep")
    def test_retries_exhausted(self, mock_sleep):
        session = make_session(response(503), response(503), response(503))
        fetcher = PageFetcher(session=session, max_retries=3, retry_wait=1.5)

        result = fetcher.fetch("https://example.com/")

        assert result.success is False
        assert result.status == "error"
        assert result.error == "HTTP 503"
        assert mock_sleep.call_count == 2
        mock_sleep.assert_called_with(1.5)

    def test_timeout(self):
        session = make_session(requests.exceptions.Timeout())
        fetcher = PageFetcher(session=session, max_retries=1)

        result = fetcher.fetch("https://example.com/")

        assert result.status == "timeout"
        assert "1/1" in result.error

    def test_connection_error(self):
        session = make_session(requests.exceptions.ConnectionError("refused"))
        fetcher = PageFetcher(session=session, max_retries=1)

        result = fetcher.fetch("https://this-domain-does-not-exist-12345.com")

        assert result.status == "error"
        assert result.error.startswith("接続エラー")


class TestPageFetchError:
    """Test cases for PageFetchError."""

    def test_message(self):
        error = PageFetchError("https://example.com/", "blocked", "HTTP 403")

        assert error.url == "https://example.com/"
        assert error.status == "blocked"
        assert error.message == "HTTP 403"
        assert str(error) == "Failed to fetch https://example.com/ (blocked): HTTP 403"
