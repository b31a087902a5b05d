"""Page fetcher supplying raw HTML to the structured data audit."""

import logging
import time
from typing import Optional

import requests

from localseo.config import DEFAULT_USER_AGENT
from localseo.models import FetchResult

logger = logging.getLogger(__name__)


class PageFetchError(Exception):
    """Raised when a page could not be fetched for auditing."""

    def __init__(self, url: str, status: str, message: str):
        self.url = url
        self.status = status
        self.message = message
        super().__init__(f"Failed to fetch {url} ({status}): {message}")


class PageFetcher:
    """Fetches pages over HTTP with retry handling."""

    DEFAULT_HEADERS = {
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "ja-JP,ja;q=0.9,en-US;q=0.8,en;q=0.7",
    }

    # Final statuses that are not retried
    BLOCKED_STATUS_CODES = (401, 403)
    NOT_FOUND_STATUS_CODE = 404

    def __init__(
        self,
        user_agent: Optional[str] = None,
        timeout: int = 10,
        max_retries: int = 1,
        retry_wait: float = 1.0,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the page fetcher.

        Args:
            user_agent: User agent string (uses a desktop Chrome UA if None)
            timeout: Request timeout in seconds
            max_retries: Maximum number of attempts per URL
            retry_wait: Seconds to wait between attempts
            session: Optional pre-configured requests session
        """
        self.user_agent = user_agent or DEFAULT_USER_AGENT
        self.timeout = timeout
        self.max_retries = max(1, max_retries)
        self.retry_wait = retry_wait

        self.session = session or requests.Session()
        self.session.headers.update(self.DEFAULT_HEADERS)
        self.session.headers.update({"User-Agent": self.user_agent})

    @classmethod
    def from_config(cls, config) -> "PageFetcher":
        """Create a fetcher from a Config instance."""
        return cls(
            user_agent=config.user_agent,
            timeout=config.timeout,
            max_retries=config.max_retries,
            retry_wait=config.retry_wait,
        )

    def fetch(self, url: str) -> FetchResult:
        """Fetch a single URL.

        Args:
            url: The URL to fetch

        Returns:
            FetchResult with the HTML on success, or the failure status
        """
        result = FetchResult(url=url)

        for attempt in range(1, self.max_retries + 1):
            try:
                response = self.session.get(
                    url, timeout=self.timeout, allow_redirects=True
                )
                result.status_code = response.status_code

                if response.status_code == 200:
                    result.html = response.text
                    result.status = "success"
                    result.error = None
                    return result

                if response.status_code in self.BLOCKED_STATUS_CODES:
                    result.status = "blocked"
                    result.error = f"HTTP {response.status_code} - アクセス制限"
                    return result

                if response.status_code == self.NOT_FOUND_STATUS_CODE:
                    result.status = "error"
                    result.error = "HTTP 404 - ページ非存在"
                    return result

                result.status = "error"
                result.error = f"HTTP {response.status_code}"

            except requests.exceptions.Timeout:
                result.status = "timeout"
                result.error = f"タイムアウト（試行{attempt}/{self.max_retries}）"

            except requests.exceptions.ConnectionError as e:
                result.status = "error"
                result.error = f"接続エラー: {e}"

            except requests.exceptions.RequestException as e:
                result.status = "error"
                result.error = f"不明なエラー: {e}"

            logger.warning(
                f"Fetch attempt {attempt}/{self.max_retries} failed for {url}: {result.error}"
            )
            if attempt < self.max_retries:
                time.sleep(self.retry_wait)

        if result.status != "timeout":
            result.status = "error"
        return result
