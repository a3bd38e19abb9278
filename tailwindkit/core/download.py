"""
HTTP fetching with bounded exponential-backoff retry.

The same retry policy is used for the checksum manifest and for the binary
itself; callers only differ in what they do with the payload:

- fetch() / fetch_text() return the body in memory (manifest)
- fetch_to_file() streams the body to disk in chunks (binary)

A fetch makes at most `max_attempts` attempts. The delay before retry *i*
(1-indexed) is `base_delay * 2 ** (i - 1)`, i.e. 1s then 2s with the
defaults. Any requests transport error is retryable, including non-2xx
statuses surfaced by raise_for_status().
"""

import logging
import time
from pathlib import Path
from typing import Callable, Optional, TypeVar

import requests
from requests.exceptions import RequestException

from tailwindkit.core.exceptions import FetchFailedError
from tailwindkit.core.verification import CHUNK_SIZE

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_BASE_DELAY = 1.0
DEFAULT_TIMEOUT = 30


class RetryingFetcher:
    """
    Perform HTTP GET requests with retry.

    Attributes:
        max_attempts: Total number of attempts per fetch
        base_delay: Delay in seconds before the first retry
        timeout: Per-request timeout in seconds

    Example:
        >>> fetcher = RetryingFetcher()
        >>> manifest = fetcher.fetch_text("https://example.com/sha256sums.txt")
    """

    def __init__(
        self,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        base_delay: float = DEFAULT_BASE_DELAY,
        timeout: int = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize fetcher.

        Args:
            max_attempts: Maximum number of attempts (default: 3)
            base_delay: Base backoff delay in seconds (default: 1.0)
            timeout: Request timeout in seconds
            session: Optional requests session (default: module-level requests)
            sleep: Function used to wait between attempts
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

        self.max_attempts = max_attempts
        self.base_delay = base_delay
        self.timeout = timeout
        self.session = session
        self._sleep = sleep

    def backoff_delay(self, retry: int) -> float:
        """Delay in seconds before retry number `retry` (1-indexed)."""
        return self.base_delay * 2 ** (retry - 1)

    def fetch(self, url: str) -> bytes:
        """
        Download a resource into memory.

        Raises:
            FetchFailedError: If every attempt fails
        """

        def attempt() -> bytes:
            response = self._get(url, stream=False)
            return response.content

        return self._with_retry(url, attempt)

    def fetch_text(self, url: str) -> str:
        """
        Download a resource and decode it as UTF-8 text.

        Raises:
            FetchFailedError: If every attempt fails
            UnicodeDecodeError: If the body is not valid UTF-8
        """
        return self.fetch(url).decode("utf-8")

    def fetch_to_file(self, url: str, destination: Path) -> Path:
        """
        Stream a resource to a file.

        Each attempt truncates the destination, so a retry never appends to
        a partial body from a previous attempt.

        Args:
            url: URL to download
            destination: File to write

        Returns:
            The destination path

        Raises:
            FetchFailedError: If every attempt fails
        """
        destination = Path(destination)

        def attempt() -> Path:
            response = self._get(url, stream=True)
            try:
                with open(destination, "wb") as f:
                    for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                        if chunk:
                            f.write(chunk)
            finally:
                response.close()
            return destination

        return self._with_retry(url, attempt)

    def _get(self, url: str, stream: bool) -> requests.Response:
        getter = self.session.get if self.session is not None else requests.get
        response = getter(url, stream=stream, timeout=self.timeout, allow_redirects=True)
        response.raise_for_status()
        return response

    def _with_retry(self, url: str, operation: Callable[[], T]) -> T:
        last_error: Optional[RequestException] = None

        for attempt in range(1, self.max_attempts + 1):
            try:
                logger.info(f"Downloading {url} (attempt {attempt}/{self.max_attempts})")
                return operation()
            except RequestException as e:
                last_error = e
                if attempt == self.max_attempts:
                    break

                delay = self.backoff_delay(attempt)
                logger.warning(
                    f"Download attempt {attempt} failed: {e}. Retrying in {delay:g}s..."
                )
                self._sleep(delay)

        logger.error(f"Giving up on {url} after {self.max_attempts} attempts")
        raise FetchFailedError(url, self.max_attempts, last_error) from last_error


__all__ = [
    "RetryingFetcher",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_BASE_DELAY",
    "DEFAULT_TIMEOUT",
]
