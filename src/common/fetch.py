"""HTTP page fetching with retry and politeness delay."""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

import requests
from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_incrementing,
)

from common.errors import FetchError

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 3
RETRY_DELAY = 1.0
MAX_REDIRECTS = 5
DEFAULT_TIMEOUT = 30.0

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (compatible; BlogBuilder/1.0; +https://github.com/dbbuilder-org/blog-builder)"
)

REQUEST_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
}


def _status_code(exception: BaseException) -> Optional[int]:
    if isinstance(exception, requests.exceptions.HTTPError) and exception.response is not None:
        return exception.response.status_code
    return None


def _is_retryable_error(exception: BaseException) -> bool:
    """Return False only for client errors (4xx) other than 429."""
    status = _status_code(exception)
    return not (status is not None and 400 <= status < 500 and status != 429)


def _build_session() -> requests.Session:
    session = requests.Session()
    session.max_redirects = MAX_REDIRECTS
    return session


def fetch_page(
    url: str,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
    session: Optional[requests.Session] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> str:
    """
    Fetch a page's HTML.

    Makes up to 3 attempts, waiting attempt x 1s between them. Client errors
    (4xx except 429) are not retried. Timeouts, connection errors, 429 and
    5xx are.

    Raises:
        FetchError: With the URL and the last underlying error message.
    """
    if session is None:
        with _build_session() as own_session:
            return fetch_page(url, timeout, user_agent, own_session, sleep)

    def _get() -> str:
        response = session.get(
            url,
            timeout=timeout,
            headers={"User-Agent": user_agent, **REQUEST_HEADERS},
            allow_redirects=True,
        )
        response.raise_for_status()
        return response.text

    retrying = Retrying(
        stop=stop_after_attempt(MAX_ATTEMPTS),
        wait=wait_incrementing(start=RETRY_DELAY, increment=RETRY_DELAY),
        retry=retry_if_exception(_is_retryable_error),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        sleep=sleep,
        reraise=True,
    )

    try:
        return retrying(_get)
    except Exception as e:
        status = _status_code(e)
        if not _is_retryable_error(e):
            raise FetchError(url, str(status), status_code=status) from e
        raise FetchError(
            url, f"failed after {MAX_ATTEMPTS} attempts: {e}", status_code=status
        ) from e


class RateLimitedFetcher:
    """Sequential fetcher that waits `delay` seconds before every fetch but the first.

    One instance is shared by all fetches of a stage run, so at most one
    request is in flight against the target site and consecutive requests are
    always spaced by the configured delay. The instance owns one HTTP session;
    use it as a context manager or call close() when done.
    """

    def __init__(
        self,
        delay: float,
        fetch: Callable[..., str] = fetch_page,
        sleep: Callable[[float], None] = time.sleep,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.delay = delay
        self._fetch = fetch
        self._sleep = sleep
        self._timeout = timeout
        self.session = session or _build_session()
        self.fetch_count = 0

    def __call__(self, url: str) -> str:
        if self.fetch_count and self.delay > 0:
            self._sleep(self.delay)
        self.fetch_count += 1
        logger.debug("Fetching %s", url)
        return self._fetch(url, timeout=self._timeout, session=self.session)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "RateLimitedFetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
