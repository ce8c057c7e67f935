import time
from typing import Any, Dict, Optional, Union
from urllib.parse import urljoin

import pytest
import requests

from fakestore import config
from fakestore.logger import get_logger

logger = get_logger("fakestore.client")


def default_headers() -> Dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }


class FakeStoreApi:
    """
    Single-shot HTTP client for the Fake Store API.

    Configure the public attributes, then call fetch() once. Every call
    asserts the transport-level contract (2xx status, JSON content type)
    before decoding, so a test fails at the request that broke it.
    Keeping request construction here leaves one place to add auth headers
    or response hooks later.
    """

    def __init__(self, url: Optional[str] = None):
        self.url: str = url or config.BASE_URL
        self.method: str = "GET"
        self.headers: Dict[str, str] = default_headers()
        self.body: Optional[Union[str, bytes]] = None
        self.timeout: Optional[float] = config.REQUEST_TIMEOUT

    def build_url(self, path: Optional[str] = None) -> str:
        return urljoin(self.url, path) if path else self.url

    def fetch(self, path: Optional[str] = None) -> Any:
        """
        Issue one request and return the decoded JSON body.

        The result is not validated; callers parse it with a schema from
        fakestore.models.
        """
        url = self.build_url(path)
        logger.info(f"{self.method} {url}")

        start = time.perf_counter()
        try:
            response = requests.request(
                self.method,
                url,
                headers=self.headers,
                data=self.body,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"{self.method} {url} failed: {e}")
            pytest.fail(f"Fake Store API is not reachable at {url}: {e}")

        content_type = response.headers.get("Content-Type")
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.debug(f"{response.status_code} {content_type} ({elapsed_ms:.1f}ms)")

        if not 200 <= response.status_code < 300:
            logger.error(f"{self.method} {url} returned {response.status_code}: {response.text[:200]}")
        assert 200 <= response.status_code < 300, \
            f"Expected success status from {self.method} {url}, got {response.status_code}: {response.text[:200]}"

        if content_type is None or "application/json" not in content_type:
            logger.error(f"{self.method} {url} returned Content-Type {content_type!r}")
        assert content_type is not None, f"{self.method} {url} returned no Content-Type header"
        assert "application/json" in content_type, \
            f"Expected JSON from {self.method} {url}, got Content-Type {content_type!r}"

        return response.json()
