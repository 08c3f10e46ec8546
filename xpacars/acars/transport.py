# xpacars/acars/transport.py
"""
Blocking HTTP transport for the xpacars client.

One call is one POST: no retries, a bounded number of redirects and an
explicit timeout so a hung endpoint can't stall the tick scheduler forever.
"""
import logging
from typing import Optional

import requests

from .constants import CONNECTION
from .data_models import TransportResponse
from .exceptions import TransportError

logger = logging.getLogger(__name__)

class HttpTransport:
    """Posts request bodies to the collection endpoint over a requests session."""

    def __init__(
        self,
        timeout: float = CONNECTION.REQUEST_TIMEOUT_S,
        max_redirects: int = CONNECTION.MAX_REDIRECTS,
        user_agent: str = CONNECTION.USER_AGENT,
        session: Optional[requests.Session] = None,
    ):
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.max_redirects = max_redirects
        self._session.headers["User-Agent"] = user_agent

    def post(self, url: str, content_type: str, body: bytes) -> TransportResponse:
        """
        Sends `body` to `url` and returns the status code and full reply body.

        Any HTTP status is returned as-is; interpreting it is up to the caller.

        Raises:
            TransportError: DNS failure, refused connection, timeout, redirect
                loop or an unusable URL.
        """
        logger.debug(f"POST {url} ({content_type}, {len(body)} bytes)")
        try:
            response = self._session.post(
                url,
                data=body,
                headers={"Content-Type": content_type},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(f"POST failed: {e}", url=url) from e

        logger.debug(f"POST {url} answered HTTP {response.status_code}")
        return TransportResponse(status_code=response.status_code, body=response.content)

    def close(self):
        """Releases pooled connections."""
        self._session.close()

    def __enter__(self) -> 'HttpTransport':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
