"""
HTTP Acquirer - Fetch raw HTML with httpx.

Used for URL sources when the headless browser is disabled. The response
body is the server's markup; scripts are not executed.
"""

import logging
from typing import Optional

import httpx

from ..contracts.errors import AcquisitionError

from .base import DocumentAcquirer


logger = logging.getLogger(__name__)


class HttpAcquirer(DocumentAcquirer):
    """
    GET a URL and return the decoded body.

    Usage:
        acquirer = HttpAcquirer(timeout=10.0)
        html = await acquirer.acquire("https://example.com")
    """

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: str = "wcag-fixer/0.1",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the acquirer.

        Args:
            timeout: Request timeout in seconds
            user_agent: User-Agent header value
            transport: Custom httpx transport (tests use httpx.MockTransport)
        """
        self.timeout = timeout
        self.user_agent = user_agent
        self._transport = transport

    def _get_headers(self) -> dict:
        return {
            "User-Agent": self.user_agent,
            "Accept": "text/html,application/xhtml+xml",
        }

    async def acquire(self, source: str) -> str:
        logger.info(f"Fetching {source}")

        async with httpx.AsyncClient(
            transport=self._transport,
            timeout=self.timeout,
            follow_redirects=True,
        ) as client:
            try:
                response = await client.get(source, headers=self._get_headers())
            except httpx.RequestError as e:
                logger.error(f"Network error fetching {source}: {e}")
                raise AcquisitionError(f"Network error fetching {source}", source=source, cause=e) from e

        if not response.is_success:
            logger.error(f"Fetching {source} failed: HTTP {response.status_code}")
            raise AcquisitionError(
                f"Fetching {source} failed with HTTP {response.status_code}",
                source=source,
            )

        return response.text
