"""
Outbound call to the upstream LLM API.
"""
import logging
from typing import Optional

import httpx

from chat_proxy.services.adapters import UpstreamRequest

logger = logging.getLogger(__name__)


class UpstreamInvoker:
    """
    Issues exactly one POST per chat request.

    The API key is fixed at construction so nothing downstream reads the
    environment. No retries; transport errors propagate to the caller.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_key = api_key
        self.timeout = timeout
        self.transport = transport

    @property
    def has_key(self) -> bool:
        return bool(self.api_key)

    async def send(self, upstream: UpstreamRequest) -> httpx.Response:
        """
        POST the adapted payload and return the fully read response.

        Args:
            upstream: URL, JSON body, headers and query params from the adapter

        Returns:
            The upstream response, whatever its status code
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.post(
                upstream.url,
                json=upstream.payload,
                headers=upstream.headers,
                params=upstream.params or None,
            )
        logger.debug("Upstream responded %s", response.status_code)
        return response
