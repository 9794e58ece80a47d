"""Async client for the Jupiter swap API."""

import logging
from typing import Optional

import httpx

from jupiter_swap_api_client.config import Settings, get_settings
from jupiter_swap_api_client.errors import RequestError
from jupiter_swap_api_client.quote import QuoteRequest, QuoteResponse
from jupiter_swap_api_client.swap import (
    SwapInstructionsResponse,
    SwapInstructionsResponseInternal,
    SwapRequest,
    SwapResponse,
)
from jupiter_swap_api_client.transport import (
    ProxyTypes,
    build_client,
    check_status_code_and_deserialize,
)

logger = logging.getLogger(__name__)


class JupiterSwapApiClient:
    """Client for the quote, swap and swap-instructions endpoints.

    Every call builds its own HTTP client from the ``proxy`` argument, sends
    exactly one request and closes the client, so concurrent calls share no
    connection state. Failures are raised as ``RequestError`` and never
    retried.
    """

    def __init__(self, base_path: str):
        """Initialize the client.

        Args:
            base_path: Service base URL, e.g. https://quote-api.jup.ag/v6
        """
        self.base_path = base_path

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "JupiterSwapApiClient":
        """Create a client for the configured base path."""
        if settings is None:
            settings = get_settings()
        return cls(settings.base_path)

    async def _send(
        self,
        method: str,
        path: str,
        proxy: Optional[ProxyTypes],
        **kwargs,
    ) -> httpx.Response:
        url = f"{self.base_path}{path}"
        logger.debug(f"{method} {url} (proxy: {'yes' if proxy else 'no'})")
        async with build_client(proxy) as client:
            try:
                response = await client.request(method, url, **kwargs)
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                raise RequestError(f"{method} {url} failed: {type(e).__name__}: {e}") from e
        return response

    async def quote(
        self,
        quote_request: QuoteRequest,
        proxy: Optional[ProxyTypes] = None,
    ) -> QuoteResponse:
        """Get a quote.

        Args:
            quote_request: Token pair, amount and routing options
            proxy: Optional proxy URL for this call only

        Returns:
            Quote with the computed route plan
        """
        response = await self._send(
            "GET", "/quote", proxy, params=quote_request.to_query_params()
        )
        return await check_status_code_and_deserialize(response, QuoteResponse)

    async def swap(
        self,
        swap_request: SwapRequest,
        proxy: Optional[ProxyTypes] = None,
    ) -> SwapResponse:
        """Get a serialized swap transaction, ready to be signed."""
        response = await self._send("POST", "/swap", proxy, json=swap_request.to_wire())
        return await check_status_code_and_deserialize(response, SwapResponse)

    async def swap_instructions(
        self,
        swap_request: SwapRequest,
        proxy: Optional[ProxyTypes] = None,
    ) -> SwapInstructionsResponse:
        """Get the individual instructions making up a swap.

        Use this instead of ``swap`` to compose the swap into your own
        transaction.
        """
        response = await self._send(
            "POST", "/swap-instructions", proxy, json=swap_request.to_wire()
        )
        internal = await check_status_code_and_deserialize(
            response, SwapInstructionsResponseInternal
        )
        try:
            return SwapInstructionsResponse.from_internal(internal)
        except ValueError as e:
            raise RequestError(f"Failed to decode swap instructions: {e}") from e
