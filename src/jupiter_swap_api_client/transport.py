"""HTTP transport helpers: client construction and response validation."""

import logging
from typing import Optional, TypeVar, Union

import httpx
from pydantic import BaseModel, ValidationError

from jupiter_swap_api_client.errors import RequestError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

ProxyTypes = Union[str, httpx.URL, httpx.Proxy]


def build_client(proxy: Optional[ProxyTypes] = None) -> httpx.AsyncClient:
    """Build an HTTP client, optionally routed through a single proxy.

    No timeout is applied; callers bound latency themselves.

    Raises:
        RequestError: if the proxy configuration is malformed
    """
    if proxy is None:
        return httpx.AsyncClient(timeout=None)

    try:
        return httpx.AsyncClient(proxy=proxy, timeout=None)
    except (ValueError, TypeError, httpx.InvalidURL) as e:
        raise RequestError(f"Invalid proxy configuration {proxy!r}: {e}") from e


async def _read_text(response: httpx.Response) -> Optional[str]:
    try:
        await response.aread()
        return response.text
    except (httpx.HTTPError, httpx.StreamError) as e:
        logger.debug(f"Could not read error response body: {e}")
        return None


async def check_is_success(response: httpx.Response) -> httpx.Response:
    """Return the response if its status is 2xx, otherwise raise.

    Raises:
        RequestError: carrying the status code and, if readable, the body
    """
    if response.is_success:
        return response

    body = await _read_text(response)
    raise RequestError(
        f"Request status not ok: {response.status_code}, body: {body}",
        status_code=response.status_code,
        body=body,
    )


async def check_status_code_and_deserialize(response: httpx.Response, model: type[T]) -> T:
    """Check the status, then decode the JSON body into ``model``.

    Raises:
        RequestError: on a non-success status or an undecodable body
    """
    response = await check_is_success(response)
    content = await response.aread()
    try:
        return model.model_validate_json(content)
    except ValidationError as e:
        raise RequestError(f"Failed to deserialize {model.__name__}: {e}") from e
