"""Errors raised by the swap API client."""

from typing import Optional


class RequestError(Exception):
    """A swap API call failed.

    Raised for transport failures, bad proxy configuration, non-success
    HTTP statuses and undecodable response bodies. The underlying exception,
    if any, is available as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
