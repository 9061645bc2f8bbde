"""
Error types raised by the open-notify client.

:copyright: (c) 2025 by Meir Miyara.
:license: MPL-2.0, see LICENSE for more details.
"""

from typing import Optional


class OpenNotifyError(Exception):
    """Base exception for all client errors."""


class TransportError(OpenNotifyError):
    """Raised when the request could not be completed (connection, DNS, timeout)."""

    def __init__(self, url: str, detail: str):
        super().__init__(f"Request to {url} failed: {detail}")
        self.url = url


class ParseError(OpenNotifyError):
    """Raised when the body is not JSON or does not have the expected shape."""

    def __init__(self, detail: str, body: str = "", status: Optional[int] = None):
        super().__init__(detail)
        self.body = body
        self.status = status


class ApiError(OpenNotifyError):
    """Raised when the API answers with a message other than "success"."""

    def __init__(self, message: str, reason: Optional[str] = None, status: Optional[int] = None):
        text = f"API returned message {message!r}"
        if reason:
            text = f"{text}: {reason}"
        super().__init__(text)
        self.message = message
        self.reason = reason
        self.status = status


class ValidationError(OpenNotifyError, ValueError):
    """Raised for caller arguments out of range, before any request is sent."""
