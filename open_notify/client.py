"""
open-notify.org API client.

:copyright: (c) 2025 by Meir Miyara.
:license: MPL-2.0, see LICENSE for more details.
"""

import asyncio
import json
import logging
import math
import ssl
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple, TypeVar, Union

import aiohttp
import certifi

from open_notify.config import Config
from open_notify.errors import ApiError, ParseError, TransportError, ValidationError
from open_notify.models import SUCCESS, AstroResponse, IssNowResponse, PassTimesResponse

_LOG = logging.getLogger(__name__)

T = TypeVar("T")

MAX_ALTITUDE = 10000
MAX_PASSES = 100


def _check_range(name: str, value: Any, low: float, high: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{name} must be a number, got {value!r}")
    if not low <= value <= high:
        raise ValidationError(f"{name} must be between {low:g} and {high:g}, got {value!r}")
    return value


def _epoch(value: Union[int, float, datetime]) -> int:
    """Convert a pass-time reference time to whole Unix seconds; naive datetimes are UTC."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        seconds = value.timestamp()
    elif isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"datetime must be a Unix timestamp or datetime, got {value!r}")
    else:
        seconds = value
    if not math.isfinite(seconds) or seconds < 0:
        raise ValidationError(f"datetime must not be before 1970, got {value!r}")
    return int(seconds)


class OpenNotifyClient:
    """Async client for the open-notify.org endpoints.

    Each call performs exactly one GET and either returns the parsed response
    or raises an :class:`~open_notify.errors.OpenNotifyError`. Nothing is
    cached or retried.
    """

    def __init__(self, config: Optional[Config] = None, session: Optional[aiohttp.ClientSession] = None):
        """Initialize client; a caller supplied session is never closed by the client."""
        self._config = config or Config()
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self):
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    @property
    def config(self) -> Config:
        return self._config

    async def _ensure_session(self) -> None:
        """Ensure an aiohttp session exists."""
        if self._session is None or self._session.closed:
            ssl_context = ssl.create_default_context(cafile=certifi.where())

            connector = aiohttp.TCPConnector(ssl=ssl_context)

            timeout = aiohttp.ClientTimeout(total=self._config.timeout)

            headers = {
                "User-Agent": self._config.user_agent,
                "Accept": "application/json",
            }

            self._session = aiohttp.ClientSession(
                timeout=timeout,
                connector=connector,
                headers=headers
            )
            self._owns_session = True

            _LOG.info("HTTP session created for %s", self._config.base_url)

    async def close(self) -> None:
        """Close the HTTP session if the client created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    async def _make_request(self, url: str, params: Optional[Dict[str, Any]] = None) -> Tuple[int, str]:
        """Issue a single GET and return the HTTP status and body text."""
        await self._ensure_session()

        _LOG.debug("Making request to %s params=%s", url, params)
        try:
            async with self._session.get(url, params=params) as response:
                status = response.status
                try:
                    text = await response.text()
                except UnicodeDecodeError as ex:
                    _LOG.warning("Undecodable body from %s (HTTP %s)", url, status)
                    raise ParseError(f"Undecodable body from {url}: {ex}", status=status) from ex
        except asyncio.TimeoutError as ex:
            _LOG.warning("Timeout for %s", url)
            raise TransportError(url, "timed out") from ex
        except aiohttp.ClientError as ex:
            _LOG.warning("Client error for %s: %s", url, ex)
            raise TransportError(url, str(ex) or type(ex).__name__) from ex

        _LOG.debug("Response: HTTP %s from %s", status, url)
        return status, text

    def _decode(self, url: str, status: int, text: str) -> Dict[str, Any]:
        """Decode the JSON body and check the status message."""
        try:
            data = json.loads(text)
        except (ValueError, RecursionError) as ex:
            _LOG.warning("Invalid JSON from %s (HTTP %s): %s", url, status, text[:100])
            raise ParseError(f"Invalid JSON from {url}: {ex}", body=text, status=status) from ex

        if not isinstance(data, dict):
            raise ParseError(f"Expected a JSON object from {url}", body=text, status=status)

        message = data.get("message")
        if not isinstance(message, str):
            raise ParseError(f"Missing 'message' in response from {url}", body=text, status=status)
        if message != SUCCESS:
            reason = data.get("reason")
            _LOG.warning("API error from %s: %s %s", url, message, reason or "")
            raise ApiError(message, reason if isinstance(reason, str) else None, status)
        return data

    async def _get(self, endpoint_id: str, parser: Callable[[Dict[str, Any]], T],
                   params: Optional[Dict[str, Any]] = None) -> T:
        url = self._config.endpoint_url(endpoint_id)
        status, text = await self._make_request(url, params)
        data = self._decode(url, status, text)
        try:
            return parser(data)
        except ParseError as ex:
            _LOG.warning("Unexpected %s response from %s: %s", endpoint_id, url, ex)
            raise ParseError(str(ex), body=text, status=status) from ex

    async def get_astros(self) -> AstroResponse:
        """Fetch the people currently in space."""
        strict = self._config.strict_people_count
        return await self._get("astros", lambda data: AstroResponse.from_dict(data, strict=strict))

    async def get_iss_now(self) -> IssNowResponse:
        """Fetch the current ISS position."""
        return await self._get("iss-now", IssNowResponse.from_dict)

    async def get_pass_times(
        self,
        latitude: float,
        longitude: float,
        altitude: Optional[float] = None,
        passes: Optional[int] = None,
        datetime: Optional[Union[int, float, datetime]] = None,
    ) -> PassTimesResponse:
        """
        Fetch predicted ISS passes over a location.

        :param latitude: degrees, -90 to 90
        :param longitude: degrees, -180 to 180
        :param altitude: metres above sea level, 0 to 10000 (server default 100)
        :param passes: number of passes to predict, 1 to 100 (server default 5)
        :param datetime: reference time as Unix seconds (fractions are dropped) or ``datetime`` (server default now)
        :raises ValidationError: before any request if an argument is out of range
        """
        params: Dict[str, Any] = {
            "lat": _check_range("latitude", latitude, -90, 90),
            "lon": _check_range("longitude", longitude, -180, 180),
        }
        if altitude is not None:
            params["alt"] = _check_range("altitude", altitude, 0, MAX_ALTITUDE)
        if passes is not None:
            if isinstance(passes, bool) or not isinstance(passes, int):
                raise ValidationError(f"passes must be an integer, got {passes!r}")
            params["n"] = int(_check_range("passes", passes, 1, MAX_PASSES))
        if datetime is not None:
            params["datetime"] = _epoch(datetime)

        return await self._get("iss-pass", PassTimesResponse.from_dict, params)


async def _call(config: Optional[Config], operation: Callable[[OpenNotifyClient], Awaitable[T]]) -> T:
    async with OpenNotifyClient(config) as client:
        return await operation(client)


def astros(config: Optional[Config] = None) -> AstroResponse:
    """Blocking shortcut for :meth:`OpenNotifyClient.get_astros`."""
    return asyncio.run(_call(config, lambda client: client.get_astros()))


def iss_now(config: Optional[Config] = None) -> IssNowResponse:
    """Blocking shortcut for :meth:`OpenNotifyClient.get_iss_now`."""
    return asyncio.run(_call(config, lambda client: client.get_iss_now()))


def iss_pass_times(latitude: float, longitude: float, altitude: Optional[float] = None,
                   passes: Optional[int] = None, datetime: Optional[Union[int, float, datetime]] = None,
                   config: Optional[Config] = None) -> PassTimesResponse:
    """Blocking shortcut for :meth:`OpenNotifyClient.get_pass_times`."""
    return asyncio.run(_call(
        config,
        lambda client: client.get_pass_times(latitude, longitude, altitude, passes, datetime)
    ))
