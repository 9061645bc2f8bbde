"""
Client for the open-notify.org API.

Query the people currently in space, the live position of the International
Space Station and predicted ISS passes over a location.

:copyright: (c) 2025 by Meir Miyara.
:license: MPL-2.0, see LICENSE for more details.
"""

from open_notify.client import OpenNotifyClient, astros, iss_now, iss_pass_times
from open_notify.config import Config
from open_notify.errors import ApiError, OpenNotifyError, ParseError, TransportError, ValidationError
from open_notify.models import (
    AstroResponse,
    IssNowResponse,
    Pass,
    PassRequest,
    PassTimesResponse,
    Person,
    Position,
)

__version__ = "0.1.0"
__author__ = "Meir Miyara"
__email__ = "meir.miyara@gmail.com"

__all__ = [
    "OpenNotifyClient",
    "astros",
    "iss_now",
    "iss_pass_times",
    "Config",
    "OpenNotifyError",
    "TransportError",
    "ParseError",
    "ApiError",
    "ValidationError",
    "AstroResponse",
    "Person",
    "IssNowResponse",
    "Position",
    "PassTimesResponse",
    "PassRequest",
    "Pass",
]
