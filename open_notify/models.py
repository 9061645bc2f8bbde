"""
Response entities for the open-notify.org endpoints.

Every entity is immutable and built from the decoded JSON payload through its
``from_dict`` constructor. Shape problems raise :class:`ParseError`.

:copyright: (c) 2025 by Meir Miyara.
:license: MPL-2.0, see LICENSE for more details.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Tuple

from open_notify.errors import ParseError

SUCCESS = "success"


def _require_dict(data: Any, what: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ParseError(f"Expected {what} to be an object, got {type(data).__name__}")
    return data


def _field(data: Dict[str, Any], key: str, what: str) -> Any:
    if key not in data:
        raise ParseError(f"Missing '{key}' in {what}")
    return data[key]


def _str(data: Dict[str, Any], key: str, what: str) -> str:
    value = _field(data, key, what)
    if not isinstance(value, str):
        raise ParseError(f"Expected '{key}' in {what} to be a string, got {value!r}")
    return value


def _int(data: Dict[str, Any], key: str, what: str) -> int:
    value = _field(data, key, what)
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise ParseError(f"Expected '{key}' in {what} to be an integer, got {value!r}")
    return value


def _coordinate(data: Dict[str, Any], key: str, what: str, limit: float) -> float:
    """Read a latitude/longitude sent either as a number or as a decimal string."""
    value = _field(data, key, what)
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise ParseError(f"Expected '{key}' in {what} to be numeric, got {value!r}")
    try:
        number = float(value)
    except (ValueError, OverflowError):
        raise ParseError(f"Expected '{key}' in {what} to be numeric, got {value!r}") from None
    if not -limit <= number <= limit:
        raise ParseError(f"'{key}' in {what} out of range [-{limit:g}, {limit:g}]: {value!r}")
    return number


def _utc(timestamp: int) -> datetime:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


@dataclass(frozen=True)
class Person:
    """A person in space and the craft they are aboard."""

    name: str
    craft: str

    @staticmethod
    def from_dict(d: Any) -> "Person":
        d = _require_dict(d, "person")
        name = _str(d, "name", "person")
        if not name.strip():
            raise ParseError("Empty 'name' in person")
        return Person(name=name, craft=_str(d, "craft", "person"))


@dataclass(frozen=True)
class AstroResponse:
    """People currently in space (``/astros.json``)."""

    message: str
    number: int
    people: Tuple[Person, ...]

    @staticmethod
    def from_dict(d: Any, strict: bool = True) -> "AstroResponse":
        """Build from the decoded payload.

        With ``strict`` the declared ``number`` must match the length of
        ``people``; otherwise both are kept as sent.
        """
        d = _require_dict(d, "astros response")
        number = _int(d, "number", "astros response")
        if number < 0:
            raise ParseError(f"Negative 'number' in astros response: {number}")
        people = _field(d, "people", "astros response")
        if not isinstance(people, list):
            raise ParseError(f"Expected 'people' to be a list, got {type(people).__name__}")
        parsed = tuple(Person.from_dict(p) for p in people)
        if strict and len(parsed) != number:
            raise ParseError(
                f"Astros response declares {number} people but lists {len(parsed)}"
            )
        return AstroResponse(
            message=_str(d, "message", "astros response"),
            number=number,
            people=parsed,
        )

    @property
    def crafts(self) -> Tuple[str, ...]:
        """Crafts in order of first appearance."""
        return tuple(dict.fromkeys(p.craft for p in self.people))

    def crew_of(self, craft: str) -> Tuple[Person, ...]:
        return tuple(p for p in self.people if p.craft == craft)


@dataclass(frozen=True)
class Position:
    latitude: float
    longitude: float

    @staticmethod
    def from_dict(d: Any) -> "Position":
        d = _require_dict(d, "iss_position")
        return Position(
            latitude=_coordinate(d, "latitude", "iss_position", 90.0),
            longitude=_coordinate(d, "longitude", "iss_position", 180.0),
        )


@dataclass(frozen=True)
class IssNowResponse:
    """Current ISS location (``/iss-now.json``)."""

    message: str
    timestamp: int
    iss_position: Position

    @staticmethod
    def from_dict(d: Any) -> "IssNowResponse":
        d = _require_dict(d, "iss-now response")
        return IssNowResponse(
            message=_str(d, "message", "iss-now response"),
            timestamp=_int(d, "timestamp", "iss-now response"),
            iss_position=Position.from_dict(_field(d, "iss_position", "iss-now response")),
        )

    @property
    def latitude(self) -> float:
        return self.iss_position.latitude

    @property
    def longitude(self) -> float:
        return self.iss_position.longitude

    @property
    def time(self) -> datetime:
        """Time of the position fix, in UTC."""
        return _utc(self.timestamp)


@dataclass(frozen=True)
class PassRequest:
    """Echo of the query the pass predictions were computed for."""

    latitude: float
    longitude: float
    passes: int
    datetime: int
    altitude: Optional[float] = None

    @staticmethod
    def from_dict(d: Any) -> "PassRequest":
        d = _require_dict(d, "request")
        altitude = d.get("altitude")
        if altitude is not None and (isinstance(altitude, bool) or not isinstance(altitude, (int, float))):
            raise ParseError(f"Expected 'altitude' in request to be numeric, got {altitude!r}")
        return PassRequest(
            latitude=_coordinate(d, "latitude", "request", 90.0),
            longitude=_coordinate(d, "longitude", "request", 180.0),
            passes=_int(d, "passes", "request"),
            datetime=_int(d, "datetime", "request"),
            altitude=float(altitude) if altitude is not None else None,
        )


@dataclass(frozen=True)
class Pass:
    """One predicted overhead pass."""

    risetime: int
    duration: int

    @staticmethod
    def from_dict(d: Any) -> "Pass":
        d = _require_dict(d, "pass")
        duration = _int(d, "duration", "pass")
        if duration < 0:
            raise ParseError(f"Negative 'duration' in pass: {duration}")
        return Pass(risetime=_int(d, "risetime", "pass"), duration=duration)

    @property
    def rise(self) -> datetime:
        return _utc(self.risetime)

    @property
    def set(self) -> datetime:
        return self.rise + timedelta(seconds=self.duration)


@dataclass(frozen=True)
class PassTimesResponse:
    """ISS pass predictions for a location (``/iss-pass.json``)."""

    message: str
    request: PassRequest
    response: Tuple[Pass, ...]

    @staticmethod
    def from_dict(d: Any) -> "PassTimesResponse":
        d = _require_dict(d, "iss-pass response")
        passes = _field(d, "response", "iss-pass response")
        if not isinstance(passes, list):
            raise ParseError(f"Expected 'response' to be a list, got {type(passes).__name__}")
        return PassTimesResponse(
            message=_str(d, "message", "iss-pass response"),
            request=PassRequest.from_dict(_field(d, "request", "iss-pass response")),
            response=tuple(Pass.from_dict(p) for p in passes),
        )

    @property
    def passes(self) -> Tuple[Pass, ...]:
        return self.response
