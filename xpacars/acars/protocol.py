# xpacars/acars/protocol.py
"""
Wire codec for the xpacars protocol, version 1.

Content-Type: application/vnd.xpacars.flight

    Registers a new flight. The body carries the aircraft data, one field
    per line:

        1               protocol version
        <icao>          aircraft ICAO type code
        <tailnum>       aircraft tail number
        <description>   free-text aircraft description

    The server answers 201 with the decimal flight id as body.

Content-Type: application/vnd.xpacars.position

    Reports the current aircraft position:

        1               protocol version
        <flight id>     id returned by the registration
        <latitude>      degrees
        <longitude>     degrees
        <altitude>      meters (not feet)
        <track>         degrees
        <ground speed>  meters per second (not knots)
        <air speed>     meters per second (not knots)
        <vertical speed> meters per second (not feet per minute)

    The server answers 202 once it accepted the data. Processing may
    happen asynchronously on the server side.

Every line, the last one included, ends with a newline. Fields are not
escaped: a newline inside an identity field makes the body ambiguous.
"""
import re
from typing import Union

from .constants import PROTOCOL_VERSION, FLOAT_PRECISION, INT64_MIN, INT64_MAX
from .data_models import FlightIdentity, PositionSample

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")

def _join_lines(fields) -> bytes:
    return "".join(f"{field}\n" for field in fields).encode("utf-8")

def _format_float(value: float) -> str:
    return f"{value:.{FLOAT_PRECISION}f}"

def encode_flight_registration(identity: FlightIdentity) -> bytes:
    """Builds the body of a flight registration request."""
    return _join_lines([
        PROTOCOL_VERSION,
        identity.icao,
        identity.tailnum,
        identity.description,
    ])

def encode_position_report(flight_id: int, sample: PositionSample) -> bytes:
    """Builds the body of a position report for an already registered flight."""
    return _join_lines([
        PROTOCOL_VERSION,
        str(int(flight_id)),
        _format_float(sample.latitude),
        _format_float(sample.longitude),
        _format_float(sample.altitude_m),
        _format_float(sample.track_deg),
        _format_float(sample.ground_speed_ms),
        _format_float(sample.air_speed_ms),
        _format_float(sample.vertical_speed_ms),
    ])

def decode_flight_id(response_body: Union[bytes, str]) -> int:
    """
    Returns the decimal integer at the start of a registration reply.

    Leading whitespace and a sign are accepted; anything after the digits is
    ignored. A body without a leading integer decodes to 0, which is never a
    valid flight id. Out-of-range values clamp to the signed 64-bit bounds.
    """
    if isinstance(response_body, bytes):
        response_body = response_body.decode("ascii", errors="replace")

    match = _LEADING_INTEGER.match(response_body or "")
    if match is None:
        return 0
    return max(INT64_MIN, min(INT64_MAX, int(match.group(1))))
