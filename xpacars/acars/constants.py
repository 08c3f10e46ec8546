#!/usr/bin/env python3
"""
xpacars protocol constants

All fields of a request body are separated with a newline character. The
request kind is carried by the Content-Type header.
"""
from ..constants.connection import AcarsConnectionConstants

PROTOCOL_VERSION = "1"

# Floats are written with a fixed number of fractional digits ("%.6f")
FLOAT_PRECISION = 6

SENTINEL_FLIGHT_ID = -1
MIN_VALID_FLIGHT_ID = 1

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

class ContentTypes:
    # Registers a new flight; the server answers 201 and the flight id
    FLIGHT = "application/vnd.xpacars.flight"
    # Reports the aircraft position; the server answers 202
    POSITION = "application/vnd.xpacars.position"

class ExpectedStatus:
    FLIGHT_CREATED = 201
    POSITION_ACCEPTED = 202

class TickIntervals:
    """Seconds until the next tick."""
    # Registration is retried slowly so a failing endpoint isn't hammered
    RETRY_S = 15.0
    REPORTING_S = 3.0

class IdentityLimits:
    """Maximum characters per identity field."""
    ICAO = 39
    TAILNUM = 39
    DESCRIPTION = 259

# ===== REUSED CONSTANTS =====
CONNECTION = AcarsConnectionConstants
