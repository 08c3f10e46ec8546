"""
acars - xpacars protocol client

Registers a flight with the collection endpoint, then reports its position
on every tick. Exposes the session, the host service, the wire codec and
the error types.
"""

from .core import AcarsService
from .session import AcarsSession
from .transport import HttpTransport
from .status import StatusSink, LoggingStatusSink, StatusBoard, CompositeStatusSink
from .config import AcarsConfig, load_destination_url, resolve_config_path, strip_url
from .data_models import FlightIdentity, PositionSample, SessionStatus, TickResult, TransportResponse
from .protocol import encode_flight_registration, encode_position_report, decode_flight_id
from .exceptions import AcarsError, TransportError, ProtocolError, InvalidFlightIdError, ConfigError

__all__ = [
    'AcarsService',
    'AcarsSession',
    'HttpTransport',
    'StatusSink',
    'LoggingStatusSink',
    'StatusBoard',
    'CompositeStatusSink',
    'AcarsConfig',
    'load_destination_url',
    'resolve_config_path',
    'strip_url',
    'FlightIdentity',
    'PositionSample',
    'SessionStatus',
    'TickResult',
    'TransportResponse',
    'encode_flight_registration',
    'encode_position_report',
    'decode_flight_id',
    'AcarsError',
    'TransportError',
    'ProtocolError',
    'InvalidFlightIdError',
    'ConfigError',
]
