# xpacars/acars/data_models.py
"""
Defines the data structures exchanged between the telemetry source, the
wire codec, the transport and the session state machine.
"""
from dataclasses import dataclass
from enum import Enum

from .constants import SENTINEL_FLIGHT_ID

class SessionStatus(Enum):
    """Outcome of the most recent tick, as shown to the operator."""
    INITIALIZING = "Status: Initializing"
    OK = "Status: Ok"
    FAILED = "Status: Failed"
    INITIALIZATION_FAILED = "Status: Initialization failed"

    @property
    def label(self) -> str:
        return self.value

@dataclass(frozen=True)
class FlightIdentity:
    """Aircraft identity sent once when the flight is registered."""
    icao: str
    tailnum: str
    description: str

@dataclass(frozen=True)
class PositionSample:
    """
    Snapshot of the aircraft position taken at tick time. Units are the
    ones the wire format carries: degrees, meters and meters per second.
    """
    latitude: float
    longitude: float
    altitude_m: float
    track_deg: float
    ground_speed_ms: float
    air_speed_ms: float
    vertical_speed_ms: float

@dataclass(frozen=True)
class TransportResponse:
    """Status code and raw body of an HTTP exchange."""
    status_code: int
    body: bytes = b""

@dataclass(frozen=True)
class TickResult:
    """What a session tick hands back to its scheduler."""
    status: SessionStatus
    interval: float
    flight_id: int = SENTINEL_FLIGHT_ID

    @property
    def registered(self) -> bool:
        return self.flight_id != SENTINEL_FLIGHT_ID
