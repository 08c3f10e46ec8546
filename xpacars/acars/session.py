# xpacars/acars/session.py
"""
Session state machine of the xpacars client.

A session registers the flight once, then keeps reporting positions with
the flight id the endpoint handed out. The host calls `tick` on its own
timer and waits the returned interval before calling it again; the session
never starts threads or overlapping requests.
"""
import logging
from typing import Optional

from .config import strip_url
from .constants import (
    ContentTypes,
    ExpectedStatus,
    TickIntervals,
    SENTINEL_FLIGHT_ID,
    MIN_VALID_FLIGHT_ID,
)
from .data_models import SessionStatus, TickResult
from .exceptions import TransportError, ProtocolError, InvalidFlightIdError
from .protocol import encode_flight_registration, encode_position_report, decode_flight_id
from .status import StatusSink
from ..telemetry.exceptions import TelemetryError

logger = logging.getLogger(__name__)

class AcarsSession:
    """
    Owns the flight id and the delivery status of one simulated flight.

    Args:
        url: Destination URL; surrounding whitespace is stripped.
        transport: Object with `post(url, content_type, body)` returning a
            TransportResponse or raising TransportError.
        status_sink: Optional StatusSink notified on status changes only.
    """

    def __init__(self, url: str, transport, status_sink: Optional[StatusSink] = None):
        self.url = strip_url(url)
        self.transport = transport
        self.status_sink = status_sink
        self.flight_id = SENTINEL_FLIGHT_ID
        self.status = SessionStatus.INITIALIZING

    @property
    def is_registered(self) -> bool:
        return self.flight_id != SENTINEL_FLIGHT_ID

    def reset(self) -> None:
        """Forgets the flight; the next tick registers a new one."""
        self.flight_id = SENTINEL_FLIGHT_ID
        self.status = SessionStatus.INITIALIZING

    def tick(self, identity_source, position_source=None) -> TickResult:
        """
        Runs one scheduled step: registers the flight if needed, then
        reports the current position.

        Args:
            identity_source: Object with `get_identity()` returning a
                FlightIdentity, or None while the identity is unavailable.
            position_source: Object with `get_position()` returning a
                PositionSample. Defaults to `identity_source`.

        Returns:
            TickResult with the status after this tick and the delay before
            the next one.
        """
        if position_source is None:
            position_source = identity_source

        if not self.is_registered:
            identity = identity_source.get_identity()
            if identity is None:
                logger.debug("Aircraft identity not available yet; registration postponed.")
                return self._result(TickIntervals.RETRY_S)

            try:
                self._register(identity)
            except (TransportError, ProtocolError) as e:
                logger.warning(f"Flight registration failed: {e}")
                self._set_status(SessionStatus.INITIALIZATION_FAILED)
                return self._result(TickIntervals.RETRY_S)

        try:
            sample = position_source.get_position()
        except TelemetryError as e:
            logger.warning(f"Position not available, report skipped: {e}")
            return self._result(TickIntervals.RETRY_S)

        try:
            self._report_position(sample)
        except (TransportError, ProtocolError) as e:
            logger.warning(f"Position report for flight {self.flight_id} failed: {e}")
            if self.status is SessionStatus.OK:
                self._set_status(SessionStatus.FAILED)
                return self._result(TickIntervals.RETRY_S)
            return self._result(TickIntervals.REPORTING_S)

        if self.status is not SessionStatus.OK:
            self._set_status(SessionStatus.OK)
        return self._result(TickIntervals.REPORTING_S)

    def _register(self, identity) -> None:
        response = self.transport.post(self.url, ContentTypes.FLIGHT, encode_flight_registration(identity))
        if response.status_code != ExpectedStatus.FLIGHT_CREATED:
            raise ProtocolError("flight", response.status_code, ExpectedStatus.FLIGHT_CREATED)

        flight_id = decode_flight_id(response.body)
        if flight_id < MIN_VALID_FLIGHT_ID:
            raise InvalidFlightIdError(flight_id, response.status_code)

        self.flight_id = flight_id
        logger.info(
            f"Flight registered as {flight_id} "
            f"({identity.icao}, {identity.tailnum})"
        )

    def _report_position(self, sample) -> None:
        response = self.transport.post(
            self.url, ContentTypes.POSITION, encode_position_report(self.flight_id, sample)
        )
        if response.status_code != ExpectedStatus.POSITION_ACCEPTED:
            raise ProtocolError("position", response.status_code, ExpectedStatus.POSITION_ACCEPTED)

    def _set_status(self, status: SessionStatus) -> None:
        if status is self.status:
            return
        logger.info(f"Session status: {self.status.label} -> {status.label}")
        self.status = status
        if self.status_sink is not None:
            self.status_sink.on_status_changed(status)

    def _result(self, interval: float) -> TickResult:
        return TickResult(status=self.status, interval=interval, flight_id=self.flight_id)
