# xpacars/acars/status.py
"""
Status sinks receive session status changes for display. They are only
called when the status actually changes, never once per tick.
"""
import logging
import threading
import time
from typing import Any, Dict, List, Optional

from .data_models import SessionStatus

logger = logging.getLogger(__name__)

class StatusSink:
    """Interface for anything that displays the session status."""

    def on_status_changed(self, status: SessionStatus) -> None:
        raise NotImplementedError

class LoggingStatusSink(StatusSink):
    """Writes every status change to the log."""

    def on_status_changed(self, status: SessionStatus) -> None:
        if status in (SessionStatus.FAILED, SessionStatus.INITIALIZATION_FAILED):
            logger.warning(status.label)
        else:
            logger.info(status.label)

class StatusBoard(StatusSink):
    """
    Keeps the latest status for readers on other threads, e.g. the Flask
    status endpoint. Only the tick scheduler writes to it.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._status = SessionStatus.INITIALIZING
        self._changed_at: Optional[float] = None
        self._flight_id: Optional[int] = None

    def on_status_changed(self, status: SessionStatus) -> None:
        with self._lock:
            self._status = status
            self._changed_at = time.time()

    def set_flight_id(self, flight_id: Optional[int]) -> None:
        with self._lock:
            self._flight_id = flight_id

    @property
    def status(self) -> SessionStatus:
        with self._lock:
            return self._status

    def snapshot(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "status": self._status.name,
                "label": self._status.label,
                "flight_id": self._flight_id,
                "registered": self._flight_id is not None,
                "changed_at": self._changed_at,
            }

class CompositeStatusSink(StatusSink):
    """Fans a status change out to several sinks."""

    def __init__(self, sinks: List[StatusSink]):
        self.sinks = list(sinks)

    def on_status_changed(self, status: SessionStatus) -> None:
        for sink in self.sinks:
            sink.on_status_changed(status)
