# xpacars/acars/core.py

import logging
from typing import Optional

from .config import AcarsConfig, load_destination_url, resolve_config_path
from .data_models import TickResult
from .exceptions import ConfigError
from .session import AcarsSession
from .status import StatusSink
from .transport import HttpTransport

logger = logging.getLogger(__name__)

class AcarsService:
    """
    Host-side lifecycle around one AcarsSession: enable loads the
    destination URL and starts a session, run_once performs a tick and
    disable forgets the flight.
    """

    def __init__(self, telemetry, status_sink: Optional[StatusSink] = None,
                 config_path: Optional[str] = None, transport=None):
        """
        Args:
            telemetry: Source with get_identity() and get_position()
            status_sink: Receives status changes (initial status included)
            config_path: Destination URL file, defaults to resolve_config_path()
            transport: Defaults to an HttpTransport built from AcarsConfig
        """
        self.telemetry = telemetry
        self.status_sink = status_sink
        self.config_path = config_path or resolve_config_path()
        self.transport = transport or HttpTransport(
            timeout=AcarsConfig.REQUEST_TIMEOUT_S,
            max_redirects=AcarsConfig.MAX_REDIRECTS,
            user_agent=AcarsConfig.USER_AGENT,
        )
        self.session: Optional[AcarsSession] = None

    @property
    def enabled(self) -> bool:
        return self.session is not None

    def enable(self) -> bool:
        """Starts reporting. Returns False when the destination URL can't be loaded."""
        if self.enabled:
            return True

        try:
            url = load_destination_url(self.config_path)
        except ConfigError as e:
            logger.error(f"xpacars not enabled: {e}")
            return False

        self.session = AcarsSession(url, self.transport, self.status_sink)
        if self.status_sink is not None:
            self.status_sink.on_status_changed(self.session.status)
        logger.info(f"xpacars enabled, reporting to {self.session.url}")
        return True

    def run_once(self) -> TickResult:
        """Performs one tick; the result's interval schedules the next call."""
        if not self.enabled:
            raise RuntimeError("Call enable() first")
        return self.session.tick(self.telemetry)

    def disable(self) -> None:
        """Stops reporting and drops the flight id."""
        if not self.enabled:
            return
        self.session.reset()
        self.session = None
        logger.info("xpacars disabled")

    def close(self) -> None:
        self.disable()
        self.transport.close()

