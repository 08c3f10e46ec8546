# In xpacars/fg_interface/core.py

import logging
from typing import Dict, Any
import time

from .protocols.telnet import TelnetProtocol
from .exceptions import FGCommError, ProtocolError
from ..constants.connection import FGConnectionConstants

logger = logging.getLogger(__name__)

# Constants
DEFAULT_HOST = FGConnectionConstants.DEFAULT_HOST
DEFAULT_PORT = FGConnectionConstants.DEFAULT_PORT
DEFAULT_TIMEOUT = FGConnectionConstants.DEFAULT_TIMEOUT

class FGConnection:
    """Handles FlightGear communication with a JSON interface."""

    def __init__(self, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT,
                 timeout: float = DEFAULT_TIMEOUT):
        self.host = host
        self.port = port
        self.timeout = timeout
        self._protocol = None

    @property
    def is_connected(self) -> bool:
        return self._protocol is not None

    def connect(self) -> Dict[str, Any]:
        """Returns a standardized JSON response for both success and failure."""
        try:
            self._protocol = TelnetProtocol(self.host, self.port, self.timeout)
            return self._format_response(
                success=True,
                message=f"Connected to FlightGear via Telnet ({self.host}:{self.port})",
                data={"protocol": "telnet", "host": self.host, "port": self.port}
            )
        except Exception as e:
            self._protocol = None
            return self._format_response(
                success=False, message=str(e),
                data={"error_type": type(e).__name__, "host": self.host, "port": self.port,
                      "solution": f"Start FlightGear with --telnet={FGConnectionConstants.DEFAULT_TELNET_CONFIG}"}
            )

    def disconnect(self):
        """Closes the connection gracefully."""
        if self._protocol:
            self._protocol.close()
            self._protocol = None
            logger.info("FlightGear telnet connection closed.")

    def get(self, property_path: str) -> Dict[str, Any]:
        """Reads a numeric property into a standardized JSON response."""
        return self._read(property_path, as_string=False)

    def get_string(self, property_path: str) -> Dict[str, Any]:
        """Reads a string property into a standardized JSON response."""
        return self._read(property_path, as_string=True)

    def _read(self, property_path: str, as_string: bool) -> Dict[str, Any]:
        if not self._protocol:
            return self._format_response(
                success=False, message="Not connected",
                data={"property": property_path, "required_action": "Call connect() first"}
            )

        try:
            if as_string:
                value = self._protocol.get_string(property_path)
            else:
                value = self._protocol.get(property_path)
            return self._format_response(
                success=True, message=f"Read {property_path}",
                data={"property": property_path, "value": value}
            )
        except Exception as e:
            if isinstance(e, FGCommError) and not isinstance(e, ProtocolError):
                # Socket is unusable; connect() again to recover
                self.disconnect()
            return self._format_response(
                success=False, message=f"Failed to read {property_path}",
                data={"property": property_path, "error_type": type(e).__name__,
                      "error_details": str(e)}
            )

    def _format_response(self, success: bool, message: str, data: Dict = None) -> Dict[str, Any]:
        """Standardized response format for all methods."""
        return {
            "module": "fg_interface", "success": success, "message": message,
            "data": data or {}, "timestamp": time.time()
        }
