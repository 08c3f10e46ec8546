# In xpacars/fg_interface/protocols/telnet.py

import socket
from ..exceptions import FGCommError, ConnectionTimeout, ProtocolError, PropertyNotFound

class TelnetProtocol:
    """Handles low-level Telnet communication with FlightGear."""

    def __init__(self, host: str, port: int, timeout: float = 5.0):
        self.socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)

        # The connect call must respect the timeout too
        self.socket.settimeout(timeout)
        self.socket.connect((host, port))
        self.timeout = timeout

    def get(self, property_path: str) -> float:
        """Sends 'get <property>' and returns the value as a number."""
        return self._parse_response(self._request(property_path))

    def get_string(self, property_path: str) -> str:
        """Sends 'get <property>' and returns the raw string value."""
        return self._parse_string(property_path, self._request(property_path))

    def _request(self, property_path: str) -> str:
        cmd = f"get {property_path}\r\n".encode()
        self.socket.settimeout(self.timeout)
        try:
            self.socket.send(cmd)
            return self.socket.recv(1024).decode(errors="replace")
        except socket.timeout as e:
            raise ConnectionTimeout(f"No reply for {property_path} within {self.timeout}s") from e
        except OSError as e:
            raise FGCommError(f"Failed to read {property_path}: {e}") from e

    def _parse_response(self, response: str) -> float:
        try:
            cleaned_response = response.strip().split(" ")[0]
            return float(cleaned_response)
        except (IndexError, ValueError) as e:
            try:
                return float(response.strip().split("'")[1])
            except (IndexError, ValueError):
                raise ProtocolError(f"Failed to parse response: {response}") from e

    def _parse_string(self, property_path: str, response: str) -> str:
        # Prompt mode answers "/path = 'value' (type)", data mode just "value"
        cleaned_response = response.strip()
        if cleaned_response.endswith("(none)"):
            raise PropertyNotFound(property_path)
        if "'" in cleaned_response:
            start = cleaned_response.index("'") + 1
            end = cleaned_response.rindex("'")
            if end >= start:
                return cleaned_response[start:end]
        return cleaned_response

    def close(self):
        """Closes the socket connection."""
        self.socket.close()
