# xpacars/constants/connection.py

from .. import __version__

class FGConnectionConstants:
    """Shared constants for FlightGear connections."""
    
    DEFAULT_HOST = "localhost"
    DEFAULT_PORT = 5500
    DEFAULT_TIMEOUT = 5.0
    DEFAULT_TELNET_CONFIG = f"socket,bi,10,{DEFAULT_HOST},{DEFAULT_PORT},tcp"


class AcarsConnectionConstants:
    """HTTP settings for talking to the collection endpoint."""

    USER_AGENT = f"xpacars/{__version__}"
    REQUEST_TIMEOUT_S = 10.0
    MAX_REDIRECTS = 50
