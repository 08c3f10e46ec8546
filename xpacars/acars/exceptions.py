# xpacars/acars/exceptions.py
#!/usr/bin/env python3
"""
xpacars Client Exceptions
Standardized error types for reporting flights to the collection endpoint
"""

class AcarsError(Exception):
    """Base class for all xpacars client errors"""
    pass

class TransportError(AcarsError):
    """The request never reached the endpoint or never came back"""
    def __init__(self, message="Transport failure", url=None):
        self.url = url
        super().__init__(f"{message} [URL: {url}]" if url else message)

class ProtocolError(AcarsError):
    """The endpoint answered, but not with the success contract of the request"""
    def __init__(self, request_kind, status_code, expected_status, message="Unexpected response"):
        self.request_kind = request_kind
        self.status_code = status_code
        self.expected_status = expected_status
        super().__init__(
            f"{message} to {request_kind} request: HTTP {status_code} (expected {expected_status})"
        )

class InvalidFlightIdError(ProtocolError):
    """Registration was acknowledged but the returned flight id is unusable"""
    def __init__(self, flight_id, status_code=201):
        self.flight_id = flight_id
        super().__init__("flight", status_code, status_code, message=f"Invalid flight id {flight_id} in reply")

class ConfigError(AcarsError):
    """The destination URL could not be loaded"""
    def __init__(self, config_path, message="Configuration error"):
        self.config_path = config_path
        super().__init__(f"{message}: {config_path}")
