"""xpacars/fg_interface/exceptions.py"""

class FGCommError(Exception):
    """Base exception for all FlightGear communication errors."""
    pass

class ConnectionTimeout(FGCommError):
    """Raised when FlightGear doesn't answer within the socket timeout."""
    pass

class ProtocolError(FGCommError):
    """Raised for malformed FlightGear responses."""
    pass

class PropertyNotFound(ProtocolError):
    """Raised when a property exists in the request but carries no value."""
    def __init__(self, property_path, message="Property has no value"):
        self.property_path = property_path
        super().__init__(f"{message}: {property_path}")
