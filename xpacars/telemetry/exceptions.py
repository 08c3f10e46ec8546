class TelemetryError(Exception):
    """Base exception for all telemetry source errors"""
    pass

class PropertyReadError(TelemetryError):
    """A simulator property could not be read"""
    def __init__(self, property_path: str, details: str = ""):
        """
        Args:
            property_path: Simulator property that failed
            details: Message reported by the simulator interface
        """
        self.property_path = property_path
        self.details = details
        super().__init__(f"Failed to read {property_path}" + (f": {details}" if details else ""))
