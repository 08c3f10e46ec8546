"""
telemetry - Aircraft identity and position for flight reports

Reads FlightGear properties and converts them to the units the xpacars
protocol carries.
"""

from .core import FGTelemetrySource
from .exceptions import TelemetryError, PropertyReadError

__all__ = ['FGTelemetrySource', 'TelemetryError', 'PropertyReadError']
