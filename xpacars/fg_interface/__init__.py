"""
fg_interface - FlightGear communication interface for xpacars

Exposes the main FGConnection class and common exceptions.
"""

from .core import FGConnection
from .exceptions import FGCommError, ConnectionTimeout, ProtocolError, PropertyNotFound

__all__ = ['FGConnection', 'FGCommError', 'ConnectionTimeout', 'ProtocolError', 'PropertyNotFound']
