"""
Transports for reading FlightGear properties. Only the telnet property
server is implemented; it answers `get <path>` in data or prompt mode.
"""

from .telnet import TelnetProtocol

__all__ = ['TelnetProtocol']
