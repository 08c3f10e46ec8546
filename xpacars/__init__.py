"""
xpacars - Flight tracking client for simulated aircraft

Registers the simulator's flight with a remote HTTP collection endpoint and
keeps reporting its position using the xpacars line protocol.
"""

__version__ = "1.0.0"
