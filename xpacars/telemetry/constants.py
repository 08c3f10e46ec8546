from xpacars.constants.flightgear import FGProps
from xpacars.acars.constants import IdentityLimits

class TelemetryConstants:
    """Unit conversions and property mapping for position reports"""

    # ===== UNIT CONVERSIONS =====
    FT_TO_M = 0.3048
    KT_TO_MS = 1852.0 / 3600.0
    FPS_TO_MS = FT_TO_M

    # ===== IDENTITY =====
    # Field -> (property, max length)
    IDENTITY = {
        'icao': (FGProps.AIRCRAFT.TYPE, IdentityLimits.ICAO),
        'tailnum': (FGProps.AIRCRAFT.CALLSIGN, IdentityLimits.TAILNUM),
        'description': (FGProps.AIRCRAFT.DESCRIPTION, IdentityLimits.DESCRIPTION),
    }

    # ===== POSITION =====
    # Field -> (property, factor to protocol units)
    POSITION = {
        'latitude': (FGProps.FLIGHT.LATITUDE, 1.0),
        'longitude': (FGProps.FLIGHT.LONGITUDE, 1.0),
        'altitude_m': (FGProps.FLIGHT.ALTITUDE_FT, FT_TO_M),
        'track_deg': (FGProps.FLIGHT.HEADING_MAG_DEG, 1.0),
        'ground_speed_ms': (FGProps.FLIGHT.GROUNDSPEED_KT, KT_TO_MS),
        'air_speed_ms': (FGProps.FLIGHT.AIRSPEED_KT, KT_TO_MS),
        'vertical_speed_ms': (FGProps.FLIGHT.VERTICAL_SPEED_FPS, FPS_TO_MS),
    }

    # ===== REUSED CONSTANTS =====
    PROPERTIES = FGProps
