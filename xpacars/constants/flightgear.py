"""xpacars/constants/flightgear.py"""

class FGProps:
    #------------------------------------------------------------------------------
    # PROPERTIES READ FOR FLIGHT REGISTRATION AND POSITION REPORTS
    #------------------------------------------------------------------------------

    #--------------------------
    # AIRCRAFT IDENTITY
    #--------------------------
    class AIRCRAFT:
        TYPE = "/sim/aircraft"                  # e.g. "c172p"
        CALLSIGN = "/sim/multiplay/callsign"    # doubles as tail number
        DESCRIPTION = "/sim/description"

    #--------------------------
    # FLIGHT STATE
    #--------------------------
    class FLIGHT:
        # Position
        LATITUDE = "/position/latitude-deg"
        LONGITUDE = "/position/longitude-deg"
        ALTITUDE_FT = "/position/altitude-ft"

        # Attitude
        HEADING_MAG_DEG = "/orientation/heading-magnetic-deg"

        # Motion
        GROUNDSPEED_KT = "/velocities/groundspeed-kt"
        AIRSPEED_KT = "/velocities/airspeed-kt"
        VERTICAL_SPEED_FPS = "/velocities/vertical-speed-fps"

