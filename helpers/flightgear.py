# helpers/flightgear.py
import logging
import shutil
import threading
import os
import sys

# --- Path Correction ---
HELPER_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.abspath(os.path.join(HELPER_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

# --- Core Project Imports ---
from xpacars.telemetry import FGTelemetrySource
from xpacars.acars import AcarsService

RECONNECT_DELAY_S = 5.0

def find_fgfs_executable() -> str:
    for path in ['/usr/games/fgfs', '/usr/bin/fgfs', 'fgfs']:
        if shutil.which(path): return path
    return None

def try_connect_fg(state: dict) -> bool:
    """(Re)connects state['fg_interface'] and checks every reported property."""
    fg = state['fg_interface']
    if not fg.is_connected:
        response = fg.connect()
        if not response['success']:
            logging.warning(f"FlightGear not reachable: {response['message']}")
            state['fg_connected'] = False
            return False

    missing = FGTelemetrySource(fg).check_properties()
    if missing:
        logging.error(f"FlightGear is missing required properties: {', '.join(missing)}")
        fg.disconnect()
        state['fg_connected'] = False
        return False

    logging.info(f"FlightGear connection established ({fg.host}:{fg.port}).")
    state['fg_connected'] = True
    return True

def acars_worker(state: dict, stop_event: threading.Event):
    """
    Tick scheduler and the only caller of the session. Waits the interval
    returned by each tick before running the next one.
    """
    fg = state['fg_interface']
    service = AcarsService(
        FGTelemetrySource(fg),
        status_sink=state['status_sink'],
        config_path=state['config_path'],
    )
    if not service.enable():
        # An unusable destination URL won't fix itself; stay disabled
        state['acars_enabled'] = False
        service.close()
        return
    state['acars_enabled'] = True

    try:
        while not stop_event.is_set():
            if not fg.is_connected:
                if state['fg_connected']:
                    logging.info("FG disconnected. Waiting for it to come back.")
                state['fg_connected'] = False
                if not try_connect_fg(state):
                    stop_event.wait(RECONNECT_DELAY_S)
                    continue

            result = service.run_once()
            state['status_board'].set_flight_id(result.flight_id if result.registered else None)
            stop_event.wait(result.interval)
    except Exception as e:
        logging.error(f"FATAL ERROR in acars_worker: {e}", exc_info=True)
        raise
    finally:
        state['acars_enabled'] = False
        service.close()
        fg.disconnect()
