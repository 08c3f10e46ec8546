# app.py
import argparse
import logging
import threading
import subprocess
from flask import Flask, jsonify

# Core Application Imports
from helpers.flightgear import find_fgfs_executable, acars_worker
from xpacars.constants.connection import FGConnectionConstants
from xpacars.fg_interface import FGConnection
from xpacars.acars import StatusBoard, LoggingStatusSink, CompositeStatusSink, resolve_config_path

app = Flask(__name__)
log = logging.getLogger('werkzeug')
log.setLevel(logging.WARNING)

status_board = StatusBoard()

# Global State Dictionary
state = {
    'fg_interface': FGConnection(),
    'fg_connected': False,
    'acars_enabled': False,
    'config_path': resolve_config_path(),
    'status_board': status_board,
    'status_sink': CompositeStatusSink([status_board, LoggingStatusSink()]),
    'stop_event': threading.Event(),
}

@app.route('/status')
def status():
    """Current reporting status, the equivalent of the plugin menu item."""
    data = status_board.snapshot()
    data.update({
        'enabled': state['acars_enabled'],
        'fg_connected': state['fg_connected'],
        'config_path': state['config_path'],
    })
    return jsonify(data)

@app.route('/start_fg', methods=['POST'])
def start_fg():
    fg_executable = find_fgfs_executable()
    if not fg_executable:
        error_msg = "'fgfs' executable not found. Please ensure FlightGear is installed."
        logging.error(error_msg)
        return jsonify({'success': False, 'error': error_msg}), 500
    fg_command = [fg_executable, "--aircraft=c172p", "--airport=BIKF", "--timeofday=noon",
                  f"--telnet={FGConnectionConstants.DEFAULT_TELNET_CONFIG}"]
    try:
        subprocess.Popen(fg_command, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
        # The ACARS worker connects on its own once the telnet server is up
        return jsonify({'success': True, 'message': "FlightGear launched."})
    except OSError as e:
        return jsonify({'success': False, 'error': str(e)}), 500

def parse_args():
    parser = argparse.ArgumentParser(description="Report a FlightGear flight to an xpacars endpoint")
    parser.add_argument('--config', default=state['config_path'],
                        help="File holding the destination URL")
    parser.add_argument('--fg-host', default=FGConnectionConstants.DEFAULT_HOST)
    parser.add_argument('--fg-port', type=int, default=FGConnectionConstants.DEFAULT_PORT)
    parser.add_argument('--port', type=int, default=5000, help="Status web server port")
    return parser.parse_args()

if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    args = parse_args()
    state['config_path'] = args.config
    state['fg_interface'] = FGConnection(host=args.fg_host, port=args.fg_port)

    worker = threading.Thread(target=acars_worker, args=(state, state['stop_event']), daemon=True)
    worker.start()
    try:
        app.run(port=args.port, debug=False, use_reloader=False)
    finally:
        state['stop_event'].set()
        worker.join(timeout=FGConnectionConstants.DEFAULT_TIMEOUT * 2)
