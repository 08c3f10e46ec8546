#!/usr/bin/env python3
"""
FlightGear Launcher for xpacars
This script starts FlightGear with the telnet property server xpacars reads
the aircraft identity and position from
"""

import subprocess
import sys

from xpacars.constants.connection import FGConnectionConstants

def check_flightgear_installed():
    """Check if FlightGear is available in PATH"""
    try:
        subprocess.run(["fgfs", "--version"], capture_output=True, check=True)
        return True
    except (subprocess.CalledProcessError, FileNotFoundError):
        return False

def start_flightgear(extra_args=None):
    """Start FlightGear with the telnet server enabled"""

    if not check_flightgear_installed():
        print("FlightGear is not installed or not in PATH")
        print("Please install FlightGear first:")
        print("Ubuntu/Debian: sudo apt install flightgear")
        print("Or download from: https://www.flightgear.org/")
        return False

    # FlightGear command parameters
    fg_command = [
        "fgfs",
        "--aircraft=c172p",
        "--airport=BIKF",
        "--timeofday=noon",
        f"--telnet={FGConnectionConstants.DEFAULT_TELNET_CONFIG}",
        "--callsign=TF-XPA",
    ] + list(extra_args or [])

    print("Starting FlightGear for xpacars...")
    print(f"Telnet interface at: {FGConnectionConstants.DEFAULT_HOST}:{FGConnectionConstants.DEFAULT_PORT}")
    print("Then run the reporter in another terminal: python3 app.py")
    print("Status will be available at: http://localhost:5000/status")
    print("\nPress Ctrl+C to stop FlightGear")

    process = None
    try:
        process = subprocess.Popen(fg_command)
        process.wait()
        return True

    except KeyboardInterrupt:
        print("\nStopping FlightGear...")
        if process:
            process.terminate()
        return True
    except OSError as e:
        print(f"Error starting FlightGear: {e}")
        return False

if __name__ == "__main__":
    start_flightgear(sys.argv[1:])
