# xpacars/acars/config.py

import logging
import os
from typing import Optional

from .constants import CONNECTION
from .exceptions import ConfigError

logger = logging.getLogger(__name__)

class AcarsConfig:
    """Configuration for the xpacars client."""

    # Destination URL file, relative to the simulator root
    CONFIG_DIR = os.path.join("Resources", "plugins")
    CONFIG_FILENAME = "xpacars.txt"
    MAX_CONFIG_BYTES = 1024

    SIM_ROOT_ENV = "FG_ROOT"

    REQUEST_TIMEOUT_S = CONNECTION.REQUEST_TIMEOUT_S
    MAX_REDIRECTS = CONNECTION.MAX_REDIRECTS
    USER_AGENT = CONNECTION.USER_AGENT

# Characters trimmed from both ends of the destination URL
URL_STRIP_CHARS = " \t\n\r\f\v"

def strip_url(url: str) -> str:
    """Removes surrounding whitespace and control characters from a URL."""
    return url.strip(URL_STRIP_CHARS)

def resolve_config_path(sim_root: Optional[str] = None) -> str:
    """Returns <sim root>/Resources/plugins/xpacars.txt."""
    root = sim_root or os.environ.get(AcarsConfig.SIM_ROOT_ENV) or os.getcwd()
    return os.path.join(root, AcarsConfig.CONFIG_DIR, AcarsConfig.CONFIG_FILENAME)

def load_destination_url(config_path: str) -> str:
    """
    Reads the destination URL from `config_path`.

    The whole file is the URL; surrounding whitespace is dropped.

    Raises:
        ConfigError: the file is missing, unreadable, empty, larger than
            MAX_CONFIG_BYTES, not UTF-8, or holds only whitespace.
    """
    try:
        with open(config_path, 'rb') as f:
            raw = f.read(AcarsConfig.MAX_CONFIG_BYTES + 1)
    except OSError as e:
        raise ConfigError(config_path, message=f"Cannot read destination URL ({e.strerror or e})") from e

    if not raw:
        raise ConfigError(config_path, message="Empty destination URL file")
    if len(raw) > AcarsConfig.MAX_CONFIG_BYTES:
        raise ConfigError(
            config_path,
            message=f"Destination URL file exceeds {AcarsConfig.MAX_CONFIG_BYTES} bytes"
        )

    try:
        url = strip_url(raw.decode('utf-8'))
    except UnicodeDecodeError as e:
        raise ConfigError(config_path, message="Destination URL file is not valid UTF-8") from e

    if not url:
        raise ConfigError(config_path, message="No destination URL in file")

    logger.info(f"Destination URL loaded from {config_path}")
    return url
