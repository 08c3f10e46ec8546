# xpacars/telemetry/core.py

import logging
from typing import Dict, Any, List, Optional

from .constants import TelemetryConstants
from .exceptions import TelemetryError, PropertyReadError
from ..acars.data_models import FlightIdentity, PositionSample

logger = logging.getLogger(__name__)

class FGTelemetrySource:
    """Reads aircraft identity and position from a FlightGear connection"""

    def __init__(self, fg_connection):
        """
        Args:
            fg_connection: Connected FGConnection instance
        """
        self.fg = fg_connection
        self.const = TelemetryConstants

    def get_identity(self) -> Optional[FlightIdentity]:
        """
        Returns the aircraft identity, or None while any field can't be read.
        An empty value is still a valid field.
        """
        fields = {}
        for name, (prop_path, max_len) in self.const.IDENTITY.items():
            response = self.fg.get_string(prop_path)
            if not response['success']:
                logger.debug(f"Identity field {name} unavailable: {response.get('message', 'No details')}")
                return None
            fields[name] = self._clean_text(response['data']['value'], max_len)
        return FlightIdentity(**fields)

    def get_position(self) -> PositionSample:
        """Returns the current position in protocol units (m, m/s)"""
        values = {
            name: self._get(prop_path) * factor
            for name, (prop_path, factor) in self.const.POSITION.items()
        }
        return PositionSample(**values)

    def check_properties(self) -> List[str]:
        """Returns the properties that can't be read right now"""
        missing = []
        for prop_path, _ in self.const.IDENTITY.values():
            if not self.fg.get_string(prop_path)['success']:
                missing.append(prop_path)
        for prop_path, _ in self.const.POSITION.values():
            if not self.fg.get(prop_path)['success']:
                missing.append(prop_path)
        return missing

    def _get(self, prop_path: str) -> float:
        """Fetches a numeric property from FlightGear"""
        response = self.fg.get(prop_path)
        if not response['success']:
            raise PropertyReadError(prop_path, self._details(response))
        try:
            return float(response['data']['value'])
        except (KeyError, TypeError, ValueError) as e:
            raise TelemetryError(f"Non-numeric value for {prop_path}: {response['data']}") from e

    @staticmethod
    def _clean_text(value: Any, max_len: int) -> str:
        text = str(value).replace("\x00", "")
        return text[:max_len]

    @staticmethod
    def _details(response: Dict[str, Any]) -> str:
        return response['data'].get('error_details') or response.get('message', '')
