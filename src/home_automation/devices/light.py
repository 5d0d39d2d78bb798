"""Dimmable light."""

import logging
from typing import Any, Dict

from .base import Device, Schedulable

logger = logging.getLogger(__name__)


class Light(Schedulable, Device):
    """
    A dimmable light drawing up to 10 W at full brightness.

    Brightness can be changed while the light is off; the stored value
    takes effect when it is switched on.
    """

    DEVICE_TYPE = "light"
    MAX_WATTS = 10.0
    MIN_BRIGHTNESS = 0
    MAX_BRIGHTNESS = 100

    def __init__(self, device_id: str, name: str, brightness: int = 100) -> None:
        super().__init__(device_id, name)
        self._brightness = self._require_int_in_range(
            "brightness", brightness, self.MIN_BRIGHTNESS, self.MAX_BRIGHTNESS
        )

    @property
    def brightness(self) -> int:
        return self._brightness

    def get_brightness(self) -> int:
        return self._brightness

    def set_brightness(self, value: int) -> None:
        """
        Set brightness in percent.

        Raises:
            InvalidDeviceStateError: If value is outside 0-100
        """
        self._brightness = self._require_int_in_range(
            "brightness", value, self.MIN_BRIGHTNESS, self.MAX_BRIGHTNESS
        )
        logger.debug(f"{self.device_id} brightness set to {value}")

    def _active_energy(self) -> float:
        return self.MAX_WATTS * self._brightness / 100

    def status_fields(self) -> Dict[str, Any]:
        return {"brightness": self._brightness}
