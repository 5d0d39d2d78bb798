"""Smart TV."""

import logging
from typing import Any, Dict

from home_automation.exceptions import InvalidDeviceStateError

from .base import Device

logger = logging.getLogger(__name__)


class SmartTV(Device):
    """
    TV with channel and volume controls.

    Channel and volume can only be changed while the TV is on. Power draw
    is 80 W at volume 0 rising to 120 W at volume 100.
    """

    DEVICE_TYPE = "tv"
    MIN_CHANNEL = 1
    MAX_CHANNEL = 999
    MIN_VOLUME = 0
    MAX_VOLUME = 100
    BASE_WATTS = 80.0
    VOLUME_WATTS = 40.0

    def __init__(self, device_id: str, name: str, channel: int = 1, volume: int = 50) -> None:
        super().__init__(device_id, name)
        self._channel = self._require_int_in_range(
            "channel", channel, self.MIN_CHANNEL, self.MAX_CHANNEL
        )
        self._volume = self._require_int_in_range(
            "volume", volume, self.MIN_VOLUME, self.MAX_VOLUME
        )

    @property
    def channel(self) -> int:
        return self._channel

    def get_current_channel(self) -> int:
        return self._channel

    @property
    def volume(self) -> int:
        return self._volume

    def get_volume(self) -> int:
        return self._volume

    def change_channel(self, channel: int) -> None:
        """
        Switch to another channel.

        Raises:
            InvalidDeviceStateError: If the TV is off or channel is outside 1-999
        """
        self._require_on("change channel")
        self._channel = self._require_int_in_range(
            "channel", channel, self.MIN_CHANNEL, self.MAX_CHANNEL
        )
        logger.debug(f"{self.device_id} channel set to {channel}")

    def adjust_volume(self, delta: int) -> int:
        """
        Change the volume by delta, clamped to 0-100.

        Returns:
            The new volume

        Raises:
            InvalidDeviceStateError: If the TV is off or delta is not an integer
        """
        self._require_on("adjust volume")
        if isinstance(delta, bool) or not isinstance(delta, int):
            raise InvalidDeviceStateError(
                self.device_id, f"volume delta must be an integer, got {delta!r}", delta
            )
        self._volume = max(self.MIN_VOLUME, min(self.MAX_VOLUME, self._volume + delta))
        logger.debug(f"{self.device_id} volume now {self._volume}")
        return self._volume

    def _active_energy(self) -> float:
        return self.BASE_WATTS + self.VOLUME_WATTS * self._volume / self.MAX_VOLUME

    def status_fields(self) -> Dict[str, Any]:
        return {"channel": self._channel, "volume": self._volume}
