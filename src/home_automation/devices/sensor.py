"""Motion sensor used as an automation trigger."""

import logging
from typing import Any, Dict

from .base import Device

logger = logging.getLogger(__name__)


class MotionSensor(Device):
    """
    Boolean motion trigger with no meaningful power draw.

    Motion is only recorded while the sensor is on. Switching it off also
    clears any pending detection.
    """

    DEVICE_TYPE = "motion_sensor"

    def __init__(self, device_id: str, name: str) -> None:
        super().__init__(device_id, name)
        self._motion_detected = False

    @property
    def motion_detected(self) -> bool:
        return self._motion_detected

    def is_motion_detected(self) -> bool:
        return self._motion_detected

    def detect_motion(self) -> bool:
        """
        Record motion.

        Returns:
            True if motion was recorded, False if the sensor is inactive
        """
        if not self.is_on:
            logger.warning(f"{self.device_id} is inactive, ignoring motion")
            return False
        self._motion_detected = True
        logger.debug(f"{self.device_id} motion detected")
        return True

    def reset_motion(self) -> None:
        self._motion_detected = False

    def turn_off(self) -> None:
        super().turn_off()
        self._motion_detected = False

    def _active_energy(self) -> float:
        return 0.0

    def status_fields(self) -> Dict[str, Any]:
        return {"motion": "DETECTED" if self._motion_detected else "none"}
