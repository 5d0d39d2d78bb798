"""Thermostat with heat/cool/auto modes."""

import logging
from enum import Enum
from typing import Any, Dict, Union

from home_automation.exceptions import InvalidDeviceStateError

from .base import Device, Schedulable

logger = logging.getLogger(__name__)


class ThermostatMode(Enum):
    """Operating modes a thermostat accepts."""

    HEAT = "heat"
    COOL = "cool"
    AUTO = "auto"


class Thermostat(Schedulable, Device):
    """
    Thermostat holding a target temperature in degrees Celsius.

    Energy draw grows with the distance between the target and a 20 °C
    baseline: 50 W at the baseline up to 150 W at 15 °C away.
    """

    DEVICE_TYPE = "thermostat"
    MIN_TEMPERATURE = 10
    MAX_TEMPERATURE = 35
    BASELINE_TEMPERATURE = 20
    MIN_WATTS = 50.0
    MAX_WATTS = 150.0
    MAX_DELTA = 15

    def __init__(
        self,
        device_id: str,
        name: str,
        target_temperature: int = 22,
        mode: Union[ThermostatMode, str] = ThermostatMode.AUTO,
    ) -> None:
        super().__init__(device_id, name)
        self._target_temperature = self._require_int_in_range(
            "temperature", target_temperature, self.MIN_TEMPERATURE, self.MAX_TEMPERATURE
        )
        self._mode = self._parse_mode(mode)

    @property
    def target_temperature(self) -> int:
        return self._target_temperature

    def get_target_temperature(self) -> int:
        return self._target_temperature

    @property
    def mode(self) -> ThermostatMode:
        return self._mode

    def set_temperature(self, value: int) -> None:
        """
        Set the target temperature.

        Raises:
            InvalidDeviceStateError: If value is outside 10-35
        """
        self._target_temperature = self._require_int_in_range(
            "temperature", value, self.MIN_TEMPERATURE, self.MAX_TEMPERATURE
        )
        logger.debug(f"{self.device_id} target temperature set to {value}")

    def set_mode(self, mode: Union[ThermostatMode, str]) -> None:
        """
        Set the operating mode.

        Args:
            mode: ThermostatMode or one of "heat", "cool", "auto"

        Raises:
            InvalidDeviceStateError: If mode is not a supported mode
        """
        self._mode = self._parse_mode(mode)
        logger.debug(f"{self.device_id} mode set to {self._mode.value}")

    def _parse_mode(self, mode: Union[ThermostatMode, str]) -> ThermostatMode:
        if isinstance(mode, ThermostatMode):
            return mode
        try:
            return ThermostatMode(str(mode).lower())
        except ValueError:
            allowed = ", ".join(m.value for m in ThermostatMode)
            raise InvalidDeviceStateError(
                self.device_id, f"mode must be one of {allowed}, got {mode!r}", mode
            ) from None

    def _active_energy(self) -> float:
        delta = min(abs(self._target_temperature - self.BASELINE_TEMPERATURE), self.MAX_DELTA)
        return self.MIN_WATTS + (self.MAX_WATTS - self.MIN_WATTS) * delta / self.MAX_DELTA

    def status_fields(self) -> Dict[str, Any]:
        return {"target": f"{self._target_temperature}°C", "mode": self._mode.value}
