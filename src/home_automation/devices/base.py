"""
Base classes for simulated devices.

Every device supports the same capability set:
- Controllable: turn_on / turn_off, is_on
- EnergyConsumer: compute_energy_consumption
- Status: get_status / to_dict

Devices that can follow a daily on/off window also mix in Schedulable.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import time
from typing import Any, Dict, List, Optional, Union

from home_automation.exceptions import InvalidDeviceStateError

logger = logging.getLogger(__name__)

TimeLike = Union[time, str]


class Device(ABC):
    """
    A simulated controllable appliance.

    Subclasses set DEVICE_TYPE and implement the energy model and their
    variant-specific status fields. Devices always start switched off.
    """

    DEVICE_TYPE = "device"

    def __init__(self, device_id: str, name: str) -> None:
        if not device_id:
            raise ValueError("device_id must be a non-empty string")
        self._device_id = device_id
        self.name = name
        self._is_on = False

    @property
    def device_id(self) -> str:
        """Unique identifier, fixed at construction."""
        return self._device_id

    @property
    def is_on(self) -> bool:
        return self._is_on

    def turn_on(self) -> None:
        """Switch the device on. No-op if already on."""
        if self._is_on:
            return
        self._is_on = True
        logger.debug(f"{self._device_id} turned on")

    def turn_off(self) -> None:
        """Switch the device off. No-op if already off."""
        if not self._is_on:
            return
        self._is_on = False
        logger.debug(f"{self._device_id} turned off")

    def compute_energy_consumption(self) -> float:
        """
        Current power draw in watts.

        Returns:
            0.0 when the device is off, otherwise the variant's draw
        """
        if not self._is_on:
            return 0.0
        return self._active_energy()

    @abstractmethod
    def _active_energy(self) -> float:
        """Power draw in watts while switched on."""
        pass

    @abstractmethod
    def status_fields(self) -> Dict[str, Any]:
        """Variant-specific fields, in display order."""
        pass

    def get_status(self) -> str:
        """
        Human-readable one-line snapshot.

        Format: "[id] name — ON/OFF — <variant fields> — X.XXW"
        """
        fields = ", ".join(f"{key}={value}" for key, value in self.status_fields().items())
        state = "ON" if self._is_on else "OFF"
        parts = [f"[{self._device_id}] {self.name}", state]
        if fields:
            parts.append(fields)
        parts.append(f"{self.compute_energy_consumption():.2f}W")
        return " — ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Structured snapshot for presentation layers."""
        data: Dict[str, Any] = {
            "device_id": self._device_id,
            "name": self.name,
            "device_type": self.DEVICE_TYPE,
            "is_on": self._is_on,
        }
        data.update(self.status_fields())
        data["energy_watts"] = self.compute_energy_consumption()
        return data

    def _require_on(self, operation: str) -> None:
        """Raise if the device is off."""
        if not self._is_on:
            raise InvalidDeviceStateError(
                self._device_id, f"cannot {operation} while device is off"
            )

    def _require_int_in_range(self, field_name: str, value: Any, low: int, high: int) -> int:
        """Validate an integer setting against an inclusive range."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidDeviceStateError(
                self._device_id, f"{field_name} must be an integer, got {value!r}", value
            )
        if value < low or value > high:
            raise InvalidDeviceStateError(
                self._device_id,
                f"{field_name} must be between {low} and {high}, got {value}",
                value,
            )
        return value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(device_id={self._device_id!r}, name={self.name!r})"


# =============================================================================
# Scheduling
# =============================================================================


@dataclass(frozen=True)
class Schedule:
    """A daily on/off window. Windows with on_at > off_at span midnight."""

    on_at: time
    off_at: time

    def contains(self, at: time) -> bool:
        """Check whether a time of day falls inside the window."""
        if self.on_at <= self.off_at:
            return self.on_at <= at < self.off_at
        return at >= self.on_at or at < self.off_at


class Schedulable:
    """
    Mixin for devices that can follow a daily schedule.

    The schedule is only data; schedule_rule() in the automation presets
    applies it when the engine is evaluated.
    """

    _schedule: Optional[Schedule] = None

    @property
    def schedule(self) -> Optional[Schedule]:
        return self._schedule

    def set_schedule(self, on_at: TimeLike, off_at: TimeLike) -> Schedule:
        """
        Set the daily on/off window.

        Args:
            on_at: Time to switch on (time or "HH:MM")
            off_at: Time to switch off (time or "HH:MM")

        Returns:
            The stored Schedule

        Raises:
            InvalidDeviceStateError: If a time cannot be parsed or both are equal
        """
        start = self._parse_time(on_at)
        end = self._parse_time(off_at)
        if start == end:
            raise InvalidDeviceStateError(
                self._schedule_owner_id(), "schedule on and off times must differ", on_at
            )
        self._schedule = Schedule(on_at=start, off_at=end)
        logger.debug(f"{self._schedule_owner_id()} scheduled {start} -> {end}")
        return self._schedule

    def clear_schedule(self) -> None:
        self._schedule = None

    def is_scheduled_on(self, at: time) -> bool:
        """True if a schedule is set and `at` falls inside it."""
        if self._schedule is None:
            return False
        return self._schedule.contains(at)

    def _parse_time(self, value: TimeLike) -> time:
        if isinstance(value, time):
            parsed = value
        else:
            try:
                parsed = time.fromisoformat(str(value).strip())
            except ValueError:
                raise InvalidDeviceStateError(
                    self._schedule_owner_id(), f"invalid schedule time {value!r}", value
                ) from None

        # Compared against naive clock().time() values
        if parsed.tzinfo is not None:
            raise InvalidDeviceStateError(
                self._schedule_owner_id(),
                f"schedule time must not carry a UTC offset: {value!r}",
                value,
            )
        return parsed

    def _schedule_owner_id(self) -> str:
        return getattr(self, "device_id", type(self).__name__)


def filter_devices(devices: List[Device], device_type: type) -> List[Device]:
    """Return the devices that are instances of device_type, order preserved."""
    return [d for d in devices if isinstance(d, device_type)]
