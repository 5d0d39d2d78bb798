"""
Exceptions raised by the home-automation core.

Lookups raise LookupError subclasses; validation failures raise ValueError
subclasses, so callers that only care about the broad kind can catch those.
"""

from typing import Any, Optional


class SmartHomeError(Exception):
    """Base home-automation exception."""


class DeviceNotFoundError(SmartHomeError, LookupError):
    """No device with the given id exists in the room or home."""

    def __init__(self, device_id: str, scope: Optional[str] = None) -> None:
        self.device_id = device_id
        self.scope = scope
        where = f" in '{scope}'" if scope else ""
        super().__init__(f"Device '{device_id}' not found{where}")


class RoomNotFoundError(SmartHomeError, LookupError):
    """No room with the given name exists in the home."""

    def __init__(self, room_name: str) -> None:
        self.room_name = room_name
        super().__init__(f"Room '{room_name}' not found")


class DuplicateDeviceError(SmartHomeError, ValueError):
    """A device with the same id is already registered."""

    def __init__(self, device_id: str, scope: Optional[str] = None) -> None:
        self.device_id = device_id
        self.scope = scope
        where = f" in '{scope}'" if scope else ""
        super().__init__(f"Device with id '{device_id}' already exists{where}")


class DuplicateRoomError(SmartHomeError, ValueError):
    """A room with the same name is already part of the home."""

    def __init__(self, room_name: str) -> None:
        self.room_name = room_name
        super().__init__(f"Room '{room_name}' already exists")


class InvalidDeviceStateError(SmartHomeError, ValueError):
    """A setter got an out-of-range value, or the device must be on first."""

    def __init__(self, device_id: str, message: str, value: Any = None) -> None:
        self.device_id = device_id
        self.value = value
        super().__init__(f"{device_id}: {message}")
