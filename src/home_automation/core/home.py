"""
Room and Home containers.

A Home owns an ordered list of Rooms; a Room owns an ordered list of
Devices. Device ids are unique across the whole Home, enforced when a
device or room is added.
"""

from typing import Dict, List, Optional
import logging

from home_automation.devices.base import Device
from home_automation.exceptions import (
    DeviceNotFoundError,
    DuplicateDeviceError,
    DuplicateRoomError,
    RoomNotFoundError,
)

logger = logging.getLogger(__name__)


class Room:
    """
    A named group of devices.

    Insertion order is preserved. Once the room is added to a Home, new
    devices are also checked against every other room of that Home.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._devices: Dict[str, Device] = {}
        self._home: Optional["Home"] = None

    @property
    def devices(self) -> List[Device]:
        """Devices in insertion order."""
        return list(self._devices.values())

    @property
    def home(self) -> Optional["Home"]:
        return self._home

    def add_device(self, device: Device) -> None:
        """
        Add a device to the room.

        Args:
            device: The device to add

        Raises:
            DuplicateDeviceError: If the id is already used in this room or,
                when attached, anywhere in the home
        """
        if device.device_id in self._devices:
            raise DuplicateDeviceError(device.device_id, self.name)
        if self._home is not None and self._home.has_device(device.device_id):
            raise DuplicateDeviceError(device.device_id, self._home.name)

        self._devices[device.device_id] = device
        logger.debug(f"Added device {device.device_id} to room {self.name}")

    def remove_device(self, device_id: str) -> Device:
        """
        Remove a device from the room.

        Returns:
            The removed device

        Raises:
            DeviceNotFoundError: If no such device is in the room
        """
        if device_id not in self._devices:
            raise DeviceNotFoundError(device_id, self.name)
        device = self._devices.pop(device_id)
        logger.debug(f"Removed device {device_id} from room {self.name}")
        return device

    def get_device(self, device_id: str) -> Device:
        """
        Get a device by id.

        Raises:
            DeviceNotFoundError: If no such device is in the room
        """
        try:
            return self._devices[device_id]
        except KeyError:
            raise DeviceNotFoundError(device_id, self.name) from None

    def has_device(self, device_id: str) -> bool:
        return device_id in self._devices

    def total_energy(self) -> float:
        """Sum of the current draw of every device in the room, in watts."""
        return sum(d.compute_energy_consumption() for d in self._devices.values())

    def __len__(self) -> int:
        return len(self._devices)

    def __repr__(self) -> str:
        return f"Room(name={self.name!r}, devices={len(self._devices)})"


class Home:
    """
    A named group of rooms.

    Room names are unique, and device ids are unique across all rooms.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._rooms: Dict[str, Room] = {}

    @property
    def rooms(self) -> List[Room]:
        """Rooms in insertion order."""
        return list(self._rooms.values())

    def add_room(self, room: Room) -> None:
        """
        Add a room to the home.

        Args:
            room: The room to add

        Raises:
            DuplicateRoomError: If a room with the same name exists
            DuplicateDeviceError: If any device in the room collides with an
                id already in the home
        """
        if room.name in self._rooms:
            raise DuplicateRoomError(room.name)
        if room.home is not None and room.home is not self:
            raise ValueError(f"Room '{room.name}' already belongs to home '{room.home.name}'")

        for device in room.devices:
            if self.has_device(device.device_id):
                raise DuplicateDeviceError(device.device_id, self.name)

        self._rooms[room.name] = room
        room._home = self
        logger.info(f"Added room {room.name} ({len(room)} devices) to {self.name}")

    def get_room(self, name: str) -> Room:
        """
        Get a room by name.

        Raises:
            RoomNotFoundError: If no such room exists
        """
        try:
            return self._rooms[name]
        except KeyError:
            raise RoomNotFoundError(name) from None

    def all_devices(self) -> List[Device]:
        """
        All devices in the home.

        Returns:
            Devices ordered by room insertion, then device insertion
        """
        return [device for room in self._rooms.values() for device in room.devices]

    def has_device(self, device_id: str) -> bool:
        return any(room.has_device(device_id) for room in self._rooms.values())

    def find_device(self, device_id: str) -> Device:
        """
        Find a device in any room.

        Raises:
            DeviceNotFoundError: If no room contains the device
        """
        return self.room_of(device_id).get_device(device_id)

    def room_of(self, device_id: str) -> Room:
        """
        Get the room holding a device.

        Raises:
            DeviceNotFoundError: If no room contains the device
        """
        for room in self._rooms.values():
            if room.has_device(device_id):
                return room
        raise DeviceNotFoundError(device_id, self.name)

    def __repr__(self) -> str:
        return f"Home(name={self.name!r}, rooms={len(self._rooms)})"
