"""
CentralController: the facade a presentation layer talks to.

The controller owns no device state itself. It runs bulk operations over
the bound Home and aggregates energy draw.
"""

from typing import Dict, List, Optional, Type, TypeVar
import logging

from home_automation.core.bus import Event, EventBus
from home_automation.core.config import EnergySavingConfig
from home_automation.core.home import Home
from home_automation.devices.base import Device, filter_devices
from home_automation.devices.light import Light
from home_automation.devices.tv import SmartTV

logger = logging.getLogger(__name__)

D = TypeVar("D", bound=Device)


class CentralController:
    """
    Bulk control and energy accounting for one Home.

    Responsibilities:
    - Switch groups of devices (all lights on, everything off)
    - Compute total and per-room energy draw
    - Apply the energy-saving policy
    - Produce the device status report

    If an EventBus is given, each bulk operation publishes a
    "controller.*" summary event plus one "device.changed" event, carrying
    device_id, for every device it changed.
    """

    def __init__(
        self,
        home: Home,
        config: Optional[EnergySavingConfig] = None,
        bus: Optional[EventBus] = None,
    ) -> None:
        self._home = home
        self._config = config or EnergySavingConfig()
        self._bus = bus

    @property
    def home(self) -> Home:
        return self._home

    @property
    def config(self) -> EnergySavingConfig:
        return self._config

    # =========================================================================
    # Queries
    # =========================================================================

    def find_device(self, device_id: str) -> Device:
        """
        Find a device anywhere in the home.

        Raises:
            DeviceNotFoundError: If the device does not exist
        """
        return self._home.find_device(device_id)

    def devices_of_type(self, device_type: Type[D]) -> List[D]:
        """All devices of a given class, in home order."""
        return filter_devices(self._home.all_devices(), device_type)

    def get_total_energy_consumption(self) -> float:
        """Current draw of every device in the home, in watts."""
        return sum(d.compute_energy_consumption() for d in self._home.all_devices())

    def energy_by_room(self) -> Dict[str, float]:
        """Current draw per room name, in room order."""
        return {room.name: room.total_energy() for room in self._home.rooms}

    def is_over_threshold(self) -> bool:
        """True if saving is enabled and total draw exceeds the configured threshold."""
        if not self._config.enabled:
            return False
        return self.get_total_energy_consumption() > self._config.threshold_watts

    def show_all_devices_status(self) -> str:
        """
        Build the status report for every device.

        Returns:
            One get_status() line per device, in home order
        """
        lines = [device.get_status() for device in self._home.all_devices()]
        report = "\n".join(lines)
        logger.info(f"Status of {self._home.name}:\n{report}")
        return report

    # =========================================================================
    # Bulk Operations
    # =========================================================================

    def turn_on_all_lights(self) -> List[str]:
        """
        Turn on every light. Other devices are untouched.

        Returns:
            IDs of lights that were switched on by this call
        """
        changed = []
        for light in self.devices_of_type(Light):
            if not light.is_on:
                light.turn_on()
                changed.append(light.device_id)
                self._publish_device(light, "on")

        logger.info(f"Turned on {len(changed)} lights")
        self._publish("controller.lights_on", {"device_ids": changed})
        return changed

    def turn_off_all_devices(self) -> List[str]:
        """
        Turn off every device in the home.

        Returns:
            IDs of devices that were switched off by this call
        """
        changed = []
        for device in self._home.all_devices():
            if device.is_on:
                device.turn_off()
                changed.append(device.device_id)
                self._publish_device(device, "off")

        logger.info(f"Turned off {len(changed)} devices")
        self._publish("controller.all_off", {"device_ids": changed})
        return changed

    def energy_saving_mode(self) -> Dict[str, List[str]]:
        """
        Apply the energy-saving policy.

        Lights brighter than config.saving_brightness are dimmed to it;
        dimmer lights are left alone. Every TV is turned off. Thermostats
        and sensors are not touched.

        Returns:
            {"dimmed": [...light ids], "switched_off": [...tv ids]}
        """
        target = self._config.saving_brightness
        before = self.get_total_energy_consumption()

        dimmed = []
        for light in self.devices_of_type(Light):
            if light.brightness > target:
                light.set_brightness(target)
                dimmed.append(light.device_id)
                self._publish_device(light, "dimmed")

        switched_off = []
        for tv in self.devices_of_type(SmartTV):
            if tv.is_on:
                tv.turn_off()
                switched_off.append(tv.device_id)
                self._publish_device(tv, "off")

        after = self.get_total_energy_consumption()
        logger.info(
            f"Energy saving mode: dimmed {len(dimmed)} lights, "
            f"switched off {len(switched_off)} TVs ({before:.2f}W -> {after:.2f}W)"
        )

        changes = {"dimmed": dimmed, "switched_off": switched_off}
        self._publish(
            "controller.energy_saving",
            {**changes, "watts_before": before, "watts_after": after},
        )
        return changes

    def _publish(self, event_type: str, payload: Dict) -> None:
        if self._bus is None:
            return
        self._bus.publish(Event(type=event_type, source="controller", payload=payload))

    def _publish_device(self, device: Device, change: str) -> None:
        """Publish one device.changed event per device touched by a bulk operation."""
        if self._bus is None:
            return
        self._bus.publish(
            Event(
                type="device.changed",
                source="controller",
                device_id=device.device_id,
                payload={"change": change, "state": device.to_dict()},
            )
        )
