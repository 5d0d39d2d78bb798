"""
home-automation: a simulated smart-home core.

This library provides:
- Device models (lights, thermostats, TVs, motion sensors) with energy draw
- Room/Home containers with unique device ids
- A CentralController for bulk control and energy accounting
- An IF-THEN automation engine evaluated against live device state
"""

from home_automation.exceptions import (
    SmartHomeError,
    DeviceNotFoundError,
    RoomNotFoundError,
    DuplicateDeviceError,
    DuplicateRoomError,
    InvalidDeviceStateError,
)
from home_automation.devices import (
    Device,
    Light,
    Thermostat,
    ThermostatMode,
    SmartTV,
    MotionSensor,
)
from home_automation.core import (
    Event,
    EventBus,
    EventFilter,
    EnergySavingConfig,
    Home,
    Room,
    CentralController,
)
from home_automation.automation import AutomationEngine, AutomationRule

__version__ = "0.1.0"

__all__ = [
    "SmartHomeError",
    "DeviceNotFoundError",
    "RoomNotFoundError",
    "DuplicateDeviceError",
    "DuplicateRoomError",
    "InvalidDeviceStateError",
    "Device",
    "Light",
    "Thermostat",
    "ThermostatMode",
    "SmartTV",
    "MotionSensor",
    "Event",
    "EventBus",
    "EventFilter",
    "EnergySavingConfig",
    "Home",
    "Room",
    "CentralController",
    "AutomationEngine",
    "AutomationRule",
]
