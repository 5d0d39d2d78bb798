"""
Simulated devices.

All variants share the Device capability set (on/off, energy, status).
Light and Thermostat are additionally Schedulable.
"""

from home_automation.devices.base import Device, Schedulable, Schedule, filter_devices
from home_automation.devices.light import Light
from home_automation.devices.thermostat import Thermostat, ThermostatMode
from home_automation.devices.tv import SmartTV
from home_automation.devices.sensor import MotionSensor

__all__ = [
    "Device",
    "Schedulable",
    "Schedule",
    "filter_devices",
    "Light",
    "Thermostat",
    "ThermostatMode",
    "SmartTV",
    "MotionSensor",
]
