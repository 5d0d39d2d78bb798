"""
Automation presets - ready-made rules.

Each preset captures the exact devices (or controller) it reads and
mutates, and returns an AutomationRule to register with the engine.
"""

import logging
from datetime import datetime
from typing import Callable, Optional, Union

from home_automation.core.controller import CentralController
from home_automation.devices.base import Device, Schedulable
from home_automation.devices.light import Light
from home_automation.devices.sensor import MotionSensor

from .models import AutomationRule

logger = logging.getLogger(__name__)


def motion_light_rule(
    sensor: MotionSensor,
    light: Light,
    *,
    name: str = "Motion Light Rule",
    enabled: bool = True,
) -> AutomationRule:
    """
    Create a rule to turn a light on when a sensor reports motion.

    Args:
        sensor: Motion sensor to watch
        light: Light to switch on
        name: Rule name
        enabled: Whether rule is active

    Returns:
        Configured AutomationRule

    Example:
        engine.add_rule(motion_light_rule(hall_sensor, hall_light))
    """

    def action() -> None:
        if not light.is_on:
            light.turn_on()
            logger.info(f"Motion on {sensor.device_id}: turned on {light.device_id}")

    return AutomationRule(
        name=name,
        condition=lambda: sensor.motion_detected,
        action=action,
        enabled=enabled,
        description=f"IF {sensor.name} detects motion THEN turn on {light.name}",
    )


def energy_saving_rule(
    controller: CentralController,
    *,
    name: str = "Energy Saving Rule",
    enabled: bool = True,
) -> AutomationRule:
    """
    Create a rule to apply energy-saving mode when total draw is too high.

    The threshold is read from the controller's EnergySavingConfig
    (200 W by default) on every evaluation, so later config changes apply.

    Args:
        controller: Controller for the home
        name: Rule name
        enabled: Whether rule is active

    Returns:
        Configured AutomationRule
    """

    def action() -> None:
        logger.info(
            f"Total draw {controller.get_total_energy_consumption():.2f}W "
            f"above {controller.config.threshold_watts:.0f}W, activating energy saving mode"
        )
        controller.energy_saving_mode()

    return AutomationRule(
        name=name,
        condition=controller.is_over_threshold,
        action=action,
        enabled=enabled,
        description=(
            "IF total energy exceeds the configured threshold THEN dim lights and turn off TVs"
        ),
    )


def schedule_rule(
    device: Union[Device, Schedulable],
    clock: Callable[[], datetime],
    *,
    name: Optional[str] = None,
    enabled: bool = True,
) -> AutomationRule:
    """
    Create a rule that keeps a device in line with its schedule.

    Fires whenever the device's on/off state differs from what its
    schedule says for clock(). A device with no schedule is kept off.

    Args:
        device: A Schedulable device (Light, Thermostat)
        clock: Returns the current time; pass a fixed callable in tests
        name: Rule name (defaults to "Schedule <device_id>")
        enabled: Whether rule is active

    Returns:
        Configured AutomationRule
    """
    if not isinstance(device, Schedulable) or not isinstance(device, Device):
        raise TypeError(f"{device!r} does not support schedules")

    def should_be_on() -> bool:
        return device.is_scheduled_on(clock().time())

    def condition() -> bool:
        return device.is_on != should_be_on()

    def action() -> None:
        if should_be_on():
            device.turn_on()
        else:
            device.turn_off()
        logger.info(f"Schedule switched {device.device_id} {'on' if device.is_on else 'off'}")

    return AutomationRule(
        name=name or f"Schedule {device.device_id}",
        condition=condition,
        action=action,
        enabled=enabled,
        description=f"Follow the daily schedule of {device.name}",
    )
