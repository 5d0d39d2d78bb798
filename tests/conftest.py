"""Shared fixtures: the three-room demo home."""

import pytest

from home_automation import (
    CentralController,
    Home,
    Light,
    MotionSensor,
    Room,
    SmartTV,
    Thermostat,
)


@pytest.fixture
def demo_home():
    """Living room, bedroom and kitchen with six devices, all off."""
    home = Home("My Smart Home")

    living_room = Room("Living Room")
    living_room.add_device(Light("L001", "Living Room Light", 75))
    living_room.add_device(Thermostat("T001", "Main Thermostat", 22))
    living_room.add_device(SmartTV("TV001", "Living Room TV"))
    living_room.add_device(MotionSensor("S001", "Living Room Sensor"))

    bedroom = Room("Bedroom")
    bedroom.add_device(Light("L002", "Bedroom Light", 50))

    kitchen = Room("Kitchen")
    kitchen.add_device(Light("L003", "Kitchen Light", 100))

    home.add_room(living_room)
    home.add_room(bedroom)
    home.add_room(kitchen)
    return home


@pytest.fixture
def controller(demo_home):
    """Controller bound to the demo home with default config."""
    return CentralController(demo_home)
