#!/usr/bin/env python3
"""
Quick example demonstrating home-automation basic usage.

Set PYTHONPATH: PYTHONPATH=src python3 example.py
"""

import logging

from home_automation import (
    CentralController,
    EventBus,
    EventFilter,
    Home,
    Light,
    MotionSensor,
    Room,
    SmartTV,
    Thermostat,
)
from home_automation.automation import AutomationEngine, energy_saving_rule, motion_light_rule

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

print("=" * 60)
print("home-automation Example")
print("=" * 60)

# 1. Build the home
print("\n1. Building home...")
home = Home("My Smart Home")

living_room = Room("Living Room")
bedroom = Room("Bedroom")
kitchen = Room("Kitchen")

living_light = Light("L001", "Living Room Light", 75)
thermostat = Thermostat("T001", "Main Thermostat", 22)
tv = SmartTV("TV001", "Living Room TV")
motion_sensor = MotionSensor("S001", "Living Room Sensor")

for device in (living_light, thermostat, tv, motion_sensor):
    living_room.add_device(device)
bedroom.add_device(Light("L002", "Bedroom Light", 50))
kitchen.add_device(Light("L003", "Kitchen Light", 100))

for room in (living_room, bedroom, kitchen):
    home.add_room(room)
    print(f"   ✓ {room.name}: {len(room)} devices")

# 2. Controller, activity feed, and rules
print("\n2. Wiring controller and automation...")
bus = EventBus()
bus.subscribe(
    lambda event: print(f"   [AUTO] {event.payload['rule']}: {event.payload['description']}"),
    EventFilter(event_type="automation.rule_fired"),
)

controller = CentralController(home, bus=bus)
engine = AutomationEngine(bus)
engine.add_rule(motion_light_rule(motion_sensor, living_light))
engine.add_rule(energy_saving_rule(controller))
for rule in engine.rules:
    print(f"   ✓ {rule.name}")

# 3. Motion triggers the living room light
print("\n3. Simulating motion...")
motion_sensor.turn_on()
motion_sensor.detect_motion()
engine.evaluate_rules()
print(f"   Living room light on: {living_light.is_on}")

# 4. Push the draw over 200 W
print("\n4. Turning everything up...")
controller.turn_on_all_lights()
thermostat.turn_on()
thermostat.set_temperature(30)
tv.turn_on()
tv.adjust_volume(50)
print(f"   Total: {controller.get_total_energy_consumption():.2f} W")

engine.evaluate_rules()
print(f"   After automation: {controller.get_total_energy_consumption():.2f} W")

# 5. Status report
print("\n5. Device status:")
for line in controller.show_all_devices_status().splitlines():
    print(f"   {line}")

print("\n" + "=" * 60)
print("Example complete!")
print("=" * 60)
