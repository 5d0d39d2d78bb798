"""Tests for automation presets, including the end-to-end home scenarios."""

from datetime import datetime
import logging

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
from home_automation.automation import (
    AutomationEngine,
    energy_saving_rule,
    motion_light_rule,
    schedule_rule,
)


class FakeClock:
    """Callable clock for schedule tests."""

    def __init__(self, hour: int, minute: int = 0) -> None:
        self.now = datetime(2025, 1, 15, hour, minute)

    def set(self, hour: int, minute: int = 0) -> None:
        self.now = self.now.replace(hour=hour, minute=minute)

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def automated(demo_home, controller):
    """Engine wired with the motion and energy-saving rules of the demo home."""
    engine = AutomationEngine()
    engine.add_rule(motion_light_rule(demo_home.find_device("S001"), demo_home.find_device("L001")))
    engine.add_rule(energy_saving_rule(controller))
    return engine


class TestMotionLightRule:
    """Tests for motion_light_rule."""

    def test_inactive_sensor_leaves_light_alone(self, demo_home, automated):
        sensor = demo_home.find_device("S001")
        light = demo_home.find_device("L001")

        sensor.detect_motion()
        result = automated.evaluate_rules()

        assert light.is_on is False
        assert result.rules_triggered == 0

    def test_motion_turns_light_on(self, demo_home, automated):
        sensor = demo_home.find_device("S001")
        light = demo_home.find_device("L001")

        sensor.turn_on()
        sensor.detect_motion()
        result = automated.evaluate_rules()

        assert light.is_on is True
        assert result.fired == ["Motion Light Rule"]

    def test_repeat_evaluation_is_stable(self, demo_home, automated):
        """A second pass with no state change leaves everything as the first did."""
        sensor = demo_home.find_device("S001")
        sensor.turn_on()
        sensor.detect_motion()

        automated.evaluate_rules()
        after_first = [d.to_dict() for d in demo_home.all_devices()]
        automated.evaluate_rules()

        assert [d.to_dict() for d in demo_home.all_devices()] == after_first

    def test_no_motion_no_fire(self, demo_home, automated):
        demo_home.find_device("S001").turn_on()
        automated.evaluate_rules()
        assert demo_home.find_device("L001").is_on is False

    def test_description(self):
        rule = motion_light_rule(MotionSensor("S1", "Hall Sensor"), Light("L1", "Hall Light"))
        assert rule.description == "IF Hall Sensor detects motion THEN turn on Hall Light"


class TestEnergySavingRule:
    """Tests for energy_saving_rule."""

    def build_home(self):
        home = Home("Test Home")
        room = Room("Living Room")
        light = Light("L1", "Lamp", 100)
        tv = SmartTV("TV1", "TV", volume=100)
        thermostat = Thermostat("T1", "Thermostat", 35)
        for device in (light, tv, thermostat):
            room.add_device(device)
            device.turn_on()
        home.add_room(room)
        return home, light, tv, thermostat

    def test_high_draw_triggers_saving(self):
        """10 W + 120 W + 150 W is over 200 W; the rule dims and switches off."""
        home, light, tv, thermostat = self.build_home()
        controller = CentralController(home)
        engine = AutomationEngine()
        engine.add_rule(energy_saving_rule(controller))

        before = controller.get_total_energy_consumption()
        assert before == pytest.approx(280.0)

        result = engine.evaluate_rules()

        assert result.fired == ["Energy Saving Rule"]
        assert light.brightness <= 30
        assert tv.is_on is False
        assert thermostat.is_on is True
        assert controller.get_total_energy_consumption() < before

    def test_below_threshold_does_not_fire(self, controller, demo_home):
        demo_home.find_device("L003").turn_on()
        engine = AutomationEngine()
        engine.add_rule(energy_saving_rule(controller))

        assert engine.evaluate_rules().rules_triggered == 0
        assert demo_home.find_device("L003").brightness == 100

    def test_second_pass_quiet_after_saving(self):
        home, *_ = self.build_home()
        engine = AutomationEngine()
        engine.add_rule(energy_saving_rule(CentralController(home)))

        assert engine.evaluate_rules().rules_triggered == 1
        # 3 W + 150 W is under the threshold now
        assert engine.evaluate_rules().rules_triggered == 0

    def test_follows_config_changes(self, controller, demo_home, caplog):
        """A threshold lowered after the rule is built is used for firing and logging."""
        rule = energy_saving_rule(controller)
        engine = AutomationEngine()
        engine.add_rule(rule)
        kitchen_light = demo_home.find_device("L003")
        kitchen_light.turn_on()

        controller.config.threshold_watts = 5
        with caplog.at_level(logging.INFO, logger="home_automation.automation.presets"):
            result = engine.evaluate_rules()

        assert result.fired == ["Energy Saving Rule"]
        assert kitchen_light.brightness == 30
        assert "above 5W" in caplog.text
        assert "200" not in rule.description


class TestScheduleRule:
    """Tests for schedule_rule."""

    def test_follows_schedule(self):
        light = Light("L1", "Porch Light")
        light.set_schedule("18:00", "23:00")
        clock = FakeClock(19)
        engine = AutomationEngine()
        engine.add_rule(schedule_rule(light, clock))

        engine.evaluate_rules()
        assert light.is_on is True

        clock.set(23, 30)
        engine.evaluate_rules()
        assert light.is_on is False

    def test_in_sync_does_not_fire(self):
        thermostat = Thermostat("T1", "Thermostat")
        thermostat.set_schedule("06:00", "08:00")
        engine = AutomationEngine()
        engine.add_rule(schedule_rule(thermostat, FakeClock(12)))

        assert engine.evaluate_rules().rules_triggered == 0
        assert thermostat.is_on is False

    def test_default_name(self):
        rule = schedule_rule(Light("L9", "Lamp"), FakeClock(0))
        assert rule.name == "Schedule L9"

    def test_rejects_unschedulable_device(self):
        with pytest.raises(TypeError):
            schedule_rule(SmartTV("TV1", "TV"), FakeClock(0))
