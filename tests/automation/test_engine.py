"""Tests for the automation engine."""

from datetime import datetime, UTC

import pytest

from home_automation import EventBus, EventFilter, InvalidDeviceStateError, SmartTV
from home_automation.automation import AutomationEngine, AutomationRule


@pytest.fixture
def engine():
    """Create an automation engine without a bus."""
    return AutomationEngine()


def make_rule(name, condition=lambda: True, action=lambda: None, **kwargs):
    """Helper to build rules with trivial defaults."""
    return AutomationRule(name=name, condition=condition, action=action, **kwargs)


class TestRuleManagement:
    """Tests for adding, removing and looking up rules."""

    def test_add_rule_keeps_order(self, engine):
        for name in ["b", "a", "c"]:
            engine.add_rule(make_rule(name))
        assert [r.name for r in engine.rules] == ["b", "a", "c"]

    def test_duplicate_name_rejected(self, engine):
        engine.add_rule(make_rule("lights"))
        with pytest.raises(ValueError, match="already exists"):
            engine.add_rule(make_rule("lights"))
        assert len(engine.rules) == 1

    def test_remove_and_get(self, engine):
        rule = make_rule("lights")
        engine.add_rule(rule)
        assert engine.get_rule("lights") is rule
        assert engine.remove_rule("lights") is rule
        with pytest.raises(KeyError):
            engine.get_rule("lights")
        with pytest.raises(KeyError):
            engine.remove_rule("lights")

    def test_rule_requires_callables(self):
        with pytest.raises(TypeError):
            AutomationRule(name="broken", condition=True, action=lambda: None)
        with pytest.raises(ValueError):
            make_rule("")


class TestEvaluation:
    """Tests for evaluate_rules()."""

    def test_no_rules(self, engine):
        result = engine.evaluate_rules()
        assert result.rules_evaluated == 0
        assert result.rules_triggered == 0
        assert result.ok

    def test_fires_only_true_conditions(self, engine):
        calls = []
        engine.add_rule(make_rule("yes", action=lambda: calls.append("yes")))
        engine.add_rule(make_rule("no", condition=lambda: False, action=lambda: calls.append("no")))

        result = engine.evaluate_rules()

        assert calls == ["yes"]
        assert result.rules_evaluated == 2
        assert result.rules_triggered == 1
        assert result.fired == ["yes"]

    def test_disabled_rule_skipped(self, engine):
        calls = []
        engine.add_rule(make_rule("off", action=lambda: calls.append(1), enabled=False))

        result = engine.evaluate_rules()

        assert calls == []
        assert result.rules_evaluated == 0

    def test_action_visible_to_later_rules(self, engine):
        """An earlier action runs before the next rule's condition."""
        state = {"flag": False}
        order = []

        def set_flag():
            state["flag"] = True
            order.append("first")

        engine.add_rule(make_rule("first", action=set_flag))
        engine.add_rule(
            make_rule("second", condition=lambda: state["flag"], action=lambda: order.append("second"))
        )

        engine.evaluate_rules()
        assert order == ["first", "second"]

    def test_rule_removed_by_earlier_action_is_skipped(self, engine):
        calls = []
        engine.add_rule(make_rule("cleanup", action=lambda: engine.remove_rule("later")))
        engine.add_rule(make_rule("later", action=lambda: calls.append("later")))

        result = engine.evaluate_rules()

        assert calls == []
        assert result.rules_evaluated == 1
        assert result.fired == ["cleanup"]
        assert [h.rule_name for h in engine.get_history()] == ["cleanup"]

    def test_rules_that_stay_true_fire_every_cycle(self, engine):
        calls = []
        engine.add_rule(make_rule("always", action=lambda: calls.append(1)))

        engine.evaluate_rules()
        engine.evaluate_rules()
        assert len(calls) == 2

    def test_failing_action_does_not_block_others(self, engine):
        tv = SmartTV("TV1", "TV")
        calls = []

        engine.add_rule(make_rule("bad", action=lambda: tv.change_channel(5)))
        engine.add_rule(make_rule("good", action=lambda: calls.append("good")))

        result = engine.evaluate_rules()

        assert calls == ["good"]
        assert not result.ok
        assert len(result.errors) == 1
        assert result.errors[0].startswith("bad: TV1: cannot change channel")
        assert result.fired == ["good"]

    def test_failing_condition_contained(self, engine):
        def boom():
            raise RuntimeError("sensor offline")

        engine.add_rule(make_rule("bad", condition=boom))
        engine.add_rule(make_rule("good"))

        result = engine.evaluate_rules()

        assert result.errors == ["bad: sensor offline"]
        assert result.rules_triggered == 1

    def test_error_logged(self, engine, caplog):
        def fail():
            raise InvalidDeviceStateError("L1", "brightness must be between 0 and 100", 200)

        engine.add_rule(make_rule("bad", action=fail))
        engine.evaluate_rules()

        assert "Error evaluating rule bad" in caplog.text


class TestHistory:
    """Tests for execution history."""

    def test_history_newest_first(self, engine):
        engine.add_rule(make_rule("a"))
        engine.add_rule(make_rule("b", condition=lambda: False))
        now = datetime(2025, 1, 15, 20, 0, 0, tzinfo=UTC)

        engine.evaluate_rules(now=now)
        history = engine.get_history()

        assert [h.rule_name for h in history] == ["b", "a"]
        assert history[0].conditions_met is False
        assert history[1].action_executed is True
        assert history[1].timestamp == now

    def test_history_filter_and_limit(self, engine):
        engine.add_rule(make_rule("a"))
        engine.add_rule(make_rule("b"))
        for _ in range(3):
            engine.evaluate_rules()

        assert len(engine.get_history(rule_name="a")) == 3
        assert len(engine.get_history(limit=2)) == 2

    def test_history_records_failure(self, engine):
        engine.add_rule(make_rule("bad", action=lambda: 1 / 0))
        engine.evaluate_rules()

        execution = engine.get_history()[0]
        assert execution.success is False
        assert execution.conditions_met is True
        assert execution.action_executed is False
        assert "division by zero" in execution.error

    def test_history_is_bounded(self, engine):
        engine.add_rule(make_rule("a"))
        for _ in range(AutomationEngine.HISTORY_SIZE + 10):
            engine.evaluate_rules()
        assert len(engine.get_history(limit=1000)) == AutomationEngine.HISTORY_SIZE

        engine.clear_history()
        assert engine.get_history() == []


class TestEvents:
    """Tests for engine events on the bus."""

    def test_fired_and_failed_events(self):
        bus = EventBus()
        received = []
        bus.subscribe(received.append, EventFilter(source="automation"))
        engine = AutomationEngine(bus)

        engine.add_rule(make_rule("good", description="does nothing"))
        engine.add_rule(make_rule("bad", action=lambda: 1 / 0))
        engine.add_rule(make_rule("idle", condition=lambda: False))
        engine.evaluate_rules()

        assert [e.type for e in received] == ["automation.rule_fired", "automation.rule_failed"]
        assert received[0].payload == {"rule": "good", "description": "does nothing"}
        assert received[1].payload["rule"] == "bad"
        assert "division by zero" in received[1].payload["error"]
