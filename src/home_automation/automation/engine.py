"""
Automation engine - core rule processing logic.

Evaluates every rule's condition against current state and fires the
matching actions, in rule insertion order.
"""

import logging
from collections import deque
from datetime import datetime, UTC
from typing import Deque, Dict, List, Optional

from home_automation.core.bus import Event, EventBus

from .models import AutomationRule, EngineResult, RuleExecution

logger = logging.getLogger(__name__)


class AutomationEngine:
    """
    Core engine for automation rule processing.

    Responsibilities:
    - Keep rules in insertion order
    - Evaluate conditions and fire actions synchronously
    - Contain failures per rule so one bad rule does not block the rest
    - Track execution history

    The engine never runs on its own; callers invoke evaluate_rules()
    after changing device state.
    """

    HISTORY_SIZE = 100  # Number of executions to keep in history

    def __init__(self, bus: Optional[EventBus] = None) -> None:
        self._bus = bus
        self._rules: Dict[str, AutomationRule] = {}

        # Execution history (ring buffer)
        self._history: Deque[RuleExecution] = deque(maxlen=self.HISTORY_SIZE)

    # =========================================================================
    # Configuration
    # =========================================================================

    def add_rule(self, rule: AutomationRule) -> None:
        """
        Append a rule.

        Raises:
            ValueError: If a rule with the same name is already registered
        """
        if rule.name in self._rules:
            raise ValueError(f"Rule '{rule.name}' already exists")
        self._rules[rule.name] = rule
        logger.debug(f"Added rule {rule.name} ({len(self._rules)} total)")

    def remove_rule(self, name: str) -> AutomationRule:
        """
        Remove a rule by name.

        Raises:
            KeyError: If no rule has that name
        """
        if name not in self._rules:
            raise KeyError(f"Rule '{name}' not found")
        return self._rules.pop(name)

    def get_rule(self, name: str) -> AutomationRule:
        """
        Get a rule by name.

        Raises:
            KeyError: If no rule has that name
        """
        if name not in self._rules:
            raise KeyError(f"Rule '{name}' not found")
        return self._rules[name]

    @property
    def rules(self) -> List[AutomationRule]:
        """Rules in evaluation order."""
        return list(self._rules.values())

    # =========================================================================
    # Evaluation
    # =========================================================================

    def evaluate_rules(self, now: Optional[datetime] = None) -> EngineResult:
        """
        Evaluate every enabled rule once.

        An action runs immediately when its condition holds, so it can
        affect the conditions of rules evaluated after it in the same pass.

        Args:
            now: Timestamp to record in history (for testing)

        Returns:
            Counts of rules evaluated/triggered, and per-rule errors
        """
        if now is None:
            now = datetime.now(UTC)

        result = EngineResult()

        for rule in list(self._rules.values()):
            # An earlier action may have removed or replaced this rule
            if self._rules.get(rule.name) is not rule or not rule.enabled:
                continue

            result.rules_evaluated += 1
            self._evaluate_rule(rule, now, result)

        if result.rules_triggered:
            logger.debug(
                f"Evaluated {result.rules_evaluated} rules, "
                f"{result.rules_triggered} triggered, {len(result.errors)} errors"
            )
        return result

    def _evaluate_rule(self, rule: AutomationRule, now: datetime, result: EngineResult) -> None:
        """Evaluate one rule, containing any exception it raises."""
        start_time = datetime.now(UTC)
        conditions_met = False
        action_executed = False
        error = None

        try:
            conditions_met = bool(rule.condition())
            if conditions_met:
                result.rules_triggered += 1
                rule.action()
                action_executed = True
                result.fired.append(rule.name)
                logger.info(f"Rule fired: {rule.name}")

        except Exception as e:
            error = str(e) or type(e).__name__
            result.errors.append(f"{rule.name}: {error}")
            logger.error(f"Error evaluating rule {rule.name}: {e}", exc_info=True)

        duration_ms = int((datetime.now(UTC) - start_time).total_seconds() * 1000)

        self._history.append(
            RuleExecution(
                rule_name=rule.name,
                conditions_met=conditions_met,
                action_executed=action_executed,
                success=error is None,
                error=error,
                timestamp=now,
                duration_ms=duration_ms,
            )
        )

        if error is not None:
            self._publish("automation.rule_failed", rule, {"error": error})
        elif action_executed:
            self._publish("automation.rule_fired", rule, {})

    def _publish(self, event_type: str, rule: AutomationRule, payload: Dict) -> None:
        if self._bus is None:
            return
        self._bus.publish(
            Event(
                type=event_type,
                source="automation",
                payload={"rule": rule.name, "description": rule.description, **payload},
            )
        )

    # =========================================================================
    # History
    # =========================================================================

    def get_history(
        self,
        rule_name: Optional[str] = None,
        limit: int = 20,
    ) -> List[RuleExecution]:
        """
        Get execution history.

        Args:
            rule_name: Filter by rule (optional)
            limit: Maximum entries to return

        Returns:
            List of RuleExecution records (newest first)
        """
        result = []
        for execution in reversed(self._history):
            if rule_name and execution.rule_name != rule_name:
                continue
            result.append(execution)
            if len(result) >= limit:
                break
        return result

    def clear_history(self) -> None:
        self._history.clear()
