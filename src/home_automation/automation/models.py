"""
Data models for the Automation engine.

A rule is a condition/action pair of zero-argument callables. The
callables capture the devices or controller they read and mutate.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, List, Optional

Condition = Callable[[], bool]
Action = Callable[[], None]


# =============================================================================
# Automation Rule
# =============================================================================


@dataclass
class AutomationRule:
    """A named IF-THEN rule.

    Consists of:
    - name: Unique name within an engine
    - condition: Predicate over current home state
    - action: Side effect to run when the condition holds
    - enabled: Whether rule is active
    - description: Optional text for display

    Rules keep no state between evaluations. An action should be safe to
    repeat, since a condition that stays true fires every cycle.
    """

    name: str
    condition: Condition
    action: Action
    enabled: bool = True
    description: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Rule name must be a non-empty string")
        if not callable(self.condition) or not callable(self.action):
            raise TypeError(f"Rule '{self.name}' needs callable condition and action")


# =============================================================================
# Execution Records
# =============================================================================


@dataclass
class RuleExecution:
    """Record of a rule evaluation (for history/debugging)."""

    rule_name: str
    conditions_met: bool
    action_executed: bool
    success: bool
    error: Optional[str]
    timestamp: datetime
    duration_ms: int


@dataclass
class EngineResult:
    """Result of one evaluate_rules() pass."""

    rules_evaluated: int = 0
    rules_triggered: int = 0
    fired: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors
