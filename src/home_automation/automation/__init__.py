"""
Automation engine for home-automation.

Provides IF-THEN rules evaluated against live device state.

Features:
- Rules as condition/action callables capturing device references
- Ordered, synchronous evaluation with per-rule error containment
- Execution history for debugging
- Presets for motion lighting, energy saving, and schedules

Architecture:
    Callers change device state, then call evaluate_rules(). Actions
    mutate devices directly or through the CentralController.

    ┌──────────────┐   evaluate_rules()   ┌───────────────────┐
    │    Caller    │ ───────────────────▶ │ AutomationEngine  │
    └──────────────┘                      └─────────┬─────────┘
                                                    │ action()
                                                    ▼
                                    ┌─────────────────────────────┐
                                    │ Devices / CentralController │
                                    └─────────────────────────────┘
"""

from .models import AutomationRule, RuleExecution, EngineResult, Condition, Action
from .engine import AutomationEngine
from .presets import motion_light_rule, energy_saving_rule, schedule_rule

__all__ = [
    # Engine
    "AutomationEngine",
    "EngineResult",
    # Rule
    "AutomationRule",
    "RuleExecution",
    "Condition",
    "Action",
    # Presets
    "motion_light_rule",
    "energy_saving_rule",
    "schedule_rule",
]
