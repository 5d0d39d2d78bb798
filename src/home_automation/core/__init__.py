"""
Core components of the home-automation library.

This package contains:
- home: Room and Home containers
- controller: CentralController facade
- config: energy-saving policy settings
- bus: Event Bus for the activity feed
"""

from home_automation.core.bus import Event, EventBus, EventFilter
from home_automation.core.config import EnergySavingConfig
from home_automation.core.home import Home, Room
from home_automation.core.controller import CentralController

__all__ = [
    "Event",
    "EventBus",
    "EventFilter",
    "EnergySavingConfig",
    "Home",
    "Room",
    "CentralController",
]
