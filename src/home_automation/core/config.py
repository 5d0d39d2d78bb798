"""
Energy-saving policy configuration.

Round-trips through plain dicts so a host application can keep it in
whatever config store it already uses.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class EnergySavingConfig:
    """Settings for CentralController.energy_saving_mode and the threshold check."""

    CURRENT_VERSION = 1

    version: int = CURRENT_VERSION
    enabled: bool = True
    threshold_watts: float = 200.0  # Total draw above this triggers saving
    saving_brightness: int = 30  # Lights brighter than this are dimmed to it

    def __post_init__(self) -> None:
        if self.threshold_watts < 0:
            raise ValueError(f"threshold_watts must be >= 0, got {self.threshold_watts}")
        if isinstance(self.saving_brightness, bool) or not isinstance(self.saving_brightness, int):
            raise ValueError(
                f"saving_brightness must be an integer, got {self.saving_brightness!r}"
            )
        if not 0 <= self.saving_brightness <= 100:
            raise ValueError(
                f"saving_brightness must be between 0 and 100, got {self.saving_brightness}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict."""
        return {
            "version": self.version,
            "enabled": self.enabled,
            "threshold_watts": self.threshold_watts,
            "saving_brightness": self.saving_brightness,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EnergySavingConfig":
        """Deserialize from dict, filling in defaults for missing keys."""
        return cls(
            version=data.get("version", cls.CURRENT_VERSION),
            enabled=data.get("enabled", True),
            threshold_watts=float(data.get("threshold_watts", 200.0)),
            saving_brightness=int(data.get("saving_brightness", 30)),
        )
