"""
Upgrade History

Records each upgrade applied to a player, with before/after values and
a UTC timestamp.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


class UpgradeAction(Enum):
    """Types of upgrade actions."""

    LIVES = "lives"
    LEVEL = "level"


@dataclass
class UpgradeRecord:
    """Record of an upgrade applied to a player."""

    action: UpgradeAction
    before: int
    after: int
    amount: Optional[int] = None
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    @property
    def clamped(self) -> bool:
        """Whether the upgrade was cut short by the lives maximum."""
        if self.action != UpgradeAction.LIVES or self.amount is None:
            return False
        return self.after - self.before < self.amount

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "action": self.action.value,
            "before": self.before,
            "after": self.after,
            "amount": self.amount,
            "timestamp": self.timestamp,
        }
