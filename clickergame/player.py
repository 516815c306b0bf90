"""Player state for a single run."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Player:
    """Points earned and the per-click multiplier."""

    points: int = 0
    multiplier: int = 1
    points_per_second: int = 0

    def add_points(self, points: int) -> None:
        """Add ``points`` to the player's total."""
        self.points += points

    def add_multiplier(self, amount: int) -> None:
        """Raise the per-click multiplier by ``amount``."""
        self.multiplier += int(amount)