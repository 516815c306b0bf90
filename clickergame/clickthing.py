"""The big object the player clicks to earn points."""

from __future__ import annotations

import logging

from .objects import GameObject, ObjectManager
from .player import Player

log = logging.getLogger(__name__)

PRESS_SHRINK = 10


class ClickThing(GameObject):
    """Gives the player points on each click and shrinks while pressed."""

    def __init__(self, player: Player | None, object_manager: ObjectManager) -> None:
        super().__init__("ClickThing", 100, 100, 200, 200, "example_texture", True)
        self.is_active = True
        self.is_clickable = True
        object_manager.add_object(self)
        self.player = player

    def on_click(self) -> None:
        """Award one point times the multiplier and shrink the object."""
        if self.player is None:
            log.error("click target has no player")
            return
        self.player.add_points(1 * self.player.multiplier)
        log.info("Points: %d", self.player.points)
        self.resize(self.height - PRESS_SHRINK, self.width - PRESS_SHRINK)

    def on_release(self) -> None:
        """Grow the object back to its size before the press."""
        self.resize(self.height + PRESS_SHRINK, self.width + PRESS_SHRINK)