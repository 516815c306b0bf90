"""The upgrade store and the items it offers."""

from __future__ import annotations

import logging
import random
from typing import Callable, Optional

from .objects import DuplicateObjectError, GameObject, ObjectManager, UnknownObjectError
from .player import Player

log = logging.getLogger(__name__)

ITEM_X = 380
ITEM_Y = 140
ITEM_SIZE = 90
ITEM_SPACING = 80
SLOTS = 3
PRESS_SHRINK = 10
DISABLED_SUFFIX = "_disabled"

PurchaseAction = Callable[[Player], None]


class Item(GameObject):
    """Something in the store the player can buy to improve their run."""

    def __init__(
        self,
        item_id: str,
        texture_id: str,
        cost: int,
        description: str,
        on_purchase: Optional[PurchaseAction],
        prob: float,
        store: Store,
        player: Optional[Player],
    ) -> None:
        super().__init__(item_id, ITEM_X, ITEM_Y, ITEM_SIZE, ITEM_SIZE, texture_id, False)
        self.cost = cost
        self.description = description
        self.on_purchase = on_purchase
        self.prob = prob
        self.store = store
        self.player = player
        self.level = 1
        store.add_item(self)
        store.object_manager.make_clickable(self.id)

    def on_click(self) -> None:
        """Shrink while pressed and buy the item if the player can afford it.

        A purchase runs the item's action, raises its cost and level and
        reshuffles what the store offers.
        """
        self.height -= PRESS_SHRINK
        self.width -= PRESS_SHRINK

        if self.player is None:
            log.error("item %r has no player", self.id)
            return
        if self.player.points < self.cost:
            log.info("not enough points to purchase item %r (%d)", self.id, self.cost)
            return
        if self.on_purchase is None:
            return
        self.on_purchase(self.player)
        self.cost = int(self.cost * self.cost ** (self.level / 2.0))
        self.level += 1
        self.store.randomize_available_items()

    def on_release(self) -> None:
        """Grow back to the size before the press."""
        self.height += PRESS_SHRINK
        self.width += PRESS_SHRINK


class Store(GameObject):
    """Holds every item and decides which of them are on offer."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        texture_id: str,
        object_manager: ObjectManager,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__("Store", x, y, width, height, texture_id)
        self.object_manager = object_manager
        self.items: dict[str, Item] = {}
        self.available_items: list[Item] = []
        self.rng = rng if rng is not None else random.Random()
        object_manager.add_object(self)

    def add_item(self, item: Item) -> None:
        """Put an item in the store and register it with the object manager."""
        if item.id in self.items:
            raise DuplicateObjectError(f"item with id {item.id!r} already exists in the store")
        self.object_manager.add_object(item)
        self.items[item.id] = item
        log.info("item %r added to the store", item.id)

    def remove_item(self, item_id: str) -> None:
        """Take an item out of the store."""
        if item_id not in self.items:
            raise UnknownObjectError(item_id)
        del self.items[item_id]

    def get_item(self, item_id: str) -> Item:
        """Return the item with ``item_id``."""
        try:
            return self.items[item_id]
        except KeyError:
            raise UnknownObjectError(item_id) from None

    def make_item_available(self, item_id: str) -> None:
        """Offer an item and show it on screen."""
        item = self.get_item(item_id)
        self.available_items.append(item)
        self.object_manager.activate_object(item_id)

    def make_item_unavailable(self, item_id: str) -> None:
        """Withdraw an item from offer and hide it."""
        item = self.get_item(item_id)
        if not item.is_active:
            log.info("item %r is already unavailable", item_id)
            return
        self.object_manager.deactivate_object(item_id)
        self.available_items = [i for i in self.available_items if i is not item]

    def randomize_available_items(self) -> None:
        """Pick a fresh set of items to offer, each weighted by its probability.

        Every item draws a random value and stays a candidate if its
        probability exceeds it; up to three shuffled candidates are shown,
        stacked one below the other.
        """
        for item in list(self.available_items):
            self.make_item_unavailable(item.id)
        self.available_items.clear()

        candidates = [
            item
            for _, item in sorted(self.items.items())
            if item.prob > self.rng.random()
        ]
        self.rng.shuffle(candidates)

        for slot, item in enumerate(candidates[:SLOTS]):
            item.y = ITEM_Y + slot * ITEM_SPACING
            self.make_item_available(item.id)

        log.info(
            "randomized available items in the store. %d items available",
            len(self.available_items),
        )

    def update_store(self, player: Player) -> None:
        """Show items the player cannot afford with their disabled texture."""
        for item in self.available_items:
            if player.points < item.cost:
                if DISABLED_SUFFIX not in item.texture_id:
                    item.texture_id += DISABLED_SUFFIX
            else:
                pos = item.texture_id.find(DISABLED_SUFFIX)
                if pos != -1:
                    item.texture_id = item.texture_id[:pos]