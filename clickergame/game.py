"""The game scene and its main loop."""

from __future__ import annotations

import argparse
import logging
import random
from typing import Optional, Sequence

import pygame

from .clickthing import ClickThing
from .config import InitError, init_display
from .objects import ObjectManager
from .player import Player
from .store import Item, Store
from .text import DEFAULT_FONT, Text
from .texture_manager import FONT_PATH, TEXTURE_PATH, TextureManager

log = logging.getLogger(__name__)

WHITE = (255, 255, 255, 255)
BACKGROUND = (0, 0, 0)
FRAME_DELAY_MS = 16
ITEM_IDS = ("example_item", "example_item2", "example_item3")


def _add_one_multiplier(player: Player) -> None:
    player.add_multiplier(1)


class Game:
    """Everything on screen for one run: the player, the click target, texts and the store."""

    def __init__(
        self,
        texture_manager: TextureManager,
        font: Optional[pygame.font.Font] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.texture_manager = texture_manager
        self.object_manager = ObjectManager()
        self.player = Player()
        self.click_thing = ClickThing(self.player, self.object_manager)

        if font is None:
            font = texture_manager.get_font(DEFAULT_FONT)

        self.points_text = Text(
            "points", 100, 50, 200, 50, "points: 0", font, WHITE, self.object_manager
        )
        self.object_manager.activate_object("points")

        self.points_per_click_text = Text(
            "points_per_click",
            100, 400, 200, 50,
            "Points per click: 1",
            font,
            WHITE,
            self.object_manager,
        )
        self.object_manager.activate_object("points_per_click")

        self.store = Store(310, 10, 300, 400, "store", self.object_manager, rng=rng)
        self.object_manager.activate_object("Store")

        self.items = [
            Item(
                item_id,
                "upgrade_example",
                100,
                "An example item for the store.",
                _add_one_multiplier,
                1,
                self.store,
                self.player,
            )
            for item_id in ITEM_IDS
        ]
        self.store.randomize_available_items()
        self.running = True

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to quitting and to mouse presses and releases."""
        if event.type == pygame.QUIT:
            log.info("quitting the game")
            self.running = False
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self.object_manager.handle_mouse_click(*event.pos)
        elif event.type == pygame.MOUSEBUTTONUP:
            self.object_manager.handle_mouse_release(*event.pos)

    def update(self) -> None:
        """Refresh the store and the on-screen counters."""
        self.store.update_store(self.player)
        self.points_text.set_content(f"Points: {self.player.points}")
        self.points_per_click_text.set_content(
            f"Points per click: {self.player.multiplier}"
        )

    def render(self, surface: pygame.Surface) -> None:
        """Clear ``surface`` and draw every active object and text onto it."""
        self.texture_manager.surface = surface
        surface.fill(BACKGROUND)
        self.object_manager.draw_active_objects(self.texture_manager)
        self.object_manager.draw_all_texts(surface)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="A small clicker game.")
    parser.add_argument("--textures", default=TEXTURE_PATH, help="directory of texture images")
    parser.add_argument("--fonts", default=FONT_PATH, help="directory of font files")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the window and run the game until it is closed."""
    args = _parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    try:
        window = init_display()
    except InitError as exc:
        log.error("%s", exc)
        pygame.quit()
        return 1

    texture_manager = TextureManager(window)
    try:
        texture_manager.load_all_textures(args.textures)
        texture_manager.load_all_fonts(args.fonts)
        game = Game(texture_manager)

        while game.running:
            for event in pygame.event.get():
                game.handle_event(event)
                if not game.running:
                    break
            game.update()
            game.render(window)
            pygame.display.flip()
            pygame.time.delay(FRAME_DELAY_MS)
    finally:
        texture_manager.clear_all_textures()
        texture_manager.clear_all_fonts()
        pygame.quit()
    return 0