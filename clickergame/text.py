"""Text objects that render their own content with a font."""

from __future__ import annotations

import logging

import pygame

from .objects import GameObject, ObjectManager
from .texture_manager import TEXT_TEXTURE_ID

log = logging.getLogger(__name__)

DEFAULT_FONT = "BitPap24"


class TextRenderError(RuntimeError):
    """Raised when a text cannot be rendered or drawn."""


class Text(GameObject):
    """A piece of text on screen; it keeps its own rendered texture."""

    def __init__(
        self,
        object_id: str,
        x: float,
        y: float,
        width: float,
        height: float,
        content: str,
        font: pygame.font.Font | None,
        color: pygame.Color | tuple[int, ...],
        object_manager: ObjectManager,
    ) -> None:
        super().__init__(object_id, x, y, width, height, TEXT_TEXTURE_ID, False)
        self.content = content
        self.font = font
        self.color = color
        self.texture: pygame.Surface | None = None
        self.object_manager = object_manager
        object_manager.add_object(self)
        object_manager.text_objects.append(self)

    def set_content(self, new_content: str) -> None:
        """Replace the text and render it; the object takes the rendered size."""
        self.content = new_content
        self.texture = None
        if self.font is None:
            raise TextRenderError(f"text {self.id!r} has no font")
        try:
            rendered = self.font.render(self.content, True, self.color)
        except pygame.error as exc:
            raise TextRenderError(
                f"could not render text {self.id!r}: {exc}"
            ) from exc
        self.texture = rendered
        self.width, self.height = rendered.get_size()

    def draw_text(self, surface: pygame.Surface) -> None:
        """Draw the rendered text onto ``surface`` if the object is active."""
        if self.texture is None:
            raise TextRenderError(f"texture for text {self.id!r} is not set")
        if not self.is_active:
            return
        size = (max(0, int(self.width)), max(0, int(self.height)))
        texture = self.texture
        if texture.get_size() != size:
            texture = pygame.transform.scale(texture, size)
        surface.blit(texture, (int(self.x), int(self.y)))