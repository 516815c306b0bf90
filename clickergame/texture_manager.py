"""Loading, storing and drawing textures and fonts."""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path
from typing import Union

import pygame

log = logging.getLogger(__name__)

TEXTURE_PATH = "assets/textures/"
FONT_PATH = "assets/"
TEXT_TEXTURE_ID = "__text__"
DEFAULT_FONT_SIZE = 24

TEXTURE_EXTENSIONS = frozenset({".png", ".jpg", ".jpeg", ".bmp"})
FONT_EXTENSIONS = frozenset({".ttf", ".otf"})

StrPath = Union[str, "PathLike[str]"]


class AssetError(Exception):
    """Raised when a texture or font cannot be loaded, stored or found."""


class TextureManager:
    """Keeps textures and fonts by id and draws textures onto a surface."""

    def __init__(self, surface: pygame.Surface | None = None) -> None:
        self.surface = surface
        self.textures: dict[str, pygame.Surface] = {}
        self.fonts: dict[str, pygame.font.Font] = {}

    def add_texture(self, texture_id: str, texture: pygame.Surface) -> None:
        """Store an already loaded texture under ``texture_id``."""
        if texture_id in self.textures:
            raise AssetError(f"texture with id {texture_id!r} already exists")
        self.textures[texture_id] = texture

    def load_texture(self, texture_id: str, path: StrPath) -> None:
        """Load an image file and store it under ``texture_id``."""
        if texture_id in self.textures:
            raise AssetError(f"texture with id {texture_id!r} already exists")
        try:
            texture = pygame.image.load(str(path))
        except (pygame.error, OSError) as exc:
            raise AssetError(f"could not load image {str(path)!r}: {exc}") from exc
        if pygame.display.get_surface() is not None:
            texture = texture.convert_alpha()
        self.add_texture(texture_id, texture)
        log.info("texture %r loaded from %r", texture_id, str(path))

    def has_texture(self, texture_id: str) -> bool:
        """Tell whether a texture with ``texture_id`` is stored."""
        return texture_id in self.textures

    def draw_texture(
        self,
        texture_id: str,
        x: float,
        y: float,
        width: float,
        height: float,
        clip: pygame.Rect | None = None,
    ) -> None:
        """Draw a stored texture stretched to the given rectangle.

        ``clip`` selects the part of the texture to draw. Text objects carry
        their own rendering and are skipped; an unknown id is logged.
        """
        if texture_id == TEXT_TEXTURE_ID:
            return
        texture = self.textures.get(texture_id)
        if texture is None:
            log.error("texture with id %r not found", texture_id)
            return
        if self.surface is None:
            raise RuntimeError("texture manager has no surface to draw on")
        source = texture.subsurface(clip) if clip is not None else texture
        size = (max(0, int(width)), max(0, int(height)))
        self.surface.blit(pygame.transform.scale(source, size), (int(x), int(y)))

    def clear_all_textures(self) -> None:
        """Forget every stored texture."""
        self.textures.clear()

    def load_all_textures(self, path: StrPath = TEXTURE_PATH) -> list[str]:
        """Load every image file in a directory, named by its file stem.

        Files that fail to load are logged and skipped. Returns the ids loaded.
        """
        log.info("loading textures from %s", path)
        loaded = []
        for file in sorted(Path(path).iterdir()):
            if not file.is_file() or file.suffix not in TEXTURE_EXTENSIONS:
                continue
            try:
                self.load_texture(file.stem, file)
            except AssetError as exc:
                log.error("failed to load texture %s: %s", file, exc)
            else:
                loaded.append(file.stem)
        log.info("finished loading textures")
        return loaded

    def load_font(self, font_id: str, path: StrPath, size: int) -> str:
        """Open a font file at ``size``; it is stored as ``font_id`` + size.

        Returns the id the font is stored under.
        """
        key = f"{font_id}{size}"
        if key in self.fonts:
            raise AssetError(f"font with id {key!r} already exists")
        pygame.font.init()
        try:
            font = pygame.font.Font(str(path), size)
        except (pygame.error, OSError) as exc:
            raise AssetError(f"could not load font {str(path)!r}: {exc}") from exc
        self.fonts[key] = font
        log.info("font %r loaded from %r", key, str(path))
        return key

    def get_font(self, font_id: str) -> pygame.font.Font:
        """Return the font stored under ``font_id``."""
        try:
            return self.fonts[font_id]
        except KeyError:
            raise AssetError(f"font with id {font_id!r} not found") from None

    def clear_all_fonts(self) -> None:
        """Forget every stored font."""
        self.fonts.clear()

    def load_all_fonts(self, path: StrPath = FONT_PATH) -> list[str]:
        """Load every font file in a directory at the default size.

        Files that fail to load are logged and skipped. Returns the ids loaded.
        """
        log.info("loading fonts from %s", path)
        loaded = []
        for file in sorted(Path(path).iterdir()):
            if not file.is_file() or file.suffix not in FONT_EXTENSIONS:
                continue
            try:
                loaded.append(self.load_font(file.stem, file, DEFAULT_FONT_SIZE))
            except AssetError as exc:
                log.error("failed to load font %s: %s", file, exc)
        log.info("finished loading fonts")
        return loaded