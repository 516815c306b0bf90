"""Game objects and the manager that tracks, draws and dispatches input to them."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from .texture_manager import AssetError, TextureManager

if TYPE_CHECKING:
    import pygame

log = logging.getLogger(__name__)


class ObjectError(Exception):
    """Base class for errors raised by the object manager."""


class DuplicateObjectError(ObjectError, ValueError):
    """Raised when an object id is already taken."""


class UnknownObjectError(ObjectError, KeyError):
    """Raised when no object has the given id."""


class _Drawable(Protocol):
    def draw_text(self, surface: pygame.Surface) -> None: ...


@dataclass(eq=False)
class GameObject:
    """A rectangle on screen with a texture and optional click behaviour."""

    id: str
    x: float
    y: float
    width: float
    height: float
    texture_id: str
    is_clickable: bool = False
    is_active: bool = field(default=False, init=False)

    def draw(self, texture_manager: TextureManager) -> None:
        """Draw the object's texture over its rectangle."""
        texture_manager.draw_texture(
            self.texture_id, self.x, self.y, self.width, self.height
        )

    def set_position(self, x: float, y: float) -> None:
        """Place the object at ``(x, y)``."""
        self.x = x
        self.y = y

    def move(self, dx: float, dy: float) -> None:
        """Shift the object by ``(dx, dy)``."""
        self.x += dx
        self.y += dy

    def resize(self, new_width: float, new_height: float) -> None:
        """Give the object a new size."""
        self.width = new_width
        self.height = new_height

    def change_texture(
        self, new_texture_id: str, texture_manager: TextureManager
    ) -> None:
        """Switch to another texture known to ``texture_manager``."""
        if not texture_manager.has_texture(new_texture_id):
            raise AssetError(f"texture with id {new_texture_id!r} not found")
        self.texture_id = new_texture_id

    def is_mouse_over(self, mouse_x: float, mouse_y: float) -> bool:
        """Tell whether the point lies inside the object, edges included."""
        return (
            self.x <= mouse_x <= self.x + self.width
            and self.y <= mouse_y <= self.y + self.height
        )

    def on_click(self) -> None:
        """Called when the mouse button is pressed over the object."""

    def on_release(self) -> None:
        """Called when the mouse button is released over the object."""

    def on_mouse_over(self) -> None:
        """Called when the pointer is over the object."""

    def on_mouse_out(self) -> None:
        """Called when the pointer is not over the object."""


class ObjectManager:
    """Keeps every object by id, plus the active, clickable and text lists."""

    def __init__(self) -> None:
        self.all_objects: dict[str, GameObject] = {}
        self.active_objects: list[GameObject] = []
        self.click_active_objects: list[GameObject] = []
        self.text_objects: list[_Drawable] = []

    def _lookup(self, object_id: str) -> GameObject:
        try:
            return self.all_objects[object_id]
        except KeyError:
            raise UnknownObjectError(object_id) from None

    def create_object(
        self,
        object_id: str,
        x: float,
        y: float,
        width: float,
        height: float,
        texture_id: str,
        is_clickable: bool = False,
    ) -> GameObject:
        """Create a plain object and register it; it starts inactive."""
        if object_id in self.all_objects:
            raise DuplicateObjectError(f"object with id {object_id!r} already exists")
        obj = GameObject(object_id, x, y, width, height, texture_id, is_clickable)
        self.all_objects[object_id] = obj
        return obj

    def add_object(self, obj: GameObject) -> None:
        """Register an existing object, listing it as active or clickable per its flags."""
        if obj.id in self.all_objects:
            raise DuplicateObjectError(f"object with id {obj.id!r} already exists")
        self.all_objects[obj.id] = obj
        if obj.is_active:
            self.active_objects.append(obj)
        if obj.is_clickable:
            self.click_active_objects.append(obj)

    def destroy_object(self, object_id: str) -> None:
        """Remove an object from every list."""
        obj = self._lookup(object_id)
        if obj.is_active:
            self.deactivate_object(object_id)
        if obj.is_clickable:
            self.make_non_clickable(object_id)
        del self.all_objects[object_id]
        self.text_objects = [t for t in self.text_objects if t is not obj]

    def get_object(self, object_id: str) -> GameObject | None:
        """Return the object with ``object_id``, or None."""
        return self.all_objects.get(object_id)

    def activate_object(self, object_id: str) -> None:
        """Mark an object active so that it is drawn."""
        obj = self._lookup(object_id)
        obj.is_active = True
        if obj not in self.active_objects:
            self.active_objects.append(obj)

    def deactivate_object(self, object_id: str) -> None:
        """Mark an object inactive so that it is no longer drawn."""
        obj = self._lookup(object_id)
        obj.is_active = False
        self.active_objects = [o for o in self.active_objects if o is not obj]

    def make_clickable(self, object_id: str) -> None:
        """Let an object receive clicks."""
        obj = self._lookup(object_id)
        obj.is_clickable = True
        if obj not in self.click_active_objects:
            self.click_active_objects.append(obj)

    def make_non_clickable(self, object_id: str) -> None:
        """Stop an object from receiving clicks."""
        obj = self._lookup(object_id)
        obj.is_clickable = False
        self.click_active_objects = [
            o for o in self.click_active_objects if o is not obj
        ]

    def destroy_all_objects(self) -> None:
        """Forget every object."""
        self.all_objects.clear()
        self.active_objects.clear()
        self.click_active_objects.clear()
        self.text_objects.clear()

    def draw_active_objects(self, texture_manager: TextureManager) -> None:
        """Draw every active object in activation order."""
        for obj in self.active_objects:
            obj.draw(texture_manager)

    def _first_clickable_at(self, mouse_x: float, mouse_y: float) -> GameObject | None:
        return next(
            (o for o in self.click_active_objects if o.is_mouse_over(mouse_x, mouse_y)),
            None,
        )

    def handle_mouse_click(self, mouse_x: float, mouse_y: float) -> GameObject | None:
        """Send a click to the first clickable object under the pointer.

        Returns the object clicked, or None if there was none.
        """
        obj = self._first_clickable_at(mouse_x, mouse_y)
        if obj is not None:
            obj.on_click()
        return obj

    def handle_mouse_release(
        self, mouse_x: float, mouse_y: float
    ) -> GameObject | None:
        """Send a release to the first clickable object under the pointer.

        Returns the object released over, or None if there was none.
        """
        obj = self._first_clickable_at(mouse_x, mouse_y)
        if obj is not None:
            obj.on_release()
        return obj

    def handle_mouse_over(self, mouse_x: float, mouse_y: float) -> GameObject | None:
        """Walk the active objects until one is under the pointer.

        Objects passed before it get ``on_mouse_out``; the one found gets
        ``on_mouse_over`` and is returned. Returns None if none is hit.
        """
        for obj in list(self.active_objects):
            if obj.is_mouse_over(mouse_x, mouse_y):
                obj.on_mouse_over()
                return obj
            obj.on_mouse_out()
        return None

    def draw_all_texts(self, surface: pygame.Surface) -> None:
        """Draw every text object onto ``surface``."""
        for text in self.text_objects:
            text.draw_text(surface)