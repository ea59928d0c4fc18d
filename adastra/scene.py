"""A minimal retained scene of positioned, layered items."""

from __future__ import annotations

import random
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

import pygame

T = TypeVar("T")


def monotonic_ms() -> int:
    """Milliseconds from a monotonic clock."""
    return int(time.monotonic() * 1000)


@dataclass(frozen=True)
class RectF:
    """An axis-aligned rectangle with floating-point geometry."""

    x: float
    y: float
    w: float
    h: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def width(self) -> float:
        return self.w

    @property
    def height(self) -> float:
        return self.h

    def intersects(self, other: RectF) -> bool:
        """True when the two rectangles share an area of positive size."""
        if self.w <= 0 or self.h <= 0 or other.w <= 0 or other.h <= 0:
            return False
        return (
            self.left < other.right
            and other.left < self.right
            and self.top < other.bottom
            and other.top < self.bottom
        )

    def translated(self, dx: float, dy: float) -> RectF:
        return RectF(self.x + dx, self.y + dy, self.w, self.h)


class Item:
    """Something placed in a scene: it moves on advance and paints itself."""

    def __init__(self):
        self.x = 0.0
        self.y = 0.0
        self.z = 0
        self.visible = True
        self.scene: Scene | None = None
        self.deleted = False

    @property
    def game(self):
        return self.scene.game if self.scene is not None else None

    def bounding_rect(self) -> RectF:
        """Extent of the item around its own position."""
        return RectF(0.0, 0.0, 0.0, 0.0)

    def scene_rect(self) -> RectF:
        return self.bounding_rect().translated(self.x, self.y)

    def set_pos(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)

    def move_by(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy

    def advance(self) -> None:
        """Step the item by one frame; the base item stays still."""

    def paint(self, surface: pygame.Surface) -> None:
        """Draw the item in scene coordinates; the base item draws nothing."""

    def delete_later(self) -> None:
        """Mark the item for removal once the current frame is done."""
        self.deleted = True

    def colliding_items(self) -> list[Item]:
        if self.scene is None:
            return []
        return self.scene.colliding_items(self)


class Scene:
    """Holds items, advances them each frame and paints them by layer."""

    def __init__(
        self,
        width: int,
        height: int,
        rng: random.Random | None = None,
        clock: Callable[[], int] | None = None,
    ):
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock if clock is not None else monotonic_ms
        self.game = None
        self._items: list[Item] = []

    def add_item(self, item: Item) -> None:
        if item.scene is self:
            return
        if item.scene is not None:
            item.scene.remove_item(item)
        item.scene = self
        self._items.append(item)

    def remove_item(self, item: Item) -> None:
        if item.scene is not self:
            raise ValueError("item is not in this scene")
        self._items.remove(item)
        item.scene = None

    def items(self) -> list[Item]:
        """Live items in the order they were added."""
        return [item for item in self._items if not item.deleted]

    def items_of_type(self, cls: type[T]) -> list[T]:
        return [item for item in self.items() if isinstance(item, cls)]

    def clear(self) -> None:
        for item in self._items:
            item.scene = None
        self._items.clear()

    def _purge(self) -> None:
        doomed = [item for item in self._items if item.deleted]
        for item in doomed:
            self.remove_item(item)

    def advance(self) -> None:
        """Advance every item present at the start of the frame once."""
        self._purge()
        for item in list(self._items):
            if item.scene is self and not item.deleted:
                item.advance()
        self._purge()

    def colliding_items(self, item: Item) -> list[Item]:
        rect = item.scene_rect()
        return [
            other
            for other in self.items()
            if other is not item and other.visible and other.scene_rect().intersects(rect)
        ]

    def render(self, surface: pygame.Surface) -> None:
        """Clear to black and paint visible items from the lowest layer up."""
        surface.fill((0, 0, 0))
        for item in sorted(self.items(), key=lambda it: it.z):
            if item.visible:
                item.paint(surface)