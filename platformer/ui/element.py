"""Base node of the UI tree: layout, drawing, animation and events."""

from __future__ import annotations

from typing import Any, Sequence

from pygame.math import Vector2

from platformer.ui.animation import Animation


class Element:
    """A UI node positioned by anchor, pivot and offset inside its parent."""

    def __init__(self) -> None:
        self.anchor = Vector2()
        self.pivot = Vector2()
        self.offset = Vector2()
        self.size = Vector2()
        self.is_visible = True
        self._absolute_position = Vector2()
        self._children: list[Element] = []
        self._animations: list[Animation] = []

    @property
    def is_interactive(self) -> bool:
        return False

    @property
    def absolute_position(self) -> Vector2:
        """Position computed by the most recent draw."""
        return Vector2(self._absolute_position)

    @property
    def children(self) -> tuple[Element, ...]:
        return tuple(self._children)

    def draw(self, target: Any, parent_position: Sequence[float], parent_size: Sequence[float]) -> None:
        """Draw this element and then its children, unless it is hidden."""
        if not self.is_visible:
            return
        self._absolute_position = self.compute_position(parent_position, parent_size)
        self.draw_self(target, Vector2(self._absolute_position))
        for child in self._children:
            child.draw(target, self._absolute_position, self.size)

    def update(self, delta_time: float) -> None:
        """Advance animations, drop finished ones, then update children."""
        for animation in list(self._animations):
            animation.update(delta_time)
        self._animations = [a for a in self._animations if not a.is_finished]
        for child in self._children:
            child.update(delta_time)

    def handle_event(self, event: Any) -> None:
        for child in self._children:
            child.handle_event(event)

    def add_child(self, child: Element) -> Element:
        """Append a child, drawn above the existing ones."""
        self._children.append(child)
        return child

    def add_child_back(self, child: Element) -> Element:
        """Insert a child first, drawn beneath the existing ones."""
        self._children.insert(0, child)
        return child

    def add_animation(self, animation: Animation) -> Animation:
        self._animations.append(animation)
        return animation

    def clear_animations(self) -> None:
        self._animations.clear()

    def compute_position(self, parent_position: Sequence[float], parent_size: Sequence[float]) -> Vector2:
        parent_position = Vector2(parent_position)
        parent_size = Vector2(parent_size)
        return (
            parent_position
            + Vector2(self.anchor.x * parent_size.x, self.anchor.y * parent_size.y)
            + self.offset
            - Vector2(self.pivot.x * self.size.x, self.pivot.y * self.size.y)
        )

    def draw_self(self, target: Any, absolute_position: Vector2) -> None:
        """Record where this element sits; plain elements paint nothing and only group children."""
        self._absolute_position = Vector2(absolute_position)