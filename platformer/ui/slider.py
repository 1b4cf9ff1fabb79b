"""Horizontal value slider with a track, a fill bar and per-state handles."""

from __future__ import annotations

from typing import Any, Callable

import pygame
from pygame.math import Vector2

from platformer.ui.element import Element
from platformer.ui.interactive_element import InteractionState, InteractiveElement


class Slider(InteractiveElement):
    """Picks a value in a range by dragging, or with arrow keys once activated."""

    def __init__(self) -> None:
        super().__init__()
        self._track: Element | None = None
        self._fill: Element | None = None
        self._handles: dict[InteractionState, Element] = {}
        self._activated_handle: Element | None = None
        self._min_value = 0.0
        self._max_value = 1.0
        self._value = 0.0
        self.step = 0.1
        self.on_value_changed: Callable[[float], None] | None = None

    @property
    def requires_activation(self) -> bool:
        return True

    @property
    def track(self) -> Element | None:
        return self._track

    @property
    def min_value(self) -> float:
        return self._min_value

    @property
    def max_value(self) -> float:
        return self._max_value

    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, value: float) -> None:
        clamped = min(max(value, self._min_value), self._max_value)
        if clamped == self._value:
            return
        self._value = clamped
        self._refresh_layout()
        if self.on_value_changed is not None:
            self.on_value_changed(self._value)

    def set_track(self, element: Element) -> None:
        self._track = self.add_child(element)

    def set_fill(self, element: Element) -> None:
        self._fill = self.add_child(element)
        self._refresh_layout()

    def set_handle(self, state: InteractionState, element: Element) -> None:
        self._handles[state] = self.add_child(element)
        self._refresh_handle_visibility()
        self._refresh_layout()

    def set_activated_handle(self, element: Element) -> None:
        self._activated_handle = self.add_child(element)
        self._refresh_handle_visibility()
        self._refresh_layout()

    def set_range(self, min_value: float, max_value: float) -> None:
        """Change the range and re-clamp the current value into it."""
        self._min_value = min_value
        self._max_value = max_value
        self.value = self._value

    def on_drag_start(self, mouse_position: Vector2) -> None:
        self._set_value_from_mouse_x(mouse_position[0])

    def on_drag_move(self, mouse_position: Vector2) -> None:
        self._set_value_from_mouse_x(mouse_position[0])

    def handle_event(self, event: Any) -> None:
        if self.is_activated and event.type == pygame.KEYDOWN:
            key = getattr(event, "key", None)
            if key == pygame.K_LEFT:
                self.value = self._value - self.step
            elif key == pygame.K_RIGHT:
                self.value = self._value + self.step
        super().handle_event(event)

    def on_state_changed(self) -> None:
        self._refresh_handle_visibility()

    def on_activated(self) -> None:
        self._refresh_handle_visibility()

    def on_deactivated(self) -> None:
        self._refresh_handle_visibility()

    def _set_value_from_mouse_x(self, mouse_x: float) -> None:
        relative_x = mouse_x - self.absolute_position.x
        if self.size.x == 0:
            normalized = 1.0 if relative_x > 0 else 0.0
        else:
            normalized = min(max(relative_x / self.size.x, 0.0), 1.0)
        self.value = self._min_value + normalized * (self._max_value - self._min_value)

    def _refresh_layout(self) -> None:
        value_range = self._max_value - self._min_value
        normalized = (self._value - self._min_value) / value_range if value_range > 0.0 else 0.0
        handle_x = normalized * self.size.x

        handles = list(self._handles.values())
        if self._activated_handle is not None:
            handles.append(self._activated_handle)
        for handle in handles:
            handle.anchor = Vector2(0.0, 0.5)
            handle.pivot = Vector2(0.5, 0.5)
            handle.offset = Vector2(handle_x, 0.0)

        if self._fill is not None:
            self._fill.anchor = Vector2(0.0, 0.5)
            self._fill.pivot = Vector2(0.0, 0.5)
            self._fill.size.x = handle_x

    def _refresh_handle_visibility(self) -> None:
        if self.is_activated and self._activated_handle is not None:
            active = self._activated_handle
        else:
            active = self._handles.get(self.state, self._handles.get(InteractionState.NORMAL))

        for handle in self._handles.values():
            handle.is_visible = handle is active
        if self._activated_handle is not None:
            self._activated_handle.is_visible = self._activated_handle is active