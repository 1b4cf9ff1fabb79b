"""Top of a UI tree: routes mouse and keyboard input to interactive elements."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any

import pygame
from pygame.math import Vector2

from platformer.ui.element import Element
from platformer.ui.interactive_element import InteractiveElement
from platformer.virtual_screen import VirtualScreen


class InputMode(Enum):
    CURSOR = auto()
    SELECTION = auto()


def _contains(element: Element, point: Vector2) -> bool:
    position = element.absolute_position
    size = element.size
    return (
        position.x <= point.x < position.x + size.x
        and position.y <= point.y < position.y + size.y
    )


class Root:
    """Owns the content tree and handles highlight, press, drag and activation."""

    def __init__(self, virtual_screen: VirtualScreen) -> None:
        self.virtual_screen = virtual_screen
        self._content: Element | None = None
        self._interactives: list[InteractiveElement] = []
        self._input_mode = InputMode.CURSOR
        self._highlighted_index = -1
        self._dragged: InteractiveElement | None = None
        self._activated: InteractiveElement | None = None

    @property
    def content(self) -> Element | None:
        return self._content

    @property
    def interactives(self) -> tuple[InteractiveElement, ...]:
        """Interactive elements of the content, in depth-first order."""
        return tuple(self._interactives)

    @property
    def input_mode(self) -> InputMode:
        return self._input_mode

    @property
    def highlighted(self) -> InteractiveElement | None:
        if self._highlighted_index < 0:
            return None
        return self._interactives[self._highlighted_index]

    @property
    def activated_element(self) -> InteractiveElement | None:
        return self._activated

    @property
    def dragged_element(self) -> InteractiveElement | None:
        return self._dragged

    def set_content(self, content: Element) -> Element:
        """Replace the content tree and collect its interactive elements."""
        self._content = content
        self._interactives = []
        if content is not None:
            self._collect_from(content)
        return content

    def _collect_from(self, element: Element) -> None:
        if element.is_interactive:
            self._interactives.append(element)
        for child in element.children:
            self._collect_from(child)

    def handle_event(self, event: Any) -> None:
        kind = event.type

        if kind == pygame.MOUSEMOTION:
            self._input_mode = InputMode.CURSOR
            self._handle_mouse_move()
            return

        if kind == pygame.MOUSEBUTTONDOWN:
            self._input_mode = InputMode.CURSOR
            if self._activated is not None and not _contains(
                self._activated, self.virtual_screen.mouse_position
            ):
                self._deactivate_current()
            self._handle_mouse_press()
            return

        if kind == pygame.MOUSEBUTTONUP:
            self._handle_mouse_release()
            return

        key = getattr(event, "key", None)

        if self._activated is not None:
            if kind == pygame.KEYDOWN and key == pygame.K_ESCAPE:
                self._deactivate_current()
                return
            self._activated.handle_event(event)
            return

        if kind == pygame.KEYDOWN:
            if key in (pygame.K_DOWN, pygame.K_RIGHT):
                self._input_mode = InputMode.SELECTION
                self._handle_navigation(1)
            elif key in (pygame.K_UP, pygame.K_LEFT):
                self._input_mode = InputMode.SELECTION
                self._handle_navigation(-1)
            elif key == pygame.K_RETURN:
                self._input_mode = InputMode.SELECTION
                self._handle_confirm(True)
        elif kind == pygame.KEYUP and key == pygame.K_RETURN:
            self._handle_confirm(False)

    def _handle_mouse_move(self) -> None:
        mouse = self.virtual_screen.mouse_position
        if self._dragged is not None:
            self._dragged.on_drag_move(mouse)
            return
        found = next(
            (i for i, element in enumerate(self._interactives) if _contains(element, mouse)),
            -1,
        )
        self._set_highlighted_index(found)

    def _handle_mouse_press(self) -> None:
        element = self.highlighted
        if element is None:
            return
        element.press()
        self._dragged = element
        element.on_drag_start(self.virtual_screen.mouse_position)

    def _handle_mouse_release(self) -> None:
        element = self._dragged
        if element is None:
            return
        element.on_drag_end()
        element.release()
        self._activate_if_required(element)
        self._dragged = None

    def _handle_navigation(self, direction: int) -> None:
        if not self._interactives:
            return
        count = len(self._interactives)
        if self._highlighted_index < 0:
            new_index = 0 if direction > 0 else count - 1
        else:
            new_index = (self._highlighted_index + direction) % count
        self._set_highlighted_index(new_index)

    def _handle_confirm(self, pressed: bool) -> None:
        element = self.highlighted
        if element is None:
            return
        if pressed:
            element.press()
        else:
            element.release()
            self._activate_if_required(element)

    def _activate_if_required(self, element: InteractiveElement) -> None:
        if element.requires_activation and not element.is_activated:
            self._activated = element
            element.activate()

    def _deactivate_current(self) -> None:
        if self._activated is not None:
            self._activated.deactivate()
            self._activated = None

    def _set_highlighted_index(self, index: int) -> None:
        if index == self._highlighted_index:
            return
        if self._highlighted_index >= 0:
            self._interactives[self._highlighted_index].set_highlighted(False)
        self._highlighted_index = index
        if self._highlighted_index >= 0:
            self._interactives[self._highlighted_index].set_highlighted(True)

    def update(self, delta_time: float) -> None:
        if self._content is not None:
            self._content.update(delta_time)

    def draw(self, target: Any) -> None:
        """Draw the content laid out over the whole virtual screen."""
        if self._content is not None:
            self._content.draw(
                target,
                (0.0, 0.0),
                (float(VirtualScreen.WIDTH), float(VirtualScreen.HEIGHT)),
            )