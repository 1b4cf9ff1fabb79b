"""Editable single-line text input with a blinking cursor."""

from __future__ import annotations

from typing import Any, Callable

import pygame
from pygame.math import Vector2

from platformer.resources import Resources
from platformer.ui.element import Element
from platformer.ui.image import Image
from platformer.ui.interactive_element import InteractionState, InteractiveElement
from platformer.ui.label import Label

_TEXT_INSET = 4.0
_CHARACTER_SIZE = 16
_BACKSPACE = 8
_DELETE = 127


class TextField(InteractiveElement):
    """Edits text while activated; shows a background per interaction state."""

    def __init__(self, resources: Resources, font_name: str) -> None:
        super().__init__()
        self.resources = resources
        self.font_name = font_name
        self._backgrounds: dict[InteractionState, Element] = {}
        self._text = ""
        self._cursor_position = 0
        self.filter: Callable[[str], bool] | None = None
        self.on_text_changed: Callable[[str], None] | None = None
        self._blink_timer = 0.0
        self._blink_period = 0.5
        self._cursor_blink_visible = True

        label = Label(resources, font_name)
        label.anchor = Vector2(0.0, 0.5)
        label.pivot = Vector2(0.0, 0.5)
        label.offset = Vector2(_TEXT_INSET, 0.0)
        label.character_size = _CHARACTER_SIZE
        label.color = (255, 255, 255)
        self._label = self.add_child(label)

        cursor = Image(resources)
        cursor.size = Vector2(1.0, float(_CHARACTER_SIZE))
        cursor.anchor = Vector2(0.0, 0.5)
        cursor.pivot = Vector2(0.0, 0.5)
        cursor.color = (255, 255, 255)
        cursor.is_visible = False
        self._cursor = self.add_child(cursor)

    @property
    def requires_activation(self) -> bool:
        return True

    @property
    def text_label(self) -> Label:
        return self._label

    @property
    def cursor(self) -> Image:
        return self._cursor

    @property
    def cursor_position(self) -> int:
        return self._cursor_position

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, new_text: str) -> None:
        self._text = new_text
        self._cursor_position = len(new_text)
        self._refresh_text_display()
        self._refresh_cursor_position()
        self._notify_changed()

    def set_background(self, state: InteractionState, element: Element) -> None:
        self._backgrounds[state] = self.add_child_back(element)
        self._refresh_background_visibility()

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        if not self.is_activated:
            return
        self._blink_timer += delta_time
        if self._blink_timer >= self._blink_period:
            self._blink_timer -= self._blink_period
            self._cursor_blink_visible = not self._cursor_blink_visible
            self._cursor.is_visible = self._cursor_blink_visible

    def handle_event(self, event: Any) -> None:
        if self.is_activated:
            if event.type == pygame.TEXTINPUT:
                for character in event.text:
                    self._enter_character(character)
            elif event.type == pygame.KEYDOWN:
                key = getattr(event, "key", None)
                if key == pygame.K_LEFT:
                    self._move_cursor(-1)
                elif key == pygame.K_RIGHT:
                    self._move_cursor(1)
                elif key == pygame.K_DELETE:
                    self._delete_after()
                elif key == pygame.K_BACKSPACE:
                    self._delete_before()
        super().handle_event(event)

    def on_state_changed(self) -> None:
        self._refresh_background_visibility()

    def on_activated(self) -> None:
        self._blink_timer = 0.0
        self._cursor_blink_visible = True
        self._cursor.is_visible = True
        self._refresh_cursor_position()

    def on_deactivated(self) -> None:
        self._cursor.is_visible = False

    def _enter_character(self, character: str) -> None:
        code = ord(character)
        if code == _BACKSPACE:
            self._delete_before()
        elif code == _DELETE:
            self._delete_after()
        elif code >= 32 and (self.filter is None or self.filter(character)):
            self._insert_character(character)

    def _insert_character(self, character: str) -> None:
        position = self._cursor_position
        self._text = self._text[:position] + character + self._text[position:]
        self._cursor_position += 1
        self._refresh_text_display()
        self._refresh_cursor_position()
        self._notify_changed()

    def _delete_before(self) -> None:
        if self._cursor_position == 0:
            return
        position = self._cursor_position
        self._text = self._text[: position - 1] + self._text[position:]
        self._cursor_position -= 1
        self._refresh_text_display()
        self._refresh_cursor_position()
        self._notify_changed()

    def _delete_after(self) -> None:
        if self._cursor_position >= len(self._text):
            return
        position = self._cursor_position
        self._text = self._text[:position] + self._text[position + 1 :]
        self._refresh_text_display()
        self._notify_changed()

    def _move_cursor(self, step: int) -> None:
        new_position = self._cursor_position + step
        if 0 <= new_position <= len(self._text):
            self._cursor_position = new_position
            self._refresh_cursor_position()

    def _refresh_text_display(self) -> None:
        self._label.text = self._text

    def _refresh_cursor_position(self) -> None:
        probe = Label(self.resources, self.font_name)
        probe.character_size = _CHARACTER_SIZE
        probe.text = self._text[: self._cursor_position]
        self._cursor.offset = Vector2(_TEXT_INSET + probe.size.x, 0.0)

    def _notify_changed(self) -> None:
        if self.on_text_changed is not None:
            self.on_text_changed(self._text)

    def _refresh_background_visibility(self) -> None:
        active = self._backgrounds.get(self.state, self._backgrounds.get(InteractionState.NORMAL))
        for background in self._backgrounds.values():
            background.is_visible = background is active