"""Single-line text element sized to fit its contents."""

from __future__ import annotations

import math
from typing import Any

import pygame
from pygame.math import Vector2

from platformer.resources import Resources
from platformer.ui.element import Element


class Label(Element):
    """Draws one line of text in a named font; its size follows the text."""

    def __init__(self, resources: Resources, font_name: str) -> None:
        super().__init__()
        self.resources = resources
        self.font_name = font_name
        self._text = ""
        self._character_size = 16
        self._color = pygame.Color(255, 255, 255)

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = value
        self._recalculate_size()

    @property
    def character_size(self) -> int:
        return self._character_size

    @character_size.setter
    def character_size(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"Character size must not be negative: {value}")
        self._character_size = int(value)
        self._recalculate_size()

    @property
    def color(self) -> pygame.Color:
        return self._color

    @color.setter
    def color(self, value: Any) -> None:
        self._color = pygame.Color(value)

    def set_alpha(self, alpha: float) -> None:
        """Set opacity from 0.0 (transparent) to 1.0 (opaque), clamped."""
        self._color.a = int(min(max(alpha, 0.0), 1.0) * 255.0)

    def _font(self) -> pygame.font.Font:
        return self.resources.fonts.get(self.font_name).at_size(self._character_size)

    def _recalculate_size(self) -> None:
        font = self._font()
        if not self._text:
            self.size = Vector2(0.0, 0.0)
            return
        width, height = font.size(self._text)
        self.size = Vector2(math.ceil(width), math.ceil(height))

    def draw_self(self, target: Any, absolute_position: Vector2) -> None:
        if not self._text:
            return
        color = self._color
        rendered = self._font().render(self._text, False, (color.r, color.g, color.b))
        if color.a < 255:
            rendered.set_alpha(color.a)
        target.blit(
            rendered,
            (math.floor(absolute_position[0]), math.floor(absolute_position[1])),
        )