"""Element showing a stretched texture, or a plain coloured rectangle."""

from __future__ import annotations

import math
from typing import Any

import pygame
from pygame.math import Vector2

from platformer.resources import Resources
from platformer.ui.element import Element


class Image(Element):
    """Draws a named texture scaled to its size, or fills its size with a colour."""

    def __init__(self, resources: Resources) -> None:
        super().__init__()
        self.resources = resources
        self.texture_name = ""
        self._color = pygame.Color(255, 255, 255)

    @property
    def color(self) -> pygame.Color:
        return self._color

    @color.setter
    def color(self, value: Any) -> None:
        self._color = pygame.Color(value)

    def set_alpha(self, alpha: float) -> None:
        """Set opacity from 0.0 (transparent) to 1.0 (opaque), clamped."""
        self._color.a = int(min(max(alpha, 0.0), 1.0) * 255.0)

    def draw_self(self, target: Any, absolute_position: Vector2) -> None:
        texture = self.resources.textures.get(self.texture_name) if self.texture_name else None
        width, height = round(self.size.x), round(self.size.y)
        if width <= 0 or height <= 0:
            return
        position = (math.floor(absolute_position[0]), math.floor(absolute_position[1]))

        if texture is None:
            rectangle = pygame.Surface((width, height), pygame.SRCALPHA)
            rectangle.fill(self._color)
            target.blit(rectangle, position)
        else:
            target.blit(pygame.transform.scale(texture, (width, height)), position)