"""Fixed-resolution off-screen canvas scaled by whole numbers into the window."""

from __future__ import annotations

import math
from typing import Any, Sequence

import pygame


class RenderTarget:
    """Off-screen surface whose drawing goes through a movable camera view."""

    def __init__(self, width: int, height: int) -> None:
        self.surface = pygame.Surface((width, height))
        self.view_center = pygame.Vector2(width / 2.0, height / 2.0)

    @property
    def view_offset(self) -> pygame.Vector2:
        """World position of the view's top-left corner."""
        width, height = self.surface.get_size()
        return self.view_center - pygame.Vector2(width / 2.0, height / 2.0)

    def get_size(self) -> tuple[int, int]:
        return self.surface.get_size()

    def fill(self, color: Any) -> pygame.Rect:
        return self.surface.fill(color)

    def blit(self, source: pygame.Surface, dest: Sequence[float], area: Any = None) -> pygame.Rect:
        """Draw at a world position, shifted by the camera."""
        offset = self.view_offset
        position = (math.floor(dest[0] - offset.x), math.floor(dest[1] - offset.y))
        return self.surface.blit(source, position, area)


class VirtualScreen:
    """Renders the game at a fixed size and presents it letterboxed."""

    WIDTH = 640
    HEIGHT = 360

    def __init__(self) -> None:
        self.render_target = RenderTarget(self.WIDTH, self.HEIGHT)
        self._presented = pygame.Surface((self.WIDTH, self.HEIGHT))
        self._mouse_position = pygame.Vector2()

    @property
    def mouse_position(self) -> pygame.Vector2:
        """Last mouse position, in virtual-screen coordinates."""
        return pygame.Vector2(self._mouse_position)

    def clear(self) -> None:
        self.render_target.fill((0, 0, 0))

    def display(self) -> None:
        """Make what was drawn so far the image shown by render_to_window."""
        self._presented.blit(self.render_target.surface, (0, 0))

    def set_camera_center(self, x: float, y: float) -> None:
        self.render_target.view_center = pygame.Vector2(x, y)

    @classmethod
    def _scale_for(cls, window_size: Sequence[int]) -> int:
        return min(int(window_size[0]) // cls.WIDTH, int(window_size[1]) // cls.HEIGHT)

    def render_to_window(self, window: pygame.Surface) -> None:
        """Draw the presented image centred in the window at an integer scale."""
        window_width, window_height = window.get_size()
        scale = self._scale_for((window_width, window_height))
        if scale == 0:
            return
        scaled_width = self.WIDTH * scale
        scaled_height = self.HEIGHT * scale
        scaled = pygame.transform.scale(self._presented, (scaled_width, scaled_height))
        window.blit(
            scaled,
            ((window_width - scaled_width) // 2, (window_height - scaled_height) // 2),
        )

    def update_mouse_position(
        self, window_position: Sequence[float], window_size: Sequence[int]
    ) -> None:
        self._mouse_position = self.map_window_to_virtual(window_position, window_size)

    def map_window_to_virtual(
        self, window_position: Sequence[float], window_size: Sequence[int]
    ) -> pygame.Vector2:
        """Convert a window pixel position into virtual-screen coordinates."""
        scale = self._scale_for(window_size)
        if scale == 0:
            raise ValueError(
                f"Window {tuple(window_size)} is smaller than the virtual screen"
            )
        offset_x = (float(window_size[0]) - self.WIDTH * scale) / 2.0
        offset_y = (float(window_size[1]) - self.HEIGHT * scale) / 2.0
        return pygame.Vector2(
            (float(window_position[0]) - offset_x) / scale,
            (float(window_position[1]) - offset_y) / scale,
        )