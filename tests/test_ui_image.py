import pygame
import pytest
from pygame.math import Vector2

from platformer.resources import ResourceError, ResourceManager, Resources
from platformer.ui.image import Image


def _pixel(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


def _drawn(image, width=10, height=10):
    surface = pygame.Surface((width, height))
    image.draw(surface, (0, 0), (width, height))
    return surface


def _red_texture(_path):
    texture = pygame.Surface((2, 2))
    texture.fill((255, 0, 0))
    return texture


def test_untextured_image_fills_its_rectangle():
    image = Image(Resources())
    image.color = (0, 255, 0)
    image.size = Vector2(4, 3)
    image.offset = Vector2(2, 1)
    surface = _drawn(image)
    assert _pixel(surface, 2, 1) == (0, 255, 0)
    assert _pixel(surface, 5, 3) == (0, 255, 0)
    assert _pixel(surface, 6, 3) == (0, 0, 0)
    assert _pixel(surface, 1, 1) == (0, 0, 0)


def test_transparent_rectangle_leaves_target_untouched():
    image = Image(Resources())
    image.color = (0, 255, 0)
    image.set_alpha(0.0)
    image.size = Vector2(4, 4)
    surface = _drawn(image)
    assert _pixel(surface, 1, 1) == (0, 0, 0)


def test_textured_image_is_stretched_to_size():
    resources = Resources(textures=ResourceManager(_red_texture))
    resources.textures.load("tile", "unused")

    image = Image(resources)
    image.texture_name = "tile"
    image.size = Vector2(6, 6)
    surface = _drawn(image)
    assert _pixel(surface, 5, 5) == (255, 0, 0)
    assert _pixel(surface, 6, 6) == (0, 0, 0)


def test_missing_texture_raises():
    resources = Resources(textures=ResourceManager(_red_texture))
    image = Image(resources)
    image.texture_name = "absent"
    image.size = Vector2(4, 4)
    with pytest.raises(ResourceError, match="absent"):
        _drawn(image)

    resources.textures.load("absent", "unused")
    surface = _drawn(image)
    assert _pixel(surface, 3, 3) == (255, 0, 0)
    assert _pixel(surface, 4, 4) == (0, 0, 0)


def test_set_alpha_clamps():
    image = Image(Resources())
    image.set_alpha(5.0)
    assert image.color.a == 255
    image.set_alpha(-3.0)
    assert image.color.a == 0


def test_hidden_image_draws_nothing():
    image = Image(Resources())
    image.color = (0, 0, 255)
    image.size = Vector2(10, 10)
    image.is_visible = False
    surface = _drawn(image)
    assert _pixel(surface, 5, 5) == (0, 0, 0)