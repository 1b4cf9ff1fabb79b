"""Named caches of textures, fonts, sounds, music and shader sources."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Generic, TypeVar, Union

import pygame

PathLike = Union[str, "os.PathLike[str]"]
R = TypeVar("R")


class ResourceError(Exception):
    """Raised when a resource cannot be loaded or was never loaded."""


class ResourceManager(Generic[R]):
    """Loads resources through a loader function and keeps them by id."""

    def __init__(self, loader: Callable[..., R]) -> None:
        self._loader = loader
        self._resources: dict[str, R] = {}

    def load(self, resource_id: str, filepath: PathLike, *args: Any) -> R:
        """Load a resource from a file and store it under an unused id."""
        try:
            resource = self._loader(filepath, *args)
        except Exception as exc:
            raise ResourceError(f"Failed to load resource: {os.fspath(filepath)}") from exc
        if resource is None:
            raise ResourceError(f"Failed to load resource: {os.fspath(filepath)}")
        if resource_id in self._resources:
            raise ResourceError(f"Resource already loaded: {resource_id}")
        self._resources[resource_id] = resource
        return resource

    def get(self, resource_id: str) -> R:
        try:
            return self._resources[resource_id]
        except KeyError:
            raise ResourceError(f"Requested resource was not loaded: {resource_id}") from None

    def __contains__(self, resource_id: object) -> bool:
        return resource_id in self._resources

    def __len__(self) -> int:
        return len(self._resources)


class FontFace:
    """A font file that yields renderable fonts at any character size."""

    def __init__(self, path: PathLike) -> None:
        self.path = Path(path)
        self._sized: dict[int, pygame.font.Font] = {}

    def at_size(self, size: int) -> pygame.font.Font:
        font = self._sized.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(os.fspath(self.path), size)
            self._sized[size] = font
        return font


def _check_readable(path: PathLike) -> Path:
    with open(path, "rb"):
        pass
    return Path(path)


def _load_texture(path: PathLike) -> pygame.Surface:
    return pygame.image.load(os.fspath(path))


def _open_font(path: PathLike) -> FontFace:
    return FontFace(_check_readable(path))


def _load_sound(path: PathLike) -> Any:
    return pygame.mixer.Sound(os.fspath(path))


def _open_music(path: PathLike) -> Path:
    return _check_readable(path)


def _load_shader(path: PathLike, *extra_paths: PathLike) -> tuple[str, ...]:
    return tuple(Path(p).read_text(encoding="utf-8") for p in (path, *extra_paths))


@dataclass
class Resources:
    """Every resource cache the game uses."""

    textures: ResourceManager[pygame.Surface] = field(
        default_factory=lambda: ResourceManager(_load_texture)
    )
    fonts: ResourceManager[FontFace] = field(default_factory=lambda: ResourceManager(_open_font))
    sounds: ResourceManager[Any] = field(default_factory=lambda: ResourceManager(_load_sound))
    music: ResourceManager[Path] = field(default_factory=lambda: ResourceManager(_open_music))
    shaders: ResourceManager[tuple[str, ...]] = field(
        default_factory=lambda: ResourceManager(_load_shader)
    )