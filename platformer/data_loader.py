"""Builds entities from JSON component descriptions, prefabs and scenes."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from typing import Any, Callable, Union

from platformer.components import (
    Animation,
    AnimationData,
    AnimationSet,
    AnimationState,
    Facing,
    PreviousTransform,
    Sprite,
    Transform,
    Velocity,
)
from platformer.ecs import Entity, Registry

PathLike = Union[str, "os.PathLike[str]"]
ComponentLoader = Callable[[Registry, Entity, Any], None]


class DataLoadError(Exception):
    """Raised when entity data cannot be read or understood."""


def _field(data: Any, name: str) -> Any:
    if not isinstance(data, Mapping):
        raise DataLoadError(f"Expected an object holding {name!r}, got {type(data).__name__}")
    try:
        return data[name]
    except KeyError:
        raise DataLoadError(f"Missing field: {name}") from None


def _number(data: Any, name: str) -> float:
    value = _field(data, name)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DataLoadError(f"Field {name!r} must be a number")
    return float(value)


def _integer(data: Any, name: str) -> int:
    value = _field(data, name)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DataLoadError(f"Field {name!r} must be a number")
    return int(value)


def _string(data: Any, name: str) -> str:
    value = _field(data, name)
    if not isinstance(value, str):
        raise DataLoadError(f"Field {name!r} must be a string")
    return value


def _boolean(data: Any, name: str) -> bool:
    value = _field(data, name)
    if not isinstance(value, bool):
        raise DataLoadError(f"Field {name!r} must be a boolean")
    return value


def _load_transform(registry: Registry, entity: Entity, data: Any) -> None:
    registry.add(entity, Transform(_number(data, "x"), _number(data, "y")))


def _load_velocity(registry: Registry, entity: Entity, data: Any) -> None:
    registry.add(entity, Velocity(_number(data, "x"), _number(data, "y")))


def _load_sprite(registry: Registry, entity: Entity, data: Any) -> None:
    registry.add(entity, Sprite(_string(data, "textureName")))


def _load_animation_set(registry: Registry, entity: Entity, data: Any) -> None:
    if not isinstance(data, Mapping):
        raise DataLoadError("AnimationSet must be an object")
    animations = {
        state_name: AnimationData(
            texture_name=_string(animation, "textureName"),
            frame_count=_integer(animation, "frameCount"),
            frame_duration=_number(animation, "frameDuration"),
            is_looping=_boolean(animation, "isLooping"),
        )
        for state_name, animation in data.items()
    }
    registry.add(entity, AnimationSet(animations))


def _load_animation_state(registry: Registry, entity: Entity, data: Any) -> None:
    registry.add(entity, AnimationState(_string(data, "current")))


def _load_facing(registry: Registry, entity: Entity, data: Any) -> None:
    registry.add(
        entity,
        Facing(
            is_looking_right=_boolean(data, "isLookingRight"),
            is_texture_right=_boolean(data, "isTextureRight"),
        ),
    )


def _merge_patch(target: Any, patch: Any) -> Any:
    """Apply a JSON merge patch (RFC 7396) and return the result."""
    if not isinstance(patch, Mapping):
        return patch
    result = dict(target) if isinstance(target, Mapping) else {}
    for key, value in patch.items():
        if value is None:
            result.pop(key, None)
        else:
            result[key] = _merge_patch(result.get(key), value)
    return result


def _read_json(path: PathLike, kind: str) -> Any:
    try:
        handle = open(path, encoding="utf-8")
    except OSError as exc:
        raise DataLoadError(f"Could not open {kind} file: {os.fspath(path)}") from exc
    with handle:
        try:
            return json.load(handle)
        except json.JSONDecodeError as exc:
            raise DataLoadError(f"Invalid JSON in {os.fspath(path)}: {exc}") from exc


class DataLoader:
    """Turns JSON component descriptions into registry entities."""

    def __init__(self) -> None:
        self._loaders: dict[str, ComponentLoader] = {
            "Transform": _load_transform,
            "Velocity": _load_velocity,
            "Sprite": _load_sprite,
            "AnimationSet": _load_animation_set,
            "AnimationState": _load_animation_state,
            "Facing": _load_facing,
        }

    def load_entity(self, registry: Registry, entity_json: Mapping[str, Any]) -> Entity:
        """Create an entity and add each named component to it."""
        if not isinstance(entity_json, Mapping):
            raise DataLoadError("Entity data must be an object")
        entity = registry.create_entity()
        for component_name, component_data in entity_json.items():
            loader = self._loaders.get(component_name)
            if loader is None:
                raise DataLoadError(f"Unknown component in data: {component_name}")
            loader(registry, entity, component_data)
        return entity

    def load_entity_from_file(self, registry: Registry, path: PathLike) -> Entity:
        return self.load_entity(registry, _read_json(path, "data"))

    def load_scene(self, registry: Registry, scene_path: PathLike) -> list[Entity]:
        """Load every prefab a scene lists, applying its overrides."""
        scene = _read_json(scene_path, "scene")
        entries = _field(scene, "entities")
        if not isinstance(entries, list):
            raise DataLoadError("Scene 'entities' must be a list")

        created: list[Entity] = []
        for entry in entries:
            if not isinstance(entry, Mapping):
                raise DataLoadError("Scene entity must be an object")
            overrides = dict(entry)
            prefab_path = _string(overrides, "prefab")
            del overrides["prefab"]
            merged = _merge_patch(_read_json(prefab_path, "prefab"), overrides)
            created.append(self.load_entity(registry, merged))

        self._add_implied_components(registry, created)
        return created

    @staticmethod
    def _add_implied_components(registry: Registry, entities: list[Entity]) -> None:
        for entity in entities:
            if (
                registry.has(Velocity, entity)
                and registry.has(Transform, entity)
                and not registry.has(PreviousTransform, entity)
            ):
                transform = registry.get(Transform, entity)
                registry.add(entity, PreviousTransform(transform.x, transform.y))

            if registry.has(AnimationSet, entity) and not registry.has(Animation, entity):
                registry.add(entity, Animation())