import json

import pytest

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
from platformer.data_loader import DataLoader, DataLoadError
from platformer.ecs import Registry

HERO = {
    "Transform": {"x": 10, "y": 20.5},
    "Velocity": {"x": 0, "y": 0},
    "Sprite": {"textureName": "hero_idle"},
    "AnimationSet": {
        "idle": {
            "textureName": "hero_idle",
            "frameCount": 4,
            "frameDuration": 0.2,
            "isLooping": True,
        }
    },
    "AnimationState": {"current": "idle"},
    "Facing": {"isLookingRight": False, "isTextureRight": True},
}


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_entity_builds_all_components():
    registry = Registry()
    entity = DataLoader().load_entity(registry, HERO)
    assert registry.get(Transform, entity) == Transform(10.0, 20.5)
    assert registry.get(Velocity, entity) == Velocity(0.0, 0.0)
    assert registry.get(Sprite, entity) == Sprite("hero_idle")
    assert registry.get(AnimationSet, entity).animations == {
        "idle": AnimationData("hero_idle", 4, 0.2, True)
    }
    assert registry.get(AnimationState, entity) == AnimationState("idle")
    assert registry.get(Facing, entity) == Facing(False, True)


def test_load_entity_adds_no_implied_components():
    registry = Registry()
    entity = DataLoader().load_entity(registry, HERO)
    assert not registry.has(PreviousTransform, entity)
    assert not registry.has(Animation, entity)


def test_unknown_component_raises():
    with pytest.raises(DataLoadError, match="Unknown component in data: Gravity"):
        DataLoader().load_entity(Registry(), {"Gravity": {}})


def test_missing_field_raises():
    with pytest.raises(DataLoadError):
        DataLoader().load_entity(Registry(), {"Transform": {"x": 1}})


def test_wrong_field_type_raises():
    with pytest.raises(DataLoadError):
        DataLoader().load_entity(Registry(), {"Sprite": {"textureName": 5}})


def test_load_entity_from_file(tmp_path):
    path = write_json(tmp_path / "hero.json", HERO)
    registry = Registry()
    entity = DataLoader().load_entity_from_file(registry, str(path))
    assert registry.get(Sprite, entity) == Sprite("hero_idle")


def test_load_entity_from_missing_file_raises(tmp_path):
    with pytest.raises(DataLoadError, match="Could not open data file"):
        DataLoader().load_entity_from_file(Registry(), str(tmp_path / "absent.json"))


def test_load_entity_from_invalid_json_raises(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(DataLoadError):
        DataLoader().load_entity_from_file(Registry(), str(path))


def test_load_scene_applies_overrides_and_implied_components(tmp_path):
    prefab = write_json(tmp_path / "hero.json", HERO)
    scene = write_json(
        tmp_path / "scene.json",
        {
            "entities": [
                {"prefab": str(prefab), "Transform": {"x": 100}},
                {"prefab": str(prefab)},
            ]
        },
    )
    registry = Registry()
    first, second = DataLoader().load_scene(registry, str(scene))

    assert registry.get(Transform, first) == Transform(100.0, 20.5)
    assert registry.get(PreviousTransform, first) == PreviousTransform(100.0, 20.5)
    assert registry.get(Transform, second) == Transform(10.0, 20.5)
    assert registry.get(Animation, first) == Animation()
    assert registry.has(Animation, second)


def test_load_scene_null_override_removes_component(tmp_path):
    prefab = write_json(tmp_path / "hero.json", HERO)
    scene = write_json(
        tmp_path / "scene.json",
        {"entities": [{"prefab": str(prefab), "Velocity": None, "AnimationSet": None}]},
    )
    registry = Registry()
    (entity,) = DataLoader().load_scene(registry, str(scene))
    assert not registry.has(Velocity, entity)
    assert not registry.has(PreviousTransform, entity)
    assert not registry.has(Animation, entity)
    assert registry.has(Transform, entity)


def test_load_scene_missing_scene_file_raises(tmp_path):
    with pytest.raises(DataLoadError, match="Could not open scene file"):
        DataLoader().load_scene(Registry(), str(tmp_path / "nope.json"))


def test_load_scene_missing_prefab_file_raises(tmp_path):
    scene = write_json(
        tmp_path / "scene.json", {"entities": [{"prefab": str(tmp_path / "gone.json")}]}
    )
    with pytest.raises(DataLoadError, match="Could not open prefab file"):
        DataLoader().load_scene(Registry(), str(scene))


def test_load_scene_entry_without_prefab_raises(tmp_path):
    scene = write_json(tmp_path / "scene.json", {"entities": [{"Transform": {"x": 1, "y": 2}}]})
    with pytest.raises(DataLoadError):
        DataLoader().load_scene(Registry(), str(scene))


def test_load_scene_without_entities_raises(tmp_path):
    scene = write_json(tmp_path / "scene.json", {"things": []})
    with pytest.raises(DataLoadError):
        DataLoader().load_scene(Registry(), str(scene))


def test_load_scene_empty_returns_no_entities(tmp_path):
    scene = write_json(tmp_path / "scene.json", {"entities": []})
    assert DataLoader().load_scene(Registry(), str(scene)) == []