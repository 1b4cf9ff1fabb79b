# platformer

A small 2D platformer engine built on pygame. It provides:

- `platformer.ecs`: an entity-component registry (`Registry`, `ComponentPool`)
  backed by sparse sets. `Registry.for_each(*types)` yields
  `(entity, component, ...)` tuples for entities that hold every given type.
- `platformer.components`: plain data components: `Transform`,
  `PreviousTransform`, `Velocity`, `Sprite`, `Facing`, `AnimationData`,
  `AnimationSet`, `AnimationState` and `Animation`.
- `platformer.systems`: `MovementSystem` and `AnimationSystem`, which run
  over the registry each fixed step, and `RenderSystem`, which draws sprites
  at positions interpolated between the previous and current step.
- `platformer.data_loader`: `DataLoader`, which builds entities from JSON
  component descriptions, prefab files and scene files.
- `platformer.resources`: `ResourceManager`, a named cache that loads through
  a loader function, and `Resources`, which holds the caches for textures,
  fonts, sounds, music and shader sources.
- `platformer.state_machine`: a stack of game `State`s in a `StateMachine`
  whose push, pop and clear take effect after the next update.
- `platformer.virtual_screen`: `VirtualScreen`, a fixed 640x360 render
  surface that is scaled by whole numbers and centred in the window, with
  window mouse coordinates mapped back into it.
- `platformer.ui`: a retained-mode UI toolkit. `Element` places children by
  anchor, pivot and offset; `Animation` tweens a value (linear, sine or
  ease-out; once, looping or ping-pong); `Label`, `Image`, `Button`,
  `Checkbox`, `Slider` and `TextField` are the widgets; `Root` routes mouse
  and keyboard input (hover, press, drag, arrow-key navigation, Enter to
  confirm, Escape to leave an activated slider or text field).

## Installation

```
pip install .
```

## Running

```
platformer
```

This opens a borderless desktop-sized window and runs the game loop at a
fixed 60 updates per second, rendering with interpolation between steps.
Frames longer than a quarter of a second are capped. Press Escape or close
the window to quit.

## Using the registry

```python
from platformer.ecs import Registry
from platformer.components import Transform, PreviousTransform, Velocity
from platformer.systems import MovementSystem

registry = Registry()
player = registry.create_entity()
registry.add(player, Transform(x=10.0, y=20.0))
registry.add(player, PreviousTransform(x=10.0, y=20.0))
registry.add(player, Velocity(x=60.0, y=0.0))

MovementSystem(registry).update(1 / 60)
print(registry.get(Transform, player))
```

Components are stored under their own type, so `registry.add` takes only the
entity and the component. Adding a second component of the same type to an
entity raises `ValueError`; getting or removing a missing one raises
`KeyError`.

## Loading scenes

A scene file lists entities. Each entity names a prefab file, and its other
keys are applied to the prefab as a JSON merge patch:

```json
{
  "entities": [
    {"prefab": "data/player.json", "Transform": {"x": 100, "y": 200}}
  ]
}
```

```python
from platformer.data_loader import DataLoader

entities = DataLoader().load_scene(registry, "data/scene.json")
```

Prefab paths are opened as written, relative to the current directory.
The component names understood are `Transform`, `Velocity`, `Sprite`,
`AnimationSet`, `AnimationState` and `Facing`. After a scene is loaded,
entities with both `Velocity` and `Transform` are given a `PreviousTransform`,
and entities with an `AnimationSet` are given an `Animation`. An unknown
component name, a missing or mistyped field, invalid JSON, or a file that
cannot be opened raises `DataLoadError`.

## What it does not do

The `platformer` command shows only an opening state that clears the screen
to a dark backdrop; there are no levels, player controls, collisions or menus
wired into it. The systems and UI widgets are building blocks to be used from
your own `State` subclasses.

## Running the tests

```
pip install .[test]
pytest
```