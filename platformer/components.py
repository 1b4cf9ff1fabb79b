"""Plain data components attached to entities."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Transform:
    x: float = 0.0
    y: float = 0.0


@dataclass
class PreviousTransform:
    """Position at the previous fixed step, used for render interpolation."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Velocity:
    x: float = 0.0
    y: float = 0.0


@dataclass
class Sprite:
    texture_name: str = ""


@dataclass
class AnimationData:
    """A sprite-sheet animation laid out as equal frames in one row."""

    texture_name: str = ""
    frame_count: int = 1
    frame_duration: float = 0.1
    is_looping: bool = True


@dataclass
class AnimationSet:
    """Animations available to an entity, keyed by state name."""

    animations: dict[str, AnimationData] = field(default_factory=dict)


@dataclass
class AnimationState:
    """Name of the animation the entity wants to play."""

    current: str = ""


@dataclass
class Facing:
    is_looking_right: bool = True
    is_texture_right: bool = True


@dataclass
class Animation:
    """Playback progress of the currently playing animation."""

    data: AnimationData = field(default_factory=AnimationData)
    playing_state: str = ""
    current_frame: int = 0
    elapsed_time: float = 0.0