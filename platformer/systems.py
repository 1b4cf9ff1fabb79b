"""Per-step systems that animate, move and draw entities."""

from __future__ import annotations

import dataclasses
from typing import Any

import pygame

from platformer.components import (
    Animation,
    AnimationSet,
    AnimationState,
    Facing,
    PreviousTransform,
    Sprite,
    Transform,
    Velocity,
)
from platformer.ecs import Registry
from platformer.resources import Resources


class AnimationSystem:
    """Switches animations on state change and advances their frames."""

    def __init__(self, registry: Registry) -> None:
        self.registry = registry

    def update(self, delta_time: float) -> None:
        for _entity, animation, animation_set, state, sprite in self.registry.for_each(
            Animation, AnimationSet, AnimationState, Sprite
        ):
            if state.current != animation.playing_state:
                try:
                    data = animation_set.animations[state.current]
                except KeyError:
                    raise KeyError(
                        f"Animation state not found in set: {state.current!r}"
                    ) from None
                animation.data = dataclasses.replace(data)
                animation.playing_state = state.current
                animation.current_frame = 0
                animation.elapsed_time = 0.0
                sprite.texture_name = animation.data.texture_name

            animation.elapsed_time += delta_time
            if animation.elapsed_time < animation.data.frame_duration:
                continue

            animation.elapsed_time -= animation.data.frame_duration
            animation.current_frame += 1
            if animation.current_frame >= animation.data.frame_count:
                if animation.data.is_looping:
                    animation.current_frame = 0
                else:
                    animation.current_frame = animation.data.frame_count - 1


class MovementSystem:
    """Integrates velocity into position and keeps facing in step."""

    def __init__(self, registry: Registry) -> None:
        self.registry = registry

    def update(self, delta_time: float) -> None:
        for entity, transform, previous, velocity in self.registry.for_each(
            Transform, PreviousTransform, Velocity
        ):
            previous.x = transform.x
            previous.y = transform.y
            transform.x += velocity.x * delta_time
            transform.y += velocity.y * delta_time

            if velocity.x != 0.0 and self.registry.has(Facing, entity):
                self.registry.get(Facing, entity).is_looking_right = velocity.x > 0.0


class RenderSystem:
    """Draws sprites centred on their interpolated positions.

    The render target is anything with a Surface-style ``blit(source, dest)``.
    """

    def __init__(self, registry: Registry, resources: Resources, render_target: Any) -> None:
        self.registry = registry
        self.resources = resources
        self.render_target = render_target

    def render(self, interpolation_factor: float) -> None:
        for entity, transform, sprite in self.registry.for_each(Transform, Sprite):
            render_x, render_y = transform.x, transform.y
            if self.registry.has(PreviousTransform, entity):
                previous = self.registry.get(PreviousTransform, entity)
                render_x = previous.x + (transform.x - previous.x) * interpolation_factor
                render_y = previous.y + (transform.y - previous.y) * interpolation_factor

            texture = self.resources.textures.get(sprite.texture_name)
            texture_width, frame_height = texture.get_size()
            frame_width = texture_width
            image = texture

            if self.registry.has(Animation, entity):
                animation = self.registry.get(Animation, entity)
                frame_width = texture_width // animation.data.frame_count
                image = pygame.Surface((frame_width, frame_height), pygame.SRCALPHA)
                image.blit(
                    texture,
                    (0, 0),
                    pygame.Rect(animation.current_frame * frame_width, 0, frame_width, frame_height),
                )

            if self.registry.has(Facing, entity):
                facing = self.registry.get(Facing, entity)
                if facing.is_looking_right != facing.is_texture_right:
                    image = pygame.transform.flip(image, True, False)

            self.render_target.blit(
                image, (render_x - frame_width / 2.0, render_y - frame_height / 2.0)
            )