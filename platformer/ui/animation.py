"""Time-based tweening of a single float value."""

from __future__ import annotations

import math
from enum import Enum, auto
from typing import Callable


class AnimationCurve(Enum):
    LINEAR = auto()
    SINE = auto()
    EASE_OUT = auto()


class AnimationLoop(Enum):
    ONCE = auto()
    LOOP = auto()
    PING_PONG = auto()


class Animation:
    """Drives a value from one number to another over a duration."""

    def __init__(
        self,
        from_value: float,
        to_value: float,
        duration: float,
        curve: AnimationCurve = AnimationCurve.LINEAR,
        loop: AnimationLoop = AnimationLoop.ONCE,
        setter: Callable[[float], None] | None = None,
    ) -> None:
        self.from_value = from_value
        self.to_value = to_value
        self.duration = duration
        self.curve = curve
        self.loop = loop
        self.setter = setter
        self.on_finished: Callable[[], None] | None = None
        self._elapsed = 0.0
        self._finished = False

    @property
    def is_finished(self) -> bool:
        return self._finished

    def update(self, delta_time: float) -> None:
        """Advance the animation and pass the new value to the setter."""
        if self._finished:
            return

        self._elapsed += delta_time
        normalized = self._elapsed / self.duration if self.duration > 0.0 else 1.0

        if self.loop is AnimationLoop.ONCE:
            if normalized >= 1.0:
                normalized = 1.0
                self._finished = True
            effective = normalized
        elif self.loop is AnimationLoop.LOOP:
            effective = normalized - math.floor(normalized)
        else:
            cycle = normalized - math.floor(normalized / 2.0) * 2.0
            effective = cycle if cycle <= 1.0 else 2.0 - cycle

        value = self.from_value + (self.to_value - self.from_value) * self._apply_curve(effective)

        if self.setter is not None:
            self.setter(value)

        if self._finished and self.on_finished is not None:
            callback = self.on_finished
            self.on_finished = None
            callback()

    def _apply_curve(self, t: float) -> float:
        if self.curve is AnimationCurve.SINE:
            return 0.5 - 0.5 * math.cos(t * math.pi)
        if self.curve is AnimationCurve.EASE_OUT:
            return 1.0 - (1.0 - t) * (1.0 - t)
        return t