"""UI elements that can be highlighted, pressed, activated and dragged."""

from __future__ import annotations

from enum import Enum, auto
from typing import Callable

from pygame.math import Vector2

from platformer.ui.element import Element


class InteractionState(Enum):
    NORMAL = auto()
    HIGHLIGHTED = auto()
    PRESSED = auto()


class InteractiveElement(Element):
    """Element with a pointer/selection state and an optional activation mode."""

    def __init__(self) -> None:
        super().__init__()
        self._state = InteractionState.NORMAL
        self._is_activated = False
        self.on_pressed: Callable[[], None] | None = None

    @property
    def is_interactive(self) -> bool:
        return True

    @property
    def requires_activation(self) -> bool:
        """Whether a completed press puts the element into an activated mode."""
        return False

    @property
    def is_activated(self) -> bool:
        return self._is_activated

    @property
    def state(self) -> InteractionState:
        return self._state

    def _set_state(self, new_state: InteractionState) -> None:
        if new_state is not self._state:
            self._state = new_state
            self.on_state_changed()

    def set_highlighted(self, highlighted: bool) -> None:
        """Highlight or un-highlight; ignored while pressed."""
        if self._state is InteractionState.PRESSED:
            return
        self._set_state(InteractionState.HIGHLIGHTED if highlighted else InteractionState.NORMAL)

    def press(self) -> None:
        self._set_state(InteractionState.PRESSED)

    def release(self) -> None:
        """End a press, returning to highlighted and firing on_pressed."""
        if self._state is not InteractionState.PRESSED:
            return
        self._set_state(InteractionState.HIGHLIGHTED)
        if self.on_pressed is not None:
            self.on_pressed()

    def activate(self) -> None:
        if not self._is_activated:
            self._is_activated = True
            self.on_activated()

    def deactivate(self) -> None:
        if self._is_activated:
            self._is_activated = False
            self.on_deactivated()

    def on_drag_start(self, mouse_position: Vector2) -> None:
        """Called when a press begins a drag on this element."""

    def on_drag_move(self, mouse_position: Vector2) -> None:
        """Called as the pointer moves during a drag."""

    def on_drag_end(self) -> None:
        """Called when the drag's button is released."""

    def on_state_changed(self) -> None:
        """Called after the interaction state changes."""

    def on_activated(self) -> None:
        """Called when the element enters activated mode."""

    def on_deactivated(self) -> None:
        """Called when the element leaves activated mode."""