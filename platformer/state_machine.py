"""Stack of game states with deferred push, pop and clear."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class State(ABC):
    """One screen or mode of the game, owned by a StateMachine."""

    def __init__(
        self,
        context: Any,
        renders_state_below: bool = False,
        updates_state_below: bool = False,
    ) -> None:
        self.context = context
        self._renders_state_below = renders_state_below
        self._updates_state_below = updates_state_below

    @property
    def renders_state_below(self) -> bool:
        return self._renders_state_below

    @property
    def updates_state_below(self) -> bool:
        return self._updates_state_below

    @abstractmethod
    def handle_event(self, event: Any) -> None: ...

    @abstractmethod
    def update(self, delta_time: float) -> None: ...

    @abstractmethod
    def render(self, interpolation_factor: float) -> None: ...


class _ActionType(Enum):
    PUSH = auto()
    POP = auto()
    CLEAR = auto()


@dataclass
class _PendingAction:
    type: _ActionType
    state: State | None = None


class StateMachine:
    """Runs the top of a state stack; changes take effect after each update."""

    def __init__(self) -> None:
        self._stack: list[State] = []
        self._pending: list[_PendingAction] = []

    def push(self, state: State) -> None:
        self._pending.append(_PendingAction(_ActionType.PUSH, state))

    def pop(self) -> None:
        self._pending.append(_PendingAction(_ActionType.POP))

    def clear(self) -> None:
        self._pending.append(_PendingAction(_ActionType.CLEAR))

    def handle_event(self, event: Any) -> None:
        if self._stack:
            self._stack[-1].handle_event(event)

    def update(self, delta_time: float) -> None:
        """Update from the top down while states let updates through."""
        for state in reversed(self._stack):
            state.update(delta_time)
            if not state.updates_state_below:
                break
        self._apply_pending_actions()

    def render(self, interpolation_factor: float) -> None:
        """Render the visible states bottom-up so higher states draw on top."""
        if not self._stack:
            return
        bottom_visible = len(self._stack) - 1
        while bottom_visible > 0 and self._stack[bottom_visible].renders_state_below:
            bottom_visible -= 1
        for state in self._stack[bottom_visible:]:
            state.render(interpolation_factor)

    def is_empty(self) -> bool:
        return not self._stack

    def _apply_pending_actions(self) -> None:
        for action in self._pending:
            if action.type is _ActionType.PUSH and action.state is not None:
                self._stack.append(action.state)
            elif action.type is _ActionType.POP:
                if self._stack:
                    self._stack.pop()
            elif action.type is _ActionType.CLEAR:
                self._stack.clear()
        self._pending.clear()