"""Game window, main loop with a fixed update step, and the opening state."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Sequence

import pygame

from platformer.resources import Resources
from platformer.state_machine import State, StateMachine
from platformer.virtual_screen import VirtualScreen

WINDOW_TITLE = "2D Platformer"
_MOUSE_EVENTS = (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP)


@dataclass
class Context:
    """Shared services handed to every state."""

    virtual_screen: VirtualScreen
    state_machine: StateMachine
    resources: Resources


class TestState(State):
    """Opening scene that clears the screen to a dark backdrop."""

    __test__ = False
    BACKGROUND = (30, 30, 46)

    def __init__(self, context: Context) -> None:
        super().__init__(context)
        self.elapsed_time = 0.0
        self.events_seen = 0

    def handle_event(self, event: Any) -> None:
        """Count the events delivered to this state."""
        self.events_seen += 1

    def update(self, delta_time: float) -> None:
        """Accumulate the simulated time this state has been active."""
        self.elapsed_time += delta_time

    def render(self, interpolation_factor: float) -> None:
        self.context.virtual_screen.render_target.fill(self.BACKGROUND)


class Application:
    """Owns the window and runs states at a fixed simulation rate."""

    FIXED_DELTA_TIME = 1.0 / 60.0
    MAX_FRAME_TIME = 0.25

    def __init__(self) -> None:
        pygame.display.init()
        pygame.font.init()
        self.virtual_screen = VirtualScreen()
        self.state_machine = StateMachine()
        self.resources = Resources()
        self.context = Context(self.virtual_screen, self.state_machine, self.resources)
        self._window = self._create_window()
        self._is_open = True
        self.state_machine.push(TestState(self.context))

    @property
    def is_open(self) -> bool:
        return self._is_open

    def close(self) -> None:
        self._is_open = False

    @staticmethod
    def _create_window() -> pygame.Surface:
        sizes = pygame.display.get_desktop_sizes()
        size = sizes[0] if sizes else (VirtualScreen.WIDTH, VirtualScreen.HEIGHT)
        pygame.display.set_caption(WINDOW_TITLE)
        try:
            return pygame.display.set_mode(size, pygame.NOFRAME, vsync=1)
        except pygame.error:
            return pygame.display.set_mode(size, pygame.NOFRAME)

    def run(self) -> None:
        """Loop until the window closes: events, fixed updates, interpolated render."""
        previous = time.perf_counter()
        remainder = 0.0

        while self._is_open:
            now = time.perf_counter()
            frame_time = min(now - previous, self.MAX_FRAME_TIME)
            previous = now
            remainder += frame_time

            self._process_events()

            while remainder >= self.FIXED_DELTA_TIME:
                self._update(self.FIXED_DELTA_TIME)
                remainder -= self.FIXED_DELTA_TIME

            self._render(remainder / self.FIXED_DELTA_TIME)

    def _process_events(self) -> None:
        for event in pygame.event.get():
            if event.type in _MOUSE_EVENTS:
                self._update_mouse(event.pos)
            if event.type == pygame.QUIT:
                self.close()
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.close()
            self.state_machine.handle_event(event)

    def _update_mouse(self, position: Sequence[float]) -> None:
        try:
            self.virtual_screen.update_mouse_position(position, self._window.get_size())
        except ValueError:
            # A window smaller than the virtual screen has no pixel mapping.
            pass

    def _update(self, delta_time: float) -> None:
        self.state_machine.update(delta_time)

    def _render(self, interpolation_factor: float) -> None:
        self.virtual_screen.clear()
        self.state_machine.render(interpolation_factor)
        self.virtual_screen.display()

        self._window.fill((0, 0, 0))
        self.virtual_screen.render_to_window(self._window)
        pygame.display.flip()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game and run it until the window closes."""
    application = Application()
    try:
        application.run()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())