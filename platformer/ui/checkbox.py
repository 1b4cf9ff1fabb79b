"""Toggle element with checked and unchecked views."""

from __future__ import annotations

from typing import Callable

from platformer.ui.element import Element
from platformer.ui.interactive_element import InteractionState, InteractiveElement


class Checkbox(InteractiveElement):
    """Flips its checked flag each time it is pressed and released."""

    def __init__(self) -> None:
        super().__init__()
        self._backgrounds: dict[InteractionState, Element] = {}
        self._checked_view: Element | None = None
        self._unchecked_view: Element | None = None
        self._is_checked = False
        self.on_checked_changed: Callable[[bool], None] | None = None
        self.on_pressed = self._toggle

    @property
    def is_checked(self) -> bool:
        return self._is_checked

    @is_checked.setter
    def is_checked(self, checked: bool) -> None:
        if self._is_checked == checked:
            return
        self._is_checked = checked
        self._refresh_visibility()
        if self.on_checked_changed is not None:
            self.on_checked_changed(self._is_checked)

    def set_background(self, state: InteractionState, element: Element) -> None:
        self._backgrounds[state] = self.add_child(element)
        self._refresh_visibility()

    def set_checked_view(self, element: Element) -> None:
        self._checked_view = self.add_child(element)
        self._refresh_visibility()

    def set_unchecked_view(self, element: Element) -> None:
        self._unchecked_view = self.add_child(element)
        self._refresh_visibility()

    def on_state_changed(self) -> None:
        self._refresh_visibility()

    def _toggle(self) -> None:
        self.is_checked = not self._is_checked

    def _refresh_visibility(self) -> None:
        active = self._backgrounds.get(
            self.state, self._backgrounds.get(InteractionState.NORMAL)
        )
        for background in self._backgrounds.values():
            background.is_visible = background is active
        if self._checked_view is not None:
            self._checked_view.is_visible = self._is_checked
        if self._unchecked_view is not None:
            self._unchecked_view.is_visible = not self._is_checked