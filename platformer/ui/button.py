"""Button showing a background and foreground per interaction state."""

from __future__ import annotations

from platformer.ui.element import Element
from platformer.ui.interactive_element import InteractionState, InteractiveElement


def _variant(
    variants: dict[InteractionState, Element], state: InteractionState
) -> Element | None:
    return variants.get(state, variants.get(InteractionState.NORMAL))


class Button(InteractiveElement):
    """Shows the variant for the current state, falling back to the normal one."""

    def __init__(self) -> None:
        super().__init__()
        self._backgrounds: dict[InteractionState, Element] = {}
        self._foregrounds: dict[InteractionState, Element] = {}

    def set_background(self, state: InteractionState, element: Element) -> None:
        self._backgrounds[state] = self.add_child(element)
        self._refresh_visibility()

    def set_foreground(self, state: InteractionState, element: Element) -> None:
        self._foregrounds[state] = self.add_child(element)
        self._refresh_visibility()

    def on_state_changed(self) -> None:
        self._refresh_visibility()

    def _refresh_visibility(self) -> None:
        for variants in (self._backgrounds, self._foregrounds):
            active = _variant(variants, self.state)
            for element in variants.values():
                element.is_visible = element is active