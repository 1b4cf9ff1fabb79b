from pygame.math import Vector2

from platformer.ui.animation import Animation
from platformer.ui.element import Element


class _Recorder(Element):
    def __init__(self, log, name):
        super().__init__()
        self.log = log
        self.name = name

    def draw_self(self, target, absolute_position):
        self.log.append((self.name, (absolute_position.x, absolute_position.y)))

    def update(self, delta_time):
        self.log.append((self.name, delta_time))
        super().update(delta_time)

    def handle_event(self, event):
        self.log.append((self.name, event))
        super().handle_event(event)


def test_compute_position_combines_anchor_offset_and_pivot():
    element = Element()
    element.anchor = Vector2(0.5, 0.5)
    element.pivot = Vector2(0.5, 0.5)
    element.offset = Vector2(2, 3)
    element.size = Vector2(10, 10)
    assert element.compute_position((0, 0), (100, 50)) == Vector2(47, 23)


def test_plain_element_is_not_interactive():
    assert Element().is_interactive is False


def test_draw_positions_children_relative_to_parent():
    log = []
    root = Element()
    parent = root.add_child(_Recorder(log, "parent"))
    parent.offset = Vector2(5, 7)
    parent.size = Vector2(20, 20)
    child = parent.add_child(_Recorder(log, "child"))
    root.draw(None, (0, 0), (100, 100))
    assert root.absolute_position == Vector2(0, 0)
    assert parent.absolute_position == Vector2(5, 7)
    assert child.absolute_position == parent.absolute_position
    assert log == [("parent", (5.0, 7.0)), ("child", (5.0, 7.0))]


def test_child_anchor_uses_parent_size():
    parent = Element()
    parent.size = Vector2(40, 30)
    child = parent.add_child(Element())
    child.anchor = Vector2(1, 1)
    parent.draw(None, (0, 0), (100, 100))
    assert child.absolute_position == parent.size


def test_hidden_element_draws_nothing():
    log = []
    root = Element()
    parent = root.add_child(_Recorder(log, "parent"))
    parent.add_child(_Recorder(log, "child"))
    parent.is_visible = False
    parent.offset = Vector2(3, 3)
    root.draw(None, (0, 0), (10, 10))
    assert log == []
    assert parent.absolute_position == Vector2()


def test_add_child_back_places_child_first():
    parent = Element()
    first = parent.add_child(Element())
    back = parent.add_child_back(Element())
    assert parent.children == (back, first)


def test_finished_animations_are_removed():
    values = []
    element = Element()
    element.add_animation(Animation(0.0, 1.0, 0.5, setter=values.append))
    element.update(1.0)
    element.update(1.0)
    assert values == [1.0]


def test_clear_animations_stops_them():
    values = []
    element = Element()
    element.add_animation(Animation(0.0, 1.0, 2.0, setter=values.append))
    element.clear_animations()
    element.update(1.0)
    assert values == []


def test_update_and_events_reach_children():
    log = []
    parent = Element()
    parent.add_child(_Recorder(log, "a"))
    parent.add_child(_Recorder(log, "b"))
    parent.update(0.25)
    parent.handle_event("click")
    assert log == [("a", 0.25), ("b", 0.25), ("a", "click"), ("b", "click")]