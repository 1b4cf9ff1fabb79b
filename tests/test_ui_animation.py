import pytest

from platformer.ui.animation import Animation, AnimationCurve, AnimationLoop


def value_after(elapsed, curve=AnimationCurve.LINEAR, loop=AnimationLoop.ONCE,
                start=0.0, end=10.0, duration=1.0):
    values = []
    animation = Animation(start, end, duration, curve, loop, values.append)
    animation.update(elapsed)
    return values[-1]


def test_once_reaches_target_and_finishes():
    values = []
    finished = []
    animation = Animation(2.0, 8.0, 1.0, AnimationCurve.LINEAR, AnimationLoop.ONCE, values.append)
    animation.on_finished = lambda: finished.append(True)
    animation.update(0.5)
    assert not animation.is_finished
    animation.update(0.75)
    assert animation.is_finished
    assert values[-1] == 8.0
    assert finished == [True]


def test_finished_animation_ignores_updates():
    values = []
    finished = []
    animation = Animation(0.0, 1.0, 0.5, AnimationCurve.LINEAR, AnimationLoop.ONCE, values.append)
    animation.on_finished = lambda: finished.append(True)
    animation.update(1.0)
    animation.update(1.0)
    assert len(values) == 1
    assert finished == [True]


def test_zero_duration_finishes_immediately():
    values = []
    animation = Animation(3.0, 7.0, 0.0, AnimationCurve.LINEAR, AnimationLoop.ONCE, values.append)
    animation.update(0.0)
    assert animation.is_finished
    assert values == [7.0]


def test_works_without_setter():
    animation = Animation(0.0, 1.0, 1.0, AnimationCurve.SINE, AnimationLoop.ONCE, None)
    animation.update(2.0)
    assert animation.is_finished


def test_loop_wraps_around_and_never_finishes():
    animation = Animation(0.0, 10.0, 1.0, AnimationCurve.LINEAR, AnimationLoop.LOOP, lambda v: None)
    animation.update(5.0)
    assert not animation.is_finished
    assert value_after(1.25, loop=AnimationLoop.LOOP) == pytest.approx(value_after(0.25))


def test_ping_pong_runs_backwards_in_second_half():
    assert value_after(1.25, loop=AnimationLoop.PING_PONG) == pytest.approx(value_after(0.75))
    assert value_after(2.25, loop=AnimationLoop.PING_PONG) == pytest.approx(value_after(0.25))


def test_sine_matches_linear_at_ends_and_middle():
    for elapsed in (0.0, 0.5):
        sine = value_after(elapsed, curve=AnimationCurve.SINE, loop=AnimationLoop.LOOP)
        linear = value_after(elapsed, loop=AnimationLoop.LOOP)
        assert sine == pytest.approx(linear)


def test_sine_is_slower_than_linear_at_start():
    assert value_after(0.25, curve=AnimationCurve.SINE) < value_after(0.25)


def test_ease_out_leads_linear():
    for elapsed in (0.25, 0.5, 0.75):
        assert value_after(elapsed, curve=AnimationCurve.EASE_OUT) > value_after(elapsed)


def test_linear_is_monotonic_in_time():
    samples = [value_after(t) for t in (0.0, 0.25, 0.5, 0.75, 1.0)]
    assert samples == sorted(samples)
    assert samples[0] == 0.0
    assert samples[-1] == 10.0