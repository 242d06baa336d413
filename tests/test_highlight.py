import pytest

from chartviz.highlight import HighlightAnimation
from chartviz.palette import Color


def make(rings=3, total=5.0, radius=10):
    return HighlightAnimation((1.0, 2.0), total, rings, Color(255, 73, 92), radius)


def test_time_between_rings_spans_total():
    anim = make(rings=3, total=5.0)
    assert anim.time_between_rings * (2 * 3 - 1) == pytest.approx(5.0)


def test_first_advance_only_starts():
    anim = make()
    assert anim.advance(100.0) is None
    assert anim.count == 0
    assert anim.radius == 10.0


def test_short_elapsed_keeps_radius():
    anim = make()
    anim.advance(0.0)
    assert anim.advance(anim.time_between_rings / 4) == 10.0
    assert anim.count == 0


def test_radius_grows_then_shrinks():
    anim = make(rings=3)
    anim.advance(0.0)
    radii = []
    while not anim.finished():
        radii.append(anim.advance(anim.time_between_rings))
    assert len(radii) == 6
    assert max(radii) == radii[1]
    assert radii[2:] == sorted(radii[2:], reverse=True)


def test_finished_stops_drawing():
    anim = make(rings=1)
    anim.advance(0.0)
    anim.advance(anim.time_between_rings)
    anim.advance(anim.time_between_rings)
    assert anim.finished()
    assert anim.advance(anim.time_between_rings) is None


def test_accumulates_elapsed_time():
    anim = make(rings=2, total=3.0)
    anim.advance(0.0)
    half = anim.time_between_rings / 2
    anim.advance(half)
    assert anim.count == 0
    anim.advance(half)
    assert anim.count == 1