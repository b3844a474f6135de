import math

import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a test optional dependency")
from hypothesis import HealthCheck, given, settings, strategies as st  # type: ignore

from figures import Hexagon, Pentagon, Rhombus
from geometry.point import Point

FIGURES = {5: Pentagon, 6: Hexagon}

# conftest の autouse（設定の初期化）は例ごとに再実行されないが、ここでは設定を変更しない
_settings = settings(max_examples=150, suppress_health_check=[HealthCheck.function_scoped_fixture])

radii = st.floats(0.01, 100.0)
angles = st.floats(-6.3, 6.3)
coords = st.floats(-100.0, 100.0)


def _regular(n, radius, theta, cx, cy):
    steps = [theta + 2.0 * math.pi * i / n for i in range(n)]
    return [Point(cx + radius * math.cos(a), cy + radius * math.sin(a)) for a in steps]


def _rhombus(p, q, theta, cx, cy):
    c, s = math.cos(theta), math.sin(theta)
    return [
        Point(cx + p * c, cy + p * s),
        Point(cx - q * s, cy + q * c),
        Point(cx - p * c, cy - p * s),
        Point(cx + q * s, cy - q * c),
    ]


@_settings
@given(n=st.sampled_from([5, 6]), radius=radii, theta=angles, cx=coords, cy=coords)
def test_regular_polygon_area_and_center(n, radius, theta, cx, cy):
    fig = FIGURES[n](_regular(n, radius, theta, cx, cy))

    expected = 0.5 * n * radius * radius * math.sin(2.0 * math.pi / n)
    assert fig.surface() == pytest.approx(expected, rel=1e-6)
    c = fig.center()
    assert c.x == pytest.approx(cx, abs=1e-6)
    assert c.y == pytest.approx(cy, abs=1e-6)


@_settings
@given(p=radii, q=radii, theta=angles, cx=coords, cy=coords)
def test_rhombus_area_is_twice_half_diagonal_product(p, q, theta, cx, cy):
    rhombus = Rhombus(_rhombus(p, q, theta, cx, cy))

    assert rhombus.surface() == pytest.approx(2.0 * p * q, rel=1e-6)
    c = rhombus.center()
    assert c.x == pytest.approx(cx, abs=1e-6)
    assert c.y == pytest.approx(cy, abs=1e-6)


@_settings
@given(n=st.sampled_from([5, 6]), radius=radii, theta=angles, shift=st.integers(0, 5))
def test_equality_ignores_rotation_but_not_reversal(n, radius, theta, shift):
    pts = _regular(n, radius, theta, 0.0, 0.0)
    k = shift % n
    fig = FIGURES[n](pts)

    assert FIGURES[n](pts[k:] + pts[:k]) == fig
    assert FIGURES[n](pts[::-1]) != fig


@_settings
@given(p=radii, q=radii, theta=angles, shift=st.integers(0, 3))
def test_rhombus_equality_ignores_rotation_but_not_reversal(p, q, theta, shift):
    pts = _rhombus(p, q, theta, 0.0, 0.0)
    rhombus = Rhombus(pts)

    assert Rhombus(pts[shift:] + pts[:shift]) == rhombus
    assert Rhombus(pts[::-1]) != rhombus
