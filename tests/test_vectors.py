import math

from outline_connector.vectors import (
    COINCIDENT_FALLBACK,
    add,
    distance,
    flip,
    length,
    normalize,
    scale,
    subtract,
)


def test_subtract_returns_difference():
    assert subtract((5.0, 7.0), (2.0, 10.0)) == (3.0, -3.0)


def test_subtract_coincident_points_uses_fallback():
    assert subtract((4.0, -2.0), (4.0, -2.0)) == COINCIDENT_FALLBACK == (1.0, 1.0)


def test_normalize_fallback_is_finite_unit_vector():
    v = normalize(subtract((3.0, 3.0), (3.0, 3.0)))
    assert all(math.isfinite(c) for c in v)
    assert math.isclose(v[0], math.sqrt(0.5))
    assert math.isclose(v[1], math.sqrt(0.5))


def test_length_and_normalize():
    assert length((3.0, 4.0)) == 5.0
    ux, uy = normalize((3.0, 4.0))
    assert math.isclose(ux, 0.6)
    assert math.isclose(uy, 0.8)
    assert math.isclose(length((ux, uy)), 1.0)


def test_flip_add_scale_distance():
    assert flip((2.0, -3.0)) == (-2.0, 3.0)
    assert add((1.0, 1.0), scale((2.0, 0.5), 4.0)) == (9.0, 3.0)
    assert distance((0.0, 0.0), (6.0, 8.0)) == 10.0
