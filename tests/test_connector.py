import math

import pytest

from outline_connector import (
    Circle,
    CircleMarker,
    Connector,
    ConnectorOptions,
    GeometryKind,
    InsufficientPointsError,
    LatLng,
    PlanarProjection,
    ProjectionError,
    UnsupportedGeometryError,
    closest_pair,
    connector,
    square_marker,
)


def _at(x, y):
    return LatLng(lat=y, lng=x)


def _segments(*geometries):
    return Connector(geometries).project(PlanarProjection())


def test_circle_to_circle_scenario():
    segments = _segments(Circle(_at(0, 0), 10.0), Circle(_at(100, 0), 5.0))
    assert len(segments) == 1
    (p, q), = segments
    assert p == pytest.approx((10.0, 0.0))
    assert q == pytest.approx((95.0, 0.0))


def test_point_to_square_scenario():
    (p, q), = _segments(_at(50, 50), square_marker(_at(150, 50), 20.0))
    assert p == (50.0, 50.0)
    assert q == pytest.approx((130.0, 50.0))


def test_circle_points_lie_on_radius_along_center_line():
    c1, r1 = (0.0, 0.0), 3.0
    c2, r2 = (30.0, 40.0), 7.0
    (p, q), = _segments(Circle(_at(*c1), r1), CircleMarker(_at(*c2), r2))
    assert math.dist(p, c1) == pytest.approx(r1)
    assert math.dist(q, c2) == pytest.approx(r2)
    assert p == pytest.approx((1.8, 2.4))
    assert q == pytest.approx((30.0 - 4.2, 40.0 - 5.6))


def test_square_origin_to_circle_marker():
    (p, q), = _segments(square_marker(_at(0, 0), 10.0), CircleMarker(_at(0, -60), 5.0))
    assert p == pytest.approx((0.0, -10.0))
    assert q == pytest.approx((0.0, -55.0))


def test_coincident_centers_give_finite_segment():
    segments = _segments(Circle(_at(5, 5), 10.0), CircleMarker(_at(5, 5), 4.0))
    (p, q), = segments
    assert all(math.isfinite(v) for v in (*p, *q))
    assert math.dist(p, (5.0, 5.0)) == pytest.approx(10.0)
    assert math.dist(q, (5.0, 5.0)) == pytest.approx(4.0)
    # fallback direction is the (1, 1) diagonal
    assert p[0] - 5.0 == pytest.approx(p[1] - 5.0)


def test_anchor_without_candidates_is_skipped():
    geometries = [
        Circle(_at(0, 0), 10.0),
        CircleMarker(_at(0, 100), 5.0),
        square_marker(_at(0, 0), 30.0),
        _at(-50, 0),
    ]
    segments = _segments(*geometries)
    assert len(segments) == 2
    assert segments[0][1] == pytest.approx((0.0, 95.0))
    assert segments[1][0] == pytest.approx((-10.0, 0.0))
    assert segments[1][1] == (-50.0, 0.0)


def test_update_is_idempotent():
    projection = PlanarProjection(scale=2.0)
    conn = Connector([_at(1, 2), square_marker(_at(40, -10), 6.0), Circle(_at(-30, 25), 4.0)])
    first = conn.project(projection)
    second = conn.update(projection)
    assert first == second
    assert conn.segments == second


def test_update_reprojects_owned_points():
    marker = CircleMarker(_at(10, 0), 2.0, pixel_center=(10.0, 0.0))
    conn = Connector([_at(0, 0), marker])
    assert conn.update(PlanarProjection()) == [((0.0, 0.0), (8.0, 0.0))]
    # the shape cache is the host's: only the point moves
    assert conn.update(PlanarProjection(origin=(-4.0, 0.0))) == [((4.0, 0.0), (8.0, 0.0))]


def test_update_requires_projected_shapes():
    conn = Connector([_at(0, 0), CircleMarker(_at(10, 0), 2.0)])
    with pytest.raises(ProjectionError):
        conn.update(PlanarProjection())


def test_origin_anchor_is_not_mutated_by_reversal():
    conn = Connector([CircleMarker(_at(0, 0), 2.0), CircleMarker(_at(10, 0), 2.0)])
    conn.project(PlanarProjection())
    origin = conn.origin
    assert origin.vector == (1.0, 1.0)
    assert origin.normalized_vector == pytest.approx((math.sqrt(0.5), math.sqrt(0.5)))
    assert conn.anchors[1].normalized_vector == pytest.approx((-1.0, 0.0))


def test_anchor_records():
    conn = Connector([Circle(_at(0, 0), 1.0), (3.0, 4.0), square_marker(_at(1, 1), 2.0)])
    assert [a.is_origin for a in conn.anchors] == [True, False, False]
    assert [a.kind for a in conn.anchors] == [
        GeometryKind.CIRCLE,
        GeometryKind.POINT,
        GeometryKind.SQUARE,
    ]


@pytest.mark.parametrize("geometries", [[], [LatLng(0.0, 0.0)]])
def test_requires_two_geometries(geometries):
    with pytest.raises(InsufficientPointsError):
        Connector(geometries)


def test_rejects_unsupported_geometry():
    with pytest.raises(UnsupportedGeometryError):
        Connector([LatLng(0.0, 0.0), "not a geometry"])


def test_closest_pair_prefers_first_on_ties():
    assert closest_pair([(0.0, 0.0), (10.0, 0.0)], [(5.0, 0.0)]) == ((0.0, 0.0), (5.0, 0.0))
    assert closest_pair([(0.0, 0.0)], [(3.0, 4.0), (-4.0, 3.0)]) == ((0.0, 0.0), (3.0, 4.0))
    assert closest_pair([(0.0, 0.0), (9.0, 0.0)], [(20.0, 0.0), (10.0, 0.0)]) == ((9.0, 0.0), (10.0, 0.0))


def test_closest_pair_empty_side():
    assert closest_pair([], [(1.0, 1.0)]) is None
    assert closest_pair([(1.0, 1.0)], []) is None


def test_options_are_passed_through():
    conn = connector(_at(0, 0), _at(1, 1), color="red", weight=5, dashArray="4 2")
    assert conn.options.color == "red"
    assert conn.options.weight == 5
    assert conn.options.extra == {"dashArray": "4 2"}

    options = ConnectorOptions(opacity=0.5)
    assert Connector([_at(0, 0), _at(1, 1)], options).options is options
    assert Connector([_at(0, 0), _at(1, 1)], {"class_name": "link"}).options.class_name == "link"
