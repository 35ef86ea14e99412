import math

import pytest

from outline_connector import (
    Circle,
    CircleMarker,
    LatLng,
    MercatorProjection,
    PlanarProjection,
    PointGeometry,
    project_geometries,
    project_geometry,
    square_marker,
)
from outline_connector.projection import EARTH_RADIUS


def test_planar_projection_maps_lng_to_x():
    projection = PlanarProjection(scale=2.0, origin=(10.0, -5.0))
    assert projection.latlng_to_layer_point(LatLng(lat=3.0, lng=4.0)) == (-2.0, 11.0)
    assert projection.radius_to_pixels(LatLng(0.0, 0.0), 7.5) == 15.0


def test_mercator_world_pixels():
    assert MercatorProjection(zoom=0).project(LatLng(0.0, 0.0)) == pytest.approx((128.0, 128.0))
    assert MercatorProjection(zoom=1).project(LatLng(0.0, 0.0)) == pytest.approx((256.0, 256.0))
    x, _ = MercatorProjection(zoom=0).project(LatLng(0.0, 180.0))
    assert x == pytest.approx(256.0)


def test_mercator_north_is_up():
    projection = MercatorProjection(zoom=3)
    _, y_north = projection.project(LatLng(45.0, 0.0))
    _, y_south = projection.project(LatLng(-45.0, 0.0))
    assert y_north < 128.0 * 8 < y_south
    # latitudes past the Mercator limit are clamped
    assert projection.project(LatLng(89.9, 0.0)) == pytest.approx(projection.project(LatLng(85.0511287798, 0.0)))


def test_mercator_layer_point_subtracts_origin():
    projection = MercatorProjection(zoom=2, pixel_origin=(500.0, 400.0))
    x, y = projection.latlng_to_layer_point(LatLng(0.0, 0.0))
    assert (x, y) == pytest.approx((12.0, 112.0))


def test_mercator_unproject_inverts_project():
    projection = MercatorProjection(zoom=5)
    latlng = projection.unproject(projection.project(LatLng(48.8566, 2.3522)))
    assert (latlng.lat, latlng.lng) == pytest.approx((48.8566, 2.3522))


def test_mercator_radius_at_equator():
    metres_per_pixel = 2 * math.pi * EARTH_RADIUS / 256.0
    projection = MercatorProjection(zoom=0)
    assert projection.radius_to_pixels(LatLng(0.0, 0.0), metres_per_pixel) == pytest.approx(1.0, rel=1e-9)
    # the same distance spans more pixels away from the equator
    assert projection.radius_to_pixels(LatLng(60.0, 0.0), metres_per_pixel) == pytest.approx(2.0, rel=1e-3)


def test_mercator_radius_uses_the_mean_earth_radius():
    # one degree of longitude at the equator on the 6371 km sphere
    metres = EARTH_RADIUS * math.pi / 180.0
    projection = MercatorProjection(zoom=10)
    assert projection.radius_to_pixels(LatLng(0.0, 30.0), metres) == pytest.approx(projection.world_size / 360.0)


def test_project_geometry_refreshes_caches():
    projection = PlanarProjection(scale=3.0)
    circle = Circle(LatLng(1.0, 2.0), 4.0)
    marker = CircleMarker(LatLng(-1.0, 0.5), 6.0)
    square = square_marker(LatLng(0.0, 0.0), 2.0)
    point = PointGeometry(LatLng(2.0, 2.0))
    project_geometries([circle, marker, square, point, (1.0, 1.0)], projection)

    assert circle.pixel_center == (6.0, 3.0)
    assert circle.pixel_radius == 12.0
    assert marker.pixel_center == (1.5, -3.0)
    assert marker.radius == 6.0
    assert square.pixel_center == (0.0, 0.0)
    assert point.pixel_center == (6.0, 6.0)


def test_project_geometry_ignores_plain_coordinates():
    project_geometry(LatLng(1.0, 1.0), PlanarProjection())
