"""Geographic to layer-pixel projections used to refresh geometry descriptors."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Protocol, Tuple

from .geometry import Circle, CircleMarker, LatLng, PointGeometry
from .vectors import Point2D

logger = logging.getLogger(__name__)

MERCATOR_RADIUS = 6378137.0
EARTH_RADIUS = 6371000.0
MAX_LATITUDE = 85.0511287798
TILE_SIZE = 256.0


class Projection(Protocol):
    def latlng_to_layer_point(self, latlng: LatLng) -> Point2D:
        ...

    def radius_to_pixels(self, center: LatLng, metres: float) -> float:
        ...


@dataclass
class PlanarProjection:
    """Flat projection: ``x = lng * scale - ox`` and ``y = lat * scale - oy``.

    Useful for scenes that are already expressed in screen units.
    """

    scale: float = 1.0
    origin: Tuple[float, float] = (0.0, 0.0)

    def latlng_to_layer_point(self, latlng: LatLng) -> Point2D:
        return (latlng.lng * self.scale - self.origin[0], latlng.lat * self.scale - self.origin[1])

    def radius_to_pixels(self, center: LatLng, metres: float) -> float:
        return metres * self.scale


@dataclass
class MercatorProjection:
    """Spherical Mercator (EPSG:3857) onto 256-pixel tiles at ``zoom``.

    ``pixel_origin`` is the world-pixel position of the layer's top-left
    corner, as a map would report it.
    """

    zoom: float = 0.0
    pixel_origin: Tuple[float, float] = (0.0, 0.0)

    @property
    def world_size(self) -> float:
        return TILE_SIZE * 2.0 ** self.zoom

    def project(self, latlng: LatLng) -> Point2D:
        """Return world-pixel coordinates of ``latlng``."""

        d = math.pi / 180.0
        lat = max(min(MAX_LATITUDE, latlng.lat), -MAX_LATITUDE)
        sin = math.sin(lat * d)
        mx = MERCATOR_RADIUS * latlng.lng * d
        my = MERCATOR_RADIUS * math.log((1.0 + sin) / (1.0 - sin)) / 2.0
        k = 0.5 / (math.pi * MERCATOR_RADIUS)
        size = self.world_size
        return (size * (k * mx + 0.5), size * (-k * my + 0.5))

    def unproject(self, point: Point2D) -> LatLng:
        """Inverse of :meth:`project`."""

        d = math.pi / 180.0
        k = 0.5 / (math.pi * MERCATOR_RADIUS)
        size = self.world_size
        mx = (point[0] / size - 0.5) / k
        my = -(point[1] / size - 0.5) / k
        lat = (2.0 * math.atan(math.exp(my / MERCATOR_RADIUS)) - math.pi / 2.0) / d
        return LatLng(lat, mx / MERCATOR_RADIUS / d)

    def latlng_to_layer_point(self, latlng: LatLng) -> Point2D:
        x, y = self.project(latlng)
        return (x - self.pixel_origin[0], y - self.pixel_origin[1])

    def radius_to_pixels(self, center: LatLng, metres: float) -> float:
        """Horizontal pixel radius of a circle of ``metres`` around ``center``.

        Measured on the great circle through the midpoint of the circle's
        projected north and south extremes, on a sphere of ``EARTH_RADIUS``.
        """

        d = math.pi / 180.0
        lat, lng = center.lat, center.lng
        lat_r = (metres / EARTH_RADIUS) / d
        top = self.project(LatLng(lat + lat_r, lng))
        bottom = self.project(LatLng(lat - lat_r, lng))
        mid = ((top[0] + bottom[0]) / 2.0, (top[1] + bottom[1]) / 2.0)
        lat2 = self.unproject(mid).lat
        cos_lng_r = (math.cos(lat_r * d) - math.sin(lat * d) * math.sin(lat2 * d)) / (
            math.cos(lat * d) * math.cos(lat2 * d)
        )
        # rounding can push the cosine just outside [-1, 1] near the poles
        lng_r = math.acos(cos_lng_r) / d if -1.0 <= cos_lng_r <= 1.0 else 0.0
        if lng_r == 0.0:
            lng_r = lat_r / math.cos(lat * d)
        return mid[0] - self.project(LatLng(lat2, lng - lng_r))[0]


def project_geometry(geometry: object, projection: Projection) -> None:
    """Refresh the cached pixel position (and circle radius) of ``geometry``.

    Plain coordinates carry no cache and are left alone.
    """

    if isinstance(geometry, Circle):
        geometry.pixel_center = projection.latlng_to_layer_point(geometry.center)
        geometry.pixel_radius = projection.radius_to_pixels(geometry.center, geometry.radius)
    elif isinstance(geometry, CircleMarker):
        geometry.pixel_center = projection.latlng_to_layer_point(geometry.center)
    elif isinstance(geometry, PointGeometry):
        geometry.pixel_center = projection.latlng_to_layer_point(geometry.latlng)


def project_geometries(geometries: Iterable[object], projection: Projection) -> None:
    count = 0
    for geometry in geometries:
        project_geometry(geometry, projection)
        count += 1
    logger.debug("Projected %d geometries with %s", count, type(projection).__name__)


__all__ = [
    "MERCATOR_RADIUS",
    "EARTH_RADIUS",
    "Projection",
    "PlanarProjection",
    "MercatorProjection",
    "project_geometry",
    "project_geometries",
]
