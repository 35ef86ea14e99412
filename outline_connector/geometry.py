"""Geometry descriptors accepted by a connector and their classification."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Union

from .errors import UnsupportedGeometryError
from .vectors import Point2D

SQUARE_SHAPE = "square"


class GeometryKind(str, Enum):
    POINT = "point"
    CIRCLE = "circle"
    CIRCLE_MARKER = "circle-marker"
    SQUARE = "square"


@dataclass(frozen=True)
class LatLng:
    """Geographic coordinate in degrees."""

    lat: float
    lng: float


@dataclass
class Circle:
    """Circle with a geographic radius in metres.

    ``pixel_center`` and ``pixel_radius`` belong to the projection pass and
    must be refreshed before the connector reads them.
    """

    center: LatLng
    radius: float
    pixel_center: Optional[Point2D] = None
    pixel_radius: Optional[float] = None


@dataclass
class CircleMarker:
    """Marker with a fixed pixel radius.

    With ``shape="square"`` the marker is a square and ``radius`` is its half
    side-length.
    """

    center: LatLng
    radius: float
    shape: str = "circle"
    pixel_center: Optional[Point2D] = None


@dataclass
class PointGeometry:
    """Point wrapper owned by a connector; it projects ``latlng`` itself."""

    latlng: LatLng
    pixel_center: Optional[Point2D] = None


GeometryDescriptor = Union[LatLng, Sequence[float], Circle, CircleMarker]


def square_marker(center: LatLng, radius: float) -> CircleMarker:
    return CircleMarker(center=center, radius=radius, shape=SQUARE_SHAPE)


def _is_coordinate_pair(value: object) -> bool:
    return (
        isinstance(value, (list, tuple))
        and len(value) == 2
        and all(isinstance(v, numbers.Real) and not isinstance(v, bool) for v in value)
    )


def as_latlng(value: object) -> LatLng:
    """Coerce a ``LatLng`` or a ``(lat, lng)`` pair into a :class:`LatLng`."""

    if isinstance(value, LatLng):
        return value
    if _is_coordinate_pair(value):
        lat, lng = value  # type: ignore[misc]
        return LatLng(float(lat), float(lng))
    raise UnsupportedGeometryError(f"Not a coordinate: {value!r}")


def is_square_marker(geometry: object) -> bool:
    return isinstance(geometry, CircleMarker) and geometry.shape == SQUARE_SHAPE


def classify(geometry: object) -> GeometryKind:
    """Return the kind of ``geometry``.

    Only the type and the shape tag are inspected, never the position.
    """

    if is_square_marker(geometry):
        return GeometryKind.SQUARE
    if isinstance(geometry, Circle):
        return GeometryKind.CIRCLE
    if isinstance(geometry, CircleMarker):
        return GeometryKind.CIRCLE_MARKER
    if isinstance(geometry, LatLng) or _is_coordinate_pair(geometry):
        return GeometryKind.POINT
    raise UnsupportedGeometryError(f"Unsupported geometry type: {type(geometry).__name__}")


__all__ = [
    "SQUARE_SHAPE",
    "GeometryKind",
    "LatLng",
    "Circle",
    "CircleMarker",
    "PointGeometry",
    "GeometryDescriptor",
    "square_marker",
    "as_latlng",
    "is_square_marker",
    "classify",
]
