"""Anchor records wrapping each geometry of a connector."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple, Union

from .errors import ProjectionError, UnsupportedGeometryError
from .geometry import Circle, CircleMarker, GeometryDescriptor, GeometryKind, PointGeometry, as_latlng, classify
from .vectors import Point2D, Vector2D, flip, normalize, subtract

logger = logging.getLogger(__name__)

AnchorGeometry = Union[PointGeometry, Circle, CircleMarker]


@dataclass
class Anchor:
    """One participant of a connector.

    ``vector`` points from this anchor's center to the origin center and
    ``normalized_vector`` is its unit vector; both are refreshed on every
    update.
    """

    is_origin: bool
    kind: GeometryKind
    geometry: AnchorGeometry
    vector: Optional[Vector2D] = None
    normalized_vector: Optional[Vector2D] = None


def build_anchors(geometries: Sequence[GeometryDescriptor]) -> Tuple[List[Anchor], List[PointGeometry]]:
    """Classify ``geometries`` and wrap them into anchors.

    Returns the anchors (origin first) and the point wrappers the connector
    owns and must project itself.
    """

    anchors: List[Anchor] = []
    points: List[PointGeometry] = []
    for idx, raw in enumerate(geometries):
        kind = classify(raw)
        geometry: AnchorGeometry
        if kind is GeometryKind.POINT:
            geometry = PointGeometry(latlng=as_latlng(raw))
            points.append(geometry)
        else:
            geometry = raw  # type: ignore[assignment]
        anchors.append(Anchor(is_origin=idx == 0, kind=kind, geometry=geometry))
        logger.debug("Anchor %d classified as %s", idx, kind.value)
    return anchors, points


def anchor_center(anchor: Anchor) -> Point2D:
    """Return the projected pixel center of ``anchor``."""

    center = anchor.geometry.pixel_center
    if center is None:
        raise ProjectionError(f"{anchor.kind.value} anchor has no projected pixel center")
    return center


def anchor_radius(anchor: Anchor) -> float:
    """Return the pixel radius of a circular or square anchor."""

    geometry = anchor.geometry
    if anchor.kind is GeometryKind.CIRCLE:
        assert isinstance(geometry, Circle)
        if geometry.pixel_radius is None:
            raise ProjectionError("circle anchor has no projected pixel radius")
        return geometry.pixel_radius
    if anchor.kind in (GeometryKind.CIRCLE_MARKER, GeometryKind.SQUARE):
        assert isinstance(geometry, CircleMarker)
        return float(geometry.radius)
    raise UnsupportedGeometryError(f"{anchor.kind.value} anchor has no radius")


def refresh_vectors(anchors: Sequence[Anchor]) -> None:
    """Recompute ``vector`` and ``normalized_vector`` of every anchor in place."""

    origin = anchor_center(anchors[0])
    for anchor in anchors:
        anchor.vector = subtract(origin, anchor_center(anchor))
        anchor.normalized_vector = normalize(anchor.vector)


def facing(origin: Anchor, target: Anchor) -> Anchor:
    """Return a snapshot of ``origin`` whose vectors point toward ``target``."""

    if target.vector is None or target.normalized_vector is None:
        raise ValueError("target anchor vectors have not been computed")
    return replace(
        origin,
        vector=flip(target.vector),
        normalized_vector=flip(target.normalized_vector),
    )


__all__ = [
    "Anchor",
    "AnchorGeometry",
    "build_anchors",
    "anchor_center",
    "anchor_radius",
    "refresh_vectors",
    "facing",
]
