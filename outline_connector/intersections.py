"""Boundary points of anchors along the line joining two anchor centers.

Every function here returns the full candidate set; choosing the final
endpoint is left to :mod:`outline_connector.connector`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .anchors import Anchor, anchor_center, anchor_radius
from .config import get_engine_config
from .errors import UnsupportedGeometryError
from .geometry import GeometryKind
from .logging_utils import apply_debug_logging
from .vectors import Point2D, Vector2D, add, cross, distance, scale

logger = logging.getLogger(__name__)

_HORIZONTAL: Vector2D = (1.0, 0.0)
_VERTICAL: Vector2D = (0.0, 1.0)


@dataclass(frozen=True)
class Border:
    """Axis-aligned edge of a square: ``start + direction * [0, length]``."""

    name: str
    start: Point2D
    direction: Vector2D
    length: float


def square_borders(center: Point2D, size: float) -> List[Border]:
    """Return the four borders of the square of half side ``size`` around ``center``.

    Screen coordinates grow downward, so "Bottom" has the larger y.
    """

    cx, cy = center
    side = 2.0 * size
    return [
        Border("Bottom", (cx - size, cy + size), _HORIZONTAL, side),
        Border("Right", (cx + size, cy - size), _VERTICAL, side),
        Border("Top", (cx - size, cy - size), _HORIZONTAL, side),
        Border("Left", (cx - size, cy - size), _VERTICAL, side),
    ]


def segment_intersection(
    border: Border,
    line_start: Point2D,
    line_direction: Vector2D,
    line_length: float,
) -> Optional[Tuple[Point2D, float]]:
    """Intersect ``border`` with the segment ``line_start + line_direction * [0, line_length]``.

    Returns the hit and its parameter ``t`` along the line (in the units of
    ``line_length``), or ``None`` when the two are parallel or the hit lies
    outside either segment.
    """

    cfg = get_engine_config()
    r = scale(border.direction, border.length)
    s = scale(line_direction, line_length)
    denom = cross(r, s)
    if abs(denom) <= cfg.parallel_eps:
        return None

    diff = (line_start[0] - border.start[0], line_start[1] - border.start[1])
    u_border = cross(diff, s) / denom
    u_line = cross(diff, r) / denom
    lo, hi = -cfg.extent_eps, 1.0 + cfg.extent_eps
    if not (lo <= u_line <= hi):
        return None
    if not (lo <= u_border <= hi):
        return None

    point = add(border.start, scale(r, u_border))
    return point, u_line * line_length


def circle_boundary_points(anchor: Anchor) -> List[Point2D]:
    """Both crossings of the circle with the line through the two centers, near side first."""

    center = anchor_center(anchor)
    offset = scale(_direction(anchor), anchor_radius(anchor))
    return [add(center, offset), add(center, scale(offset, -1.0))]


def square_boundary_points(anchor: Anchor, other: Anchor) -> List[Point2D]:
    """Hits of the center-to-center segment with each border of a square anchor."""

    center = anchor_center(anchor)
    reach = distance(center, anchor_center(other))
    direction = _direction(anchor)

    hits: List[Point2D] = []
    for border in square_borders(center, anchor_radius(anchor)):
        found = segment_intersection(border, center, direction, reach)
        if found is None:
            continue
        hits.append(found[0])
        logger.debug("Square border %s hit at (%.6g, %.6g)", border.name, *found[0])
    return hits


def boundary_points(anchor: Anchor, other: Anchor) -> List[Point2D]:
    """Candidate points on the boundary of ``anchor`` lying toward ``other``."""

    kind = anchor.kind
    if kind is GeometryKind.POINT:
        return [anchor_center(anchor)]
    if kind is GeometryKind.CIRCLE or kind is GeometryKind.CIRCLE_MARKER:
        return circle_boundary_points(anchor)
    if kind is GeometryKind.SQUARE:
        return square_boundary_points(anchor, other)
    raise UnsupportedGeometryError(f"Unsupported geometry type: {kind!r}")


def _direction(anchor: Anchor) -> Vector2D:
    if anchor.normalized_vector is None:
        raise ValueError(f"{anchor.kind.value} anchor has no direction; refresh vectors first")
    return anchor.normalized_vector


apply_debug_logging(globals(), logger=logger)


__all__ = [
    "Border",
    "square_borders",
    "segment_intersection",
    "circle_boundary_points",
    "square_boundary_points",
    "boundary_points",
]
