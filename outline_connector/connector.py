"""Connector assembly: boundary-to-boundary segments from an origin to each target."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np

from .anchors import Anchor, build_anchors, facing, refresh_vectors
from .errors import InsufficientPointsError
from .geometry import GeometryDescriptor, GeometryKind
from .intersections import boundary_points
from .projection import Projection, project_geometry
from .vectors import Point2D

logger = logging.getLogger(__name__)

Segment = Tuple[Point2D, Point2D]


@dataclass
class ConnectorOptions:
    """Path styling forwarded untouched to the renderers.

    Defaults follow the usual web-map path style.
    """

    stroke: bool = True
    color: str = "#3388ff"
    weight: float = 3.0
    opacity: float = 1.0
    line_cap: str = "round"
    line_join: str = "round"
    dash_array: Optional[str] = None
    dash_offset: Optional[str] = None
    class_name: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ConnectorOptions":
        """Build options from a plain mapping; unknown keys land in ``extra``."""

        known = {f.name for f in fields(cls)} - {"extra"}
        kwargs = {key: value for key, value in data.items() if key in known}
        extra = dict(data.get("extra", {}))
        extra.update({key: value for key, value in data.items() if key not in known and key != "extra"})
        return cls(extra=extra, **kwargs)


def closest_pair(
    origin_candidates: Sequence[Point2D], target_candidates: Sequence[Point2D]
) -> Optional[Segment]:
    """Return the ``(origin, target)`` candidate pair with the smallest distance.

    Ties resolve to the first pair with origin candidates as the outer loop.
    ``None`` when either side has no candidates.
    """

    if not origin_candidates or not target_candidates:
        return None
    a = np.asarray(origin_candidates, dtype=float)
    b = np.asarray(target_candidates, dtype=float)
    dist = np.hypot(a[:, None, 0] - b[None, :, 0], a[:, None, 1] - b[None, :, 1])
    # argmin on the flattened matrix keeps the first minimum in row-major order
    i, j = divmod(int(np.argmin(dist)), len(target_candidates))
    p = origin_candidates[i]
    q = target_candidates[j]
    return (float(p[0]), float(p[1])), (float(q[0]), float(q[1]))


class Connector:
    """Lines from the boundary of the first geometry to the boundary of each other one.

    The connector owns the pixel positions of plain coordinates; circles and
    markers must have their ``pixel_center`` (and circle ``pixel_radius``)
    refreshed by the host before :meth:`update`, or use :meth:`project`.
    """

    def __init__(
        self,
        geometries: Iterable[GeometryDescriptor],
        options: Union[ConnectorOptions, Mapping[str, Any], None] = None,
    ) -> None:
        geometries = list(geometries)
        if len(geometries) < 2:
            raise InsufficientPointsError(
                f"Not enough points: a connector needs at least 2 geometries, got {len(geometries)}"
            )
        if options is None:
            options = ConnectorOptions()
        elif not isinstance(options, ConnectorOptions):
            options = ConnectorOptions.from_mapping(options)
        self.options: ConnectorOptions = options
        self._anchors, self._points = build_anchors(geometries)
        self.segments: List[Segment] = []
        logger.info(
            "Created connector with origin %s and %d target(s)",
            self._anchors[0].kind.value,
            len(self._anchors) - 1,
        )

    @property
    def anchors(self) -> Tuple[Anchor, ...]:
        return tuple(self._anchors)

    @property
    def origin(self) -> Anchor:
        return self._anchors[0]

    def update(self, projection: Projection) -> List[Segment]:
        """Recompute all segments from the current pixel positions."""

        for point in self._points:
            project_geometry(point, projection)
        refresh_vectors(self._anchors)

        lines: List[Segment] = []
        for idx, anchor in enumerate(self._anchors):
            if anchor.is_origin:
                continue
            origin = facing(self.origin, anchor)
            pair = closest_pair(boundary_points(origin, anchor), boundary_points(anchor, origin))
            if pair is None:
                logger.debug("Anchor %d (%s) has no boundary pair; skipped", idx, anchor.kind.value)
                continue
            lines.append(pair)

        self.segments = lines
        logger.debug("Connector update produced %d segment(s)", len(lines))
        return list(lines)

    def project(self, projection: Projection) -> List[Segment]:
        """Refresh every shape through ``projection`` and then :meth:`update`."""

        for anchor in self._anchors:
            if anchor.kind is not GeometryKind.POINT:
                project_geometry(anchor.geometry, projection)
        return self.update(projection)


def connector(*geometries: GeometryDescriptor, options: Optional[ConnectorOptions] = None, **style: Any) -> Connector:
    """Shortcut for ``Connector(geometries, options)``; keyword styling builds the options."""

    if options is None and style:
        return Connector(geometries, ConnectorOptions.from_mapping(style))
    return Connector(geometries, options)


__all__ = ["Segment", "ConnectorOptions", "closest_pair", "Connector", "connector"]
