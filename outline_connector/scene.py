"""JSON scene descriptions: geometries, projection and styling for one connector."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

from .connector import Connector, ConnectorOptions
from .errors import SceneError, UnsupportedGeometryError
from .geometry import Circle, CircleMarker, LatLng, square_marker
from .projection import MercatorProjection, PlanarProjection, Projection

logger = logging.getLogger(__name__)


@dataclass
class Scene:
    geometries: List[object]
    projection: Projection
    options: ConnectorOptions = field(default_factory=ConnectorOptions)

    def build_connector(self) -> Connector:
        return Connector(self.geometries, self.options)


def _pair(entry: Mapping[str, Any], key: str, idx: int) -> LatLng:
    value = entry.get(key)
    if not (isinstance(value, (list, tuple)) and len(value) == 2):
        raise SceneError(f"geometry #{idx}: '{key}' must be a [lat, lng] pair")
    try:
        return LatLng(float(value[0]), float(value[1]))
    except (TypeError, ValueError) as exc:
        raise SceneError(f"geometry #{idx}: '{key}' must hold numbers") from exc


def _radius(entry: Mapping[str, Any], idx: int) -> float:
    if "radius" not in entry:
        raise SceneError(f"geometry #{idx}: missing 'radius'")
    try:
        radius = float(entry["radius"])
    except (TypeError, ValueError) as exc:
        raise SceneError(f"geometry #{idx}: 'radius' must be a number") from exc
    if radius < 0:
        raise SceneError(f"geometry #{idx}: 'radius' must not be negative")
    return radius


def _load_geometry(entry: object, idx: int) -> object:
    if not isinstance(entry, Mapping):
        raise SceneError(f"geometry #{idx}: expected an object, got {type(entry).__name__}")
    kind = entry.get("type")
    if kind == "point":
        return _pair(entry, "coords", idx)
    if kind == "circle":
        return Circle(center=_pair(entry, "center", idx), radius=_radius(entry, idx))
    if kind == "circle-marker":
        return CircleMarker(
            center=_pair(entry, "center", idx),
            radius=_radius(entry, idx),
            shape=str(entry.get("shape", "circle")),
        )
    if kind == "square":
        return square_marker(_pair(entry, "center", idx), _radius(entry, idx))
    raise UnsupportedGeometryError(f"geometry #{idx}: unsupported geometry type {kind!r}")


def _load_projection(data: object) -> Projection:
    if data is None:
        return PlanarProjection()
    if not isinstance(data, Mapping):
        raise SceneError("'projection' must be an object")
    kind = data.get("kind", "planar")
    try:
        if kind == "planar":
            origin = data.get("origin", (0.0, 0.0))
            return PlanarProjection(
                scale=float(data.get("scale", 1.0)),
                origin=(float(origin[0]), float(origin[1])),
            )
        if kind == "mercator":
            origin = data.get("pixel_origin", (0.0, 0.0))
            return MercatorProjection(
                zoom=float(data.get("zoom", 0.0)),
                pixel_origin=(float(origin[0]), float(origin[1])),
            )
    except (TypeError, ValueError, IndexError) as exc:
        raise SceneError(f"invalid {kind} projection settings: {exc}") from exc
    raise SceneError(f"unknown projection kind {kind!r}")


def load_scene(data: Mapping[str, Any]) -> Scene:
    """Build a :class:`Scene` from decoded JSON."""

    if not isinstance(data, Mapping):
        raise SceneError("scene must be a JSON object")
    raw_geometries = data.get("geometries")
    if not isinstance(raw_geometries, list):
        raise SceneError("'geometries' must be a list")
    geometries = [_load_geometry(entry, idx) for idx, entry in enumerate(raw_geometries)]
    raw_options = data.get("options", {})
    if not isinstance(raw_options, Mapping):
        raise SceneError("'options' must be an object")
    try:
        options = ConnectorOptions.from_mapping(raw_options)
    except TypeError as exc:
        raise SceneError(f"invalid options: {exc}") from exc
    scene = Scene(geometries=geometries, projection=_load_projection(data.get("projection")), options=options)
    logger.info("Loaded scene with %d geometries", len(geometries))
    return scene


def read_scene(path: Union[str, Path]) -> Scene:
    text = Path(path).read_text(encoding="utf-8")
    try:
        data: Dict[str, Any] = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SceneError(f"{path}: invalid JSON ({exc})") from exc
    return load_scene(data)


__all__ = ["Scene", "load_scene", "read_scene"]
