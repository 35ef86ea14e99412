"""Exception hierarchy for connector construction and updates."""

from __future__ import annotations


class ConnectorError(Exception):
    """Base class for every error raised by :mod:`outline_connector`."""


class InsufficientPointsError(ConnectorError):
    """Raised when a connector is built from fewer than two geometries."""


class UnsupportedGeometryError(ConnectorError, TypeError):
    """Raised when a geometry descriptor matches none of the supported kinds."""


class ProjectionError(ConnectorError):
    """Raised when a shape is read before its pixel position was refreshed."""


class SceneError(ConnectorError, ValueError):
    """Raised for malformed scene descriptions."""


__all__ = [
    "ConnectorError",
    "InsufficientPointsError",
    "UnsupportedGeometryError",
    "ProjectionError",
    "SceneError",
]
