from .errors import (
    ConnectorError,
    InsufficientPointsError,
    UnsupportedGeometryError,
    ProjectionError,
    SceneError,
)
from .vectors import Point2D, Vector2D, subtract, length, normalize, flip
from .geometry import (
    GeometryKind,
    LatLng,
    Circle,
    CircleMarker,
    PointGeometry,
    square_marker,
    classify,
)
from .anchors import Anchor
from .intersections import Border, boundary_points, square_borders, segment_intersection
from .connector import Connector, ConnectorOptions, Segment, closest_pair, connector
from .config import EngineConfig, get_engine_config, set_engine_config
from .projection import (
    Projection,
    PlanarProjection,
    MercatorProjection,
    project_geometry,
    project_geometries,
)
from .render import segments_to_svg_path, render_svg, generate_tikz_code, generate_tikz_document
from .scene import Scene, load_scene, read_scene

__all__ = [
    'ConnectorError',
    'InsufficientPointsError',
    'UnsupportedGeometryError',
    'ProjectionError',
    'SceneError',
    'Point2D',
    'Vector2D',
    'subtract',
    'length',
    'normalize',
    'flip',
    'GeometryKind',
    'LatLng',
    'Circle',
    'CircleMarker',
    'PointGeometry',
    'square_marker',
    'classify',
    'Anchor',
    'Border',
    'boundary_points',
    'square_borders',
    'segment_intersection',
    'Connector',
    'ConnectorOptions',
    'Segment',
    'closest_pair',
    'connector',
    'EngineConfig',
    'get_engine_config',
    'set_engine_config',
    'Projection',
    'PlanarProjection',
    'MercatorProjection',
    'project_geometry',
    'project_geometries',
    'segments_to_svg_path',
    'render_svg',
    'generate_tikz_code',
    'generate_tikz_document',
    'Scene',
    'load_scene',
    'read_scene',
]
