from portfolio.connectors.engine import ConnectionPath, ConnectorEngine, compute_paths
from portfolio.connectors.geometry import (
    PathGeometry,
    Point,
    Rect,
    get_connection_point,
    route_circuit,
    route_curve,
)
from portfolio.connectors.layout import LayoutProbe, StaticLayout

__all__ = [
    "ConnectionPath",
    "ConnectorEngine",
    "LayoutProbe",
    "PathGeometry",
    "Point",
    "Rect",
    "StaticLayout",
    "compute_paths",
    "get_connection_point",
    "route_circuit",
    "route_curve",
]
