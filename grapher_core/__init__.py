"""Interactive graph engine: curve fitting, coordinate mapping and drag handling."""

from grapher_core.errors import (
    DegenerateInputError,
    GrapherError,
    InvalidSettingsError,
    MissingInequalityError,
    UnknownGraphTypeError,
)
from grapher_core.geometry import Point, SurfacePoint
from grapher_core.graph import InteractiveGraph, setup_graph
from grapher_core.interaction import Direction, InteractionMode
from grapher_core.properties import GraphProperties
from grapher_core.renderer import SceneRenderer
from grapher_core.settings import (
    GraphSettings,
    GraphType,
    Inequality,
    Side,
    default_graph_settings,
)

__all__ = [
    "DegenerateInputError",
    "Direction",
    "GraphProperties",
    "GraphSettings",
    "GraphType",
    "GrapherError",
    "Inequality",
    "InteractionMode",
    "InteractiveGraph",
    "InvalidSettingsError",
    "MissingInequalityError",
    "Point",
    "SceneRenderer",
    "Side",
    "SurfacePoint",
    "UnknownGraphTypeError",
    "default_graph_settings",
    "setup_graph",
]
