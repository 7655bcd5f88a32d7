"""Error types raised by the grapher engine."""

from __future__ import annotations


class GrapherError(Exception):
    """Base class for every error raised by :mod:`grapher_core`."""


class UnknownGraphTypeError(GrapherError, ValueError):
    """Raised when a graph type string does not name a supported graph."""

    def __init__(self, graph_type: object) -> None:
        super().__init__(f"Could not recognize graph type: {graph_type!r}")
        self.graph_type = graph_type


class DegenerateInputError(GrapherError, ArithmeticError):
    """Raised when two control points share the x coordinate a fit needs to differ."""


class MissingInequalityError(GrapherError):
    """Raised when a linear inequality graph has no inequality value."""


class InvalidSettingsError(GrapherError, ValueError):
    """Raised when graph settings violate a bound, step or point count rule."""
