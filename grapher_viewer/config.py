"""INI configuration for the grapher viewer.

Example ``grapher.ini``::

    [graph]
    type = linear-inequality
    inequality = lt

    [grid]
    min_x = -5
    max_x = 5
    step_x = 0.5
    show_bounding_labels = yes

    [points]
    size = 6
    colors = #35605A, #FF9F1C
    starting = -1 -1; 1 1

    [interaction]
    can_interact = yes
    pick_radius = 12
"""
from __future__ import annotations

from configparser import ConfigParser, Error
from dataclasses import dataclass
from pathlib import Path
import sys
from typing import Optional

from grapher_core.errors import InvalidSettingsError
from grapher_core.geometry import Point
from grapher_core.settings import (
    GraphSettings,
    GraphType,
    Inequality,
    default_graph_settings,
)

CONFIG_FILENAME = "grapher.ini"
_GRAPH_SECTION = "graph"
_GRID_SECTION = "grid"
_POINTS_SECTION = "points"
_INTERACTION_SECTION = "interaction"


@dataclass(frozen=True)
class ViewerConfig:
    graph_type: GraphType
    settings: GraphSettings


def _config_dir(main_script_path: Optional[Path]) -> Path:
    if getattr(sys, "frozen", False):
        return Path(sys.executable).parent
    if main_script_path is not None:
        return main_script_path.resolve().parent
    main_module = sys.modules.get("__main__")
    if main_module and getattr(main_module, "__file__", None):
        return Path(main_module.__file__).resolve().parent
    return Path.cwd()


def config_path(main_script_path: Optional[Path]) -> Path:
    return _config_dir(main_script_path) / CONFIG_FILENAME


def _raw(parser: ConfigParser, section: str, key: str) -> Optional[str]:
    value = parser.get(section, key, fallback=None)
    if value is None or not value.strip():
        return None
    return value.strip()


def _get_float(parser: ConfigParser, section: str, key: str) -> Optional[float]:
    raw = _raw(parser, section, key)
    if raw is None:
        return None
    try:
        return float(raw)
    except ValueError:
        raise InvalidSettingsError(f"[{section}] {key} must be a number, got {raw!r}.") from None


def _get_bool(parser: ConfigParser, section: str, key: str) -> Optional[bool]:
    if _raw(parser, section, key) is None:
        return None
    try:
        return parser.getboolean(section, key)
    except ValueError:
        raise InvalidSettingsError(
            f"[{section}] {key} must be a boolean, got {parser.get(section, key)!r}."
        ) from None


def _get_colors(parser: ConfigParser) -> Optional[list[str]]:
    raw = _raw(parser, _POINTS_SECTION, "colors")
    if raw is None:
        return None
    return [color.strip() for color in raw.split(",") if color.strip()]


def _get_points(parser: ConfigParser) -> Optional[list[Point]]:
    raw = _raw(parser, _POINTS_SECTION, "starting")
    if raw is None:
        return None
    points: list[Point] = []
    for chunk in raw.split(";"):
        if not chunk.strip():
            continue
        parts = chunk.replace(",", " ").split()
        try:
            x, y = (float(part) for part in parts)
        except ValueError:
            raise InvalidSettingsError(
                f"[{_POINTS_SECTION}] starting expects 'x y' pairs, got {chunk.strip()!r}."
            ) from None
        points.append(Point(x, y))
    return points


def _get_inequality(parser: ConfigParser) -> Optional[Inequality]:
    raw = _raw(parser, _GRAPH_SECTION, "inequality")
    if raw is None:
        return None
    try:
        return Inequality(raw)
    except ValueError:
        raise InvalidSettingsError(
            f"[{_GRAPH_SECTION}] inequality must be one of lt, le, gt, ge, got {raw!r}."
        ) from None


def read_config(path: Optional[Path]) -> ConfigParser:
    parser = ConfigParser()
    if path is None or not path.exists():
        return parser
    try:
        parser.read(path, encoding="utf-8")
    except Error as exc:
        raise InvalidSettingsError(f"Could not parse {path}: {exc}") from exc
    return parser


def load_viewer_config(path: Optional[Path], graph_type: Optional[str] = None) -> ViewerConfig:
    """Read ``path`` (if present) and merge it over the per graph type defaults.

    ``graph_type`` given on the command line wins over ``[graph] type``.
    """

    parser = read_config(path)
    type_name = graph_type or _raw(parser, _GRAPH_SECTION, "type") or GraphType.LINEAR.value
    resolved_type = GraphType.parse(type_name)
    settings = default_graph_settings(
        resolved_type,
        min_grid_x=_get_float(parser, _GRID_SECTION, "min_x"),
        max_grid_x=_get_float(parser, _GRID_SECTION, "max_x"),
        min_grid_y=_get_float(parser, _GRID_SECTION, "min_y"),
        max_grid_y=_get_float(parser, _GRID_SECTION, "max_y"),
        step_x=_get_float(parser, _GRID_SECTION, "step_x"),
        step_y=_get_float(parser, _GRID_SECTION, "step_y"),
        show_bounding_labels=_get_bool(parser, _GRID_SECTION, "show_bounding_labels"),
        point_size=_get_float(parser, _POINTS_SECTION, "size"),
        point_colors=_get_colors(parser),
        starting_points=_get_points(parser),
        inequality=_get_inequality(parser),
        can_interact=_get_bool(parser, _INTERACTION_SECTION, "can_interact"),
        pick_radius=_get_float(parser, _INTERACTION_SECTION, "pick_radius"),
        curve_tolerance=_get_float(parser, _INTERACTION_SECTION, "curve_tolerance"),
    )
    return ViewerConfig(graph_type=resolved_type, settings=settings.validate(resolved_type))
