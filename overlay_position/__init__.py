"""Screen-space placement of overlay elements relative to host elements."""

from overlay_position.config import PositionerConfig, load_positioner_config
from overlay_position.geometry import GeometryAccessor, Rect
from overlay_position.offset_resolver import OffsetResolver
from overlay_position.placement import (
    Placement,
    PlacementSpec,
    compute_left,
    compute_placement,
    compute_top,
    parse_placement,
)
from overlay_position.positioner import Positioner

__all__ = [
    "GeometryAccessor",
    "OffsetResolver",
    "Placement",
    "PlacementSpec",
    "Positioner",
    "PositionerConfig",
    "Rect",
    "compute_left",
    "compute_placement",
    "compute_top",
    "load_positioner_config",
    "parse_placement",
]

__version__ = "0.1.0"
