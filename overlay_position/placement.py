"""Placement tokens and the pure top/left arithmetic (no element access)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Union

from overlay_position.geometry import Rect

PLACES = frozenset({"top", "right", "bottom", "left"})
ALIGNS = frozenset({"top", "right", "bottom", "left", "center"})
DEFAULT_PLACE = "top"
DEFAULT_ALIGN = "center"


@dataclass(frozen=True)
class PlacementSpec:
    place: str = DEFAULT_PLACE
    align: str = DEFAULT_ALIGN


@dataclass(frozen=True)
class Placement:
    top: float
    left: float

    def as_dict(self) -> Dict[str, float]:
        return {"top": self.top, "left": self.left}


def parse_placement(token: Optional[str]) -> PlacementSpec:
    """Split ``"<place>[-<align>]"``; unknown parts fall back to top/center."""
    parts = (token or "").strip().lower().split("-")
    place = parts[0]
    align = parts[1] if len(parts) > 1 and parts[1] else DEFAULT_ALIGN
    if place not in PLACES:
        place = DEFAULT_PLACE
    if align not in ALIGNS:
        align = DEFAULT_ALIGN
    return PlacementSpec(place=place, align=align)


def compute_left(place: str, align: str, host: Rect, target_width: float) -> float:
    if place == "left":
        return host.left - target_width
    if place in ("top", "bottom"):
        if align == "left":
            return host.left
        if align == "center":
            return host.left + host.width / 2 - target_width / 2
        return host.left + host.width - target_width
    return host.left + host.width


def compute_top(place: str, align: str, host: Rect, target_height: float) -> float:
    if place == "top":
        return host.top - target_height
    if place in ("left", "right"):
        if align == "top":
            return host.top
        if align == "center":
            return host.top + host.height / 2 - target_height / 2
        return host.top + host.height - target_height
    return host.top + host.height


def compute_placement(
    host: Rect,
    target_width: float,
    target_height: float,
    token: Union[str, PlacementSpec, None],
) -> Placement:
    spec = token if isinstance(token, PlacementSpec) else parse_placement(token)
    return Placement(
        top=compute_top(spec.place, spec.align, host, target_height),
        left=compute_left(spec.place, spec.align, host, target_width),
    )
