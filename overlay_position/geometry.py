"""Bounding-box reads for element handles (viewport and document frames)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from overlay_position.interfaces import DocumentAccess, ElementHandle, WindowAccess


@dataclass(frozen=True)
class Rect:
    top: float
    left: float
    width: float
    height: float

    def shifted(self, top: float, left: float) -> "Rect":
        """Return a copy moved by (top, left); size is kept."""
        return Rect(top=self.top + top, left=self.left + left, width=self.width, height=self.height)


def coerce_number(value: Any) -> float:
    if value is None:
        return 0.0
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return 0.0
    if numeric != numeric:
        return 0.0
    return numeric


def _box_value(box: Any, name: str) -> Optional[float]:
    if box is None:
        return None
    if isinstance(box, dict):
        return box.get(name)
    return getattr(box, name, None)


class GeometryAccessor:
    """Read raw and document-relative rects of live elements."""

    def __init__(self, document: DocumentAccess, window: WindowAccess) -> None:
        self._document = document
        self._window = window

    def raw_rect(self, element: ElementHandle) -> Rect:
        box = element.bounding_client_rect()
        # Boxless (inline) elements report 0; fall back to the offset size.
        width = coerce_number(_box_value(box, "width")) or coerce_number(getattr(element, "offset_width", None))
        height = coerce_number(_box_value(box, "height")) or coerce_number(getattr(element, "offset_height", None))
        return Rect(
            top=coerce_number(_box_value(box, "top")),
            left=coerce_number(_box_value(box, "left")),
            width=max(0.0, width),
            height=max(0.0, height),
        )

    def scroll_offset(self) -> tuple[float, float]:
        """Return the document scroll as (top, left)."""
        scrolling = self._document.scrolling_element
        top = coerce_number(getattr(self._window, "page_y_offset", None)) or coerce_number(
            getattr(scrolling, "scroll_top", None)
        )
        left = coerce_number(getattr(self._window, "page_x_offset", None)) or coerce_number(
            getattr(scrolling, "scroll_left", None)
        )
        return top, left

    def document_rect(self, element: ElementHandle) -> Rect:
        scroll_top, scroll_left = self.scroll_offset()
        return self.raw_rect(element).shifted(scroll_top, scroll_left)
