"""PyQt6 element handles so Qt overlays can share the positioning engine.

Qt widgets place their children relative to themselves, so every parent
widget acts as a positioned ancestor and the top-level window plays the
document root. Coordinates are in the window's logical pixels.
"""
from __future__ import annotations

from typing import Dict, Mapping, Optional

from PyQt6 import sip
from PyQt6.QtCore import QPoint
from PyQt6.QtWidgets import QWidget

from overlay_position.geometry import Rect


class QtElement:
    """Read-only ElementHandle view of a QWidget."""

    current_style = None
    # Children are laid out from the parent widget origin, margins included.
    client_top = 0.0
    client_left = 0.0
    # Scroll areas move the viewport content, which mapTo already reflects;
    # their direct children stay put.
    scroll_top = 0.0
    scroll_left = 0.0

    def __init__(self, widget: QWidget, document: "QtDocument") -> None:
        self._widget = widget
        self._document = document
        self.style: Dict[str, str] = {}

    @property
    def widget(self) -> QWidget:
        return self._widget

    def bounding_client_rect(self) -> Rect:
        window = self._widget.window()
        if self._widget is window:
            origin = QPoint(0, 0)
        else:
            origin = self._widget.mapTo(window, QPoint(0, 0))
        return Rect(
            top=float(origin.y()),
            left=float(origin.x()),
            width=float(self._widget.width()),
            height=float(self._widget.height()),
        )

    @property
    def offset_width(self) -> float:
        return float(self._widget.width())

    @property
    def offset_height(self) -> float:
        return float(self._widget.height())

    @property
    def offset_parent(self) -> Optional["QtElement"]:
        if self._widget.isWindow():
            return None
        parent = self._widget.parentWidget()
        if parent is None:
            return None
        return self._document.wrap(parent)



class QtDocument:
    """DocumentAccess over one top-level window; wrappers are cached per widget."""

    def __init__(self, window: QWidget) -> None:
        self._wrappers: Dict[int, QtElement] = {}
        self.root = self.wrap(window.window())

    @property
    def scrolling_element(self) -> QtElement:
        return self.root

    def wrap(self, widget: QWidget) -> QtElement:
        self._prune()
        key = id(widget)
        wrapper = self._wrappers.get(key)
        if wrapper is None or wrapper.widget is not widget:
            wrapper = QtElement(widget, self)
            self._wrappers[key] = wrapper
        return wrapper

    def _prune(self) -> None:
        stale = [key for key, wrapper in self._wrappers.items() if sip.isdeleted(wrapper.widget)]
        for key in stale:
            del self._wrappers[key]


class QtWindow:
    """WindowAccess for Qt: windows do not scroll, every widget is a frame."""

    page_x_offset: Optional[float] = 0.0
    page_y_offset: Optional[float] = 0.0

    def get_computed_style(self, element: object) -> Mapping[str, str]:
        return {"position": "relative"}
