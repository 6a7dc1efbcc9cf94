"""Collaborator protocols supplied by the hosting rendering environment.

Nothing here is implemented by the engine; callers hand in objects that
satisfy these shapes (browser bridges, snapshot documents, Qt adapters).
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol


class BoxLike(Protocol):
    top: float
    left: float
    width: float
    height: float


class ElementHandle(Protocol):
    offset_width: Optional[float]
    offset_height: Optional[float]
    offset_parent: Optional["ElementHandle"]
    client_top: float
    client_left: float
    scroll_top: float
    scroll_left: float
    style: Mapping[str, str]

    def bounding_client_rect(self) -> Optional[BoxLike]:
        ...


class DocumentAccess(Protocol):
    # Terminates the ancestor walk; compared by identity.
    root: Any
    scrolling_element: ElementHandle


class WindowAccess(Protocol):
    page_x_offset: Optional[float]
    page_y_offset: Optional[float]
