"""Parent-relative geometry: rects measured from the nearest positioned ancestor."""
from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from overlay_position.geometry import GeometryAccessor, Rect
from overlay_position.interfaces import DocumentAccess, ElementHandle
from overlay_position.logging_utils import get_logger
from overlay_position.style_probe import StyleProbe, is_static_positioned

DEFAULT_MAX_ANCESTOR_DEPTH = 256


class OffsetResolver:
    """Convert element rects into the frame of their positioning ancestor."""

    def __init__(
        self,
        document: DocumentAccess,
        accessor: GeometryAccessor,
        probes: Sequence[StyleProbe],
        *,
        max_depth: int = DEFAULT_MAX_ANCESTOR_DEPTH,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._document = document
        self._accessor = accessor
        self._probes = tuple(probes)
        self._max_depth = max(1, int(max_depth))
        self._logger = logger or get_logger("resolver")

    def positioning_ancestor(self, element: ElementHandle) -> Any:
        """Return the closest non-static offset ancestor, or the document root.

        The walk follows ``offset_parent`` links. A link back to an element
        already visited, or a chain longer than the depth bound, ends the walk
        at the document root.
        """
        root = self._document.root
        candidate = getattr(element, "offset_parent", None) or root
        visited = {id(element)}
        steps = 0
        while candidate is not None and candidate is not root:
            if id(candidate) in visited:
                self._logger.warning("offset_parent chain loops back on itself; using document root")
                return root
            if steps >= self._max_depth:
                self._logger.warning(
                    "offset_parent chain exceeds %d links; using document root",
                    self._max_depth,
                )
                return root
            if not is_static_positioned(candidate, self._probes):
                return candidate
            visited.add(id(candidate))
            steps += 1
            candidate = getattr(candidate, "offset_parent", None)
        return root

    def ancestor_origin(self, ancestor: Any) -> Rect:
        """Document position of ``ancestor``'s content box, net of its own scroll."""
        if ancestor is self._document.root:
            return Rect(top=0.0, left=0.0, width=0.0, height=0.0)
        origin = self._accessor.document_rect(ancestor)
        return origin.shifted(
            float(ancestor.client_top or 0) - float(ancestor.scroll_top or 0),
            float(ancestor.client_left or 0) - float(ancestor.scroll_left or 0),
        )

    def parent_relative_rect(self, element: ElementHandle) -> Rect:
        element_rect = self._accessor.document_rect(element)
        origin = self.ancestor_origin(self.positioning_ancestor(element))
        return element_rect.shifted(-origin.top, -origin.left)
