"""Positioning service for floating overlays (tooltips, popovers, suggestion lists).

The positioner is an explicit component: the document and window
collaborators are passed in, and every call recomputes from live geometry.
"""
from __future__ import annotations

import logging
from typing import Optional, Union

from overlay_position.config import PositionerConfig
from overlay_position.geometry import GeometryAccessor, Rect, coerce_number
from overlay_position.interfaces import DocumentAccess, ElementHandle, WindowAccess
from overlay_position.logging_utils import get_logger
from overlay_position.offset_resolver import OffsetResolver
from overlay_position.placement import Placement, PlacementSpec, compute_placement, parse_placement
from overlay_position.style_probe import build_probe_chain


class Positioner:
    """Compute where a target element goes relative to a host element."""

    def __init__(
        self,
        document: DocumentAccess,
        window: WindowAccess,
        *,
        config: Optional[PositionerConfig] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._config = config or PositionerConfig()
        self._logger = logger or get_logger("positioner")
        self._accessor = GeometryAccessor(document, window)
        self._resolver = OffsetResolver(
            document,
            self._accessor,
            build_probe_chain(window, self._config.style_probe_order),
            max_depth=self._config.max_ancestor_depth,
        )

    @property
    def config(self) -> PositionerConfig:
        return self._config

    def offset(self, element: ElementHandle) -> Rect:
        """Document-relative rect; independent of the current scroll position."""
        rect = self._accessor.document_rect(element)
        self._trace("offset", rect)
        return rect

    def position(self, element: ElementHandle) -> Rect:
        """Rect relative to the element's positioning ancestor."""
        rect = self._resolver.parent_relative_rect(element)
        self._trace("position", rect)
        return rect

    def host_rect(self, host: ElementHandle, attach_to_root: bool) -> Rect:
        # Root-attached targets need document coordinates; in-flow targets
        # share the host's positioning ancestor.
        if attach_to_root:
            return self.offset(host)
        return self.position(host)

    def place(
        self,
        host: ElementHandle,
        target_width: float,
        target_height: float,
        token: Union[str, PlacementSpec, None],
        attach_to_root: bool = False,
    ) -> Placement:
        spec = token if isinstance(token, PlacementSpec) else parse_placement(token)
        placement = compute_placement(self.host_rect(host, attach_to_root), target_width, target_height, spec)
        if self._config.trace_enabled:
            self._logger.debug(
                "placement %s-%s size=%.1fx%.1f attach_to_root=%s -> top=%.1f left=%.1f",
                spec.place,
                spec.align,
                target_width,
                target_height,
                attach_to_root,
                placement.top,
                placement.left,
            )
        return placement

    def position_elements(
        self,
        host: ElementHandle,
        target: ElementHandle,
        token: Union[str, PlacementSpec, None],
        attach_to_root: bool = False,
    ) -> Placement:
        target_width = coerce_number(getattr(target, "offset_width", None))
        target_height = coerce_number(getattr(target, "offset_height", None))
        return self.place(host, target_width, target_height, token, attach_to_root)

    def _trace(self, label: str, rect: Rect) -> None:
        if not self._config.trace_enabled:
            return
        self._logger.debug(
            "%s rect top=%.1f left=%.1f width=%.1f height=%.1f",
            label,
            rect.top,
            rect.left,
            rect.width,
            rect.height,
        )
