"""Headless element handles built from a JSON geometry snapshot of a page.

A snapshot is what a browser bridge dumps after layout::

    {
      "scroll": {"x": 0, "y": 120},
      "elements": [
        {"id": "panel", "rect": {"top": 10, "left": 20, "width": 300, "height": 200},
         "position": "relative", "offset_parent": "root", "client_top": 1, "client_left": 1},
        {"id": "button", "rect": {...}, "offset_parent": "panel"}
      ]
    }

Elements may reference parents that appear later in the list.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from overlay_position.geometry import Rect, coerce_number

ROOT_ID = "root"


class SnapshotError(ValueError):
    """Raised when a geometry snapshot cannot be read or is inconsistent."""


@dataclass(eq=False)
class SnapshotElement:
    identifier: str
    rect: Optional[Rect] = None
    offset_width: Optional[float] = None
    offset_height: Optional[float] = None
    offset_parent: Optional[Any] = None
    client_top: float = 0.0
    client_left: float = 0.0
    scroll_top: float = 0.0
    scroll_left: float = 0.0
    style: Dict[str, str] = field(default_factory=dict)
    computed_style: Dict[str, str] = field(default_factory=dict)

    def bounding_client_rect(self) -> Optional[Rect]:
        return self.rect


@dataclass(eq=False)
class SnapshotDocument:
    root: SnapshotElement
    elements: Dict[str, SnapshotElement] = field(default_factory=dict)

    @property
    def scrolling_element(self) -> SnapshotElement:
        return self.root

    def element(self, identifier: str) -> SnapshotElement:
        try:
            return self.elements[identifier]
        except KeyError:
            raise SnapshotError(f"no element with id {identifier!r} in snapshot") from None


@dataclass
class SnapshotWindow:
    page_x_offset: Optional[float] = None
    page_y_offset: Optional[float] = None

    def get_computed_style(self, element: Any) -> Optional[Mapping[str, str]]:
        return getattr(element, "computed_style", None)


def _parse_rect(value: Any, identifier: str) -> Optional[Rect]:
    if value is None:
        return None
    if not isinstance(value, dict):
        raise SnapshotError(f"element {identifier!r}: rect must be an object")
    return Rect(
        top=coerce_number(value.get("top")),
        left=coerce_number(value.get("left")),
        width=max(0.0, coerce_number(value.get("width"))),
        height=max(0.0, coerce_number(value.get("height"))),
    )


def _optional_number(value: Any) -> Optional[float]:
    if value is None:
        return None
    return coerce_number(value)


def _string_map(value: Any) -> Dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return {str(key): str(item) for key, item in value.items() if item is not None}


def build_snapshot(data: Mapping[str, Any]) -> tuple[SnapshotDocument, SnapshotWindow]:
    if not isinstance(data, Mapping):
        raise SnapshotError("snapshot must be a JSON object")
    scroll = data.get("scroll") if isinstance(data.get("scroll"), dict) else {}
    root = SnapshotElement(
        identifier=ROOT_ID,
        scroll_top=coerce_number(scroll.get("y")),
        scroll_left=coerce_number(scroll.get("x")),
    )
    document = SnapshotDocument(root=root)
    window = SnapshotWindow(
        page_x_offset=_optional_number(scroll.get("x")),
        page_y_offset=_optional_number(scroll.get("y")),
    )

    entries = data.get("elements")
    if entries is None:
        entries = []
    if not isinstance(entries, list):
        raise SnapshotError("snapshot 'elements' must be a list")
    parent_links: Dict[str, Optional[str]] = {}
    for entry in entries:
        if not isinstance(entry, dict) or not entry.get("id"):
            raise SnapshotError("every snapshot element needs an 'id'")
        identifier = str(entry["id"])
        if identifier == ROOT_ID or identifier in document.elements:
            raise SnapshotError(f"duplicate element id {identifier!r}")
        computed = _string_map(entry.get("computed_style"))
        if entry.get("position") is not None:
            computed.setdefault("position", str(entry["position"]))
        document.elements[identifier] = SnapshotElement(
            identifier=identifier,
            rect=_parse_rect(entry.get("rect"), identifier),
            offset_width=_optional_number(entry.get("offset_width")),
            offset_height=_optional_number(entry.get("offset_height")),
            client_top=coerce_number(entry.get("client_top")),
            client_left=coerce_number(entry.get("client_left")),
            scroll_top=coerce_number(entry.get("scroll_top")),
            scroll_left=coerce_number(entry.get("scroll_left")),
            style=_string_map(entry.get("style")),
            computed_style=computed,
        )
        parent = entry.get("offset_parent")
        parent_links[identifier] = None if parent is None else str(parent)

    for identifier, parent in parent_links.items():
        if parent is None:
            continue
        if parent == ROOT_ID:
            document.elements[identifier].offset_parent = root
            continue
        if parent not in document.elements:
            raise SnapshotError(f"element {identifier!r} references unknown offset_parent {parent!r}")
        document.elements[identifier].offset_parent = document.elements[parent]
    return document, window


def load_snapshot(path: Path) -> tuple[SnapshotDocument, SnapshotWindow]:
    try:
        raw_text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SnapshotError(f"cannot read snapshot {path}: {exc}") from exc
    try:
        data = json.loads(raw_text)
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"snapshot {path} is not valid JSON: {exc}") from exc
    return build_snapshot(data)
