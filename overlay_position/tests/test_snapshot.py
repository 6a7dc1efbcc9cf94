from __future__ import annotations

import json
from pathlib import Path

import pytest

from overlay_position.geometry import Rect
from overlay_position.positioner import Positioner
from overlay_position.snapshot import SnapshotError, build_snapshot, load_snapshot

SNAPSHOT = {
    "scroll": {"x": 0, "y": 120},
    "elements": [
        {
            "id": "button",
            "rect": {"top": 80, "left": 150, "width": 40, "height": 20},
            "offset_parent": "panel",
        },
        {
            "id": "panel",
            "rect": {"top": 30, "left": 100, "width": 400, "height": 300},
            "position": "relative",
            "offset_parent": "root",
            "client_top": 1,
            "client_left": 1,
        },
        {
            "id": "tooltip",
            "offset_width": 10,
            "offset_height": 6,
            "style": {"position": "absolute"},
        },
    ],
}


def test_build_snapshot_links_parents_declared_later() -> None:
    document, _ = build_snapshot(SNAPSHOT)

    button = document.element("button")
    panel = document.element("panel")

    assert button.offset_parent is panel
    assert panel.offset_parent is document.root
    assert document.element("tooltip").offset_parent is None
    assert panel.computed_style == {"position": "relative"}


def test_snapshot_scroll_feeds_document_rects() -> None:
    document, window = build_snapshot(SNAPSHOT)
    positioner = Positioner(document, window)

    assert window.page_y_offset == 120.0
    assert positioner.offset(document.element("button")) == Rect(top=200.0, left=150.0, width=40.0, height=20.0)
    assert positioner.position(document.element("button")) == Rect(top=49.0, left=49.0, width=40.0, height=20.0)


def test_boxless_element_uses_offset_size() -> None:
    document, window = build_snapshot(SNAPSHOT)
    rect = Positioner(document, window).offset(document.element("tooltip"))

    assert (rect.width, rect.height) == (10.0, 6.0)


def test_unknown_element_id_raises() -> None:
    document, _ = build_snapshot(SNAPSHOT)

    with pytest.raises(SnapshotError, match="no element with id 'missing'"):
        document.element("missing")


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ([], "must be a JSON object"),
        ({"elements": {}}, "must be a list"),
        ({"elements": [{"rect": {}}]}, "needs an 'id'"),
        ({"elements": [{"id": "a"}, {"id": "a"}]}, "duplicate element id 'a'"),
        ({"elements": [{"id": "root"}]}, "duplicate element id 'root'"),
        ({"elements": [{"id": "a", "offset_parent": "ghost"}]}, "unknown offset_parent 'ghost'"),
        ({"elements": [{"id": "a", "rect": [1, 2]}]}, "rect must be an object"),
    ],
)
def test_inconsistent_snapshots_are_rejected(payload, message) -> None:
    with pytest.raises(SnapshotError, match=message):
        build_snapshot(payload)


def test_load_snapshot_reads_json_file(tmp_path: Path) -> None:
    path = tmp_path / "page.json"
    path.write_text(json.dumps(SNAPSHOT), encoding="utf-8")

    document, _ = load_snapshot(path)

    assert set(document.elements) == {"button", "panel", "tooltip"}


def test_load_snapshot_reports_missing_and_malformed_files(tmp_path: Path) -> None:
    with pytest.raises(SnapshotError, match="cannot read snapshot"):
        load_snapshot(tmp_path / "absent.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{", encoding="utf-8")
    with pytest.raises(SnapshotError, match="not valid JSON"):
        load_snapshot(broken)


def test_load_snapshot_reports_undecodable_file(tmp_path: Path) -> None:
    path = tmp_path / "page.json"
    path.write_bytes(b'{"elements": [{"id": "\xff"}]}')

    with pytest.raises(SnapshotError, match="cannot read snapshot"):
        load_snapshot(path)
