from __future__ import annotations

from types import SimpleNamespace

from overlay_position.geometry import GeometryAccessor, Rect


def test_raw_rect_reads_bounding_box(document, window, make_element) -> None:
    element = make_element(top=12.0, left=7.5, width=30.0, height=10.0)
    accessor = GeometryAccessor(document, window)

    assert accessor.raw_rect(element) == Rect(top=12.0, left=7.5, width=30.0, height=10.0)


def test_raw_rect_falls_back_to_offset_size_for_boxless_elements(document, window, make_element) -> None:
    element = make_element(top=4.0, left=2.0, width=0.0, height=0.0, offset_width=18.0, offset_height=9.0)
    accessor = GeometryAccessor(document, window)

    rect = accessor.raw_rect(element)

    assert (rect.width, rect.height) == (18.0, 9.0)
    assert (rect.top, rect.left) == (4.0, 2.0)


def test_raw_rect_without_any_size_is_zero(document, window, make_element) -> None:
    element = make_element(has_box=False)
    accessor = GeometryAccessor(document, window)

    assert accessor.raw_rect(element) == Rect(top=0.0, left=0.0, width=0.0, height=0.0)


def test_raw_rect_accepts_attribute_boxes(document, window) -> None:
    box = SimpleNamespace(top=1, left=2, width=3, height=4)
    element = SimpleNamespace(bounding_client_rect=lambda: box, offset_width=None, offset_height=None)
    accessor = GeometryAccessor(document, window)

    assert accessor.raw_rect(element) == Rect(top=1.0, left=2.0, width=3.0, height=4.0)


def test_document_rect_adds_window_page_offset(document, window, make_element) -> None:
    window.page_y_offset = 200.0
    window.page_x_offset = 15.0
    element = make_element(top=10.0, left=5.0, width=8.0, height=8.0)
    accessor = GeometryAccessor(document, window)

    assert accessor.document_rect(element) == Rect(top=210.0, left=20.0, width=8.0, height=8.0)


def test_document_rect_falls_back_to_scrolling_element(document, window, make_element) -> None:
    document.root.scroll_top = 40.0
    document.root.scroll_left = 3.0
    element = make_element(top=10.0, left=5.0, width=8.0, height=8.0)
    accessor = GeometryAccessor(document, window)

    assert accessor.document_rect(element) == Rect(top=50.0, left=8.0, width=8.0, height=8.0)


def test_document_rect_is_scroll_independent(document, window, make_element) -> None:
    accessor = GeometryAccessor(document, window)
    element = make_element(top=300.0, left=0.0, width=10.0, height=10.0)
    before = accessor.document_rect(element)

    # Scrolling by 120px moves the viewport box up by the same amount.
    window.page_y_offset = 120.0
    element.top = 180.0

    assert accessor.document_rect(element) == before
