from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import pytest


def pytest_runtest_setup(item):
    if item.get_closest_marker("pyqt_required"):
        if not os.getenv("PYQT_TESTS"):
            pytest.skip("PYQT_TESTS not set; skipping PyQt-dependent test")


@pytest.fixture(autouse=True)
def _restore_package_logger():
    logger = logging.getLogger("OverlayPosition")
    saved = (logger.level, logger.propagate, list(logger.handlers))
    yield
    for handler in list(logger.handlers):
        if handler not in saved[2]:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(saved[0])
    logger.propagate = saved[1]


@dataclass(eq=False)
class FakeElement:
    top: float = 0.0
    left: float = 0.0
    width: float = 0.0
    height: float = 0.0
    offset_width: Optional[float] = None
    offset_height: Optional[float] = None
    offset_parent: Optional[Any] = None
    client_top: float = 0.0
    client_left: float = 0.0
    scroll_top: float = 0.0
    scroll_left: float = 0.0
    style: Dict[str, str] = field(default_factory=dict)
    computed: Optional[Dict[str, str]] = None
    current_style: Optional[Dict[str, str]] = None
    has_box: bool = True

    def bounding_client_rect(self):
        if not self.has_box:
            return None
        return {"top": self.top, "left": self.left, "width": self.width, "height": self.height}


@dataclass(eq=False)
class FakeDocument:
    root: Any = field(default_factory=FakeElement)

    @property
    def scrolling_element(self):
        return self.root


@dataclass
class FakeWindow:
    page_x_offset: Optional[float] = None
    page_y_offset: Optional[float] = None

    def get_computed_style(self, element):
        return getattr(element, "computed", None)


@pytest.fixture
def document() -> FakeDocument:
    return FakeDocument()


@pytest.fixture
def window() -> FakeWindow:
    return FakeWindow()


@pytest.fixture
def make_element():
    return FakeElement
