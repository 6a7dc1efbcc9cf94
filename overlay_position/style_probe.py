"""Computed-style reads as an ordered chain of capability probes.

Each probe returns the property value or ``None`` when its source is missing
or does not know the property; the first non-empty answer wins.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Sequence, Tuple

StyleProbe = Callable[[Any, str], Optional[str]]

DEFAULT_PROBE_ORDER: Tuple[str, ...] = ("computed", "current", "inline")


def _lookup(style: Any, prop: str) -> Optional[str]:
    if style is None:
        return None
    if isinstance(style, Mapping):
        value = style.get(prop)
    else:
        value = getattr(style, prop, None)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def computed_style_probe(window: Any) -> StyleProbe:
    """Probe the rendering engine's live computed style via ``window``."""

    def probe(element: Any, prop: str) -> Optional[str]:
        getter = getattr(window, "get_computed_style", None)
        if getter is None:
            return None
        return _lookup(getter(element), prop)

    return probe


def current_style_probe(element: Any, prop: str) -> Optional[str]:
    """Probe the legacy per-element ``current_style`` mapping."""
    return _lookup(getattr(element, "current_style", None), prop)


def inline_style_probe(element: Any, prop: str) -> Optional[str]:
    return _lookup(getattr(element, "style", None), prop)


def build_probe_chain(window: Any, order: Iterable[str] = DEFAULT_PROBE_ORDER) -> Tuple[StyleProbe, ...]:
    available: Dict[str, StyleProbe] = {
        "computed": computed_style_probe(window),
        "current": current_style_probe,
        "inline": inline_style_probe,
    }
    chain = tuple(available[name] for name in order if name in available)
    if not chain:
        chain = tuple(available[name] for name in DEFAULT_PROBE_ORDER)
    return chain


def read_style(element: Any, prop: str, probes: Sequence[StyleProbe]) -> Optional[str]:
    for probe in probes:
        value = probe(element, prop)
        if value is not None:
            return value
    return None


def is_static_positioned(element: Any, probes: Sequence[StyleProbe]) -> bool:
    """Return True when ``position`` resolves to ``static`` (or cannot be read)."""
    position = read_style(element, "position", probes) or "static"
    return position.lower() == "static"
