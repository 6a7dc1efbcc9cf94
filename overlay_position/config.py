"""Positioner configuration loader (JSON file plus environment overrides)."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping, Optional

from overlay_position.offset_resolver import DEFAULT_MAX_ANCESTOR_DEPTH
from overlay_position.style_probe import DEFAULT_PROBE_ORDER

TRACE_ENV_VAR = "OVERLAY_POSITION_TRACE"
MAX_DEPTH_ENV_VAR = "OVERLAY_POSITION_MAX_DEPTH"
MAX_ANCESTOR_DEPTH_MIN = 1
MAX_ANCESTOR_DEPTH_MAX = 4096
_KNOWN_PROBES = frozenset(DEFAULT_PROBE_ORDER)


@dataclass(frozen=True)
class PositionerConfig:
    max_ancestor_depth: int = DEFAULT_MAX_ANCESTOR_DEPTH
    trace_enabled: bool = False
    style_probe_order: tuple[str, ...] = DEFAULT_PROBE_ORDER


def _coerce_flag(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if value is None:
        return None
    token = str(value).strip().lower()
    if token in {"1", "true", "yes", "on"}:
        return True
    if token in {"0", "false", "no", "off"}:
        return False
    return None


def _coerce_depth(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        numeric = int(value)
    except (TypeError, ValueError):
        return None
    if numeric < MAX_ANCESTOR_DEPTH_MIN:
        return MAX_ANCESTOR_DEPTH_MIN
    if numeric > MAX_ANCESTOR_DEPTH_MAX:
        return MAX_ANCESTOR_DEPTH_MAX
    return numeric


def _coerce_probe_order(value: Any) -> Optional[tuple[str, ...]]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        return None
    cleaned = []
    for item in value:
        name = str(item).strip().lower()
        if name in _KNOWN_PROBES and name not in cleaned:
            cleaned.append(name)
    return tuple(cleaned) or None


def config_from_mapping(data: Mapping[str, Any]) -> PositionerConfig:
    defaults = PositionerConfig()
    depth = _coerce_depth(data.get("max_ancestor_depth"))
    trace = _coerce_flag(data.get("trace_enabled"))
    order = _coerce_probe_order(data.get("style_probe_order"))
    return PositionerConfig(
        max_ancestor_depth=depth if depth is not None else defaults.max_ancestor_depth,
        trace_enabled=trace if trace is not None else defaults.trace_enabled,
        style_probe_order=order if order is not None else defaults.style_probe_order,
    )


def load_positioner_config(path: Path) -> PositionerConfig:
    """Read positioner settings from a JSON object; defaults on any problem."""

    try:
        raw_text = path.read_text(encoding="utf-8")
        data = json.loads(raw_text)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        data = {}
    if not isinstance(data, dict):
        data = {}
    return config_from_mapping(data)


def apply_env_overrides(
    config: PositionerConfig,
    env: Optional[Mapping[str, str]] = None,
) -> PositionerConfig:
    environ = os.environ if env is None else env
    trace = _coerce_flag(environ.get(TRACE_ENV_VAR))
    depth = _coerce_depth(environ.get(MAX_DEPTH_ENV_VAR))
    if trace is not None:
        config = replace(config, trace_enabled=trace)
    if depth is not None:
        config = replace(config, max_ancestor_depth=depth)
    return config
