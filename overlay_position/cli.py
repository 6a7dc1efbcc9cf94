#!/usr/bin/env python3
"""Compute an overlay placement from a geometry snapshot."""
from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path

from overlay_position.config import PositionerConfig, apply_env_overrides, load_positioner_config
from overlay_position.logging_utils import configure_logging
from overlay_position.positioner import Positioner
from overlay_position.snapshot import SnapshotError, load_snapshot


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Place a target element relative to a host element")
    parser.add_argument("snapshot", type=Path, help="Path to a JSON geometry snapshot")
    parser.add_argument("--host", required=True, help="Id of the host element")
    parser.add_argument("--target", required=True, help="Id of the element being positioned")
    parser.add_argument("--placement", default="top", help="Placement token, e.g. bottom-left")
    parser.add_argument(
        "--attach-to-root",
        action="store_true",
        help="Target is rendered at the document root instead of beside the host",
    )
    parser.add_argument("--config", type=Path, help="Path to a positioner JSON config")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging and placement traces")
    parser.add_argument("--log-dir", type=Path, help="Also write logs to this directory")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging(args.debug, log_dir=args.log_dir)

    config = load_positioner_config(args.config) if args.config else PositionerConfig()
    config = apply_env_overrides(config)
    if args.debug and not config.trace_enabled:
        config = replace(config, trace_enabled=True)

    try:
        document, window = load_snapshot(args.snapshot)
        host = document.element(args.host)
        target = document.element(args.target)
    except SnapshotError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    positioner = Positioner(document, window, config=config)
    placement = positioner.position_elements(host, target, args.placement, args.attach_to_root)
    print(json.dumps(placement.as_dict()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
