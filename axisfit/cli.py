from __future__ import annotations

import argparse
from dataclasses import asdict
import json
import logging
from pathlib import Path
import sys
from typing import Any, Sequence

from axisfit.adapters import field_from_values
from axisfit.descriptor import AxisDescriptor
from axisfit.errors import AxisConfigError
from axisfit.fields import Field, Range
from axisfit.settings import DEFAULT_SETTINGS, AxisLayoutSettings, load_settings, settings_from_env


def load_axis_document(path: str | Path, *, settings: AxisLayoutSettings = DEFAULT_SETTINGS) -> AxisDescriptor:
    try:
        with Path(path).open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as exc:
        raise AxisConfigError(f"cannot read axis document {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise AxisConfigError(f"invalid axis document {path}: {exc}") from exc
    return axis_from_document(raw, settings=settings)


def axis_from_document(raw: Any, *, settings: AxisLayoutSettings = DEFAULT_SETTINGS) -> AxisDescriptor:
    if not isinstance(raw, dict):
        raise AxisConfigError("axis document must be an object")
    try:
        dimension = str(raw["dimension"])
        categorical = raw["categorical"]
    except KeyError as exc:
        raise AxisConfigError(f"axis document missing required field: {exc.args[0]}") from exc
    if not isinstance(categorical, bool):
        raise AxisConfigError("categorical must be a boolean")
    title = raw.get("title")
    if title is not None and not isinstance(title, str):
        raise AxisConfigError("title must be a string")
    tick_count = raw.get("tick_count")
    if tick_count is not None and (isinstance(tick_count, bool) or not isinstance(tick_count, int)):
        raise AxisConfigError("tick_count must be an integer")
    raw_fields = raw.get("fields", [])
    if not isinstance(raw_fields, list):
        raise AxisConfigError("fields must be a list")
    return AxisDescriptor.create(
        dimension,
        [_field_from_document(item, idx) for idx, item in enumerate(raw_fields)],
        categorical,
        user_title=title,
        tick_count=tick_count,
        settings=settings,
    )


def _field_from_document(raw: Any, idx: int) -> Field:
    if not isinstance(raw, dict):
        raise AxisConfigError(f"fields[{idx}] must be an object")
    name = raw.get("name")
    if not isinstance(name, str) or not name:
        raise AxisConfigError(f"fields[{idx}].name must be a non-empty string")
    values = raw.get("values", [])
    if not isinstance(values, list):
        raise AxisConfigError(f"fields[{idx}].values must be a list")
    transform = raw.get("transform")
    if transform not in (None, "linear", "log", "root"):
        raise AxisConfigError(f"fields[{idx}].transform must be one of linear, log, root")
    return field_from_values(
        name,
        [_value_from_document(v) for v in values],
        label=raw.get("label"),
        original_label=raw.get("original_label"),
        transform=transform,
        synthetic=bool(raw.get("synthetic", False)),
        is_date=raw.get("date"),
    )


def _value_from_document(raw: Any) -> Any:
    if isinstance(raw, dict) and set(raw) == {"low", "high"}:
        return Range(low=raw["low"], high=raw["high"])
    return raw


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="axisfit")
    parser.add_argument("--settings", type=Path, default=None, help="TOML file overriding layout constants.")
    parser.add_argument("--log-level", default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)

    layout = sub.add_parser("layout", help="Lay out one axis described by a JSON document.")
    layout.add_argument("axis", type=Path)
    layout.add_argument("--orientation", choices=["horizontal", "vertical"], default="horizontal")
    layout.add_argument("--space", type=float, required=True, help="Available space in pixels.")
    layout.add_argument("--fill-to-edge", action="store_true")

    sub.add_parser("settings", help="Print the effective layout constants.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    try:
        return _run(args)
    except (OSError, ValueError) as exc:
        print(f"axisfit: error: {exc}", file=sys.stderr)
        return 2


def _run(args: argparse.Namespace) -> int:
    settings = load_settings(args.settings) if args.settings is not None else settings_from_env()

    if args.command == "settings":
        print(json.dumps(asdict(settings), indent=2, sort_keys=True))
        return 0

    axis = load_axis_document(args.axis, settings=settings)
    if args.orientation == "horizontal":
        axis.layout_horizontally(args.space, fill_to_edge=args.fill_to_edge)
    else:
        axis.layout_vertically(args.space)
    print(json.dumps(axis.as_dict(), indent=2, sort_keys=True))
    return 0
