from __future__ import annotations

import math
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path

from .errors import PackingError
from .layout import pack_rectangles
from .naming import format_number


SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

ET.register_namespace("", SVG_NS)
ET.register_namespace("xlink", XLINK_NS)

_LENGTH = re.compile(r"^\s*([0-9]*\.?[0-9]+)\s*(px)?\s*$")


@dataclass(frozen=True)
class Extent:
    inner: float
    outer: float


@dataclass(frozen=True)
class ShapeGeometry:
    name: str
    width: Extent
    height: Extent
    # top-left of the padded box, negated the way background-position expects
    absolute_x: float
    absolute_y: float


@dataclass(frozen=True)
class VectorSheet:
    image: bytes
    width: int
    height: int
    shapes: list[ShapeGeometry]


def parse_length(value: str | None) -> float | None:
    if value is None:
        return None
    match = _LENGTH.match(value)
    if match is None:
        return None
    return float(match.group(1))


def parse_view_box(value: str | None) -> tuple[float, float, float, float] | None:
    if not value:
        return None
    parts = value.replace(",", " ").split()
    if len(parts) != 4:
        return None
    try:
        min_x, min_y, width, height = (float(part) for part in parts)
    except ValueError:
        return None
    return min_x, min_y, width, height


def read_svg(path: Path) -> ET.Element:
    try:
        root = ET.fromstring(path.read_bytes())
    except ET.ParseError as e:
        raise PackingError(f"Cannot parse SVG '{path}': {e}") from e
    if root.tag != f"{{{SVG_NS}}}svg":
        raise PackingError(f"'{path}' is not an SVG document")
    return root


def svg_size(root: ET.Element, path: Path) -> tuple[float, float]:
    width = parse_length(root.get("width"))
    height = parse_length(root.get("height"))
    view_box = parse_view_box(root.get("viewBox"))
    if view_box is not None:
        if width is None:
            width = view_box[2]
        if height is None:
            height = view_box[3]
    if (width is None) or (height is None):
        raise PackingError(f"SVG '{path}' has neither width/height nor a usable viewBox")
    return width, height


def build_vector_sheet(files: list[Path], padding: int = 0) -> VectorSheet:
    if not files:
        raise PackingError("No shapes to pack")

    roots: list[ET.Element] = []
    inner_sizes: list[tuple[float, float]] = []
    for path in files:
        root = read_svg(path)
        roots.append(root)
        inner_sizes.append(svg_size(root, path))

    outer_sizes = [(w + (2 * padding), h + (2 * padding)) for w, h in inner_sizes]
    boxes = [(math.ceil(w), math.ceil(h)) for w, h in outer_sizes]
    positions, sheet_width, sheet_height = pack_rectangles(boxes)

    sheet = ET.Element(
        f"{{{SVG_NS}}}svg",
        {
            "width": str(sheet_width),
            "height": str(sheet_height),
            "viewBox": f"0 0 {sheet_width} {sheet_height}",
        },
    )

    shapes: list[ShapeGeometry] = []
    for path, root, (inner_w, inner_h), (outer_w, outer_h), (x, y) in zip(
        files, roots, inner_sizes, outer_sizes, positions
    ):
        if root.get("viewBox") is None:
            root.set("viewBox", f"0 0 {format_number(inner_w)} {format_number(inner_h)}")
        root.set("id", path.stem)
        root.set("x", format_number(x + padding))
        root.set("y", format_number(y + padding))
        root.set("width", format_number(inner_w))
        root.set("height", format_number(inner_h))
        sheet.append(root)

        shapes.append(
            ShapeGeometry(
                name=path.stem,
                width=Extent(inner=inner_w, outer=outer_w),
                height=Extent(inner=inner_h, outer=outer_h),
                absolute_x=-x,
                absolute_y=-y,
            )
        )

    body = ET.tostring(sheet, encoding="unicode")
    image = ('<?xml version="1.0" encoding="utf-8"?>' + body + "\n").encode("utf-8")
    return VectorSheet(image=image, width=sheet_width, height=sheet_height, shapes=shapes)
