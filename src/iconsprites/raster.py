from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path

from PIL import Image

from .errors import PackingError
from .layout import pack_rectangles


@dataclass(frozen=True)
class RasterCoordinates:
    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class RasterSheet:
    image: bytes
    width: int
    height: int
    coordinates: dict[Path, RasterCoordinates]


def load_rgba(path: Path) -> Image.Image:
    with Image.open(path) as image:
        image.load()
        return image.convert("RGBA")


def build_raster_sheet(files: list[Path], padding: int = 0) -> RasterSheet:
    if not files:
        raise PackingError("No images to pack")

    images = [load_rgba(path) for path in files]
    boxes = [(image.width + padding, image.height + padding) for image in images]
    positions, used_width, used_height = pack_rectangles(boxes)

    sheet_width = max(1, used_width - padding)
    sheet_height = max(1, used_height - padding)
    sheet = Image.new("RGBA", (sheet_width, sheet_height), (0, 0, 0, 0))

    coordinates: dict[Path, RasterCoordinates] = {}
    for path, image, (x, y) in zip(files, images, positions):
        sheet.paste(image, (x, y))
        coordinates[path] = RasterCoordinates(x=x, y=y, width=image.width, height=image.height)

    buffer = io.BytesIO()
    sheet.save(buffer, format="PNG")
    return RasterSheet(
        image=buffer.getvalue(),
        width=sheet_width,
        height=sheet_height,
        coordinates=coordinates,
    )
