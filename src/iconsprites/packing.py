from __future__ import annotations

from pathlib import Path
from typing import Protocol

from .models import (
    RASTER_EXTENSION,
    VECTOR_EXTENSION,
    IconPlacement,
    PackFailure,
    PackOutcome,
    PackSuccess,
)
from .raster import build_raster_sheet
from .vector import build_vector_sheet


class Packer(Protocol):
    extension: str

    def pack(self, files: list[Path], padding: int) -> PackOutcome: ...


def failure_message(error: Exception) -> str:
    text = str(error).strip()
    return text if text else type(error).__name__


class RasterPacker:
    extension = RASTER_EXTENSION

    def pack(self, files: list[Path], padding: int) -> PackOutcome:
        try:
            sheet = build_raster_sheet(list(files), padding)
        except Exception as e:
            return PackFailure(failure_message(e))

        placements = tuple(
            IconPlacement(
                file_name=path.stem,
                x=coords.x,
                y=coords.y,
                width=coords.width,
                height=coords.height,
            )
            for path, coords in sheet.coordinates.items()
        )
        return PackSuccess(image=sheet.image, placements=placements)


class VectorPacker:
    extension = VECTOR_EXTENSION

    def pack(self, files: list[Path], padding: int) -> PackOutcome:
        try:
            sheet = build_vector_sheet(list(files), padding)
        except Exception as e:
            return PackFailure(failure_message(e))

        placements: list[IconPlacement] = []
        for shape in sheet.shapes:
            margin_x = (shape.width.outer - shape.width.inner) / 2
            margin_y = (shape.height.outer - shape.height.inner) / 2
            placements.append(
                IconPlacement(
                    file_name=shape.name,
                    width=shape.width.inner,
                    height=shape.height.inner,
                    x=abs(shape.absolute_x - margin_x),
                    y=abs(shape.absolute_y - margin_y),
                )
            )
        return PackSuccess(image=sheet.image, placements=tuple(placements))


def default_packers() -> dict[str, Packer]:
    return {
        RASTER_EXTENSION: RasterPacker(),
        VECTOR_EXTENSION: VectorPacker(),
    }
