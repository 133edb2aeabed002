from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union


RASTER_EXTENSION = ".png"
VECTOR_EXTENSION = ".svg"


@dataclass(frozen=True)
class IconPlacement:
    file_name: str
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class PackSuccess:
    image: bytes
    placements: tuple[IconPlacement, ...]


@dataclass(frozen=True)
class PackFailure:
    message: str


PackOutcome = Union[PackSuccess, PackFailure]


@dataclass(frozen=True)
class PackedResult:
    group_index: int
    group_name: str
    extension: str
    icons: tuple[IconPlacement, ...]
    image: bytes

    @property
    def file_name(self) -> str:
        return f"{self.group_name}{self.extension}"


@dataclass(frozen=True)
class Skip:
    pass


@dataclass(frozen=True)
class RasterBatch:
    files: tuple[Path, ...]
    extension: str = RASTER_EXTENSION


@dataclass(frozen=True)
class VectorBatch:
    files: tuple[Path, ...]
    extension: str = VECTOR_EXTENSION


@dataclass(frozen=True)
class Invalid:
    reason: str


Classification = Union[Skip, RasterBatch, VectorBatch, Invalid]
