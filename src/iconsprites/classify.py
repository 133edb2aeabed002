from __future__ import annotations

from pathlib import Path

from .errors import ClassificationError
from .fs import LocalFileSystem
from .models import (
    RASTER_EXTENSION,
    VECTOR_EXTENSION,
    Classification,
    Invalid,
    RasterBatch,
    Skip,
    VectorBatch,
)
from .options import SpriteGroupSpec


def candidate_files(spec: SpriteGroupSpec, fs: LocalFileSystem) -> list[Path]:
    return [
        spec.source_folder / file_name
        for file_name in fs.read_dir(spec.source_folder)
        if spec.include.search(file_name)
    ]


def distinct_extensions(files: list[Path]) -> list[str]:
    extensions: list[str] = []
    for path in files:
        ext = path.suffix.lower()
        if ext not in extensions:
            extensions.append(ext)
    return extensions


def check_icon_names(files: list[Path]) -> None:
    owners: dict[str, str] = {}
    for path in files:
        first = owners.setdefault(path.stem, path.name)
        if first != path.name:
            raise ClassificationError(f'Files "{first}" and "{path.name}" share the icon name "{path.stem}".')


def batch_for(spec: SpriteGroupSpec, files: list[Path]) -> RasterBatch | VectorBatch:
    extensions = distinct_extensions(files)
    if len(extensions) > 1:
        raise ClassificationError(
            f'Regular expression "{spec.include.pattern}" finds different types of files: {", ".join(extensions)}.'
        )

    check_icon_names(files)
    ext = extensions[0]
    if ext == RASTER_EXTENSION:
        return RasterBatch(files=tuple(files))
    if ext == VECTOR_EXTENSION:
        return VectorBatch(files=tuple(files))
    raise ClassificationError(f'Unsupported file extension: "{ext}".')


def classify(spec: SpriteGroupSpec, fs: LocalFileSystem) -> Classification:
    try:
        files = candidate_files(spec, fs)
    except OSError as e:
        return Invalid(f"Cannot read source folder '{spec.source_folder}': {e}")

    if not files:
        return Skip()

    try:
        return batch_for(spec, files)
    except ClassificationError as e:
        return Invalid(str(e))
