from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .errors import OptionsError
from .naming import SPRITE_FILE_PLACEHOLDER


DEFAULT_INCLUDE = re.compile(r"\.png$", re.IGNORECASE)
DEFAULT_HELPER_MODULE = "common/sprite"


@dataclass(frozen=True)
class SpriteGroupSpec:
    name: str
    source_folder: Path
    include: re.Pattern[str] = DEFAULT_INCLUDE


@dataclass(frozen=True)
class TargetFolder:
    icons: Path
    scss: Path
    ts: Path

    def all(self) -> tuple[Path, Path, Path]:
        return self.icons, self.scss, self.ts


@dataclass(frozen=True)
class CssClasses:
    base: str
    sprite: str
    size: str
    icon: str


@dataclass(frozen=True)
class Options:
    sprites: list[SpriteGroupSpec]
    target_folder: TargetFolder
    classes: CssClasses
    url: str
    padding: int = 0
    helper_module: str = DEFAULT_HELPER_MODULE


def validate_options(options: Options) -> Options:
    problems: list[str] = []

    seen: set[str] = set()
    for index, sprite in enumerate(options.sprites):
        if not sprite.name:
            problems.append(f"sprites[{index}] has an empty name")
        elif sprite.name in seen:
            problems.append(f"sprite name '{sprite.name}' is used more than once")
        seen.add(sprite.name)

    placeholder_count = options.url.count(SPRITE_FILE_PLACEHOLDER)
    if placeholder_count != 1:
        problems.append(
            f"url must contain {SPRITE_FILE_PLACEHOLDER} exactly once (found {placeholder_count})"
        )

    if options.padding < 0:
        problems.append(f"padding must be non-negative (got {options.padding})")

    for key in ("base", "sprite", "size", "icon"):
        if not getattr(options.classes, key):
            problems.append(f"classes.{key} must not be empty")

    if problems:
        raise OptionsError(problems)
    return options


def _require(data: dict[str, Any], key: str, where: str) -> Any:
    if key not in data:
        raise OptionsError([f"{where} is missing required key '{key}'"])
    return data[key]


def _object(value: Any, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise OptionsError([f"{where} must be an object"])
    return value


def _padding(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise OptionsError([f"padding must be a whole number (got {value!r})"])
    return value


def _compile_include(pattern: str | None) -> re.Pattern[str]:
    if pattern is None:
        return DEFAULT_INCLUDE
    try:
        return re.compile(pattern, re.IGNORECASE)
    except (re.error, TypeError) as e:
        raise OptionsError([f"include pattern {pattern!r} is not a valid regular expression: {e}"]) from e


def options_from_dict(data: dict[str, Any], base_dir: Path | None = None) -> Options:
    root = base_dir if base_dir is not None else Path.cwd()

    def resolve(value: Any, where: str) -> Path:
        if not isinstance(value, str):
            raise OptionsError([f"{where} must be a path string"])
        path = Path(value)
        return path if path.is_absolute() else root / path

    raw_sprites = _require(data, "sprites", "options")
    if not isinstance(raw_sprites, list):
        raise OptionsError(["sprites must be a list"])

    sprites: list[SpriteGroupSpec] = []
    for index, raw in enumerate(raw_sprites):
        where = f"sprites[{index}]"
        raw = _object(raw, where)
        sprites.append(
            SpriteGroupSpec(
                name=str(_require(raw, "name", where)),
                source_folder=resolve(_require(raw, "source_folder", where), f"{where}.source_folder"),
                include=_compile_include(raw.get("include")),
            )
        )

    target = _object(_require(data, "target_folder", "options"), "target_folder")
    classes = _object(_require(data, "classes", "options"), "classes")

    options = Options(
        sprites=sprites,
        target_folder=TargetFolder(
            icons=resolve(_require(target, "icons", "target_folder"), "target_folder.icons"),
            scss=resolve(_require(target, "scss", "target_folder"), "target_folder.scss"),
            ts=resolve(_require(target, "ts", "target_folder"), "target_folder.ts"),
        ),
        classes=CssClasses(
            base=str(_require(classes, "base", "classes")),
            sprite=str(_require(classes, "sprite", "classes")),
            size=str(_require(classes, "size", "classes")),
            icon=str(_require(classes, "icon", "classes")),
        ),
        url=str(_require(data, "url", "options")),
        padding=_padding(data.get("padding", 0)),
        helper_module=str(data.get("helper_module", DEFAULT_HELPER_MODULE)),
    )
    return validate_options(options)


def load_options(path: Path) -> Options:
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = json.load(handle)
        except json.JSONDecodeError as e:
            raise OptionsError([f"{path} is not valid JSON: {e}"]) from e
    if not isinstance(data, dict):
        raise OptionsError([f"{path} must contain a JSON object"])
    return options_from_dict(data, base_dir=path.resolve().parent)
