from __future__ import annotations

from pathlib import Path

from .fs import LocalFileSystem
from .models import PackedResult
from .naming import (
    background_offset,
    class_name,
    format_number,
    quote_ts,
    resolve_url,
    unique_identifiers,
)
from .options import Options


GENERATED_MARKER = "// DON'T MODIFY THIS FILE, IT IS GENERATED AUTOMATICALLY\n"
SIZES_FILE_NAME = "_sizes.scss"


class ArtifactWriter:
    def __init__(self, options: Options, fs: LocalFileSystem | None = None) -> None:
        self.options = options
        self.fs = fs if fs is not None else LocalFileSystem()

    def sprite_path(self, result: PackedResult) -> Path:
        return self.options.target_folder.icons / result.file_name

    def scss_path(self, result: PackedResult) -> Path:
        return self.options.target_folder.scss / f"_{result.group_name}.scss"

    def ts_path(self, result: PackedResult) -> Path:
        return self.options.target_folder.ts / f"{result.group_name}.ts"

    def sizes_path(self) -> Path:
        return self.options.target_folder.scss / SIZES_FILE_NAME

    def write_group(self, result: PackedResult) -> None:
        self.write_sprite(result)
        self.write_scss(result)
        self.write_ts(result)

    def discard_group(self, result: PackedResult) -> None:
        for path in (self.sprite_path(result), self.scss_path(result), self.ts_path(result)):
            self.fs.delete_file(path)

    def write_sprite(self, result: PackedResult) -> None:
        self.fs.write_bytes(self.sprite_path(result), result.image)

    def write_scss(self, result: PackedResult) -> None:
        self.fs.write_text(self.scss_path(result), render_group_scss(self.options, result))

    def write_ts(self, result: PackedResult) -> None:
        self.fs.write_text(self.ts_path(result), render_group_ts(self.options, result))

    def write_sizes(self, sizes: list[int]) -> None:
        self.fs.write_text(self.sizes_path(), render_sizes_scss(self.options, sizes))


def icon_class_list(options: Options, result: PackedResult, index: int) -> str:
    classes = options.classes
    icon = result.icons[index]
    return " ".join(
        [
            classes.base,
            class_name(classes.sprite, result.group_index),
            class_name(classes.size, int(icon.width)),
            class_name(classes.icon, index),
        ]
    )


def render_group_scss(options: Options, result: PackedResult) -> str:
    classes = options.classes
    sprite_class = class_name(classes.sprite, result.group_index)
    url = resolve_url(options.url, result.file_name)

    lines = [
        GENERATED_MARKER,
        "@import 'sizes';",
        "",
        f".{classes.base}.{sprite_class} {{",
        f"  background-image: url({url});",
    ]
    for index, icon in enumerate(result.icons):
        lines.extend(
            [
                "",
                f"  // {icon.file_name}",
                f"  &.{class_name(classes.icon, index)} {{",
                f"    background-position: {background_offset(icon.x)} {background_offset(icon.y)};",
                "  }",
            ]
        )
    lines.append("}")
    return "\n".join(lines) + "\n"


def render_group_ts(options: Options, result: PackedResult) -> str:
    identifiers = unique_identifiers([icon.file_name for icon in result.icons])

    enum_values: list[str] = []
    info_values: list[str] = []
    for index, (icon, identifier) in enumerate(zip(result.icons, identifiers)):
        classes = quote_ts(icon_class_list(options, result, index))
        enum_values.append(f"  {identifier} = {classes}")
        info = ", ".join(
            [
                classes,
                format_number(icon.x),
                format_number(icon.y),
                format_number(icon.width),
                format_number(icon.height),
            ]
        )
        info_values.append(f"  {quote_ts(icon.file_name)}: i({info})")

    lines = [
        GENERATED_MARKER + "// tslint:disable:max-line-length",
        f"import {{ IconInfoMap, iconInfo as i }} from {quote_ts(options.helper_module)};",
        "",
        "// Sprite name",
        f"export const SPRITE_NAME = {quote_ts(result.group_name)};",
        "",
        "export const enum Classes {",
        ",\n".join(enum_values),
        "}",
        "",
        "// Information about the icons",
        "export const info: IconInfoMap = {",
        ",\n".join(info_values),
        "};",
    ]
    return "\n".join(lines) + "\n"


def render_sizes_scss(options: Options, sizes: list[int]) -> str:
    base = options.classes.base
    size_prefix = options.classes.size
    lines = [
        GENERATED_MARKER,
        f"$sizes: {' '.join(str(size) for size in sizes)};",
        "%common-properties {",
        "  flex-shrink: 0;",
        "}",
        "@each $size in $sizes {",
        f"  .{base}.{size_prefix}#{{$size}} {{",
        "    @extend %common-properties;",
        "    width: #{$size}px;",
        "    height: #{$size}px;",
        "  }",
        "}",
    ]
    return "\n".join(lines) + "\n"
