from __future__ import annotations

import re


SPRITE_FILE_PLACEHOLDER = "#SPRITE_FILE"

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")


def class_name(prefix: str, index: int) -> str:
    return f"{prefix}{index}"


def resolve_url(template: str, sprite_file: str) -> str:
    return template.replace(SPRITE_FILE_PLACEHOLDER, sprite_file, 1)


def split_words(value: str) -> list[str]:
    spaced = _ACRONYM_BOUNDARY.sub(r"\1 \2", _CAMEL_BOUNDARY.sub(r"\1 \2", value.strip()))
    words: list[str] = []
    current: list[str] = []
    for ch in spaced:
        if ch.isascii() and ch.isalnum():
            current.append(ch)
            continue
        if current:
            words.append("".join(current))
            current = []
    if current:
        words.append("".join(current))
    return words


def pascal_case(value: str) -> str:
    result = "".join(word[0].upper() + word[1:].lower() for word in split_words(value))
    if not result:
        result = "Icon"
    if result[0].isdigit():
        result = f"N{result}"
    return result


def unique_identifiers(names: list[str]) -> list[str]:
    used: set[str] = set()
    out: list[str] = []
    for name in names:
        base = pascal_case(name)
        candidate = base
        suffix = 1
        while candidate in used:
            suffix += 1
            candidate = f"{base}{suffix}"
        used.add(candidate)
        out.append(candidate)
    return out


def format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.6f}".rstrip("0").rstrip(".")


def background_offset(value: float) -> str:
    if value == 0:
        return "0"
    return f"-{format_number(value)}px"


def quote_ts(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"
