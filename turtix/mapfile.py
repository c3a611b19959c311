"""Reading level maps: sections of comma-separated object coordinates."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike

from turtix import config

OBJECT_KINDS = (
    "blocks",
    "thorns",
    "turtles",
    "gates",
    "weak_enemies",
    "strong_enemies",
    "gems",
    "stars",
)
_KINDS_WITH_VALUE = frozenset(
    {"blocks", "thorns", "gates", "weak_enemies", "strong_enemies"}
)
_ENEMY_KINDS = frozenset({"weak_enemies", "strong_enemies"})
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class MapEntry:
    """One object placed on the map."""

    kind: str
    x: int
    y: int
    value: str | None = None
    speed_bonus: int = 0


def _to_int(text: str) -> int:
    """Parse the leading integer of a field, ignoring what trails it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return int(match.group(1))


def parse_line(line: str, separator: str = config.SEPARATOR) -> list[str]:
    """Split a line into fields; a trailing separator adds no empty field."""
    fields = line.split(separator)
    if fields[-1] == "":
        fields.pop()
    return fields


def _make_entry(kind: str, fields: list[str]) -> MapEntry:
    needed = config.OBJECT_VALUE + 1 if kind in _KINDS_WITH_VALUE else config.Y_VALUE + 1
    if len(fields) < needed:
        raise ValueError(f"{kind} entry needs {needed} fields, got {fields!r}")
    x = _to_int(fields[config.X_VALUE])
    y = _to_int(fields[config.Y_VALUE])
    value = fields[config.OBJECT_VALUE] if len(fields) > config.OBJECT_VALUE else None
    bonus = _to_int(value) if kind in _ENEMY_KINDS else 0
    return MapEntry(kind, x, y, value, bonus)


def parse_map(lines: Iterable[str]) -> list[MapEntry]:
    """Turn map lines into entries; a line naming a kind starts its section."""
    entries = []
    kind = ""
    for raw in lines:
        fields = parse_line(raw.rstrip("\r\n"), config.SEPARATOR)
        if not fields:
            continue
        head = fields[config.OBJECT_TYPE_PLACE]
        if head in OBJECT_KINDS:
            kind = head
        elif kind:
            entries.append(_make_entry(kind, fields))
    return entries


def load_map(path: str | PathLike[str]) -> list[MapEntry]:
    """Read and parse a map file."""
    with open(path, encoding="utf-8") as handle:
        return parse_map(handle)