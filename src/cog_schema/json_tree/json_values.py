"""JSON value aliases shared by every schema stage."""

from __future__ import annotations

from typing import TypeAlias

JsonValue: TypeAlias = (
    None | bool | int | float | str | list["JsonValue"] | dict[str, "JsonValue"]
)
JsonContainer: TypeAlias = list[JsonValue] | dict[str, JsonValue]
