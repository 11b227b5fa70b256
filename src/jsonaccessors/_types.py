"""Type aliases for JSON values and accessor paths."""

from __future__ import annotations

from typing import TypeAlias

JsonPrimitive: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonPrimitive | list["JsonValue"] | dict[str, "JsonValue"]

Path: TypeAlias = tuple[str, ...]
"""Ordered key and index segments; indices use their decimal string form."""

Scalar: TypeAlias = str | float | bool
Converted: TypeAlias = Scalar | list[str] | list[float] | list[bool]

__all__ = [
    "Converted",
    "JsonPrimitive",
    "JsonValue",
    "Path",
    "Scalar",
]
