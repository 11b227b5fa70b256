"""Kind classification for JSON values."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TypeAlias

from jsonaccessors._types import JsonValue


class Kind(enum.Enum):
    """Scalar and structural JSON kinds."""

    STRING = "string"
    NUMBER = "number"
    BOOL = "bool"
    OBJECT = "object"
    OTHER = "other"


@dataclass(frozen=True)
class ArrayOf:
    """Kind of a non-empty array, taken from its first element."""

    element: JsonKind


JsonKind: TypeAlias = Kind | ArrayOf


def classify(value: JsonValue) -> JsonKind:
    """Classify a JSON value.

    Arrays are classified by their first element only; later elements
    are never inspected. Empty arrays and nulls are ``Kind.OTHER``.
    """
    # bool is a subclass of int, so it must be tested first
    if isinstance(value, bool):
        return Kind.BOOL
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, (int, float)):
        return Kind.NUMBER
    if isinstance(value, dict):
        return Kind.OBJECT
    if isinstance(value, list):
        if not value:
            return Kind.OTHER
        return ArrayOf(classify(value[0]))
    return Kind.OTHER


def type_name(value: JsonValue) -> str:
    """Name of a value's JSON tag, for error messages."""
    if value is None:
        return "Null"
    if isinstance(value, bool):
        return "Bool"
    if isinstance(value, str):
        return "String"
    if isinstance(value, (int, float)):
        return "Number"
    if isinstance(value, list):
        return "Array"
    if isinstance(value, dict):
        return "Object"
    return type(value).__name__
