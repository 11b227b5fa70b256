"""Runtime path extraction."""

from __future__ import annotations

from jsonaccessors._errors import (
    IndexOutOfBoundsError,
    InvalidPathError,
    MissingKeyError,
    TypeMismatchError,
)
from jsonaccessors._kinds import type_name
from jsonaccessors._paths import INDEX_RE, format_path
from jsonaccessors._types import JsonValue, Path


def _where(path: Path, position: int) -> str:
    return format_path(path[:position]) or "<root>"


def extract(value: JsonValue, path: Path) -> JsonValue:
    """Follow ``path`` from ``value`` and return the nested value.

    Object steps look the segment up as a key. Array steps require the
    segment to be a non-negative decimal integer below the array length.

    Raises:
        MissingKeyError: If an object lacks the next key.
        IndexOutOfBoundsError: If an index is past the end of an array.
        InvalidPathError: If a segment cannot be applied to the current
            value (a scalar, null, or a non-numeric segment on an array).
    """
    current = value
    for position, segment in enumerate(path):
        if isinstance(current, dict):
            if segment not in current:
                raise MissingKeyError(
                    segment,
                    f"key {segment!r} not found in object at {_where(path, position)}",
                )
            current = current[segment]
        elif isinstance(current, list) and INDEX_RE.fullmatch(segment):
            index = int(segment)
            if index >= len(current):
                raise IndexOutOfBoundsError(
                    index,
                    f"index {index} at {_where(path, position)} "
                    f"exceeds array length {len(current)}",
                )
            current = current[index]
        else:
            raise InvalidPathError(
                segment,
                f"segment {segment!r} cannot be applied to "
                f"{type_name(current)} at {_where(path, position)}",
            )
    return current


def extract_each(value: JsonValue, path: Path, each: Path) -> list[JsonValue]:
    """Extract ``each`` from every element of the array at ``path``.

    Any element failing extraction fails the whole call.
    """
    array = extract(value, path)
    if not isinstance(array, list):
        raise TypeMismatchError(
            "Array",
            type_name(array),
            internal_details=f"collector path {_where(path, len(path))} is not an array",
        )
    return [extract(element, each) for element in array]
