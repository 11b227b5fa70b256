"""Runtime conversion of extracted values to declared types."""

from __future__ import annotations

import math

from jsonaccessors._errors import TypeMismatchError
from jsonaccessors._kinds import type_name
from jsonaccessors._types import Converted, JsonValue, Scalar
from jsonaccessors.schema import ValueType


def _to_float(value: int | float) -> float:
    try:
        return float(value)
    except OverflowError:
        # integers beyond double range widen to infinity
        return math.inf if value > 0 else -math.inf


def convert_scalar(
    value: JsonValue,
    value_type: ValueType,
    index: int | None = None,
) -> Scalar:
    """Convert one value to a scalar type without coercing between kinds.

    Raises:
        TypeMismatchError: If the value's JSON tag does not match.
    """
    if value_type is ValueType.STRING and isinstance(value, str):
        return value
    if value_type is ValueType.BOOLEAN and isinstance(value, bool):
        return value
    if (
        value_type is ValueType.NUMBER
        and isinstance(value, (int, float))
        and not isinstance(value, bool)
    ):
        return _to_float(value)
    raise TypeMismatchError(
        value_type.label,
        type_name(value),
        index,
        f"cannot convert {value!r} to {value_type.label}",
    )


def convert(value: JsonValue, value_type: ValueType) -> Converted:
    """Convert an extracted value to ``value_type``.

    List types convert every element in order and fail on the first
    element that does not match, wherever it sits in the array.

    Raises:
        TypeMismatchError: On any tag mismatch.
    """
    if not value_type.is_list:
        return convert_scalar(value, value_type)
    if not isinstance(value, list):
        raise TypeMismatchError(
            value_type.label,
            type_name(value),
            internal_details=f"expected an array, got {value!r}",
        )
    element = value_type.element
    return [convert_scalar(v, element, i) for i, v in enumerate(value)]
