"""Runtime context and value reads."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from jsonaccessors._convert import convert, convert_scalar
from jsonaccessors._errors import ExtractionError
from jsonaccessors._extract import extract, extract_each
from jsonaccessors._json import parse_json, read_json_file
from jsonaccessors._paths import parse_path
from jsonaccessors._types import Converted, JsonValue, Path
from jsonaccessors.schema import ValueType


@dataclass(frozen=True)
class JsonCtx:
    """Holds the document accessors read from.

    The wrapped value is never mutated, so one context can be shared by
    any number of concurrent accessor calls.
    """

    value: JsonValue

    @classmethod
    def from_text(cls, text: str | bytes) -> JsonCtx:
        return cls(parse_json(text))

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> JsonCtx:
        return cls(read_json_file(path))


def read(
    ctx: JsonCtx,
    path: Path,
    value_type: ValueType,
    each: Path | None = None,
) -> Converted:
    """Extract the value at ``path`` and convert it to ``value_type``.

    With ``each``, ``path`` must locate an array; ``each`` is extracted
    from every element and the converted values are collected.

    Raises:
        ExtractionError: On missing keys, out of range indexes, invalid
            paths or type mismatches.
    """
    if each is None:
        return convert(extract(ctx.value, path), value_type)
    element = value_type.element
    return [
        convert_scalar(v, element, i)
        for i, v in enumerate(extract_each(ctx.value, path, each))
    ]


def read_path(ctx: JsonCtx, expr: str, value_type: ValueType) -> Converted:
    """Like :func:`read`, with the path written as an expression (``a.b[0]``)."""
    return read(ctx, parse_path(expr), value_type)


@dataclass(frozen=True)
class Extraction:
    """Outcome of a read that reports failure as a value instead of raising."""

    value: Any = None
    error: ExtractionError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the value, or raise the captured error."""
        if self.error is not None:
            raise self.error
        return self.value

    def value_or(self, default: Any) -> Any:
        return default if self.error is not None else self.value


def try_read(
    ctx: JsonCtx,
    path: Path,
    value_type: ValueType,
    each: Path | None = None,
) -> Extraction:
    """Like :func:`read`, returning an :class:`Extraction` instead of raising."""
    try:
        return Extraction(value=read(ctx, path, value_type, each))
    except ExtractionError as e:
        return Extraction(error=e)
