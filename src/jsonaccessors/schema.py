"""Accessor schema types: value types and accessor specifications."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from jsonaccessors._constants import COLLECTOR_INFIX
from jsonaccessors._kinds import ArrayOf, JsonKind, Kind
from jsonaccessors._naming import concat_path
from jsonaccessors._paths import format_path
from jsonaccessors._types import Path


class ValueType(enum.Enum):
    """Declared result type of an accessor."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    STRING_LIST = "string[]"
    NUMBER_LIST = "number[]"
    BOOLEAN_LIST = "boolean[]"

    @property
    def is_list(self) -> bool:
        return self in _ELEMENT_TYPES

    @property
    def element(self) -> ValueType:
        """Scalar type of list elements, or the type itself for scalars."""
        return _ELEMENT_TYPES.get(self, self)

    @property
    def label(self) -> str:
        """Human-readable name used in type mismatch messages."""
        if self.is_list:
            return f"[{_LABELS[self.element]}]"
        return _LABELS[self]

    @property
    def annotation(self) -> str:
        """Python return annotation for accessors of this type."""
        if self.is_list:
            return f"list[{_ANNOTATIONS[self.element]}]"
        return _ANNOTATIONS[self]

    def list_of(self) -> ValueType:
        return _LIST_TYPES[self.element]

    @classmethod
    def from_kind(cls, kind: JsonKind) -> ValueType | None:
        """Value type exposed for a kind, or None if the kind is not a leaf."""
        if isinstance(kind, ArrayOf):
            scalar = _SCALAR_KINDS.get(kind.element) if isinstance(kind.element, Kind) else None
            return scalar.list_of() if scalar is not None else None
        return _SCALAR_KINDS.get(kind)


_ELEMENT_TYPES = {
    ValueType.STRING_LIST: ValueType.STRING,
    ValueType.NUMBER_LIST: ValueType.NUMBER,
    ValueType.BOOLEAN_LIST: ValueType.BOOLEAN,
}
_LIST_TYPES = {v: k for k, v in _ELEMENT_TYPES.items()}
_LABELS = {
    ValueType.STRING: "String",
    ValueType.NUMBER: "Number",
    ValueType.BOOLEAN: "Boolean",
}
_ANNOTATIONS = {
    ValueType.STRING: "str",
    ValueType.NUMBER: "float",
    ValueType.BOOLEAN: "bool",
}
_SCALAR_KINDS = {
    Kind.STRING: ValueType.STRING,
    Kind.NUMBER: ValueType.NUMBER,
    Kind.BOOL: ValueType.BOOLEAN,
}


@dataclass(frozen=True)
class AccessorSpec:
    """A named accessor bound to a fixed path and a declared value type.

    ``each`` is set only for collector accessors: ``path`` then locates an
    array of objects and ``each`` is the path replayed inside every element.
    """

    identifier: str
    path: Path
    value_type: ValueType
    each: Path | None = None

    @property
    def is_collector(self) -> bool:
        return self.each is not None

    @property
    def location(self) -> Path:
        """Path plus collected suffix, used to tell accessors apart."""
        if self.each is None:
            return self.path
        return (*self.path, "*", *self.each)

    @property
    def expression(self) -> str:
        """The path as a path expression, e.g. ``a.b[0]``."""
        if self.each is None:
            return format_path(self.path)
        return f"{format_path(self.path)}[*]{format_path(self.each, relative=True)}"


def synthesize(
    path: Path,
    value_type: ValueType,
    each: Path | None = None,
) -> AccessorSpec:
    """Build the accessor specification for one leaf."""
    if each is None:
        return AccessorSpec(concat_path(path), tuple(path), value_type)
    identifier = concat_path((*path, COLLECTOR_INFIX, *each))
    return AccessorSpec(identifier, tuple(path), value_type, tuple(each))
