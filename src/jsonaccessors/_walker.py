"""Schema walker: finds the leaves of a sample document."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from jsonaccessors._constants import DEFAULT_MAX_WALK_DEPTH
from jsonaccessors._errors import ERR_MSG_DEPTH_EXCEEDED, MaxDepthExceededError
from jsonaccessors._kinds import ArrayOf, Kind, classify
from jsonaccessors._paths import format_path
from jsonaccessors._types import JsonValue, Path
from jsonaccessors.schema import ValueType

_ARRAY_OF_OBJECTS = ArrayOf(Kind.OBJECT)


@dataclass(frozen=True)
class Leaf:
    """A value the walker exposes as an accessor instead of recursing into."""

    path: Path
    value_type: ValueType
    each: Path | None = None


class _Walker:
    def __init__(self, collectors: bool, max_depth: int) -> None:
        self._collectors = collectors
        self._max_depth = max_depth
        self.leaves: list[Leaf] = []

    def _check_depth(self, path: Path, depth: int) -> None:
        if depth > self._max_depth:
            raise MaxDepthExceededError(
                ERR_MSG_DEPTH_EXCEEDED,
                f"depth {depth} at {format_path(path)} exceeds limit {self._max_depth}",
            )

    def container(self, path: Path, value: JsonValue, depth: int) -> None:
        """Recurse into every member of an object or element of an array."""
        if isinstance(value, dict):
            for key, child in value.items():
                self.field((*path, key), child, depth + 1)
        elif isinstance(value, list):
            start = len(self.leaves)
            for i, child in enumerate(value):
                self.field((*path, str(i)), child, depth + 1)
            if self._collectors and classify(value) == _ARRAY_OF_OBJECTS:
                self.leaves.extend(
                    _collector_leaves(path, len(value), self.leaves[start:])
                )

    def field(self, path: Path, value: JsonValue, depth: int) -> None:
        """Emit a leaf for a primitive field or recurse into a container."""
        self._check_depth(path, depth)
        kind = classify(value)
        if kind is Kind.OBJECT or kind == _ARRAY_OF_OBJECTS:
            self.container(path, value, depth)
            return
        value_type = ValueType.from_kind(kind)
        if value_type is not None:
            self.leaves.append(Leaf(path, value_type))
        # nulls, empty arrays and arrays of arrays are dropped


def _collector_leaves(
    array_path: Path,
    length: int,
    element_leaves: list[Leaf],
) -> list[Leaf]:
    """Leaves collecting one scalar field across every array element.

    Only suffixes present in every element with a single scalar type are
    collected.
    """
    depth = len(array_path)
    found: dict[Path, dict[str, ValueType]] = {}
    for leaf in element_leaves:
        if leaf.each is not None or leaf.value_type.is_list:
            continue
        index, suffix = leaf.path[depth], leaf.path[depth + 1:]
        found.setdefault(suffix, {})[index] = leaf.value_type
    collected = []
    for suffix, types in found.items():
        if len(types) == length and len(set(types.values())) == 1:
            value_type = next(iter(types.values()))
            collected.append(Leaf(array_path, value_type.list_of(), suffix))
    return collected


def _run(step: Callable[[Path, JsonValue, int], None], path: Path, value: JsonValue) -> None:
    try:
        step(path, value, 0)
    except RecursionError as e:
        raise MaxDepthExceededError(
            ERR_MSG_DEPTH_EXCEEDED,
            "document nesting exceeds the interpreter recursion limit",
            wrapped=e,
        ) from e


def walk(
    path_prefix: Path,
    value: JsonValue,
    *,
    collectors: bool = False,
    max_depth: int = DEFAULT_MAX_WALK_DEPTH,
) -> list[Leaf]:
    """Find the leaves of ``value``, located under ``path_prefix``.

    Objects recurse by key in document order and arrays of objects by
    index; neither produces a leaf of its own. Primitive scalars and arrays
    of primitives produce one leaf each. Nulls, empty arrays and arrays of
    anything else produce nothing.

    Raises:
        MaxDepthExceededError: If nesting exceeds ``max_depth``.
    """
    walker = _Walker(collectors, max_depth)
    _run(walker.field, tuple(path_prefix), value)
    return walker.leaves


def walk_document(
    document: JsonValue,
    *,
    collectors: bool = False,
    max_depth: int = DEFAULT_MAX_WALK_DEPTH,
) -> list[Leaf]:
    """Find the leaves of a whole document.

    The root is always treated as a container: a top-level array is walked
    element by element whatever its element kind, and a top-level scalar
    yields no leaves.
    """
    walker = _Walker(collectors, max_depth)
    _run(walker.container, (), document)
    return walker.leaves
