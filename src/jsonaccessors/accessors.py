"""Callable accessors bound from accessor specifications."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from jsonaccessors._naming import check_collisions
from jsonaccessors._runtime import Extraction, JsonCtx, read, try_read
from jsonaccessors._types import Converted
from jsonaccessors.schema import AccessorSpec

logger = logging.getLogger(__name__)


class Accessor:
    """Reads one field, described by an :class:`AccessorSpec`, from a context."""

    def __init__(self, spec: AccessorSpec) -> None:
        self.spec = spec
        self.__name__ = spec.identifier
        self.__doc__ = f"{spec.expression} as {spec.value_type.annotation}"

    def __call__(self, ctx: JsonCtx) -> Converted:
        return read(ctx, self.spec.path, self.spec.value_type, self.spec.each)

    def result(self, ctx: JsonCtx) -> Extraction:
        """Read without raising; failures are returned in the result."""
        return try_read(ctx, self.spec.path, self.spec.value_type, self.spec.each)

    def __repr__(self) -> str:
        return f"<Accessor {self.spec.identifier} {self.spec.value_type.annotation}>"


class AccessorSet:
    """Accessors in generation order with O(1) lookup by identifier.

    Attribute access (``accessors.a_b``) is a convenience for identifiers that
    are Python names. The set's own members win over accessors, so a field
    named ``get``, ``specs``, ``identifiers`` or ``read_all`` must be looked
    up by key: ``accessors["get"]``. Key lookup works for every identifier.
    """

    def __init__(self, specs: Iterable[AccessorSpec]) -> None:
        specs = list(specs)
        check_collisions(specs)
        self._accessors = [Accessor(s) for s in specs]
        self._index: dict[str, Accessor] = {a.__name__: a for a in self._accessors}

    @property
    def identifiers(self) -> list[str]:
        return list(self._index)

    @property
    def specs(self) -> list[AccessorSpec]:
        return [a.spec for a in self._accessors]

    def get(self, identifier: str) -> Accessor | None:
        return self._index.get(identifier)

    def read_all(self, ctx: JsonCtx) -> dict[str, Extraction]:
        """Run every accessor against ``ctx``, collecting results by identifier."""
        return {a.__name__: a.result(ctx) for a in self._accessors}

    def __getitem__(self, identifier: str) -> Accessor:
        return self._index[identifier]

    def __getattr__(self, name: str) -> Any:
        index = self.__dict__.get("_index", {})
        if name not in index:
            raise AttributeError(f"no accessor named {name!r}")
        return index[name]

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._index

    def __iter__(self) -> Iterator[Accessor]:
        return iter(self._accessors)

    def __len__(self) -> int:
        return len(self._accessors)


def bind(specs: Iterable[AccessorSpec]) -> AccessorSet:
    """Bind accessor specifications to callables.

    Raises:
        IdentifierCollisionError: If two specs share an identifier.
    """
    accessors = AccessorSet(specs)
    logger.debug("bound %d accessors", len(accessors))
    return accessors
