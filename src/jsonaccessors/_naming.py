"""Identifier derivation from accessor paths."""

from __future__ import annotations

import keyword
from collections.abc import Iterable
from typing import TYPE_CHECKING

from jsonaccessors._constants import (
    IDENTIFIER_SEPARATOR,
    ROOT_IDENTIFIER,
    SANITIZED_CHARACTERS,
)
from jsonaccessors._errors import (
    ERR_MSG_INVALID_IDENTIFIER,
    IdentifierCollisionError,
    InvalidIdentifierError,
)

if TYPE_CHECKING:
    from jsonaccessors.schema import AccessorSpec


def sanitize(segment: str) -> str:
    """Replace spaces, hyphens, periods and slashes with underscores."""
    return "".join("_" if ch in SANITIZED_CHARACTERS else ch for ch in segment)


def concat_path(path: Iterable[str]) -> str:
    """Join sanitized path segments into a single identifier.

    The empty path maps to ``root``.
    """
    segments = [sanitize(s) for s in path]
    if not segments:
        return ROOT_IDENTIFIER
    return IDENTIFIER_SEPARATOR.join(segments)


def validate_identifier(name: str, reserved: Iterable[str] = ()) -> None:
    """Validate that ``name`` can be emitted as a Python function name."""
    if not name.isidentifier():
        raise InvalidIdentifierError(
            ERR_MSG_INVALID_IDENTIFIER,
            f"identifier {name!r} contains characters not allowed in Python names",
        )
    if keyword.iskeyword(name):
        raise InvalidIdentifierError(
            ERR_MSG_INVALID_IDENTIFIER,
            f"identifier {name!r} is a Python keyword",
        )
    if name in set(reserved):
        raise InvalidIdentifierError(
            ERR_MSG_INVALID_IDENTIFIER,
            f"identifier {name!r} shadows a name the generated module needs",
        )


def check_collisions(specs: Iterable[AccessorSpec]) -> None:
    """Reject accessor sets where distinct paths share an identifier.

    Sanitizing maps several characters onto ``_``, so keys like
    ``"a-b"`` and ``"a.b"`` cannot both be exposed.
    """
    seen: dict[str, tuple[str, ...]] = {}
    for spec in specs:
        location = spec.location
        previous = seen.setdefault(spec.identifier, location)
        if previous != location:
            raise IdentifierCollisionError(spec.identifier, previous, location)
