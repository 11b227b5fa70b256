"""Python source emission for accessor specifications."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from io import StringIO

from jsonaccessors._naming import check_collisions, validate_identifier
from jsonaccessors.schema import AccessorSpec

logger = logging.getLogger(__name__)

_RUNTIME_ALIAS = "_jsonaccessors"

RESERVED_MODULE_NAMES = frozenset({_RUNTIME_ALIAS, "__all__"})
"""Module-level names the generated code binds itself."""


def _write_accessor(w: StringIO, spec: AccessorSpec) -> None:
    w.write("\n\n")
    w.write(
        f"def {spec.identifier}(ctx: {_RUNTIME_ALIAS}.JsonCtx) "
        f"-> {spec.value_type.annotation}:\n"
    )
    w.write(f"    {spec.expression!r}\n")
    w.write(f"    return {_RUNTIME_ALIAS}.read(\n")
    w.write("        ctx,\n")
    w.write(f"        {spec.path!r},\n")
    w.write(f"        {_RUNTIME_ALIAS}.ValueType.{spec.value_type.name},\n")
    if spec.each is not None:
        w.write(f"        each={spec.each!r},\n")
    w.write("    )\n")


def render_module(specs: Iterable[AccessorSpec], *, source: str = "") -> str:
    """Render a Python module defining one function per accessor.

    Each function takes a :class:`~jsonaccessors.JsonCtx` and delegates to
    :func:`jsonaccessors.read` with its fixed path and value type.

    Args:
        specs: Accessor specifications, usually from generation.
        source: Name of the sample document, recorded in the module docstring.

    Raises:
        InvalidIdentifierError: If an identifier is not a usable Python name.
        IdentifierCollisionError: If two specs share an identifier.
    """
    specs = list(specs)
    check_collisions(specs)
    for spec in specs:
        validate_identifier(spec.identifier, RESERVED_MODULE_NAMES)

    w = StringIO()
    origin = f" from {source}" if source else ""
    docstring = f"JSON accessors generated{origin} by jsonaccessors. Do not edit."
    w.write(f"{docstring!r}\n\n")
    w.write(f"import jsonaccessors as {_RUNTIME_ALIAS}\n\n")
    w.write("__all__ = [\n")
    for spec in specs:
        w.write(f"    {spec.identifier!r},\n")
    w.write("]\n")
    for spec in specs:
        _write_accessor(w, spec)

    logger.debug("rendered %d accessors%s", len(specs), origin)
    return w.getvalue()
