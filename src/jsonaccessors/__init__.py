"""jsonaccessors - Typed field accessors inferred from sample JSON documents."""

from __future__ import annotations

try:
    from jsonaccessors._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

import logging
import os
from pathlib import Path as _FilePath
from typing import Any

from jsonaccessors._codegen import render_module
from jsonaccessors._errors import (
    AccessorError,
    ExtractionError,
    GenerationError,
    IdentifierCollisionError,
    IndexOutOfBoundsError,
    InvalidIdentifierError,
    InvalidJSONError,
    InvalidPathError,
    InvalidPathExpressionError,
    MaxDepthExceededError,
    MissingKeyError,
    SampleReadError,
    TypeMismatchError,
)
from jsonaccessors._json import parse_json, read_json_file
from jsonaccessors._naming import check_collisions
from jsonaccessors._paths import format_path, parse_path
from jsonaccessors._runtime import Extraction, JsonCtx, read, read_path, try_read
from jsonaccessors._types import JsonValue
from jsonaccessors._walker import walk_document
from jsonaccessors.accessors import Accessor, AccessorSet, bind
from jsonaccessors.schema import AccessorSpec, ValueType, synthesize

__all__ = [
    "generate_accessors",
    "generate_from_text",
    "generate_from_value",
    "load_accessors",
    "write_module",
    "render_module",
    "bind",
    "read",
    "read_path",
    "try_read",
    "parse_path",
    "format_path",
    "Accessor",
    "AccessorSet",
    "AccessorSpec",
    "Extraction",
    "JsonCtx",
    "ValueType",
    "AccessorError",
    "ExtractionError",
    "GenerationError",
    "IdentifierCollisionError",
    "IndexOutOfBoundsError",
    "InvalidIdentifierError",
    "InvalidJSONError",
    "InvalidPathError",
    "InvalidPathExpressionError",
    "MaxDepthExceededError",
    "MissingKeyError",
    "SampleReadError",
    "TypeMismatchError",
]

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def generate_from_value(
    document: JsonValue,
    *,
    collectors: bool = False,
    max_depth: int | None = None,
) -> list[AccessorSpec]:
    """Generate accessor specifications from an already parsed document.

    Args:
        document: The sample document.
        collectors: Also generate accessors that collect a field across
            every element of an array of objects.
        max_depth: Maximum nesting depth to walk. Defaults to 100.

    Returns:
        One specification per leaf, in document order.

    Raises:
        MaxDepthExceededError: If the document nests deeper than ``max_depth``.
        IdentifierCollisionError: If two leaves derive the same identifier.
    """
    kwargs: dict[str, Any] = {"collectors": collectors}
    if max_depth is not None:
        kwargs["max_depth"] = max_depth

    leaves = walk_document(document, **kwargs)
    specs = [synthesize(leaf.path, leaf.value_type, leaf.each) for leaf in leaves]
    check_collisions(specs)
    logger.debug("generated %d accessors", len(specs))
    return specs


def generate_from_text(
    text: str | bytes,
    *,
    collectors: bool = False,
    max_depth: int | None = None,
) -> list[AccessorSpec]:
    """Generate accessor specifications from JSON text.

    Raises:
        InvalidJSONError: If the text is not well-formed JSON.
    """
    document = parse_json(text)
    return generate_from_value(document, collectors=collectors, max_depth=max_depth)


def generate_accessors(
    path: str | os.PathLike[str],
    *,
    collectors: bool = False,
    max_depth: int | None = None,
) -> list[AccessorSpec]:
    """Generate accessor specifications from the sample JSON file at ``path``.

    Generation either succeeds completely or raises; no partial set is
    returned.

    Raises:
        SampleReadError: If the file cannot be read.
        InvalidJSONError: If the file is not well-formed JSON. The message
            includes the parser diagnostic.
        MaxDepthExceededError: If the document nests deeper than ``max_depth``.
        IdentifierCollisionError: If two leaves derive the same identifier.
    """
    document = read_json_file(path)
    return generate_from_value(document, collectors=collectors, max_depth=max_depth)


def load_accessors(
    path: str | os.PathLike[str],
    *,
    collectors: bool = False,
    max_depth: int | None = None,
) -> AccessorSet:
    """Generate accessors from a sample file and bind them to callables."""
    return bind(generate_accessors(path, collectors=collectors, max_depth=max_depth))


def write_module(
    json_path: str | os.PathLike[str],
    out_path: str | os.PathLike[str],
    *,
    collectors: bool = False,
    max_depth: int | None = None,
) -> list[AccessorSpec]:
    """Generate accessors from a sample file and write them as a Python module.

    Returns:
        The specifications written.

    Raises:
        GenerationError: If generation or rendering fails; nothing is
            written in that case.
    """
    specs = generate_accessors(json_path, collectors=collectors, max_depth=max_depth)
    source = render_module(specs, source=_FilePath(json_path).name)
    _FilePath(out_path).write_text(source, encoding="utf-8")
    logger.debug("wrote %d accessors to %s", len(specs), out_path)
    return specs
