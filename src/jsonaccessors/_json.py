"""Reading and parsing of JSON documents.

Both the generation pass and :class:`~jsonaccessors.JsonCtx` construction
go through these helpers, so a malformed document fails the same way in
either phase.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from jsonaccessors._errors import (
    ERR_MSG_DEPTH_EXCEEDED,
    ERR_MSG_INVALID_JSON,
    ERR_MSG_UNREADABLE_SAMPLE,
    InvalidJSONError,
    MaxDepthExceededError,
    SampleReadError,
)
from jsonaccessors._types import JsonValue

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> float:
    # NaN, Infinity and -Infinity are Python extensions, not JSON.
    raise ValueError(f"non-standard constant {name!r}")


def parse_json(text: str | bytes) -> JsonValue:
    """Parse a JSON document into plain Python values.

    Raises:
        InvalidJSONError: If the text is not well-formed JSON. The message
            includes the parser diagnostic.
        MaxDepthExceededError: If the document nests too deeply to parse.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise InvalidJSONError(
            f"{ERR_MSG_INVALID_JSON}: {e}",
            f"parse error at line {e.lineno} column {e.colno}: {e.msg}",
            wrapped=e,
        ) from e
    except UnicodeDecodeError as e:
        raise InvalidJSONError(
            f"{ERR_MSG_INVALID_JSON}: {e}",
            f"undecodable bytes at offset {e.start}",
            wrapped=e,
        ) from e
    except ValueError as e:
        raise InvalidJSONError(f"{ERR_MSG_INVALID_JSON}: {e}", wrapped=e) from e
    except RecursionError as e:
        raise MaxDepthExceededError(
            ERR_MSG_DEPTH_EXCEEDED,
            "document nesting exceeds the interpreter recursion limit",
            wrapped=e,
        ) from e


def read_json_file(path: str | os.PathLike[str]) -> JsonValue:
    """Read and parse the JSON document at ``path``.

    Raises:
        SampleReadError: If the file cannot be read.
        InvalidJSONError: If the contents are not well-formed JSON.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise SampleReadError(
            ERR_MSG_UNREADABLE_SAMPLE,
            f"cannot read {os.fspath(path)!r}: {e}",
            wrapped=e,
        ) from e
    logger.debug("read %d bytes from %s", len(data), path)
    return parse_json(data)
