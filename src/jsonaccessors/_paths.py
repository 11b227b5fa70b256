"""Textual path expressions.

Paths are written as CEL member expressions, e.g.
``tradeDetails.legs[0]["price currency"]``, and parsed with the CEL
grammar. A leading selector (``[0].name``) addresses a document whose
root is an array or whose first key is not a plain identifier.
"""

from __future__ import annotations

import json
import re

from celpy.celparser import CELParseError, CELParser
from lark import Token, Tree
from lark.exceptions import LarkError
from lark.visitors import Interpreter

from jsonaccessors._errors import (
    ERR_MSG_INVALID_PATH_EXPRESSION,
    InvalidPathExpressionError,
)
from jsonaccessors._types import Path

_parser = CELParser()

_ROOT_PLACEHOLDER = "__jsonaccessors_root__"

IDENT_RE = re.compile(r"[_a-zA-Z][_a-zA-Z0-9]*")
INDEX_RE = re.compile(r"[0-9]+")

CEL_RESERVED_WORDS: set[str] = {
    "as", "break", "const", "continue", "else", "false", "for", "function",
    "if", "import", "in", "let", "loop", "package", "namespace", "null",
    "return", "true", "var", "void", "while",
}

_SIMPLE_ESCAPES = {
    "a": "\a", "b": "\b", "f": "\f", "n": "\n", "r": "\r", "t": "\t",
    "v": "\v", "\\": "\\", "'": "'", '"': '"', "`": "`", "?": "?",
}
_ESCAPE_RE = re.compile(
    r"\\(?:u([0-9a-fA-F]{4})|U([0-9a-fA-F]{8})|[xX]([0-9a-fA-F]{2})|([0-7]{3})|(.))",
    re.DOTALL,
)


def _strip_quotes(s: str) -> str:
    """Strip surrounding quotes from a CEL string literal token."""
    if s.startswith(('r"', "r'", 'R"', "R'")):
        s = s[1:]
    if s.startswith('"""') or s.startswith("'''"):
        return s[3:-3]
    if s.startswith('"') or s.startswith("'"):
        return s[1:-1]
    return s


def _process_escapes(s: str) -> str:
    def replace(m: re.Match[str]) -> str:
        code = m.group(1) or m.group(2) or m.group(3)
        if code:
            return chr(int(code, 16))
        if m.group(4):
            return chr(int(m.group(4), 8))
        ch = m.group(5)
        if ch in _SIMPLE_ESCAPES:
            return _SIMPLE_ESCAPES[ch]
        raise InvalidPathExpressionError(
            ERR_MSG_INVALID_PATH_EXPRESSION,
            f"unknown escape sequence \\{ch}",
        )

    return _ESCAPE_RE.sub(replace, s)


def _get_literal_token(tree: Tree | Token) -> Token | None:
    """Extract the literal token at the bottom of a single-child chain."""
    node: Tree | Token = tree
    while isinstance(node, Tree):
        if node.data == "literal":
            if node.children and isinstance(node.children[0], Token):
                return node.children[0]
            return None
        if len(node.children) == 1:
            node = node.children[0]
        else:
            return None
    return None


def _index_segment(index_expr: Tree) -> str:
    """Turn the expression inside ``[...]`` into a path segment."""
    token = _get_literal_token(index_expr)
    if token is None:
        raise InvalidPathExpressionError(
            ERR_MSG_INVALID_PATH_EXPRESSION,
            "index must be a non-negative integer or string literal",
        )
    raw = str(token)
    if token.type in ("INT_LIT", "UINT_LIT"):
        try:
            idx = int(raw.rstrip("uU"), 0)
        except ValueError as e:
            raise InvalidPathExpressionError(
                ERR_MSG_INVALID_PATH_EXPRESSION,
                f"malformed index literal {raw!r}",
                wrapped=e,
            ) from e
        if idx < 0:
            raise InvalidPathExpressionError(
                "negative array index not supported",
                f"array index {idx} is negative",
            )
        return str(idx)
    if token.type in ("STRING_LIT", "MLSTRING_LIT"):
        key = _strip_quotes(raw)
        if not raw.startswith(("r'", 'r"', "R'", 'R"')):
            key = _process_escapes(key)
        return key
    raise InvalidPathExpressionError(
        ERR_MSG_INVALID_PATH_EXPRESSION,
        f"unsupported index literal {raw!r}",
    )


class _PathBuilder(Interpreter):
    """Collects path segments from a CEL member-access parse tree."""

    def member_dot(self, tree: Tree) -> Path:
        return (*self.visit(tree.children[0]), str(tree.children[1]))

    def member_index(self, tree: Tree) -> Path:
        return (*self.visit(tree.children[0]), _index_segment(tree.children[1]))

    def ident(self, tree: Tree) -> Path:
        return (str(tree.children[0]),)

    def __default__(self, tree: Tree) -> Path:
        # Precedence wrappers (expr, conditionalor, ..., member, primary)
        # have exactly one child; anything else is not a plain path.
        if len(tree.children) == 1 and isinstance(tree.children[0], Tree):
            return self.visit(tree.children[0])
        raise InvalidPathExpressionError(
            ERR_MSG_INVALID_PATH_EXPRESSION,
            f"unsupported construct {tree.data!r} in path expression",
        )


def parse_path(expr: str) -> Path:
    """Parse a path expression into segments.

    >>> parse_path('a.b[0]["c d"]')
    ('a', 'b', '0', 'c d')

    Raises:
        InvalidPathExpressionError: If ``expr`` is not a chain of field
            selections and constant indexes.
    """
    text = expr.strip()
    if not text:
        return ()
    relative = text.startswith(("[", "."))
    if relative:
        text = _ROOT_PLACEHOLDER + text
    try:
        tree = _parser.parse(text)
    except (CELParseError, LarkError) as e:
        raise InvalidPathExpressionError(
            ERR_MSG_INVALID_PATH_EXPRESSION,
            f"cannot parse {expr!r}: {e}",
            wrapped=e,
        ) from e
    path = _PathBuilder().visit(tree)
    if relative:
        return path[1:]
    return path


def _is_canonical_index(segment: str) -> bool:
    return bool(INDEX_RE.fullmatch(segment)) and str(int(segment)) == segment


def _quote(segment: str) -> str:
    return json.dumps(segment, ensure_ascii=False)


def format_path(path: Path, *, relative: bool = False) -> str:
    """Render segments as a path expression that :func:`parse_path` accepts.

    Identifier-like keys use ``.name``, decimal segments ``[n]`` and any
    other key a quoted ``["..."]`` selector.
    """
    parts: list[str] = []
    for i, segment in enumerate(path):
        if _is_canonical_index(segment):
            parts.append(f"[{segment}]")
        elif IDENT_RE.fullmatch(segment) and segment not in CEL_RESERVED_WORDS:
            parts.append(segment if i == 0 and not relative else f".{segment}")
        else:
            parts.append(f"[{_quote(segment)}]")
    return "".join(parts)
