"""Naming and resource limit constants for accessor generation."""

DEFAULT_MAX_WALK_DEPTH = 100
"""Maximum document nesting depth the schema walker descends (CWE-674 prevention)."""

SANITIZED_CHARACTERS = frozenset(" -./")
"""Characters in object keys replaced with ``_`` when deriving identifiers."""

IDENTIFIER_SEPARATOR = "_"

ROOT_IDENTIFIER = "root"
"""Identifier used for an accessor bound to the empty path."""

COLLECTOR_INFIX = "each"
"""Identifier segment separating an array path from a collected element suffix."""
