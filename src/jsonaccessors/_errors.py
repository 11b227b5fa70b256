"""Exception hierarchy for JSON accessor generation and extraction."""

from __future__ import annotations


class AccessorError(Exception):
    """Base exception for all accessor errors.

    Provides dual messaging: a short user-facing message and
    internal details (full paths, offending values) for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


# ---- Generation time ----


class GenerationError(AccessorError):
    """Raised when accessors cannot be generated from a sample document.

    Generation never yields a partial accessor set.
    """


class SampleReadError(GenerationError):
    """Raised when the sample document cannot be read."""


class InvalidJSONError(GenerationError):
    """Raised when the sample document is not well-formed JSON."""


class MaxDepthExceededError(GenerationError):
    """Raised when the sample document nests deeper than the walk limit."""


class IdentifierCollisionError(GenerationError):
    """Raised when two distinct paths derive the same identifier."""

    def __init__(
        self,
        identifier: str,
        first: tuple[str, ...],
        second: tuple[str, ...],
    ) -> None:
        super().__init__(
            f"identifier collision: {identifier}",
            f"paths {list(first)!r} and {list(second)!r} both map to {identifier!r}",
        )
        self.identifier = identifier
        self.paths = (first, second)


class InvalidIdentifierError(GenerationError):
    """Raised when an identifier cannot be emitted as a Python name."""


class InvalidPathExpressionError(AccessorError):
    """Raised when a textual path expression cannot be parsed."""


# ---- Runtime ----


class ExtractionError(AccessorError):
    """Base for failures replaying an accessor against a runtime document.

    Each failure is confined to the call that raised it.
    """


class MissingKeyError(ExtractionError):
    """Raised when an object on the path lacks the next key."""

    def __init__(self, key: str, internal_details: str = "") -> None:
        super().__init__(f"Missing key: {key}", internal_details)
        self.key = key


class IndexOutOfBoundsError(ExtractionError):
    """Raised when an array on the path is shorter than the next index."""

    def __init__(self, index: int, internal_details: str = "") -> None:
        super().__init__(f"Array index out of bounds: {index}", internal_details)
        self.index = index


class InvalidPathError(ExtractionError):
    """Raised when a path segment cannot be applied to the current value."""

    def __init__(self, segment: str, internal_details: str = "") -> None:
        super().__init__("Invalid path", internal_details)
        self.segment = segment


class TypeMismatchError(ExtractionError):
    """Raised when an extracted value does not have the declared type."""

    def __init__(
        self,
        expected: str,
        actual: str,
        index: int | None = None,
        internal_details: str = "",
    ) -> None:
        if index is None:
            message = f"Expected {expected}, got {actual}"
        else:
            message = f"Expected {expected} at element {index}, got {actual}"
        super().__init__(message, internal_details)
        self.expected = expected
        self.actual = actual
        self.index = index


# Sanitized user-facing error message constants
ERR_MSG_INVALID_JSON = "Invalid JSON"
ERR_MSG_UNREADABLE_SAMPLE = "cannot read sample document"
ERR_MSG_DEPTH_EXCEEDED = "maximum nesting depth exceeded"
ERR_MSG_INVALID_IDENTIFIER = "identifier is not a valid Python name"
ERR_MSG_INVALID_PATH_EXPRESSION = "invalid path expression"
