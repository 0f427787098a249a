"""Engine error kinds."""

from typing import Optional


class TransformError(Exception):
    """Base error; carries the offending operation name and a readable cause."""

    def __init__(self, operation: str, cause: str):
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation}: {cause}")


class DecodeError(TransformError):
    """Image bytes or file could not be decoded."""


class InvalidOperation(TransformError):
    """Unknown operator or command name."""


class InvalidArguments(TransformError):
    """Wrong argument count for a multi-parameter operation."""

    def __init__(self, operation: str, cause: str, expected: Optional[int] = None):
        self.expected = expected
        super().__init__(operation, cause)


class UnsupportedFormat(TransformError):
    """Requested output encoding is not available."""
