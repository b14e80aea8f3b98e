"""
Error hierarchy for the PDF to Markdown conversion pipeline.

Every failure surfaced by a conversion call derives from ConversionError,
so callers can catch one type and still inspect the precise kind.
"""

from typing import Optional


class ConversionError(Exception):
    """Base class for all conversion failures."""
    pass


class InvalidDocument(ConversionError):
    """Raised when the payload is not a decodable PDF document."""
    pass


class ConfigurationError(ConversionError):
    """Raised when conversion options are invalid or reference unknown components."""
    pass


class SchemaViolation(ConversionError):
    """
    Raised when an extracted item does not match its declared schema.

    Attributes:
        field: Name of the offending field
        expected: Expected type name
        actual: Actual type name, or "missing" when the field is absent
    """

    def __init__(self, field: str, expected: str, actual: str):
        self.field = field
        self.expected = expected
        self.actual = actual
        super().__init__(f"Field {field!r}: expected {expected}, got {actual}")


class EmptyDocument(ConversionError):
    """Raised when a document is built from zero pages."""

    def __init__(self, message: str = "Document has no pages"):
        super().__init__(message)


class TransformError(ConversionError):
    """
    Raised when a transformer fails.

    Attributes:
        transformer: Name of the failing transformer
        order: Order of the item being processed, if any
    """

    def __init__(self, transformer: str, message: str, order: Optional[int] = None):
        self.transformer = transformer
        self.order = order
        location = f" (item {order})" if order is not None else ""
        super().__init__(f"{transformer}{location}: {message}")


class UnhandledItemType(ConversionError):
    """
    Raised when the converter has no renderer and no fallback for an item type.

    Attributes:
        item_type: The unmapped item type
        order: Order of the item
    """

    def __init__(self, item_type: str, order: int):
        self.item_type = item_type
        self.order = order
        super().__init__(f"No renderer for item type {item_type!r} (item {order})")
