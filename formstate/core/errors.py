"""
Exception types for the form state manager.

Validation findings are never raised; they travel through DerivedView.errors.
"""


class FormStateError(Exception):
    """Base class for caller programming errors."""
    pass


class UnknownFieldError(FormStateError):
    """Raised when a field name is outside the schema fixed at construction."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Unknown field: {field!r}")
        self.field = field


class InvalidActionError(FormStateError):
    """Raised when the reducer receives an action it has no handler for."""
    pass
