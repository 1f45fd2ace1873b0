"""
Form State Manager

Reducer-driven state container for form-like UIs: per-field values and
validation errors, a pristine phase, and atomic reset.
"""

from .core import (
    ActivationPolicy,
    DerivedView,
    FieldEntry,
    FieldUpdate,
    FormState,
    FormStateError,
    InputEvent,
    InvalidActionError,
    ObjectState,
    Options,
    Reset,
    UnknownFieldError,
    initialize,
    reduce,
)

__version__ = "0.1.0"

__all__ = [
    "ActivationPolicy",
    "DerivedView",
    "FieldEntry",
    "FieldUpdate",
    "FormState",
    "FormStateError",
    "InputEvent",
    "InvalidActionError",
    "ObjectState",
    "Options",
    "Reset",
    "UnknownFieldError",
    "initialize",
    "reduce",
]
