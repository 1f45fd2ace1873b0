"""
Core form state primitives.

- FormState / FieldEntry: immutable state shape
- FieldUpdate / Reset: actions
- Reducer: pure state transitions
- ObjectState: manager with validation and the pristine phase
- DerivedView: read-only projection for rendering
"""

from .actions import FieldUpdate, Reset
from .canonical import canonicalize, canonical_json_str
from .coerce import coerce_like
from .errors import FormStateError, InvalidActionError, UnknownFieldError
from .manager import InputEvent, ObjectState
from .options import ActivationPolicy, Options
from .reducer import Reducer, default_reducer, reduce
from .state import FieldEntry, FormState, error_set, initialize
from .view import DerivedView, derive

__all__ = [
    "FieldUpdate",
    "Reset",
    "canonicalize",
    "canonical_json_str",
    "coerce_like",
    "FormStateError",
    "InvalidActionError",
    "UnknownFieldError",
    "InputEvent",
    "ObjectState",
    "ActivationPolicy",
    "Options",
    "Reducer",
    "default_reducer",
    "reduce",
    "FieldEntry",
    "FormState",
    "error_set",
    "initialize",
    "DerivedView",
    "derive",
]
