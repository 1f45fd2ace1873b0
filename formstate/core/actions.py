"""
Action model for form state transitions.

Actions are immutable requests for the reducer. Two variants exist.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class FieldUpdate:
    """
    Replace one field's entry.

    Fields:
        key: Field name
        value: New value
        errors: Error set computed by the manager
    """
    key: str
    value: Any
    errors: Tuple[str, ...] = ()

    type = "FieldUpdate"


@dataclass(frozen=True)
class Reset:
    """
    Discard the current state and rebuild it from initial values.

    Fields:
        init_values: Field name -> initial value
    """
    init_values: Dict[str, Any] = field(default_factory=dict)

    type = "Reset"
