"""
Derived read-only projection of a FormState.
"""

import copy
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .state import FormState


@dataclass(frozen=True)
class DerivedView:
    """
    What a presentation layer renders.

    Fields:
        values: Field name -> current value
        errors: Field name -> ordered messages, or None when the field is clean
        pristine: True while custom validation is suppressed
        has_errors: True iff any field has messages
    """
    values: Dict[str, Any]
    errors: Dict[str, Optional[List[str]]]
    pristine: bool
    has_errors: bool

    def __getitem__(self, key: str) -> Any:
        return self.values[key]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "values": dict(self.values),
            "errors": {k: (list(v) if v is not None else None) for k, v in self.errors.items()},
            "pristine": self.pristine,
            "hasErrors": self.has_errors,
        }


def derive(state: FormState, pristine: bool) -> DerivedView:
    """Recompute the view from state."""
    values = {key: copy.deepcopy(entry.value) for key, entry in state.fields.items()}
    errors = {key: (list(entry.errors) if entry.errors else None) for key, entry in state.fields.items()}
    return DerivedView(
        values=values,
        errors=errors,
        pristine=pristine,
        has_errors=any(msgs is not None for msgs in errors.values()),
    )
