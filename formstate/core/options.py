"""
Static configuration for one ObjectState instance.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping, Optional

# Validator signature: (candidate_value) -> error messages or None
Validator = Callable[[Any], Optional[Iterable[str]]]


class ActivationPolicy(str, Enum):
    """When the pristine phase ends and custom validators start running."""

    AFTER_FIRST_UPDATE = "after_first_update"  # first update is never validated
    AFTER_FIRST_READ = "after_first_read"  # first view() read completes the phase


@dataclass(frozen=True)
class Options:
    """
    Options for ObjectState.

    Fields:
        validators: Field name -> validator; fields without one are not validated
        enable_native_input_validation: Add the event's native validation
            message to the field's errors
        validate_from_start: Skip the pristine phase
        activation: Boundary at which the pristine phase ends
    """
    validators: Mapping[str, Validator] = field(default_factory=dict)
    enable_native_input_validation: bool = False
    validate_from_start: bool = False
    activation: ActivationPolicy = ActivationPolicy.AFTER_FIRST_UPDATE

    def __post_init__(self) -> None:
        object.__setattr__(self, "validators", MappingProxyType(dict(self.validators or {})))
        object.__setattr__(self, "activation", ActivationPolicy(self.activation))
