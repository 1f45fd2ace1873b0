"""
State model for the form state manager.

FormState maps every field name to a FieldEntry. The key set is fixed by
initialize() and every later state carries exactly the same keys.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple


def error_set(messages: Iterable[str]) -> Tuple[str, ...]:
    """
    Build an ordered error set.

    Insertion order is kept and duplicates collapse on exact string equality.
    """
    return tuple(dict.fromkeys(messages))


@dataclass(frozen=True)
class FieldEntry:
    """
    Value and error set of one field.

    Fields:
        value: Current value (str, int, float, bool, or an opaque payload)
        errors: Ordered, duplicate-free error messages
    """
    value: Any = None
    errors: Tuple[str, ...] = ()


@dataclass(frozen=True)
class FormState:
    """
    Immutable form state.

    Fields:
        fields: Dict of field name -> FieldEntry
        version: Number of transitions that produced this state

    Use with_field() to create a new state with one entry swapped.
    """
    fields: Dict[str, FieldEntry] = field(default_factory=dict)
    version: int = field(default=0, compare=False)

    def keys(self) -> Tuple[str, ...]:
        return tuple(self.fields)

    def get(self, key: str) -> Optional[FieldEntry]:
        """
        Get field entry by name.

        Returns:
            FieldEntry or None if the field does not exist
        """
        return self.fields.get(key)

    def with_field(self, key: str, entry: FieldEntry) -> "FormState":
        """
        Create new state with one field entry replaced.

        Since FormState is immutable, this returns a new FormState instance.
        """
        new_fields = dict(self.fields)
        new_fields[key] = entry
        return FormState(fields=new_fields, version=self.version + 1)


def initialize(init_values: Mapping[str, Any], version: int = 0) -> FormState:
    """
    Map initial values to a state with empty error sets.

    Args:
        init_values: Field name -> initial value
        version: Version to stamp on the new state

    Returns:
        FormState with one entry per key of init_values
    """
    return FormState(
        fields={key: FieldEntry(value=value) for key, value in init_values.items()},
        version=version,
    )
