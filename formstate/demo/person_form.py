"""
Person form: the reference consumer of ObjectState.

Inputs are described by the constraints a browser would enforce on them
(maxlength, type=number, pattern); native_validation_message() reproduces
the message the platform would report for a raw value.
"""

import math
import re
from enum import Enum
from typing import Any, Dict, List, Optional

from ..core import InputEvent, ObjectState
from ..core.coerce import to_number
from ..core.view import DerivedView


class PersonFormKeys(str, Enum):
    NAME = "name"
    AGE = "age"
    FAVORITE_CHARACTER = "favorite_character"
    IS_REAL_PERSON = "is_real_person"


INITIAL_VALUES: Dict[str, Any] = {
    PersonFormKeys.NAME.value: "The builder",
    PersonFormKeys.AGE.value: 0,
    PersonFormKeys.FAVORITE_CHARACTER.value: None,
    PersonFormKeys.IS_REAL_PERSON.value: True,
}

NAME_MAX_LENGTH = 6
FAVORITE_CHARACTER_PATTERN = re.compile(r"^[A-Z0-9]$")


def validate_name(name: str) -> Optional[List[str]]:
    return ["Not Bob"] if name != "Bob" else None


def validate_age(age: Any) -> Optional[List[str]]:
    return ["I dislike the number 12, pick another"] if age == 12 else None


VALIDATORS = {
    PersonFormKeys.NAME.value: validate_name,
    PersonFormKeys.AGE.value: validate_age,
}


def native_validation_message(name: str, raw: str) -> str:
    """
    Constraint message for raw input on the named field.

    Returns:
        The platform's message, or "" when the input satisfies its constraints
    """
    if name == PersonFormKeys.NAME.value and len(raw) > NAME_MAX_LENGTH:
        return (
            f"Please shorten this text to {NAME_MAX_LENGTH} characters or less "
            f"(you are currently using {len(raw)} characters)."
        )
    if name == PersonFormKeys.AGE.value and raw.strip() and math.isnan(to_number(raw)):
        return "Please enter a number."
    if name == PersonFormKeys.FAVORITE_CHARACTER.value and raw and not FAVORITE_CHARACTER_PATTERN.match(raw):
        return "Please match the requested format."
    return ""


class PersonForm:
    """
    Person form driven by change events and buttons.

    Usage:
        form = PersonForm()
        form.change("name", "Alice")
        form.set_correct_name()
        form.view().errors
    """

    def __init__(self, form_id: str = "person-form") -> None:
        self.state = ObjectState(
            INITIAL_VALUES,
            validators=VALIDATORS,
            enable_native_input_validation=True,
            name=form_id,
        )

    def change(self, name: str, raw: str) -> None:
        """Handle a text input change for the named field."""
        self.state.update(
            InputEvent(
                name=name,
                value=raw,
                native_validation_message=native_validation_message(name, raw),
            )
        )

    def set_correct_name(self) -> None:
        self.state.update(PersonFormKeys.NAME.value)("Bob")

    def set_is_real_person(self, checked: bool) -> None:
        self.state.update(PersonFormKeys.IS_REAL_PERSON.value)(checked)

    def reset(self) -> None:
        self.state.reset()

    def view(self) -> DerivedView:
        return self.state.view()
