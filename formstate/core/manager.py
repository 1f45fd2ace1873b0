"""
ObjectState: the form state manager.

Owns the current FormState, the pristine flag and the validator table.
Every transition goes through the reducer, so a state handed out earlier
never changes underneath its holder.

Usage:
    form = ObjectState(
        {"name": "The builder", "age": 0},
        validators={"name": lambda v: ["Not Bob"] if v != "Bob" else None},
    )
    form.update("name")("Alice")
    form.update(InputEvent(name="age", value="12"))
    view = form.view()
"""

import copy
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from ..logging_config import get_logger
from .actions import FieldUpdate, Reset
from .coerce import coerce_like
from .errors import UnknownFieldError
from .options import ActivationPolicy, Options
from .reducer import Reducer, default_reducer
from .state import FormState, error_set, initialize
from .view import DerivedView, derive

Setter = Callable[[Any], None]
Listener = Callable[[FormState, FormState], None]


@dataclass(frozen=True)
class InputEvent:
    """
    Input change notification from a presentation-layer widget.

    Fields:
        name: Field name the widget is bound to
        value: Raw widget text
        native_validation_message: Platform constraint message, empty if valid
    """
    name: str
    value: str
    native_validation_message: str = ""


class ObjectState:
    """
    State manager for one form.

    Options may be passed as an Options instance or as keyword arguments,
    not both.
    """

    def __init__(
        self,
        init_values: Mapping[str, Any],
        options: Optional[Options] = None,
        *,
        name: Optional[str] = None,
        reducer: Optional[Reducer] = None,
        **option_kwargs: Any,
    ) -> None:
        if options is not None and option_kwargs:
            raise TypeError("pass either options or option keyword arguments, not both")
        self._options = options if options is not None else Options(**option_kwargs)
        self._init_values: Dict[str, Any] = copy.deepcopy(dict(init_values))

        for key in self._options.validators:
            if key not in self._init_values:
                raise UnknownFieldError(key)

        self._reducer = reducer or default_reducer()
        self._state = initialize(copy.deepcopy(self._init_values))
        self._pristine = not self._options.validate_from_start
        self._listeners: List[Listener] = []
        self._log = get_logger(__name__, form_id=name)

    @property
    def options(self) -> Options:
        return self._options

    @property
    def init_values(self) -> Dict[str, Any]:
        """Copy of the canonical reset target."""
        return copy.deepcopy(self._init_values)

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def values(self) -> Dict[str, Any]:
        return derive(self._state, self._pristine).values

    @property
    def errors(self) -> Dict[str, Optional[List[str]]]:
        return derive(self._state, self._pristine).errors

    @property
    def pristine(self) -> bool:
        return self._pristine

    @property
    def has_errors(self) -> bool:
        return derive(self._state, self._pristine).has_errors

    def view(self) -> DerivedView:
        """
        Read the derived view.

        This is one read cycle: under ActivationPolicy.AFTER_FIRST_READ it
        ends the pristine phase after the view is computed.
        """
        current = derive(self._state, self._pristine)
        if self._options.activation is ActivationPolicy.AFTER_FIRST_READ:
            self._pristine = False
        return current

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register listener(prev_state, next_state), called after each transition.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def update(self, target: Any) -> Optional[Setter]:
        """
        Update a field.

        Two call shapes:
            update("name") returns a setter; setter(value) validates and stores.
            update(event) handles an input change event (name, value and an
            optional native_validation_message) right away and returns None.

        Raises:
            UnknownFieldError: If the field name is not part of the form
        """
        if isinstance(target, str):
            return self._setter(target)
        self._apply_event(target)
        return None

    def reset(self) -> None:
        """Restore the initial values, clear all errors and re-arm the pristine phase."""
        self._dispatch(Reset(init_values=dict(self._init_values)))
        self._pristine = True
        self._log.debug("Form reset")

    def _setter(self, key: str) -> Setter:
        self._require_field(key)

        def set_value(value: Any) -> None:
            errors = self._validate(key, value)
            self._dispatch(FieldUpdate(key=key, value=value, errors=errors))

        return set_value

    def _apply_event(self, event: Any) -> None:
        key = event.name
        self._require_field(key)

        messages: List[str] = []
        native_message = getattr(event, "native_validation_message", "")
        if self._options.enable_native_input_validation and native_message:
            messages.append(native_message)

        value = coerce_like(self._init_values[key], event.value)
        messages.extend(self._validate(key, value))
        self._dispatch(FieldUpdate(key=key, value=value, errors=error_set(messages)))

    def _validate(self, key: str, value: Any) -> Tuple[str, ...]:
        if self._pristine:
            return ()
        validator = self._options.validators.get(key)
        if validator is None:
            return ()
        found: Optional[Iterable[str]] = validator(value)
        if not found:
            return ()
        return error_set(msg for msg in found if msg != "")

    def _require_field(self, key: str) -> None:
        if key not in self._init_values:
            self._log.warning("Update for unknown field %r", key)
            raise UnknownFieldError(key)

    def _dispatch(self, action: Any) -> None:
        prev = self._state
        self._state = self._reducer.apply(prev, action)
        self._log.debug("Applied %s (version %d)", action.type, self._state.version)

        if (
            isinstance(action, FieldUpdate)
            and self._options.activation is ActivationPolicy.AFTER_FIRST_UPDATE
        ):
            self._pristine = False

        for listener in list(self._listeners):
            listener(prev, self._state)
