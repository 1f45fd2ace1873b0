"""
Reducer: pure form state transitions.

The reducer must be:
- Pure (no side effects, no I/O, no validation)
- Non-mutating (the previous state stays valid under any held reference)
- Closed over the schema (never adds or removes field names)
"""

import copy
from typing import Any, Callable, Dict

from .actions import FieldUpdate, Reset
from .errors import InvalidActionError, UnknownFieldError
from .state import FieldEntry, FormState, error_set, initialize

# Handler signature: (previous_state, action) -> next_state
Handler = Callable[[FormState, Any], FormState]


def handle_field_update(prev: FormState, action: FieldUpdate) -> FormState:
    if action.key not in prev.fields:
        raise UnknownFieldError(action.key)

    # Deep copy so nested payloads are never shared with the previous state
    detached = FormState(fields=copy.deepcopy(prev.fields), version=prev.version)
    return detached.with_field(
        action.key,
        FieldEntry(value=copy.deepcopy(action.value), errors=error_set(action.errors)),
    )


def handle_reset(prev: FormState, action: Reset) -> FormState:
    return initialize(copy.deepcopy(action.init_values), version=prev.version + 1)


class Reducer:
    """
    Registry of action handlers for state transitions.

    Usage:
        reducer = Reducer()
        reducer.register("FieldUpdate", handle_field_update)
        new_state = reducer.apply(state, action)
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, Handler] = {}

    def register(self, action_type: str, handler: Handler) -> None:
        """
        Register action handler.

        Args:
            action_type: Action type string
            handler: Pure function (prev_state, action) -> next_state
        """
        self._handlers[action_type] = handler

    def apply(self, state: FormState, action: Any) -> FormState:
        """
        Apply action to state using registered handler.

        Args:
            state: Current state
            action: Action to apply

        Returns:
            New state with action applied

        Raises:
            InvalidActionError: If no handler registered for action type
            UnknownFieldError: If a FieldUpdate names a field outside the state
        """
        action_type = getattr(action, "type", None)
        if action_type not in self._handlers:
            raise InvalidActionError(f"No handler for action type: {action_type}")

        return self._handlers[action_type](state, action)


def default_reducer() -> Reducer:
    """Reducer with the FieldUpdate and Reset handlers registered."""
    reducer = Reducer()
    reducer.register(FieldUpdate.type, handle_field_update)
    reducer.register(Reset.type, handle_reset)
    return reducer


_DEFAULT = default_reducer()


def reduce(prev_state: FormState, action: Any) -> FormState:
    """Compute the next state from the previous state and an action."""
    return _DEFAULT.apply(prev_state, action)
