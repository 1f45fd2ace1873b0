"""
Tests for ObjectState: update dispatch, pristine phase, reset and view.
"""

import pytest

from formstate.core import (
    ActivationPolicy,
    InputEvent,
    ObjectState,
    Options,
    UnknownFieldError,
)

INIT = {"name": "The builder", "age": 0}


def not_bob(v):
    return ["Not Bob"] if v != "Bob" else None


def dislike_12(v):
    return ["dislike 12"] if v == 12 else None


def make_form(**kwargs):
    kwargs.setdefault("validators", {"name": not_bob, "age": dislike_12})
    return ObjectState(INIT, **kwargs)


def test_end_to_end_scenario():
    form = make_form()

    view = form.view()
    assert view.pristine is True
    assert view.errors == {"name": None, "age": None}

    form.update("name")("Alice")
    view = form.view()
    assert view.pristine is False
    assert view.errors["name"] is None

    form.update("name")("Alice")
    assert form.view().errors["name"] == ["Not Bob"]

    form.update("name")("Bob")
    assert form.view().errors["name"] is None

    form.reset()
    view = form.view()
    assert view.values == {"name": "The builder", "age": 0}
    assert view.errors == {"name": None, "age": None}
    assert view.pristine is True
    assert view.has_errors is False


def test_pristine_suppresses_first_update_only():
    form = make_form()

    form.update("age")(12)
    assert form.errors["age"] is None

    form.update("age")(12)
    assert form.errors["age"] == ["dislike 12"]
    assert form.has_errors is True


def test_second_update_on_other_field_validates():
    form = make_form()

    form.update("age")(1)
    form.update("name")("Alice")

    assert form.errors == {"name": ["Not Bob"], "age": None}


def test_validate_from_start():
    form = make_form(validate_from_start=True)

    assert form.pristine is False
    form.update("name")("Alice")
    assert form.errors["name"] == ["Not Bob"]


def test_reset_rearms_pristine_phase():
    form = make_form()
    form.update("name")("x")
    form.update("name")("Alice")
    assert form.has_errors

    form.reset()
    assert form.values == INIT
    assert form.has_errors is False
    assert form.pristine is True

    form.update("name")("Alice")
    assert form.errors["name"] is None
    form.update("name")("Alice")
    assert form.errors["name"] == ["Not Bob"]


def test_after_first_read_policy():
    form = make_form(activation=ActivationPolicy.AFTER_FIRST_READ)

    form.update("name")("Alice")
    assert form.errors["name"] is None
    assert form.pristine is True

    assert form.view().pristine is True
    assert form.pristine is False

    form.update("name")("Alice")
    assert form.errors["name"] == ["Not Bob"]


def test_properties_do_not_end_pristine_phase():
    form = make_form(activation=ActivationPolicy.AFTER_FIRST_READ)

    _ = form.values, form.errors, form.has_errors
    assert form.pristine is True


def test_unknown_key_keyed_form():
    form = make_form()
    before = form.state

    with pytest.raises(UnknownFieldError) as exc:
        form.update("doesNotExist")

    assert exc.value.field == "doesNotExist"
    assert form.state is before


def test_unknown_key_event_form():
    form = make_form()
    before = form.state

    with pytest.raises(UnknownFieldError):
        form.update(InputEvent(name="doesNotExist", value="x"))

    assert form.state is before


def test_unknown_validator_key_rejected():
    with pytest.raises(UnknownFieldError):
        ObjectState(INIT, validators={"nope": not_bob})


def test_options_object_and_kwargs_are_exclusive():
    with pytest.raises(TypeError):
        ObjectState(INIT, Options(), validate_from_start=True)


def test_event_form_coerces_before_validation_and_storage():
    seen = []

    def record(v):
        seen.append(v)
        return None

    form = ObjectState(INIT, validators={"age": record}, validate_from_start=True)
    form.update(InputEvent(name="age", value="12"))

    assert seen == [12]
    assert form.values["age"] == 12


def test_event_form_native_message_and_validator_union():
    form = make_form(enable_native_input_validation=True, validate_from_start=True)

    form.update(InputEvent(name="name", value="Alice", native_validation_message="Too long"))

    assert form.errors["name"] == ["Too long", "Not Bob"]


def test_native_message_applies_while_pristine():
    form = make_form(enable_native_input_validation=True)

    form.update(InputEvent(name="name", value="Alice", native_validation_message="Too long"))

    assert form.errors["name"] == ["Too long"]


def test_native_message_ignored_when_disabled():
    form = make_form(validate_from_start=True)

    form.update(InputEvent(name="name", value="Bob", native_validation_message="Too long"))

    assert form.errors["name"] is None


def test_empty_messages_filtered_and_duplicates_collapsed():
    form = ObjectState(
        {"name": ""},
        validators={"name": lambda v: ["", "dup", "dup", "other"]},
        enable_native_input_validation=True,
        validate_from_start=True,
    )

    form.update("name")("x")
    assert form.errors["name"] == ["dup", "other"]

    form.update(InputEvent(name="name", value="x", native_validation_message="dup"))
    assert form.errors["name"] == ["dup", "other"]


def test_keyed_form_does_not_coerce():
    form = make_form()

    form.update("age")("12")
    assert form.values["age"] == "12"


def test_opaque_values_pass_through_event_form():
    form = ObjectState({"json": None})

    form.update(InputEvent(name="json", value="5000"))
    assert form.values["json"] == "5000"


def test_schema_closure():
    form = make_form()
    form.update("name")("a")
    form.update(InputEvent(name="age", value="3"))
    form.reset()
    form.update("age")(4)

    view = form.view()
    assert set(view.values) == set(INIT)
    assert set(view.errors) == set(INIT)


def test_previous_state_unchanged_after_update():
    form = make_form()
    s0 = form.state

    form.update("name")("Bob")

    assert s0.get("name").value == "The builder"
    assert form.state.get("name").value == "Bob"


def test_init_values_copied():
    init = dict(INIT)
    form = ObjectState(init)
    init["name"] = "changed"

    form.update("name")("x")
    form.reset()
    assert form.values["name"] == "The builder"


def test_subscribe_and_unsubscribe():
    form = make_form()
    calls = []

    unsubscribe = form.subscribe(lambda prev, nxt: calls.append((prev, nxt)))
    form.update("name")("Bob")
    form.reset()
    unsubscribe()
    form.update("name")("Alice")

    assert len(calls) == 2
    assert calls[0][0].get("name").value == "The builder"
    assert calls[0][1].get("name").value == "Bob"


def test_view_getitem_and_to_dict():
    form = make_form(validate_from_start=True)
    form.update("age")(12)

    view = form.view()
    assert view["age"] == 12
    assert view.to_dict() == {
        "values": {"name": "The builder", "age": 12},
        "errors": {"name": None, "age": ["dislike 12"]},
        "pristine": False,
        "hasErrors": True,
    }


def test_reset_restores_nested_initial_values():
    """Nested initial values survive mutation through views and the caller's dict."""
    init = {"tags": ["a"]}
    form = ObjectState(init)

    form.values["tags"].append("b")
    form.view().values["tags"].append("c")
    init["tags"].append("d")
    assert form.values["tags"] == ["a"]

    form.update("tags")(["x"])
    form.reset()
    assert form.values["tags"] == ["a"]
    assert form.init_values == {"tags": ["a"]}


def test_failed_reset_keeps_pristine_phase_unchanged():
    """A reset that raises does not re-arm the pristine phase."""

    class Uncopyable:
        def __deepcopy__(self, memo):
            raise RuntimeError("cannot copy")

    form = make_form()
    form.update("name")("x")
    assert form.pristine is False

    form._init_values["name"] = Uncopyable()
    before = form.state
    with pytest.raises(RuntimeError):
        form.reset()

    assert form.pristine is False
    assert form.state is before


def test_reset_rearms_pristine_even_with_validate_from_start():
    form = make_form(validate_from_start=True)
    form.update("name")("Alice")
    assert form.errors["name"] == ["Not Bob"]

    form.reset()
    assert form.pristine is True

    form.update("name")("Alice")
    assert form.errors["name"] is None
    form.update("name")("Alice")
    assert form.errors["name"] == ["Not Bob"]
