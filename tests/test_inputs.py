import pytest

from linkdeck.browser import Browser
from linkdeck.inputs import (
    Checkbox,
    InputField,
    InputOptions,
    InputPermission,
    InputType,
    SelectBox,
)


def test_input_type_strings():
    assert str(InputOptions().input_type) == "text"
    assert str(InputOptions(input_type=InputType.NUMBER).input_type) == "number"


def test_default_options():
    options = InputOptions()
    assert options.input_type is InputType.TEXT
    assert options.permission is InputPermission.WRITE_AND_READ


def test_writable_field_takes_value():
    field = InputField()
    assert field.key_up("hello") == "hello"
    assert field.displayed_value() == "hello"


@pytest.mark.parametrize("permission", [InputPermission.READ_ONLY, InputPermission.DISABLED])
def test_non_writable_field_keeps_value(permission):
    field = InputField("kept", InputOptions(permission=permission))
    assert field.key_up("changed") == "kept"
    assert field.value == "kept"


def test_disabled_field_displays_nothing():
    field = InputField("kept", InputOptions(permission=InputPermission.DISABLED))
    assert field.displayed_value() == ""


def test_read_only_field_displays_value():
    field = InputField("kept", InputOptions(permission=InputPermission.READ_ONLY))
    assert field.displayed_value() == "kept"


def test_checkbox_checks_only_when_input_empty():
    box = Checkbox()
    assert box.click(input_value_is_empty=False) is False
    assert box.click(input_value_is_empty=True) is True
    assert box.checked is True


def test_checkbox_unchecks_regardless():
    box = Checkbox(disabled=True)
    assert box.click(input_value_is_empty=True) is False
    assert box.checked is False


def test_select_box_defaults_to_first_option():
    select = SelectBox(Browser.names())
    assert select.value == Browser.names()[0]
    assert select.is_open is False


def test_select_box_init_value():
    select = SelectBox(["A", "B"], init_value="B")
    assert select.value == "B"


def test_select_box_toggle_twice_closes():
    select = SelectBox(["A", "B"])
    assert select.toggle() is True
    assert select.toggle() is False


def test_select_box_choose_closes_and_sets():
    select = SelectBox(["A", "B", "C"])
    select.toggle()
    assert select.choose("C") == "C"
    assert select.value == "C"
    assert select.is_open is False


def test_select_box_rejects_unknown_option():
    select = SelectBox(["A", "B"])
    with pytest.raises(ValueError):
        select.choose("Z")
    assert select.value == "A"


def test_select_box_needs_options():
    with pytest.raises(ValueError):
        SelectBox([])