import pytest

from radixui.checkbox import Checkbox, CheckboxIndicator


def test_basic_checkbox_is_unchecked():
    box = Checkbox(children=[CheckboxIndicator()])
    assert box.checked_state is False
    assert box.attributes()["aria-checked"] == "false"
    assert box.attributes()["data-state"] == "unchecked"


def test_default_checked():
    box = Checkbox(default_checked=True, children=[CheckboxIndicator()])
    assert box.checked_state is True
    assert box.attributes()["data-state"] == "checked"


def test_disabled_checkbox_does_not_toggle():
    box = Checkbox(disabled=True)
    assert box.click() is False
    assert box.key_down(" ") is True
    assert box.checked_state is False
    attrs = box.attributes()
    assert attrs["data-disabled"] == ""
    assert attrs["disabled"] is True


def test_click_toggles():
    box = Checkbox()
    assert box.click() is True
    assert box.click() is False


def test_space_toggles_and_enter_is_swallowed():
    box = Checkbox()
    assert box.key_down(" ") is True
    assert box.checked_state is True
    assert box.key_down("Enter") is True
    assert box.checked_state is True
    assert box.key_down("a") is False
    assert box.checked_state is True


def test_controlled_value_wins():
    box = Checkbox(checked=True)
    assert box.click() is True
    assert box.checked_state is True


def test_on_checked_change_called():
    seen = []
    box = Checkbox(on_checked_change=seen.append)
    box.click()
    box.key_down(" ")
    assert seen == [True, False]


def test_render_default():
    box = Checkbox(children=[CheckboxIndicator()])
    assert box.render() == (
        '<button type="button" role="checkbox" class="checkbox-root" '
        'data-radix-checkbox="" aria-checked="false" data-state="unchecked" '
        'value="on"><span class="checkbox-indicator " data-state="unchecked">'
        "</span></button>"
    )


def test_indicator_children_shown_only_when_checked():
    indicator = CheckboxIndicator(class_name="big", children="✓")
    box = Checkbox(children=[indicator])
    assert indicator.render(box) == (
        '<span class="checkbox-indicator big" data-state="unchecked"></span>'
    )
    box.click()
    assert indicator.render(box) == (
        '<span class="checkbox-indicator big" data-state="checked">✓</span>'
    )


def test_required_sets_aria_required():
    assert Checkbox(required=True).attributes()["aria-required"] == "true"
    assert Checkbox().attributes()["aria-required"] is None


def test_no_hidden_input_without_name():
    box = Checkbox()
    assert box.hidden_input_attributes() is None
    assert "<input" not in box.render()


@pytest.mark.parametrize("checked", [False, True])
def test_hidden_input_for_forms(checked):
    box = Checkbox(name="terms", required=True, default_checked=checked)
    attrs = box.hidden_input_attributes()
    assert attrs["name"] == "terms"
    assert attrs["value"] == "on"
    assert attrs["checked"] is checked
    assert attrs["required"] is True
    assert attrs["tabindex"] == "-1"
    html = box.render()
    assert html.endswith(">") and '<input type="checkbox" name="terms"' in html
    assert (" checked" in html.split("<input", 1)[1]) is checked