import pytest

from radixui.label import Label


def test_basic_form_association():
    label = Label(children="Email Address", html_for="email-input")
    attrs = label.attributes()
    assert attrs["for"] == "email-input"
    assert attrs["class"] == "label-root"
    assert attrs["data-state"] == "default"
    assert attrs["data-required"] is None
    assert attrs["data-disabled"] is None


def test_required_label():
    attrs = Label(children="Required Field", html_for="required-input", required=True).attributes()
    assert attrs["class"] == "label-root label-required"
    assert attrs["data-state"] == "required"
    assert attrs["data-required"] == ""


def test_disabled_label_wins_over_required():
    attrs = Label(html_for="disabled-input", disabled=True, required=True).attributes()
    assert attrs["class"] == "label-root label-required label-disabled"
    assert attrs["data-state"] == "disabled"
    assert attrs["data-disabled"] == ""


@pytest.mark.parametrize(
    "class_name",
    [
        "label-subtle",
        "label-small label-blue",
        "label-large label-green",
        "label-uppercase label-purple",
        "label-bold label-red",
    ],
)
def test_custom_classes_appended(class_name):
    attrs = Label(children="x", class_name=class_name).attributes()
    assert attrs["class"] == "label-root " + class_name


def test_render_contains_children_and_for():
    html = Label(children="Password", html_for="password-input").render()
    assert html.startswith("<label ")
    assert html.endswith(">Password</label>")
    assert 'for="password-input"' in html
    assert 'data-radix-label=""' in html
    assert "data-required" not in html


@pytest.mark.parametrize(
    "tag, inside, detail, expected",
    [
        ("input", False, 2, False),
        ("BUTTON", False, 3, False),
        ("textarea", False, 2, False),
        ("span", True, 2, False),
        ("span", False, 2, True),
        ("span", False, 1, False),
        (None, False, 2, True),
        (None, True, 2, True),
    ],
)
def test_prevents_selection(tag, inside, detail, expected):
    assert Label(children="I agree to the terms and conditions").prevents_selection(
        tag, inside, detail
    ) is expected