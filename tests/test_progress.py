import math

import pytest

from radixui.progress import (
    DEFAULT_MAX,
    Progress,
    ProgressIndicator,
    ProgressState,
    default_value_label,
    is_valid_max,
    is_valid_value,
    progress_state,
)


def test_progress_state_classification():
    assert progress_state(None, 100.0) is ProgressState.INDETERMINATE
    assert progress_state(25.0, 100.0) is ProgressState.LOADING
    assert progress_state(100.0, 100.0) is ProgressState.COMPLETE
    assert progress_state(150.0, 100.0) is ProgressState.COMPLETE


@pytest.mark.parametrize(
    "value, max_value, expected",
    [(25.0, 100.0, "25%"), (75.0, 100.0, "75%"), (100.0, 100.0, "100%"), (0.5, 100.0, "1%")],
)
def test_default_value_label(value, max_value, expected):
    assert default_value_label(value, max_value) == expected


def test_validators():
    assert is_valid_max(100.0)
    assert not is_valid_max(0.0)
    assert not is_valid_max(-5.0)
    assert not is_valid_max(math.nan)
    assert not is_valid_max(math.inf)
    assert is_valid_value(0.0, 100.0)
    assert is_valid_value(100.0, 100.0)
    assert not is_valid_value(-1.0, 100.0)
    assert not is_valid_value(101.0, 100.0)
    assert not is_valid_value(math.nan, 100.0)


def test_static_progress_attributes():
    attrs = Progress(value=75.0, children=[ProgressIndicator()]).attributes()
    assert attrs["role"] == "progressbar"
    assert attrs["aria-valuemin"] == "0"
    assert attrs["aria-valuemax"] == "100"
    assert attrs["aria-valuenow"] == "75"
    assert attrs["aria-valuetext"] == "75%"
    assert attrs["data-state"] == "loading"
    assert attrs["data-value"] == "75"
    assert attrs["data-max"] == "100"


def test_indeterminate_progress():
    progress = Progress(children=[ProgressIndicator()])
    attrs = progress.attributes()
    assert attrs["aria-valuenow"] is None
    assert attrs["aria-valuetext"] is None
    assert attrs["data-state"] == "indeterminate"
    assert attrs["data-value"] == ""
    assert ProgressIndicator().width_percentage(progress) == 100.0


def test_complete_progress():
    assert Progress(value=100.0).state is ProgressState.COMPLETE


def test_invalid_max_falls_back_to_default():
    progress = Progress(value=50.0, max=-10.0)
    assert progress.current_max == DEFAULT_MAX
    assert progress.current_value == 50.0


def test_out_of_range_value_becomes_indeterminate():
    progress = Progress(value=150.0)
    assert progress.current_value is None
    assert progress.state is ProgressState.INDETERMINATE


def test_custom_max_and_label():
    progress = Progress(value=3.0, max=4.0, get_value_label=lambda v, m: f"{v:g} of {m:g}")
    assert progress.value_label == "3 of 4"
    assert progress.attributes()["aria-valuemax"] == "4"
    assert ProgressIndicator().width_percentage(progress) == 75.0


def test_indicator_style():
    progress = Progress(value=50.0)
    assert ProgressIndicator().style(progress) == "width: 50%"
    indicator = ProgressIndicator(custom_style="background: red")
    assert indicator.style(progress) == "background: red; width: 50%"


def test_render_includes_indicator():
    html = Progress(value=25.0, children=[ProgressIndicator(class_name="bar")]).render()
    assert html.startswith("<div ")
    assert 'role="progressbar"' in html
    assert 'style="width: 25%"' in html
    assert 'class="bar"' in html
    assert html.count("</div>") == 2
    assert html.count('data-state="loading"') == 2