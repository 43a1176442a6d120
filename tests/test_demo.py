import pytest

from radixui.demo import (
    decrease_progress,
    increase_progress,
    render_demo_page,
    reset_progress,
)
from radixui.demo_style import theme_button_text
from radixui.themes import ThemeContext, ThemeMode, theme_provider


def test_increase_adds_a_step():
    assert increase_progress(65.0) == 75.0


def test_increase_is_capped_at_hundred():
    assert increase_progress(95.0) == 100.0
    assert increase_progress(100.0) == 100.0


def test_decrease_is_floored_at_zero():
    assert decrease_progress(5.0) == 0.0
    assert decrease_progress(0.0) == 0.0


def test_reset_restores_fifty():
    assert reset_progress() == 50.0


@pytest.mark.parametrize("value", [20.0, 50.0, 80.0])
def test_increase_then_decrease_round_trips_inside_range(value):
    assert decrease_progress(increase_progress(value)) == value


@pytest.mark.parametrize("value", [0.0, 3.0, 50.0, 97.0, 100.0])
def test_steps_stay_within_bounds(value):
    assert 0.0 <= increase_progress(value) <= 100.0
    assert 0.0 <= decrease_progress(value) <= 100.0


def test_page_shows_default_progress_label():
    page = render_demo_page(ThemeContext())
    assert "Progress: 65%" in page


def test_page_reflects_given_progress_value():
    page = render_demo_page(ThemeContext(), progress_value=42.0)
    assert "Progress: 42%" in page
    assert 'aria-valuenow="42"' in page


def test_page_has_every_progress_bar():
    page = render_demo_page(ThemeContext())
    assert page.count('role="progressbar"') == 5
    assert 'data-state="indeterminate"' in page


def test_light_theme_offers_dark_mode():
    page = render_demo_page(ThemeContext(ThemeMode.LIGHT))
    assert 'title="Switch to dark mode"' in page
    assert theme_button_text(ThemeMode.LIGHT) in page


def test_page_uses_provided_theme_when_none_given():
    with theme_provider(ThemeContext(ThemeMode.DARK)):
        page = render_demo_page()
    assert 'title="Switch to light mode"' in page
    assert theme_button_text(ThemeMode.DARK) in page


def test_page_contains_named_form_inputs():
    page = render_demo_page(ThemeContext())
    assert 'name="newsletter"' in page
    assert 'name="terms"' in page
    assert 'for="demo-email"' in page


def test_page_wraps_everything_in_container():
    page = render_demo_page(ThemeContext())
    assert page.startswith('<div class="demo-container">')
    assert page.endswith("</div>")
    assert 'aria-orientation="vertical"' in page