"""The component showcase page."""

from __future__ import annotations

from html import escape

from radixui.checkbox import Checkbox, CheckboxIndicator
from radixui.demo_style import DEMO_STYLES, theme_button_text, theme_button_title
from radixui.label import Label
from radixui.markup import render_element
from radixui.progress import Progress, ProgressIndicator
from radixui.separator import Orientation, Separator
from radixui.switch import Switch, SwitchThumb
from radixui.themes import ThemeContext, use_theme

DEFAULT_PROGRESS = 65.0
RESET_PROGRESS = 50.0
PROGRESS_STEP = 10.0
PROGRESS_MIN = 0.0
PROGRESS_MAX = 100.0

_COLUMN = "display: flex; flex-direction: column; gap: 1rem;"
_ROW = "display: flex; align-items: center; gap: 0.75rem;"
_SPREAD = "display: flex; justify-content: space-between; align-items: center;"
_H3_STYLE = "margin: 0 0 1rem 0; color: #475569;"
_BLOCK_LABEL = "display: block; margin-bottom: 0.5rem;"
_MUTED_TEXT = "margin: 0; color: #64748b;"
_FIELD = "display: flex; flex-direction: column; gap: 0.5rem;"
_INPUT_STYLE = (
    "padding: 0.75rem; border: 1px solid #d1d5db; border-radius: 6px; "
    "font-size: 0.875rem;"
)
_BUTTON_BASE = (
    "padding: 0.5rem 1rem; background: {color}; color: white; border: none; "
    "border-radius: 6px; cursor: pointer; font-size: 0.875rem;"
)

_STATS = (
    ("5", "Components Ready"),
    ("100%", "Radix Compatible"),
    ("0", "Dependencies"),
    ("A11Y", "Accessible"),
)


def increase_progress(value: float) -> float:
    """Add one step to the progress, capped at 100."""
    return min(value + PROGRESS_STEP, PROGRESS_MAX)


def decrease_progress(value: float) -> float:
    """Remove one step from the progress, floored at 0."""
    return max(value - PROGRESS_STEP, PROGRESS_MIN)


def reset_progress() -> float:
    """The value the reset button restores."""
    return RESET_PROGRESS


def _div(children, style: str | None = None, class_name: str | None = None) -> str:
    return render_element("div", {"class": class_name, "style": style}, children)


def _label(text: str, **options) -> str:
    return Label(children=escape(text), **options).render()


def _checkbox(**options) -> str:
    return Checkbox(children=[CheckboxIndicator()], **options).render()


def _switch(**options) -> str:
    return Switch(children=[SwitchThumb()], **options).render()


def _progress(value: float | None) -> str:
    return Progress(value=value, children=[ProgressIndicator()]).render()


def _item(title: str, body: str) -> str:
    heading = render_element("h3", {"style": _H3_STYLE}, escape(title))
    return _div([heading, body], class_name="demo-item")


def _section(section_id: str, title: str, items: list[str]) -> str:
    header = _div(
        render_element("h2", {"class": "section-title"}, escape(title)),
        class_name="section-header",
    )
    grid = _div(items, class_name="demo-grid")
    return render_element(
        "section", {"id": section_id, "class": "component-section"}, [header, grid]
    )


def _header() -> str:
    title = render_element(
        "h1",
        {"style": "font-size: 3rem; margin: 0 0 2rem 0; font-weight: 700;"},
        "Leptos Radix UI",
    )
    cards = [
        _div(
            [
                render_element("span", {"class": "stat-number"}, escape(number)),
                _div(escape(caption), class_name="stat-label"),
            ],
            class_name="stat-card",
        )
        for number, caption in _STATS
    ]
    return render_element(
        "header", {"class": "demo-header"}, [title, _div(cards, class_name="stats-grid")]
    )


def _nav(theme: ThemeContext) -> str:
    caption = _div(
        render_element(
            "span", {"style": "font-weight: 600; color: #667eea;"}, "Component Demo"
        ),
        style="display: flex; align-items: center; gap: 2rem;",
    )
    toggle = render_element(
        "button",
        {"class": "theme-toggle", "title": theme_button_title(theme.mode)},
        escape(theme_button_text(theme.mode)),
    )
    return render_element("nav", {"class": "demo-nav"}, [caption, toggle])


def _checkbox_section() -> str:
    basic = _div(
        [
            _div([_checkbox(), _label("Unchecked")], style=_ROW),
            _div([_checkbox(default_checked=True), _label("Checked")], style=_ROW),
            _div([_checkbox(disabled=True), _label("Disabled")], style=_ROW),
        ],
        style=_COLUMN,
    )
    form = render_element(
        "form",
        {"style": _COLUMN},
        [
            _div(
                [
                    _checkbox(name="newsletter"),
                    _label("Subscribe to newsletter", html_for="newsletter"),
                ],
                style=_ROW,
            ),
            _div(
                [
                    _checkbox(name="terms", required=True),
                    _label("Accept terms and conditions *", html_for="terms"),
                ],
                style=_ROW,
            ),
        ],
    )
    return _section(
        "checkbox",
        "Checkbox",
        [_item("Basic States", basic), _item("Form Integration", form)],
    )


def _switch_section() -> str:
    states = _div(
        [
            _div([_switch(), _label("Off")], style=_ROW),
            _div([_switch(default_checked=True), _label("On")], style=_ROW),
            _div([_switch(disabled=True), _label("Disabled")], style=_ROW),
        ],
        style=_COLUMN,
    )
    settings = _div(
        [
            _div([_label("Dark Mode"), _switch()], style=_SPREAD),
            _div([_label("Notifications"), _switch(default_checked=True)], style=_SPREAD),
            _div([_label("Auto-save"), _switch()], style=_SPREAD),
        ],
        style=_COLUMN,
    )
    return _section(
        "switch",
        "Switch",
        [_item("Toggle States", states), _item("Settings Panel", settings)],
    )


def _progress_section(progress_value: float) -> str:
    static = _div(
        [
            _div([_label(f"{percent}% Complete", style=_BLOCK_LABEL), _progress(percent)])
            for percent in (25.0, 75.0, 100.0)
        ],
        style="display: flex; flex-direction: column; gap: 1.5rem;",
    )
    buttons = _div(
        [
            render_element("button", {"style": _BUTTON_BASE.format(color=color)}, text)
            for color, text in (
                ("#3b82f6", "+10%"),
                ("#ef4444", "-10%"),
                ("#6b7280", "Reset"),
            )
        ],
        style="display: flex; gap: 0.5rem; flex-wrap: wrap;",
    )
    interactive = _div(
        [
            _div(
                [
                    _label(f"Progress: {progress_value:.0f}%", style=_BLOCK_LABEL),
                    _progress(progress_value),
                ]
            ),
            buttons,
        ],
        style=_COLUMN,
    )
    indeterminate = _div([_label("Loading...", style=_BLOCK_LABEL), _progress(None)])
    return _section(
        "progress",
        "Progress",
        [
            _item("Static Progress", static),
            _item("Interactive Progress", interactive),
            _item("Indeterminate", indeterminate),
        ],
    )


def _separator_section() -> str:
    def paragraph(text: str, style: str = _MUTED_TEXT) -> str:
        return render_element("p", {"style": style}, escape(text))

    def span(text: str) -> str:
        return render_element("span", {"style": "color: #64748b;"}, escape(text))

    small = "margin: 0 0 0.5rem 0; color: #64748b; font-size: 0.875rem;"
    horizontal = _div(
        [paragraph("Content above"), Separator().render(), paragraph("Content below")],
        style=_COLUMN,
    )
    vertical = _div(
        [
            span("Left"),
            Separator(orientation=Orientation.VERTICAL).render(),
            span("Right"),
        ],
        style="display: flex; align-items: center; gap: 1rem; height: 3rem;",
    )
    styled = _div(
        [
            _div(
                [
                    paragraph("Blue Separator", small),
                    Separator(class_name="separator-blue separator-large").render(),
                ]
            ),
            _div(
                [
                    paragraph("Dashed Separator", small),
                    Separator(class_name="separator-green separator-dashed").render(),
                ]
            ),
        ],
        style=_COLUMN,
    )
    return _section(
        "separator",
        "Separator",
        [
            _item("Horizontal", horizontal),
            _item("Vertical", vertical),
            _item("Styled", styled),
        ],
    )


def _label_section() -> str:
    def field(text: str, input_id: str, input_type: str, placeholder: str, **options) -> str:
        control = render_element(
            "input",
            {
                "id": input_id,
                "type": input_type,
                "placeholder": placeholder,
                "style": _INPUT_STYLE,
            },
        )
        return _div([_label(text, html_for=input_id, **options), control], style=_FIELD)

    form_labels = _div(
        [
            field("Email Address", "demo-email", "email", "Enter your email"),
            field(
                "Password",
                "demo-password",
                "password",
                "Enter your password",
                required=True,
            ),
        ],
        style=_COLUMN,
    )
    variants = _div(
        [
            _div(_label("Small Blue Label", class_name="label-small label-blue")),
            _div(_label("Large Green Label", class_name="label-large label-green")),
            _div(_label("Uppercase Purple", class_name="label-uppercase label-purple")),
            _div(_label("Disabled Label", disabled=True)),
        ],
        style=_COLUMN,
    )
    with_components = _div(
        [
            _div([_checkbox(), _label("Accept terms")], style=_ROW),
            _div([_switch(), _label("Enable notifications")], style=_ROW),
        ],
        style=_COLUMN,
    )
    return _section(
        "label",
        "Label",
        [
            _item("Form Labels", form_labels),
            _item("Label Variants", variants),
            _item("With Components", with_components),
        ],
    )


def render_demo_page(
    theme: ThemeContext | None = None, progress_value: float = DEFAULT_PROGRESS
) -> str:
    """Render the showcase of every component as HTML."""
    if theme is None:
        theme = use_theme()
    content = render_element(
        "main",
        {"class": "demo-content"},
        [
            _checkbox_section(),
            _switch_section(),
            _progress_section(progress_value),
            _separator_section(),
            _label_section(),
        ],
    )
    return _div(
        [render_element("style", {}, DEMO_STYLES), _header(), _nav(theme), content],
        class_name="demo-container",
    )