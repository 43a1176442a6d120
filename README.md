# radixui

Accessible UI primitives in the style of Radix, rendered to plain HTML
strings. Each component is a dataclass that keeps its own state and renders
the markup, ARIA attributes and `data-*` styling hooks of its Radix
counterpart. Only the Python standard library is needed (3.10 or later).

## Modules

- `radixui.markup`: `render_attributes` and `render_element`. `None` and
  `False` drop an attribute, `True` renders it bare; void elements such as
  `input` refuse children.
- `radixui.checkbox`: `Checkbox` and `CheckboxIndicator`.
- `radixui.switch`: `Switch`, `SwitchThumb` and `SwitchIndicator`.
- `radixui.progress`: `Progress`, `ProgressIndicator`, `ProgressState` and the
  helpers `progress_state`, `default_value_label`, `is_valid_max` and
  `is_valid_value`.
- `radixui.separator`: `Separator` and `Orientation`.
- `radixui.label`: `Label`.
- `radixui.themes`: `ThemeMode`, `ThemeContext` (with `toggle()`), the
  `theme_provider` context manager and `use_theme()`, which returns the
  current context or a fresh light one.
- `radixui.demo_style`: the demo page's styles and the theme helpers
  `theme_button_text`, `theme_button_title` and `document_classes`.
- `radixui.demo`: `render_demo_page(theme, progress_value)` and the progress
  button steps `increase_progress`, `decrease_progress` and `reset_progress`.
- `radixui.app`: `shell()` (the whole HTML document), `render_app()`, the
  WSGI callable `application` and the `main()` behind the `radixui-demo`
  command.

## Using the components

```python
from radixui.checkbox import Checkbox, CheckboxIndicator
from radixui.progress import default_value_label, progress_state

checkbox = Checkbox(children=[CheckboxIndicator()])
checkbox.click()          # True: toggled, unless the checkbox is disabled
html = checkbox.render()  # <button type="button" role="checkbox" ... aria-checked="true" ...>

default_value_label(25, 100)   # "25%"
progress_state(None, 100)      # ProgressState.INDETERMINATE
progress_state(100, 100)       # ProgressState.COMPLETE
```

Passing `checked=` makes a checkbox or switch controlled; otherwise its state
starts from `default_checked`. `on_checked_change` is called with the new
state on every toggle.

Keyboard handling: `Checkbox.key_down(" ")` toggles, and Enter is swallowed
(the method returns `True`, meaning the default action is prevented) so it
does not submit a form. `Switch.key_down` toggles on both space and Enter,
and a disabled switch ignores every key. A checkbox or switch given a `name`
also renders a hidden `<input type="checkbox">` for form submission.

Progress values are validated: a maximum that is not a positive finite number
falls back to 100 (with a logged warning), and a value outside `0..max`
makes the bar indeterminate. `ProgressIndicator.width_percentage()` gives the
bar width; an indeterminate bar is 100% wide.

`Label.prevents_selection(target_tag, inside_control, detail)` reports whether
a mouse-down should be prevented: never on or inside a button, input, select
or textarea, otherwise only for double (or more) clicks.

## The demo server

```
radixui-demo [--addr HOST:PORT] [--site-root DIR]
```

starts a `wsgiref` server, by default on `127.0.0.1:3000`, serving the demo
page at `/`. The defaults can also be set with the `RADIXUI_SITE_ADDR` and
`RADIXUI_SITE_ROOT` environment variables. Other paths are served as files
from the site root (default `target/site`); a missing file gets the demo page
with status 404, and methods other than GET and HEAD get 405. The same
behaviour is available as the WSGI callable `radixui.app.application` for use
with any WSGI server.

## What the package does not do

- The rendered pages contain no scripts. In a browser, the theme toggle, the
  progress buttons and the checkboxes and switches do not change anything;
  state changes only through the Python methods (`click`, `key_down`,
  `ThemeContext.toggle`, ...) before rendering.
- The stylesheets the page links to (`/pkg/radixui.css` and
  `/styles/checkbox.css`, `label.css`, `progress.css`, `separator.css`,
  `switch.css`) are not included; place your own in the site root.

## Running the tests

```
pip install ".[test]"
pytest
```