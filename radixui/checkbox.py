"""Checkbox component with controlled or uncontrolled boolean state."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Union

from radixui.markup import AttributeValue, render_element

_HIDDEN_INPUT_STYLE = (
    "position: absolute; opacity: 0; pointer-events: none; margin: 0; "
    "transform: translateX(-100%);"
)


@dataclass
class CheckboxIndicator:
    """Shows the checkbox state; its children appear only when checked."""

    class_name: str | None = None
    children: str | None = None

    def render(self, checkbox: Checkbox) -> str:
        """Render the indicator for the given checkbox."""
        attrs: dict[str, AttributeValue] = {
            "class": f"checkbox-indicator {self.class_name or ''}",
            "data-state": checkbox.data_state,
        }
        content = (self.children or "") if checkbox.checked_state else ""
        return render_element("span", attrs, content)


CheckboxChild = Union[str, CheckboxIndicator]


@dataclass
class Checkbox:
    """A two-state checkbox rendered as a ``<button role="checkbox">``.

    ``checked`` makes the component controlled; otherwise the state starts
    from ``default_checked`` and is toggled by clicks and the space key.
    """

    checked: bool | None = None
    default_checked: bool | None = None
    on_checked_change: Callable[[bool], None] | None = None
    name: str | None = None
    value: str = "on"
    required: bool = False
    disabled: bool = False
    aria_label: str | None = None
    aria_labelledby: str | None = None
    aria_describedby: str | None = None
    children: Sequence[CheckboxChild] = ()
    _internal: bool = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._internal = bool(self.default_checked)

    @property
    def checked_state(self) -> bool:
        """The current state: the controlled value if given, else the internal one."""
        return self.checked if self.checked is not None else self._internal

    @property
    def data_state(self) -> str:
        return "checked" if self.checked_state else "unchecked"

    def _toggle(self) -> None:
        new_state = not self.checked_state
        self._internal = new_state
        if self.on_checked_change is not None:
            self.on_checked_change(new_state)

    def click(self) -> bool:
        """Handle a click; return the resulting checked state."""
        if not self.disabled:
            self._toggle()
        return self.checked_state

    def key_down(self, key: str) -> bool:
        """Handle a key press; return whether the default action is prevented.

        Space toggles (unless disabled); Enter is swallowed so it does not
        submit a surrounding form.
        """
        if key == " ":
            if not self.disabled:
                self._toggle()
            return True
        return key == "Enter"

    def attributes(self) -> dict[str, AttributeValue]:
        """Return the button's attributes in rendering order."""
        checked = self.checked_state
        return {
            "type": "button",
            "role": "checkbox",
            "class": "checkbox-root",
            "data-radix-checkbox": "",
            "aria-checked": "true" if checked else "false",
            "aria-required": "true" if self.required else None,
            "aria-label": self.aria_label,
            "aria-labelledby": self.aria_labelledby,
            "aria-describedby": self.aria_describedby,
            "data-state": self.data_state,
            "data-disabled": "" if self.disabled else None,
            "disabled": self.disabled,
            "value": self.value,
        }

    def hidden_input_attributes(self) -> dict[str, AttributeValue] | None:
        """Attributes of the hidden form input, or ``None`` without a name."""
        if self.name is None:
            return None
        return {
            "type": "checkbox",
            "name": self.name,
            "value": self.value,
            "checked": self.checked_state,
            "required": self.required,
            "disabled": self.disabled,
            "aria-hidden": "true",
            "tabindex": "-1",
            "style": _HIDDEN_INPUT_STYLE,
        }

    def render(self) -> str:
        """Render the checkbox button and, when named, its hidden input."""
        content = (
            child if isinstance(child, str) else child.render(self)
            for child in self.children
        )
        markup = render_element("button", self.attributes(), content)
        input_attrs = self.hidden_input_attributes()
        if input_attrs is not None:
            markup += render_element("input", input_attrs)
        return markup