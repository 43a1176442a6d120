"""Switch component toggling between checked and not checked."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Union

from radixui.markup import AttributeValue, render_element

_HIDDEN_INPUT_STYLE = (
    "position: absolute; pointer-events: none; opacity: 0; margin: 0; "
    "transform: translateX(-100%);"
)


@dataclass
class SwitchThumb:
    """The thumb that moves within the switch."""

    class_name: str | None = None
    children: str | None = None

    def render(self, switch: Switch) -> str:
        """Render the thumb for the given switch."""
        attrs: dict[str, AttributeValue] = {
            "class": f"switch-thumb {self.class_name or ''}",
            "data-state": switch.data_state,
            "data-disabled": "" if switch.disabled else None,
        }
        return render_element("span", attrs, self.children or "")


@dataclass
class SwitchIndicator:
    """Content shown only while the switch is checked."""

    children: str = ""

    def render(self, switch: Switch) -> str:
        """Render the children in a span when checked, nothing otherwise."""
        if not switch.checked_state:
            return ""
        return render_element("span", {}, self.children)


SwitchChild = Union[str, SwitchThumb, SwitchIndicator]


@dataclass
class Switch:
    """A toggle rendered as a ``<button role="switch">``.

    ``checked`` makes the component controlled; otherwise the state starts
    from ``default_checked`` and is toggled by clicks, space and Enter.
    """

    checked: bool | None = None
    default_checked: bool | None = None
    on_checked_change: Callable[[bool], None] | None = None
    name: str | None = None
    value: str = "on"
    required: bool = False
    disabled: bool = False
    class_name: str | None = None
    aria_label: str | None = None
    aria_labelledby: str | None = None
    aria_describedby: str | None = None
    children: Sequence[SwitchChild] = ()
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

        A disabled switch ignores all keys; otherwise space and Enter toggle.
        """
        if self.disabled:
            return False
        if key in (" ", "Enter"):
            self._toggle()
            return True
        return False

    def attributes(self) -> dict[str, AttributeValue]:
        """Return the button's attributes in rendering order."""
        checked = self.checked_state
        return {
            "type": "button",
            "role": "switch",
            "class": f"switch-root {self.class_name or ''}",
            "data-radix-switch": "",
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
            "tabindex": "-1",
            "aria-hidden": "true",
            "style": _HIDDEN_INPUT_STYLE,
        }

    def render(self) -> str:
        """Render the switch button and, when named, its hidden input."""
        content = (
            child if isinstance(child, str) else child.render(self)
            for child in self.children
        )
        markup = render_element("button", self.attributes(), content)
        input_attrs = self.hidden_input_attributes()
        if input_attrs is not None:
            markup += render_element("input", input_attrs)
        return markup