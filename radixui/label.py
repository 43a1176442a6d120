"""Accessible label component associated with form controls."""

from __future__ import annotations

from dataclasses import dataclass

from radixui.markup import AttributeValue, render_element

_FORM_CONTROL_TAGS = frozenset({"button", "input", "select", "textarea"})


@dataclass
class Label:
    """A ``<label>`` element; ``children`` is markup placed inside it."""

    children: str = ""
    html_for: str | None = None
    class_name: str | None = None
    id: str | None = None
    style: str | None = None
    data_testid: str | None = None
    aria_label: str | None = None
    aria_labelledby: str | None = None
    aria_describedby: str | None = None
    required: bool = False
    disabled: bool = False

    @property
    def data_state(self) -> str:
        if self.disabled:
            return "disabled"
        if self.required:
            return "required"
        return "default"

    def attributes(self) -> dict[str, AttributeValue]:
        """Return the element's attributes in rendering order."""
        class_parts = ["label-root"]
        if self.required:
            class_parts.append("label-required")
        if self.disabled:
            class_parts.append("label-disabled")
        if self.class_name is not None:
            class_parts.append(self.class_name)
        return {
            "id": self.id,
            "class": " ".join(class_parts),
            "style": self.style,
            "for": self.html_for,
            "data-radix-label": "",
            "data-state": self.data_state,
            "data-required": "" if self.required else None,
            "data-disabled": "" if self.disabled else None,
            "data-testid": self.data_testid,
            "aria-label": self.aria_label,
            "aria-labelledby": self.aria_labelledby,
            "aria-describedby": self.aria_describedby,
        }

    def prevents_selection(
        self, target_tag: str | None, inside_control: bool, detail: int
    ) -> bool:
        """Whether a mouse-down should have its default prevented.

        Clicks on or inside form controls keep their normal behaviour;
        otherwise text selection is suppressed on double (or more) clicks.
        """
        if target_tag is not None:
            if target_tag.lower() in _FORM_CONTROL_TAGS:
                return False
            if inside_control:
                return False
        return detail > 1

    def render(self) -> str:
        """Render the label as HTML."""
        return render_element("label", self.attributes(), self.children)