"""Separator component that visually or semantically divides content."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from radixui.markup import AttributeValue, render_element


class Orientation(Enum):
    """Separator orientation."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass
class Separator:
    """A horizontal or vertical divider."""

    orientation: Orientation = Orientation.HORIZONTAL
    decorative: bool = False
    class_name: str | None = None
    id: str | None = None
    style: str | None = None
    data_testid: str | None = None
    aria_label: str | None = None
    aria_labelledby: str | None = None
    aria_describedby: str | None = None
    children: str | None = None

    def attributes(self) -> dict[str, AttributeValue]:
        """Return the element's attributes in rendering order."""
        class_value = (
            "separator-root"
            if self.class_name is None
            else f"separator-root {self.class_name}"
        )
        # aria-orientation defaults to horizontal, so it is only set for vertical.
        aria_orientation = (
            "vertical" if self.orientation is Orientation.VERTICAL else None
        )
        if self.decorative:
            role, aria_orientation = "none", None
        else:
            role = "separator"
        return {
            "id": self.id,
            "class": class_value,
            "style": self.style,
            "role": role,
            "data-radix-separator": "",
            "data-orientation": self.orientation.value,
            "data-state": "decorative" if self.decorative else "semantic",
            "data-testid": self.data_testid,
            "aria-orientation": aria_orientation,
            "aria-label": self.aria_label,
            "aria-labelledby": self.aria_labelledby,
            "aria-describedby": self.aria_describedby,
        }

    def render(self) -> str:
        """Render the separator as HTML."""
        return render_element("div", self.attributes(), self.children or "")