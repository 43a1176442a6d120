"""Progress bar component with validated value and maximum."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Union

from radixui.markup import AttributeValue, render_element

logger = logging.getLogger(__name__)

DEFAULT_MAX = 100.0


class ProgressState(Enum):
    """Progress state used for data attributes and styling."""

    INDETERMINATE = "indeterminate"
    LOADING = "loading"
    COMPLETE = "complete"


def progress_state(value: float | None, max: float) -> ProgressState:
    """Classify a value relative to its maximum."""
    if value is None:
        return ProgressState.INDETERMINATE
    if value >= max:
        return ProgressState.COMPLETE
    return ProgressState.LOADING


def _round_half_away(x: float) -> float:
    return math.copysign(math.floor(abs(x) + 0.5), x)


def default_value_label(value: float, max: float) -> str:
    """Format a value as a whole percentage of ``max``."""
    return f"{int(_round_half_away(value / max * 100.0))}%"


def is_valid_max(max: float) -> bool:
    """A maximum must be positive and finite."""
    return max > 0.0 and math.isfinite(max)


def is_valid_value(value: float, max: float) -> bool:
    """A value must be finite and lie within ``0..=max``."""
    return math.isfinite(value) and 0.0 <= value <= max


def _format_number(x: float) -> str:
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    if float(x).is_integer():
        return str(int(x))
    return repr(float(x))


@dataclass
class ProgressIndicator:
    """The visual bar inside a :class:`Progress`."""

    class_name: str | None = None
    custom_style: str | None = None
    children: str | None = None

    def width_percentage(self, progress: Progress) -> float:
        """Bar width in percent; indeterminate progress fills the bar."""
        value = progress.current_value
        if value is None:
            return 100.0
        maximum = progress.current_max
        if maximum <= 0.0:
            return 0.0
        return max(min(value / maximum * 100.0, 100.0), 0.0)

    def style(self, progress: Progress) -> str:
        """Inline style: any custom style followed by the width."""
        width_style = f"width: {_format_number(self.width_percentage(progress))}%"
        if self.custom_style is None:
            return width_style
        return f"{self.custom_style}; {width_style}"

    def render(self, progress: Progress) -> str:
        """Render the indicator for the given progress bar."""
        value = progress.current_value
        attrs: dict[str, AttributeValue] = {
            "class": self.class_name,
            "style": self.style(progress),
            "data-state": progress.state.value,
            "data-value": "" if value is None else _format_number(value),
            "data-max": _format_number(progress.current_max),
        }
        return render_element("div", attrs, self.children or "")


ProgressChild = Union[str, ProgressIndicator]


@dataclass
class Progress:
    """A progress bar; ``value`` of ``None`` means indeterminate."""

    value: float | None = None
    max: float | None = None
    get_value_label: Callable[[float, float], str] | None = None
    id: str | None = None
    class_name: str | None = None
    children: Sequence[ProgressChild] = ()

    @property
    def current_max(self) -> float:
        """The maximum, falling back to the default when invalid."""
        maximum = DEFAULT_MAX if self.max is None else float(self.max)
        if is_valid_max(maximum):
            return maximum
        logger.warning(
            "Invalid max value %s for Progress. Using default %s", maximum, DEFAULT_MAX
        )
        return DEFAULT_MAX

    @property
    def current_value(self) -> float | None:
        """The value, or ``None`` when absent or out of range."""
        if self.value is None:
            return None
        value = float(self.value)
        maximum = self.current_max
        if is_valid_value(value, maximum):
            return value
        logger.warning(
            "Invalid value %s for Progress. Value must be between 0 and %s",
            value,
            maximum,
        )
        return None

    @property
    def state(self) -> ProgressState:
        return progress_state(self.current_value, self.current_max)

    @property
    def value_label(self) -> str | None:
        """Accessible text for the current value."""
        value = self.current_value
        if value is None:
            return None
        formatter = self.get_value_label or default_value_label
        return formatter(value, self.current_max)

    def attributes(self) -> dict[str, AttributeValue]:
        """Return the element's attributes in rendering order."""
        value = self.current_value
        maximum = _format_number(self.current_max)
        return {
            "id": self.id,
            "class": self.class_name,
            "role": "progressbar",
            "aria-valuemin": "0",
            "aria-valuemax": maximum,
            "aria-valuenow": None if value is None else _format_number(value),
            "aria-valuetext": self.value_label,
            "data-state": self.state.value,
            "data-value": "" if value is None else _format_number(value),
            "data-max": maximum,
        }

    def render(self) -> str:
        """Render the progress bar and its children as HTML."""
        parts = (
            child if isinstance(child, str) else child.render(self)
            for child in self.children
        )
        return render_element("div", self.attributes(), parts)