"""Light/dark theme state shared through a context provider."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from enum import Enum


class ThemeMode(Enum):
    """Available theme modes."""

    LIGHT = "light"
    DARK = "dark"


@dataclass
class ThemeContext:
    """Mutable theme state."""

    mode: ThemeMode = ThemeMode.LIGHT

    def toggle(self) -> ThemeMode:
        """Switch between light and dark mode and return the new mode."""
        self.mode = ThemeMode.DARK if self.mode is ThemeMode.LIGHT else ThemeMode.LIGHT
        return self.mode


_current_theme: ContextVar[ThemeContext | None] = ContextVar(
    "radixui_current_theme", default=None
)


@contextmanager
def theme_provider(context: ThemeContext | None = None) -> Iterator[ThemeContext]:
    """Make a theme context current for the enclosed block."""
    active = context if context is not None else ThemeContext()
    token = _current_theme.set(active)
    try:
        yield active
    finally:
        _current_theme.reset(token)


def use_theme() -> ThemeContext:
    """Return the current theme context, or a fresh light one when none is provided."""
    active = _current_theme.get()
    return active if active is not None else ThemeContext()