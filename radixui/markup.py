"""Small helpers for rendering HTML elements as strings."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from html import escape
from typing import Union

AttributeValue = Union[str, int, float, bool, None]

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)


def render_attributes(attributes: Mapping[str, AttributeValue]) -> str:
    """Render attributes in insertion order, each preceded by a space.

    ``None`` and ``False`` omit the attribute, ``True`` renders it bare,
    anything else is rendered as an escaped, quoted value.
    """
    parts = []
    for name, value in attributes.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {name}")
        else:
            parts.append(f' {name}="{escape(str(value), quote=True)}"')
    return "".join(parts)


def render_element(
    tag: str,
    attributes: Mapping[str, AttributeValue] | None = None,
    children: str | Iterable[str] = (),
) -> str:
    """Render an element; children are markup strings inserted verbatim."""
    if not tag:
        raise ValueError("element tag must not be empty")
    attrs = render_attributes(attributes or {})
    content = children if isinstance(children, str) else "".join(children)
    if tag.lower() in VOID_ELEMENTS:
        if content:
            raise ValueError(f"<{tag}> is a void element and cannot have children")
        return f"<{tag}{attrs}>"
    return f"<{tag}{attrs}>{content}</{tag}>"