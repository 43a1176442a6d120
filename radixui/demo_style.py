"""Theme-dependent pieces of the demo page: toggle button and document classes."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from radixui.themes import ThemeMode

_BLUR = "blur(10px)"
_SLATE_BORDER = "#e2e8f0"
_DARK_SLATE = "#334155"

_RULES: tuple[tuple[str, Mapping[str, str]], ...] = (
    (".demo-container", {
        "min-height": "100vh",
        "font-family": "-apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif",
        "line-height": "1.6",
        "transition": "all 0.3s ease",
    }),
    (".dark .demo-container", {"background": "#0a0a0a", "color": "#ffffff"}),
    (".light .demo-container", {"background": "#ffffff", "color": "#1a1a1a"}),
    (".demo-header", {
        "background": "linear-gradient(135deg, #667eea 0%, #764ba2 100%)",
        "color": "white",
        "padding": "3rem 2rem",
        "text-align": "center",
        "position": "relative",
    }),
    (".demo-nav", {
        "background": "rgba(255, 255, 255, 0.95)",
        "backdrop-filter": _BLUR,
        "padding": "1rem 2rem",
        "border-bottom": "1px solid #e5e7eb",
        "position": "sticky",
        "top": "0",
        "z-index": "100",
        "display": "flex",
        "justify-content": "space-between",
        "align-items": "center",
    }),
    (".dark .demo-nav", {
        "background": "rgba(26, 26, 26, 0.95)",
        "border-bottom-color": "#374151",
    }),
    (".demo-content", {
        "max-width": "1200px",
        "margin": "0 auto",
        "padding": "2rem",
        "display": "grid",
        "gap": "3rem",
    }),
    (".component-section", {
        "background": "#f8fafc",
        "border": f"1px solid {_SLATE_BORDER}",
        "border-radius": "12px",
        "padding": "2rem",
        "transition": "all 0.3s ease",
    }),
    (".dark .component-section", {"background": "#1e293b", "border-color": _DARK_SLATE}),
    (".component-section:hover", {
        "transform": "translateY(-2px)",
        "box-shadow": "0 10px 25px rgba(0, 0, 0, 0.1)",
    }),
    (".section-header", {
        "display": "flex",
        "align-items": "center",
        "gap": "1rem",
        "margin-bottom": "2rem",
        "padding-bottom": "1rem",
        "border-bottom": f"2px solid {_SLATE_BORDER}",
    }),
    (".dark .section-header", {"border-bottom-color": _DARK_SLATE}),
    (".section-title", {
        "font-size": "1.5rem",
        "font-weight": "600",
        "margin": "0",
        "color": "#1e293b",
    }),
    (".dark .section-title", {"color": "#f1f5f9"}),
    (".demo-grid", {
        "display": "grid",
        "grid-template-columns": "repeat(auto-fit, minmax(300px, 1fr))",
        "gap": "1.5rem",
    }),
    (".demo-item", {
        "background": "white",
        "border": f"1px solid {_SLATE_BORDER}",
        "border-radius": "8px",
        "padding": "1.5rem",
        "transition": "all 0.2s ease",
    }),
    (".dark .demo-item", {"background": _DARK_SLATE, "border-color": "#475569"}),
    (".demo-item:hover", {
        "border-color": "#667eea",
        "box-shadow": "0 4px 12px rgba(102, 126, 234, 0.15)",
    }),
    (".theme-toggle", {
        "padding": "0.75rem 1rem",
        "background": "rgba(255, 255, 255, 0.2)",
        "border": "1px solid rgba(255, 255, 255, 0.3)",
        "border-radius": "8px",
        "color": "white",
        "cursor": "pointer",
        "font-size": "1.1rem",
        "transition": "all 0.2s ease",
        "backdrop-filter": _BLUR,
    }),
    (".theme-toggle:hover", {
        "background": "rgba(255, 255, 255, 0.3)",
        "transform": "scale(1.05)",
    }),
    (".stats-grid", {
        "display": "grid",
        "grid-template-columns": "repeat(auto-fit, minmax(200px, 1fr))",
        "gap": "1rem",
        "margin": "2rem 0",
    }),
    (".stat-card", {
        "background": "rgba(255, 255, 255, 0.1)",
        "backdrop-filter": _BLUR,
        "border-radius": "8px",
        "padding": "1.5rem",
        "text-align": "center",
        "border": "1px solid rgba(255, 255, 255, 0.2)",
    }),
    (".stat-number", {"font-size": "2rem", "font-weight": "bold", "display": "block"}),
    (".stat-label", {"font-size": "0.875rem", "opacity": "0.9", "margin-top": "0.5rem"}),
    (".dark [role='progressbar']", {
        "background-color": "#374151 !important",
        "border": "1px solid #4b5563",
    }),
    (".dark [role='progressbar'] > div", {"background-color": "#3b82f6 !important"}),
    (".dark .progress-blue [role='progressbar'] > div", {"background-color": "#60a5fa !important"}),
    (".dark .progress-green [role='progressbar'] > div", {"background-color": "#34d399 !important"}),
    (".dark .progress-red [role='progressbar'] > div", {"background-color": "#f87171 !important"}),
    (".dark .progress-purple [role='progressbar'] > div", {"background-color": "#a78bfa !important"}),
)


def _render_rule(selector: str, declarations: Mapping[str, str]) -> str:
    body = "; ".join(f"{name}: {value}" for name, value in declarations.items())
    return f"{selector} {{ {body}; }}"


DEMO_STYLES = "\n".join(_render_rule(sel, decls) for sel, decls in _RULES) + "\n"

_BUTTON_TEXT = {ThemeMode.DARK: "☀️", ThemeMode.LIGHT: "🌙"}
_BUTTON_TITLE = {
    ThemeMode.DARK: "Switch to light mode",
    ThemeMode.LIGHT: "Switch to dark mode",
}


def theme_button_text(mode: ThemeMode) -> str:
    """Icon shown on the theme toggle: the mode a click switches to."""
    return _BUTTON_TEXT[ThemeMode(mode)]


def theme_button_title(mode: ThemeMode) -> str:
    """Tooltip of the theme toggle."""
    return _BUTTON_TITLE[ThemeMode(mode)]


def document_classes(mode: ThemeMode, classes: Iterable[str] = ()) -> list[str]:
    """Return the document's class list after applying ``mode``.

    The class of the active mode is appended if missing and the class of
    the other mode is removed; other classes keep their order.
    """
    mode = ThemeMode(mode)
    other = ThemeMode.LIGHT if mode is ThemeMode.DARK else ThemeMode.DARK
    result: list[str] = []
    for name in classes:
        if name not in result:
            result.append(name)
    if mode.value not in result:
        result.append(mode.value)
    return [name for name in result if name != other.value]