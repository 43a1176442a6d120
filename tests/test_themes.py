from radixui.themes import ThemeContext, ThemeMode, theme_provider, use_theme


def test_new_context_is_light():
    assert ThemeContext().mode is ThemeMode.LIGHT


def test_toggle_switches_to_dark_and_back():
    ctx = ThemeContext()
    assert ctx.toggle() is ThemeMode.DARK
    assert ctx.mode is ThemeMode.DARK
    assert ctx.toggle() is ThemeMode.LIGHT
    assert ctx.mode is ThemeMode.LIGHT


def test_toggled_mode_values_match_css_classes():
    ctx = ThemeContext(ThemeMode("dark"))
    assert ctx.mode.value == "dark"
    assert ctx.toggle().value == "light"


def test_use_theme_without_provider_returns_fresh_light_context():
    first = use_theme()
    first.toggle()
    second = use_theme()
    assert second.mode is ThemeMode.LIGHT
    assert second is not first


def test_provider_shares_context():
    ctx = ThemeContext()
    with theme_provider(ctx) as provided:
        assert provided is ctx
        use_theme().toggle()
    assert ctx.mode is ThemeMode.DARK


def test_provider_default_context_is_light():
    with theme_provider() as provided:
        assert use_theme() is provided
        assert provided.mode is ThemeMode.LIGHT


def test_nested_provider_restores_outer():
    outer = ThemeContext()
    inner = ThemeContext(ThemeMode.DARK)
    with theme_provider(outer):
        with theme_provider(inner):
            assert use_theme() is inner
        assert use_theme() is outer