"""Tests for the attribute translation tables."""

from rocbuild.svg.attributes import JSX_RENAMES, apply_rules, to_jsx, to_svelte

STROKED = '<path d="M1 1" stroke-width="1.5" stroke-linecap="round" stroke-linejoin="round"/>'
FILLED = '<path d="M1 1" fill-rule="evenodd" clip-rule="evenodd" stroke-width="2"/>'


class TestJsx:
    def test_stroked_style_gets_live_stroke_width(self):
        out = to_jsx(STROKED, stroked=True)
        assert "strokeWidth={sw}" in out
        assert "stroke-width" not in out
        assert 'strokeLinecap="round"' in out
        assert 'strokeLinejoin="round"' in out

    def test_solid_style_keeps_literal_stroke_width(self):
        out = to_jsx(FILLED, stroked=False)
        assert 'strokeWidth="2"' in out
        assert "{sw}" not in out
        assert 'fillRule="evenodd"' in out
        assert 'clipRule="evenodd"' in out

    def test_attribute_values_are_untouched(self):
        markup = '<g class="stroke-linecap" data-x="fill-rule=1"/>'
        assert apply_rules(markup, JSX_RENAMES) == '<g className="stroke-linecap" data-x="fill-rule=1"/>'

    def test_every_stroke_width_is_replaced(self):
        markup = '<path stroke-width="1"/><circle stroke-width="3"/>'
        assert to_jsx(markup, stroked=True).count("strokeWidth={sw}") == 2


class TestSvelte:
    def test_stroked_style_gets_live_stroke_width(self):
        out = to_svelte(STROKED, stroked=True)
        assert "stroke-width={sw}" in out
        assert 'stroke-linecap="round"' in out

    def test_solid_style_is_unchanged(self):
        assert to_svelte(FILLED, stroked=False) == FILLED
