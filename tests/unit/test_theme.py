"""Tests for theme resolution."""

import json

import pytest
from pydantic import ValidationError

from tenantconf.theming.defaults import DEFAULT_THEME, FONT_PAIRINGS, load_default_theme
from tenantconf.theming.models import (
    BrandingPreference,
    ColorPreference,
    ThemePreference,
    TypographyPreference,
)
from tenantconf.theming.resolver import ThemeResolver, is_supplied, resolve_theme


class TestDefaults:
    def test_no_preference_equals_default(self, theme_resolver):
        assert theme_resolver.resolve() == DEFAULT_THEME

    def test_no_preference_is_a_copy(self, theme_resolver):
        theme = theme_resolver.resolve()
        assert theme is not DEFAULT_THEME
        theme.colors.primary = "0 0 0"
        theme.terminology.kennel = "Run"
        assert DEFAULT_THEME.colors.primary == "245 158 11"
        assert DEFAULT_THEME.terminology.kennel == "Kennel"

    def test_module_helper(self):
        assert resolve_theme() == DEFAULT_THEME

    def test_empty_preference_equals_default(self, theme_resolver):
        assert theme_resolver.resolve(ThemePreference()) == DEFAULT_THEME


class TestFieldMerge:
    def test_color_only_keeps_typography(self, theme_resolver):
        pref = ThemePreference(colors=ColorPreference(primary="#2563eb"))
        theme = theme_resolver.resolve(pref)
        assert theme.colors.primary == "#2563eb"
        assert theme.colors.secondary == DEFAULT_THEME.colors.secondary
        assert theme.typography == DEFAULT_THEME.typography
        assert theme.assets == DEFAULT_THEME.assets

    @pytest.mark.parametrize("blank", [None, ""])
    def test_blank_fields_fall_back(self, theme_resolver, blank):
        pref = ThemePreference(
            name=blank,
            colors=ColorPreference(primary=blank, danger="200 0 0"),
        )
        theme = theme_resolver.resolve(pref)
        assert theme.name == DEFAULT_THEME.name
        assert theme.colors.primary == DEFAULT_THEME.colors.primary
        assert theme.colors.danger == "200 0 0"

    def test_is_supplied(self):
        assert is_supplied("x")
        assert is_supplied(" ")
        assert not is_supplied("")
        assert not is_supplied(None)

    def test_camel_case_payload(self, theme_resolver):
        pref = ThemePreference.model_validate({
            "fonts": {"heading": "Georgia, serif"},
            "terminology": {"kennel": "Suite"},
        })
        theme = theme_resolver.resolve(pref)
        assert theme.typography.heading == "Georgia, serif"
        assert theme.typography.sans == DEFAULT_THEME.typography.sans
        assert theme.terminology.kennel == "Suite"
        assert theme.terminology.staff == "Staff"

    def test_resolution_does_not_touch_default(self, theme_resolver):
        theme_resolver.resolve(ThemePreference(colors=ColorPreference(primary="1 2 3")))
        assert DEFAULT_THEME.colors.primary == "245 158 11"


class TestFontPairing:
    def test_pairing_sets_typography(self, theme_resolver):
        theme = theme_resolver.resolve(ThemePreference(font_pairing="classic"))
        assert theme.font_pairing == "classic"
        assert theme.typography.heading == FONT_PAIRINGS["classic"]["heading"]
        assert theme.typography.sans == FONT_PAIRINGS["classic"]["body"]

    def test_explicit_font_beats_pairing(self, theme_resolver):
        pref = ThemePreference(
            font_pairing="playful",
            typography=TypographyPreference(heading="Comic Neue"),
        )
        theme = theme_resolver.resolve(pref)
        assert theme.typography.heading == "Comic Neue"
        assert theme.typography.sans == FONT_PAIRINGS["playful"]["body"]

    def test_branding_preset_beats_preference_fonts(self, theme_resolver):
        pref = ThemePreference.model_validate({"fonts": {"sans": "Comic Sans"}})
        theme = theme_resolver.resolve(pref, BrandingPreference(font_preset="classic"))
        assert theme.font_pairing == "classic"
        assert theme.typography.sans == FONT_PAIRINGS["classic"]["body"]
        assert theme.typography.heading == FONT_PAIRINGS["classic"]["heading"]

    def test_preference_fonts_kept_without_branding_preset(self, theme_resolver):
        pref = ThemePreference.model_validate({"fonts": {"sans": "Comic Sans"}})
        theme = theme_resolver.resolve(pref, BrandingPreference(primary_color="#000000"))
        assert theme.typography.sans == "Comic Sans"

    def test_unknown_pairing_falls_back_to_modern(self, theme_resolver):
        theme = theme_resolver.resolve(ThemePreference(font_pairing="gothic"))
        assert theme.font_pairing == "modern"
        assert theme.typography.heading == FONT_PAIRINGS["modern"]["heading"]


class TestBranding:
    def test_branding_over_preference(self, theme_resolver):
        pref = ThemePreference(colors=ColorPreference(primary="1 1 1", accent="2 2 2"))
        branding = BrandingPreference.model_validate({
            "primaryColor": "#10b981",
            "squareLogoUrl": "https://cdn.example.com/sq.png",
        })
        theme = theme_resolver.resolve(pref, branding)
        assert theme.colors.primary == "#10b981"
        assert theme.colors.accent == "2 2 2"
        assert theme.assets.square_logo == "https://cdn.example.com/sq.png"
        assert theme.assets.wide_logo == DEFAULT_THEME.assets.wide_logo

    def test_branding_alone(self, theme_resolver):
        theme = theme_resolver.resolve(branding=BrandingPreference(font_preset="friendly"))
        assert theme.font_pairing == "friendly"
        assert theme.colors == DEFAULT_THEME.colors

    def test_empty_branding_color_ignored(self, theme_resolver):
        pref = ThemePreference(colors=ColorPreference(secondary="9 9 9"))
        theme = theme_resolver.resolve(pref, BrandingPreference(secondary_color=""))
        assert theme.colors.secondary == "9 9 9"


class TestCustomDefault:
    def test_load_default_theme(self, tmp_path):
        custom = DEFAULT_THEME.model_copy(deep=True)
        custom.name = "Ocean"
        custom.colors.primary = "14 165 233"
        path = tmp_path / "theme.json"
        path.write_text(custom.model_dump_json())

        loaded = load_default_theme(path)
        theme = ThemeResolver(loaded).resolve(ThemePreference(colors=ColorPreference(accent="0 0 0")))
        assert theme.name == "Ocean"
        assert theme.colors.primary == "14 165 233"
        assert theme.colors.accent == "0 0 0"

    def test_incomplete_default_rejected(self, tmp_path):
        path = tmp_path / "theme.json"
        path.write_text(json.dumps({"name": "Partial"}))
        with pytest.raises(ValidationError):
            load_default_theme(path)
