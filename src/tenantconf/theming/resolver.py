"""Theme resolution: tenant preference and branding merged over a default theme."""

import logging
from typing import Optional

from tenantconf.theming.defaults import DEFAULT_FONT_PAIRING, DEFAULT_THEME, FONT_PAIRINGS
from tenantconf.theming.models import (
    AssetPreference,
    BrandingPreference,
    ColorPreference,
    ResolvedTheme,
    TerminologyPreference,
    ThemeAssets,
    ThemeColors,
    ThemePreference,
    ThemeTerminology,
    ThemeTypography,
    TypographyPreference,
)

logger = logging.getLogger(__name__)


def is_supplied(value: Optional[str]) -> bool:
    """A field overrides the default only if it is neither None nor ""."""
    return value is not None and value != ""


def _pick(fallback: str, *candidates: Optional[str]) -> str:
    """First supplied candidate (highest precedence first), else the fallback."""
    for value in candidates:
        if is_supplied(value):
            return value
    return fallback


class ThemeResolver:
    """Resolves a tenant's theme against one default theme.

    Precedence per field: branding > preference > default. The result is
    always complete and never shares objects with the default.
    """

    def __init__(self, default_theme: ResolvedTheme = DEFAULT_THEME):
        self.default_theme = default_theme

    def resolve(
        self,
        preference: ThemePreference | None = None,
        branding: BrandingPreference | None = None,
    ) -> ResolvedTheme:
        if preference is None and branding is None:
            return self.default_theme.model_copy(deep=True)

        pref = preference or ThemePreference()
        brand = branding or BrandingPreference()
        default = self.default_theme

        font_pairing, pairing_supplied = self._font_pairing(pref, brand)
        # A branding font preset sets both fonts outright.
        typography_pref = pref.typography or TypographyPreference()
        if is_supplied(brand.font_preset):
            typography_pref = TypographyPreference()

        theme = ResolvedTheme(
            name=_pick(default.name, pref.name),
            colors=self._colors(default.colors, pref.colors or ColorPreference(), brand),
            typography=self._typography(
                default.typography,
                typography_pref,
                font_pairing if pairing_supplied else None,
            ),
            assets=self._assets(default.assets, pref.assets or AssetPreference(), brand),
            terminology=self._terminology(
                default.terminology, pref.terminology or TerminologyPreference()
            ),
            font_pairing=font_pairing,
        )
        logger.debug("Resolved theme %r (font pairing %s)", theme.name, theme.font_pairing)
        return theme

    def _font_pairing(
        self, pref: ThemePreference, brand: BrandingPreference
    ) -> tuple[str, bool]:
        """Returns (pairing name, whether the tenant supplied one)."""
        requested = _pick("", brand.font_preset, pref.font_pairing)
        if not requested:
            return self.default_theme.font_pairing, False
        if requested not in FONT_PAIRINGS:
            logger.debug("Unknown font pairing %r, using %s", requested, DEFAULT_FONT_PAIRING)
            return DEFAULT_FONT_PAIRING, True
        return requested, True

    @staticmethod
    def _colors(
        default: ThemeColors, pref: ColorPreference, brand: BrandingPreference
    ) -> ThemeColors:
        return ThemeColors(
            primary=_pick(default.primary, brand.primary_color, pref.primary),
            secondary=_pick(default.secondary, brand.secondary_color, pref.secondary),
            accent=_pick(default.accent, brand.accent_color, pref.accent),
            background=_pick(default.background, pref.background),
            surface=_pick(default.surface, pref.surface),
            text=_pick(default.text, pref.text),
            muted=_pick(default.muted, pref.muted),
            border=_pick(default.border, pref.border),
            success=_pick(default.success, pref.success),
            warning=_pick(default.warning, pref.warning),
            danger=_pick(default.danger, pref.danger),
        )

    @staticmethod
    def _typography(
        default: ThemeTypography, pref: TypographyPreference, pairing: Optional[str]
    ) -> ThemeTypography:
        if pairing is not None:
            fonts = FONT_PAIRINGS[pairing]
            default = ThemeTypography(sans=fonts["body"], heading=fonts["heading"])
        return ThemeTypography(
            sans=_pick(default.sans, pref.sans),
            heading=_pick(default.heading, pref.heading),
        )

    @staticmethod
    def _assets(
        default: ThemeAssets, pref: AssetPreference, brand: BrandingPreference
    ) -> ThemeAssets:
        return ThemeAssets(
            logo=_pick(default.logo, brand.logo_url, pref.logo),
            square_logo=_pick(default.square_logo, brand.square_logo_url, pref.square_logo),
            wide_logo=_pick(default.wide_logo, brand.wide_logo_url, pref.wide_logo),
        )

    @staticmethod
    def _terminology(
        default: ThemeTerminology, pref: TerminologyPreference
    ) -> ThemeTerminology:
        return ThemeTerminology(
            kennel=_pick(default.kennel, pref.kennel),
            staff=_pick(default.staff, pref.staff),
            booking=_pick(default.booking, pref.booking),
        )


def resolve_theme(
    preference: ThemePreference | None = None,
    branding: BrandingPreference | None = None,
) -> ResolvedTheme:
    """Resolve against the built-in default theme."""
    return ThemeResolver().resolve(preference, branding)
