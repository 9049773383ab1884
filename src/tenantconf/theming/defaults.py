"""Built-in default theme and font pairings."""

import json
import logging
from pathlib import Path

from tenantconf.theming.models import (
    ResolvedTheme,
    ThemeAssets,
    ThemeColors,
    ThemeTerminology,
    ThemeTypography,
)

logger = logging.getLogger(__name__)

# Colors are space-separated RGB channels ("r g b") for CSS variables.
DEFAULT_THEME = ResolvedTheme(
    name="BarkBase Default",
    colors=ThemeColors(
        primary="245 158 11",
        secondary="217 119 6",
        accent="245 158 11",
        background="248 250 252",
        surface="255 255 255",
        text="17 24 39",
        muted="100 116 139",
        border="226 232 240",
        success="34 197 94",
        warning="234 179 8",
        danger="239 68 68",
    ),
    typography=ThemeTypography(
        sans="Inter, system-ui, sans-serif",
        heading="Inter, system-ui, sans-serif",
    ),
    assets=ThemeAssets(
        logo="/assets/logo.svg",
        square_logo="/assets/logo-square.svg",
        wide_logo="/assets/logo-wide.svg",
    ),
    terminology=ThemeTerminology(
        kennel="Kennel",
        staff="Staff",
        booking="Booking",
    ),
    font_pairing="modern",
)

DEFAULT_FONT_PAIRING = "modern"

FONT_PAIRINGS = {
    "modern": {
        "heading": "'Inter', -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif",
        "body": "'Inter', -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif",
    },
    "classic": {
        "heading": "Georgia, 'Times New Roman', serif",
        "body": "system-ui, -apple-system, BlinkMacSystemFont, sans-serif",
    },
    "friendly": {
        "heading": "'Nunito', -apple-system, BlinkMacSystemFont, sans-serif",
        "body": "'Nunito', -apple-system, BlinkMacSystemFont, sans-serif",
    },
    "professional": {
        "heading": "'Roboto', -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif",
        "body": "'Roboto', -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif",
    },
    "playful": {
        "heading": "'Poppins', -apple-system, BlinkMacSystemFont, sans-serif",
        "body": "'Poppins', -apple-system, BlinkMacSystemFont, sans-serif",
    },
}


def load_default_theme(path: str | Path) -> ResolvedTheme:
    """Read a complete theme from a JSON file. Raises pydantic.ValidationError if incomplete."""
    path = Path(path)
    theme = ResolvedTheme.model_validate_json(path.read_text(encoding="utf-8"))
    logger.info("Loaded default theme %r from %s", theme.name, path)
    return theme
