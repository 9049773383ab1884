"""Theme models: the resolved theme and the partial tenant inputs."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ThemeColors(BaseModel):
    primary: str
    secondary: str
    accent: str
    background: str
    surface: str
    text: str
    muted: str
    border: str
    success: str
    warning: str
    danger: str


class ThemeTypography(BaseModel):
    sans: str
    heading: str


class ThemeAssets(BaseModel):
    logo: str
    square_logo: str
    wide_logo: str


class ThemeTerminology(BaseModel):
    kennel: str
    staff: str
    booking: str


class ResolvedTheme(BaseModel):
    """A complete theme. Every field is populated."""
    name: str
    colors: ThemeColors
    typography: ThemeTypography
    assets: ThemeAssets
    terminology: ThemeTerminology
    font_pairing: str


# ── Tenant inputs: any field may be missing, null or empty ──

class ColorPreference(BaseModel):
    primary: Optional[str] = None
    secondary: Optional[str] = None
    accent: Optional[str] = None
    background: Optional[str] = None
    surface: Optional[str] = None
    text: Optional[str] = None
    muted: Optional[str] = None
    border: Optional[str] = None
    success: Optional[str] = None
    warning: Optional[str] = None
    danger: Optional[str] = None


class TypographyPreference(BaseModel):
    sans: Optional[str] = None
    heading: Optional[str] = None


class AssetPreference(BaseModel):
    logo: Optional[str] = None
    square_logo: Optional[str] = None
    wide_logo: Optional[str] = None


class TerminologyPreference(BaseModel):
    kennel: Optional[str] = None
    staff: Optional[str] = None
    booking: Optional[str] = None


class ThemePreference(BaseModel):
    """Theme as stored by a tenant. Absent groups fall back to the default."""
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    colors: Optional[ColorPreference] = None
    typography: Optional[TypographyPreference] = Field(default=None, alias="fonts")
    assets: Optional[AssetPreference] = None
    terminology: Optional[TerminologyPreference] = None
    font_pairing: Optional[str] = Field(default=None, alias="fontPairing")


class BrandingPreference(BaseModel):
    """Flat branding settings, applied on top of the theme preference."""
    model_config = ConfigDict(populate_by_name=True)

    primary_color: Optional[str] = Field(default=None, alias="primaryColor")
    secondary_color: Optional[str] = Field(default=None, alias="secondaryColor")
    accent_color: Optional[str] = Field(default=None, alias="accentColor")
    font_preset: Optional[str] = Field(default=None, alias="fontPreset")
    logo_url: Optional[str] = Field(default=None, alias="logoUrl")
    square_logo_url: Optional[str] = Field(default=None, alias="squareLogoUrl")
    wide_logo_url: Optional[str] = Field(default=None, alias="wideLogoUrl")
