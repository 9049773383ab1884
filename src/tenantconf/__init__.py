"""tenantconf: plan entitlement and theme resolution for multi-tenant dashboards."""

from tenantconf.entitlements.catalog import UNBOUNDED, FeatureKey, LimitKey, PlanTier
from tenantconf.entitlements.gate import FeatureGate
from tenantconf.entitlements.resolver import (
    PlanFeatureResolver,
    ResolvedFeatureSet,
    get_limit,
    is_feature_enabled,
    resolve_features,
)
from tenantconf.entitlements.schemas import TenantOverrides
from tenantconf.entitlements.table import PlanFeatureTable, default_plan_table, load_plan_table
from tenantconf.theming.defaults import DEFAULT_THEME
from tenantconf.theming.models import BrandingPreference, ResolvedTheme, ThemePreference
from tenantconf.theming.resolver import ThemeResolver, resolve_theme

__all__ = [
    "UNBOUNDED",
    "FeatureKey",
    "LimitKey",
    "PlanTier",
    "FeatureGate",
    "PlanFeatureResolver",
    "ResolvedFeatureSet",
    "get_limit",
    "is_feature_enabled",
    "resolve_features",
    "TenantOverrides",
    "PlanFeatureTable",
    "default_plan_table",
    "load_plan_table",
    "DEFAULT_THEME",
    "BrandingPreference",
    "ResolvedTheme",
    "ThemePreference",
    "ThemeResolver",
    "resolve_theme",
]
__version__ = "0.1.0"
