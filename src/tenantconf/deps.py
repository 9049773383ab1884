"""Dependency injection singletons for tenantconf."""

from tenantconf.common.config import get_settings
from tenantconf.entitlements.resolver import PlanFeatureResolver
from tenantconf.entitlements.table import PlanFeatureTable, default_plan_table, load_plan_table
from tenantconf.tenants.service import TenantConfigService
from tenantconf.theming.defaults import DEFAULT_THEME, load_default_theme
from tenantconf.theming.models import ResolvedTheme
from tenantconf.theming.resolver import ThemeResolver

_plan_table: PlanFeatureTable | None = None
_default_theme: ResolvedTheme | None = None
_plan_resolver: PlanFeatureResolver | None = None
_theme_resolver: ThemeResolver | None = None
_tenant_config: TenantConfigService | None = None


def get_plan_table() -> PlanFeatureTable:
    global _plan_table
    if _plan_table is None:
        path = get_settings().plan_table_path
        _plan_table = load_plan_table(path) if path else default_plan_table()
    return _plan_table


def get_default_theme() -> ResolvedTheme:
    global _default_theme
    if _default_theme is None:
        path = get_settings().default_theme_path
        _default_theme = load_default_theme(path) if path else DEFAULT_THEME.model_copy(deep=True)
    return _default_theme


def get_plan_resolver() -> PlanFeatureResolver:
    global _plan_resolver
    if _plan_resolver is None:
        _plan_resolver = PlanFeatureResolver(get_plan_table())
    return _plan_resolver


def get_theme_resolver() -> ThemeResolver:
    global _theme_resolver
    if _theme_resolver is None:
        _theme_resolver = ThemeResolver(get_default_theme())
    return _theme_resolver


def get_tenant_config_service() -> TenantConfigService:
    global _tenant_config
    if _tenant_config is None:
        _tenant_config = TenantConfigService(get_plan_resolver(), get_theme_resolver())
    return _tenant_config


def reset_singletons() -> None:
    """Reset all singletons (for testing)."""
    global _plan_table, _default_theme, _plan_resolver, _theme_resolver, _tenant_config
    _plan_table = None
    _default_theme = None
    _plan_resolver = None
    _theme_resolver = None
    _tenant_config = None
