"""Pydantic schemas for tenant configuration."""

import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from tenantconf.entitlements.schemas import ResolvedFeaturesResponse, TenantOverrides
from tenantconf.theming.models import BrandingPreference, ResolvedTheme, ThemePreference

logger = logging.getLogger(__name__)


class TenantRecord(BaseModel):
    """The current tenant as handed over by the tenant store.

    Accepts the config API's camelCase payload: the id may arrive as
    tenantId, recordId or id, and legacy featureFlags become feature
    overrides. A missing or empty plan means the free plan.
    """
    model_config = ConfigDict(populate_by_name=True)

    tenant_id: Optional[str] = Field(default=None, alias="tenantId")
    slug: Optional[str] = None
    name: Optional[str] = None
    plan: str = "free"
    overrides: Optional[TenantOverrides] = None
    theme: Optional[ThemePreference] = None
    branding: Optional[BrandingPreference] = None

    @model_validator(mode="before")
    @classmethod
    def _normalize(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if not data.get("tenant_id") and not data.get("tenantId"):
            data["tenant_id"] = data.get("recordId") or data.get("id")
        if not data.get("plan"):
            data["plan"] = "free"
        flags = data.pop("featureFlags", None)
        if flags and not data.get("overrides"):
            data["overrides"] = {"features": flags}
        elif flags:
            logger.warning(
                "Ignoring legacy featureFlags %s for tenant %s: explicit overrides take precedence",
                sorted(flags), data.get("tenant_id") or data.get("tenantId"),
            )
        return data


class ResolvedTenantConfigResponse(BaseModel):
    tenant_id: Optional[str] = None
    features: ResolvedFeaturesResponse
    theme: ResolvedTheme
