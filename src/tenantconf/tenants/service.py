"""Tenant configuration service: one tenant record in, resolved features and theme out."""

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from tenantconf.entitlements.gate import FeatureGate
from tenantconf.entitlements.resolver import PlanFeatureResolver, ResolvedFeatureSet
from tenantconf.tenants.schemas import ResolvedTenantConfigResponse, TenantRecord
from tenantconf.theming.models import ResolvedTheme
from tenantconf.theming.resolver import ThemeResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedTenantConfig:
    """Resolved features and theme for one tenant record."""
    tenant_id: str | None
    features: ResolvedFeatureSet
    theme: ResolvedTheme

    def to_response(self) -> ResolvedTenantConfigResponse:
        return ResolvedTenantConfigResponse(
            tenant_id=self.tenant_id,
            features=self.features.as_dict(),
            theme=self.theme,
        )


class TenantConfigService:
    """Runs both resolvers for a tenant. Holds no tenant state."""

    def __init__(self, plan_resolver: PlanFeatureResolver, theme_resolver: ThemeResolver):
        self.plan_resolver = plan_resolver
        self.theme_resolver = theme_resolver

    def resolve(self, record: TenantRecord | Mapping[str, Any]) -> ResolvedTenantConfig:
        if not isinstance(record, TenantRecord):
            record = TenantRecord.model_validate(record)

        features = self.plan_resolver.resolve(record.plan, record.overrides)
        theme = self.theme_resolver.resolve(record.theme, record.branding)
        logger.info(
            "Resolved configuration for tenant %s on %s plan",
            record.tenant_id or record.slug or "<anonymous>", features.tier,
        )
        return ResolvedTenantConfig(
            tenant_id=record.tenant_id,
            features=features,
            theme=theme,
        )

    def gate_for(self, record: TenantRecord | Mapping[str, Any]) -> FeatureGate:
        """A FeatureGate over the record's resolved feature set."""
        if not isinstance(record, TenantRecord):
            record = TenantRecord.model_validate(record)
        features = self.plan_resolver.resolve(record.plan, record.overrides)
        return FeatureGate(features, table=self.plan_resolver.table)
