"""Plan entitlement resolution: tier defaults merged with tenant overrides."""

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from tenantconf.common.exceptions import (
    InvalidLimitOverride,
    UnknownFeatureKey,
    UnknownLimitKey,
)
from tenantconf.entitlements.catalog import UNBOUNDED, LimitValue
from tenantconf.entitlements.schemas import TenantOverrides
from tenantconf.entitlements.table import (
    PlanFeatureTable,
    default_plan_table,
    is_limit_value,
    limit_at_least,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedFeatureSet:
    """Every feature flag and limit for one tenant, fully populated."""
    tier: str
    features: Mapping[str, bool]
    limits: Mapping[str, LimitValue]

    def as_dict(self) -> dict[str, Any]:
        return {
            "tier": self.tier,
            "features": dict(sorted(self.features.items())),
            "limits": dict(sorted(self.limits.items())),
        }


class PlanFeatureResolver:
    """Resolves a tier plus optional overrides against one plan table."""

    def __init__(self, table: PlanFeatureTable):
        self.table = table

    def resolve(
        self,
        tier: Any,
        overrides: TenantOverrides | Mapping[str, Any] | None = None,
    ) -> ResolvedFeatureSet:
        """
        Merge the tier's plan defaults with per-tenant overrides.

        Feature overrides replace the plan boolean. Limit overrides may keep
        or raise the plan default (UNBOUNDED is above every integer); a lower
        value raises InvalidLimitOverride. Unknown keys raise
        UnknownFeatureKey / UnknownLimitKey.
        """
        tier_name = self.table.coerce_tier(tier)
        entry = self.table.entry(tier_name)

        features = dict(entry.features)
        limits = dict(entry.limits)

        if overrides is not None:
            if not isinstance(overrides, TenantOverrides):
                overrides = TenantOverrides.model_validate(overrides)

            for key, enabled in overrides.features.items():
                if key not in features:
                    raise UnknownFeatureKey(key)
                features[key] = enabled

            for key, value in overrides.limits.items():
                if key not in limits:
                    raise UnknownLimitKey(key)
                plan_default = entry.limits[key]
                if not is_limit_value(value) or not limit_at_least(value, plan_default):
                    logger.warning(
                        "Rejected limit override %s=%r on %s plan (default %r)",
                        key, value, tier_name, plan_default,
                        extra={"error_code": "INVALID_LIMIT_OVERRIDE"},
                    )
                    raise InvalidLimitOverride(key, value, plan_default)
                limits[key] = value

        logger.debug(
            "Resolved %s plan with %d feature and %d limit overrides",
            tier_name,
            len(overrides.features) if overrides is not None else 0,
            len(overrides.limits) if overrides is not None else 0,
        )
        return ResolvedFeatureSet(
            tier=tier_name,
            features=MappingProxyType(features),
            limits=MappingProxyType(limits),
        )


def key_name(key: Any) -> Any:
    return key.value if isinstance(key, Enum) else key


def is_feature_enabled(feature_set: ResolvedFeatureSet, key: Any) -> bool:
    """Look up a feature flag; unknown keys raise UnknownFeatureKey."""
    name = key_name(key)
    if not isinstance(name, str) or name not in feature_set.features:
        raise UnknownFeatureKey(key)
    return feature_set.features[name]


def get_limit(feature_set: ResolvedFeatureSet, key: Any) -> LimitValue:
    """Look up a limit; unknown keys raise UnknownLimitKey."""
    name = key_name(key)
    if not isinstance(name, str) or name not in feature_set.limits:
        raise UnknownLimitKey(key)
    return feature_set.limits[name]


def remaining_allowance(feature_set: ResolvedFeatureSet, key: Any, used: int) -> LimitValue:
    """How much of a limit is left after `used`; UNBOUNDED stays UNBOUNDED."""
    limit = get_limit(feature_set, key)
    if limit == UNBOUNDED:
        return UNBOUNDED
    return max(0, limit - max(0, used))


def usage_ratio(feature_set: ResolvedFeatureSet, key: Any, used: int) -> float:
    """Fraction of a limit consumed, capped at 1.0. Unbounded limits report 0.0."""
    limit = get_limit(feature_set, key)
    if limit == UNBOUNDED:
        return 0.0
    if limit == 0:
        return 1.0 if used > 0 else 0.0
    return min(1.0, max(0, used) / limit)


def resolve_features(
    tier: Any,
    overrides: TenantOverrides | Mapping[str, Any] | None = None,
    table: PlanFeatureTable | None = None,
) -> ResolvedFeatureSet:
    """Resolve against `table`, or the built-in table when none is given."""
    return PlanFeatureResolver(table or default_plan_table()).resolve(tier, overrides)
