"""Built-in plan tiers, feature flags and usage limits.

Three tiers: free, pro, enterprise (in that order).
Every tier states every feature and every limit explicitly; a tier that
does not grant something says False (features) or gives a ceiling (limits).

Limits are non-negative integers or UNBOUNDED.
"""

from enum import Enum
from typing import Any, Final, Literal, Union

UNBOUNDED: Final = "unbounded"

LimitValue = Union[int, Literal["unbounded"]]


class PlanTier(str, Enum):
    FREE = "free"
    PRO = "pro"
    ENTERPRISE = "enterprise"


class FeatureKey(str, Enum):
    # Payments
    PAYMENTS = "payments"
    REFUNDS = "refunds"
    SPLIT_PAYMENTS = "split_payments"
    # Automation
    EMAIL_AUTOMATION = "email_automation"
    SMS_AUTOMATION = "sms_automation"
    WAITLIST = "waitlist"
    NO_SHOW_WORKFLOWS = "no_show_workflows"
    # Customization
    THEME_COLORS = "theme_colors"
    CUSTOM_BRANDING = "custom_branding"
    WHITE_LABEL_PORTAL = "white_label_portal"
    CUSTOM_DOMAINS = "custom_domains"
    # Integrations
    API_ACCESS = "api_access"
    WEBHOOKS = "webhooks"
    QUICKBOOKS = "quickbooks"
    ZAPIER = "zapier"
    # Security & support
    SSO = "sso"
    CUSTOM_RBAC = "custom_rbac"
    ACCOUNT_MANAGER = "account_manager"


class LimitKey(str, Enum):
    LOCATIONS = "locations"
    SEATS = "seats"
    BOOKINGS_PER_MONTH = "bookings_per_month"
    ACTIVE_PETS = "active_pets"
    STORAGE_MB = "storage_mb"
    API_CALLS_PER_DAY = "api_calls_per_day"
    AUDIT_RETENTION_DAYS = "audit_retention_days"


# ── Features enabled per tier ──
_PRO_FEATURES = frozenset({
    FeatureKey.PAYMENTS,
    FeatureKey.REFUNDS,
    FeatureKey.EMAIL_AUTOMATION,
    FeatureKey.SMS_AUTOMATION,
    FeatureKey.WAITLIST,
    FeatureKey.NO_SHOW_WORKFLOWS,
    FeatureKey.THEME_COLORS,
    FeatureKey.API_ACCESS,
    FeatureKey.WEBHOOKS,
    FeatureKey.QUICKBOOKS,
    FeatureKey.ZAPIER,
})

# enterprise = pro + white-label, SSO and dedicated support
_ENTERPRISE_FEATURES = _PRO_FEATURES | {
    FeatureKey.SPLIT_PAYMENTS,
    FeatureKey.CUSTOM_BRANDING,
    FeatureKey.WHITE_LABEL_PORTAL,
    FeatureKey.CUSTOM_DOMAINS,
    FeatureKey.SSO,
    FeatureKey.CUSTOM_RBAC,
    FeatureKey.ACCOUNT_MANAGER,
}

_ENABLED_BY_TIER = {
    PlanTier.FREE: frozenset(),
    PlanTier.PRO: _PRO_FEATURES,
    PlanTier.ENTERPRISE: _ENTERPRISE_FEATURES,
}

# ── Usage limits per tier ──
USAGE_LIMITS: dict[PlanTier, dict[LimitKey, LimitValue]] = {
    PlanTier.FREE: {
        LimitKey.LOCATIONS: 1,
        LimitKey.SEATS: 2,
        LimitKey.BOOKINGS_PER_MONTH: 150,
        LimitKey.ACTIVE_PETS: 100,
        LimitKey.STORAGE_MB: 100,
        LimitKey.API_CALLS_PER_DAY: 0,
        LimitKey.AUDIT_RETENTION_DAYS: 30,
    },
    PlanTier.PRO: {
        LimitKey.LOCATIONS: 3,
        LimitKey.SEATS: 5,
        LimitKey.BOOKINGS_PER_MONTH: 2_500,
        LimitKey.ACTIVE_PETS: UNBOUNDED,
        LimitKey.STORAGE_MB: 1_024,
        LimitKey.API_CALLS_PER_DAY: 100,
        LimitKey.AUDIT_RETENTION_DAYS: 90,
    },
    PlanTier.ENTERPRISE: {
        LimitKey.LOCATIONS: UNBOUNDED,
        LimitKey.SEATS: UNBOUNDED,
        LimitKey.BOOKINGS_PER_MONTH: UNBOUNDED,
        LimitKey.ACTIVE_PETS: UNBOUNDED,
        LimitKey.STORAGE_MB: 10_240,
        LimitKey.API_CALLS_PER_DAY: UNBOUNDED,
        LimitKey.AUDIT_RETENTION_DAYS: 365,
    },
}

# ── Pricing (informational, shown on plan listings) ──
PLAN_PRICING = {
    PlanTier.FREE: {"monthly": 0, "annual": 0},
    PlanTier.PRO: {"monthly": 89, "annual": 69},
    PlanTier.ENTERPRISE: {"monthly": 199, "annual": 149},
}


def _tier_features(tier: PlanTier) -> dict[str, bool]:
    enabled = _ENABLED_BY_TIER[tier]
    return {key.value: key in enabled for key in FeatureKey}


def _tier_limits(tier: PlanTier) -> dict[str, LimitValue]:
    return {key.value: value for key, value in USAGE_LIMITS[tier].items()}


# JSON-shaped built-in table, in tier order. Same shape as a plan table file.
DEFAULT_PLANS: dict[str, dict[str, Any]] = {
    tier.value: {
        "features": _tier_features(tier),
        "limits": _tier_limits(tier),
    }
    for tier in PlanTier
}
