"""tenantconf exception hierarchy."""


class TenantConfError(Exception):
    """Base exception for all tenant configuration errors."""

    def __init__(self, message: str = "", code: str = "TENANTCONF_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class UnknownPlanTier(TenantConfError):
    """Raised when a plan tier is not part of the plan table."""

    def __init__(self, tier: object = None, message: str = ""):
        self.tier = tier
        super().__init__(message or f"Unknown plan tier: {tier!r}", code="UNKNOWN_PLAN_TIER")


class UnknownFeatureKey(TenantConfError):
    """Raised when a feature key is not part of the closed feature set."""

    def __init__(self, key: object = None, message: str = ""):
        self.key = key
        super().__init__(message or f"Unknown feature key: {key!r}", code="UNKNOWN_FEATURE_KEY")


class UnknownLimitKey(TenantConfError):
    """Raised when a limit key is not part of the closed limit set."""

    def __init__(self, key: object = None, message: str = ""):
        self.key = key
        super().__init__(message or f"Unknown limit key: {key!r}", code="UNKNOWN_LIMIT_KEY")


class InvalidLimitOverride(TenantConfError):
    """Raised when a tenant override would lower a plan limit or is not a limit value."""

    def __init__(self, key: str, value: object, plan_default: object = None, message: str = ""):
        self.key = key
        self.value = value
        self.plan_default = plan_default
        super().__init__(
            message or f"Override {value!r} for limit {key!r} is below plan default {plan_default!r}",
            code="INVALID_LIMIT_OVERRIDE",
        )


class PlanTableError(TenantConfError):
    """Raised when a plan table is incomplete or malformed."""

    def __init__(self, message: str = "Invalid plan table"):
        super().__init__(message, code="INVALID_PLAN_TABLE")


class FeatureNotEnabledError(TenantConfError):
    """Raised when a gated feature is required but not enabled for the tenant."""

    def __init__(self, key: str, required_tier: str | None = None, message: str = ""):
        self.key = key
        self.required_tier = required_tier
        if not message:
            message = f"Feature {key!r} is not enabled"
            if required_tier:
                message += f" (available from the {required_tier} plan)"
        super().__init__(message, code="FEATURE_NOT_ENABLED")
