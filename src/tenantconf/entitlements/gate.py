"""FeatureGate: query facade over the current tenant's resolved feature set."""

from typing import Any

from tenantconf.common.exceptions import FeatureNotEnabledError
from tenantconf.entitlements.catalog import LimitValue
from tenantconf.entitlements.resolver import (
    ResolvedFeatureSet,
    key_name,
    get_limit,
    is_feature_enabled,
    remaining_allowance,
)
from tenantconf.entitlements.table import PlanFeatureTable


class FeatureGate:
    """Answers "is X enabled" / "what is the limit for Y" for the rendering layer.

    Holds a reference to one ResolvedFeatureSet. When the tenant changes the
    caller resolves a new set and calls swap(); the old set is left as is.
    """

    def __init__(self, feature_set: ResolvedFeatureSet, table: PlanFeatureTable | None = None):
        self._current = feature_set
        self._table = table

    @property
    def current(self) -> ResolvedFeatureSet:
        return self._current

    @property
    def tier(self) -> str:
        return self._current.tier

    def swap(self, feature_set: ResolvedFeatureSet) -> ResolvedFeatureSet:
        """Replace the current set; returns the previous one."""
        previous, self._current = self._current, feature_set
        return previous

    def enabled(self, key: Any) -> bool:
        return is_feature_enabled(self._current, key)

    def limit(self, key: Any) -> LimitValue:
        return get_limit(self._current, key)

    def remaining(self, key: Any, used: int) -> LimitValue:
        return remaining_allowance(self._current, key, used)

    def require(self, key: Any) -> None:
        """Raise FeatureNotEnabledError unless the feature is enabled."""
        if self.enabled(key):
            return
        name = key_name(key)
        required_tier = self._table.minimum_tier_for(name) if self._table else None
        raise FeatureNotEnabledError(name, required_tier=required_tier)
