"""Plan feature table: the validated tier -> {features, limits} mapping."""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from tenantconf.common.exceptions import PlanTableError, UnknownPlanTier
from tenantconf.entitlements.catalog import DEFAULT_PLANS, UNBOUNDED, LimitValue

logger = logging.getLogger(__name__)


def is_limit_value(value: Any) -> bool:
    """True for a non-negative int (not bool) or UNBOUNDED."""
    if value == UNBOUNDED and isinstance(value, str):
        return True
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def limit_at_least(value: LimitValue, floor: LimitValue) -> bool:
    """Compare two limit values; UNBOUNDED is above every integer."""
    if value == UNBOUNDED:
        return True
    if floor == UNBOUNDED:
        return False
    return value >= floor


@dataclass(frozen=True)
class PlanEntry:
    """Default feature flags and limits for one tier."""
    features: Mapping[str, bool]
    limits: Mapping[str, LimitValue]

    def as_dict(self) -> dict[str, dict[str, Any]]:
        return {"features": dict(self.features), "limits": dict(self.limits)}


class PlanFeatureTable:
    """Immutable, validated plan table.

    Tier order is declaration order (first tier is the lowest). The feature
    and limit key sets are closed: every tier must state every key, and no
    tier may introduce a key the others lack.
    """

    def __init__(self, entries: Mapping[str, PlanEntry]):
        if not entries:
            raise PlanTableError("Plan table must define at least one tier")

        tiers = tuple(entries)
        first = entries[tiers[0]]
        feature_keys = frozenset(first.features)
        limit_keys = frozenset(first.limits)

        for tier, entry in entries.items():
            if not isinstance(tier, str) or not tier or tier != tier.lower():
                raise PlanTableError(f"Tier names must be non-empty lower-case strings, got {tier!r}")
            _check_keys(tier, "feature", set(entry.features), feature_keys)
            _check_keys(tier, "limit", set(entry.limits), limit_keys)
            for key, enabled in entry.features.items():
                if not isinstance(enabled, bool):
                    raise PlanTableError(
                        f"Tier {tier!r} feature {key!r} must be a boolean, got {enabled!r}"
                    )
            for key, value in entry.limits.items():
                if not is_limit_value(value):
                    raise PlanTableError(
                        f"Tier {tier!r} limit {key!r} must be a non-negative integer "
                        f"or {UNBOUNDED!r}, got {value!r}"
                    )

        self._tiers = tiers
        self._entries = MappingProxyType({
            tier: PlanEntry(
                features=MappingProxyType(dict(entry.features)),
                limits=MappingProxyType(dict(entry.limits)),
            )
            for tier, entry in entries.items()
        })
        self._feature_keys = feature_keys
        self._limit_keys = limit_keys

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "PlanFeatureTable":
        """Build a table from JSON-shaped data: {tier: {features: {...}, limits: {...}}}."""
        if not isinstance(raw, Mapping):
            raise PlanTableError("Plan table must be a mapping of tier name to entry")
        entries: dict[str, PlanEntry] = {}
        for tier, body in raw.items():
            if not isinstance(body, Mapping):
                raise PlanTableError(f"Tier {tier!r} entry must be a mapping")
            features = body.get("features", {})
            limits = body.get("limits", {})
            if not isinstance(features, Mapping) or not isinstance(limits, Mapping):
                raise PlanTableError(f"Tier {tier!r} features and limits must be mappings")
            entries[tier] = PlanEntry(features=dict(features), limits=dict(limits))
        return cls(entries)

    @property
    def tiers(self) -> tuple[str, ...]:
        return self._tiers

    @property
    def feature_keys(self) -> frozenset[str]:
        return self._feature_keys

    @property
    def limit_keys(self) -> frozenset[str]:
        return self._limit_keys

    def coerce_tier(self, tier: Any) -> str:
        """Normalise a tier name (case-insensitive) or raise UnknownPlanTier."""
        name = tier.value if isinstance(tier, Enum) else tier
        if not isinstance(name, str) or name.lower() not in self._entries:
            raise UnknownPlanTier(tier)
        return name.lower()

    def entry(self, tier: Any) -> PlanEntry:
        return self._entries[self.coerce_tier(tier)]

    def tier_rank(self, tier: Any) -> int:
        return self._tiers.index(self.coerce_tier(tier))

    def minimum_tier_for(self, feature: str) -> str | None:
        """Lowest tier that enables a feature by default, or None."""
        for tier in self._tiers:
            if self._entries[tier].features.get(feature):
                return tier
        return None

    def as_dict(self) -> dict[str, dict[str, Any]]:
        return {tier: self._entries[tier].as_dict() for tier in self._tiers}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlanFeatureTable):
            return NotImplemented
        return self._tiers == other._tiers and self.as_dict() == other.as_dict()

    def __repr__(self) -> str:
        return f"PlanFeatureTable(tiers={list(self._tiers)!r})"


def _check_keys(tier: str, kind: str, present: set[str], expected: frozenset[str]) -> None:
    missing = expected - present
    extra = present - expected
    if missing:
        raise PlanTableError(f"Tier {tier!r} omits {kind} keys: {sorted(missing)}")
    if extra:
        raise PlanTableError(
            f"Tier {tier!r} defines {kind} keys missing from other tiers: {sorted(extra)}"
        )


def default_plan_table() -> PlanFeatureTable:
    """The built-in free/pro/enterprise table."""
    return PlanFeatureTable.from_mapping(DEFAULT_PLANS)


def load_plan_table(path: str | Path) -> PlanFeatureTable:
    """Read a plan table from a JSON file."""
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise PlanTableError(f"Plan table {path} is not valid JSON: {exc}") from exc
    table = PlanFeatureTable.from_mapping(raw)
    logger.info("Loaded plan table from %s (tiers: %s)", path, ", ".join(table.tiers))
    return table
