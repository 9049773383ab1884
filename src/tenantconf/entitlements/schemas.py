"""Pydantic schemas for plan entitlements."""

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt

LimitField = Union[StrictInt, Literal["unbounded"]]


class TenantOverrides(BaseModel):
    """Per-tenant exceptions to plan defaults.

    Only the features and limits sections are accepted. Keys inside them
    stay plain strings; the resolver checks them against the plan table so
    that a typo fails loudly instead of being dropped here.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    features: dict[str, StrictBool] = Field(default_factory=dict)
    limits: dict[str, LimitField] = Field(default_factory=dict)


class ResolvedFeaturesResponse(BaseModel):
    tier: str
    features: dict[str, bool]
    limits: dict[str, LimitField]


class PlanResponse(BaseModel):
    tier: str
    rank: int
    features: dict[str, bool]
    limits: dict[str, LimitField]
    pricing: dict[str, int] = {}


class ResolveFeaturesRequest(BaseModel):
    tier: str
    overrides: TenantOverrides | None = None
