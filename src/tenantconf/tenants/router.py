"""Tenant configuration API router: stateless resolution endpoints."""

from fastapi import APIRouter, HTTPException

from tenantconf.common.exceptions import TenantConfError, UnknownPlanTier
from tenantconf.common.schemas import ErrorResponse
from tenantconf.entitlements.catalog import PLAN_PRICING
from tenantconf.entitlements.schemas import (
    PlanResponse,
    ResolvedFeaturesResponse,
    ResolveFeaturesRequest,
)
from tenantconf.tenants.schemas import ResolvedTenantConfigResponse, TenantRecord
from tenantconf.theming.models import ResolvedTheme

router = APIRouter(prefix="/config", tags=["config"])


def _get_service():
    from tenantconf.deps import get_tenant_config_service
    return get_tenant_config_service()


def _error(e: TenantConfError, status_code: int = 422) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail=ErrorResponse(error=type(e).__name__, code=e.code, detail=e.message).model_dump(),
    )


def _plan_response(tier: str) -> PlanResponse:
    table = _get_service().plan_resolver.table
    entry = table.entry(tier)
    return PlanResponse(
        tier=tier,
        rank=table.tier_rank(tier),
        features=dict(entry.features),
        limits=dict(entry.limits),
        pricing=PLAN_PRICING.get(tier, {}),
    )


@router.post("/tenant/resolve", response_model=ResolvedTenantConfigResponse)
async def resolve_tenant(body: TenantRecord):
    svc = _get_service()
    try:
        return svc.resolve(body).to_response()
    except TenantConfError as e:
        raise _error(e)


@router.post("/features/resolve", response_model=ResolvedFeaturesResponse)
async def resolve_features(body: ResolveFeaturesRequest):
    svc = _get_service()
    try:
        return svc.plan_resolver.resolve(body.tier, body.overrides).as_dict()
    except TenantConfError as e:
        raise _error(e)


@router.get("/plans", response_model=list[PlanResponse])
async def list_plans():
    table = _get_service().plan_resolver.table
    return [_plan_response(tier) for tier in table.tiers]


@router.get("/plans/{tier}", response_model=PlanResponse)
async def get_plan(tier: str):
    table = _get_service().plan_resolver.table
    try:
        return _plan_response(table.coerce_tier(tier))
    except UnknownPlanTier as e:
        raise _error(e, status_code=404)


@router.get("/theme/default", response_model=ResolvedTheme)
async def default_theme():
    return _get_service().theme_resolver.resolve()
