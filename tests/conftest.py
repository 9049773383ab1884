"""Shared test fixtures for tenantconf."""

import logging
import os
import pytest
from httpx import ASGITransport, AsyncClient

from tenantconf.entitlements.resolver import PlanFeatureResolver
from tenantconf.entitlements.table import PlanFeatureTable, default_plan_table
from tenantconf.theming.defaults import DEFAULT_THEME
from tenantconf.theming.resolver import ThemeResolver


# The two-tier table used throughout the entitlement examples
SMALL_PLANS = {
    "free": {"features": {"export": False}, "limits": {"seats": 1}},
    "pro": {"features": {"export": True}, "limits": {"seats": 10}},
}


@pytest.fixture(autouse=True)
def _clean_env():
    """Clear settings cache and singletons around every test."""
    from tenantconf.common.config import get_settings
    from tenantconf.deps import reset_singletons

    for var in ("TENANTCONF_PLAN_TABLE_PATH", "TENANTCONF_DEFAULT_THEME_PATH"):
        os.environ.pop(var, None)
    get_settings.cache_clear()
    reset_singletons()
    yield
    get_settings.cache_clear()
    reset_singletons()
    # create_app() installs the JSON handler; let caplog see records again
    pkg_logger = logging.getLogger("tenantconf")
    pkg_logger.handlers.clear()
    pkg_logger.propagate = True
    pkg_logger.setLevel(logging.NOTSET)


@pytest.fixture
def plan_table():
    return default_plan_table()


@pytest.fixture
def small_table():
    return PlanFeatureTable.from_mapping(SMALL_PLANS)


@pytest.fixture
def resolver(plan_table):
    return PlanFeatureResolver(plan_table)


@pytest.fixture
def theme_resolver():
    return ThemeResolver(DEFAULT_THEME)


@pytest.fixture
def app():
    from tenantconf.app import create_app
    return create_app()


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
