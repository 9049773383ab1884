"""Integration tests for the tenant configuration router."""


class TestHealth:
    async def test_health(self, client):
        resp = await client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["service"] == "tenantconf"


class TestResolveTenant:
    async def test_resolve_tenant(self, client):
        resp = await client.post("/config/tenant/resolve", json={
            "tenantId": "tenant-123",
            "slug": "test-kennel",
            "plan": "PRO",
            "featureFlags": {"custom_branding": True},
            "branding": {"primaryColor": "#0ea5e9"},
        })
        assert resp.status_code == 200
        data = resp.json()
        assert data["tenant_id"] == "tenant-123"
        assert data["features"]["tier"] == "pro"
        assert data["features"]["features"]["custom_branding"] is True
        assert data["features"]["limits"]["seats"] == 5
        assert data["theme"]["colors"]["primary"] == "#0ea5e9"
        assert data["theme"]["typography"]["sans"] == "Inter, system-ui, sans-serif"

    async def test_unknown_plan(self, client):
        resp = await client.post("/config/tenant/resolve", json={"plan": "platinum"})
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "UNKNOWN_PLAN_TIER"

    async def test_unknown_feature_override(self, client):
        resp = await client.post("/config/tenant/resolve", json={
            "plan": "pro",
            "overrides": {"features": {"teleport": True}},
        })
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "UNKNOWN_FEATURE_KEY"

    async def test_lowering_limit(self, client):
        resp = await client.post("/config/tenant/resolve", json={
            "plan": "pro",
            "overrides": {"limits": {"seats": 2}},
        })
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "INVALID_LIMIT_OVERRIDE"

    async def test_malformed_override_value(self, client):
        resp = await client.post("/config/tenant/resolve", json={
            "plan": "pro",
            "overrides": {"limits": {"seats": "plenty"}},
        })
        assert resp.status_code == 422

    async def test_misspelled_override_section(self, client):
        resp = await client.post("/config/tenant/resolve", json={
            "plan": "pro",
            "overrides": {"limit": {"seats": 1}},
        })
        assert resp.status_code == 422


class TestResolveFeatures:
    async def test_unbounded_override(self, client):
        resp = await client.post("/config/features/resolve", json={
            "tier": "free",
            "overrides": {"limits": {"seats": "unbounded"}},
        })
        assert resp.status_code == 200
        assert resp.json()["limits"]["seats"] == "unbounded"

    async def test_misspelled_override_section(self, client):
        resp = await client.post("/config/features/resolve", json={
            "tier": "free",
            "overrides": {"feature": {"sso": True}},
        })
        assert resp.status_code == 422

    async def test_unknown_limit(self, client):
        resp = await client.post("/config/features/resolve", json={
            "tier": "free",
            "overrides": {"limits": {"desks": 4}},
        })
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "UNKNOWN_LIMIT_KEY"


class TestPlans:
    async def test_list_plans(self, client):
        resp = await client.get("/config/plans")
        assert resp.status_code == 200
        plans = resp.json()
        assert [p["tier"] for p in plans] == ["free", "pro", "enterprise"]
        assert [p["rank"] for p in plans] == [0, 1, 2]
        assert plans[1]["pricing"]["monthly"] == 89

    async def test_get_plan_case_insensitive(self, client):
        resp = await client.get("/config/plans/ENTERPRISE")
        assert resp.status_code == 200
        assert resp.json()["limits"]["seats"] == "unbounded"

    async def test_get_unknown_plan(self, client):
        resp = await client.get("/config/plans/gold")
        assert resp.status_code == 404


class TestTheme:
    async def test_default_theme(self, client):
        resp = await client.get("/config/theme/default")
        assert resp.status_code == 200
        assert resp.json()["name"] == "BarkBase Default"
