"""Health & Readiness - liveness always up, readiness follows service/database state."""

import docregistry.services.service_registry as registry_module


async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_ready_without_database(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "not_configured"


async def test_not_ready_before_service_init(client, monkeypatch):
    monkeypatch.setattr(registry_module, "document_service", None)
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "service_uninitialized"
