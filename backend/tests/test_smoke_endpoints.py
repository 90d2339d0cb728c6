# backend/tests/test_smoke_endpoints.py
"""
API Smoke Tests - Endpoints the front end relies on

If any of these returns 404 the UI breaks.

Run: pytest backend/tests/test_smoke_endpoints.py -m smoke -v
"""
import pytest


@pytest.mark.smoke
def test_smoke_ping(client):
    """Dead-simple connectivity check."""
    r = client.get("/api/ping")
    assert r.status_code == 200
    assert r.get_json() == {"status": "ok"}


@pytest.mark.smoke
def test_smoke_health(client):
    """Health check - database probe and catalog size."""
    r = client.get("/api/health")
    assert r.status_code == 200
    data = r.get_json()
    assert data["status"] == "ok"
    assert data["schoolCount"] == 100
    assert data["advisorConfigured"] is False


@pytest.mark.smoke
@pytest.mark.parametrize("path", [
    "/api/schools",
    "/api/schools/dbs",
    "/api/filter-options",
    "/api/districts",
    "/api/state",
    "/api/compare",
    "/api/dashboard",
    "/api/advisor/health",
])
def test_smoke_get_endpoints(client, path):
    r = client.get(path)
    assert r.status_code == 200
    assert "data" in r.get_json()


@pytest.mark.smoke
def test_smoke_request_id_echoed(client):
    r = client.get("/api/ping", headers={"X-Request-ID": "abc-123"})
    assert r.headers["X-Request-ID"] == "abc-123"


@pytest.mark.smoke
def test_smoke_unknown_route_envelope(client):
    r = client.get("/api/does-not-exist")
    assert r.status_code == 404
    error = r.get_json()["error"]
    assert error["code"] == "NOT_FOUND"
    assert error["requestId"]


@pytest.mark.smoke
def test_smoke_cors_header(client):
    r = client.get("/api/ping", headers={"Origin": "http://localhost:5173"})
    assert r.headers["Access-Control-Allow-Origin"] == "*"
