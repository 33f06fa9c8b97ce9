# tests/test_health.py
from fastapi.testclient import TestClient


def test_health_reports_service(client: TestClient) -> None:
    """The health endpoint names the service and version."""
    r = client.get("/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "healthy"
    assert body["service"] == "blogdesk"


def test_root_responds(client: TestClient) -> None:
    """The root endpoint points at the docs."""
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["docs"] == "/docs"


def test_unknown_route_uses_error_envelope(client: TestClient) -> None:
    """Router-level 404s are rendered in the error envelope."""
    r = client.get("/api/v1/nope")
    assert r.status_code == 404
    assert r.json() == {"success": False, "message": "Not Found", "error": None}
