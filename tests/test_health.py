from fastapi.testclient import TestClient

from sortkeys.main import app


def test_health():
    client = TestClient(app)
    assert client.get("/v1/health").json() == {"status": "ok"}


def test_version():
    client = TestClient(app)
    assert client.get("/v1/version").json() == {"version": "1.0.0"}
