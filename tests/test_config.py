import importlib
import logging

import pytest
from fastapi.testclient import TestClient

import sortkeys.config
import sortkeys.main
from sortkeys.errors import InvalidAlphabet


@pytest.fixture
def reload_app(monkeypatch):
    def _reload(**env):
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        importlib.reload(sortkeys.config)
        importlib.reload(sortkeys.main)
        return TestClient(sortkeys.main.app)

    yield _reload
    monkeypatch.undo()
    importlib.reload(sortkeys.config)
    importlib.reload(sortkeys.main)


def test_alphabet_from_environment(reload_app):
    client = reload_app(SORTKEYS_ALPHABET="abcd")
    assert client.get("/v1/alphabet").json() == {
        "symbols": "abcd",
        "low": "a",
        "high": "d",
        "size": 4,
    }
    assert client.post("/v1/keys:between", json={}).json() == {"key": "c"}


def test_invalid_alphabet_fails_at_startup(reload_app):
    with pytest.raises(InvalidAlphabet):
        reload_app(SORTKEYS_ALPHABET="aa")


def test_max_spread_from_environment(reload_app):
    client = reload_app(SORTKEYS_MAX_SPREAD="5")
    assert len(client.post("/v1/keys:spread", json={"count": 5}).json()["keys"]) == 5
    resp = client.post("/v1/keys:spread", json={"count": 6})
    assert resp.status_code == 400
    assert resp.json() == {"detail": "count_too_large"}


def test_log_level_from_environment(reload_app):
    reload_app(LOG_LEVEL="debug")
    assert sortkeys.config.LOG_LEVEL == "DEBUG"
    assert logging.getLogger("sortkeys").level == logging.DEBUG


def test_rejected_request_logged(caplog):
    client = TestClient(sortkeys.main.app)
    with caplog.at_level(logging.WARNING, logger="sortkeys.main"):
        resp = client.post("/v1/keys:between", json={"left": "b", "right": "a"})
    assert resp.status_code == 400
    records = [r for r in caplog.records if r.name == "sortkeys.main"]
    assert records
    assert records[0].levelno == logging.WARNING
    assert "invalid_order" in records[0].getMessage()
