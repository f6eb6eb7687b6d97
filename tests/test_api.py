from fastapi.testclient import TestClient

from sortkeys.main import app

client = TestClient(app)


def test_alphabet():
    body = client.get("/v1/alphabet").json()
    assert body["low"] == "!"
    assert body["high"] == "~"
    assert body["size"] == len(body["symbols"])


def test_between():
    resp = client.post("/v1/keys:between", json={"left": "a", "right": "b"})
    assert resp.status_code == 200
    assert resp.json() == {"key": "aV"}


def test_between_open_ends():
    assert client.post("/v1/keys:between", json={}).json() == {"key": "V"}
    assert client.post("/v1/keys:between", json={"right": "b"}).json() == {"key": "I"}
    assert client.post("/v1/keys:between", json={"left": "a"}).json() == {"key": "n"}


def test_after_and_before():
    assert client.post("/v1/keys:after", json={"key": "a"}).json() == {"key": "n"}
    assert client.post("/v1/keys:before", json={"key": "b"}).json() == {"key": "I"}


def test_alphabet_override():
    resp = client.post("/v1/keys:before", json={"key": "1", "alphabet": "01"})
    assert resp.json() == {"key": "01"}


def test_invalid_order():
    resp = client.post("/v1/keys:between", json={"left": "b", "right": "a"})
    assert resp.status_code == 400
    assert resp.json()["code"] == "invalid_order"


def test_invalid_input():
    resp = client.post("/v1/keys:after", json={"key": "~a"})
    assert resp.status_code == 400
    assert resp.json()["code"] == "invalid_input"


def test_unknown_symbol():
    resp = client.post("/v1/keys:after", json={"key": "a$"})
    assert resp.status_code == 400
    body = resp.json()
    assert body["code"] == "unknown_symbol"
    assert body["details"] == {"symbol": "$"}


def test_invalid_alphabet():
    resp = client.post("/v1/keys:after", json={"key": "a", "alphabet": "aa"})
    assert resp.status_code == 400
    assert resp.json()["code"] == "invalid_alphabet"


def test_spread():
    resp = client.post("/v1/keys:spread", json={"left": "a", "right": "b", "count": 3})
    keys = resp.json()["keys"]
    assert len(keys) == 3
    assert keys == sorted(keys)


def test_spread_limit():
    resp = client.post("/v1/keys:spread", json={"count": 10_000})
    assert resp.status_code == 400
    assert resp.json() == {"detail": "count_too_large"}


def test_spread_negative_count():
    resp = client.post("/v1/keys:spread", json={"count": -1})
    assert resp.status_code == 422
