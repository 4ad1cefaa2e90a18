# tests/api/test_share_api.py
# HTTP surface of the share service, exercised in-process with the Starlette TestClient

import pytest

import echotext.routers.share as share_router
from echotext.schemas.share import TokenFormat

ORIGIN = "https://echo.test"

pytestmark = pytest.mark.api

CONFIG = {
    "text": "Hello over HTTP",
    "effect": "wave",
    "color": "#FF8800",
    "isBold": True,
    "isItalic": False,
    "isStrikethrough": False,
    "fontSize": 40,
    "fontFamily": "Georgia, serif",
    "spacing": 1.5,
    "repeat": 2,
}


def _create(client, fmt="compact", config=None):
    return client.post("/api/share", json={"config": config or CONFIG, "format": fmt})


class TestCreateShareLink:

    def test_compact(self, client):
        resp = _create(client)
        assert resp.status_code == 201
        body = resp.json()
        assert body["format"] == "compact"
        assert body["url"] == f"{ORIGIN}/s/{body['token']}"
        assert body["length"] == len(body["token"])

    def test_legacy_is_longer(self, client):
        compact = _create(client).json()
        legacy = _create(client, fmt="legacy").json()
        assert legacy["format"] == "legacy"
        assert legacy["length"] > compact["length"]

    def test_invalid_config(self, client):
        resp = _create(client, config={**CONFIG, "repeat": 0})
        assert resp.status_code == 400
        error = resp.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["details"]["errors"]

    def test_number_too_large_for_a_float(self, client):
        resp = _create(client, config={**CONFIG, "fontSize": 10 ** 400})
        assert resp.status_code == 400
        assert resp.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_unknown_format(self, client):
        resp = _create(client, fmt="qr")
        assert resp.status_code == 400

    def test_encoder_failure(self, client, monkeypatch):
        monkeypatch.setitem(share_router._ENCODERS, TokenFormat.COMPACT, lambda config: "")
        resp = _create(client)
        assert resp.status_code == 500
        assert resp.json()["error"]["code"] == "LINK_GENERATION_FAILED"


class TestResolveShareLink:

    def test_compact_round_trip(self, client):
        token = _create(client).json()["token"]
        resp = client.get(f"/api/share/{token}")
        assert resp.status_code == 200
        config = resp.json()["config"]
        assert config["text"] == "Hello over HTTP"
        assert config["effect"] == "wave"
        assert config["color"] == "#ff8800"
        assert config["isBold"] is True
        assert config["repeat"] == 2
        # compact tokens do not carry font customisation
        assert config["fontSize"] == 36

    def test_legacy_round_trip(self, client):
        token = _create(client, fmt="legacy").json()["token"]
        config = client.get(f"/api/share/{token}").json()["config"]
        assert config["fontSize"] == 40
        assert config["fontFamily"] == "Georgia, serif"
        assert config["spacing"] == 1.5

    def test_corrupted_token(self, client):
        resp = client.get("/api/share/not-a-real-token")
        assert resp.status_code == 422
        error = resp.json()["error"]
        assert error["code"] == "INVALID_LINK"
        assert error["details"]["reason"] == "corrupted"
        assert "corrupted or malformed" in error["message"]

    def test_empty_text_is_malformed(self, client):
        token = _create(client, config={**CONFIG, "text": "   "}).json()["token"]
        resp = client.get(f"/api/share/{token}")
        assert resp.status_code == 422
        assert resp.json()["error"]["details"]["reason"] == "malformed"

    def test_token_too_long(self, make_client):
        client = make_client(MAX_TOKEN_LENGTH=32)
        resp = client.get("/api/share/" + "A" * 40)
        assert resp.status_code == 422
        assert resp.json()["error"]["details"]["reason"] == "malformed"

    def test_request_id_is_echoed(self, client):
        resp = client.get("/api/share/!!!!", headers={"X-Request-ID": "req-42"})
        assert resp.json()["error"]["request_id"] == "req-42"


class TestHealth:

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "healthy"
        assert body["checks"]["codec"]["status"] == "healthy"

    def test_liveness(self, client):
        assert client.get("/health/live").json() == {"status": "alive"}

    def test_unknown_route(self, client):
        resp = client.get("/nope")
        assert resp.status_code == 404
        assert resp.json()["error"]["code"] == "HTTP_ERROR"
