# tests/test_api_client.py
"""
API Client Tests - Envelope Handling and Error Mapping
"""
from unittest.mock import Mock

import pytest
import requests

from goldwise.adapters.client.api_client import GoldwiseApiClient
from goldwise.domain.errors import UpstreamError, ValidationError

from conftest import make_quote


def _response(status_code=200, payload=None, json_error=None):
    resp = Mock()
    resp.status_code = status_code
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = payload
    return resp


def _client(response=None, error=None):
    session = Mock()
    session.headers = {}
    if error is not None:
        session.request.side_effect = error
    else:
        session.request.return_value = response
    return GoldwiseApiClient(base_url="http://api.test/", timeout=5, session=session), session


class TestGoldwiseApiClient:
    def test_get_live(self):
        payload = {"ok": True, **make_quote(gold24=6500.0).to_json()}
        client, session = _client(_response(payload=payload))

        quote = client.get_live()

        assert quote.gold.inr_per_gram_24 == 6500.0
        assert quote.fx.usd_to_inr == 83.25
        session.request.assert_called_once_with("GET", "http://api.test/api/live", timeout=5)
        assert session.headers["User-Agent"]

    def test_error_envelope(self):
        client, _ = _client(_response(500, {"ok": False, "error": "Gold upstream invalid price"}))
        with pytest.raises(UpstreamError, match="Gold upstream invalid price") as exc_info:
            client.get_live()
        assert exc_info.value.status_code == 500

    def test_schema_error(self):
        client, _ = _client(_response(payload={"ok": True, "gold": {}}))
        with pytest.raises(UpstreamError, match="schema error"):
            client.get_live()

    def test_invalid_json(self):
        client, _ = _client(_response(502, json_error=ValueError("no json")))
        with pytest.raises(UpstreamError, match="invalid JSON"):
            client.get_live()

    def test_timeout(self):
        client, _ = _client(error=requests.exceptions.Timeout())
        with pytest.raises(UpstreamError, match="timeout"):
            client.get_live()

    def test_connection_error(self):
        client, _ = _client(error=requests.exceptions.ConnectionError("refused"))
        with pytest.raises(UpstreamError, match="request failed"):
            client.get_news("india")

    def test_get_news(self):
        payload = {
            "ok": True,
            "category": "global",
            "updatedAt": "2025-01-15T10:30:00.000Z",
            "articles": [
                {"title": "Gold rallies", "url": "https://n/1", "source": "Reuters",
                 "publishedAt": "2025-01-15T09:00:00.000Z"},
                {"title": "Bullion steady", "url": "https://n/2", "source": "Mint", "publishedAt": None},
            ],
        }
        client, session = _client(_response(payload=payload))

        feed = client.get_news("global")

        assert feed.category == "global"
        assert [a.title for a in feed.articles] == ["Gold rallies", "Bullion steady"]
        assert feed.articles[1].published_at is None
        params = session.request.call_args.kwargs["params"]
        assert params["category"] == "global"
        assert "ts" in params

    def test_calibrate(self):
        client, session = _client(_response(payload={"ok": True, "message": "✅ Premium updated", "premiumPct": 5.2}))

        assert client.calibrate("5.2") == 5.2
        assert session.request.call_args.kwargs["json"] == {"premiumPct": "5.2"}

    def test_calibrate_rejected(self):
        error = "Invalid premiumPct (0 to 12). Example: { premiumPct: 5.2 }"
        client, _ = _client(_response(400, {"ok": False, "error": error}))
        with pytest.raises(ValidationError, match="Invalid premiumPct"):
            client.calibrate(40)
