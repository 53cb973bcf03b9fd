# tests/test_api.py
"""
HTTP API Tests - Endpoint Envelopes, Calibration and Cache Headers
"""
import pytest
from fastapi.testclient import TestClient

from goldwise.adapters.web.api import create_app
from goldwise.application.calibration import Calibration
from goldwise.application.fallback import FallbackChain
from goldwise.application.news_service import NewsService
from goldwise.application.quote_service import QuoteService
from goldwise.domain.errors import UpstreamError

from conftest import FakeClock, FakeSpotProvider

RSS = """<rss><channel>
<item><title>Gold hits record in India</title><link>https://n/1</link></item>
<item><title>Cricket team wins gold</title><link>https://n/2</link></item>
</channel></rss>"""


class FakeNewsProvider:
    source_label = "Google News"

    def __init__(self):
        self.error = None

    async def search(self, query):
        if self.error is not None:
            raise self.error
        return RSS


async def _fx():
    return 83.0


@pytest.fixture
def spot():
    return FakeSpotProvider()


@pytest.fixture
def news_provider():
    return FakeNewsProvider()


@pytest.fixture
def client(spot, news_provider):
    clock = FakeClock()
    quotes = QuoteService(spot, FallbackChain([("fx", _fx)], default=83.0), Calibration(4.8), clock=clock)
    news = NewsService(news_provider, clock=clock)
    with TestClient(create_app(quote_service=quotes, news_service=news)) as test_client:
        yield test_client


class TestRoot:
    def test_liveness(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert "GoldWise Backend is running" in resp.text


class TestLive:
    def test_ok(self, client):
        resp = client.get("/api/live")
        data = resp.json()

        assert resp.status_code == 200
        assert data["ok"] is True
        assert data["premiumPct"] == 4.8
        assert data["gold"]["inrPerGram24"] > data["gold"]["inrPerGram22"] > data["gold"]["inrPerGram18"]
        assert data["fx"]["usdToInr"] == 83.0
        assert data["updatedAt"].endswith("Z")

    def test_upstream_failure(self, client, spot):
        spot.error = UpstreamError("Gold upstream invalid price")
        resp = client.get("/api/live")

        assert resp.status_code == 500
        assert resp.json() == {"ok": False, "error": "Gold upstream invalid price"}


class TestCalibrate:
    def test_updates_premium(self, client):
        before = client.get("/api/live").json()
        resp = client.post("/api/calibrate", json={"premiumPct": 5.2})

        assert resp.status_code == 200
        assert resp.json() == {"ok": True, "message": "✅ Premium updated", "premiumPct": 5.2}

        after = client.get("/api/live").json()
        assert after["premiumPct"] == 5.2
        assert after["gold"]["inrPerGram24"] > before["gold"]["inrPerGram24"]
        assert after["silver"] == before["silver"]

    @pytest.mark.parametrize("body", [{"premiumPct": -1}, {"premiumPct": 13}, {"premiumPct": "abc"}, {"premiumPct": 10 ** 400}, {}])
    def test_rejects_out_of_domain(self, client, body):
        resp = client.post("/api/calibrate", json=body)

        assert resp.status_code == 400
        assert resp.json() == {"ok": False, "error": "Invalid premiumPct (0 to 12). Example: { premiumPct: 5.2 }"}
        assert client.get("/api/live").json()["premiumPct"] == 4.8

    def test_malformed_json(self, client):
        resp = client.post("/api/calibrate", content=b"{premiumPct:", headers={"Content-Type": "application/json"})
        assert resp.status_code == 400
        assert resp.json()["ok"] is False


class TestNews:
    def test_ok_with_no_cache_headers(self, client):
        resp = client.get("/api/news", params={"category": "global"})
        data = resp.json()

        assert resp.status_code == 200
        assert data["ok"] is True
        assert data["category"] == "global"
        assert [a["url"] for a in data["articles"]] == ["https://n/1"]
        assert data["articles"][0]["source"] == "Google News"
        assert resp.headers["cache-control"] == "no-store, no-cache, must-revalidate, proxy-revalidate"
        assert resp.headers["pragma"] == "no-cache"
        assert resp.headers["expires"] == "0"

    def test_default_category(self, client):
        assert client.get("/api/news").json()["category"] == "india"
        assert client.get("/api/news?category=weather").json()["category"] == "india"

    def test_failure(self, client, news_provider):
        news_provider.error = UpstreamError("Upstream 503: unavailable")
        resp = client.get("/api/news", params={"category": "silver"})

        assert resp.status_code == 500
        assert resp.json() == {"ok": False, "error": "Upstream 503: unavailable"}
        assert resp.headers["pragma"] == "no-cache"


class TestCors:
    def test_any_origin(self, client):
        resp = client.get("/api/live", headers={"Origin": "https://example.org"})
        assert resp.headers["access-control-allow-origin"] == "*"
