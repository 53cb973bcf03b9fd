# tests/test_news_service.py
"""
News Service Tests - Relevance Filtering, Dedupe and Per-Category Cache
"""
import pytest

from goldwise.application.news_service import (
    NEWS_QUERIES,
    NewsService,
    dedupe_articles,
    is_relevant,
    resolve_category,
)
from goldwise.domain.errors import UpstreamError
from goldwise.domain.models import NewsArticle


def _rss(*items):
    body = "".join(
        f"<item><title>{title}</title><link>{link}</link></item>" for title, link in items
    )
    return f"<rss><channel>{body}</channel></rss>"


class FakeNewsProvider:
    source_label = "Google News"

    def __init__(self, xml="", error=None):
        self.xml = xml
        self.error = error
        self.queries = []

    async def search(self, query):
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return self.xml


class TestRelevance:
    @pytest.mark.parametrize("title", [
        "Gold price hits record high in India",
        "MCX futures slip ahead of Fed minutes",
        "Hallmark rules tightened for jewellery sellers",
        "XAUUSD technical outlook",
    ])
    def test_relevant(self, title):
        assert is_relevant(title)

    @pytest.mark.parametrize("title", [
        "Bitcoin surges as gold dips",
        "Gold medal for India in cricket final",
        "Sensex closes higher on IT rally",
        "Silver demand jumps",
        "",
        None,
    ])
    def test_not_relevant(self, title):
        assert not is_relevant(title)


class TestResolveCategory:
    def test_known(self):
        assert resolve_category("Kashmir") == "kashmir"
        assert resolve_category(" global ") == "global"

    def test_unknown_maps_to_default(self):
        assert resolve_category("sports") == "india"
        assert resolve_category(None) == "india"
        assert resolve_category("sports", default="silver") == "silver"


class TestDedupe:
    def test_keeps_first_by_url_then_title(self):
        articles = [
            NewsArticle(title="A", url="https://x/1", source="s"),
            NewsArticle(title="A again", url="https://x/1", source="s"),
            NewsArticle(title="B", url="", source="s"),
            NewsArticle(title="B", url="", source="s"),
        ]
        assert [a.title for a in dedupe_articles(articles)] == ["A", "B"]


class TestNewsService:
    @pytest.mark.asyncio
    async def test_filters_and_truncates(self, clock):
        xml = _rss(
            ("Gold rate today in Srinagar", "https://n/1"),
            ("Crypto and gold: a new era", "https://n/2"),
            ("Gold rate today in Srinagar", "https://n/1"),
            ("Bullion demand rises before Diwali", "https://n/3"),
            ("22K jewellery prices ease", "https://n/4"),
        )
        provider = FakeNewsProvider(xml)
        service = NewsService(provider, ttl_seconds=120, max_articles=2, clock=clock)

        feed = await service.get_news("kashmir")

        assert feed.category == "kashmir"
        assert [a.url for a in feed.articles] == ["https://n/1", "https://n/3"]
        assert provider.queries == [NEWS_QUERIES["kashmir"]]

    @pytest.mark.asyncio
    async def test_cache_per_category(self, clock):
        provider = FakeNewsProvider(_rss(("Gold steady", "https://n/1")))
        service = NewsService(provider, ttl_seconds=120, clock=clock)

        first = await service.get_news("india")
        clock.advance(119)
        assert await service.get_news("india") is first
        await service.get_news("global")
        assert len(provider.queries) == 2

        clock.advance(1)
        refreshed = await service.get_news("india")
        assert refreshed is not first
        assert len(provider.queries) == 3

    @pytest.mark.asyncio
    async def test_unknown_category_uses_default(self, clock):
        provider = FakeNewsProvider(_rss(("Gold steady", "https://n/1")))
        service = NewsService(provider, clock=clock)

        feed = await service.get_news("weather")

        assert feed.category == "india"
        assert provider.queries == [NEWS_QUERIES["india"]]

    @pytest.mark.asyncio
    async def test_failure_raises_without_stale_fallback(self, clock):
        provider = FakeNewsProvider(_rss(("Gold steady", "https://n/1")))
        service = NewsService(provider, ttl_seconds=120, clock=clock)
        await service.get_news("india")

        clock.advance(121)
        provider.error = UpstreamError("Upstream 503: unavailable")
        with pytest.raises(UpstreamError):
            await service.get_news("india")
