# src/goldwise/adapters/web/api.py
"""
HTTP API - FastAPI Surface of the Quote Server

Routes:
- GET  /api/live       -> {ok: true, ...Quote} | 500 {ok: false, error}
- POST /api/calibrate  -> {ok: true, message, premiumPct} | 400 {ok: false, error}
- GET  /api/news       -> {ok: true, category, updatedAt, articles} | 500 {ok: false, error}
- GET  /               -> liveness text

CORS is open to every origin. News responses are marked non-cacheable.

Files that USE this module:
- goldwise.server (uvicorn entry point)
- tests.test_api

Files that this module USES:
- goldwise.application.quote_service (QuoteService, build_fx_chain)
- goldwise.application.news_service (NewsService)
- goldwise.application.calibration (Calibration)
- goldwise.adapters.providers (GoldApiProvider, GoogleNewsProvider, create_http_client)
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from goldwise import __version__
from goldwise.adapters.providers.base import create_http_client
from goldwise.adapters.providers.gold_api import GoldApiProvider
from goldwise.adapters.providers.google_news import GoogleNewsProvider
from goldwise.application.calibration import Calibration
from goldwise.application.news_service import NewsService
from goldwise.application.quote_service import QuoteService, build_fx_chain
from goldwise.config import settings
from goldwise.domain.errors import DomainError, ValidationError

log = logging.getLogger(__name__)

NO_CACHE_HEADERS = {
    "Cache-Control": "no-store, no-cache, must-revalidate, proxy-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


def _error(status_code: int, message: str, headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"ok": False, "error": message}, headers=headers)


def create_app(
    http_client: Optional[httpx.AsyncClient] = None,
    calibration: Optional[Calibration] = None,
    quote_service: Optional[QuoteService] = None,
    news_service: Optional[NewsService] = None,
) -> FastAPI:
    """
    Build the API application.

    Anything not supplied is created from settings; a client created here is
    closed when the application shuts down. A supplied quote service brings
    its own calibration.
    """
    owns_client = http_client is None and (quote_service is None or news_service is None)
    client = create_http_client() if owns_client else http_client
    if quote_service is not None:
        calibration = quote_service.calibration
    calibration = calibration or Calibration(settings.default_premium_pct)
    quotes = quote_service or QuoteService(GoldApiProvider(client), build_fx_chain(client), calibration)
    news = news_service or NewsService(GoogleNewsProvider(client))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log.info("GoldWise API starting (premium=%s%%, cache=%ss)", calibration.premium_pct, quotes.ttl_seconds)
        yield
        if owns_client:
            await client.aclose()
        log.info("GoldWise API stopped")

    app = FastAPI(title="GoldWise API", version=__version__, lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.calibration = calibration
    app.state.quote_service = quotes
    app.state.news_service = news

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "✅ GoldWise Backend is running!"

    @app.get("/api/live")
    async def live():
        try:
            quote = await quotes.get_quote()
        except DomainError as e:
            log.error("Live quote failed: %s", e)
            return _error(500, str(e))
        except Exception as e:
            log.exception("Unexpected error building live quote")
            return _error(500, str(e) or type(e).__name__)
        return {"ok": True, **quote.to_json()}

    @app.post("/api/calibrate")
    async def calibrate(request: Request):
        try:
            body = await request.json()
        except ValueError:
            body = None
        raw = body.get("premiumPct") if isinstance(body, dict) else None
        try:
            premium_pct = calibration.update(raw)
        except ValidationError as e:
            return _error(400, str(e))
        return {"ok": True, "message": "✅ Premium updated", "premiumPct": premium_pct}

    @app.get("/api/news")
    async def news_feed(category: Optional[str] = None):
        try:
            feed = await news.get_news(category)
        except DomainError as e:
            log.error("News fetch failed: %s", e)
            return _error(500, str(e), headers=NO_CACHE_HEADERS)
        except Exception as e:
            log.exception("Unexpected error building news feed")
            return _error(500, str(e) or type(e).__name__, headers=NO_CACHE_HEADERS)
        return JSONResponse(content={"ok": True, **feed.to_json()}, headers=NO_CACHE_HEADERS)

    return app
