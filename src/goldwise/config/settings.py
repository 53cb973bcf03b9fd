# src/goldwise/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration for both the quote server and the
Telegram tracker client. Values come from environment variables (or a
``.env`` file) and are validated on load.

Files that USE this module:
- goldwise.server / goldwise.app (composition roots)
- goldwise.adapters.providers.* (timeouts, user agent)
- goldwise.application.* (cache TTLs, history sizes, thresholds)

Files that this module USES:
- goldwise.shared.validators (validation functions for settings)
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from goldwise.shared.validators import validate_bot_token, validate_http_url


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- HTTP (upstream calls) ---
    http_timeout_seconds: int = Field(default=10, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)
    user_agent: str = Field(default="Mozilla/5.0 (GoldWise FX)", alias="USER_AGENT")

    # --- Upstream endpoints ---
    gold_api_url: str = Field(default="https://api.gold-api.com/price", alias="GOLD_API_URL")
    open_er_api_url: str = Field(default="https://open.er-api.com/v6/latest/USD", alias="OPEN_ER_API_URL")
    exchangerate_host_url: str = Field(
        default="https://api.exchangerate.host/latest?base=USD&symbols=INR",
        alias="EXCHANGERATE_HOST_URL",
    )
    google_news_url: str = Field(default="https://news.google.com/rss/search", alias="GOOGLE_NEWS_URL")

    # --- Server ---
    server_host: str = Field(default="0.0.0.0", alias="SERVER_HOST")
    server_port: int = Field(default=5000, alias="SERVER_PORT", ge=1, le=65535)

    # --- Quote cache / calibration ---
    live_cache_seconds: float = Field(default=4.0, alias="LIVE_CACHE_SECONDS", gt=0)
    default_premium_pct: float = Field(default=4.8, alias="DEFAULT_PREMIUM_PCT", ge=0.0, le=12.0)
    fallback_usd_inr: float = Field(default=83.0, alias="FALLBACK_USD_INR", gt=0)

    # --- News ---
    news_cache_seconds: float = Field(default=120.0, alias="NEWS_CACHE_SECONDS", gt=0)
    news_max_articles: int = Field(default=12, alias="NEWS_MAX_ARTICLES", ge=1, le=100)
    news_default_category: str = Field(default="india", alias="NEWS_DEFAULT_CATEGORY")

    # --- Tracker client (Telegram) ---
    api_base_url: str = Field(default="http://localhost:5000", alias="API_BASE_URL")
    bot_token: str = Field(default="", alias="BOT_TOKEN")
    poll_interval_seconds: int = Field(default=5, alias="POLL_INTERVAL_SECONDS", ge=1, le=3600)
    news_poll_seconds: int = Field(default=120, alias="NEWS_POLL_SECONDS", ge=10, le=86400)
    buy_window_recalc_minutes: int = Field(default=20, alias="BUY_WINDOW_RECALC_MINUTES", ge=1, le=1440)
    # Floor for the multi-day range denominator, in rupees. Tunable, not derived.
    buy_window_min_range: float = Field(default=1.0, alias="BUY_WINDOW_MIN_RANGE", gt=0)
    series_capacity: int = Field(default=120, alias="SERIES_CAPACITY", ge=7)
    history_days: int = Field(default=7, alias="HISTORY_DAYS", ge=1, le=90)
    day_stats_save_every: int = Field(default=3, alias="DAY_STATS_SAVE_EVERY", ge=1)

    # --- Persistence ---
    data_dir: Path = Field(default=Path("./data"), alias="DATA_DIR")

    # --- Logging ---
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @property
    def buy_window_recalc_seconds(self) -> int:
        return self.buy_window_recalc_minutes * 60

    @field_validator("bot_token")
    @classmethod
    def validate_bot_token(cls, v: str) -> str:
        """Bot token is optional (server-only deployments) but must be well formed if set."""
        if v and not validate_bot_token(v):
            raise ValueError("Invalid BOT_TOKEN format")
        return v

    @field_validator("api_base_url", "gold_api_url", "open_er_api_url", "exchangerate_host_url", "google_news_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not validate_http_url(v):
            raise ValueError(f"Invalid URL: {v!r}")
        return v.rstrip("/")

    @field_validator("news_default_category")
    @classmethod
    def validate_category(cls, v: str) -> str:
        return v.strip().lower()

    def model_post_init(self, __context) -> None:
        """Post-initialization: ensure data directory exists."""
        self.data_dir.mkdir(parents=True, exist_ok=True)


# Global settings instance
settings = Settings()
