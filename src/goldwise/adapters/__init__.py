# src/goldwise/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Providers (upstream price, FX and news APIs)
- Feeds (RSS parsing)
- Web (HTTP API)
- Client (quote server access)
- Telegram (bot interface)
- Persistence (storage)
- Formatting (output)
"""

__all__ = []
