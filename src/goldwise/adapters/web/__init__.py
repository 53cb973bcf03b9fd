# src/goldwise/adapters/web/__init__.py
"""
Web Adapters - HTTP API
"""

from goldwise.adapters.web.api import create_app

__all__ = ["create_app"]
