# src/goldwise/adapters/client/__init__.py
"""
Client Adapters - Access to the GoldWise Quote Server
"""

from goldwise.adapters.client.api_client import GoldwiseApiClient

__all__ = ["GoldwiseApiClient"]
