# src/goldwise/__init__.py
"""
GoldWise - Live Gold/Silver Retail Quotes and Buy-Window Signals

A small service that publishes a retail gold/silver quote derived from
upstream spot and FX feeds, plus a Telegram client that tracks the quote over
time and classifies whether now is a good moment to buy.
"""

__version__ = "1.0.0"
