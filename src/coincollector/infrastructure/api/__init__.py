"""FastAPI HTTP surface of CoinCollector."""
