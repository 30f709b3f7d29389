"""Utilities package."""

from .cache import InMemoryCache, analysis_store, sentiment_cache

__all__ = ["InMemoryCache", "analysis_store", "sentiment_cache"]
