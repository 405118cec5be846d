"""Article cache."""

from .news_cache import CachePage, NewsCache

__all__ = ["NewsCache", "CachePage"]
