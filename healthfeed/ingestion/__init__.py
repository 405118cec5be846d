"""News retrieval and article normalization."""

from .news_fetcher import NewsAPIFetcher, NewsSource, StaticNewsSource
from .normalizer import ArticleNormalizer, estimate_read_time

__all__ = [
    "NewsSource",
    "NewsAPIFetcher",
    "StaticNewsSource",
    "ArticleNormalizer",
    "estimate_read_time",
]
