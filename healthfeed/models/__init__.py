"""Data models for the health news feed."""

from .article import Article, Category, RawArticle, Summary
from .responses import (
    ArticleResponse,
    ArticlesPage,
    ArticlesResponse,
    ErrorResponse,
    ServiceStatus,
    SimplifiedResponse,
    error_response,
)

__all__ = [
    "Article",
    "Category",
    "RawArticle",
    "Summary",
    "ArticlesPage",
    "ArticlesResponse",
    "ArticleResponse",
    "SimplifiedResponse",
    "ErrorResponse",
    "ServiceStatus",
    "error_response",
]
