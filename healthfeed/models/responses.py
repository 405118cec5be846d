"""Response payloads returned by the pipeline coordinator."""

from datetime import datetime
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..errors import HealthFeedError
from .article import Article


class ResponseModel(BaseModel):
    """Base for camelCase-serialized responses."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = Field(True, description="Whether the operation succeeded")

    def to_payload(self) -> Dict:
        """Serialize with client-facing field names."""
        return self.model_dump(by_alias=True, mode="json")


class ArticlesPage(ResponseModel):
    """One page of the article feed."""

    articles: List[Article] = Field(default_factory=list, description="Articles on this page")
    cached: bool = Field(..., description="Served from cache without refetching")
    page: int = Field(..., description="Page number served")
    has_more: bool = Field(..., alias="hasMore", description="Whether later pages exist")
    total_articles: int = Field(..., alias="totalArticles", description="Articles in the cache")
    stale: bool = Field(False, description="Served from an expired cache after a fetch failure")
    warning: Optional[str] = Field(None, description="Degradation notice")


class ArticlesResponse(ResponseModel):
    """Full article list after a refresh or batch enrichment."""

    articles: List[Article] = Field(default_factory=list, description="Articles in the cache")
    message: Optional[str] = Field(None, description="Status message")


class ArticleResponse(ResponseModel):
    """A single enriched article."""

    article: Article = Field(..., description="The article")
    message: Optional[str] = Field(None, description="Status message")


class SimplifiedResponse(ResponseModel):
    """Simplified rewrite preview for an article."""

    simplified_content: str = Field(..., alias="simplifiedContent", description="Rewritten article text")


class ErrorResponse(ResponseModel):
    """Failure payload."""

    success: bool = False
    error: str = Field(..., description="Error message")


class ServiceStatus(ResponseModel):
    """Health check snapshot of the running pipeline."""

    message: str = Field("Health News service is running", description="Status message")
    timestamp: datetime = Field(..., description="When the snapshot was taken")
    total_articles: int = Field(..., alias="totalArticles", description="Articles in the cache")
    fetched_at: Optional[datetime] = Field(None, alias="fetchedAt", description="Last successful fetch")
    cache_fresh: bool = Field(..., alias="cacheFresh", description="Whether the cache is within its window")
    enrichment_in_progress: bool = Field(..., alias="enrichmentInProgress", description="Batch run active")
    llm_usage: Dict = Field(default_factory=dict, alias="llmUsage", description="Generation usage statistics")


def error_response(exc: Exception) -> Tuple[int, ErrorResponse]:
    """Map an exception onto an HTTP status code and error payload."""
    if isinstance(exc, HealthFeedError):
        return exc.status_code, ErrorResponse(error=str(exc))
    return 500, ErrorResponse(error="Internal error")
