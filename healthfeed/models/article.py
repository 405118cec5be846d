"""Article models for raw news records and normalized feed entries."""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Category(str, Enum):
    """Topical categories an article can be filed under."""

    MENTAL_HEALTH = "Mental Health"
    DISEASES_AND_TREATMENT = "Diseases & Treatment"
    MEDICAL_RESEARCH = "Medical Research"
    NUTRITION_AND_WELLNESS = "Nutrition & Wellness"
    EXCLUDED = "Non-Health"

    @property
    def is_excluded(self) -> bool:
        return self is Category.EXCLUDED


class RawArticle(BaseModel):
    """Article record as delivered by the news source. Nothing is guaranteed."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: Optional[str] = Field(None, description="Headline")
    description: Optional[str] = Field(None, description="Short description")
    content: Optional[str] = Field(None, description="Truncated article body")
    source: Optional[str] = Field(None, description="Publishing outlet name")
    published_at: Optional[str] = Field(None, alias="publishedAt", description="Publication timestamp")
    url: Optional[str] = Field(None, description="Article URL")
    url_to_image: Optional[str] = Field(None, alias="urlToImage", description="Lead image URL")
    author: Optional[str] = Field(None, description="Byline")

    @field_validator("source", mode="before")
    @classmethod
    def flatten_source(cls, v: Any) -> Optional[str]:
        """Accept NewsAPI's {"id": ..., "name": ...} object or a bare name."""
        if isinstance(v, dict):
            return v.get("name")
        return v


class Summary(BaseModel):
    """Structured AI summary: a short finding plus three takeaways."""

    model_config = ConfigDict(populate_by_name=True)

    tldr: str = Field(..., min_length=1, description="1-2 sentence core finding")
    key_takeaways: List[str] = Field(..., alias="keyTakeaways", description="Exactly three insights")

    @field_validator("key_takeaways", mode="before")
    @classmethod
    def exactly_three(cls, v: Any) -> List[str]:
        if not isinstance(v, list):
            raise ValueError("keyTakeaways must be a list")
        items = [str(item).strip() for item in v if item is not None and str(item).strip()]
        if len(items) < 3:
            raise ValueError(f"expected 3 key takeaways, got {len(items)}")
        return items[:3]


class Article(BaseModel):
    """Normalized article served to clients."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., description="Sequential id, unique within one cache generation")
    title: str = Field(..., description="Headline")
    content: str = Field(..., description="Article body or description")
    source: str = Field("Unknown source", description="Publishing outlet")
    author: Optional[str] = Field(None, description="Byline")
    url: Optional[str] = Field(None, description="Article URL")
    url_to_image: Optional[str] = Field(None, alias="urlToImage", description="Lead image URL")
    published_at: str = Field(..., alias="publishedAt", description="Publication timestamp (ISO-8601)")
    category: Category = Field(..., description="Topical category")
    read_time: str = Field(..., alias="readTime", description="Estimated reading time")
    normalized_title_key: str = Field(..., exclude=True, description="Deduplication key")
    tldr: Optional[str] = Field(None, description="AI summary")
    key_takeaways: Optional[List[str]] = Field(None, alias="keyTakeaways", description="Three AI insights")
    simplified_content: Optional[str] = Field(None, alias="simplifiedContent", description="AI rewrite")
    is_summarized: bool = Field(False, alias="isSummarized", description="Whether an AI summary was produced")

    @model_validator(mode="after")
    def summary_present_when_summarized(self) -> "Article":
        if self.is_summarized and (self.tldr is None or self.key_takeaways is None):
            raise ValueError("summarized articles must carry tldr and keyTakeaways")
        return self

    def with_summary(self, summary: Summary, summarized: bool = True) -> "Article":
        """Return a copy carrying the given summary."""
        return self.model_copy(
            update={
                "tldr": summary.tldr,
                "key_takeaways": list(summary.key_takeaways),
                "is_summarized": summarized,
            }
        )
