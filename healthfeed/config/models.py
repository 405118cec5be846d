"""Configuration models."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class NewsConfig(BaseModel):
    """News source configuration."""

    base_url: str = Field("https://newsapi.org/v2", description="NewsAPI root URL")
    api_key_env: Optional[str] = Field("NEWS_API_KEY", description="Environment variable for API key")
    api_key: Optional[str] = Field(None, description="API key (prefer api_key_env)")
    country: str = Field("us", description="Two-letter country code")
    category: str = Field("health", description="Top-headlines category")
    page_size: Optional[int] = Field(None, description="Max headlines per fetch", ge=1, le=100)
    timeout: float = Field(15.0, description="Request timeout in seconds", gt=0)

    @field_validator("country")
    @classmethod
    def validate_country(cls, v: str) -> str:
        """Country codes are two lowercase letters."""
        v = v.strip().lower()
        if len(v) != 2 or not v.isalpha():
            raise ValueError(f"Invalid country code: {v!r}")
        return v


class LLMConfig(BaseModel):
    """LLM provider configuration."""

    provider: str = Field("openai", description="LLM provider (openai, mock)")
    model: str = Field("gpt-4o-mini", description="Model name")
    api_key_env: Optional[str] = Field("OPENAI_API_KEY", description="Environment variable for API key")
    api_key: Optional[str] = Field(None, description="API key (prefer api_key_env)")
    base_url: Optional[str] = Field(None, description="Base URL for OpenAI-compatible APIs")
    timeout: float = Field(30.0, description="Per-call timeout in seconds", gt=0)


class CacheConfig(BaseModel):
    """Article cache configuration."""

    ttl_minutes: float = Field(30, description="Freshness window in minutes", gt=0)
    page_size: int = Field(5, description="Articles per page", ge=1, le=50)


class EnrichmentConfig(BaseModel):
    """Batch enrichment throttling."""

    warmup_seconds: float = Field(10.0, description="Wait before the first AI call", ge=0)
    item_delay_seconds: float = Field(5.0, description="Wait between AI calls", ge=0)


class ClassificationConfig(BaseModel):
    """Extensions to the built-in keyword lists."""

    extra_health_keywords: List[str] = Field(
        default_factory=list,
        description="Additional health keywords for the relevance gate"
    )
    extra_exclusion_phrases: List[str] = Field(
        default_factory=list,
        description="Additional strong non-health phrases"
    )


class ConfigModel(BaseModel):
    """Main configuration model."""

    news: NewsConfig = Field(default_factory=NewsConfig)
    llm: LLMConfig = Field(default_factory=LLMConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    enrichment: EnrichmentConfig = Field(default_factory=EnrichmentConfig)
    classification: ClassificationConfig = Field(default_factory=ClassificationConfig)
