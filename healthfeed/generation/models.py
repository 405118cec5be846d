"""Data models for generation."""

from pydantic import BaseModel, Field


class GenerationStats(BaseModel):
    """Statistics for a batch enrichment run."""

    articles_processed: int = Field(..., description="Articles summarized by the model")
    fallbacks: int = Field(0, description="Articles that received fallback content")
    rate_limited: bool = Field(False, description="Whether the run stopped on a rate limit")
    processing_time: float = Field(0.0, description="Processing time in seconds")
