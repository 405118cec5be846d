"""AI summaries, simplified rewrites and batch enrichment."""

from .batch import ITEM_FALLBACK, RATE_LIMIT_FALLBACK, BatchEnricher, DelayPolicy
from .enrichment import (
    CALL_FALLBACK,
    PARSE_FALLBACK,
    EnrichmentEngine,
    extract_json_block,
    parse_summary,
    simplify_fallback,
)
from .llm_provider import LLMProvider, MockLLMProvider, OpenAIProvider
from .models import GenerationStats

__all__ = [
    "LLMProvider",
    "OpenAIProvider",
    "MockLLMProvider",
    "EnrichmentEngine",
    "BatchEnricher",
    "DelayPolicy",
    "GenerationStats",
    "PARSE_FALLBACK",
    "CALL_FALLBACK",
    "RATE_LIMIT_FALLBACK",
    "ITEM_FALLBACK",
    "extract_json_block",
    "parse_summary",
    "simplify_fallback",
]
