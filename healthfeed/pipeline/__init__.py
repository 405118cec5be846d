"""Pipeline coordination."""

from .coordinator import STALE_WARNING, PipelineCoordinator
from .factory import build_coordinator, get_llm_provider, get_news_source

__all__ = [
    "PipelineCoordinator",
    "STALE_WARNING",
    "build_coordinator",
    "get_llm_provider",
    "get_news_source",
]
