"""Build a coordinator from configuration."""

from rich.console import Console

from ..cache import NewsCache
from ..classification import HealthClassifier
from ..config import Config
from ..generation import (
    BatchEnricher,
    DelayPolicy,
    EnrichmentEngine,
    LLMProvider,
    MockLLMProvider,
    OpenAIProvider,
)
from ..ingestion import ArticleNormalizer, NewsAPIFetcher, NewsSource
from .coordinator import PipelineCoordinator

console = Console()


def get_llm_provider(config: Config) -> LLMProvider:
    """Get configured LLM provider."""
    llm_config = config.get_llm_config()
    provider = llm_config.get("provider")

    if provider == "mock":
        return MockLLMProvider()

    if provider == "openai":
        api_key = llm_config.get("api_key")
        if not api_key:
            console.print("[yellow]Warning: No LLM API key found. Using mock LLM provider.[/yellow]")
            return MockLLMProvider()

        return OpenAIProvider(
            api_key=api_key,
            model=llm_config.get("model", "gpt-4o-mini"),
            base_url=llm_config.get("base_url"),
            timeout=llm_config.get("timeout", 30.0),
        )

    console.print(f"[yellow]Warning: Unknown LLM provider '{provider}'. Using mock provider.[/yellow]")
    return MockLLMProvider()


def get_news_source(config: Config) -> NewsSource:
    """Get configured news source."""
    news_config = config.get_news_config()
    api_key = news_config.get("api_key")
    if not api_key:
        raise ValueError(
            f"No NewsAPI key configured. Set {news_config.get('api_key_env') or 'news.api_key'}."
        )

    return NewsAPIFetcher(
        api_key=api_key,
        base_url=news_config["base_url"],
        timeout=news_config["timeout"],
        page_size=news_config.get("page_size"),
    )


def build_coordinator(config: Config) -> PipelineCoordinator:
    """Wire a coordinator with the configured collaborators."""
    settings = config.config
    engine = EnrichmentEngine(get_llm_provider(config), timeout=settings.llm.timeout)
    classifier = HealthClassifier(
        extra_health_keywords=settings.classification.extra_health_keywords,
        extra_exclusion_phrases=settings.classification.extra_exclusion_phrases,
    )
    delays = DelayPolicy(
        warmup_seconds=settings.enrichment.warmup_seconds,
        item_delay_seconds=settings.enrichment.item_delay_seconds,
    )

    return PipelineCoordinator(
        news_source=get_news_source(config),
        engine=engine,
        cache=NewsCache(ttl_seconds=settings.cache.ttl_minutes * 60),
        normalizer=ArticleNormalizer(classifier),
        batch=BatchEnricher(engine, delays),
        country=settings.news.country,
        category=settings.news.category,
        page_size=settings.cache.page_size,
    )
