"""Pipeline coordinator: cache policy, refresh and on-demand enrichment."""

from typing import List, Optional

import pendulum
from rich.console import Console

from ..cache import CachePage, NewsCache
from ..errors import ConflictError, NotFoundError, UpstreamFetchError
from ..generation import BatchEnricher, EnrichmentEngine
from ..ingestion import ArticleNormalizer, NewsSource
from ..models import (
    Article,
    ArticleResponse,
    ArticlesPage,
    ArticlesResponse,
    ServiceStatus,
    SimplifiedResponse,
    Summary,
)

console = Console()

STALE_WARNING = "Using cached articles due to fetch error"


def on_demand_summary_fallback(article: Article) -> Summary:
    """Summary shown when on-demand enrichment cannot reach the model."""
    return Summary(
        tldr=(
            f"Health news: {article.title}. This article discusses important health-related "
            "information that requires professional medical interpretation."
        ),
        key_takeaways=[
            "This article contains health information that should be evaluated by qualified medical professionals",
            "The findings and implications discussed may have relevance to public health awareness",
            "Readers are advised to consult healthcare providers for personalized medical guidance",
        ],
    )


def on_demand_simplified_fallback(article: Article) -> str:
    """Rewrite shown when on-demand enrichment cannot reach the model."""
    return (
        "We're experiencing high demand for AI processing right now. "
        f"Here's the original article content:\n\n{article.content}\n\n"
        "For the best experience, please try again later when AI processing is available."
    )


class PipelineCoordinator:
    """Serve the health feed from a cache and enrich articles on request.

    All state lives on the instance: the injected cache and the flag that
    marks a running batch enrichment.
    """

    def __init__(
        self,
        news_source: NewsSource,
        engine: EnrichmentEngine,
        cache: Optional[NewsCache] = None,
        normalizer: Optional[ArticleNormalizer] = None,
        batch: Optional[BatchEnricher] = None,
        country: str = "us",
        category: str = "health",
        page_size: int = 5,
    ) -> None:
        """
        Initialize pipeline coordinator.

        Args:
            news_source: Provider of raw headlines
            engine: Summary and rewrite engine
            cache: Article cache (a fresh one by default)
            normalizer: Raw record normalizer
            batch: Batch enrichment workflow (built from engine by default)
            country: Headline country
            category: Headline category
            page_size: Articles per page
        """
        self.news_source = news_source
        self.engine = engine
        self.cache = cache or NewsCache()
        self.normalizer = normalizer or ArticleNormalizer()
        self.batch = batch or BatchEnricher(engine)
        self.country = country
        self.category = category
        self.page_size = page_size
        self._enrichment_in_progress = False

    @property
    def enrichment_in_progress(self) -> bool:
        return self._enrichment_in_progress

    async def _fetch_articles(self) -> List[Article]:
        raws = await self.news_source.fetch_top_headlines(self.country, self.category)
        return self.normalizer.normalize_batch(raws, start_id=1)

    def _page_response(self, page: CachePage, cached: bool, warning: Optional[str] = None) -> ArticlesPage:
        return ArticlesPage(
            articles=page.items,
            cached=cached,
            page=page.page,
            has_more=page.has_more,
            total_articles=page.total,
            stale=warning is not None,
            warning=warning,
        )

    def _require(self, article_id: int) -> Article:
        article = self.cache.get(article_id)
        if article is None:
            raise NotFoundError(f"Article {article_id} not found")
        return article

    async def get_page(self, page: int = 1) -> ArticlesPage:
        """
        Serve a page of articles, refetching when the cache has expired.

        Raises:
            UpstreamFetchError: If the fetch fails and nothing is cached
        """
        if self.cache.is_fresh():
            return self._page_response(self.cache.page(page, self.page_size), cached=True)

        try:
            articles = await self._fetch_articles()
        except UpstreamFetchError as e:
            if self.cache.is_empty():
                console.print(f"[red]Error fetching articles: {e}[/red]")
                raise
            console.print(f"[yellow]Fetch failed, serving stale cache: {e}[/yellow]")
            return self._page_response(
                self.cache.page(page, self.page_size), cached=True, warning=STALE_WARNING
            )

        self.cache.replace(articles)
        return self._page_response(self.cache.page(page, self.page_size), cached=False)

    async def refresh(self) -> ArticlesResponse:
        """
        Drop the cache and refetch.

        Raises:
            UpstreamFetchError: If the fetch fails (the cache stays empty)
        """
        self.cache.clear()
        try:
            articles = await self._fetch_articles()
        except UpstreamFetchError as e:
            console.print(f"[red]Error refreshing articles: {e}[/red]")
            raise

        self.cache.replace(articles)
        return ArticlesResponse(articles=articles, message="Articles refreshed successfully")

    async def enrich_one(self, article_id: int) -> ArticleResponse:
        """
        Summarize and simplify a single cached article.

        Raises:
            NotFoundError: If the id is not in the current generation, or
                the cache was replaced while the article was being enriched
        """
        article = self._require(article_id)
        if article.is_summarized:
            return ArticleResponse(article=article, message="Article already processed")

        generation = self.cache.generation
        console.print(f"Processing article {article_id} with AI: {article.title}")

        summarized = True
        try:
            summary = await self.engine.request_summary(article)
        except Exception as e:
            console.print(f"[yellow]AI summary unavailable, using fallback content: {e}[/yellow]")
            summary = on_demand_summary_fallback(article)
            summarized = False

        try:
            simplified = await self.engine.request_simplified(article)
        except Exception as e:
            console.print(f"[yellow]AI rewrite unavailable, using original content: {e}[/yellow]")
            simplified = on_demand_simplified_fallback(article)

        def merge(cached: Article) -> Article:
            return cached.with_summary(summary, summarized=summarized).model_copy(
                update={"simplified_content": simplified}
            )

        updated = self.cache.update_article(article_id, merge, generation=generation)
        if updated is None:
            raise NotFoundError(f"Article {article_id} was replaced by a refresh")
        return ArticleResponse(article=updated)

    async def enrich_batch(self) -> ArticlesResponse:
        """
        Summarize every cached article with the throttled batch workflow.

        Raises:
            ConflictError: If a batch run is already in progress
        """
        if self._enrichment_in_progress:
            raise ConflictError("AI processing already in progress")

        self._enrichment_in_progress = True
        try:
            generation = self.cache.generation
            console.print("Starting AI processing for cached articles...")
            enriched = await self.batch.enrich_all(self.cache.articles)

            if self.cache.generation != generation:
                console.print("[yellow]Cache was refreshed during AI processing; discarding results[/yellow]")
                return ArticlesResponse(
                    articles=self.cache.articles,
                    message="Articles were refreshed during AI processing",
                )

            self.cache.write_back(enriched)
            return ArticlesResponse(articles=enriched, message="Articles processed with AI successfully")
        finally:
            self._enrichment_in_progress = False

    async def get_simplified(self, article_id: int) -> SimplifiedResponse:
        """
        Preview a simplified rewrite without touching the cache.

        Raises:
            NotFoundError: If the id is not in the current generation
        """
        article = self._require(article_id)
        simplified = await self.engine.simplify(article)
        return SimplifiedResponse(simplified_content=simplified)

    def status(self) -> ServiceStatus:
        """Health check snapshot."""
        return ServiceStatus(
            timestamp=pendulum.now("UTC"),
            total_articles=len(self.cache),
            fetched_at=self.cache.fetched_at,
            cache_fresh=self.cache.is_fresh(),
            enrichment_in_progress=self._enrichment_in_progress,
            llm_usage=self.engine.llm_provider.get_usage_stats(),
        )
