"""Sequential, throttled enrichment of a whole article list."""

import asyncio
import time
from typing import Awaitable, Callable, List, Optional

from rich.console import Console

from ..errors import GenerationError
from ..models import Article, Summary
from .enrichment import EnrichmentEngine
from .models import GenerationStats

console = Console()

# Applied to the failing article and everything after it once quota runs out.
RATE_LIMIT_FALLBACK = Summary(
    tldr="AI processing temporarily unavailable due to rate limits. Content available for manual review.",
    key_takeaways=[
        "Medical content requires professional interpretation",
        "AI processing will resume when rate limits reset",
        "Consult healthcare professionals for guidance",
    ],
)

# Applied to a single article whose summary call failed for another reason.
ITEM_FALLBACK = Summary(
    tldr=(
        "AI processing encountered technical limitations for this article. "
        "The content is available for manual review and analysis."
    ),
    key_takeaways=[
        "This health article contains information that requires manual review due to processing limitations",
        "The medical content should be evaluated by qualified healthcare professionals",
        "Technical processing will be retried automatically during the next update cycle",
    ],
)


class DelayPolicy:
    """Fixed waits that keep batch enrichment under provider rate limits."""

    def __init__(
        self,
        warmup_seconds: float = 10.0,
        item_delay_seconds: float = 5.0,
        sleep: Optional[Callable[[float], Awaitable[None]]] = None,
    ) -> None:
        """
        Initialize delay policy.

        Args:
            warmup_seconds: Wait before the first call
            item_delay_seconds: Wait between consecutive calls
            sleep: Awaitable sleep function (defaults to asyncio.sleep)
        """
        self.warmup_seconds = warmup_seconds
        self.item_delay_seconds = item_delay_seconds
        self.sleep = sleep or asyncio.sleep

    @classmethod
    def none(cls) -> "DelayPolicy":
        """Policy without any waiting."""
        return cls(warmup_seconds=0.0, item_delay_seconds=0.0)

    async def before_first(self) -> None:
        if self.warmup_seconds > 0:
            await self.sleep(self.warmup_seconds)

    async def between_items(self) -> None:
        if self.item_delay_seconds > 0:
            await self.sleep(self.item_delay_seconds)


class BatchEnricher:
    """Summarize articles one at a time with rate-limit aware fallbacks."""

    def __init__(self, engine: EnrichmentEngine, delays: Optional[DelayPolicy] = None) -> None:
        self.engine = engine
        self.delays = delays or DelayPolicy()
        self.last_stats: Optional[GenerationStats] = None

    async def enrich_all(self, articles: List[Article]) -> List[Article]:
        """
        Summarize every article in order.

        Never raises. A rate-limit error stops the run and marks the
        failing article and all remaining ones with the rate-limit
        fallback; other errors only affect the article at hand.

        Args:
            articles: Articles to enrich

        Returns:
            One article per input, in input order
        """
        start = time.time()
        stats = GenerationStats(articles_processed=0)
        enriched: List[Article] = []

        if not articles:
            self.last_stats = stats
            return enriched

        console.print(
            f"[dim]Waiting {self.delays.warmup_seconds:.0f}s before AI processing to avoid rate limits...[/dim]"
        )
        await self.delays.before_first()

        for index, article in enumerate(articles):
            console.print(f"Processing article {index + 1}/{len(articles)}: {article.title}")

            try:
                summary = await self.engine.request_summary(article)
            except Exception as e:
                if isinstance(e, GenerationError) and e.rate_limited:
                    console.print("[yellow]Rate limit exceeded, using fallback summaries for the rest[/yellow]")
                    remaining = articles[index:]
                    enriched.extend(a.with_summary(RATE_LIMIT_FALLBACK, summarized=False) for a in remaining)
                    stats.rate_limited = True
                    stats.fallbacks += len(remaining)
                    break

                console.print(f"[red]Error processing article '{article.title}': {e}[/red]")
                enriched.append(article.with_summary(ITEM_FALLBACK, summarized=False))
                stats.fallbacks += 1
            else:
                enriched.append(article.with_summary(summary))
                stats.articles_processed += 1

            if index < len(articles) - 1:
                await self.delays.between_items()

        stats.processing_time = time.time() - start
        self.last_stats = stats
        console.print(
            f"[green]AI processing finished:[/green] {stats.articles_processed} summarized, "
            f"{stats.fallbacks} fallbacks"
        )
        return enriched
