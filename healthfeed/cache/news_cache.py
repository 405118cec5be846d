"""In-memory cache holding the current article generation."""

from typing import Callable, List, Optional

import pendulum
from pendulum import DateTime
from pydantic import BaseModel, Field

from ..models import Article

DEFAULT_TTL_SECONDS = 30 * 60
DEFAULT_PAGE_SIZE = 5


class CachePage(BaseModel):
    """A slice of the cached article list."""

    items: List[Article] = Field(default_factory=list, description="Articles on this page")
    page: int = Field(..., description="Page number actually served")
    has_more: bool = Field(..., description="Whether later pages exist")
    total: int = Field(..., description="Articles in the cache")


class NewsCache:
    """Hold the most recent normalized article set and its fetch time."""

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Optional[Callable[[], DateTime]] = None,
    ) -> None:
        """
        Initialize news cache.

        Args:
            ttl_seconds: Freshness window
            clock: Returns the current time (injectable for tests)
        """
        self.ttl_seconds = ttl_seconds
        self.clock = clock or (lambda: pendulum.now("UTC"))
        self._articles: List[Article] = []
        self._fetched_at: Optional[DateTime] = None
        self._generation = 0

    @property
    def articles(self) -> List[Article]:
        """Snapshot of the current generation."""
        return list(self._articles)

    @property
    def generation(self) -> int:
        """Counter bumped on every replace or clear."""
        return self._generation

    @property
    def fetched_at(self) -> Optional[DateTime]:
        return self._fetched_at

    def __len__(self) -> int:
        return len(self._articles)

    def is_empty(self) -> bool:
        return not self._articles

    def age_seconds(self) -> Optional[float]:
        """Seconds since the last replace, or None if never filled."""
        if self._fetched_at is None:
            return None
        return (self.clock() - self._fetched_at).total_seconds()

    def is_fresh(self) -> bool:
        """True when the cache holds articles fetched within the window."""
        age = self.age_seconds()
        return bool(self._articles) and age is not None and age < self.ttl_seconds

    def page(self, page_number: int, page_size: int = DEFAULT_PAGE_SIZE) -> CachePage:
        """Serve a 1-based page; page numbers below 1 are treated as 1."""
        page_number = max(1, page_number)
        start = (page_number - 1) * page_size
        end = page_number * page_size
        total = len(self._articles)

        return CachePage(
            items=self._articles[start:end],
            page=page_number,
            has_more=end < total,
            total=total,
        )

    def replace(self, articles: List[Article]) -> None:
        """Swap in a new generation and reset the fetch time."""
        self._articles = list(articles)
        self._fetched_at = self.clock()
        self._generation += 1

    def write_back(self, articles: List[Article]) -> None:
        """Store enriched copies of the current generation.

        The timestamp is reset but the generation number is kept, so
        in-flight single-article updates still land.
        """
        self._articles = list(articles)
        self._fetched_at = self.clock()

    def clear(self) -> None:
        """Drop all articles and the fetch time."""
        self._articles = []
        self._fetched_at = None
        self._generation += 1

    def get(self, article_id: int) -> Optional[Article]:
        """Find an article in the current generation."""
        for article in self._articles:
            if article.id == article_id:
                return article
        return None

    def update_article(
        self,
        article_id: int,
        mutator: Callable[[Article], Article],
        generation: Optional[int] = None,
    ) -> Optional[Article]:
        """
        Replace one article in place.

        Args:
            article_id: Id within the current generation
            mutator: Receives the cached article, returns its replacement
            generation: If given, only update while this generation is current

        Returns:
            The stored replacement, or None if nothing was updated
        """
        if generation is not None and generation != self._generation:
            return None

        for index, article in enumerate(self._articles):
            if article.id == article_id:
                updated = mutator(article)
                self._articles[index] = updated
                return updated
        return None
