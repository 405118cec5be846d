"""Turn raw news records into feed articles."""

import math
from typing import Iterable, List, Optional

import pendulum
from rich.console import Console

from ..classification import HealthClassifier
from ..models import Article, RawArticle

console = Console()

WORDS_PER_MINUTE = 200
DEFAULT_TITLE = "No title available"
DEFAULT_CONTENT = "No content available"
DEFAULT_SOURCE = "Unknown source"


def estimate_read_time(content: Optional[str]) -> str:
    """Estimate reading time at 200 words per minute, rounded up."""
    if not content or not content.strip():
        return "1 min read"

    word_count = len(content.split())
    minutes = max(1, math.ceil(word_count / WORDS_PER_MINUTE))
    return f"{minutes} min read"


def title_key(title: str) -> str:
    """Deduplication key for a headline."""
    return title.strip().lower()


class ArticleNormalizer:
    """Apply defaults, classify and dedupe raw article records."""

    def __init__(self, classifier: Optional[HealthClassifier] = None) -> None:
        self.classifier = classifier or HealthClassifier()

    def normalize(self, raw: RawArticle, article_id: int) -> Article:
        """Normalize a single raw record."""
        title = (raw.title or "").strip() or DEFAULT_TITLE
        body = (raw.content or "").strip() or (raw.description or "").strip() or None
        content = body or DEFAULT_CONTENT

        return Article(
            id=article_id,
            title=title,
            content=content,
            source=raw.source or DEFAULT_SOURCE,
            author=raw.author,
            url=raw.url,
            url_to_image=raw.url_to_image,
            published_at=raw.published_at or pendulum.now("UTC").to_iso8601_string(),
            category=self.classifier.classify(raw.title, body),
            read_time=estimate_read_time(body),
            normalized_title_key=title_key(title),
        )

    def normalize_batch(self, raws: Iterable[RawArticle], start_id: int = 1) -> List[Article]:
        """
        Normalize a fetch result.

        Ids are assigned in input order before filtering, so survivors may
        have gaps in their numbering.

        Args:
            raws: Raw records in source order
            start_id: Id given to the first record

        Returns:
            Health articles with unique titles, in input order
        """
        articles = []
        seen_keys = set()
        excluded = 0
        duplicates = 0

        for offset, raw in enumerate(raws):
            article = self.normalize(raw, start_id + offset)

            if article.category.is_excluded:
                excluded += 1
                continue

            if article.normalized_title_key in seen_keys:
                duplicates += 1
                continue

            seen_keys.add(article.normalized_title_key)
            articles.append(article)

        console.print(
            f"[dim]Normalized {len(articles)} health articles "
            f"({excluded} excluded, {duplicates} duplicates)[/dim]"
        )
        return articles
