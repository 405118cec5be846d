"""News sources that deliver top headlines."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

import httpx
from pydantic import ValidationError
from rich.console import Console

from ..errors import UpstreamFetchError
from ..models import RawArticle

console = Console()


class NewsSource(ABC):
    """Abstract source of top headlines."""

    @abstractmethod
    async def fetch_top_headlines(self, country: str, category: str) -> List[RawArticle]:
        """
        Fetch top headlines for a country and topical category.

        Args:
            country: Two-letter country code
            category: Topical category (e.g. "health")

        Returns:
            Raw article records in source order

        Raises:
            UpstreamFetchError: If the source is unreachable or reports an error
        """
        pass


class NewsAPIFetcher(NewsSource):
    """Fetch headlines from the NewsAPI top-headlines endpoint."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://newsapi.org/v2",
        timeout: float = 15.0,
        page_size: Optional[int] = None,
        user_agent: str = "healthfeed/1.0 (Health News Feed)",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize NewsAPI fetcher.

        Args:
            api_key: NewsAPI key
            base_url: API root
            timeout: Request timeout in seconds
            page_size: Optional cap on returned headlines
            user_agent: User-Agent header
            transport: Custom httpx transport (for testing)
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.page_size = page_size
        self.user_agent = user_agent
        self.transport = transport

    def _params(self, country: str, category: str) -> Dict[str, str]:
        params = {"country": country, "category": category}
        if self.page_size:
            params["pageSize"] = str(self.page_size)
        return params

    async def fetch_top_headlines(self, country: str, category: str) -> List[RawArticle]:
        """Fetch top headlines from NewsAPI."""
        headers = {
            "User-Agent": self.user_agent,
            "Accept": "application/json",
            "X-Api-Key": self.api_key,
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                headers=headers,
                transport=self.transport,
            ) as client:
                response = await client.get(
                    f"{self.base_url}/top-headlines",
                    params=self._params(country, category),
                )
                response.raise_for_status()
                payload = response.json()

        except httpx.HTTPStatusError as e:
            raise UpstreamFetchError(f"NewsAPI error: HTTP {e.response.status_code}") from e
        except httpx.TimeoutException as e:
            raise UpstreamFetchError("NewsAPI request timed out") from e
        except httpx.HTTPError as e:
            raise UpstreamFetchError(f"NewsAPI request failed: {e}") from e
        except ValueError as e:
            raise UpstreamFetchError("NewsAPI returned invalid JSON") from e

        if not isinstance(payload, dict):
            raise UpstreamFetchError("NewsAPI returned an unexpected payload")
        if payload.get("status") != "ok":
            raise UpstreamFetchError(f"NewsAPI error: {payload.get('message') or 'Unknown error'}")

        articles = []
        for item in payload.get("articles") or []:
            try:
                articles.append(RawArticle.model_validate(item))
            except ValidationError as e:
                console.print(f"[yellow]Skipping malformed article record: {e}[/yellow]")

        console.print(f"[dim]Fetched {len(articles)} {category} headlines ({country})[/dim]")
        return articles


class StaticNewsSource(NewsSource):
    """In-memory news source for offline runs and tests."""

    def __init__(self, articles: Optional[List[RawArticle]] = None, error: Optional[Exception] = None) -> None:
        self.articles = list(articles or [])
        self.error = error
        self.calls = []

    async def fetch_top_headlines(self, country: str, category: str) -> List[RawArticle]:
        """Return the configured records or raise the configured error."""
        self.calls.append((country, category))
        if self.error is not None:
            raise self.error
        return list(self.articles)
