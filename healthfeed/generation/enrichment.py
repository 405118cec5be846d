"""AI summaries and simplified rewrites for single articles."""

import asyncio
import json
from typing import Optional

from pydantic import ValidationError
from rich.console import Console

from ..errors import GenerationError, GenerationErrorKind, SummaryParseError
from ..models import Article, Summary
from .llm_provider import LLMProvider

console = Console()

# Shown when the model answered but no summary could be decoded.
PARSE_FALLBACK = Summary(
    tldr="AI processing in progress. Summary will be available shortly.",
    key_takeaways=[
        "Content analysis underway",
        "Medical insights being extracted",
        "Summary generation pending",
    ],
)

# Shown when the generation call itself failed.
CALL_FALLBACK = Summary(
    tldr="Summary unavailable. Manual review required.",
    key_takeaways=[
        "Content requires manual review",
        "Technical processing limited",
        "Consult healthcare professionals",
    ],
)


def simplify_fallback(article: Article) -> str:
    """Apology plus the untouched original content."""
    return (
        "We're having trouble processing this article right now. Please try again later. "
        f"The original article content is: {article.content}"
    )


def build_summary_prompt(article: Article) -> str:
    return f"""Analyze this health news article and create a crisp, professional medical summary.

Article Title: {article.title}
Source: {article.source}
Article Content:
{article.content}

Create a concise summary with:
1. A crisp 1-2 sentence TL;DR that captures the core medical finding or health implication
2. Exactly three sharp key takeaways that highlight the most important medical insights

Requirements:
- Keep the TL;DR to 1-2 sentences maximum
- Keep each key takeaway concise but informative (1-2 lines)
- Use precise medical terminology
- Avoid filler words and generic statements
- Maintain a professional medical tone

Format as JSON only:
{{
  "tldr": "Crisp 1-2 sentence summary of the core medical finding or health implication",
  "keyTakeaways": [
    "Concise medical insight or finding",
    "Key health implication or recommendation",
    "Important medical fact or research conclusion"
  ]
}}"""


def build_simplify_prompt(article: Article) -> str:
    return f"""Rewrite this health news article in a professional, accessible tone for a general audience.

Article Title: {article.title}
Article Content:
{article.content}

Requirements:
- Use professional medical news writing style
- Explain complex medical terms in clear, accessible language
- Maintain factual accuracy and medical credibility
- Do not use casual language, emojis, or an overly conversational tone
- Structure the content with clear paragraphs and logical flow
- Focus on medical facts, implications and evidence-based information

Return the rewritten article as plain text."""


def extract_json_block(text: str) -> Optional[str]:
    """Return the first balanced {...} block in text, ignoring braces inside strings."""
    start = text.find("{")
    if start == -1:
        return None

    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue

        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return text[start:index + 1]
    return None


def parse_summary(text: str) -> Summary:
    """
    Decode a summary from generated text.

    Raises:
        SummaryParseError: If no valid summary object is present
    """
    block = extract_json_block(text)
    if block is None:
        raise SummaryParseError("No JSON object in response")

    try:
        data = json.loads(block)
    except json.JSONDecodeError as e:
        raise SummaryParseError(f"Invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise SummaryParseError("Summary payload is not an object")

    try:
        return Summary.model_validate(data)
    except ValidationError as e:
        raise SummaryParseError(f"Summary payload has the wrong shape: {e}") from e


class EnrichmentEngine:
    """Produce summaries and simplified rewrites with fallbacks."""

    def __init__(self, llm_provider: LLMProvider, timeout: float = 30.0) -> None:
        """
        Initialize enrichment engine.

        Args:
            llm_provider: Text generation provider
            timeout: Upper bound in seconds for each generation call
        """
        self.llm_provider = llm_provider
        self.timeout = timeout

    async def _generate(self, prompt: str) -> str:
        try:
            return await asyncio.wait_for(self.llm_provider.generate_text(prompt), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise GenerationError(
                f"Generation exceeded {self.timeout:.0f}s", GenerationErrorKind.TIMEOUT
            ) from e

    async def request_summary(self, article: Article) -> Summary:
        """
        Summarize, degrading only on parse failure.

        Raises:
            GenerationError: If the generation call fails
        """
        text = await self._generate(build_summary_prompt(article))
        try:
            return parse_summary(text)
        except SummaryParseError as e:
            console.print(f"[yellow]Could not parse summary for '{article.title}': {e}[/yellow]")
            return PARSE_FALLBACK

    async def summarize(self, article: Article) -> Summary:
        """Summarize an article. Never raises."""
        try:
            return await self.request_summary(article)
        except Exception as e:
            console.print(f"[red]Error summarizing article '{article.title}': {e}[/red]")
            return CALL_FALLBACK

    async def request_simplified(self, article: Article) -> str:
        """
        Rewrite an article in accessible language.

        Raises:
            GenerationError: If the generation call fails
        """
        return await self._generate(build_simplify_prompt(article))

    async def simplify(self, article: Article) -> str:
        """Rewrite an article. Never raises; falls back to the original text."""
        try:
            return await self.request_simplified(article)
        except Exception as e:
            console.print(f"[red]Error simplifying article '{article.title}': {e}[/red]")
            return simplify_fallback(article)
