"""Verify command implementation."""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..config import Config
from ..errors import HealthFeedError
from ..generation import MockLLMProvider
from ..pipeline import get_llm_provider, get_news_source

console = Console()


def verify_command(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Configuration file"),
) -> None:
    """Check that the news API and the LLM provider respond."""
    config = Config(config_path)
    ok = True

    try:
        settings = config.config
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    console.print("[dim]Checking NewsAPI connection...[/dim]")
    try:
        source = get_news_source(config)
        raws = asyncio.run(source.fetch_top_headlines(settings.news.country, settings.news.category))
        console.print(f"✅ NewsAPI is working: {len(raws)} articles")
        for raw in raws[:3]:
            console.print(f"   • {raw.title}")
    except (HealthFeedError, ValueError) as e:
        console.print(f"[red]❌ NewsAPI verification failed: {e}[/red]")
        ok = False

    console.print("[dim]Checking LLM connection...[/dim]")
    provider = get_llm_provider(config)
    if isinstance(provider, MockLLMProvider):
        console.print("[yellow]⚠ Using mock LLM provider; AI output will be placeholder text[/yellow]")
    else:
        try:
            asyncio.run(asyncio.wait_for(provider.generate_text("Test"), timeout=settings.llm.timeout))
            console.print(f"✅ Connected to {settings.llm.model}")
        except (HealthFeedError, asyncio.TimeoutError) as e:
            console.print(f"[red]❌ LLM connection failed: {str(e) or 'timed out'}[/red]")
            ok = False

    if not ok:
        raise typer.Exit(1)
