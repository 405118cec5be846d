"""Article feed commands."""

import asyncio
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.table import Table

from ..config import Config
from ..errors import HealthFeedError
from ..models import Article
from ..pipeline import PipelineCoordinator, build_coordinator

console = Console()

CONFIG_OPTION = typer.Option(None, "--config", "-c", help="Configuration file")


def load_coordinator(config_path: Optional[Path]) -> PipelineCoordinator:
    """Build a coordinator or exit with a readable message."""
    try:
        return build_coordinator(Config(config_path))
    except FileNotFoundError as e:
        console.print(f"[red]{e}. Run 'healthfeed init' first.[/red]")
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(1)


def run_or_exit(coro):
    """Run a coordinator coroutine, turning pipeline errors into exit code 1."""
    try:
        return asyncio.run(coro)
    except HealthFeedError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1)


def print_articles(articles: List[Article], title: str) -> None:
    """Print articles as a table."""
    table = Table(title=title)
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Title", style="bold")
    table.add_column("Category", style="magenta")
    table.add_column("Source", style="green")
    table.add_column("Read", style="yellow")
    table.add_column("AI", style="dim")

    for article in articles:
        table.add_row(
            str(article.id),
            article.title,
            article.category.value,
            article.source,
            article.read_time,
            "✓" if article.is_summarized else "-",
        )

    console.print(table)


def print_article(article: Article, show_simplified: bool = True) -> None:
    """Print a single enriched article."""
    lines = [f"[bold]{article.title}[/bold]", f"[dim]{article.source} • {article.category.value} • {article.read_time}[/dim]"]
    if article.tldr:
        lines.append(f"\n[bold]TL;DR:[/bold] {article.tldr}")
    if article.key_takeaways:
        lines.append("\n[bold]Key takeaways:[/bold]")
        lines.extend(f"• {takeaway}" for takeaway in article.key_takeaways)
    if show_simplified and article.simplified_content:
        lines.append(f"\n{article.simplified_content}")
    if article.url:
        lines.append(f"\n[blue]{article.url}[/blue]")

    console.print(Panel("\n".join(lines), title=f"Article {article.id}"))


def articles_command(
    page: int = typer.Option(1, "--page", "-p", help="Page number", min=1),
    config_path: Optional[Path] = CONFIG_OPTION,
) -> None:
    """Show a page of the health feed."""
    coordinator = load_coordinator(config_path)
    result = run_or_exit(coordinator.get_page(page))

    if result.warning:
        console.print(f"[yellow]{result.warning}[/yellow]")

    print_articles(result.articles, f"Health News - page {result.page}")
    console.print(
        f"[dim]{result.total_articles} articles total"
        f"{' • more on the next page' if result.has_more else ''}[/dim]"
    )


def refresh_command(config_path: Optional[Path] = CONFIG_OPTION) -> None:
    """Refetch headlines and show the full list."""
    coordinator = load_coordinator(config_path)
    result = run_or_exit(coordinator.refresh())

    console.print(f"[green]{result.message}[/green]")
    print_articles(result.articles, "Health News")


def enrich_command(
    article_id: int = typer.Argument(..., help="Article id from 'healthfeed articles'"),
    config_path: Optional[Path] = CONFIG_OPTION,
) -> None:
    """Summarize and simplify one article."""
    coordinator = load_coordinator(config_path)

    async def run():
        await coordinator.get_page(1)
        return await coordinator.enrich_one(article_id)

    result = run_or_exit(run())
    print_article(result.article)


def enrich_all_command(config_path: Optional[Path] = CONFIG_OPTION) -> None:
    """Fetch headlines and summarize all of them with rate-limit throttling."""
    coordinator = load_coordinator(config_path)

    async def run():
        await coordinator.get_page(1)
        return await coordinator.enrich_batch()

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TimeElapsedColumn(),
        console=console,
    ) as progress:
        progress.add_task("Summarizing articles with AI", total=None)
        result = run_or_exit(run())

    console.print(f"[green]{result.message}[/green]")
    print_articles(result.articles, "Health News")

    stats = coordinator.batch.last_stats
    usage = coordinator.engine.llm_provider.get_usage_stats()
    if stats:
        console.print(
            f"[dim]{stats.articles_processed} summarized, {stats.fallbacks} fallbacks, "
            f"{stats.processing_time:.1f}s • {usage['api_calls']} API calls, "
            f"${usage['estimated_cost']:.4f}[/dim]"
        )


def simplify_command(
    article_id: int = typer.Argument(..., help="Article id from 'healthfeed articles'"),
    config_path: Optional[Path] = CONFIG_OPTION,
) -> None:
    """Preview a simplified rewrite of one article."""
    coordinator = load_coordinator(config_path)

    async def run():
        await coordinator.get_page(1)
        return await coordinator.get_simplified(article_id)

    result = run_or_exit(run())
    console.print(Panel(result.simplified_content, title=f"Article {article_id} - simplified"))
