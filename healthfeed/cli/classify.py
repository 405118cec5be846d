"""Classify command implementation."""

import typer
from rich.console import Console

from ..classification import HealthClassifier

console = Console()


def classify_command(
    title: str = typer.Argument(..., help="Headline to classify"),
    content: str = typer.Option("", "--content", help="Article body or description"),
) -> None:
    """Show how the keyword classifier files a headline."""
    result = HealthClassifier().explain(title, content)

    style = "red" if result.category.is_excluded else "green"
    console.print(f"[{style}]{result.category.value}[/{style}] - {result.reason}")
    if result.health_matches:
        console.print(f"  Health keywords: {', '.join(result.health_matches)}")
    if result.exclusion_matches:
        console.print(f"  Non-health indicators: {', '.join(result.exclusion_matches)}")
