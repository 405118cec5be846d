"""Init command implementation."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel

from ..config import DEFAULT_CONFIG_PATH, ConfigModel, save_config

console = Console()


def init_command(
    config_path: Path = typer.Option(
        DEFAULT_CONFIG_PATH,
        "--config",
        "-c",
        help="Configuration file to create",
    ),
    country: str = typer.Option("us", "--country", help="Headline country code"),
    model: str = typer.Option("gpt-4o-mini", "--model", help="Generation model name"),
    base_url: Optional[str] = typer.Option(
        None,
        "--llm-base-url",
        help="OpenAI-compatible API base URL",
    ),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config"),
) -> None:
    """Create a default configuration file."""
    console.print(Panel.fit("Health News Feed - Initialization", style="bold blue"))

    if config_path.exists() and not force:
        console.print(f"[yellow]Config already exists: {config_path} (use --force to overwrite)[/yellow]")
        raise typer.Exit(1)

    try:
        config = ConfigModel(
            news={"country": country},
            llm={"model": model, "base_url": base_url},
        )
    except ValueError as e:
        console.print(f"[red]❌ Invalid settings: {e}[/red]")
        raise typer.Exit(1)

    save_config(config, config_path)
    console.print(f"✅ Created config: {config_path}")

    console.print(
        Panel(
            f"[green]✅ Health News Feed initialized![/green]\n\n"
            f"Configuration: {config_path}\n\n"
            f"Next steps:\n"
            f"1. Set NewsAPI key: [bold]export {config.news.api_key_env}=your_key[/bold]\n"
            f"2. Set LLM API key: [bold]export {config.llm.api_key_env}=your_key[/bold]\n"
            f"3. Run: [bold]healthfeed articles[/bold]",
            style="green",
        )
    )
