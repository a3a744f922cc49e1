"""Main CLI entry point."""

import asyncio

import click
from rich.console import Console

from .. import __version__
from ..core.exceptions import BetterPromptsError
from ..core.log import configure_logging
from .commands import (
    enhance,
    classify,
    list_templates,
)

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name="betterprompts")
def cli():
    """BetterPrompts - turn rough requests into clear AI prompts.

    \b
    Examples:
        bp enhance "button not work when click"
        bp enhance "add login page" -f src/app.py --project --git
        bp classify "make the query faster"
        bp templates --intent fix

    Use --help on any command for more details.
    """
    configure_logging()


# Enhancement commands
cli.add_command(enhance)
cli.add_command(classify)

# Catalog commands
cli.add_command(list_templates)


@cli.command()
def status():
    """Show the AI enhancement setup.

    Example:

        bp status
    """
    from rich.table import Table
    from .. import BetterPrompts
    from ..core.config import get_settings

    bp = BetterPrompts()
    try:
        with console.status("[bold green]Checking backends..."):
            current = asyncio.run(bp.status())
    except BetterPromptsError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise click.Abort()

    availability = "[green]Yes[/green]" if current.available else "[red]No[/red]"
    console.print(f"\n[bold]Mode:[/bold] {current.mode}")
    console.print(f"[bold]Provider:[/bold] {current.provider}")
    console.print(f"[bold]Available:[/bold] {availability}")

    if current.models:
        console.print("\n[bold]Local models:[/bold]")
        for model in current.models:
            console.print(f"  - {model}")

    detected = bp.detector.detect_all()
    if detected:
        table = Table(title="Detected Assistants")
        table.add_column("Assistant", style="cyan")
        table.add_column("Can Enhance", style="green")
        for item in detected:
            table.add_row(item.display_name, "Yes" if item.can_enhance else "No")
        console.print(table)

    settings = get_settings()
    if settings.enhancement.mode == "manual" and not settings.provider.api_key \
            and settings.provider.manual_provider != "ollama":
        console.print("\n[yellow]No API key set.[/yellow] Set BP_API_KEY to use "
                      f"{settings.provider.manual_provider}.")


@cli.command()
@click.option("-h", "--host", default=None, help="Host to bind to (default from settings)")
@click.option("-p", "--port", default=None, type=int, help="Port to listen on (default from settings)")
@click.option("--reload", is_flag=True, help="Enable auto-reload")
@click.option("-w", "--workers", default=1, type=int, help="Number of workers")
def serve(host, port, reload, workers):
    """Start the REST API server.

    Example:

        bp serve --port 8080 --reload
    """
    from ..core.config import get_settings

    settings = get_settings()
    host = host or settings.api.host
    port = port or settings.api.port

    console.print(f"[bold]Starting BetterPrompts API server...[/bold]")
    console.print(f"  Host: {host}")
    console.print(f"  Port: {port}")
    console.print(f"  Workers: {workers}")
    console.print(f"  Reload: {'Yes' if reload else 'No'}")
    console.print(f"\n[dim]API docs available at http://{host}:{port}/docs[/dim]\n")

    from ..api import run_server
    run_server(host=host, port=port, reload=reload, workers=workers)


@cli.command()
def info():
    """Show information about BetterPrompts."""
    from rich.panel import Panel

    info_text = """[bold]BetterPrompts[/bold] - Turn rough requests into clear AI prompts

[bold]Pipeline:[/bold]
  • [cyan]Classify[/cyan]: Detect the intent (fix, add, change, explain, test, review, improve, document)
  • [cyan]Rewrite[/cyan]: Expand abbreviations and fix sentence structure
  • [cyan]Template[/cyan]: Fill the best template for the intent
  • [cyan]Context[/cyan]: Attach file, selection, project tree, git status, related files
  • [cyan]AI polish[/cyan]: One optional call to Ollama, OpenAI or Anthropic

[bold]Modes:[/bold] auto, ruleOnly, manual (BP_ENHANCEMENT_MODE)

[bold]Deployment:[/bold]
  • Python SDK: import betterprompts
  • REST API: bp serve
  • CLI: bp <command>

[bold]Documentation:[/bold]
  API Docs: http://localhost:8000/docs (when server running)
  CLI Help: bp --help
  Command Help: bp <command> --help"""

    console.print(Panel(info_text, title=f"BetterPrompts v{__version__}", border_style="green"))


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
