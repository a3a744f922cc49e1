"""Enhancement CLI commands."""

import asyncio
import sys

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ...core.exceptions import TemplateError
from ...core.types import ContextFlags, EnhancementMode, Intent

console = Console()

INTENT_CHOICES = [i.value for i in Intent]
MODE_CHOICES = [m.value for m in EnhancementMode]


@click.command()
@click.argument("prompt", required=False)
@click.option("-i", "--intent", type=click.Choice(INTENT_CHOICES), help="Intent (detected when omitted)")
@click.option("-t", "--template", "template_id", help="Template id to use (see `bp templates`)")
@click.option("-f", "--file", "context_file", type=click.Path(exists=True, dir_okay=False), help="Current file to include as context")
@click.option("-s", "--selection", help="Selected code to include as context")
@click.option("--project", is_flag=True, help="Include the project structure")
@click.option("--git", is_flag=True, help="Include git status")
@click.option("--related", is_flag=True, help="Include files imported by --file")
@click.option("-m", "--mode", type=click.Choice(MODE_CHOICES), help="Enhancement mode (default from settings)")
@click.option("-o", "--output", "output_file", type=click.Path(), help="Write result to file")
@click.option("-v", "--verbose", is_flag=True, help="Show detailed output")
def enhance(prompt, intent, template_id, context_file, selection, project, git, related, mode, output_file, verbose):
    """Enhance a rough request into a clear AI prompt.

    Examples:

        bp enhance "button not work when click"

        bp enhance "add dark mode" -f src/app.tsx --project --git

        bp enhance "make fast" --mode ruleOnly -v

        bp enhance "login fails" --template fix-error
    """
    if not prompt:
        prompt = sys.stdin.read()

    if not prompt or not prompt.strip():
        console.print("[red]Error:[/red] No prompt provided")
        raise click.Abort()

    prompt = prompt.strip()

    from ... import BetterPrompts

    bp = BetterPrompts()
    include = ContextFlags(
        file=context_file is not None,
        selection=bool(selection),
        project=project,
        git=git,
        related=related,
    )
    context = bp.gather_context(include, file_path=context_file, selection=selection)

    async def run_enhancement():
        return await bp.enhancer.enhance(
            prompt,
            intent=Intent(intent) if intent else None,
            context=context,
            include=include,
            mode=EnhancementMode(mode) if mode else None,
            template_id=template_id,
        )

    try:
        with console.status("[bold green]Enhancing..."):
            result = asyncio.run(run_enhancement())
    except TemplateError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise click.Abort()

    # Output
    if output_file:
        with open(output_file, "w") as f:
            f.write(result.prompt)
        console.print(f"[green]Saved to:[/green] {output_file}")
    else:
        if verbose:
            console.print(Panel(result.prompt, title="Enhanced Prompt"))
        else:
            click.echo(result.prompt)

    if verbose:
        table = Table(title="Enhancement Results")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("Intent", result.intent.value)
        table.add_row("Intent Source", "detected" if result.intent_detected else "given")
        table.add_row("AI Enhanced", "Yes" if result.was_ai_enhanced else "No")
        table.add_row("Processing Time", f"{result.processing_time_ms:.1f}ms")

        console.print(table)


@click.command()
@click.argument("prompt")
@click.option("-v", "--verbose", is_flag=True, help="Show per-intent scores")
def classify(prompt, verbose):
    """Detect the intent of a request.

    Example:

        bp classify "fix the login bug"
    """
    from ...enhancement import IntentDetector
    from ...templates import INTENT_LABELS

    result = IntentDetector().detect(prompt)
    label = INTENT_LABELS[result.primary_intent]

    console.print(f"\n[bold]Intent:[/bold] [green]{result.primary_intent.value}[/green] ({label.label})")
    if result.is_default:
        console.print("[dim]No keywords matched, using the default intent[/dim]")

    if verbose:
        table = Table(title="Intent Scores")
        table.add_column("Intent", style="cyan")
        table.add_column("Score", style="green", justify="right")
        table.add_column("Matched Keywords")

        for intent, score in sorted(result.scores.items(), key=lambda x: -x[1]):
            matched = ", ".join(result.matched_keywords.get(intent, []))
            table.add_row(intent.value, str(score), matched or "-")

        console.print(table)
