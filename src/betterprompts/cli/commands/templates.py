"""Template catalog CLI commands."""

import click
from rich.console import Console
from rich.table import Table

from ...core.types import Intent

console = Console()


@click.command("templates")
@click.option("-i", "--intent", type=click.Choice([i.value for i in Intent]), help="Only templates for this intent")
@click.option("--show", "template_id", help="Print one template's full text")
def list_templates(intent, template_id):
    """List prompt templates.

    Examples:

        bp templates

        bp templates --intent fix

        bp templates --show fix-bug
    """
    from ...templates import PROMPT_TEMPLATES, get_template_by_id, get_templates_by_intent

    if template_id:
        template = get_template_by_id(template_id)
        if template is None:
            console.print(f"[red]Error:[/red] Template not found: {template_id}")
            raise click.Abort()
        console.print(f"[bold]{template.name}[/bold] ([cyan]{template.id}[/cyan])")
        console.print(f"[dim]{template.description}[/dim]\n")
        click.echo(template.template)
        return

    templates = get_templates_by_intent(Intent(intent)) if intent else PROMPT_TEMPLATES

    table = Table(title="Prompt Templates")
    table.add_column("ID", style="cyan")
    table.add_column("Intent", style="green")
    table.add_column("Name")
    table.add_column("Description")

    for template in templates:
        table.add_row(template.id, template.intent.value, template.name, template.description)

    console.print(table)
