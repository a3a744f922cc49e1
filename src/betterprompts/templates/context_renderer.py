"""Jinja2-based rendering of the context block attached to prompts."""

from typing import Dict, List, Tuple

from jinja2 import Environment, StrictUndefined

from ..core.types import PromptContext, ContextFlags


# Section order is fixed: file, selection, project, git, related.
SECTION_TEMPLATES: List[Tuple[str, str]] = [
    (
        "file",
        "**File:** {{ ctx.file_name }}"
        "{% if ctx.language %}\n**Language:** {{ ctx.language }}{% endif %}",
    ),
    (
        "selection",
        "\n**Code:**\n{{ ctx.selected_code | wrap_code(ctx.language or '') }}",
    ),
    (
        "project",
        "\n**Project Structure:**\n{{ ctx.project_structure }}",
    ),
    (
        "git",
        "\n**Git Status:**\n{{ ctx.git_status }}",
    ),
    (
        "related",
        "\n**Related Files:**\n{{ ctx.related_files | bullet_list }}",
    ),
]

# Field that must be present for each section to render
SECTION_FIELDS: Dict[str, str] = {
    "file": "file_name",
    "selection": "selected_code",
    "project": "project_structure",
    "git": "git_status",
    "related": "related_files",
}


class ContextRenderer:
    """
    Renders the labeled context sections for a request.

    A section is rendered only when its flag is set and the matching
    context field has a value; anything else is skipped silently.
    """

    def __init__(self):
        self.env = Environment(
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=False,
        )
        self._register_filters()
        self._templates = {
            name: self.env.from_string(source)
            for name, source in SECTION_TEMPLATES
        }

    def _register_filters(self) -> None:
        """Register custom Jinja2 filters."""

        def wrap_code(code: str, language: str = "") -> str:
            """Wrap code in markdown code block."""
            return f"```{language}\n{code}\n```"

        def bullet_list(items: List[str], bullet: str = "-") -> str:
            """Convert a list to bullet points."""
            return "\n".join(f"{bullet} {item}" for item in items)

        self.env.filters["wrap_code"] = wrap_code
        self.env.filters["bullet_list"] = bullet_list

    def render(self, context: PromptContext, include: ContextFlags) -> str:
        """
        Render the context block.

        Args:
            context: Context data from the host
            include: Which sections were requested

        Returns:
            The rendered block, or an empty string when nothing applies
        """
        parts = []
        for name, _ in SECTION_TEMPLATES:
            if not getattr(include, name):
                continue
            if not getattr(context, SECTION_FIELDS[name]):
                continue
            parts.append(self._templates[name].render(ctx=context))
        return "\n".join(parts)
