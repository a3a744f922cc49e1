"""Prompt template catalog and context rendering."""

from .catalog import (
    PromptTemplate,
    IntentLabel,
    PROMPT_TEMPLATES,
    INTENT_LABELS,
    get_templates_by_intent,
    get_template_by_id,
    fill_template,
)
from .context_renderer import ContextRenderer

__all__ = [
    "PromptTemplate",
    "IntentLabel",
    "PROMPT_TEMPLATES",
    "INTENT_LABELS",
    "get_templates_by_intent",
    "get_template_by_id",
    "fill_template",
    "ContextRenderer",
]
