"""CLI commands."""

from .enhance import enhance, classify
from .templates import list_templates

__all__ = [
    "enhance",
    "classify",
    "list_templates",
]
