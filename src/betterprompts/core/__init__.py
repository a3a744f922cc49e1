"""Core module - foundational types, configuration, and errors."""

from .types import (
    Intent,
    EnhancementMode,
    PromptContext,
    ContextFlags,
    EnhancementRequest,
    EnhancedPrompt,
    BackendAvailability,
    EnhancementStatus,
    make_preview,
)
from .config import Settings, get_settings, reload_settings
from .exceptions import (
    BetterPromptsError,
    ProviderError,
    ConfigurationError,
    TemplateError,
)
from .registry import Registry, ProviderRegistry

__all__ = [
    # Types
    "Intent",
    "EnhancementMode",
    "PromptContext",
    "ContextFlags",
    "EnhancementRequest",
    "EnhancedPrompt",
    "BackendAvailability",
    "EnhancementStatus",
    "make_preview",
    # Configuration
    "Settings",
    "get_settings",
    "reload_settings",
    # Exceptions
    "BetterPromptsError",
    "ProviderError",
    "ConfigurationError",
    "TemplateError",
    # Registry
    "Registry",
    "ProviderRegistry",
]
