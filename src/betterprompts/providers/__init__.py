"""AI provider specs for the optional enhancement path."""

from typing import List

from .base import ProviderRequest, ProviderSpec, complete
from ..core.registry import provider_registry

__all__ = [
    "ProviderRequest",
    "ProviderSpec",
    "complete",
    "get_provider",
    "list_providers",
]


def get_provider(name: str) -> ProviderSpec:
    """
    Get a registered provider spec.

    Args:
        name: Provider id or alias ("openai", "anthropic", "ollama")

    Raises:
        ConfigurationError: If the provider is unknown
    """
    return provider_registry.get_provider(name)


def list_providers() -> List[str]:
    """List all registered provider ids."""
    return provider_registry.list_registered()


# Import providers to register them
from . import openai_provider, anthropic_provider, ollama_provider  # noqa: E402,F401
