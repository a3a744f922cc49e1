"""Registry pattern for extensible component management."""

from typing import Dict, TypeVar, Generic, Optional, List, Any
from abc import ABC

from .exceptions import ConfigurationError

T = TypeVar('T')


class Registry(Generic[T], ABC):
    """
    Generic registry for managing pluggable components.

    Items are registered under a name with optional aliases and looked
    up by either.
    """

    def __init__(self):
        self._items: Dict[str, T] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        name: str,
        item: T,
        aliases: Optional[List[str]] = None
    ) -> T:
        """Register an item under a name."""
        self._items[name] = item

        for alias in (aliases or []):
            self._aliases[alias] = name

        return item

    def get(self, name: str) -> T:
        """Get a registered item by name or alias."""
        resolved_name = self._aliases.get(name, name)

        if resolved_name not in self._items:
            available = list(self._items.keys())
            raise KeyError(
                f"'{name}' not found in registry. Available: {available}"
            )

        return self._items[resolved_name]

    def list_registered(self) -> List[str]:
        """List all registered names."""
        return list(self._items.keys())


class ProviderRegistry(Registry):
    """
    Registry of AI provider specs.

    Unknown provider ids are a configuration error rather than a KeyError.
    """

    def get_provider(self, name: str) -> Any:
        """
        Get a provider spec.

        Args:
            name: Provider id (e.g., "openai", "anthropic", "ollama")

        Returns:
            The registered ProviderSpec

        Raises:
            ConfigurationError: If no provider is registered under that name
        """
        try:
            return self.get(name)
        except KeyError as e:
            raise ConfigurationError(
                f"Unknown provider: {name}",
                config_key="manual_provider",
                details={"available": self.list_registered()},
                cause=e
            ) from e

    def get_credentialed_providers(self) -> List[str]:
        """List providers that are usable with the current settings."""
        from .config import get_settings
        settings = get_settings()

        available = []
        for name in self.list_registered():
            spec = self.get(name)
            if not spec.requires_api_key or settings.provider.api_key:
                available.append(name)
        return available


# Global registry instance
provider_registry = ProviderRegistry()
