"""Context gathering from the filesystem and git."""

from .gatherer import ContextGatherer, detect_language

__all__ = ["ContextGatherer", "detect_language"]
