"""Detection of AI coding assistants in the running environment."""

from .detector import AssistantDetector

__all__ = ["AssistantDetector"]
