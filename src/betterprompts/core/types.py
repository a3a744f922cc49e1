"""Core type definitions for the prompt enhancement system."""

from dataclasses import dataclass, field
from typing import Optional, List
from enum import Enum
import time


PREVIEW_LENGTH = 200


class Intent(Enum):
    """Coarse category of a developer request. Declaration order is the tie-break order."""
    FIX = "fix"
    ADD = "add"
    CHANGE = "change"
    EXPLAIN = "explain"
    TEST = "test"
    REVIEW = "review"
    IMPROVE = "improve"
    DOCUMENT = "document"


class EnhancementMode(Enum):
    """How the AI path is attempted."""
    AUTO = "auto"           # Local backend first, then detected assistant
    RULE_ONLY = "ruleOnly"  # Never touch the network
    MANUAL = "manual"       # Explicitly configured provider


@dataclass(frozen=True)
class PromptContext:
    """Source context supplied by the host. Every field is optional."""
    file_name: Optional[str] = None
    file_path: Optional[str] = None
    language: Optional[str] = None
    selected_code: Optional[str] = None
    project_structure: Optional[str] = None
    git_status: Optional[str] = None
    related_files: Optional[List[str]] = None


@dataclass(frozen=True)
class ContextFlags:
    """Which context sections to render."""
    file: bool = False
    selection: bool = False
    project: bool = False
    git: bool = False
    related: bool = False

    @classmethod
    def quick(cls) -> "ContextFlags":
        """Flags used by one-shot quick actions: file and selection only."""
        return cls(file=True, selection=True)


@dataclass(frozen=True)
class EnhancementRequest:
    """A single enhancement request. Constructed per call."""
    intent: Intent
    user_input: str
    context: PromptContext = field(default_factory=PromptContext)
    include: ContextFlags = field(default_factory=ContextFlags)


def make_preview(text: str, limit: int = PREVIEW_LENGTH) -> str:
    """Truncate text for display, appending an ellipsis when cut."""
    if len(text) > limit:
        return text[:limit] + "..."
    return text


@dataclass(frozen=True)
class EnhancedPrompt:
    """Result handed back to the caller."""
    prompt: str
    preview: str
    was_ai_enhanced: bool = False

    @classmethod
    def from_text(cls, prompt: str, was_ai_enhanced: bool = False) -> "EnhancedPrompt":
        """Build a result, computing the preview."""
        return cls(
            prompt=prompt,
            preview=make_preview(prompt),
            was_ai_enhanced=was_ai_enhanced
        )


@dataclass(frozen=True)
class BackendAvailability:
    """Snapshot of what AI backend can be reached."""
    provider: str
    available: bool
    can_enhance: bool
    display_name: str
    models: List[str] = field(default_factory=list)
    checked_at: float = field(default_factory=time.monotonic)

    @classmethod
    def none(cls) -> "BackendAvailability":
        """Result for when nothing was detected."""
        return cls(
            provider="none",
            available=False,
            can_enhance=False,
            display_name="None detected"
        )


@dataclass
class EnhancementStatus:
    """Summary of the current AI enhancement setup, for status displays."""
    mode: str
    provider: str
    available: bool
    models: List[str] = field(default_factory=list)
