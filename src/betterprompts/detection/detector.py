"""Environment-based detection of AI coding assistants."""

import logging
import os
import shutil
from typing import Callable, List, Mapping, Optional

from ..core.config import get_settings
from ..core.types import BackendAvailability
from ..enhancement.availability import AvailabilityCache

logger = logging.getLogger(__name__)

CLAUDE_EXECUTABLES = ("claude", "claude-code")


class AssistantDetector:
    """
    Finds which AI coding assistant, if any, is available.

    Priority order: Cursor, then Claude Code, then none. The result is
    cached for the availability TTL. Instances are async callables, so
    they can be handed straight to the AI enhancer as its backend detector.
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        which: Callable[[str], Optional[str]] = shutil.which,
        cache: Optional[AvailabilityCache] = None
    ):
        self.environ = environ if environ is not None else os.environ
        self.which = which
        self.cache = cache or AvailabilityCache(
            ttl=get_settings().provider.availability_ttl
        )

    async def __call__(self) -> BackendAvailability:
        return await self.detect()

    async def detect(self, force_refresh: bool = False) -> BackendAvailability:
        """
        Detect the highest-priority assistant.

        Args:
            force_refresh: Ignore the cached result
        """
        return await self.cache.get_or_refresh(self._detect_now, force_refresh)

    def detect_all(self) -> List[BackendAvailability]:
        """List every detected assistant, in priority order. Not cached."""
        results = []
        if self.is_cursor():
            results.append(self._cursor())
        if self.is_claude_code_installed():
            results.append(self._claude_code())
        return results

    def clear_cache(self) -> None:
        """Forget the cached detection result."""
        self.cache.clear()

    def is_cursor(self) -> bool:
        """Running inside the Cursor editor's terminal."""
        if "cursor" in self.environ.get("TERM_PROGRAM", "").lower():
            return True
        return bool(self.environ.get("CURSOR_TRACE_ID"))

    def is_claude_code_installed(self) -> bool:
        """A Claude Code executable is on PATH."""
        return any(self.which(name) for name in CLAUDE_EXECUTABLES)

    async def _detect_now(self) -> BackendAvailability:
        if self.is_cursor():
            result = self._cursor()
        elif self.is_claude_code_installed():
            result = self._claude_code()
        else:
            result = BackendAvailability.none()

        logger.debug("Detected assistant: %s", result.provider)
        return result

    def _cursor(self) -> BackendAvailability:
        return BackendAvailability(
            provider="cursor",
            available=True,
            can_enhance=True,
            display_name="Cursor"
        )

    def _claude_code(self) -> BackendAvailability:
        return BackendAvailability(
            provider="claude-code",
            available=True,
            can_enhance=True,
            display_name="Claude Code"
        )
