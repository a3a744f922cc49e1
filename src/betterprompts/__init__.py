"""
BetterPrompts - turn rough developer requests into clear AI prompts

Classifies a short request, rewrites it with deterministic rules and a
template, attaches source context, and optionally polishes the result with
one call to a local or remote model.

Basic Usage:
    >>> from betterprompts import BetterPrompts
    >>> bp = BetterPrompts()
    >>>
    >>> # Rules only, never touches the network
    >>> result = bp.enhance_rules("button not work when click")
    >>> print(result.prompt)
    >>>
    >>> # Rules, then one AI rewrite if a backend is available
    >>> result = await bp.enhance("make login fast")
    >>> print(result.was_ai_enhanced)

For more control, use the individual modules:
    - betterprompts.enhancement: Classifier, rule engine and AI enhancer
    - betterprompts.templates: Template catalog and context rendering
    - betterprompts.providers: AI provider dispatch table
    - betterprompts.context: Context gathering from files and git
    - betterprompts.detection: AI assistant detection
    - betterprompts.api: REST API server
    - betterprompts.cli: Command-line interface
"""

import asyncio
from pathlib import Path
from typing import List, Optional, Union

import httpx

from .core.config import Settings, reload_settings
from .core.types import (
    Intent,
    EnhancementMode,
    PromptContext,
    ContextFlags,
    EnhancedPrompt,
    EnhancementStatus,
)
from .core.exceptions import (
    BetterPromptsError,
    ProviderError,
    ConfigurationError,
    TemplateError,
)
from .context import ContextGatherer
from .detection import AssistantDetector
from .enhancement import (
    PromptEnhancer,
    DetailedEnhancementResult,
    AIEnhancer,
    RuleEngine,
    IntentDetectionResult,
)
from .templates import PromptTemplate, get_templates_by_intent, get_template_by_id, PROMPT_TEMPLATES


__version__ = "0.1.0"
__all__ = [
    # Main class
    "BetterPrompts",
    # Core types
    "Intent",
    "EnhancementMode",
    "PromptContext",
    "ContextFlags",
    "EnhancedPrompt",
    "EnhancementStatus",
    "PromptTemplate",
    # Exceptions
    "BetterPromptsError",
    "ProviderError",
    "ConfigurationError",
    "TemplateError",
    # Individual components (for advanced use)
    "PromptEnhancer",
    "DetailedEnhancementResult",
    "AIEnhancer",
    "RuleEngine",
    "ContextGatherer",
    "AssistantDetector",
]


def _as_intent(intent: Optional[Union[str, Intent]]) -> Optional[Intent]:
    if isinstance(intent, str):
        return Intent(intent)
    return intent


def _as_mode(mode: Optional[Union[str, EnhancementMode]]) -> Optional[EnhancementMode]:
    if isinstance(mode, str):
        return EnhancementMode(mode)
    return mode


class BetterPrompts:
    """
    Main interface for prompt enhancement.

    Example:
        >>> bp = BetterPrompts()
        >>> result = await bp.enhance("fix the login bug")
        >>> result = bp.enhance_rules("add dark mode", intent="add")
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None,
        detector: Optional[AssistantDetector] = None,
        root: Optional[Union[str, Path]] = None,
    ):
        """
        Initialize BetterPrompts.

        Args:
            settings: Fixed settings (None reads the global settings per call)
            client: HTTP client for AI calls (None creates one per call)
            detector: Assistant detector (None detects from the environment)
            root: Project root for context gathering (None for the cwd)
        """
        self.detector = detector or AssistantDetector()
        self.ai_enhancer = AIEnhancer(settings=settings, client=client, detector=self.detector)
        self.enhancer = PromptEnhancer(ai_enhancer=self.ai_enhancer)
        self.gatherer = ContextGatherer(root)

    # Enhancement methods
    async def enhance(
        self,
        user_input: str,
        intent: Optional[Union[str, Intent]] = None,
        context: Optional[PromptContext] = None,
        include: Optional[ContextFlags] = None,
        mode: Optional[Union[str, EnhancementMode]] = None,
        template_id: Optional[str] = None,
    ) -> EnhancedPrompt:
        """
        Enhance a request: rules first, then one optional AI rewrite.

        Args:
            user_input: The raw request
            intent: Known intent (None to classify)
            context: Source context
            include: Which context sections to render
            mode: Override of the configured mode (auto, ruleOnly, manual)
            template_id: Template to use instead of the first one for the intent

        Returns:
            EnhancedPrompt; was_ai_enhanced tells which path produced it

        Raises:
            TemplateError: If template_id names no template
        """
        result = await self.enhancer.enhance(
            user_input,
            intent=_as_intent(intent),
            context=context,
            include=include,
            mode=_as_mode(mode),
            template_id=template_id,
        )
        return result.result

    def enhance_sync(
        self,
        user_input: str,
        intent: Optional[Union[str, Intent]] = None,
        context: Optional[PromptContext] = None,
        include: Optional[ContextFlags] = None,
        mode: Optional[Union[str, EnhancementMode]] = None,
        template_id: Optional[str] = None,
    ) -> EnhancedPrompt:
        """Synchronous version of enhance."""
        return asyncio.run(
            self.enhance(user_input, intent, context, include, mode, template_id)
        )

    def enhance_rules(
        self,
        user_input: str,
        intent: Optional[Union[str, Intent]] = None,
        context: Optional[PromptContext] = None,
        include: Optional[ContextFlags] = None,
        template_id: Optional[str] = None,
    ) -> EnhancedPrompt:
        """Rule-based enhancement only. Never touches the network."""
        return self.enhancer.enhance_rules(
            user_input,
            intent=_as_intent(intent),
            context=context,
            include=include,
            template_id=template_id,
        ).result

    def quick_enhance(
        self,
        user_input: str,
        intent: Union[str, Intent],
        context: PromptContext,
    ) -> EnhancedPrompt:
        """Rule-based enhancement with file and selection context."""
        return self.enhancer.rule_engine.quick_enhance(user_input, _as_intent(intent), context)

    # Analysis methods
    def classify(self, user_input: str) -> Intent:
        """Classify a request into one of the fixed intents."""
        return self.enhancer.classify(user_input).primary_intent

    def analyze(self, user_input: str) -> IntentDetectionResult:
        """Intent detection with per-intent scores and matched keywords."""
        return self.enhancer.classify(user_input)

    # Template methods
    def templates(self, intent: Optional[Union[str, Intent]] = None) -> List[PromptTemplate]:
        """All templates, or those for one intent."""
        if intent is None:
            return list(PROMPT_TEMPLATES)
        return get_templates_by_intent(_as_intent(intent))

    def get_template(self, template_id: str) -> Optional[PromptTemplate]:
        """Look up a template by id. Returns None when not found."""
        return get_template_by_id(template_id)

    # Context methods
    def gather_context(
        self,
        include: ContextFlags,
        file_path: Optional[Union[str, Path]] = None,
        selection: Optional[str] = None,
    ) -> PromptContext:
        """Fill a PromptContext from the filesystem and git."""
        return self.gatherer.gather(include, file_path=file_path, selection=selection)

    # Status methods
    async def status(self) -> EnhancementStatus:
        """Current AI enhancement setup."""
        return await self.ai_enhancer.get_status()

    def status_sync(self) -> EnhancementStatus:
        """Synchronous version of status."""
        return asyncio.run(self.status())

    def reload_settings(self) -> Settings:
        """Re-read settings and drop every cached availability result."""
        settings = reload_settings()
        self.ai_enhancer.clear_cache()
        self.detector.clear_cache()
        return settings
