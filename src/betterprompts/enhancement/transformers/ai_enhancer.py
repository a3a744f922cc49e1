"""AI-based prompt enhancement with strict fallback to the rule-based result."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Callable, List, Optional

import httpx

from ...core.config import Settings, get_settings
from ...core.exceptions import ConfigurationError, ProviderError
from ...core.registry import provider_registry
from ...core.types import (
    BackendAvailability,
    EnhancedPrompt,
    EnhancementMode,
    EnhancementStatus,
)
from ...providers import ProviderRequest, ProviderSpec, complete
from ...providers.ollama_provider import probe
from ..availability import AvailabilityCache

logger = logging.getLogger(__name__)

BackendDetector = Callable[[], Awaitable[BackendAvailability]]
Stage = Callable[[str], Awaitable[Optional[EnhancedPrompt]]]


def build_user_message(user_input: str) -> str:
    """The user turn sent to every provider."""
    return f'Enhance this prompt: "{user_input}"'


class AIEnhancer:
    """
    Optional single-call AI rewrite of a user's request.

    `enhance()` never raises: every failure degrades to the rule-based
    prompt with was_ai_enhanced=False. Settings are read at call time, so
    a `reload_settings()` followed by `clear_cache()` takes effect at once.
    """

    SYSTEM_PROMPT = """You are a prompt enhancement assistant. Your job is to take a user's simple or broken English input and transform it into a clear, well-structured prompt for an AI coding assistant.

Rules:
1. Keep the user's intent - don't change what they're asking for
2. Fix grammar and spelling
3. Add technical terminology where appropriate
4. Make the request clear and specific
5. Keep it concise - don't over-elaborate
6. Output ONLY the enhanced prompt, no explanations or prefixes

Example:
Input: "button not work when click"
Output: "Fix the button click handler that is not responding to user interactions. Debug why the onClick event is not firing and ensure proper event binding."

Example:
Input: "make fast"
Output: "Optimize this code for better performance. Identify bottlenecks and reduce unnecessary computations.\""""

    MAX_TOKENS = 500

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None,
        detector: Optional[BackendDetector] = None,
        cache: Optional[AvailabilityCache] = None
    ):
        """
        Initialize the AI enhancer.

        Args:
            settings: Fixed settings (defaults to the global settings, read per call)
            client: HTTP client to send through (a fresh one per call if omitted)
            detector: Async callable reporting which assistant is available
            cache: Cache for the local backend probe
        """
        self._settings = settings
        self._client = client
        if detector is None:
            from ...detection import AssistantDetector
            detector = AssistantDetector()
        self.detector = detector
        self._owns_cache = cache is None
        self.cache = cache or AvailabilityCache(
            ttl=self.settings.provider.availability_ttl
        )

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    def mode(self) -> EnhancementMode:
        """
        The configured enhancement mode.

        Raises:
            ConfigurationError: If the configured value is not a known mode
        """
        value = self.settings.enhancement.mode
        try:
            return EnhancementMode(value)
        except ValueError as e:
            raise ConfigurationError(
                f"Unknown enhancement mode: {value}",
                config_key="enhancement_mode",
                details={"allowed": [m.value for m in EnhancementMode]},
                cause=e
            ) from e

    async def enhance(
        self,
        user_input: str,
        rule_based_prompt: str,
        mode: Optional[EnhancementMode] = None
    ) -> EnhancedPrompt:
        """
        Try to rewrite the user's input with an AI backend.

        Args:
            user_input: The raw request
            rule_based_prompt: Result of the rule path, used on any failure
            mode: Override of the configured mode

        Returns:
            The AI result, or the rule-based prompt with was_ai_enhanced=False
        """
        fallback = EnhancedPrompt.from_text(rule_based_prompt, was_ai_enhanced=False)

        try:
            mode = mode or self.mode()
            for stage in self._stages(mode):
                result = await stage(user_input)
                if result is not None:
                    return result
        except (ProviderError, ConfigurationError) as e:
            logger.warning("AI enhancement failed, falling back to rule-based: %s", e)
            return fallback

        logger.debug("No AI backend produced a result, using rule-based prompt")
        return fallback

    async def check_local(self, force_refresh: bool = False) -> BackendAvailability:
        """Probe the local Ollama server, honoring the availability cache."""
        return await self.cache.get_or_refresh(self._probe_local, force_refresh)

    def clear_cache(self) -> None:
        """Drop cached availability. Call after settings change."""
        self.cache.clear()
        if self._owns_cache:
            self.cache.ttl = self.settings.provider.availability_ttl

    async def get_status(self) -> EnhancementStatus:
        """Summarize the current AI setup for status displays."""
        mode = self.mode()

        if mode is EnhancementMode.RULE_ONLY:
            return EnhancementStatus(mode=mode.value, provider="Rule-based", available=True)

        if mode is EnhancementMode.MANUAL:
            name = self.settings.provider.manual_provider
            try:
                spec = provider_registry.get_provider(name)
            except ConfigurationError:
                return EnhancementStatus(mode=mode.value, provider=name, available=False)

            if spec.name == "ollama":
                local = await self.check_local()
                return EnhancementStatus(
                    mode=mode.value,
                    provider=spec.display_name,
                    available=local.available,
                    models=local.models
                )
            return EnhancementStatus(
                mode=mode.value,
                provider=spec.display_name,
                available=bool(self.settings.provider.api_key)
            )

        local = await self.check_local()
        if local.available:
            return EnhancementStatus(
                mode=mode.value,
                provider=f"{local.display_name} (auto)",
                available=True,
                models=local.models
            )

        detection = await self.detector()
        return EnhancementStatus(
            mode=mode.value,
            provider=detection.display_name,
            available=detection.can_enhance
        )

    def _stages(self, mode: EnhancementMode) -> List[Stage]:
        if mode is EnhancementMode.AUTO:
            return [self._local_stage, self._detected_stage]
        if mode is EnhancementMode.MANUAL:
            return [self._manual_stage]
        return []

    async def _local_stage(self, user_input: str) -> Optional[EnhancedPrompt]:
        local = await self.check_local()
        if not (local.available and local.models):
            logger.debug("Local backend unavailable or has no models")
            return None
        return await self._call(provider_registry.get_provider("ollama"), user_input)

    async def _detected_stage(self, user_input: str) -> Optional[EnhancedPrompt]:
        detection = await self.detector()
        if not detection.can_enhance:
            return None
        # A detected assistant has no API of its own; use the configured provider
        logger.debug("Detected %s, using configured provider", detection.display_name)
        return await self._manual_stage(user_input)

    async def _manual_stage(self, user_input: str) -> Optional[EnhancedPrompt]:
        spec = provider_registry.get_provider(self.settings.provider.manual_provider)
        if spec.requires_api_key and not self.settings.provider.api_key:
            logger.debug("No API key configured for %s", spec.name)
            return None
        return await self._call(spec, user_input)

    async def _call(self, spec: ProviderSpec, user_input: str) -> EnhancedPrompt:
        provider = self.settings.provider
        is_local = spec.name == "ollama"
        request = ProviderRequest(
            system_prompt=self.SYSTEM_PROMPT,
            user_message=build_user_message(user_input),
            model=provider.ollama_model if is_local else spec.default_model,
            max_tokens=self.MAX_TOKENS
        )

        logger.debug("Calling %s", spec.display_name)
        async with self._http() as client:
            text = await complete(
                spec,
                client,
                request,
                api_key=provider.api_key,
                base_url=provider.ollama_endpoint if is_local else None,
                timeout=provider.timeout
            )

        return EnhancedPrompt.from_text(text or user_input, was_ai_enhanced=True)

    async def _probe_local(self) -> BackendAvailability:
        provider = self.settings.provider
        async with self._http() as client:
            return await probe(client, provider.ollama_endpoint, provider.probe_timeout)

    @asynccontextmanager
    async def _http(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
        else:
            async with httpx.AsyncClient() as client:
                yield client
