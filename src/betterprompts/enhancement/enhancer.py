"""Main prompt enhancement orchestrator."""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Optional

from ..core.types import (
    ContextFlags,
    EnhancedPrompt,
    EnhancementMode,
    EnhancementRequest,
    Intent,
    PromptContext,
)

from .analyzers.intent_detector import IntentDetector, IntentDetectionResult
from .transformers.rule_engine import RuleEngine
from .transformers.ai_enhancer import AIEnhancer

logger = logging.getLogger(__name__)


@dataclass
class DetailedEnhancementResult:
    """Detailed result from the enhancement process."""
    user_input: str
    result: EnhancedPrompt
    intent: Intent
    rule_based_prompt: str
    intent_detected: bool = False
    processing_time_ms: float = 0.0

    @property
    def prompt(self) -> str:
        return self.result.prompt

    @property
    def was_ai_enhanced(self) -> bool:
        return self.result.was_ai_enhanced


class PromptEnhancer:
    """
    Caller-side composition of the enhancement pipeline.

    Classifies the request when no intent is given, always runs the rule
    path, then offers the rule-based prompt to the AI path as its fallback.
    """

    def __init__(
        self,
        rule_engine: Optional[RuleEngine] = None,
        ai_enhancer: Optional[AIEnhancer] = None,
        intent_detector: Optional[IntentDetector] = None
    ):
        self.rule_engine = rule_engine or RuleEngine()
        self.ai_enhancer = ai_enhancer or AIEnhancer()
        self.intent_detector = intent_detector or IntentDetector()

    async def enhance(
        self,
        user_input: str,
        intent: Optional[Intent] = None,
        context: Optional[PromptContext] = None,
        include: Optional[ContextFlags] = None,
        mode: Optional[EnhancementMode] = None,
        template_id: Optional[str] = None
    ) -> DetailedEnhancementResult:
        """
        Enhance a request through the rule path and, optionally, the AI path.

        Args:
            user_input: The raw request
            intent: Known intent (skip classification)
            context: Source context
            include: Which context sections to render
            mode: Override of the configured enhancement mode
            template_id: Template to use instead of the first one for the intent

        Returns:
            DetailedEnhancementResult with the final prompt and metadata

        Raises:
            TemplateError: If template_id names no template
        """
        start_time = time.time()

        request, detected = self._build_request(user_input, intent, context, include)
        rule_result = self._rule_result(request, template_id)
        result = await self.ai_enhancer.enhance(user_input, rule_result.prompt, mode=mode)

        logger.debug(
            "Enhanced request: intent=%s ai=%s",
            request.intent.value,
            result.was_ai_enhanced
        )
        return DetailedEnhancementResult(
            user_input=user_input,
            result=result,
            intent=request.intent,
            rule_based_prompt=rule_result.prompt,
            intent_detected=detected,
            processing_time_ms=(time.time() - start_time) * 1000
        )

    def enhance_sync(
        self,
        user_input: str,
        intent: Optional[Intent] = None,
        context: Optional[PromptContext] = None,
        include: Optional[ContextFlags] = None,
        mode: Optional[EnhancementMode] = None,
        template_id: Optional[str] = None
    ) -> DetailedEnhancementResult:
        """Synchronous version of enhance."""
        return asyncio.run(
            self.enhance(user_input, intent, context, include, mode, template_id)
        )

    def enhance_rules(
        self,
        user_input: str,
        intent: Optional[Intent] = None,
        context: Optional[PromptContext] = None,
        include: Optional[ContextFlags] = None,
        template_id: Optional[str] = None
    ) -> DetailedEnhancementResult:
        """Rule path only. Never touches the network."""
        start_time = time.time()

        request, detected = self._build_request(user_input, intent, context, include)
        result = self._rule_result(request, template_id)

        return DetailedEnhancementResult(
            user_input=user_input,
            result=result,
            intent=request.intent,
            rule_based_prompt=result.prompt,
            intent_detected=detected,
            processing_time_ms=(time.time() - start_time) * 1000
        )

    def classify(self, user_input: str) -> IntentDetectionResult:
        """Detect the intent of a request, with scores."""
        return self.intent_detector.detect(user_input)

    def _rule_result(
        self,
        request: EnhancementRequest,
        template_id: Optional[str]
    ) -> EnhancedPrompt:
        if template_id is None:
            return self.rule_engine.enhance(request)
        return self.rule_engine.enhance_with_template(request, template_id)

    def _build_request(
        self,
        user_input: str,
        intent: Optional[Intent],
        context: Optional[PromptContext],
        include: Optional[ContextFlags]
    ):
        detected = intent is None
        if detected:
            intent = self.intent_detector.classify(user_input)

        request = EnhancementRequest(
            intent=intent,
            user_input=user_input,
            context=context or PromptContext(),
            include=include or ContextFlags()
        )
        return request, detected


# Convenience functions

async def enhance(
    user_input: str,
    intent: Optional[Intent] = None,
    context: Optional[PromptContext] = None,
    include: Optional[ContextFlags] = None
) -> EnhancedPrompt:
    """
    Convenience function to enhance a request with the global settings.

    Returns:
        The final EnhancedPrompt
    """
    enhancer = PromptEnhancer()
    detailed = await enhancer.enhance(user_input, intent, context, include)
    return detailed.result


def enhance_sync(
    user_input: str,
    intent: Optional[Intent] = None,
    context: Optional[PromptContext] = None,
    include: Optional[ContextFlags] = None
) -> EnhancedPrompt:
    """Synchronous version of enhance."""
    return asyncio.run(enhance(user_input, intent, context, include))
