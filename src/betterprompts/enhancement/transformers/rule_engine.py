"""Rule-based prompt enhancement: the deterministic, offline path."""

import logging
from typing import List, Optional

from ...core.exceptions import TemplateError
from ...core.types import (
    ContextFlags,
    EnhancedPrompt,
    EnhancementRequest,
    Intent,
    PromptContext,
)
from ...templates.catalog import (
    PromptTemplate,
    fill_template,
    get_template_by_id,
    get_templates_by_intent,
)
from ...templates.context_renderer import ContextRenderer
from ..analyzers.term_annotator import TermAnnotator
from .normalizer import LexicalNormalizer

logger = logging.getLogger(__name__)


class RuleEngine:
    """
    Builds a finished prompt without any AI call.

    Composes the normalizer, the term annotator, the template catalog and
    the context renderer. Never raises for well-formed requests.
    """

    def __init__(
        self,
        normalizer: Optional[LexicalNormalizer] = None,
        annotator: Optional[TermAnnotator] = None,
        renderer: Optional[ContextRenderer] = None
    ):
        self.normalizer = normalizer or LexicalNormalizer()
        self.annotator = annotator or TermAnnotator()
        self.renderer = renderer or ContextRenderer()

    def enhance(self, request: EnhancementRequest) -> EnhancedPrompt:
        """
        Enhance a request using rules only.

        Args:
            request: Intent, user input, context and context flags

        Returns:
            EnhancedPrompt with was_ai_enhanced always False
        """
        templates = get_templates_by_intent(request.intent)
        template = templates[0] if templates else None
        return self._build(request, template)

    def enhance_with_template(
        self,
        request: EnhancementRequest,
        template_id: str
    ) -> EnhancedPrompt:
        """
        Enhance a request using an explicitly chosen template.

        Raises:
            TemplateError: If no template has that id
        """
        template = get_template_by_id(template_id)
        if template is None:
            raise TemplateError(
                f"Template not found: {template_id}",
                template_name=template_id
            )
        return self._build(request, template)

    def quick_enhance(
        self,
        user_input: str,
        intent: Intent,
        context: PromptContext
    ) -> EnhancedPrompt:
        """Enhance with file and selection context, as one-shot quick actions do."""
        return self.enhance(EnhancementRequest(
            intent=intent,
            user_input=user_input,
            context=context,
            include=ContextFlags.quick()
        ))

    def format_context(self, request: EnhancementRequest) -> str:
        """Render the context block for a request."""
        return self.renderer.render(request.context, request.include)

    def _build(
        self,
        request: EnhancementRequest,
        template: Optional[PromptTemplate]
    ) -> EnhancedPrompt:
        description = self.normalizer.normalize(request.user_input)

        # Hints come from the raw input, not the rewritten text
        hints = self.annotator.annotate(request.user_input)

        context_block = self.format_context(request)

        if template is not None:
            prompt = fill_template(template, description, context_block)
        else:
            logger.warning("No template for intent %s, using plain layout", request.intent.value)
            prompt = f"{description}\n\n{context_block}"

        prompt = self._append_hints(prompt, hints)

        logger.debug(
            "Rule enhancement: intent=%s template=%s hints=%d",
            request.intent.value,
            template.id if template else None,
            len(hints)
        )
        return EnhancedPrompt.from_text(prompt, was_ai_enhanced=False)

    def _append_hints(self, prompt: str, hints: List[str]) -> str:
        if not hints:
            return prompt
        return f"{prompt}\n\n*Related concepts: {', '.join(hints)}*"
