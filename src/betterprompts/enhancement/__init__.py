"""Prompt enhancement module."""

from .enhancer import (
    PromptEnhancer,
    DetailedEnhancementResult,
    enhance,
    enhance_sync,
)
from .availability import AvailabilityCache
from .analyzers.intent_detector import IntentDetector, IntentDetectionResult, classify
from .analyzers.term_annotator import TermAnnotator
from .transformers.normalizer import LexicalNormalizer
from .transformers.rule_engine import RuleEngine
from .transformers.ai_enhancer import AIEnhancer

__all__ = [
    # Main orchestrator
    "PromptEnhancer",
    "DetailedEnhancementResult",
    # Convenience functions
    "enhance",
    "enhance_sync",
    # Analyzers
    "IntentDetector",
    "IntentDetectionResult",
    "classify",
    "TermAnnotator",
    # Transformers
    "LexicalNormalizer",
    "RuleEngine",
    "AIEnhancer",
    "AvailabilityCache",
]
