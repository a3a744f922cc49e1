"""Enhancement transformers for prompt rewriting."""

from .normalizer import LexicalNormalizer
from .rule_engine import RuleEngine
from .ai_enhancer import AIEnhancer, build_user_message

__all__ = [
    "LexicalNormalizer",
    "RuleEngine",
    "AIEnhancer",
    "build_user_message",
]
