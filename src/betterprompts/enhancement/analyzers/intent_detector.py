"""Intent detection for developer requests."""

from dataclasses import dataclass, field
from typing import List, Dict

from ...core.types import Intent


DEFAULT_INTENT = Intent.FIX


@dataclass
class IntentDetectionResult:
    """Result of intent detection."""
    primary_intent: Intent
    scores: Dict[Intent, int] = field(default_factory=dict)
    matched_keywords: Dict[Intent, List[str]] = field(default_factory=dict)

    @property
    def is_default(self) -> bool:
        """True when no keyword matched and the default intent was used."""
        return not any(self.scores.values())


class IntentDetector:
    """
    Detects the intent of a short developer request.

    Each intent scores the summed length of its keywords found anywhere in
    the lower-cased input, so longer, more specific phrases outweigh short
    generic ones. Matching is plain substring containment.
    """

    INTENT_KEYWORDS: Dict[Intent, List[str]] = {
        Intent.FIX: [
            "fix", "bug", "error", "broken", "not work", "doesnt work",
            "doesn't work", "fail", "crash", "issue", "problem", "wrong",
            "debug", "repair", "solve",
        ],
        Intent.ADD: [
            "add", "create", "new", "implement", "make", "build", "write",
            "generate", "insert",
        ],
        Intent.CHANGE: [
            "change", "update", "modify", "edit", "refactor", "rename", "move",
            "replace", "convert", "transform",
        ],
        Intent.EXPLAIN: [
            "explain", "what", "how", "why", "understand", "mean", "does this",
            "tell me", "describe", "clarify",
        ],
        Intent.TEST: [
            "test", "testing", "unit test", "spec", "coverage", "mock", "assert",
        ],
        Intent.REVIEW: [
            "review", "check", "audit", "inspect", "analyze", "evaluate", "assess",
        ],
        Intent.IMPROVE: [
            "improve", "optimize", "faster", "better", "performance", "speed",
            "efficient", "enhance", "upgrade", "clean",
        ],
        Intent.DOCUMENT: [
            "document", "docs", "readme", "comment", "jsdoc", "docstring",
            "documentation",
        ],
    }

    def detect(self, text: str) -> IntentDetectionResult:
        """
        Detect the intent of a request.

        Args:
            text: The free-text request

        Returns:
            IntentDetectionResult with the winning intent and all scores
        """
        lowered = text.lower()

        best = DEFAULT_INTENT
        highest = 0
        scores: Dict[Intent, int] = {}
        matched: Dict[Intent, List[str]] = {}

        for intent in Intent:
            hits = [kw for kw in self.INTENT_KEYWORDS[intent] if kw in lowered]
            score = sum(len(kw) for kw in hits)
            scores[intent] = score
            if hits:
                matched[intent] = hits
            # Strictly greater: ties keep the earlier intent
            if score > highest:
                highest = score
                best = intent

        return IntentDetectionResult(
            primary_intent=best,
            scores=scores,
            matched_keywords=matched
        )

    def classify(self, text: str) -> Intent:
        """Return only the winning intent."""
        return self.detect(text).primary_intent


_detector = IntentDetector()


def classify(text: str) -> Intent:
    """Classify free text into one of the fixed intents."""
    return _detector.classify(text)
