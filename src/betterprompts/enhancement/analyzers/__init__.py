"""Enhancement analyzers for request analysis."""

from .intent_detector import IntentDetector, IntentDetectionResult, classify
from .term_annotator import TermAnnotator, TermCluster

__all__ = [
    "IntentDetector",
    "IntentDetectionResult",
    "classify",
    "TermAnnotator",
    "TermCluster",
]
