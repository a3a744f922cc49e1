"""Lexical normalization of informal requests."""

import re
from typing import Dict, List, Pattern, Tuple


# Abbreviations and slang mapped to fuller phrases
WORD_EXPANSIONS: Dict[str, str] = {
    # Actions
    "fix": "fix and debug",
    "broken": "not working correctly",
    "slow": "has performance issues and runs slowly",
    "fast": "optimized for better performance",
    "work": "function correctly",
    "not work": "is not functioning as expected",
    "doesnt work": "is not functioning as expected",
    "doesn't work": "is not functioning as expected",

    # Quality
    "bad": "poorly structured or inefficient",
    "good": "well-structured and efficient",
    "ugly": "poorly formatted and hard to read",
    "clean": "well-organized and readable",
    "messy": "disorganized and hard to maintain",

    # Actions (simple)
    "make": "implement",
    "do": "implement",
    "want": "need to",
    "need": "require",

    # Technical
    "btn": "button",
    "func": "function",
    "var": "variable",
    "arr": "array",
    "obj": "object",
    "str": "string",
    "num": "number",
    "bool": "boolean",
    "db": "database",
    "api": "API endpoint",
    "auth": "authentication",
    "err": "error",
    "msg": "message",
    "req": "request",
    "res": "response",
    "param": "parameter",
    "arg": "argument",
    "props": "properties",
    "config": "configuration",
}

# Applied in order, each to the previous rule's output
STRUCTURE_RULES: List[Tuple[str, Pattern[str], str]] = [
    ("not_work", re.compile(r"(\w+)\s+not\s+work\b", re.IGNORECASE), r"\1 is not working correctly"),
    ("make_to_implement", re.compile(r"^make\s+(.+)", re.IGNORECASE | re.DOTALL), r"Implement \1"),
    ("want_to_need", re.compile(r"^want\s+(.+)", re.IGNORECASE | re.DOTALL), r"I need \1"),
    ("how_does", re.compile(r"^how\s+(\w+)$", re.IGNORECASE), r"How does \1 work"),
]

TERMINAL_PUNCTUATION = ".!?"


class LexicalNormalizer:
    """
    Rewrites informal text into fuller sentences.

    `expand` replaces whole-word abbreviations; `restructure` fixes a few
    sentence shapes and guarantees capitalization and a terminal period.
    """

    def __init__(self, expansions: Dict[str, str] = WORD_EXPANSIONS):
        # Longest key first so "not work" wins over "work"; ties keep declaration order
        ordered = sorted(expansions.items(), key=lambda item: len(item[0]), reverse=True)
        self._expansions: List[Tuple[Pattern[str], str]] = [
            (re.compile(rf"\b{re.escape(word)}\b", re.IGNORECASE), expansion)
            for word, expansion in ordered
        ]

    def expand(self, text: str) -> str:
        """Replace abbreviations and slang with fuller phrases."""
        result = text
        for pattern, expansion in self._expansions:
            # Callable replacement so the expansion is inserted literally
            result = pattern.sub(lambda _m, value=expansion: value, result)
        return result

    def restructure(self, text: str) -> str:
        """Apply sentence rewrites, then capitalize and punctuate."""
        result = text
        for _name, pattern, replacement in STRUCTURE_RULES:
            result = pattern.sub(replacement, result)

        if result:
            result = result[0].upper() + result[1:]

        if result and result[-1].isalpha():
            result += "."

        return result

    def normalize(self, text: str) -> str:
        """Run `expand` then `restructure`."""
        return self.restructure(self.expand(text))
