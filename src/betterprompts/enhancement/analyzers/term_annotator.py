"""Technical term hints derived from keyword clusters."""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class TermCluster:
    """Trigger keywords and the technical terms they suggest."""
    triggers: Tuple[str, ...]
    label: str
    terms: Tuple[str, ...]


TERM_CLUSTERS: Tuple[TermCluster, ...] = (
    TermCluster(("button", "click", "press"), "button click handler",
                ("onClick event", "event handler", "user interaction")),
    TermCluster(("form", "submit", "input"), "form submission",
                ("form validation", "input handling", "form state")),
    TermCluster(("login", "signin", "sign in"), "user authentication",
                ("authentication flow", "credentials", "session management")),
    TermCluster(("save", "store", "persist"), "data persistence",
                ("storage", "database operation", "state management")),
    TermCluster(("load", "fetch", "get data"), "data fetching",
                ("API call", "async operation", "data loading")),
    TermCluster(("show", "display", "render", "visible"), "UI rendering",
                ("component rendering", "visibility", "display logic")),
    TermCluster(("hide", "invisible", "remove"), "UI visibility",
                ("conditional rendering", "display state", "DOM manipulation")),
    TermCluster(("list", "array", "items", "loop"), "list/array handling",
                ("iteration", "array methods", "list rendering")),
    TermCluster(("error", "catch", "fail", "exception"), "error handling",
                ("try-catch", "error boundary", "exception handling")),
    TermCluster(("async", "await", "promise", "wait"), "asynchronous operation",
                ("Promise", "async/await", "asynchronous flow")),
    TermCluster(("style", "css", "color", "layout"), "styling",
                ("CSS", "styling", "layout")),
    TermCluster(("route", "page", "navigate", "url"), "routing/navigation",
                ("routing", "navigation", "URL handling")),
    TermCluster(("state", "update", "change value"), "state management",
                ("state update", "reactivity", "state management")),
    TermCluster(("type", "typescript", "interface"), "type definition",
                ("TypeScript", "type safety", "interface definition")),
)


class TermAnnotator:
    """Collects technical hint terms for every cluster the input triggers."""

    def __init__(self, clusters: Tuple[TermCluster, ...] = TERM_CLUSTERS):
        self.clusters = clusters

    def annotate(self, text: str) -> List[str]:
        """
        Return hint terms for the input.

        Triggers match as case-insensitive substrings. Terms are deduplicated
        across clusters, keeping first-seen order.
        """
        lowered = text.lower()
        terms: List[str] = []

        for cluster in self.clusters:
            if any(trigger in lowered for trigger in cluster.triggers):
                terms.extend(cluster.terms)

        return list(dict.fromkeys(terms))
