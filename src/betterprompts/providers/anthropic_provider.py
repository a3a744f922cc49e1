"""Anthropic Messages API provider."""

from typing import Any, Dict, Optional

from .base import ProviderRequest, ProviderSpec
from ..core.registry import provider_registry

ANTHROPIC_VERSION = "2023-06-01"


def _headers(api_key: Optional[str]) -> Dict[str, str]:
    return {
        "x-api-key": api_key or "",
        "anthropic-version": ANTHROPIC_VERSION,
        "Content-Type": "application/json",
    }


def _body(request: ProviderRequest) -> Dict[str, Any]:
    # System prompt is a top-level field, not a message
    return {
        "model": request.model,
        "max_tokens": request.max_tokens,
        "system": request.system_prompt,
        "messages": [
            {"role": "user", "content": request.user_message},
        ],
    }


def _extract(data: Any) -> Optional[str]:
    try:
        block = data["content"][0]
    except (KeyError, IndexError, TypeError):
        return None
    if not isinstance(block, dict):
        return None
    return block.get("text")


ANTHROPIC = provider_registry.register(
    "anthropic",
    ProviderSpec(
        name="anthropic",
        display_name="Anthropic",
        base_url="https://api.anthropic.com/v1",
        path="/messages",
        default_model="claude-3-haiku-20240307",
        requires_api_key=True,
        build_headers=_headers,
        build_body=_body,
        extract=_extract,
    ),
    aliases=["claude"],
)
