"""OpenAI chat completions provider."""

from typing import Any, Dict, Optional

from .base import ProviderRequest, ProviderSpec
from ..core.registry import provider_registry


def _headers(api_key: Optional[str]) -> Dict[str, str]:
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }


def _body(request: ProviderRequest) -> Dict[str, Any]:
    return {
        "model": request.model,
        "max_tokens": request.max_tokens,
        "messages": [
            {"role": "system", "content": request.system_prompt},
            {"role": "user", "content": request.user_message},
        ],
    }


def _extract(data: Any) -> Optional[str]:
    try:
        return data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return None


OPENAI = provider_registry.register(
    "openai",
    ProviderSpec(
        name="openai",
        display_name="OpenAI",
        base_url="https://api.openai.com/v1",
        path="/chat/completions",
        default_model="gpt-3.5-turbo",
        requires_api_key=True,
        build_headers=_headers,
        build_body=_body,
        extract=_extract,
    ),
    aliases=["gpt"],
)
