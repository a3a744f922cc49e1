"""Ollama local provider: generation plus the reachability probe."""

import logging
import re
from typing import Any, Dict, Optional

import httpx

from .base import ProviderRequest, ProviderSpec
from ..core.registry import provider_registry
from ..core.types import BackendAvailability

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "http://localhost:11434"

# Local models like to announce their answer before giving it
_PREFIX_PATTERN = re.compile(r"^(Enhanced prompt:|Here's the enhanced prompt:|Output:)\s*", re.IGNORECASE)
_QUOTE_PATTERN = re.compile(r'^["\']|["\']$')


def clean_response(text: str) -> str:
    """Strip chatty prefixes and surrounding quotes from local model output."""
    cleaned = _PREFIX_PATTERN.sub("", text.strip())
    cleaned = _QUOTE_PATTERN.sub("", cleaned)
    return cleaned.strip()


def _headers(api_key: Optional[str]) -> Dict[str, str]:
    return {"Content-Type": "application/json"}


def _body(request: ProviderRequest) -> Dict[str, Any]:
    # /api/generate takes a single prompt, so the system prompt is prepended
    return {
        "model": request.model,
        "prompt": f"{request.system_prompt}\n\n{request.user_message}",
        "stream": False,
        "options": {
            "temperature": 0.7,
            "num_predict": request.max_tokens,
        },
    }


def _extract(data: Any) -> Optional[str]:
    if not isinstance(data, dict):
        return None
    return data.get("response")


OLLAMA = provider_registry.register(
    "ollama",
    ProviderSpec(
        name="ollama",
        display_name="Ollama",
        base_url=DEFAULT_ENDPOINT,
        path="/api/generate",
        default_model="llama3.2",
        requires_api_key=False,
        build_headers=_headers,
        build_body=_body,
        extract=_extract,
        clean=clean_response,
    ),
    aliases=["local"],
)


async def probe(
    client: httpx.AsyncClient,
    endpoint: str = DEFAULT_ENDPOINT,
    timeout: float = 2.0
) -> BackendAvailability:
    """
    Check whether an Ollama server answers at `endpoint`.

    A single GET on /api/tags both proves reachability and lists the
    installed models. Any failure means "not available"; this never raises.

    Args:
        client: HTTP client to send through
        endpoint: Ollama base URL
        timeout: Probe timeout in seconds

    Returns:
        BackendAvailability for provider "ollama"
    """
    url = endpoint.rstrip("/") + "/api/tags"
    try:
        response = await client.get(url, timeout=timeout)
    except httpx.HTTPError as e:
        logger.debug("Ollama probe failed: %s", e)
        return BackendAvailability(
            provider="ollama",
            available=False,
            can_enhance=False,
            display_name=OLLAMA.display_name
        )

    if not response.is_success:
        logger.debug("Ollama probe returned %d", response.status_code)
        return BackendAvailability(
            provider="ollama",
            available=False,
            can_enhance=False,
            display_name=OLLAMA.display_name
        )

    models = []
    try:
        data = response.json()
        models = [m["name"] for m in data.get("models", []) if "name" in m]
    except (ValueError, AttributeError, TypeError) as e:
        # Reachable but the model list is unreadable
        logger.debug("Could not read Ollama model list: %s", e)

    return BackendAvailability(
        provider="ollama",
        available=True,
        can_enhance=True,
        display_name=OLLAMA.display_name,
        models=models
    )
