"""Provider specs: request shape and response extraction for each AI backend."""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import httpx

from ..core.exceptions import ProviderError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderRequest:
    """What every provider call needs, independent of wire format."""
    system_prompt: str
    user_message: str
    model: str
    max_tokens: int = 500


def _no_cleanup(text: str) -> str:
    return text


@dataclass(frozen=True)
class ProviderSpec:
    """
    One row of the provider dispatch table.

    Plain data plus three functions: headers from the credential, body
    from the request, and the generated text from the JSON response.
    """
    name: str
    display_name: str
    base_url: str
    path: str
    default_model: str
    requires_api_key: bool
    build_headers: Callable[[Optional[str]], Dict[str, str]]
    build_body: Callable[[ProviderRequest], Dict[str, Any]]
    extract: Callable[[Any], Optional[str]]
    clean: Callable[[str], str] = _no_cleanup

    def url(self, base_url: Optional[str] = None) -> str:
        """Full endpoint URL, optionally against another base."""
        return (base_url or self.base_url).rstrip("/") + self.path


async def complete(
    spec: ProviderSpec,
    client: httpx.AsyncClient,
    request: ProviderRequest,
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
    timeout: float = 30.0
) -> Optional[str]:
    """
    Send one generation request.

    Args:
        spec: Provider to call
        client: HTTP client to send through
        request: Prompt, model and token limit
        api_key: Credential, for providers that need one
        base_url: Override of the spec's base URL
        timeout: Request timeout in seconds

    Returns:
        The cleaned generated text, or None when the response has none

    Raises:
        ProviderError: On non-2xx status, transport failure, malformed JSON
            or a generated-text field that is not a string
    """
    try:
        response = await client.post(
            spec.url(base_url),
            headers=spec.build_headers(api_key),
            json=spec.build_body(request),
            timeout=timeout
        )
        response.raise_for_status()
        data = response.json()
    except httpx.HTTPStatusError as e:
        raise ProviderError(
            f"{spec.display_name} API error: {e.response.status_code}",
            provider=spec.name,
            status_code=e.response.status_code,
            cause=e
        ) from e
    except Exception as e:
        raise ProviderError(
            f"{spec.display_name} request failed: {str(e)}",
            provider=spec.name,
            cause=e
        ) from e

    text = spec.extract(data)
    if text is not None and not isinstance(text, str):
        raise ProviderError(
            f"{spec.display_name} returned a malformed response: "
            f"expected text, got {type(text).__name__}",
            provider=spec.name
        )
    if not text or not text.strip():
        logger.debug("%s returned no text", spec.display_name)
        return None
    return spec.clean(text.strip())
