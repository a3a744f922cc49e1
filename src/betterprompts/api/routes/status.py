"""AI enhancement status routes."""

from fastapi import APIRouter, Depends, HTTPException

from ..schemas import StatusResponse, ErrorResponse
from ..dependencies import get_betterprompts
from ... import BetterPrompts
from ...core.exceptions import ConfigurationError
from ...core.registry import provider_registry

router = APIRouter(prefix="/status", tags=["status"])


@router.get(
    "",
    response_model=StatusResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
async def enhancement_status(
    bp: BetterPrompts = Depends(get_betterprompts)
) -> StatusResponse:
    """
    Report the current AI enhancement setup.

    In `auto` mode this probes the local Ollama server (cached for the
    availability TTL) and checks for a detected assistant.
    """
    try:
        status = await bp.status()

        return StatusResponse(
            mode=status.mode,
            provider=status.provider,
            available=status.available,
            models=status.models,
            providers=provider_registry.list_registered(),
            credentialed_providers=provider_registry.get_credentialed_providers()
        )

    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
