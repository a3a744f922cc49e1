"""Enhancement API routes."""

from fastapi import APIRouter, Depends, HTTPException

from ..schemas import (
    EnhanceRequest,
    EnhanceResponse,
    ClassifyRequest,
    ClassifyResponse,
    ErrorResponse,
)
from ..dependencies import get_betterprompts
from ... import BetterPrompts
from ...core.exceptions import TemplateError
from ...core.types import ContextFlags, EnhancementMode, Intent, PromptContext
from ...templates import INTENT_LABELS

router = APIRouter(prefix="/enhance", tags=["enhancement"])


@router.post(
    "",
    response_model=EnhanceResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse}
    }
)
async def enhance_prompt(
    request: EnhanceRequest,
    bp: BetterPrompts = Depends(get_betterprompts)
) -> EnhanceResponse:
    """
    Enhance a rough request into a clear AI prompt.

    Enhancement modes:
    - **auto**: Local Ollama first, then a detected assistant, else rules
    - **ruleOnly**: Deterministic rules only, no network
    - **manual**: The configured provider (ollama, openai, anthropic)

    The rule-based result is always produced; `was_ai_enhanced` tells which
    path the returned prompt came from. `template_id` picks a template
    explicitly; an unknown id is a 404.
    """
    try:
        # Validate intent
        intent = None
        if request.intent is not None:
            try:
                intent = Intent(request.intent)
            except ValueError:
                raise HTTPException(
                    status_code=400,
                    detail=f"Invalid intent: {request.intent}. "
                           f"Valid options: {', '.join(i.value for i in Intent)}"
                )

        # Validate mode
        mode = None
        if request.mode is not None:
            try:
                mode = EnhancementMode(request.mode)
            except ValueError:
                raise HTTPException(
                    status_code=400,
                    detail=f"Invalid mode: {request.mode}. "
                           f"Valid options: {', '.join(m.value for m in EnhancementMode)}"
                )

        context = PromptContext(**request.context.model_dump()) if request.context else None
        include = ContextFlags(**request.include.model_dump()) if request.include else None

        result = await bp.enhancer.enhance(
            request.prompt,
            intent=intent,
            context=context,
            include=include,
            mode=mode,
            template_id=request.template_id
        )

        return EnhanceResponse(
            success=True,
            prompt=result.prompt,
            preview=result.result.preview,
            was_ai_enhanced=result.was_ai_enhanced,
            detected_intent=result.intent.value,
            intent_detected=result.intent_detected,
            processing_time_ms=result.processing_time_ms
        )

    except HTTPException:
        raise
    except TemplateError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post(
    "/classify",
    response_model=ClassifyResponse,
    responses={500: {"model": ErrorResponse}}
)
async def classify_prompt(
    request: ClassifyRequest,
    bp: BetterPrompts = Depends(get_betterprompts)
) -> ClassifyResponse:
    """
    Detect the intent of a request without enhancing it.

    Returns the winning intent plus per-intent keyword scores.
    """
    try:
        result = bp.analyze(request.prompt)

        return ClassifyResponse(
            success=True,
            intent=result.primary_intent.value,
            label=INTENT_LABELS[result.primary_intent].label,
            is_default=result.is_default,
            scores={i.value: s for i, s in result.scores.items()},
            matched_keywords={i.value: kws for i, kws in result.matched_keywords.items()}
        )

    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
