"""Template catalog API routes."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from ..schemas import TemplateResponse, TemplateListResponse, ErrorResponse
from ...core.types import Intent
from ...templates import (
    PROMPT_TEMPLATES,
    PromptTemplate,
    get_template_by_id,
    get_templates_by_intent,
)

router = APIRouter(prefix="/templates", tags=["templates"])


def _to_response(template: PromptTemplate) -> TemplateResponse:
    return TemplateResponse(
        id=template.id,
        name=template.name,
        intent=template.intent.value,
        description=template.description,
        template=template.template,
        placeholders=list(template.placeholders)
    )


@router.get(
    "",
    response_model=TemplateListResponse,
    responses={400: {"model": ErrorResponse}}
)
async def list_templates(
    intent: Optional[str] = Query(None, description="Only templates for this intent")
) -> TemplateListResponse:
    """List prompt templates, optionally filtered by intent."""
    if intent is None:
        templates = PROMPT_TEMPLATES
    else:
        try:
            templates = get_templates_by_intent(Intent(intent))
        except ValueError:
            raise HTTPException(status_code=400, detail=f"Invalid intent: {intent}")

    return TemplateListResponse(
        templates=[_to_response(t) for t in templates],
        total=len(templates)
    )


@router.get(
    "/{template_id}",
    response_model=TemplateResponse,
    responses={404: {"model": ErrorResponse}}
)
async def get_template(template_id: str) -> TemplateResponse:
    """Get a single template by id."""
    template = get_template_by_id(template_id)
    if template is None:
        raise HTTPException(status_code=404, detail=f"Template not found: {template_id}")
    return _to_response(template)
