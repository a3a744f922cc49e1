"""API response schemas."""

from typing import Optional, List, Dict
from pydantic import BaseModel, Field


class EnhanceResponse(BaseModel):
    """Response for prompt enhancement."""
    success: bool
    prompt: str
    preview: str
    was_ai_enhanced: bool = False
    detected_intent: str
    intent_detected: bool = False
    processing_time_ms: float = 0.0


class ClassifyResponse(BaseModel):
    """Response for intent classification."""
    success: bool
    intent: str
    label: str
    is_default: bool = False
    scores: Dict[str, int] = Field(default_factory=dict)
    matched_keywords: Dict[str, List[str]] = Field(default_factory=dict)


class TemplateResponse(BaseModel):
    """A single prompt template."""
    id: str
    name: str
    intent: str
    description: str
    template: str
    placeholders: List[str] = Field(default_factory=list)


class TemplateListResponse(BaseModel):
    """A list of prompt templates."""
    templates: List[TemplateResponse] = Field(default_factory=list)
    total: int = 0


class StatusResponse(BaseModel):
    """Current AI enhancement setup."""
    mode: str
    provider: str
    available: bool
    models: List[str] = Field(default_factory=list)
    providers: List[str] = Field(default_factory=list)
    credentialed_providers: List[str] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    components: Dict[str, str] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    """Error response."""
    success: bool = False
    error: str
    detail: Optional[str] = None
