"""API schemas."""

from .requests import (
    ContextModel,
    IncludeModel,
    EnhanceRequest,
    ClassifyRequest,
)
from .responses import (
    EnhanceResponse,
    ClassifyResponse,
    TemplateResponse,
    TemplateListResponse,
    StatusResponse,
    HealthResponse,
    ErrorResponse,
)

__all__ = [
    # Requests
    "ContextModel",
    "IncludeModel",
    "EnhanceRequest",
    "ClassifyRequest",
    # Responses
    "EnhanceResponse",
    "ClassifyResponse",
    "TemplateResponse",
    "TemplateListResponse",
    "StatusResponse",
    "HealthResponse",
    "ErrorResponse",
]
