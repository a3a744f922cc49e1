"""API request schemas."""

from typing import Optional, List
from pydantic import BaseModel, Field


class ContextModel(BaseModel):
    """Source context supplied with a request."""
    file_name: Optional[str] = Field(None, description="Current file name")
    file_path: Optional[str] = Field(None, description="Current file path")
    language: Optional[str] = Field(None, description="Language id, used for code fences")
    selected_code: Optional[str] = Field(None, description="Selected code")
    project_structure: Optional[str] = Field(None, description="Project tree")
    git_status: Optional[str] = Field(None, description="Output of git status --short")
    related_files: Optional[List[str]] = Field(None, description="Files related to the current file")


class IncludeModel(BaseModel):
    """Which context sections to render."""
    file: bool = False
    selection: bool = False
    project: bool = False
    git: bool = False
    related: bool = False


class EnhanceRequest(BaseModel):
    """Request for prompt enhancement."""
    prompt: str = Field(..., min_length=1, description="The rough request to enhance")
    intent: Optional[str] = Field(
        None,
        description="Intent: fix, add, change, explain, test, review, improve, document (detected when omitted)"
    )
    mode: Optional[str] = Field(
        None,
        description="Enhancement mode: auto, ruleOnly, manual (default from settings)"
    )
    context: Optional[ContextModel] = Field(None, description="Source context")
    include: Optional[IncludeModel] = Field(None, description="Context sections to render")
    template_id: Optional[str] = Field(
        None,
        description="Template id to use instead of the first template for the intent"
    )


class ClassifyRequest(BaseModel):
    """Request for intent classification."""
    prompt: str = Field(..., min_length=1, description="The request to classify")
