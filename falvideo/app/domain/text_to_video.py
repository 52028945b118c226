from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Content(BaseModel):
    model_config = ConfigDict(extra="allow")

    text: Optional[str] = None
    source: Optional[str] = None
    actions: Optional[List[str]] = None


class Memory(BaseModel):
    """Inbound message as delivered by the host runtime."""

    model_config = ConfigDict(extra="allow")

    content: Content = Field(default_factory=Content)
    entity_id: Optional[str] = None
    room_id: Optional[str] = None


class ActionExample(BaseModel):
    name: str
    content: Content


class ActionResult(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    success: bool
    text: Optional[str] = None
    error: Optional[Exception] = None
    data: Dict[str, Any] = Field(default_factory=dict)


class ProviderResult(BaseModel):
    text: str = ""
    values: Dict[str, Any] = Field(default_factory=dict)
    data: Dict[str, Any] = Field(default_factory=dict)


class FailureReason(str, Enum):
    MISSING_TEXT = "missing_text"
    EMPTY_PROMPT = "empty_prompt"
    PROVIDER_ERROR = "provider_error"


class GenerationRequest(BaseModel):
    raw_text: str
    cleaned_prompt: str = Field(min_length=1)


class GenerationSuccess(BaseModel):
    video_url: str
    prompt: str


class GenerationFailure(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    reason: FailureReason
    detail: Optional[Exception] = None


GenerationOutcome = Union[GenerationSuccess, GenerationFailure]
