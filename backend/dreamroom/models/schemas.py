"""
DreamRoom - Pydantic Schemas

Request and response bodies for the HTTP API.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from dreamroom.models.room import AspectRatio, ChatTurn, DesignStyle
from dreamroom.models.state import DesignSession


class HealthResponse(BaseModel):
    status: str
    version: str
    message: Optional[str] = None


class StyleOption(BaseModel):
    """One entry of the style picker."""
    style: DesignStyle
    label: str


class StyleRequest(BaseModel):
    """Request body for the style selection endpoint."""
    style: DesignStyle = Field(..., description="Design style to redesign the room into")


class ComparisonRequest(BaseModel):
    show: bool = Field(..., description="Whether the before/after comparison is shown")


class ChatRequest(BaseModel):
    """Request body for the chat endpoint."""
    message: str = Field(..., min_length=1, description="Edit instruction or design question")

    @field_validator("message")
    @classmethod
    def strip_message(cls, v: str) -> str:
        """Trim surrounding whitespace; a blank message is rejected."""
        v = v.strip()
        if not v:
            raise ValueError("message must not be blank")
        return v


class SessionResponse(BaseModel):
    """Snapshot of a design session."""
    session_id: str
    original_image: Optional[str] = None
    current_image: Optional[str] = None
    wallpaper_image: Optional[str] = None
    floor_image: Optional[str] = None
    selected_style: Optional[DesignStyle] = None
    aspect_ratio: AspectRatio
    show_comparison: bool
    is_processing: bool
    transcript: List[ChatTurn] = Field(default_factory=list)

    @classmethod
    def from_session(cls, session: DesignSession) -> "SessionResponse":
        return cls(**session.model_dump())


class ChatResponse(BaseModel):
    """Response from the chat endpoint: the session plus the turns this request added."""
    session: SessionResponse
    new_turns: List[ChatTurn]
