"""
Session and Request State

DesignSession is the per-session state container mutated only by the
transition functions in dreamroom.core.session. DesignRequestState is the state passed
between LangGraph nodes while one redesign or chat request is in flight.
"""

import uuid
from typing import TypedDict, List, Optional, Dict

from pydantic import BaseModel, Field

from dreamroom.models.room import AspectRatio, ChatTurn, DesignStyle


class DesignSession(BaseModel):
    """Everything one user's design session knows about."""

    session_id: str = Field(default_factory=lambda: uuid.uuid4().hex)

    # === Images (data URIs) ===
    original_image: Optional[str] = None
    current_image: Optional[str] = None
    wallpaper_image: Optional[str] = None
    floor_image: Optional[str] = None

    # === Design choices ===
    selected_style: Optional[DesignStyle] = None
    aspect_ratio: AspectRatio = AspectRatio.SQUARE
    show_comparison: bool = True

    # === Chat ===
    transcript: List[ChatTurn] = Field(default_factory=list)

    # === Control ===
    is_processing: bool = False


class DesignRequestState(TypedDict):
    """
    Shared state for the request workflow.

    Built once per request and consumed by the classify/redesign/edit/converse nodes.
    """

    # === Input ===
    request_kind: str                      # "redesign" or "message"
    message: str                           # Chat text (message requests)
    style: Optional[DesignStyle]           # Target style (redesign requests)
    base_image: Optional[str]              # Image being redesigned or edited
    wallpaper_image: Optional[str]
    floor_image: Optional[str]
    aspect_ratio: AspectRatio
    history: List[Dict[str, str]]          # Prior turns as {"role", "text"}

    # === Routing ===
    intent: Optional[str]                  # "edit" or "conversation"
    route: Optional[str]                   # "redesign", "edit" or "converse"

    # === Output ===
    generated_image: Optional[str]
    reply: Optional[str]


def create_request_state(
    request_kind: str,
    session: DesignSession,
    message: str = "",
    style: Optional[DesignStyle] = None,
    base_image: Optional[str] = None,
    history: Optional[List[Dict[str, str]]] = None,
) -> DesignRequestState:
    """
    Create initial request state from the session snapshot.

    Args:
        request_kind: "redesign" for style runs, "message" for chat
        session: Session the request belongs to
        message: User chat text
        style: Style to redesign into
        base_image: Image to send first (original for redesigns, latest for edits)
        history: Prior transcript as role/text pairs

    Returns:
        DesignRequestState ready for the workflow
    """
    return DesignRequestState(
        request_kind=request_kind,
        message=message,
        style=style,
        base_image=base_image,
        wallpaper_image=session.wallpaper_image,
        floor_image=session.floor_image,
        aspect_ratio=session.aspect_ratio,
        history=history or [],
        intent=None,
        route=None,
        generated_image=None,
        reply=None,
    )
