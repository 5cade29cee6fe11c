"""
Room Design Models

Core value types shared by ingestion, prompt building and the chat loop:
design styles, aspect-ratio buckets, material slots and chat turns.
"""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class DesignStyle(str, Enum):
    """The closed set of styles a room can be redesigned into."""
    MINIMAL = "Minimal"
    MODERN = "Modern"
    CLASSIC = "Classic"
    SCANDINAVIAN = "Scandinavian"
    INDUSTRIAL = "Industrial"
    BOHEMIAN = "Bohemian"
    MID_CENTURY = "Mid-Century Modern"
    JAPANDI = "Japandi"


# Short names shown in the style picker, in display order
STYLE_LABELS: Dict[DesignStyle, str] = {
    DesignStyle.MINIMAL: "Minimalist",
    DesignStyle.MODERN: "Modern",
    DesignStyle.SCANDINAVIAN: "Scandinavian",
    DesignStyle.INDUSTRIAL: "Industrial",
    DesignStyle.CLASSIC: "Classic",
    DesignStyle.BOHEMIAN: "Bohemian",
    DesignStyle.MID_CENTURY: "Mid-Century",
    DesignStyle.JAPANDI: "Japandi",
}


class AspectRatio(str, Enum):
    """Canonical width:height buckets used as the output-size hint."""
    SQUARE = "1:1"
    PORTRAIT = "3:4"
    LANDSCAPE = "4:3"
    TALL = "9:16"
    WIDE = "16:9"


class MaterialSlot(str, Enum):
    """Reference swatch slots."""
    WALLPAPER = "wallpaper"
    FLOOR = "floor"


class ChatRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class ChatTurn(BaseModel):
    """One message in the session transcript. Never mutated after creation."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    role: ChatRole
    content: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
