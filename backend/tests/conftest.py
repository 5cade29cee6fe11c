"""Shared fixtures: generated room photos and a fake Gemini tool."""

import io
from unittest.mock import AsyncMock, MagicMock

import pytest
from PIL import Image

from dreamroom.agents.studio import DesignStudio


GENERATED_IMAGE = "data:image/png;base64,R0VORVJBVEVE"
CONSULTANT_REPLY = "Sage green and warm whites pair well with oak."


def make_image_bytes(width: int = 1200, height: int = 800, fmt: str = "PNG", color=(196, 180, 160)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (width, height), color).save(buffer, format=fmt)
    return buffer.getvalue()


def make_tool(image=GENERATED_IMAGE, reply=CONSULTANT_REPLY) -> MagicMock:
    """A stand-in for GenerationTool with awaitable methods."""
    tool = MagicMock()
    tool.generate_image = AsyncMock(return_value=image)
    tool.chat_reply = AsyncMock(return_value=reply)
    return tool


@pytest.fixture
def room_photo() -> bytes:
    return make_image_bytes(1200, 800)


@pytest.fixture
def swatch() -> bytes:
    return make_image_bytes(64, 64, fmt="JPEG", color=(120, 90, 60))


@pytest.fixture
def tool() -> MagicMock:
    return make_tool()


@pytest.fixture
def studio(tool) -> DesignStudio:
    return DesignStudio(tool_factory=lambda: tool)
