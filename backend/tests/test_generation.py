"""
Tests for the Gemini generation tool

The genai client is always a mock; no network calls.
Run with: pytest backend/tests/test_generation.py -v
"""

import asyncio
import base64
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from dreamroom.config import Settings
from dreamroom.core.prompts import CONSULTANT_PERSONA
from dreamroom.models.room import AspectRatio
from dreamroom.tools.generation import (
    CHAT_FALLBACK_REPLY,
    GenerationTool,
    parse_generation_response,
)


ROOM = "data:image/png;base64," + base64.b64encode(b"room").decode()
WALLPAPER = "data:image/jpeg;base64," + base64.b64encode(b"wallpaper").decode()


def image_part(data: bytes, mime_type: str = "image/png"):
    return SimpleNamespace(inline_data=SimpleNamespace(data=data, mime_type=mime_type), text=None)


def text_part(text: str):
    return SimpleNamespace(inline_data=None, text=text)


def response_with(*parts):
    return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=list(parts)))])


# ============ Response Parsing Tests ============

def test_parse_returns_first_inline_image():
    response = response_with(
        text_part("Here is your room"),
        image_part(b"first", "image/webp"),
        image_part(b"second"),
    )

    image, text = parse_generation_response(response)

    assert image == "data:image/webp;base64," + base64.b64encode(b"first").decode()
    assert text == "Here is your room"


def test_parse_text_only_response():
    image, text = parse_generation_response(response_with(text_part("I can't edit that.")))
    assert image is None
    assert text == "I can't edit that."


def test_parse_empty_response():
    assert parse_generation_response(SimpleNamespace(candidates=[])) == (None, None)


# ============ Image Generation Tests ============

def test_generate_image_sends_parts_in_order():
    client = MagicMock()
    client.models.generate_content.return_value = response_with(image_part(b"redesigned"))
    tool = GenerationTool(client=client)

    result = asyncio.run(tool.generate_image([ROOM, WALLPAPER], "Redesign it", AspectRatio.LANDSCAPE))

    assert result == "data:image/png;base64," + base64.b64encode(b"redesigned").decode()

    kwargs = client.models.generate_content.call_args.kwargs
    contents = kwargs["contents"]
    assert len(contents) == 3
    assert contents[0].inline_data.mime_type == "image/png"
    assert contents[0].inline_data.data == b"room"
    assert contents[1].inline_data.mime_type == "image/jpeg"
    assert contents[2] == "Redesign it"
    assert kwargs["config"].image_config.aspect_ratio == "4:3"


def test_generate_image_returns_none_without_image_part():
    client = MagicMock()
    client.models.generate_content.return_value = response_with(text_part("No can do"))
    tool = GenerationTool(client=client)

    assert asyncio.run(tool.generate_image([ROOM], "Edit", "1:1")) is None


def test_generate_image_propagates_api_errors():
    """No retries and no wrapping: the original exception reaches the caller."""
    client = MagicMock()
    client.models.generate_content.side_effect = ConnectionError("network down")
    tool = GenerationTool(client=client)

    with pytest.raises(ConnectionError, match="network down"):
        asyncio.run(tool.generate_image([ROOM], "Edit", AspectRatio.SQUARE))
    assert client.models.generate_content.call_count == 1


def test_missing_api_key_raises(monkeypatch):
    monkeypatch.setattr(
        "dreamroom.tools.generation.get_settings",
        lambda: Settings(google_api_key=""),
    )
    with pytest.raises(ValueError, match="GOOGLE_API_KEY"):
        GenerationTool()


# ============ Chat Tests ============

def test_chat_reply_uses_persona_and_history():
    client = MagicMock()
    chat = client.chats.create.return_value
    chat.send_message.return_value = SimpleNamespace(text="Try warm neutrals.")
    tool = GenerationTool(client=client)

    history = [
        {"role": "model", "text": "Image analyzed!"},
        {"role": "user", "text": "Hi"},
    ]
    reply = asyncio.run(tool.chat_reply("What goes with oak?", history))

    assert reply == "Try warm neutrals."
    chat.send_message.assert_called_once_with("What goes with oak?")

    kwargs = client.chats.create.call_args.kwargs
    assert kwargs["config"].system_instruction == CONSULTANT_PERSONA
    assert [c.role for c in kwargs["history"]] == ["model", "user"]
    assert kwargs["history"][0].parts[0].text == "Image analyzed!"


def test_chat_reply_falls_back_on_empty_text():
    client = MagicMock()
    client.chats.create.return_value.send_message.return_value = SimpleNamespace(text="")
    tool = GenerationTool(client=client)

    assert asyncio.run(tool.chat_reply("Hello?", [])) == CHAT_FALLBACK_REPLY
