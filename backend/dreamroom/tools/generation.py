"""
Generation Tool

Gemini calls used by the redesign, edit and consultant chat paths.
The tool sends images and text and unwraps the response. It does not
retry, and it does not catch errors: API failures reach the caller as raised.

FULLY TRACED with LangSmith - every Gemini call is tracked.
"""

import base64
import asyncio
import logging
from typing import Optional, List, Dict, Tuple, Union

from google import genai
from google.genai import types
from langsmith import traceable

from dreamroom.config import get_settings
from dreamroom.core.image_ingestion import encode_data_uri, split_data_uri
from dreamroom.core.prompts import CONSULTANT_PERSONA
from dreamroom.models.room import AspectRatio


logger = logging.getLogger(__name__)

CHAT_FALLBACK_REPLY = "I'm sorry, I couldn't process that."


def parse_generation_response(response) -> Tuple[Optional[str], Optional[str]]:
    """
    Scan the first candidate's parts.

    Returns:
        (data URI of the first inline image or None, concatenated text or None)
    """
    image = None
    texts = []

    candidates = getattr(response, "candidates", None) or []
    if candidates and candidates[0].content and candidates[0].content.parts:
        for part in candidates[0].content.parts:
            inline = getattr(part, "inline_data", None)
            if inline is not None and inline.data:
                if image is None:
                    data = inline.data
                    if isinstance(data, str):
                        data = base64.b64decode(data)
                    image = encode_data_uri(data, inline.mime_type or "image/png")
            elif getattr(part, "text", None):
                texts.append(part.text)

    return image, ("\n".join(texts) if texts else None)


class GenerationTool:
    """
    Gemini image generation and consultant chat.
    All methods are traced with LangSmith for full observability.
    """

    def __init__(self, client: Optional[genai.Client] = None):
        settings = get_settings()
        if client is None:
            if not settings.google_api_key:
                raise ValueError("GOOGLE_API_KEY environment variable is not set")
            client = genai.Client(api_key=settings.google_api_key)
        self.client = client
        self.image_model = settings.render_image_model_name
        self.chat_model = settings.chat_model_name

    @traceable(
        name="gemini_generate_image_call",
        run_type="llm",
        tags=["gemini", "image", "generate", "api-call"],
        metadata={"model_type": "gemini-image"}
    )
    async def generate_image(
        self,
        images: List[str],
        prompt: str,
        aspect_ratio: Union[AspectRatio, str],
    ) -> Optional[str]:
        """
        Send images plus instructions and return the generated image.

        Args:
            images: Data URIs in the order the prompt refers to them
            prompt: Instruction text, sent after the images
            aspect_ratio: Output size hint

        Returns:
            Data URI of the generated image, or None if the model returned no image
        """
        contents = []
        for image in images:
            mime_type, data = split_data_uri(image)
            contents.append(types.Part.from_bytes(data=data, mime_type=mime_type))
        contents.append(prompt)

        ratio = aspect_ratio.value if isinstance(aspect_ratio, AspectRatio) else aspect_ratio

        response = await asyncio.to_thread(
            self.client.models.generate_content,
            model=self.image_model,
            contents=contents,
            config=types.GenerateContentConfig(
                response_modalities=["IMAGE", "TEXT"],
                image_config=types.ImageConfig(aspect_ratio=ratio),
            )
        )

        image, text = parse_generation_response(response)
        if image is None:
            logger.warning("Image model returned no image. Text reply: %s", text)
        return image

    @traceable(
        name="gemini_chat_call",
        run_type="llm",
        tags=["gemini", "chat", "consultant", "api-call"],
        metadata={"model_type": "gemini-text"}
    )
    async def chat_reply(self, message: str, history: List[Dict[str, str]]) -> str:
        """
        Ask the consultant persona a question.

        Args:
            message: The new user message
            history: Prior turns as {"role": "user"|"model", "text": ...}

        Returns:
            Reply text, or a fixed fallback when the model returns nothing
        """
        chat = self.client.chats.create(
            model=self.chat_model,
            history=[
                types.Content(role=turn["role"], parts=[types.Part(text=turn["text"])])
                for turn in history
            ],
            config=types.GenerateContentConfig(system_instruction=CONSULTANT_PERSONA),
        )

        response = await asyncio.to_thread(chat.send_message, message)
        return response.text or CHAT_FALLBACK_REPLY
