"""
Prompt Builder

Instruction text for the image model and the consultant chat.
Everything here is a pure function of its arguments.
"""

from enum import Enum
from typing import Dict, Iterable, List, Union

from dreamroom.models.room import ChatRole, ChatTurn, DesignStyle


class RequestKind(str, Enum):
    REDESIGN = "redesign"
    EDIT = "edit"


CONSULTANT_PERSONA = (
    "You are a professional interior design consultant. "
    "Help the user with advice. Be concise."
)

FINAL_OUTPUT_CLAUSE = (
    "FINAL OUTPUT: A photorealistic result that matches the exact dimensions "
    "and aspect ratio of the input."
)


def _style_name(style: Union[DesignStyle, str]) -> str:
    return style.value if isinstance(style, DesignStyle) else str(style)


def build_redesign_prompt(
    style: Union[DesignStyle, str],
    has_wallpaper: bool = False,
    has_floor: bool = False,
) -> str:
    """
    Build the full-room redesign prompt.

    The room photo is always the first image. A wallpaper swatch, when present,
    is the second image, and the floor swatch comes after it.
    """
    prompt = f"""ACT AS A PRECISION ARCHITECTURAL RENDERER.
TASK: Redesign the provided room in "{_style_name(style)}" style.

STRICT GEOMETRY PRESERVATION (MANDATORY):
1. DO NOT CHANGE THE CAMERA ANGLE: The perspective, horizon line, and lens focal length must be identical to the original image.
2. PRESERVE WALLS: The boundaries where walls meet the floor and ceiling must remain in exactly the same pixel coordinates.
3. ARCHITECTURAL SKELETON: Treat the original image as a rigid fixed frame. Only update materials, furniture, and lighting.
4. ALIGNMENT: The edges of windows and doors must not move."""

    if has_wallpaper:
        prompt += (
            "\n\nMATERIAL OVERLAY (WALLS): Apply the pattern from the second image "
            "to the walls while maintaining wall position."
        )

    if has_floor:
        ordinal = "third" if has_wallpaper else "second"
        prompt += (
            f"\n\nMATERIAL OVERLAY (FLOOR): Apply the material from the {ordinal} image "
            "to the floor."
        )

    return f"{prompt}\n\n{FINAL_OUTPUT_CLAUSE}"


def build_edit_prompt(instruction: str) -> str:
    """Build the single-change edit prompt around the user's instruction."""
    return f"""STRICT ARCHITECTURAL EDIT: "{instruction.strip()}".

RULES:
- KEEP THE LAYOUT: Do not shift walls, windows, or floor lines.
- PERSPECTIVE: Maintain the original camera view exactly.
- MODIFICATION: Only change the items requested. Do not change anything beyond the requested edit.

{FINAL_OUTPUT_CLAUSE}"""


def build_prompt(
    kind: RequestKind,
    subject: Union[DesignStyle, str],
    has_wallpaper: bool = False,
    has_floor: bool = False,
) -> str:
    """Build the prompt for a redesign (subject is a style) or an edit (subject is the instruction)."""
    if kind == RequestKind.REDESIGN:
        return build_redesign_prompt(subject, has_wallpaper, has_floor)
    return build_edit_prompt(str(subject))


def build_chat_history(transcript: Iterable[ChatTurn]) -> List[Dict[str, str]]:
    """Re-express transcript turns in the chat API's role vocabulary."""
    return [
        {
            "role": "model" if turn.role == ChatRole.ASSISTANT else "user",
            "text": turn.content,
        }
        for turn in transcript
    ]
