"""
Tests for the Prompt Builder

Run with: pytest backend/tests/test_prompts.py -v
"""

from dreamroom.core.prompts import (
    CONSULTANT_PERSONA,
    FINAL_OUTPUT_CLAUSE,
    RequestKind,
    build_chat_history,
    build_edit_prompt,
    build_prompt,
    build_redesign_prompt,
)
from dreamroom.models.room import ChatRole, ChatTurn, DesignStyle


# ============ Redesign Prompt Tests ============

def test_redesign_prompt_names_style_without_overlays():
    """Japandi with no swatches: style named, no material clauses."""
    prompt = build_redesign_prompt(DesignStyle.JAPANDI)

    assert '"Japandi" style' in prompt
    assert "MATERIAL OVERLAY" not in prompt
    assert "DO NOT CHANGE THE CAMERA ANGLE" in prompt
    assert "edges of windows and doors must not move" in prompt
    assert prompt.endswith(FINAL_OUTPUT_CLAUSE)


def test_redesign_prompt_is_deterministic():
    first = build_redesign_prompt(DesignStyle.MID_CENTURY, True, True)
    second = build_redesign_prompt(DesignStyle.MID_CENTURY, True, True)
    assert first == second
    assert '"Mid-Century Modern" style' in first


def test_wallpaper_clause_only():
    prompt = build_redesign_prompt(DesignStyle.MODERN, has_wallpaper=True)

    assert "MATERIAL OVERLAY (WALLS)" in prompt
    assert "second image to the walls" in prompt
    assert "MATERIAL OVERLAY (FLOOR)" not in prompt


def test_floor_clause_uses_second_image_without_wallpaper():
    prompt = build_redesign_prompt(DesignStyle.MODERN, has_floor=True)

    assert "MATERIAL OVERLAY (WALLS)" not in prompt
    assert "material from the second image to the floor" in prompt
    assert "third" not in prompt


def test_floor_clause_uses_third_image_after_wallpaper():
    prompt = build_redesign_prompt(DesignStyle.INDUSTRIAL, has_wallpaper=True, has_floor=True)

    assert "material from the third image to the floor" in prompt
    # Walls clause comes before the floor clause, output clause last
    assert prompt.index("(WALLS)") < prompt.index("(FLOOR)") < prompt.index("FINAL OUTPUT")


# ============ Edit Prompt Tests ============

def test_edit_prompt_quotes_instruction():
    prompt = build_edit_prompt("Make the walls beige")

    assert 'STRICT ARCHITECTURAL EDIT: "Make the walls beige"' in prompt
    assert "Do not shift walls, windows, or floor lines" in prompt
    assert "Maintain the original camera view exactly" in prompt
    assert "Do not change anything beyond the requested edit" in prompt
    assert prompt.endswith(FINAL_OUTPUT_CLAUSE)


def test_build_prompt_dispatches_on_kind():
    assert build_prompt(RequestKind.REDESIGN, DesignStyle.CLASSIC, has_floor=True) == \
        build_redesign_prompt(DesignStyle.CLASSIC, has_floor=True)
    assert build_prompt(RequestKind.EDIT, "Add a rug") == build_edit_prompt("Add a rug")


# ============ Chat History Tests ============

def test_chat_history_maps_assistant_to_model():
    transcript = [
        ChatTurn(role=ChatRole.ASSISTANT, content="Image analyzed!"),
        ChatTurn(role=ChatRole.USER, content="What goes with oak?"),
    ]

    assert build_chat_history(transcript) == [
        {"role": "model", "text": "Image analyzed!"},
        {"role": "user", "text": "What goes with oak?"},
    ]


def test_consultant_persona_is_concise_designer():
    assert "professional interior design consultant" in CONSULTANT_PERSONA
    assert "concise" in CONSULTANT_PERSONA.lower()
