"""
Design Routes

POST   /sessions/{id}/style - Select a style and redesign the room
PUT    /sessions/{id}/materials/{slot} - Upload a wallpaper or floor swatch
DELETE /sessions/{id}/materials/{slot} - Clear a swatch

A failed generation still returns 200: the failure is reported as an
assistant turn in the transcript.

FULLY TRACED with LangSmith.
"""

from fastapi import APIRouter, Depends, File, UploadFile
from langsmith import traceable

from dreamroom.agents.session_store import SessionStore, get_session_store
from dreamroom.models.room import MaterialSlot
from dreamroom.models.schemas import SessionResponse, StyleRequest


router = APIRouter(prefix="/sessions/{session_id}", tags=["Design"])


@router.post("/style", response_model=SessionResponse)
@traceable(name="select_style_endpoint", run_type="chain", tags=["api", "redesign"])
async def select_style(
    session_id: str,
    request: StyleRequest,
    store: SessionStore = Depends(get_session_store),
) -> SessionResponse:
    """
    Select a design style.

    With a room photo uploaded this runs a full redesign of the original photo,
    using any wallpaper/floor swatches. Without one the style is only remembered.
    """
    studio = store.get(session_id)
    await studio.select_style(request.style)
    return SessionResponse.from_session(studio.session)


@router.put("/materials/{slot}", response_model=SessionResponse)
@traceable(name="update_material_endpoint", run_type="chain", tags=["api", "material"])
async def update_material(
    session_id: str,
    slot: MaterialSlot,
    file: UploadFile = File(...),
    store: SessionStore = Depends(get_session_store),
) -> SessionResponse:
    """Set a reference swatch. Reruns the redesign if a style is already selected."""
    studio = store.get(session_id)
    contents = await file.read()
    await studio.update_material(slot, contents, file.content_type)
    return SessionResponse.from_session(studio.session)


@router.delete("/materials/{slot}", response_model=SessionResponse)
async def clear_material(
    session_id: str,
    slot: MaterialSlot,
    store: SessionStore = Depends(get_session_store),
) -> SessionResponse:
    """Clear a reference swatch. Reruns the redesign if a style is already selected."""
    studio = store.get(session_id)
    await studio.clear_material(slot)
    return SessionResponse.from_session(studio.session)
