"""
Session Routes

POST /sessions - Start a design session
GET  /sessions/{id} - Current session snapshot
POST /sessions/{id}/room - Upload the room photo
POST /sessions/{id}/comparison - Toggle the before/after view
GET  /styles - Available design styles
"""

from typing import List

from fastapi import APIRouter, Depends, File, UploadFile

from dreamroom.agents.session_store import SessionStore, get_session_store
from dreamroom.models.room import STYLE_LABELS
from dreamroom.models.schemas import ComparisonRequest, SessionResponse, StyleOption


router = APIRouter(tags=["Sessions"])


@router.get("/styles", response_model=List[StyleOption])
async def list_styles() -> List[StyleOption]:
    """Design styles in picker order."""
    return [StyleOption(style=style, label=label) for style, label in STYLE_LABELS.items()]


@router.post("/sessions", response_model=SessionResponse, status_code=201)
async def create_session(store: SessionStore = Depends(get_session_store)) -> SessionResponse:
    """Start an empty design session."""
    studio = store.create()
    return SessionResponse.from_session(studio.session)


@router.get("/sessions/{session_id}", response_model=SessionResponse)
async def get_session(
    session_id: str,
    store: SessionStore = Depends(get_session_store),
) -> SessionResponse:
    return SessionResponse.from_session(store.get(session_id).session)


@router.post("/sessions/{session_id}/room", response_model=SessionResponse)
async def upload_room(
    session_id: str,
    file: UploadFile = File(...),
    store: SessionStore = Depends(get_session_store),
) -> SessionResponse:
    """
    Upload the room photo.

    Any image format Pillow can decode is accepted. The detected aspect ratio
    is announced in a fresh transcript and any previous redesign is dropped.
    """
    studio = store.get(session_id)
    contents = await file.read()
    studio.upload_room(contents, file.content_type)
    return SessionResponse.from_session(studio.session)


@router.post("/sessions/{session_id}/comparison", response_model=SessionResponse)
async def set_comparison(
    session_id: str,
    request: ComparisonRequest,
    store: SessionStore = Depends(get_session_store),
) -> SessionResponse:
    studio = store.get(session_id)
    studio.set_comparison(request.show)
    return SessionResponse.from_session(studio.session)
