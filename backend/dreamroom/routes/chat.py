"""
Chat Route

POST /sessions/{id}/chat - Send a chat message.

Messages that read like instructions ("make the walls beige") edit the
latest image; anything else is answered by the design consultant.

FULLY TRACED with LangSmith.
"""

import logging

from fastapi import APIRouter, Depends
from langsmith import traceable

from dreamroom.agents.session_store import SessionStore, get_session_store
from dreamroom.models.schemas import ChatRequest, ChatResponse, SessionResponse


logger = logging.getLogger(__name__)
router = APIRouter(prefix="/sessions/{session_id}/chat", tags=["Chat"])


@router.post("", response_model=ChatResponse)
@traceable(name="chat_endpoint", run_type="chain", tags=["api", "chat"])
async def send_message(
    session_id: str,
    request: ChatRequest,
    store: SessionStore = Depends(get_session_store),
) -> ChatResponse:
    """
    Send a chat message.

    Returns the updated session and the turns this message added: the user
    turn followed by one assistant turn.
    """
    studio = store.get(session_id)
    new_turns = await studio.send_message(request.message)
    logger.debug("Session %s: chat added %d turn(s)", session_id, len(new_turns))
    return ChatResponse(
        session=SessionResponse.from_session(studio.session),
        new_turns=new_turns,
    )
