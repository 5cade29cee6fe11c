"""
Session Transitions

The only functions allowed to mutate a DesignSession. One per user action
or request outcome; collaborators read the session but never write to it.
"""

from typing import Optional

from dreamroom.core.image_ingestion import IngestedImage
from dreamroom.models.room import ChatRole, ChatTurn, DesignStyle, MaterialSlot
from dreamroom.models.state import DesignSession


# Assistant messages
UPLOAD_MESSAGE = (
    "Image analyzed! Detected {ratio} proportions. "
    "Choose a style to begin your architectural redesign."
)
REDESIGN_SUCCESS_MESSAGE = "Design generated. I've preserved your room's layout and perspective."
EDIT_SUCCESS_MESSAGE = "Updates applied while maintaining the original perspective."
REDESIGN_FAILURE_MESSAGE = "Sorry, I encountered an error. Please try again."
CHAT_FAILURE_MESSAGE = "I'm having trouble processing that request right now."


def create_session() -> DesignSession:
    """Fresh session: no images, no style, empty transcript."""
    return DesignSession()


def append_turn(session: DesignSession, role: ChatRole, content: str) -> ChatTurn:
    turn = ChatTurn(role=role, content=content)
    session.transcript.append(turn)
    return turn


def load_room_image(session: DesignSession, image: IngestedImage) -> ChatTurn:
    """
    Install a new room photo.

    Drops any previous redesign and starts a new transcript with the detected
    proportions. Swatches and the selected style carry over.
    """
    session.original_image = image.data_uri
    session.aspect_ratio = image.aspect_ratio
    session.current_image = None
    session.show_comparison = False
    turn = ChatTurn(
        role=ChatRole.ASSISTANT,
        content=UPLOAD_MESSAGE.format(ratio=image.aspect_ratio.value),
    )
    session.transcript = [turn]
    return turn


def select_style(session: DesignSession, style: DesignStyle) -> None:
    session.selected_style = style


def set_material(session: DesignSession, slot: MaterialSlot, data_uri: Optional[str]) -> None:
    """Set or clear (data_uri=None) a reference swatch."""
    if slot == MaterialSlot.WALLPAPER:
        session.wallpaper_image = data_uri
    else:
        session.floor_image = data_uri


def set_comparison(session: DesignSession, show: bool) -> None:
    session.show_comparison = show


def start_processing(session: DesignSession) -> None:
    session.is_processing = True


def finish_processing(session: DesignSession) -> None:
    session.is_processing = False


def apply_generated_image(session: DesignSession, image: str, message: str) -> ChatTurn:
    """Record a successful redesign or edit."""
    session.current_image = image
    session.show_comparison = True
    return append_turn(session, ChatRole.ASSISTANT, message)


def record_failure(session: DesignSession, message: str) -> ChatTurn:
    """Record a failed request. Images are left exactly as they were."""
    return append_turn(session, ChatRole.ASSISTANT, message)


def can_redesign(session: DesignSession) -> bool:
    return session.original_image is not None and session.selected_style is not None
