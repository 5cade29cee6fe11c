"""
Design Studio

Per-session controller. Owns the DesignSession, the single-flight guard and
the collaborators, and turns each user action into a session transition:

- upload_room: new room photo, fresh transcript
- select_style: remember the style and redesign the original photo
- update_material / clear_material: change a swatch, redesign if a style is set
- send_message: chat turn, routed to an image edit or the consultant
- set_comparison: toggle the before/after view

Remote failures never escape: they become an apology turn and the session
returns to idle with its images untouched.
"""

import logging
from typing import Callable, List, Optional

from dreamroom.agents.graph import run_request
from dreamroom.core import session as transitions
from dreamroom.core.image_ingestion import ingest_image
from dreamroom.core.inflight import SingleFlightGuard
from dreamroom.core.intent import IntentClassifier, RegexIntentClassifier
from dreamroom.core.prompts import build_chat_history
from dreamroom.models.room import ChatRole, ChatTurn, DesignStyle, MaterialSlot
from dreamroom.models.state import DesignSession, create_request_state
from dreamroom.tools.generation import GenerationTool


logger = logging.getLogger(__name__)


class DesignStudio:
    """Controller for one design session."""

    def __init__(
        self,
        session: Optional[DesignSession] = None,
        tool_factory: Callable[[], GenerationTool] = GenerationTool,
        intent_classifier: Optional[IntentClassifier] = None,
    ):
        self.session = session or transitions.create_session()
        self.guard = SingleFlightGuard(self.session)
        self.intent_classifier = intent_classifier or RegexIntentClassifier()
        self._tool_factory = tool_factory
        self._tool: Optional[GenerationTool] = None

    @property
    def session_id(self) -> str:
        return self.session.session_id

    def _generation_tool(self) -> GenerationTool:
        if self._tool is None:
            self._tool = self._tool_factory()
        return self._tool

    # ========================================================================
    # Synchronous actions
    # ========================================================================

    def upload_room(self, data: bytes, content_type: Optional[str] = None) -> ChatTurn:
        """
        Replace the room photo.

        Raises InvalidImageError (session untouched) for undecodable files and
        SessionBusyError while a request is in flight.
        """
        self.guard.ensure_idle()
        image = ingest_image(data, content_type)
        turn = transitions.load_room_image(self.session, image)
        logger.info(
            "Session %s: room photo %dx%d (%s)",
            self.session_id, image.width, image.height, image.aspect_ratio.value,
        )
        return turn

    def set_comparison(self, show: bool) -> None:
        transitions.set_comparison(self.session, show)

    # ========================================================================
    # Requests that call Gemini
    # ========================================================================

    async def select_style(self, style: DesignStyle) -> List[ChatTurn]:
        """Remember the style and, if there is a room photo, redesign it."""
        async with self.guard.claim():
            transitions.select_style(self.session, style)
            if self.session.original_image is None:
                logger.info("Session %s: style %s selected before any upload", self.session_id, style.value)
                return []
            return [await self._redesign()]

    async def update_material(
        self, slot: MaterialSlot, data: bytes, content_type: Optional[str] = None
    ) -> List[ChatTurn]:
        """Install a swatch; rerun the redesign when a style is already chosen."""
        self.guard.ensure_idle()
        image = ingest_image(data, content_type)
        return await self._change_material(slot, image.data_uri)

    async def clear_material(self, slot: MaterialSlot) -> List[ChatTurn]:
        return await self._change_material(slot, None)

    async def _change_material(self, slot: MaterialSlot, data_uri: Optional[str]) -> List[ChatTurn]:
        async with self.guard.claim():
            transitions.set_material(self.session, slot, data_uri)
            if not transitions.can_redesign(self.session):
                return []
            return [await self._redesign()]

    async def send_message(self, content: str) -> List[ChatTurn]:
        """
        Handle one chat message.

        Returns the turns this call appended: the user turn and exactly one
        assistant turn. The message is trimmed; a blank one is dropped and
        nothing is appended.
        """
        content = content.strip()
        if not content:
            return []

        async with self.guard.claim():
            history = build_chat_history(self.session.transcript)
            user_turn = transitions.append_turn(self.session, ChatRole.USER, content)

            state = create_request_state(
                "message",
                self.session,
                message=content,
                base_image=self.session.current_image or self.session.original_image,
                history=history,
            )

            try:
                result = await run_request(state, self._generation_tool(), self.intent_classifier)
            except Exception as e:
                logger.error(
                    "Session %s: chat request failed (%s): %s",
                    self.session_id, type(e).__name__, e,
                )
                return [user_turn, transitions.record_failure(self.session, transitions.CHAT_FAILURE_MESSAGE)]

            if result["route"] == "edit":
                image = result.get("generated_image")
                if image is None:
                    logger.error("Session %s: edit returned no image", self.session_id)
                    reply = transitions.record_failure(self.session, transitions.CHAT_FAILURE_MESSAGE)
                else:
                    reply = transitions.apply_generated_image(
                        self.session, image, transitions.EDIT_SUCCESS_MESSAGE
                    )
            else:
                reply = transitions.append_turn(self.session, ChatRole.ASSISTANT, result["reply"])

            return [user_turn, reply]

    async def _redesign(self) -> ChatTurn:
        """Run a full redesign of the original photo. Caller holds the guard."""
        state = create_request_state(
            "redesign",
            self.session,
            style=self.session.selected_style,
            base_image=self.session.original_image,
        )

        try:
            result = await run_request(state, self._generation_tool(), self.intent_classifier)
        except Exception as e:
            logger.error(
                "Session %s: redesign failed (%s): %s",
                self.session_id, type(e).__name__, e,
            )
            return transitions.record_failure(self.session, transitions.REDESIGN_FAILURE_MESSAGE)

        image = result.get("generated_image")
        if image is None:
            logger.error("Session %s: redesign returned no image", self.session_id)
            return transitions.record_failure(self.session, transitions.REDESIGN_FAILURE_MESSAGE)

        return transitions.apply_generated_image(
            self.session, image, transitions.REDESIGN_SUCCESS_MESSAGE
        )
