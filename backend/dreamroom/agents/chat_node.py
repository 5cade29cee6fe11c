"""
Chat Nodes

Classification and consultant-reply nodes for the request workflow.

ROUTES:
- redesign: a style was selected (or a swatch changed under a selected style)
- edit: the message reads like an instruction and there is a room photo to edit
- converse: everything else goes to the consultant chat
"""

from typing import Any, Dict, Literal

from langchain_core.runnables import RunnableConfig
from langsmith import traceable

from dreamroom.core.intent import Intent, RegexIntentClassifier
from dreamroom.models.state import DesignRequestState


def classify_node(state: DesignRequestState, config: RunnableConfig) -> Dict[str, Any]:
    """Pick the route for this request."""
    if state["request_kind"] == "redesign":
        return {"intent": None, "route": "redesign"}

    classifier = config["configurable"].get("intent_classifier") or RegexIntentClassifier()
    intent = classifier.classify(state["message"])

    if intent == Intent.EDIT and state.get("base_image"):
        route = "edit"
    else:
        route = "converse"
    return {"intent": intent.value, "route": route}


def route_request(state: DesignRequestState) -> Literal["redesign", "edit", "converse"]:
    return state["route"]


@traceable(name="converse_node", run_type="chain", tags=["langgraph", "node", "chat"])
async def converse_node(state: DesignRequestState, config: RunnableConfig) -> Dict[str, Any]:
    """Answer a design question with the consultant persona."""
    tool = config["configurable"]["generation_tool"]
    reply = await tool.chat_reply(state["message"], state["history"])
    return {"reply": reply}
