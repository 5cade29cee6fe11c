"""
LangGraph Workflow

One graph run per redesign or chat request:
classify → redesign | edit | converse → END
"""

from functools import lru_cache
from typing import Any, Dict, Optional

from langgraph.graph import StateGraph, END

from dreamroom.agents.chat_node import classify_node, converse_node, route_request
from dreamroom.agents.render_node import edit_node, redesign_node
from dreamroom.core.intent import IntentClassifier
from dreamroom.models.state import DesignRequestState


def create_design_graph() -> StateGraph:
    """
    Create the request workflow.

    Flow:
        START → classify → redesign → END
                         → edit     → END
                         → converse → END
    """
    graph = StateGraph(DesignRequestState)

    graph.add_node("classify", classify_node)
    graph.add_node("redesign", redesign_node)
    graph.add_node("edit", edit_node)
    graph.add_node("converse", converse_node)

    graph.set_entry_point("classify")

    graph.add_conditional_edges(
        "classify",
        route_request,
        {
            "redesign": "redesign",
            "edit": "edit",
            "converse": "converse"
        }
    )

    graph.add_edge("redesign", END)
    graph.add_edge("edit", END)
    graph.add_edge("converse", END)

    return graph


@lru_cache()
def compile_graph():
    """Compile the request graph once; runs are stateless."""
    return create_design_graph().compile()


async def run_request(
    state: DesignRequestState,
    generation_tool,
    intent_classifier: Optional[IntentClassifier] = None,
) -> Dict[str, Any]:
    """
    Run one request through the workflow.

    Errors raised by a node (including Gemini API failures) propagate.
    """
    app = compile_graph()
    return await app.ainvoke(
        state,
        config={
            "configurable": {
                "generation_tool": generation_tool,
                "intent_classifier": intent_classifier,
            }
        },
    )
