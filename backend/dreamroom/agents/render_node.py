"""
Render Nodes

LangGraph nodes that produce a new room image: the full-style redesign
and the single-change edit. The GenerationTool comes in through the run
config so the nodes stay plain functions.

FULLY TRACED with LangSmith.
"""

import logging
from typing import Any, Dict, List

from langchain_core.runnables import RunnableConfig
from langsmith import traceable

from dreamroom.core.prompts import RequestKind, build_prompt
from dreamroom.models.state import DesignRequestState


logger = logging.getLogger(__name__)


def reference_images(state: DesignRequestState) -> List[str]:
    """Base image first, then the wallpaper swatch, then the floor swatch."""
    images = [state["base_image"]]
    if state.get("wallpaper_image"):
        images.append(state["wallpaper_image"])
    if state.get("floor_image"):
        images.append(state["floor_image"])
    return images


def _tool(config: RunnableConfig):
    return config["configurable"]["generation_tool"]


@traceable(name="redesign_node", run_type="chain", tags=["langgraph", "node", "redesign"])
async def redesign_node(state: DesignRequestState, config: RunnableConfig) -> Dict[str, Any]:
    """
    Restyle the original room photo into the requested style.

    The prompt's material clauses follow the same swatch order as reference_images.
    """
    prompt = build_prompt(
        RequestKind.REDESIGN,
        state["style"],
        has_wallpaper=bool(state.get("wallpaper_image")),
        has_floor=bool(state.get("floor_image")),
    )
    logger.info("Redesigning room in %s style", state["style"].value)

    image = await _tool(config).generate_image(
        reference_images(state), prompt, state["aspect_ratio"]
    )
    return {"generated_image": image}


@traceable(name="edit_node", run_type="chain", tags=["langgraph", "node", "edit"])
async def edit_node(state: DesignRequestState, config: RunnableConfig) -> Dict[str, Any]:
    """Apply the user's instruction to the latest image."""
    prompt = build_prompt(RequestKind.EDIT, state["message"])
    logger.info("Editing room: %s", state["message"])

    image = await _tool(config).generate_image(
        reference_images(state), prompt, state["aspect_ratio"]
    )
    return {"generated_image": image}
