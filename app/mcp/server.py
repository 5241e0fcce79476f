"""
Minimal MCP-style tool server: exposes the agent's tools through a standardized
HTTP interface so they can be inspected and called without going through the LLM.
"""

import logging
from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel

from app.agent.tools import AGENT_TOOLS, get_menu

logger = logging.getLogger(__name__)

# MCP tool schema for discovery / documentation, derived from the agent's declarations
tools = [
    {
        "name": t["function"]["name"],
        "description": t["function"]["description"],
        "input_schema": t["function"]["parameters"],
    }
    for t in AGENT_TOOLS
]

mcp_router = APIRouter(tags=["mcp"])


@mcp_router.get(
    "/tools",
    summary="MCP tool discovery",
    description="List the tools the agent can call, with their input schemas.",
)
def mcp_list_tools() -> dict[str, list[dict[str, Any]]]:
    return {"tools": tools}


class GetMenuRequest(BaseModel):
    """Request body for MCP tool get_menu."""
    category: str = ""


@mcp_router.post(
    "/tools/get_menu",
    summary="MCP tool: get_menu",
    description="Return today's menu for a category (breakfast, lunch, evening, dinner). Unknown categories get the list of valid ones.",
)
def mcp_get_menu(body: GetMenuRequest) -> dict[str, str]:
    """Run the get_menu tool directly."""
    logger.info("MCP tool called: get_menu category=%r", body.category)
    return {"menu": get_menu({"category": body.category})}
