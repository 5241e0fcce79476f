"""
Agent tools: definitions and execution for tool-calling (agentic) mode.

Tools: get_menu (today's canteen menu by meal period).
"""

import logging
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from app.services.menu_service import MENU_NOT_FOUND, lookup_menu

logger = logging.getLogger(__name__)

MENU_TOOL_NAME = "get_menu"
MENU_TOOL_DESCRIPTION = (
    "Returns today's menu for the given category. Use this tool when users ask for breakfast, "
    "lunch, evening snacks, dinner menu, or any food-related queries."
)


class GetMenuArgs(BaseModel):
    """Arguments for get_menu, checked before the lookup runs."""

    category: str = Field(..., description="Type of food category: breakfast, lunch, evening, or dinner")


# OpenAI function-calling format
MENU_TOOL: dict[str, Any] = {
    "type": "function",
    "function": {
        "name": MENU_TOOL_NAME,
        "description": MENU_TOOL_DESCRIPTION,
        "parameters": {
            "type": "object",
            "properties": {
                "category": {
                    "type": "string",
                    "description": "Type of food category: breakfast, lunch, evening, or dinner",
                }
            },
            "required": ["category"],
        },
    },
}

AGENT_TOOLS: list[dict[str, Any]] = [MENU_TOOL]


def get_menu(arguments: dict[str, Any] | None) -> str:
    """Run get_menu on raw model arguments. Invalid arguments get the not-found message instead of an error."""
    try:
        args = GetMenuArgs.model_validate(arguments or {})
    except ValidationError as e:
        logger.info("[tools:get_menu] invalid arguments %r: %d error(s)", arguments, e.error_count())
        return MENU_NOT_FOUND
    return lookup_menu(args.category)


def execute_tool(name: str, arguments: dict[str, Any] | None) -> str:
    """
    Execute a tool by name with the given arguments. Returns a string result for the LLM.
    """
    args = arguments or {}
    logger.info("[tools] execute_tool name=%r arguments=%r", name, args)

    if name == MENU_TOOL_NAME:
        return get_menu(args)

    return f"Unknown tool: {name}"
