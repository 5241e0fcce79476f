"""
Unit tests for the agent tool adapter: declaration, get_menu and execute_tool.
"""

import pytest

from app.agent.tools import AGENT_TOOLS, MENU_TOOL, MENU_TOOL_NAME, execute_tool, get_menu
from app.services.menu_service import MENU_NOT_FOUND


def test_menu_tool_declaration() -> None:
    fn = MENU_TOOL["function"]
    assert MENU_TOOL["type"] == "function"
    assert fn["name"] == MENU_TOOL_NAME == "get_menu"
    assert "breakfast" in fn["description"] and "dinner" in fn["description"]
    assert fn["parameters"]["required"] == ["category"]
    assert fn["parameters"]["properties"]["category"]["type"] == "string"
    assert AGENT_TOOLS == [MENU_TOOL]


def test_get_menu_delegates_to_catalog() -> None:
    assert get_menu({"category": "Dinner"}) == "Biryani, Raita, Papad, Salad"
    assert get_menu({"category": "evening snacks"}) == "Samosa, Chutney, Tea, Biscuits"


@pytest.mark.parametrize("arguments", [None, {}, {"category": 5}, {"category": None}, {"meal": "lunch"}, {"category": ""}])
def test_get_menu_never_raises_on_bad_arguments(arguments) -> None:
    assert get_menu(arguments) == MENU_NOT_FOUND


def test_execute_tool_dispatches_by_name() -> None:
    assert execute_tool("get_menu", {"category": "lunch"}) == "Rice, Dal, Curry, Roti, Salad"


def test_execute_tool_unknown_name() -> None:
    assert execute_tool("calculator", {"expression": "1+1"}) == "Unknown tool: calculator"
