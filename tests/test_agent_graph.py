"""
Tests for the LangGraph tool-calling agent.

Uses a mocked OpenAI client so tests do not need an API key or network.
"""

import json
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from app.agent.graph import MAX_ITERATIONS_OUTPUT, MenuAgent
from app.agent.llm import create_client
from app.core.errors import ServiceUnavailableError
from app.services.menu_service import MENU_NOT_FOUND


def _completion(content: str | None = None, tool_calls: list | None = None) -> SimpleNamespace:
    message = SimpleNamespace(content=content, tool_calls=tool_calls)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _tool_call(call_id: str, name: str, arguments) -> SimpleNamespace:
    args = arguments if isinstance(arguments, str) else json.dumps(arguments)
    return SimpleNamespace(id=call_id, function=SimpleNamespace(name=name, arguments=args))


@pytest.fixture
def client() -> MagicMock:
    return MagicMock()


def test_direct_answer_without_tools(client: MagicMock) -> None:
    client.chat.completions.create.return_value = _completion("Hello! Ask me about the menu.")
    result = MenuAgent(client, "test-model").ask("hi")
    assert result.output == "Hello! Ask me about the menu."
    assert result.finish_reason == "completed"
    assert result.intermediate_steps == []
    kwargs = client.chat.completions.create.call_args.kwargs
    assert kwargs["model"] == "test-model"
    assert kwargs["tools"][0]["function"]["name"] == "get_menu"
    assert [m["role"] for m in kwargs["messages"]] == ["system", "user"]
    assert kwargs["messages"][0]["content"] == "You are a helpful assistant that uses tools when needed."


def test_tool_round_trip_records_step(client: MagicMock) -> None:
    client.chat.completions.create.side_effect = [
        _completion(tool_calls=[_tool_call("call_1", "get_menu", {"category": "dinner"})]),
        _completion("Tonight's dinner is Biryani, Raita, Papad, Salad."),
    ]
    result = MenuAgent(client).ask("what's for dinner?")
    assert result.output == "Tonight's dinner is Biryani, Raita, Papad, Salad."
    assert result.finish_reason == "completed"
    assert len(result.intermediate_steps) == 1
    step = result.intermediate_steps[0]
    assert step.action.tool == "get_menu"
    assert step.action.tool_input == {"category": "dinner"}
    assert step.action.tool_call_id == "call_1"
    assert step.observation == "Biryani, Raita, Papad, Salad"

    last_messages = client.chat.completions.create.call_args.kwargs["messages"]
    assert [m["role"] for m in last_messages] == ["system", "user", "assistant", "tool"]
    assert last_messages[2]["tool_calls"][0]["function"]["name"] == "get_menu"
    assert last_messages[3] == {"role": "tool", "tool_call_id": "call_1", "content": "Biryani, Raita, Papad, Salad"}


def test_stops_after_max_iterations(client: MagicMock) -> None:
    client.chat.completions.create.return_value = _completion(
        tool_calls=[_tool_call("call_x", "get_menu", {"category": "evening snacks"})]
    )
    result = MenuAgent(client, max_iterations=5).ask("snacks?")
    assert client.chat.completions.create.call_count == 5
    assert result.finish_reason == "max_iterations"
    assert result.output == MAX_ITERATIONS_OUTPUT
    assert len(result.intermediate_steps) == 5
    assert result.intermediate_steps[-1].observation == "Samosa, Chutney, Tea, Biscuits"


def test_malformed_tool_arguments_yield_fallback(client: MagicMock) -> None:
    client.chat.completions.create.side_effect = [
        _completion(tool_calls=[_tool_call("call_1", "get_menu", "{not json")]),
        _completion("Sorry, which meal?"),
    ]
    result = MenuAgent(client).ask("menu")
    assert result.intermediate_steps[0].action.tool_input == {}
    assert result.intermediate_steps[0].observation == MENU_NOT_FOUND


def test_upstream_error_propagates(client: MagicMock) -> None:
    client.chat.completions.create.side_effect = RuntimeError("connection reset")
    with pytest.raises(RuntimeError, match="connection reset"):
        MenuAgent(client).ask("lunch?")


def test_missing_client_raises_service_unavailable() -> None:
    with pytest.raises(ServiceUnavailableError):
        MenuAgent(None).ask("lunch?")


def test_blank_input_rejected(client: MagicMock) -> None:
    with pytest.raises(ValueError):
        MenuAgent(client).ask("   ")
    client.chat.completions.create.assert_not_called()


def test_max_iterations_must_be_positive(client: MagicMock) -> None:
    with pytest.raises(ValueError):
        MenuAgent(client, max_iterations=0)


def test_create_client_without_key_returns_none() -> None:
    assert create_client(api_key="") is None
    assert create_client(api_key="sk-test") is not None
