"""
LangGraph agent: call model → (run tools → call model)* → END.

Tool-calling loop over OpenAI with the get_menu tool. At most max_iterations rounds of
tool calls; when the budget runs out the result carries the max-iterations sentinel
and the recorded intermediate steps so the API can fall back to the last tool result.
"""

import json
import logging
from typing import Any, Literal, TypedDict

from langgraph.graph import END, StateGraph
from openai import OpenAI

from app.agent.llm import chat_with_tools, create_client
from app.agent.tools import AGENT_TOOLS, execute_tool
from app.core.config import (
    AGENT_MAX_ITERATIONS,
    AGENT_MAX_TOKENS,
    AGENT_SYSTEM_PROMPT,
    AGENT_TEMPERATURE,
    OPENAI_LLM_MODEL,
)
from app.core.errors import ServiceUnavailableError
from app.schemas.agent import AgentResult, IntermediateStep, ToolAction

logger = logging.getLogger(__name__)

# Same wording LangChain's AgentExecutor uses when it gives up.
MAX_ITERATIONS_OUTPUT = "Agent stopped due to max iterations."


class AgentState(TypedDict):
    messages: list  # OpenAI chat messages, system first
    pending_tool_calls: list  # list of {"id", "name", "arguments"} from the last model turn
    intermediate_steps: list  # list of IntermediateStep
    iterations: int
    output: str | None
    finish_reason: str


class MenuAgent:
    """
    Hosted model + get_menu tool + execution policy, composed once at startup.
    ask() is safe to call from several threads; the agent holds no per-request state.
    """

    def __init__(
        self,
        client: OpenAI | None,
        model: str = OPENAI_LLM_MODEL,
        *,
        system_prompt: str = AGENT_SYSTEM_PROMPT,
        tools: list[dict[str, Any]] | None = None,
        max_iterations: int = AGENT_MAX_ITERATIONS,
        max_tokens: int = AGENT_MAX_TOKENS,
        temperature: float = AGENT_TEMPERATURE,
    ) -> None:
        if max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")
        self.client = client
        self.model = model
        self.system_prompt = system_prompt
        self.tools = tools if tools is not None else AGENT_TOOLS
        self.max_iterations = max_iterations
        self.max_tokens = max_tokens
        self.temperature = temperature
        self._graph = self._build_graph()

    # --- nodes ---

    def _call_model(self, state: AgentState) -> dict:
        """Node 1: ask the model; either a final answer or tool calls to run."""
        it = state.get("iterations") or 0
        messages = list(state.get("messages") or [])
        logger.info("[graph:call_model] IN  iteration=%d messages=%d", it + 1, len(messages))
        content, tool_calls = chat_with_tools(
            self.client,
            messages,
            self.tools,
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
        )
        if not tool_calls:
            logger.info("[graph:call_model] OUT final answer_len=%d", len(content or ""))
            return {"output": content, "pending_tool_calls": [], "finish_reason": "completed"}
        assistant_msg: dict = {"role": "assistant", "content": content or ""}
        assistant_msg["tool_calls"] = [
            {"id": tc["id"], "type": "function", "function": {"name": tc["name"], "arguments": json.dumps(tc.get("arguments") or {})}}
            for tc in tool_calls
        ]
        messages.append(assistant_msg)
        logger.info("[graph:call_model] OUT tool_calls=%s", [tc["name"] for tc in tool_calls])
        return {"messages": messages, "pending_tool_calls": tool_calls, "iterations": it + 1}

    def _run_tools(self, state: AgentState) -> dict:
        """Node 2: execute requested tools, record (action, observation) pairs, feed results back."""
        messages = list(state.get("messages") or [])
        steps = list(state.get("intermediate_steps") or [])
        for tc in state.get("pending_tool_calls") or []:
            name = tc.get("name", "")
            args = tc.get("arguments") or {}
            observation = execute_tool(name, args)
            logger.info("[graph:run_tools] tool=%s args=%r observation=%r", name, args, observation)
            steps.append(
                IntermediateStep(
                    action=ToolAction(tool=name, tool_input=args, tool_call_id=tc.get("id", "")),
                    observation=observation,
                )
            )
            messages.append({"role": "tool", "tool_call_id": tc.get("id", ""), "content": observation})
        return {"messages": messages, "intermediate_steps": steps, "pending_tool_calls": []}

    def _stop(self, state: AgentState) -> dict:
        """Node 3: iteration budget exhausted without a final answer."""
        logger.warning("[graph:stop] max_iterations=%d reached steps=%d", self.max_iterations, len(state.get("intermediate_steps") or []))
        return {"output": MAX_ITERATIONS_OUTPUT, "finish_reason": "max_iterations"}

    # --- edges ---

    def _route_after_model(self, state: AgentState) -> Literal["run_tools", "__end__"]:
        return "run_tools" if state.get("pending_tool_calls") else END

    def _route_after_tools(self, state: AgentState) -> Literal["call_model", "stop"]:
        it = state.get("iterations") or 0
        next_node = "call_model" if it < self.max_iterations else "stop"
        logger.info("[graph:route_after_tools] iteration=%d max_iter=%d -> %s", it, self.max_iterations, next_node)
        return next_node

    def _build_graph(self):
        """
        Build and compile the agent graph.
        call_model → (run_tools → call_model)* → END; run_tools → stop once the budget is spent.
        """
        graph = StateGraph(AgentState)

        graph.add_node("call_model", self._call_model)
        graph.add_node("run_tools", self._run_tools)
        graph.add_node("stop", self._stop)

        graph.set_entry_point("call_model")
        graph.add_conditional_edges("call_model", self._route_after_model)
        graph.add_conditional_edges("run_tools", self._route_after_tools)
        graph.add_edge("stop", END)

        return graph.compile()

    def ask(self, user_input: str) -> AgentResult:
        """
        Run the agent synchronously on one user message (no history).
        Raises ServiceUnavailableError without an API key; OpenAI errors propagate unchanged.
        """
        if not user_input or not str(user_input).strip():
            raise ValueError("user_input is required")
        if self.client is None:
            raise ServiceUnavailableError("OpenAI API key is not configured.")
        q = str(user_input).strip()
        logger.info("[agent:ask] START input=%r", q)
        initial: AgentState = {
            "messages": [
                {"role": "system", "content": self.system_prompt},
                {"role": "user", "content": q},
            ],
            "pending_tool_calls": [],
            "intermediate_steps": [],
            "iterations": 0,
            "output": None,
            "finish_reason": "completed",
        }
        # Each iteration visits two nodes; leave room for the entry and stop nodes.
        final = self._graph.invoke(initial, config={"recursion_limit": 2 * self.max_iterations + 5})
        result = AgentResult(
            output=final.get("output"),
            intermediate_steps=final.get("intermediate_steps") or [],
            finish_reason=final.get("finish_reason") or "completed",
        )
        logger.info(
            "[agent:ask] END finish_reason=%s iterations=%d steps=%d",
            result.finish_reason,
            final.get("iterations") or 0,
            len(result.intermediate_steps),
        )
        logger.debug("[agent:ask] END result=%r", result)
        return result


def build_agent() -> MenuAgent:
    """Compose the agent from configuration. Called once from the app lifespan."""
    return MenuAgent(create_client())
