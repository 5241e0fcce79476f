"""Schemas for what the agent returns to the API layer."""

from typing import Any, Literal

from pydantic import BaseModel, Field

FinishReason = Literal["completed", "max_iterations"]


class ToolAction(BaseModel):
    """One tool call requested by the model."""

    tool: str = Field(..., description="Tool name, e.g. get_menu.")
    tool_input: dict[str, Any] = Field(default_factory=dict, description="Arguments the model passed to the tool.")
    tool_call_id: str = Field("", description="Provider id of the tool call.")


class IntermediateStep(BaseModel):
    """A (tool call, tool result) pair recorded during the agent loop. observation may be missing."""

    action: ToolAction
    observation: str | None = None


class AgentResult(BaseModel):
    """Outcome of MenuAgent.ask(). output may be absent or carry the max-iterations sentinel."""

    output: str | None = None
    intermediate_steps: list[IntermediateStep] = Field(default_factory=list)
    finish_reason: FinishReason = "completed"
