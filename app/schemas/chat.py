"""Schemas for the chat endpoint."""

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    """Request body for POST /api/chat. Blank input is rejected by the handler with 400, not by the schema."""

    input: str | None = Field(None, description="User message for the menu assistant.")


class ChatResponse(BaseModel):
    """Response for POST /api/chat. Same shape on success and on every failure."""

    output: str = Field(..., description="Assistant answer, or a user-safe error message.")

    model_config = {
        "json_schema_extra": {
            "examples": [{"output": "Biryani, Raita, Papad, Salad"}]
        }
    }
