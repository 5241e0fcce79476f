"""
Agent LLM: OpenAI chat completions with tool calling.
The client is created once at startup and handed to the agent; errors from the API propagate to the caller.
"""

import json
import logging
from typing import Any

from openai import OpenAI

from app.core.config import LLM_API_TIMEOUT, OPENAI_API_KEY

logger = logging.getLogger(__name__)


def create_client(api_key: str = OPENAI_API_KEY, timeout: float = LLM_API_TIMEOUT) -> OpenAI | None:
    """Build the OpenAI client. Returns None when no API key is configured."""
    if not api_key:
        logger.warning("[llm] OPENAI_API_KEY is not set; /api/chat will fail until it is configured")
        return None
    return OpenAI(api_key=api_key, timeout=timeout, max_retries=0)


def chat_with_tools(
    client: OpenAI,
    messages: list[dict[str, Any]],
    tools: list[dict[str, Any]],
    *,
    model: str,
    max_tokens: int = 2048,
    temperature: float = 0.7,
) -> tuple[str | None, list[dict[str, Any]] | None]:
    """
    Call OpenAI chat with tools. Used for agentic (tool-calling) mode.
    Returns (content, tool_calls). If tool_calls is non-empty, caller should execute
    them and call again with tool results; if content is set and no tool_calls, that's the final answer.
    """
    logger.info("[llm:chat_with_tools] IN  messages=%d model=%s", len(messages), model)
    response = client.chat.completions.create(
        model=model,
        messages=messages,
        tools=tools,
        max_tokens=max_tokens,
        temperature=temperature,
    )
    msg = response.choices[0].message if response.choices else None
    if not msg:
        return None, None
    content = (getattr(msg, "content", None) or "").strip() or None
    raw_tool_calls = getattr(msg, "tool_calls", None) or []
    tool_calls = []
    for tc in raw_tool_calls:
        fid = getattr(tc, "id", None) or ""
        fn = getattr(tc, "function", None)
        if not fn:
            continue
        fname = getattr(fn, "name", None) or ""
        fargs = getattr(fn, "arguments", None) or "{}"
        try:
            args = json.loads(fargs) if isinstance(fargs, str) else fargs
        except json.JSONDecodeError:
            args = {}
        if not isinstance(args, dict):
            args = {}
        tool_calls.append({"id": fid, "name": fname, "arguments": args})
    if tool_calls:
        logger.info("[llm:chat_with_tools] OUT tool_calls=%s", [t["name"] for t in tool_calls])
    if content:
        logger.info("[llm:chat_with_tools] OUT content_len=%d", len(content))
    return content, tool_calls if tool_calls else None
