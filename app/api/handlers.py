"""
API handlers: validate the chat request, call the agent, map its result/errors to HTTP.

Responsibility: Bridge HTTP types and the agent. Every outcome, success or failure,
is answered with the same {"output": str} body so clients parse one shape.
Upstream error details are logged, never returned.
"""

import asyncio
import logging

from fastapi import Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.agent.graph import MAX_ITERATIONS_OUTPUT, MenuAgent
from app.core.config import AGENT_REQUEST_TIMEOUT
from app.core.errors import ServiceUnavailableError
from app.schemas.agent import AgentResult
from app.schemas.chat import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Please provide a valid input."
AGENT_FAILED_MESSAGE = "Sorry, something went wrong. Please try again with a specific menu request."
UNPROCESSABLE_MESSAGE = (
    "I couldn't process your request. Please try asking for a specific menu like "
    "'breakfast menu' or 'evening snacks menu'."
)

# Substring match on the stop message; finish_reason is checked first.
_MAX_ITERATIONS_SENTINEL = MAX_ITERATIONS_OUTPUT.rstrip(".").lower()


def chat_response(output: str, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ChatResponse(output=output).model_dump())


def _stopped_early(result: AgentResult) -> bool:
    if result.finish_reason == "max_iterations":
        return True
    return _MAX_ITERATIONS_SENTINEL in (result.output or "").lower()


def interpret_result(result: AgentResult) -> tuple[int, str]:
    """
    Turn an agent result into (status_code, output).
    Final answer first; else the last tool observation; else a 500 with example phrasing.
    """
    if result.output and not _stopped_early(result):
        return status.HTTP_200_OK, result.output

    if result.intermediate_steps:
        last_step = result.intermediate_steps[-1]
        observation = getattr(last_step, "observation", None)
        if isinstance(observation, str) and observation:
            logger.info("[handlers:interpret_result] using last tool observation tool=%s", last_step.action.tool)
            return status.HTTP_200_OK, observation

    logger.warning(
        "[handlers:interpret_result] no usable output finish_reason=%s steps=%d",
        result.finish_reason,
        len(result.intermediate_steps),
    )
    return status.HTTP_500_INTERNAL_SERVER_ERROR, UNPROCESSABLE_MESSAGE


async def handle_chat(body: ChatRequest, agent: MenuAgent, timeout: float = AGENT_REQUEST_TIMEOUT) -> JSONResponse:
    """
    Validate → ask the agent (in a worker thread, bounded by timeout) → interpret.
    Blank input is a 400; any agent exception or timeout is a logged 500.
    """
    user_input = body.input
    logger.info("[handlers:handle_chat] IN  input=%r", user_input)

    if not user_input or not user_input.strip():
        return chat_response(INVALID_INPUT_MESSAGE, status.HTTP_400_BAD_REQUEST)

    try:
        result = await asyncio.wait_for(asyncio.to_thread(agent.ask, user_input), timeout=timeout)
    except asyncio.TimeoutError:
        logger.error("[handlers:handle_chat] agent timed out after %.1fs", timeout)
        return chat_response(AGENT_FAILED_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)
    except Exception:
        logger.exception("Error during agent execution")
        return chat_response(AGENT_FAILED_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)

    logger.info("[handlers:handle_chat] agent result=%r", result)
    status_code, output = interpret_result(result)
    logger.info("[handlers:handle_chat] OUT status=%d output_len=%d", status_code, len(output))
    return chat_response(output, status_code)


# --- Exception handlers (registered in app.main) ---

CHAT_PATH = "/api/chat"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed /api/chat bodies get the same 400 as blank input; other routes keep FastAPI's 422."""
    if request.url.path == CHAT_PATH:
        logger.info("[handlers:validation] rejected body errors=%d", len(exc.errors()))
        return chat_response(INVALID_INPUT_MESSAGE, status.HTTP_400_BAD_REQUEST)
    return await request_validation_exception_handler(request, exc)


async def service_unavailable_handler(request: Request, exc: ServiceUnavailableError) -> JSONResponse:
    logger.error("[handlers:service_unavailable] path=%s: %s", request.url.path, exc.message)
    return chat_response(AGENT_FAILED_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)
