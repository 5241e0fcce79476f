"""
API route aggregator: register endpoints; no logic — only delegate to handlers.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse, JSONResponse

from app.agent.graph import MenuAgent
from app.api.dependencies import get_agent
from app.api.handlers import CHAT_PATH, handle_chat
from app.core.config import INDEX_HTML
from app.schemas.chat import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)
router = APIRouter()


# --- System ---

@router.get("/", tags=["system"], include_in_schema=False)
def index() -> FileResponse:
    """Serve the chat page."""
    return FileResponse(INDEX_HTML, media_type="text/html")


@router.get("/health", tags=["system"])
def health():
    return {"ok": True}


# --- Chat ---

@router.post(
    CHAT_PATH,
    response_model=ChatResponse,
    tags=["chat"],
    summary="Ask the menu assistant",
    description="Send a message; receive {output}. 400 on blank input, 500 on agent failure. Every response has the {output} shape.",
    responses={400: {"model": ChatResponse}, 500: {"model": ChatResponse}},
)
async def post_chat(body: ChatRequest, agent: MenuAgent = Depends(get_agent)) -> JSONResponse:
    return await handle_chat(body, agent)
