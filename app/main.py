# Run from project root: uvicorn app.main:app --port 3000   (or: python -m app.main)

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from app.agent.graph import build_agent
from app.api.handlers import service_unavailable_handler, validation_exception_handler
from app.api.routes import router
from app.core.config import HOST, LOG_LEVEL, PORT
from app.core.errors import ServiceUnavailableError
from app.mcp.server import mcp_router

logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the agent once; handlers receive it through get_agent."""
    app.state.agent = build_agent()
    logger.info("Server is running on http://localhost:%d", PORT)
    try:
        yield
    finally:
        logger.info("Shutting down menu assistant")
        app.state.agent = None


app = FastAPI(title="Canteen Menu Assistant", lifespan=lifespan)
app.include_router(router)
app.include_router(mcp_router, prefix="/mcp")
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(ServiceUnavailableError, service_unavailable_handler)


if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
