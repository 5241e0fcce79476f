"""
API dependencies for dependency injection
"""

from fastapi import Request

from app.agent.graph import MenuAgent
from app.core.errors import ServiceUnavailableError


def get_agent(request: Request) -> MenuAgent:
    """
    Agent built by the app lifespan.

    Usage:
        @router.post("/example")
        async def example(agent: MenuAgent = Depends(get_agent)):
            ...
    """
    agent = getattr(request.app.state, "agent", None)
    if agent is None:
        raise ServiceUnavailableError("Agent is not initialized.")
    return agent
