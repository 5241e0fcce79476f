"""
Application configuration (env, settings, constants).

Responsibility: Centralize config loading, environment variables, and app-wide
constants. Keeps the rest of the app decoupled from how config is sourced.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Server
HOST: str = os.getenv("HOST", "0.0.0.0").strip() or "0.0.0.0"
PORT: int = int(os.getenv("PORT", "3000"))
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"

# Static frontend (GET /)
STATIC_DIR: Path = Path(__file__).resolve().parent.parent / "static"
INDEX_HTML: Path = STATIC_DIR / "index.html"

# OpenAI (agent LLM)
OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "").strip()
OPENAI_LLM_MODEL: str = (
    os.getenv("OPENAI_LLM_MODEL", "gpt-4o-mini").strip() or "gpt-4o-mini"
)

# Agent loop
AGENT_SYSTEM_PROMPT: str = "You are a helpful assistant that uses tools when needed."
AGENT_MAX_ITERATIONS: int = 5
AGENT_MAX_TOKENS: int = 2048
AGENT_TEMPERATURE: float = 0.7

# Timeouts (seconds). LLM_API_TIMEOUT bounds one model call; AGENT_REQUEST_TIMEOUT bounds a whole /api/chat request.
LLM_API_TIMEOUT: float = 60.0
AGENT_REQUEST_TIMEOUT: float = float(os.getenv("AGENT_REQUEST_TIMEOUT", "90"))
