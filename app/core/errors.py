"""
Application errors for clean API error handling.

Use ServiceUnavailableError when the agent LLM is misconfigured (e.g. no API key)
so the chat handler can log it and return its generic 500 message.
"""


class ServiceUnavailableError(Exception):
    """Raised when a required service (e.g. the OpenAI LLM) is unavailable or misconfigured."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
