"""
LLM error taxonomy.

Everything the outbound completion call can fail with is mapped to one of
these before it leaves llm_service, so routes only need to catch LLMError.
"""

__all__ = [
    "LLMError",
    "MissingCredentialError",
    "UpstreamHTTPError",
    "UpstreamTransportError",
]


class LLMError(Exception):
    """Base class for all generation failures."""


class MissingCredentialError(LLMError):
    """No API key was supplied by the caller or found in the environment."""


class UpstreamHTTPError(LLMError):
    """The provider answered with a non-success HTTP status."""

    def __init__(self, status_code: int, message: str | None = None):
        super().__init__(message or f"API error: {status_code}")
        self.status_code = status_code


class UpstreamTransportError(LLMError):
    """The request never got a response (connection failure, timeout)."""
