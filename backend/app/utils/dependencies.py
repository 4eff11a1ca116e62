"""
Request-scoped helpers — build the generation config from request headers.
"""

from __future__ import annotations

from fastapi import Header
from typing import Optional

from app.models.email_models import GenerationConfig


async def get_generation_config(
    x_groq_key: Optional[str] = Header(None, alias="X-Groq-Key"),
) -> GenerationConfig:
    """FastAPI dependency: Groq config, with the caller's key if the header is set."""
    return GenerationConfig(provider="groq", api_key=x_groq_key or None)
