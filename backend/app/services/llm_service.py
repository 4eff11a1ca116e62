"""
LLM Service — single outbound chat completion via LiteLLM.

Responsibilities:
  • Resolve the API key: explicit per-request key, else the server's environment key
  • Route to the provider's OpenAI-compatible endpoint via LiteLLM
  • Apply the prompt's fixed sampling parameters and an explicit timeout
  • Map provider failures onto the LLMError taxonomy (no retries)
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx
import litellm
from litellm import acompletion
from litellm.exceptions import APIConnectionError, Timeout

from app.config import PROMPT_CONFIG, settings
from app.models.email_models import GenerationConfig
from app.services.llm_errors import (
    MissingCredentialError,
    UpstreamHTTPError,
    UpstreamTransportError,
)

logger = logging.getLogger(__name__)

# Silence verbose LiteLLM logs
litellm.suppress_debug_info = True


# ── Helpers ──────────────────────────────────────────────────────────────────

# Maps our provider key → the Settings field holding its server-side key
PROVIDER_KEY_SETTING = {
    "groq": "groq_api_key",
}

# Maps our provider key → the env var that fills that field
PROVIDER_KEY_ENV = {
    "groq": "GROQ_API_KEY",
}


def resolve_api_key(config: GenerationConfig) -> str:
    """Return the explicit key if given, else the environment key; raise if neither exists."""
    setting_name = PROVIDER_KEY_SETTING.get(config.provider)
    if not setting_name:
        raise ValueError(f"Unknown provider: {config.provider}")

    if config.api_key:
        return config.api_key

    env_key = getattr(settings, setting_name, None)
    if env_key:
        return env_key

    raise MissingCredentialError(
        f"{config.provider.title()} API key not found. "
        f"Pass one with the request or set {PROVIDER_KEY_ENV[config.provider]}."
    )


def _resolve_model_id(provider: str, model: str | None) -> str:
    """Build the LiteLLM model id ("groq/<model>") from an optional bare model name."""
    model = model or settings.groq_model
    if model.startswith(f"{provider}/"):
        return model
    return f"{provider}/{model}"


def _caused_by_transport_fault(error: BaseException) -> bool:
    """True if the exception chain holds a connection-level failure (no response was received)."""
    seen: set[int] = set()
    current: BaseException | None = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        # aiohttp's ClientConnectorError and asyncio timeouts are OSError subclasses
        if isinstance(current, (httpx.TransportError, OSError, asyncio.TimeoutError)):
            return True
        current = current.__cause__ or current.__context__
    return False


def _first_choice_text(response: Any) -> str | None:
    """Return the stripped content of the first choice, or None if there is none."""
    choices = getattr(response, "choices", None) or []
    if not choices:
        return None
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    if not content:
        return None
    return content.strip() or None


# ── Core Completion ──────────────────────────────────────────────────────────


async def complete(
    *,
    config: GenerationConfig,
    messages: list[dict[str, str]],
    prompt_name: str,
) -> str | None:
    """
    Send one chat completion request via LiteLLM.

    Args:
        config:      Provider, optional explicit key and optional model name
        messages:    OpenAI-format message list
        prompt_name: Key into PROMPT_CONFIG for the sampling parameters

    Returns:
        The first choice's text, stripped, or None when the provider returned nothing.

    Raises:
        MissingCredentialError: before any network call, when no key is available
        UpstreamHTTPError:      the provider answered with a non-success status
        UpstreamTransportError: the provider could not be reached or timed out
    """
    try:
        api_key = resolve_api_key(config)
    except MissingCredentialError as e:
        logger.error(f"LLM error ({config.provider}): {e}")
        raise

    model_id = _resolve_model_id(config.provider, config.model)
    params = PROMPT_CONFIG[prompt_name]

    kwargs: dict[str, Any] = {
        "model": model_id,
        "messages": messages,
        "api_key": api_key,
        "api_base": settings.groq_api_base,
        "timeout": settings.llm_timeout_seconds,
        "stream": False,
        "num_retries": 0,
        "max_retries": 0,
        "drop_params": True,
        **params,
    }

    logger.info(
        f"LLM call: provider={config.provider} model={model_id} "
        f"temp={params['temperature']} tokens={params['max_tokens']}"
    )

    try:
        response = await acompletion(**kwargs)
    except (APIConnectionError, Timeout, httpx.TransportError) as e:
        logger.error(f"LLM transport error ({config.provider}/{model_id}): {e}")
        raise UpstreamTransportError(str(e)) from e
    except Exception as e:
        # LiteLLM reports a refused connection as InternalServerError(500)
        if _caused_by_transport_fault(e):
            logger.error(f"LLM transport error ({config.provider}/{model_id}): {e}")
            raise UpstreamTransportError(str(e)) from e
        status_code = getattr(e, "status_code", None)
        logger.error(f"LLM error ({config.provider}/{model_id}): {e}")
        if isinstance(status_code, int):
            raise UpstreamHTTPError(status_code) from e
        raise

    text = _first_choice_text(response)
    logger.info(f"LLM response: {len(text or '')} chars, usage={getattr(response, 'usage', None)}")
    return text
