from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "Cold Email Generator"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    static_dir: str = "public"

    # CORS
    cors_origins: list[str] = ["*"]

    # LLM (a per-request key from the X-Groq-Key header takes precedence)
    groq_api_key: Optional[str] = None
    groq_api_base: str = "https://api.groq.com/openai/v1"
    groq_model: str = "llama-3.1-8b-instant"
    llm_timeout_seconds: float = 60.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


# ── Prompt Configuration ────────────────────────────────────────────────────

PROMPT_CONFIG = {
    "cold_email": {
        "temperature": 0.8,
        "top_p": 0.95,
        "frequency_penalty": 0.7,
        "presence_penalty": 0.7,
        "max_tokens": 1000,
    },
}
