from collections.abc import AsyncGenerator
from types import SimpleNamespace

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.config import settings
from app.main import app


def make_completion(content: str | None) -> SimpleNamespace:
    """Build an object shaped like a LiteLLM ModelResponse with one choice."""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        usage=None,
    )


@pytest.fixture(autouse=True)
def no_env_key(monkeypatch: pytest.MonkeyPatch) -> None:
    """Tests never see a server-side key unless they set one."""
    monkeypatch.setattr(settings, "groq_api_key", None)


@pytest.fixture
def applicant_payload() -> dict:
    return {
        "name": "jANE doe",
        "role": "senir softwre enginer",
        "skills": ["pythn", "react", "Go"],
        "experience": "5 yrs backend expernce",
        "projects": ["payments platform", "open-source CLI"],
        "portfolioLink": "https://jane.dev",
        "companyName": "acme corp",
        "targetRole": "staff enginer",
        "recruiterName": "sam",
        "tone": "casual",
    }


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
