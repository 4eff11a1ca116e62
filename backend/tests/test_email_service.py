"""Tests for cold email generation: prompt building and the end-to-end service call."""

from unittest.mock import AsyncMock, patch

import pytest
from litellm.exceptions import InternalServerError

from app.models.email_models import ApplicantInput, GenerationConfig
from app.services.email_service import FALLBACK_EMAIL, build_prompt, generate_email
from app.services.llm_errors import MissingCredentialError, UpstreamHTTPError
from app.utils.text_normalizer import normalize_input
from tests.conftest import make_completion


class TestBuildPrompt:
    def test_embeds_normalized_fields(self, applicant_payload: dict) -> None:
        prompt = build_prompt(normalize_input(ApplicantInput(**applicant_payload)))

        assert "- Applicant: Jane Doe, Senior Software Engineer" in prompt
        assert "- Target: Staff Engineer at Acme Corp" in prompt
        assert "- Experience: 5 years backend experience" in prompt
        assert "- Skills: Python, React, Go" in prompt
        assert "- Key Projects: Payments platform; Open-source CLI" in prompt
        assert "- Tone: friendly" in prompt

    def test_optional_context_lines(self, applicant_payload: dict) -> None:
        prompt = build_prompt(normalize_input(ApplicantInput(**applicant_payload)))

        assert "- Recruiter: Sam" in prompt
        assert "- Portfolio: https://jane.dev" in prompt
        assert "LinkedIn:" not in prompt

    def test_without_optional_context(self) -> None:
        data = ApplicantInput(name="al", role="dev", companyName="globex", targetRole="lead")
        prompt = build_prompt(normalize_input(data))

        assert "- Tone: formal\n\nRequirements:" in prompt
        assert "Recruiter:" not in prompt
        assert "Portfolio:" not in prompt

    def test_braces_in_user_text_are_literal(self) -> None:
        data = ApplicantInput(
            name="al",
            role="dev",
            experience="built {templating} engines",
            companyName="globex",
            targetRole="lead",
        )
        assert "built {templating} engines" in build_prompt(normalize_input(data))


class TestGenerateEmail:
    @pytest.mark.asyncio
    async def test_returns_trimmed_first_choice(self, applicant_payload: dict) -> None:
        mock = AsyncMock(return_value=make_completion("\n  Subject: Hello Acme\n\nHi Sam,  \n"))
        with patch("app.services.llm_service.acompletion", mock):
            email = await generate_email(
                ApplicantInput(**applicant_payload), GenerationConfig(api_key="k")
            )

        assert email == "Subject: Hello Acme\n\nHi Sam,"
        messages = mock.call_args.kwargs["messages"]
        assert len(messages) == 1
        assert messages[0]["role"] == "user"
        assert "Senior Software Engineer" in messages[0]["content"]

    @pytest.mark.asyncio
    async def test_fallback_when_no_content(self, applicant_payload: dict) -> None:
        with patch("app.services.llm_service.acompletion", AsyncMock(return_value=make_completion(None))):
            email = await generate_email(
                ApplicantInput(**applicant_payload), GenerationConfig(api_key="k")
            )
        assert email == FALLBACK_EMAIL

    @pytest.mark.asyncio
    async def test_missing_credential_before_network(self, applicant_payload: dict) -> None:
        mock = AsyncMock(return_value=make_completion("unused"))
        with patch("app.services.llm_service.acompletion", mock):
            with pytest.raises(MissingCredentialError):
                await generate_email(ApplicantInput(**applicant_payload), GenerationConfig())
        assert mock.await_count == 0

    @pytest.mark.asyncio
    async def test_upstream_500_rejects(
        self, applicant_payload: dict, caplog: pytest.LogCaptureFixture
    ) -> None:
        error = InternalServerError(message="boom", llm_provider="groq", model="groq/x")
        with patch("app.services.llm_service.acompletion", AsyncMock(side_effect=error)):
            with pytest.raises(UpstreamHTTPError) as exc_info:
                await generate_email(
                    ApplicantInput(**applicant_payload), GenerationConfig(api_key="k")
                )

        assert exc_info.value.status_code == 500
        assert "500" in str(exc_info.value)
        errors = [r for r in caplog.records if r.levelname == "ERROR" and r.name.startswith("app.")]
        assert len(errors) == 1
        assert "LLM error" in errors[0].getMessage()

    @pytest.mark.asyncio
    async def test_missing_credential_logged_once(
        self, applicant_payload: dict, caplog: pytest.LogCaptureFixture
    ) -> None:
        with patch("app.services.llm_service.acompletion", AsyncMock()):
            with pytest.raises(MissingCredentialError):
                await generate_email(ApplicantInput(**applicant_payload), GenerationConfig())

        errors = [r for r in caplog.records if r.levelname == "ERROR" and r.name.startswith("app.")]
        assert len(errors) == 1
        assert "API key not found" in errors[0].getMessage()
