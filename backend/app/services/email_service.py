"""
Email Service — generate a cold outreach email from raw applicant data.

Normalizes the applicant fields, fills the cold email prompt and makes one
completion call. Nothing is cached; every request produces a fresh email.
"""

from __future__ import annotations

import logging

from app.models.email_models import (
    ApplicantInput,
    GenerationConfig,
    NormalizedApplicantInput,
)
from app.prompts import cold_email
from app.services.llm_service import complete
from app.utils.text_normalizer import normalize_input

logger = logging.getLogger(__name__)

FALLBACK_EMAIL = "Failed to generate email."


async def generate_email(applicant: ApplicantInput, config: GenerationConfig) -> str:
    """
    Generate a cold email for the applicant.

    Args:
        applicant: Raw applicant data; normalized before use
        config: Provider, optional explicit API key and optional model name

    Returns the email text, or FALLBACK_EMAIL if the model returned nothing.
    Any LLMError from the completion call propagates unchanged.
    """
    normalized = normalize_input(applicant)
    prompt = build_prompt(normalized)

    logger.info(f"Generating cold email: {normalized.target_role} at {normalized.company_name}")
    text = await complete(
        config=config,
        messages=[{"role": "user", "content": prompt}],
        prompt_name="cold_email",
    )

    return text or FALLBACK_EMAIL


def build_prompt(data: NormalizedApplicantInput) -> str:
    """Fill the cold email prompt template from normalized applicant data."""
    return cold_email.USER_PROMPT_TEMPLATE.format(
        name=data.name,
        role=data.role,
        target_role=data.target_role,
        company_name=data.company_name,
        experience=data.experience,
        skills=", ".join(data.skills),
        projects="; ".join(data.projects),
        tone=data.tone.value,
        extra_context=_extra_context(data),
    )


# ── Helpers ──────────────────────────────────────────────────────────────────


def _extra_context(data: NormalizedApplicantInput) -> str:
    """Optional context lines for the recruiter and signature links."""
    lines = []
    if data.recruiter_name:
        lines.append(cold_email.RECRUITER_LINE.format(recruiter_name=data.recruiter_name))
    if data.portfolio_link:
        lines.append(cold_email.PORTFOLIO_LINE.format(portfolio_link=data.portfolio_link))
    if data.linkedin_link:
        lines.append(cold_email.LINKEDIN_LINE.format(linkedin_link=data.linkedin_link))
    return "".join(lines)
