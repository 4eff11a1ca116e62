from pydantic import BaseModel, Field
from typing import Optional
from enum import Enum


class Tone(str, Enum):
    """Stylistic register of the generated email."""

    FORMAL = "formal"
    FRIENDLY = "friendly"
    DIRECT = "direct"


# ── Applicant Models ────────────────────────────────────────────────────────


class ApplicantInput(BaseModel):
    """Raw applicant data as submitted by the form (camelCase on the wire)."""

    name: str
    role: str
    skills: list[str] = []
    experience: str = ""
    projects: list[str] = []
    portfolio_link: Optional[str] = Field(None, alias="portfolioLink")
    linkedin_link: Optional[str] = Field(None, alias="linkedinLink")
    company_name: str = Field(alias="companyName")
    target_role: str = Field(alias="targetRole")
    recruiter_name: Optional[str] = Field(None, alias="recruiterName")
    tone: Optional[str] = None

    model_config = {"populate_by_name": True, "frozen": True}


class NormalizedApplicantInput(BaseModel):
    """Applicant data after spelling correction and casing rules."""

    name: str
    role: str
    skills: list[str]
    experience: str
    projects: list[str]
    portfolio_link: Optional[str] = None
    linkedin_link: Optional[str] = None
    company_name: str
    target_role: str
    recruiter_name: Optional[str] = None
    tone: Tone = Tone.FORMAL

    model_config = {"frozen": True}


class GenerationConfig(BaseModel):
    """Which provider/model to call, and optionally with which key."""

    provider: str = "groq"
    api_key: Optional[str] = None
    model: Optional[str] = None

    model_config = {"frozen": True}


# ── Response Models ─────────────────────────────────────────────────────────


class EmailGenerateResponse(BaseModel):
    email: str


class ErrorResponse(BaseModel):
    error: str
