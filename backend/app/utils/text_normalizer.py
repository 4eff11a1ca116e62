"""
Text normalizer — spelling correction and casing for applicant-supplied fields.

Every function here is pure and total: empty strings and missing optional
values pass straight through, and tokens not found in a correction table are
left as they were.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Optional

from app.models.email_models import ApplicantInput, NormalizedApplicantInput, Tone

# ── Correction Tables ────────────────────────────────────────────────────────

TITLE_CORRECTIONS = MappingProxyType({
    "senir": "Senior",
    "softwre": "Software",
    "enginer": "Engineer",
    "develper": "Developer",
    "programer": "Programmer",
    "arcitect": "Architect",
    "devops": "DevOps",
})

TERM_CORRECTIONS = MappingProxyType({
    "pythn": "Python",
    "javascipt": "JavaScript",
    "react": "React",
    "nod": "Node",
    "typescript": "TypeScript",
    "vue": "Vue.js",
})

# Applied in order, as plain substring replacements
EXPERIENCE_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("yrs", "years"),
    ("expernce", "experience"),
    ("dev", "development"),
)

TONE_SYNONYMS = MappingProxyType({
    "profesional": Tone.FORMAL,
    "formal": Tone.FORMAL,
    "friendly": Tone.FRIENDLY,
    "casual": Tone.FRIENDLY,
    "direct": Tone.DIRECT,
    "straight": Tone.DIRECT,
})


# ── Casing ───────────────────────────────────────────────────────────────────


def capitalize_words(text: str) -> str:
    """Uppercase the first letter of each word and lowercase the rest ("jOHN doe" → "John Doe")."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split(" "))


def capitalize_word_starts(text: str) -> str:
    """Uppercase the first letter of each word, keeping the rest as typed ("openAI labs" → "OpenAI Labs")."""
    return " ".join(word[:1].upper() + word[1:] for word in text.split(" "))


def capitalize_first(text: str) -> str:
    """Uppercase only the first character of the whole string."""
    return text[:1].upper() + text[1:]


# ── Corrections ──────────────────────────────────────────────────────────────


def correct_title(title: str) -> str:
    """Fix common job-title misspellings and title-case every word."""
    words = [TITLE_CORRECTIONS.get(word, word) for word in title.lower().split(" ")]
    return " ".join(capitalize_first(word) for word in words)


def correct_term(term: str) -> str:
    """Map a misspelled technology name to its canonical spelling."""
    return TERM_CORRECTIONS.get(term.lower(), term)


def correct_experience_text(text: str) -> str:
    """
    Expand abbreviations and fix typos in free-text experience.

    Replacements are case-sensitive and ignore word boundaries, so "dev"
    inside a longer word is expanded too ("devops" → "developmentops").
    """
    for old, new in EXPERIENCE_REPLACEMENTS:
        text = text.replace(old, new)
    return text


def normalize_tone(tone: Optional[str] = None) -> Tone:
    """Resolve a free-text tone to formal/friendly/direct, defaulting to formal."""
    if not tone:
        return Tone.FORMAL
    return TONE_SYNONYMS.get(tone.lower(), Tone.FORMAL)


# ── Whole Input ──────────────────────────────────────────────────────────────


def normalize_input(data: ApplicantInput) -> NormalizedApplicantInput:
    """Apply the per-field correction and casing rules to raw applicant data."""
    return NormalizedApplicantInput(
        name=capitalize_words(data.name),
        role=correct_title(data.role),
        skills=[correct_term(skill) for skill in data.skills],
        experience=correct_experience_text(data.experience),
        projects=[capitalize_first(project) for project in data.projects],
        portfolio_link=data.portfolio_link,
        linkedin_link=data.linkedin_link,
        company_name=capitalize_word_starts(data.company_name),
        target_role=correct_title(data.target_role),
        recruiter_name=capitalize_first(data.recruiter_name) if data.recruiter_name else None,
        tone=normalize_tone(data.tone),
    )
