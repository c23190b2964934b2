"""Resume Analyzer output."""

from pydantic import BaseModel, ConfigDict, Field

from models.schemas.match_result import MatchResult
from models.schemas.skills import ExtractedSkill


class ContactInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    email: str | None = None
    phone: str | None = None
    linkedin: str | None = None
    github: str | None = None


class ResumeAnalysis(BaseModel):
    """Structured output of a single resume analysis run.

    `checks` holds the pass/fail result of every structural check; the
    `structural_score` is the sum of the weights of the passing checks
    under the profile named by `role_id`.
    """
    model_config = ConfigDict(frozen=True)

    skills: list[ExtractedSkill] = []
    sections: dict[str, bool] = {}
    structural_score: int = Field(0, ge=0, le=100)
    checks: dict[str, bool] = {}
    requirement_match: MatchResult | None = None
    role_id: str = "default"
    role_match: MatchResult | None = None
    contact: ContactInfo = ContactInfo()
    word_count: int = 0
    achievements: list[str] = []
    profile_skills_confirmed: list[str] = []
    profile_skills_unconfirmed: list[str] = []
    recommendations: list[str] = []
    warnings: list[str] = []
