"""Job-Description Analyzer output."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class SeniorityHint(str, Enum):
    ENTRY = "entry"  # 0-1 years
    MID = "mid"  # 2-5 years
    SENIOR = "senior"  # 6+ years
    UNKNOWN = "unknown"  # no year phrase found


class JDAnalysis(BaseModel):
    """Skills and signals implied by a job description.

    `implied_required` and `implied_preferred` are disjoint and ordered by
    first mention in the description.
    """
    model_config = ConfigDict(frozen=True)

    implied_required: list[str] = []
    implied_preferred: list[str] = []
    seniority_hint: SeniorityHint = SeniorityHint.UNKNOWN
    min_years: float | None = None
    max_years: float | None = None
    education_requirements: list[str] = []
    responsibilities: list[str] = []
    role_title: str | None = None
    warnings: list[str] = []
