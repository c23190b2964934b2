"""Matcher output: score plus matched and missing skill lists."""

from pydantic import BaseModel, ConfigDict, Field


class MatchResult(BaseModel):
    """Structured output of the Matcher.

    score = 100 * required_ratio * 0.7 + 100 * preferred_ratio * 0.3,
    or exactly 100 when there are no targets at all.
    """
    model_config = ConfigDict(frozen=True)

    score: float = Field(0.0, ge=0.0, le=100.0)
    matched_skills: list[str] = []  # required matches first
    missing_required: list[str] = []  # input order and spelling
    missing_preferred: list[str] = []
    unrecognized: list[str] = []  # targets with no lexicon entry
