"""Skill lexicon rows and extracted-skill records."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class SkillCategory(str, Enum):
    LANGUAGE = "language"
    FRAMEWORK = "framework"
    TOOL = "tool"
    SOFT_SKILL = "soft_skill"
    DOMAIN = "domain"


class MatchType(str, Enum):
    EXACT = "exact"  # canonical spelling found
    SYNONYM = "synonym"  # alternate spelling found


class SkillEntry(BaseModel):
    """A single lexicon row: canonical name, category and synonyms."""
    model_config = ConfigDict(frozen=True)

    canonical: str
    category: SkillCategory
    synonyms: tuple[str, ...] = ()

    @property
    def surface_forms(self) -> tuple[str, ...]:
        return (self.canonical, *self.synonyms)


class ExtractedSkill(BaseModel):
    """A lexicon skill found in a document."""
    model_config = ConfigDict(frozen=True)

    canonical: str
    category: SkillCategory
    match_type: MatchType
    source_section: str | None = None  # first section the skill appeared in
