"""Inputs supplied by the persistence layer: student profile and drive requirements."""

from pydantic import BaseModel, ConfigDict, Field


class StudentProfile(BaseModel):
    """Structured student record. Read-only to the engine."""
    model_config = ConfigDict(frozen=True)

    cgpa: float = Field(..., ge=0.0, le=10.0)
    branch: str
    backlogs: int = Field(0, ge=0)
    skills: str | None = None  # free text, comma-separated

    @property
    def skill_list(self) -> list[str]:
        """Profile skills split on commas, blanks dropped, order kept."""
        if not self.skills:
            return []
        return [s.strip() for s in self.skills.split(",") if s.strip()]


class JobRequirements(BaseModel):
    """Fixed requirement set for a hiring drive.

    When both skill lists are empty, the skills implied by `description`
    become the targets.
    """
    model_config = ConfigDict(frozen=True)

    required_skills: list[str] = []
    preferred_skills: list[str] = []
    min_cgpa: float | None = Field(None, ge=0.0, le=10.0)
    description: str | None = None
