"""Typed inputs and outputs of the resume analysis engine."""

from models.schemas.jd_analysis import JDAnalysis, SeniorityHint
from models.schemas.match_result import MatchResult
from models.schemas.profile import JobRequirements, StudentProfile
from models.schemas.resume_analysis import ContactInfo, ResumeAnalysis
from models.schemas.skills import ExtractedSkill, MatchType, SkillCategory, SkillEntry

__all__ = [
    "ContactInfo",
    "ExtractedSkill",
    "JDAnalysis",
    "JobRequirements",
    "MatchResult",
    "MatchType",
    "ResumeAnalysis",
    "SeniorityHint",
    "SkillCategory",
    "SkillEntry",
    "StudentProfile",
]
