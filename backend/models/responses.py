from pydantic import BaseModel

from models.schemas.jd_analysis import JDAnalysis
from models.schemas.match_result import MatchResult


class HealthResponse(BaseModel):
    status: str = "ok"
    lexicon_size: int = 0


class RoleSummary(BaseModel):
    id: str
    name: str
    description: str = ""
    weights: dict[str, int] = {}
    must_have_skills: list[str] = []
    good_to_have_skills: list[str] = []


class JDMatchResponse(BaseModel):
    jd_analysis: JDAnalysis
    match: MatchResult
    recommendations: list[str] = []
