from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_lexicon
from config import settings
from models.requests import AnalyzeJDRequest, AnalyzeResumeRequest, MatchJDRequest
from models.responses import HealthResponse, JDMatchResponse, RoleSummary
from models.schemas.jd_analysis import JDAnalysis
from models.schemas.resume_analysis import ResumeAnalysis
from services import jd_analyzer, resume_analyzer
from services.lexicon import SkillLexicon
from services.role_profiles import get_all_roles

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _check_length(text: str, limit: int, label: str) -> None:
    if len(text) > limit:
        raise HTTPException(
            status_code=400, detail=f"{label} too long (max {limit} chars)"
        )


@router.get("/health", response_model=HealthResponse)
async def health(lexicon: SkillLexicon = Depends(get_lexicon)):
    return HealthResponse(status="ok", lexicon_size=len(lexicon))


@router.get("/roles", response_model=list[RoleSummary])
async def roles():
    return [
        RoleSummary(
            id=role.id,
            name=role.name,
            description=role.description,
            weights=role.weights,
            must_have_skills=role.must_have_skills,
            good_to_have_skills=role.good_to_have_skills,
        )
        for role in get_all_roles()
    ]


@router.post("/resume/analyze", response_model=ResumeAnalysis)
@limiter.limit(settings.rate_limit)
async def analyze_resume(
    request: Request,
    body: AnalyzeResumeRequest,
    lexicon: SkillLexicon = Depends(get_lexicon),
):
    _check_length(body.resume_text, settings.max_resume_chars, "Resume text")
    if body.requirements and body.requirements.description:
        _check_length(body.requirements.description, settings.max_jd_chars, "Job description")
    return resume_analyzer.analyze_resume(
        body.resume_text,
        body.profile,
        requirements=body.requirements,
        role_id=body.role_id,
        lexicon=lexicon,
    )


@router.post("/jd/analyze", response_model=JDAnalysis)
@limiter.limit(settings.rate_limit)
async def analyze_jd(
    request: Request,
    body: AnalyzeJDRequest,
    lexicon: SkillLexicon = Depends(get_lexicon),
):
    _check_length(body.job_description, settings.max_jd_chars, "Job description")
    return jd_analyzer.analyze_job_description(body.job_description, lexicon=lexicon)


@router.post("/jd/match", response_model=JDMatchResponse)
@limiter.limit(settings.rate_limit)
async def match_jd(
    request: Request,
    body: MatchJDRequest,
    lexicon: SkillLexicon = Depends(get_lexicon),
):
    _check_length(body.resume_text, settings.max_resume_chars, "Resume text")
    jd_analysis = body.jd_analysis
    if jd_analysis is None:
        _check_length(body.job_description, settings.max_jd_chars, "Job description")
        jd_analysis = jd_analyzer.analyze_job_description(body.job_description, lexicon=lexicon)
    match = jd_analyzer.match_resume_with_jd(body.resume_text, jd_analysis, lexicon=lexicon)
    return JDMatchResponse(
        jd_analysis=jd_analysis,
        match=match,
        recommendations=jd_analyzer.jd_match_recommendations(match, jd_analysis),
    )
