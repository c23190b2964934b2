from pydantic import BaseModel, Field, model_validator

from models.schemas.jd_analysis import JDAnalysis
from models.schemas.profile import JobRequirements, StudentProfile


class AnalyzeResumeRequest(BaseModel):
    resume_text: str = Field(..., description="Plain text resume content")
    profile: StudentProfile
    requirements: JobRequirements | None = None
    role_id: str | None = Field(None, description="Role profile id, see GET /roles")


class AnalyzeJDRequest(BaseModel):
    job_description: str = Field(..., description="Job description text")


class MatchJDRequest(BaseModel):
    resume_text: str = Field(..., description="Plain text resume content")
    job_description: str | None = Field(None, description="Raw job description text")
    jd_analysis: JDAnalysis | None = Field(None, description="Result of a prior /jd/analyze call")

    @model_validator(mode="after")
    def _one_jd_source(self) -> "MatchJDRequest":
        if self.job_description is None and self.jd_analysis is None:
            raise ValueError("Provide either job_description or jd_analysis")
        return self
