"""Resume analyzer: skills, structural completeness and requirement match.

Pipeline:
1. Section segmentation
2. Per-section normalization and skill extraction
3. Structural checks weighted by the selected role profile
4. Requirement / role-target matching
5. Warnings and recommendations
"""

import logging
import re

from pydantic import ConfigDict, StrictStr, validate_call

from models.schemas.match_result import MatchResult
from models.schemas.profile import JobRequirements, StudentProfile
from models.schemas.resume_analysis import ContactInfo, ResumeAnalysis
from models.schemas.skills import ExtractedSkill
from services import bullet_parser, jd_analyzer, matcher, section_parser, skill_extractor
from services.lexicon import SkillLexicon, ensure_lexicon
from services.matcher import format_listing
from services.role_profiles import (
    CHECK_NAMES,
    RoleProfile,
    get_default_profile,
    get_role_profile,
)

logger = logging.getLogger(__name__)

# Publication wording counted even without a dedicated section
PUBLICATION_RE = re.compile(
    r"\b(?:publications?|published|ieee|acm|springer|elsevier|conference|"
    r"journal|arxiv|doi|proceedings)\b",
    re.IGNORECASE,
)


def _contact_present(sections: dict[str, str]) -> bool:
    """Email or phone in the header or a contact section."""
    text = "\n".join(
        sections.get(name, "") for name in (section_parser.HEADER_SECTION, "contact")
    )
    contact = section_parser.extract_contact_info(text)
    return bool(contact.email or contact.phone)


def run_checks(
    resume_text: str,
    sections: dict[str, str],
    word_count: int,
    achievements: list[str],
    profile: RoleProfile,
) -> dict[str, bool]:
    """Evaluate every structural check for one resume."""
    present = section_parser.section_presence(sections)
    return {
        "contact_info": _contact_present(sections),
        "education": present["education"],
        "experience_or_projects": present["experience"] or present["projects"],
        "quantified_achievement": bool(achievements),
        "length": profile.min_words <= word_count <= profile.max_words,
        "publications": present["publications"] or bool(PUBLICATION_RE.search(resume_text)),
    }


def structural_score(checks: dict[str, bool], profile: RoleProfile) -> int:
    """Sum of the weights of passing checks; each check is all or nothing."""
    return sum(profile.weights[name] for name in CHECK_NAMES if checks.get(name))


def _resolve_profile(role_id: str | None, warnings: list[str]) -> RoleProfile:
    if role_id is None or not role_id.strip():
        return get_default_profile()
    profile = get_role_profile(role_id)
    if profile is None:
        logger.warning("Unknown role id %r, falling back to default weights", role_id)
        warnings.append(f"Unknown role '{role_id}'; using default scoring weights.")
        return get_default_profile()
    return profile


def _split_profile_skills(
    profile: StudentProfile, found: set[str], lexicon: SkillLexicon
) -> tuple[list[str], list[str]]:
    """Profile skills backed by the resume text vs. ones it never mentions."""
    confirmed, unconfirmed = [], []
    for skill in profile.skill_list:
        canonical = lexicon.canonicalize(skill)
        if canonical is not None and canonical in found:
            confirmed.append(skill)
        else:
            unconfirmed.append(skill)
    return confirmed, unconfirmed


def requirement_targets(
    requirements: JobRequirements, lexicon: SkillLexicon
) -> tuple[list[str], list[str]]:
    """(required, preferred) targets for a drive.

    Explicit skill lists win; with both empty, the skills implied by the
    drive's job description are used instead.
    """
    if requirements.required_skills or requirements.preferred_skills:
        return requirements.required_skills, requirements.preferred_skills
    if requirements.description and requirements.description.strip():
        jd = jd_analyzer.analyze_job_description(requirements.description, lexicon)
        return jd.implied_required, jd.implied_preferred
    return [], []


def _recommendations(
    checks: dict[str, bool],
    sections: dict[str, bool],
    contact: ContactInfo,
    profile: RoleProfile,
    requirement_match: MatchResult | None,
    role_match: MatchResult | None,
    unconfirmed: list[str],
) -> list[str]:
    recs = []
    if not checks["contact_info"]:
        recs.append("Add an email address or phone number at the top of your resume.")
    if not contact.linkedin:
        recs.append("Add your LinkedIn profile URL.")
    if not contact.github and (sections["projects"] or profile.has_skill_targets):
        recs.append("Add your GitHub profile so reviewers can see your code.")
    if not checks["education"]:
        recs.append("Add an Education section with your degree, institution and CGPA.")
    if not checks["experience_or_projects"]:
        recs.append("Add an Experience or Projects section describing what you built.")
    if not sections["skills"]:
        recs.append("Add a dedicated Skills section listing your technical skills.")
    if not checks["quantified_achievement"]:
        recs.append(
            "Quantify your achievements with numbers, e.g. 'reduced page load time by 40%'."
        )
    if profile.weights["publications"] and not checks["publications"]:
        recs.append(f"Add a Publications section; it carries weight for {profile.name} roles.")
    if requirement_match and requirement_match.missing_required:
        recs.append(
            "Show evidence of these required skills: "
            f"{format_listing(requirement_match.missing_required)}."
        )
    if role_match and role_match.missing_required:
        recs.append(
            f"Build up skills expected of a {profile.name}: "
            f"{format_listing(role_match.missing_required)}."
        )
    if unconfirmed:
        recs.append(
            "Mention these profile skills in your resume with a project or role "
            f"that used them: {format_listing(unconfirmed)}."
        )
    return recs


def _empty_analysis(
    profile: StudentProfile,
    requirements: JobRequirements | None,
    role: RoleProfile,
    lexicon: SkillLexicon,
    warnings: list[str],
) -> ResumeAnalysis:
    warnings.append("Resume text is empty; nothing to analyze.")
    requirement_match = None
    if requirements is not None:
        requirement_match = matcher.match([], *requirement_targets(requirements, lexicon), lexicon)
    return ResumeAnalysis(
        sections=section_parser.section_presence({}),
        structural_score=0,
        checks={name: False for name in CHECK_NAMES},
        requirement_match=requirement_match,
        role_id=role.id,
        profile_skills_unconfirmed=profile.skill_list,
        warnings=warnings,
    )


@validate_call(config=ConfigDict(arbitrary_types_allowed=True))
def analyze_resume(
    resume_text: StrictStr,
    profile: StudentProfile,
    requirements: JobRequirements | None = None,
    role_id: StrictStr | None = None,
    lexicon: SkillLexicon | None = None,
) -> ResumeAnalysis:
    """Analyze one resume for a student, optionally against drive requirements.

    Malformed or empty content never raises: it yields failing checks and
    warnings. Wrong argument types raise pydantic.ValidationError.
    """
    lexicon = ensure_lexicon(lexicon)
    warnings: list[str] = []
    role = _resolve_profile(role_id, warnings)

    if requirements is not None and requirements.min_cgpa is not None:
        if profile.cgpa < requirements.min_cgpa:
            warnings.append(
                f"CGPA {profile.cgpa:g} is below the required minimum of "
                f"{requirements.min_cgpa:g}."
            )

    if not resume_text.strip():
        return _empty_analysis(profile, requirements, role, lexicon, warnings)

    # --- Layer 1: Sections ---
    sections = section_parser.segment(resume_text)
    presence = section_parser.section_presence(sections)

    # --- Layer 2: Skills ---
    skills: list[ExtractedSkill] = skill_extractor.extract_from_sections(sections, lexicon)
    found = [s.canonical for s in skills]
    if not skills:
        warnings.append("No known skills were found in the resume.")

    # --- Layer 3: Structural checks ---
    word_count = len(resume_text.split())
    achievements = bullet_parser.find_achievements(resume_text)
    checks = run_checks(resume_text, sections, word_count, achievements, role)
    score = structural_score(checks, role)

    if word_count < role.min_words:
        warnings.append(
            f"Resume is short ({word_count} words); aim for at least {role.min_words}."
        )
    elif word_count > role.max_words:
        warnings.append(
            f"Resume is long ({word_count} words); keep it under {role.max_words}."
        )

    # --- Layer 4: Matching ---
    requirement_match = None
    if requirements is not None:
        requirement_match = matcher.match(
            found, *requirement_targets(requirements, lexicon), lexicon
        )

    role_match = None
    if role.has_skill_targets:
        role_match = matcher.match(
            found, role.must_have_skills, role.good_to_have_skills, lexicon
        )

    confirmed, unconfirmed = _split_profile_skills(profile, set(found), lexicon)
    contact = section_parser.extract_contact_info(resume_text)

    logger.debug(
        "Resume analyzed: role=%s, %d skills, structural=%d, words=%d",
        role.id, len(skills), score, word_count,
    )

    return ResumeAnalysis(
        skills=skills,
        sections=presence,
        structural_score=score,
        checks=checks,
        requirement_match=requirement_match,
        role_id=role.id,
        role_match=role_match,
        contact=contact,
        word_count=word_count,
        achievements=achievements,
        profile_skills_confirmed=confirmed,
        profile_skills_unconfirmed=unconfirmed,
        recommendations=_recommendations(
            checks, presence, contact, role, requirement_match, role_match, unconfirmed
        ),
        warnings=warnings,
    )
