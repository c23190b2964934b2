"""Job-description analyzer and resume-vs-JD matching.

A skill is implied-required when a required qualifier ("required", "must
have", ...) sits within QUALIFIER_WINDOW tokens of it, unless a preferred
qualifier ("nice to have", "bonus", ...) is strictly closer. Everything
else the description mentions is implied-preferred.
"""

import logging
import re

from pydantic import ConfigDict, StrictStr, validate_call

from models.schemas.jd_analysis import JDAnalysis, SeniorityHint
from models.schemas.match_result import MatchResult
from services import bullet_parser, matcher, section_parser, skill_extractor
from services.lexicon import SkillLexicon, ensure_lexicon
from services.matcher import format_listing
from services.skill_extractor import SkillSpan

logger = logging.getLogger(__name__)

QUALIFIER_WINDOW = 8

REQUIRED_QUALIFIERS: tuple[tuple[str, ...], ...] = (
    ("required",),
    ("requirement",),
    ("requirements",),
    ("must", "have"),
    ("mandatory",),
    ("essential",),
    ("minimum", "qualifications"),
)

PREFERRED_QUALIFIERS: tuple[tuple[str, ...], ...] = (
    ("preferred",),
    ("nice", "to", "have"),
    ("good", "to", "have"),
    ("bonus",),
    ("plus",),
    ("optional",),
)

# "3+ years", "5-7 years", "2 yrs", "1.5 years", "3 to 5 years"
YEARS_RE = re.compile(
    r"(?<![\d.])(\d{1,2}(?:\.\d)?)"
    r"(?:\s*(?:-|–|—|to)\s*(\d{1,2}(?:\.\d)?))?"
    r"\s*\+?\s*(?:years?|yrs?)\b",
    re.IGNORECASE,
)
MAX_PLAUSIBLE_YEARS = 40

# Degree keywords, reported under the label on the left
EDUCATION_PATTERNS: tuple[tuple[str, re.Pattern], ...] = tuple(
    (label, re.compile(pattern, re.IGNORECASE))
    for label, pattern in (
        ("phd", r"\bph\.?\s?d\b|\bdoctorate\b"),
        ("m.tech", r"\bm\.?\s?tech\b"),
        ("m.e", r"\bm\.e\b"),
        ("mba", r"\bmba\b"),
        ("mca", r"\bmca\b"),
        ("master's degree", r"\bmaster'?s?\b|\bpost\s?graduate\b"),
        ("b.tech", r"\bb\.?\s?tech\b"),
        ("b.e", r"\bb\.e\b"),
        ("bca", r"\bbca\b"),
        ("b.sc", r"\bb\.?\s?sc\b"),
        ("bachelor's degree", r"\bbachelor'?s?\b|\bundergraduate\b"),
        ("degree", r"\bdegree\b"),
    )
)

# Base-form verbs that open a responsibility line
RESPONSIBILITY_VERBS = frozenset({
    "analyze", "architect", "assist", "automate", "build", "collaborate",
    "contribute", "coordinate", "create", "debug", "define", "deliver",
    "deploy", "design", "develop", "document", "drive", "ensure", "help",
    "implement", "improve", "integrate", "lead", "maintain", "manage",
    "mentor", "monitor", "optimize", "own", "participate", "partner",
    "perform", "research", "review", "support", "test", "troubleshoot",
    "work", "write",
})
MAX_RESPONSIBILITIES = 10
MAX_RESPONSIBILITY_CHARS = 200

ROLE_TITLE_PATTERNS = (
    re.compile(r"^\s*(?:job\s+title|position|role|designation)\s*[:\-–]\s*(.+?)\s*$",
               re.IGNORECASE | re.MULTILINE),
    re.compile(r"\b(?:hiring|looking\s+for|seeking)\s+(?:an?|the)\s+"
               r"(.+?)(?=\s+(?:to|for|who|with|at|in|that)\b|[.,;:!\n]|$)",
               re.IGNORECASE | re.MULTILINE),
)
MAX_TITLE_CHARS = 60

# Match-score bands for the JD verdict
STRONG_MATCH = 80
GOOD_MATCH = 60
KEY_REQUIRED_SHARE = 0.8


def _find_phrases(tokens: list[str], phrases: tuple[tuple[str, ...], ...]) -> list[tuple[int, int]]:
    """(start, end) token spans of every qualifier occurrence."""
    spans = []
    for i in range(len(tokens)):
        for phrase in phrases:
            end = i + len(phrase)
            if tuple(tokens[i:end]) == phrase:
                spans.append((i, end))
    return spans


def _outside_skills(
    qualifiers: list[tuple[int, int]], spans: list[SkillSpan]
) -> list[tuple[int, int]]:
    return [
        (start, end) for start, end in qualifiers
        if not any(start < s.end and s.start < end for s in spans)
    ]


def _distance(skill: SkillSpan, qualifier: tuple[int, int]) -> int:
    """Token distance between the nearest edges of two spans (0 if they touch)."""
    q_start, q_end = qualifier
    if q_end <= skill.start:
        return skill.start - (q_end - 1)
    if q_start >= skill.end:
        return q_start - (skill.end - 1)
    return 0


def _nearest(skill: SkillSpan, qualifiers: list[tuple[int, int]]) -> int | None:
    distances = [_distance(skill, q) for q in qualifiers]
    in_window = [d for d in distances if d <= QUALIFIER_WINDOW]
    return min(in_window) if in_window else None


def classify_skills(
    tokens: list[str], lexicon: SkillLexicon | None = None
) -> tuple[list[str], list[str]]:
    """Split the skills mentioned in tokens into (required, preferred).

    A skill mentioned several times is required if any mention qualifies.
    Both lists follow first-mention order and never share a skill.
    """
    lexicon = ensure_lexicon(lexicon)
    spans = skill_extractor.find_skill_spans(tokens, lexicon)
    # "plus" inside "c plus plus" is part of the skill, not a qualifier
    required_q = _outside_skills(_find_phrases(tokens, REQUIRED_QUALIFIERS), spans)
    preferred_q = _outside_skills(_find_phrases(tokens, PREFERRED_QUALIFIERS), spans)

    order: list[str] = []
    required: set[str] = set()
    for span in spans:
        if span.canonical not in order:
            order.append(span.canonical)
        req = _nearest(span, required_q)
        if req is None:
            continue
        pref = _nearest(span, preferred_q)
        if pref is None or pref >= req:
            required.add(span.canonical)

    return (
        [s for s in order if s in required],
        [s for s in order if s not in required],
    )


def extract_years(text: str) -> tuple[float, float | None] | None:
    """(lower, upper) bounds of the most demanding year phrase, or None.

    The most demanding phrase is the one with the highest lower bound.
    """
    best: tuple[float, float | None] | None = None
    for m in YEARS_RE.finditer(text):
        low = float(m.group(1))
        high = float(m.group(2)) if m.group(2) else None
        if low > MAX_PLAUSIBLE_YEARS or (high is not None and high > MAX_PLAUSIBLE_YEARS):
            continue
        if high is not None and high < low:
            low, high = high, low
        if best is None or low > best[0]:
            best = (low, high)
    return best


def seniority_from_years(years: float | None) -> SeniorityHint:
    if years is None:
        return SeniorityHint.UNKNOWN
    if years < 2:
        return SeniorityHint.ENTRY
    if years < 6:
        return SeniorityHint.MID
    return SeniorityHint.SENIOR


def extract_education_requirements(text: str) -> list[str]:
    """Degree labels mentioned in the description, in order of first mention."""
    hits = []
    for label, pattern in EDUCATION_PATTERNS:
        m = pattern.search(text)
        if m:
            hits.append((m.start(), label))
    labels = [label for _, label in sorted(hits)]
    # A bare "degree" only matters when no specific degree is named
    if len(labels) > 1 and "degree" in labels:
        labels.remove("degree")
    return labels


def extract_responsibilities(text: str) -> list[str]:
    """Lines (bulleted or not) that open with a responsibility verb."""
    bullets = set(bullet_parser.extract_bullets(text))
    found = []
    for line in text.split("\n"):
        stripped = line.strip().lstrip("".join(bullet_parser.BULLET_MARKERS) + " ").strip()
        if not stripped or len(stripped) > MAX_RESPONSIBILITY_CHARS:
            continue
        first = stripped.split(maxsplit=1)[0].lower().rstrip(",:;")
        if first in RESPONSIBILITY_VERBS or (
            stripped in bullets and first in bullet_parser.ACTION_VERBS
        ):
            if stripped not in found:
                found.append(stripped)
        if len(found) >= MAX_RESPONSIBILITIES:
            break
    return found


def extract_role_title(text: str) -> str | None:
    for pattern in ROLE_TITLE_PATTERNS:
        m = pattern.search(text)
        if not m:
            continue
        title = m.group(1).strip(" -–:")
        if title and len(title) <= MAX_TITLE_CHARS:
            return title
    return None


@validate_call(config=ConfigDict(arbitrary_types_allowed=True))
def analyze_job_description(
    description: StrictStr, lexicon: SkillLexicon | None = None
) -> JDAnalysis:
    """Derive implied skills, seniority and other signals from a job description."""
    lexicon = ensure_lexicon(lexicon)
    if not description.strip():
        return JDAnalysis(warnings=["Job description is empty; nothing to analyze."])

    tokens = lexicon.tokenize(description)
    required, preferred = classify_skills(tokens, lexicon)

    warnings = []
    if not required and not preferred:
        warnings.append("No known skills were found in the job description.")

    years = extract_years(description)
    min_years, max_years = years if years else (None, None)

    analysis = JDAnalysis(
        implied_required=required,
        implied_preferred=preferred,
        seniority_hint=seniority_from_years(min_years),
        min_years=min_years,
        max_years=max_years,
        education_requirements=extract_education_requirements(description),
        responsibilities=extract_responsibilities(description),
        role_title=extract_role_title(description),
        warnings=warnings,
    )
    logger.debug(
        "JD analyzed: %d required, %d preferred, seniority=%s",
        len(required), len(preferred), analysis.seniority_hint.value,
    )
    return analysis


@validate_call(config=ConfigDict(arbitrary_types_allowed=True))
def match_resume_with_jd(
    resume_text: StrictStr,
    jd_analysis: JDAnalysis,
    lexicon: SkillLexicon | None = None,
) -> MatchResult:
    """Match a resume's skills against a JD's implied required/preferred skills."""
    lexicon = ensure_lexicon(lexicon)
    sections = section_parser.segment(resume_text)
    skills = skill_extractor.extract_from_sections(sections, lexicon)
    return matcher.match(
        [s.canonical for s in skills],
        jd_analysis.implied_required,
        jd_analysis.implied_preferred,
        lexicon,
    )


def jd_match_recommendations(match: MatchResult, jd_analysis: JDAnalysis) -> list[str]:
    """Suggestions for tailoring a resume to one job description."""
    targets = len(jd_analysis.implied_required) + len(jd_analysis.implied_preferred)
    if not targets:
        return ["The job description names no known skills to match against."]

    recs = []
    required = len(jd_analysis.implied_required)
    if match.missing_required:
        recs.append(
            "Add these required skills from the job description: "
            f"{format_listing(match.missing_required)}."
        )
        if required - len(match.missing_required) < required * KEY_REQUIRED_SHARE:
            recs.append("Your resume is missing key required skills from the job description.")
    if match.missing_preferred:
        recs.append(
            f"Consider adding these preferred skills: {format_listing(match.missing_preferred)}."
        )
    if match.matched_skills:
        recs.append(
            "Skills from the job description already on your resume: "
            f"{format_listing(match.matched_skills)}."
        )

    if match.score >= STRONG_MATCH:
        recs.append("Strong match: your resume aligns well with this job description.")
    elif match.score >= GOOD_MATCH:
        recs.append("Good match: a few improvements could make it stronger.")
    else:
        recs.append("Low match: consider tailoring your resume for this role.")
    return recs
