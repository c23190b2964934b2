"""Resume section segmentation and contact extraction."""

import re
from dataclasses import dataclass

from models.schemas.resume_analysis import ContactInfo
from services.text_normalizer import clean

HEADER_SECTION = "header"

# Heading keywords per canonical section. A line is a heading only when its
# cleaned text equals one of these phrases exactly.
SECTION_KEYWORDS: dict[str, frozenset[str]] = {
    "contact": frozenset({
        "contact", "contacts", "contact info", "contact information",
        "contact details", "personal details", "personal information",
        "personal info",
    }),
    "summary": frozenset({
        "summary", "professional summary", "career summary", "profile",
        "professional profile", "objective", "career objective", "about me",
    }),
    "education": frozenset({
        "education", "educational background", "educational qualifications",
        "academic background", "academic qualifications", "academics",
        "academic details", "qualifications", "education and training",
    }),
    "experience": frozenset({
        "experience", "work experience", "professional experience",
        "employment", "employment history", "work history", "internships",
        "internship", "internship experience", "industrial experience",
        "relevant experience", "experience and internships",
    }),
    "projects": frozenset({
        "projects", "project", "academic projects", "personal projects",
        "key projects", "selected projects", "major projects",
        "technical projects", "project work", "portfolio",
    }),
    "skills": frozenset({
        "skills", "technical skills", "key skills", "core skills",
        "skills and interests", "skill set", "skillset", "core competencies",
        "competencies", "technologies", "tech stack", "technical proficiency",
        "programming languages", "tools and technologies",
    }),
    "certifications": frozenset({
        "certifications", "certification", "certificates", "courses",
        "certifications and courses", "licenses and certifications",
        "online courses", "trainings",
    }),
    "achievements": frozenset({
        "achievements", "key achievements", "awards", "honors",
        "awards and achievements", "honors and awards", "accomplishments",
        "extracurricular activities", "extra curricular activities",
        "positions of responsibility",
    }),
    "publications": frozenset({
        "publications", "publication", "research", "research papers",
        "papers", "research experience", "research and publications",
    }),
}

SECTION_NAMES: tuple[str, ...] = tuple(SECTION_KEYWORDS)

HEADING_MAX_CHARS = 60
_SENTENCE_END = (".", "!", "?", ";", ",")

# Leading bullets / numbering and trailing ":" or dashes around a heading
_DECORATION_RE = re.compile(r"^[\s\W\d]*?(?=[a-z])|[\s:\-–—|=_*#]+$")
_NON_WORD_RE = re.compile(r"[^a-z0-9&]+")

# Contact info patterns
EMAIL_RE = re.compile(r"[\w.+-]+@[\w-]+\.[\w.-]+")
PHONE_RE = re.compile(r"(?<!\w)\+?\d[\d\s\-().]{8,18}\d(?!\w)")
LINKEDIN_RE = re.compile(r"linkedin\.com/in/[\w-]+", re.IGNORECASE)
GITHUB_RE = re.compile(r"github\.com/[\w-]+", re.IGNORECASE)
_PHONE_DIGITS = (10, 15)


@dataclass(frozen=True)
class HeadingMatch:
    section: str
    keyword: str


@dataclass(frozen=True)
class NotHeading:
    reason: str


def _heading_key(line: str) -> str:
    """Reduce a heading candidate to comparable words ("& " becomes "and")."""
    text = _DECORATION_RE.sub("", clean(line))
    text = text.replace("&", " and ")
    return " ".join(_NON_WORD_RE.sub(" ", text).split())


_KEYWORD_INDEX: dict[str, str] = {
    keyword: section
    for section, keywords in SECTION_KEYWORDS.items()
    for keyword in keywords
}


def classify_heading(line: str) -> HeadingMatch | NotHeading:
    """Decide whether a single line is a section heading."""
    stripped = line.strip()
    if not stripped:
        return NotHeading("blank")
    if len(stripped) > HEADING_MAX_CHARS:
        return NotHeading("too long")
    if stripped.endswith(_SENTENCE_END):
        return NotHeading("sentence punctuation")

    key = _heading_key(stripped)
    section = _KEYWORD_INDEX.get(key)
    if section is None:
        return NotHeading("unknown heading")
    return HeadingMatch(section=section, keyword=key)


def segment(text: str) -> dict[str, str]:
    """Split resume text into named sections.

    Returns a dict mapping section name -> section body in document order.
    Text above the first recognised heading goes into 'header'. Lines that
    look like headings but are not recognised stay in the current section.
    """
    sections: dict[str, list[str]] = {}
    current = HEADER_SECTION

    for line in text.splitlines():
        result = classify_heading(line)
        if isinstance(result, HeadingMatch):
            current = result.section
            sections.setdefault(current, [])
            continue
        sections.setdefault(current, []).append(line)

    bodies = {name: "\n".join(lines).strip() for name, lines in sections.items()}
    if not bodies.get(HEADER_SECTION):
        bodies.pop(HEADER_SECTION, None)
    return bodies


def section_presence(sections: dict[str, str]) -> dict[str, bool]:
    """Map every known section (and the header) to whether it has content."""
    names = (HEADER_SECTION, *SECTION_NAMES)
    return {name: bool(sections.get(name, "").strip()) for name in names}


def _find_phone(text: str) -> str | None:
    for match in PHONE_RE.finditer(text):
        digits = sum(ch.isdigit() for ch in match.group())
        if _PHONE_DIGITS[0] <= digits <= _PHONE_DIGITS[1]:
            return match.group().strip()
    return None


def extract_contact_info(text: str) -> ContactInfo:
    """Extract contact information from resume text."""
    email_match = EMAIL_RE.search(text)
    linkedin_match = LINKEDIN_RE.search(text)
    github_match = GITHUB_RE.search(text)

    return ContactInfo(
        email=email_match.group() if email_match else None,
        phone=_find_phone(text),
        linkedin=linkedin_match.group() if linkedin_match else None,
        github=github_match.group() if github_match else None,
    )
