"""Lexicon-based skill extraction with longest-match-wins.

The scan is a single left-to-right sliding window: at each token the
lexicon phrases that start with it are tried longest first, and a match
consumes its whole span. "react native developer" therefore yields
"react native" and never an extra "react".
"""

import logging
from dataclasses import dataclass
from typing import Sequence

from models.schemas.skills import ExtractedSkill, MatchType
from services.lexicon import SkillLexicon, ensure_lexicon

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SkillSpan:
    """A lexicon phrase matched at tokens[start:end]."""
    canonical: str
    match_type: MatchType
    start: int
    end: int


def find_skill_spans(
    tokens: Sequence[str], lexicon: SkillLexicon | None = None
) -> list[SkillSpan]:
    """Return every non-overlapping lexicon match in token order."""
    lexicon = ensure_lexicon(lexicon)
    spans: list[SkillSpan] = []
    n = len(tokens)
    i = 0
    while i < n:
        matched = None
        for phrase in lexicon.phrases_starting_with(tokens[i]):
            end = i + len(phrase)
            if end <= n and tuple(tokens[i:end]) == phrase:
                matched = phrase
                break
        if matched is None:
            i += 1
            continue
        canonical, match_type = lexicon.resolve_phrase(matched)
        spans.append(SkillSpan(canonical, match_type, i, i + len(matched)))
        i += len(matched)
    return spans


def extract(
    tokens: Sequence[str],
    lexicon: SkillLexicon | None = None,
    section_hint: str | None = None,
) -> list[ExtractedSkill]:
    """Extract canonical skills from tokens, one entry per canonical name.

    The first occurrence decides both `match_type` and `source_section`.
    """
    lexicon = ensure_lexicon(lexicon)
    found: dict[str, ExtractedSkill] = {}
    for span in find_skill_spans(tokens, lexicon):
        if span.canonical in found:
            continue
        entry = lexicon.get(span.canonical)
        found[span.canonical] = ExtractedSkill(
            canonical=span.canonical,
            category=entry.category,
            match_type=span.match_type,
            source_section=section_hint,
        )
    return list(found.values())


def merge_skills(*groups: Sequence[ExtractedSkill]) -> list[ExtractedSkill]:
    """Merge skill lists keyed by canonical name; earlier groups win."""
    merged: dict[str, ExtractedSkill] = {}
    for group in groups:
        for skill in group:
            merged.setdefault(skill.canonical, skill)
    return list(merged.values())


def extract_from_sections(
    sections: dict[str, str], lexicon: SkillLexicon | None = None
) -> list[ExtractedSkill]:
    """Extract skills section by section, in document order, and merge them.

    Each section is normalized on its own so tokens never straddle a
    section boundary.
    """
    lexicon = ensure_lexicon(lexicon)
    per_section = [
        extract(lexicon.tokenize(body), lexicon, section_hint=name)
        for name, body in sections.items()
    ]
    skills = merge_skills(*per_section)
    logger.debug("Extracted %d skills from %d sections", len(skills), len(sections))
    return skills


def extract_from_text(text: str, lexicon: SkillLexicon | None = None) -> list[ExtractedSkill]:
    """Extract skills from an unsegmented document."""
    lexicon = ensure_lexicon(lexicon)
    return extract(lexicon.tokenize(text), lexicon)
