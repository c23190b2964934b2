"""Skill-set matcher: required/preferred coverage score and gap lists.

score = 100 * (matched_required / max(1, total_required)) * 0.7
      + 100 * (matched_preferred / max(1, total_preferred)) * 0.3

With no required and no preferred targets the score is defined as 100.
"""

import logging
from typing import Iterable, Sequence

from models.schemas.match_result import MatchResult
from services.lexicon import SkillLexicon, ensure_lexicon

logger = logging.getLogger(__name__)

W_REQUIRED = 0.7
W_PREFERRED = 0.3

MAX_LISTED_SKILLS = 5


def _key(term: str, lexicon: SkillLexicon) -> tuple[str, bool]:
    """Comparison key for a skill term and whether the lexicon recognised it."""
    canonical = lexicon.canonicalize(term)
    if canonical is not None:
        return canonical, True
    return " ".join(lexicon.tokenize(term)), False


def _targets(
    terms: Sequence[str], lexicon: SkillLexicon
) -> list[tuple[str, str, bool]]:
    """(key, original spelling, recognised) per distinct non-blank target."""
    seen: set[str] = set()
    targets = []
    for term in terms:
        original = term.strip()
        if not original:
            continue
        key, recognised = _key(original, lexicon)
        if not key or key in seen:
            continue
        seen.add(key)
        targets.append((key, original, recognised))
    return targets


def format_listing(items: list[str]) -> str:
    """Comma-joined items, truncated after MAX_LISTED_SKILLS."""
    shown = ", ".join(items[:MAX_LISTED_SKILLS])
    if len(items) > MAX_LISTED_SKILLS:
        shown += f" (+{len(items) - MAX_LISTED_SKILLS} more)"
    return shown


def match(
    candidate_skills: Iterable[str],
    required: Sequence[str],
    preferred: Sequence[str],
    lexicon: SkillLexicon | None = None,
) -> MatchResult:
    """Compare a candidate skill set against required and preferred targets.

    Every term is canonicalized through the lexicon first, so synonyms on
    either side resolve to the same skill. Duplicates count once within
    each list; the two lists are scored independently.
    """
    lexicon = ensure_lexicon(lexicon)

    candidates = {_key(s, lexicon)[0] for s in candidate_skills if s and s.strip()}
    candidates.discard("")

    required_targets = _targets(required, lexicon)
    preferred_targets = _targets(preferred, lexicon)

    if not required_targets and not preferred_targets:
        return MatchResult(score=100.0)

    matched: list[str] = []
    missing_required: list[str] = []
    missing_preferred: list[str] = []
    unrecognized: list[str] = []
    matched_required = matched_preferred = 0

    for key, original, recognised in required_targets:
        if not recognised:
            unrecognized.append(original)
        if key in candidates:
            matched.append(key if recognised else original)
            matched_required += 1
        else:
            missing_required.append(original)

    for key, original, recognised in preferred_targets:
        if not recognised and original not in unrecognized:
            unrecognized.append(original)
        if key in candidates:
            label = key if recognised else original
            if label not in matched:
                matched.append(label)
            matched_preferred += 1
        else:
            missing_preferred.append(original)

    score = (
        100 * (matched_required / max(1, len(required_targets))) * W_REQUIRED
        + 100 * (matched_preferred / max(1, len(preferred_targets))) * W_PREFERRED
    )
    score = round(min(100.0, max(0.0, score)), 2)
    logger.debug(
        "Match: %d/%d required, %d/%d preferred -> %.2f",
        matched_required, len(required_targets),
        matched_preferred, len(preferred_targets), score,
    )

    return MatchResult(
        score=score,
        matched_skills=matched,
        missing_required=missing_required,
        missing_preferred=missing_preferred,
        unrecognized=unrecognized,
    )
