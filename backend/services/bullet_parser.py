"""Bullet extraction and quantified-achievement detection."""

import re

# Bullet markers: standard + expanded unicode set
BULLET_MARKERS = frozenset("•-–—►▪✓*○◆⚫→▸▹◇■□●")

# Strong action verbs used to anchor achievement metrics
ACTION_VERBS = frozenset({
    "accelerated", "achieved", "analyzed", "architected", "automated",
    "boosted", "built", "conducted", "created", "cut", "decreased",
    "delivered", "deployed", "designed", "developed", "drove", "earned",
    "eliminated", "engineered", "enhanced", "expanded", "generated", "grew",
    "handled", "implemented", "improved", "increased", "launched", "led",
    "managed", "mentored", "migrated", "optimized", "organized",
    "processed", "raised", "ranked", "reduced", "saved", "scaled", "secured",
    "served", "shipped", "streamlined", "trained", "won",
})

# A number followed by a unit, percent or currency token, or a currency
# symbol followed by a number.
METRIC_RE = re.compile(
    r"(?:[$₹€£]\s?\d[\d,]*(?:\.\d+)?\s*(?:k|m|bn|b|lakhs?|crores?|million|billion)?\b)"
    r"|(?:\b\d[\d,]*(?:\.\d+)?\s*"
    r"(?:%|percent\b|x\b|k\b|m\b|ms\b|seconds?\b|hours?\b|days?\b|"
    r"users\b|customers\b|clients\b|requests\b|downloads\b|students\b|"
    r"members\b|people\b|teams?\b|projects\b|records\b|transactions\b|"
    r"queries\b|rows\b|images\b|lakhs?\b|crores?\b|million\b|billion\b|"
    r"usd\b|inr\b|rs\.?|dollars\b|rupees\b))",
    re.IGNORECASE,
)

_WORD_RE = re.compile(r"[A-Za-z]+|\d[\d,.]*")

# Tokens between an action verb and a metric for them to count as one achievement
ACHIEVEMENT_WINDOW = 10


def extract_bullets(text: str) -> list[str]:
    """Extract bullet-point lines from resume text."""
    bullets = []
    for line in text.split("\n"):
        stripped = line.strip()
        if not stripped:
            continue
        # Match lines starting with bullet markers
        if stripped[0] in BULLET_MARKERS:
            cleaned = stripped.lstrip("".join(BULLET_MARKERS) + " ").strip()
            if cleaned:
                bullets.append(cleaned)
        # Numbered bullets: "1.", "12.", "1)", "12)"
        elif re.match(r"^\d{1,2}[.)]\s", stripped):
            cleaned = re.sub(r"^\d{1,2}[.)]\s*", "", stripped).strip()
            if cleaned:
                bullets.append(cleaned)
    return bullets


def _word_index(words: list[re.Match], offset: int) -> int:
    """Index of the first word starting at or after a character offset."""
    for i, word in enumerate(words):
        if word.start() >= offset:
            return i
    return len(words)


def has_quantified_achievement(line: str, window: int = ACHIEVEMENT_WINDOW) -> bool:
    """True if the line pairs a metric with an action verb within `window` words."""
    metrics = list(METRIC_RE.finditer(line))
    if not metrics:
        return False

    words = list(_WORD_RE.finditer(line))
    verb_positions = [
        i for i, word in enumerate(words) if word.group().lower() in ACTION_VERBS
    ]
    if not verb_positions:
        return False

    for metric in metrics:
        pos = _word_index(words, metric.start())
        if any(abs(pos - v) <= window for v in verb_positions):
            return True
    return False


def find_achievements(text: str) -> list[str]:
    """Lines of text that carry a quantified achievement, bullet markers removed."""
    found = []
    for line in text.split("\n"):
        stripped = line.strip().lstrip("".join(BULLET_MARKERS) + " ").strip()
        if stripped and has_quantified_achievement(stripped):
            found.append(stripped)
    return found
