"""Text normalization and tokenization shared by every analyzer.

Punctuated skill spellings such as "node.js", "c++" or "ci/cd" are protected
by a pre-pass so they survive as single tokens; all other punctuation is
treated as a separator.
"""

import re
import unicodedata
from functools import lru_cache
from typing import Iterable

_WHITESPACE_RE = re.compile(r"\s+")
_WORD = r"[a-z0-9]+"


@lru_cache(maxsize=32)
def _token_pattern(protected_terms: tuple[str, ...]) -> re.Pattern:
    """Compile the tokenizer regex for a set of protected spellings."""
    if not protected_terms:
        return re.compile(_WORD)
    # Longest first so "asp.net" wins over ".net"
    ordered = sorted(set(protected_terms), key=lambda t: (-len(t), t))
    alternation = "|".join(re.escape(t) for t in ordered)
    return re.compile(rf"(?<![a-z0-9])(?:{alternation})(?![a-z0-9])|{_WORD}")


def clean(text: str) -> str:
    """Fold compatibility characters, lowercase and collapse whitespace."""
    text = unicodedata.normalize("NFKC", text).lower()
    return _WHITESPACE_RE.sub(" ", text).strip()


def normalize(text: str, protected_terms: Iterable[str] = ()) -> list[str]:
    """Tokenize text into lowercase comparable units.

    Empty or whitespace-only input yields an empty list.
    """
    cleaned = clean(text)
    if not cleaned:
        return []
    protected = tuple(sorted({t.lower() for t in protected_terms if t}))
    return _token_pattern(protected).findall(cleaned)


def protected_words(phrase: str) -> set[str]:
    """Return the words of a phrase that carry punctuation and need protecting."""
    return {
        word
        for word in clean(phrase).split(" ")
        if word and not re.fullmatch(_WORD, word)
    }
