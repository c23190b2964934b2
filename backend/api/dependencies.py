"""Shared dependencies for API routes."""

from services.lexicon import SkillLexicon, get_default_lexicon


def get_lexicon() -> SkillLexicon:
    return get_default_lexicon()
