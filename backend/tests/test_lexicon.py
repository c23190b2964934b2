import pytest

from models.schemas.skills import MatchType, SkillCategory
from services.lexicon import DEFAULT_SKILLS, LIST_TERM_ALIASES, build_lexicon
from services.skill_extractor import extract

DEFAULT_SKILLS_NAMES = {canonical for canonical, _, _ in DEFAULT_SKILLS}

SURFACE_FORMS = [
    (form, canonical, MatchType.EXACT if form == canonical else MatchType.SYNONYM)
    for canonical, _, synonyms in DEFAULT_SKILLS
    for form in (canonical, *synonyms)
]


@pytest.mark.parametrize("form,canonical,match_type", SURFACE_FORMS)
def test_every_surface_form_extracts_its_canonical(lexicon, form, canonical, match_type):
    skills = extract(lexicon.tokenize(form), lexicon)
    assert [s.canonical for s in skills] == [canonical]
    assert skills[0].match_type == match_type


def test_default_lexicon_size(lexicon):
    assert len(lexicon) == len(DEFAULT_SKILLS)
    assert "python" in lexicon
    assert "Python" in lexicon
    assert "cobol" not in lexicon


def test_lookup_is_case_and_whitespace_insensitive(lexicon):
    entry = lexicon.lookup("  Amazon   Web Services ")
    assert entry is not None
    assert entry.canonical == "aws"
    assert entry.category == SkillCategory.TOOL


def test_canonicalize_exact_and_synonym(lexicon):
    assert lexicon.canonicalize("Python") == "python"
    assert lexicon.canonicalize("K8s") == "kubernetes"
    assert lexicon.canonicalize("ReactJS") == "react"


def test_canonicalize_fuzzy_fallback(lexicon):
    assert lexicon.canonicalize("kubernets") == "kubernetes"
    assert lexicon.canonicalize("postgressql") == "postgresql"


def test_canonicalize_rejects_distant_terms(lexicon):
    assert lexicon.canonicalize("nosql") is None
    assert lexicon.canonicalize("blockchain") is None
    assert lexicon.canonicalize("") is None


def test_canonicalize_short_terms_are_never_fuzzed(lexicon):
    # "jz" is close to "js" but too short to fuzz safely
    assert lexicon.canonicalize("jz") is None


def test_duplicate_canonical_rejected():
    with pytest.raises(ValueError, match="Duplicate canonical"):
        build_lexicon([
            ("python", SkillCategory.LANGUAGE, ()),
            ("Python", SkillCategory.LANGUAGE, ()),
        ])


def test_shared_surface_form_rejected():
    with pytest.raises(ValueError, match="shared by"):
        build_lexicon([
            ("javascript", SkillCategory.LANGUAGE, ("js",)),
            ("json", SkillCategory.TOOL, ("js",)),
        ])


def test_surface_forms_collide_after_normalization():
    with pytest.raises(ValueError):
        build_lexicon([
            ("machine learning", SkillCategory.DOMAIN, ()),
            ("ml", SkillCategory.DOMAIN, ("Machine   Learning",)),
        ])


def test_empty_lexicon_extracts_nothing():
    empty = build_lexicon([])
    assert len(empty) == 0
    assert extract(empty.tokenize("python and sql"), empty) == []
    assert empty.canonicalize("python") is None


@pytest.mark.parametrize("term,canonical", [
    ("Node", "node.js"),
    ("express", "express.js"),
    ("Go", "golang"),
    ("SPRING", "spring boot"),
])
def test_list_term_aliases_canonicalize(lexicon, term, canonical):
    assert lexicon.canonicalize(term) == canonical


def test_list_term_aliases_stay_out_of_prose(lexicon):
    tokens = lexicon.tokenize("Go to the node and express thanks in spring")
    assert extract(tokens, lexicon) == []
    assert lexicon.lookup("go") is None


def test_list_term_aliases_target_known_skills():
    assert all(canonical in DEFAULT_SKILLS_NAMES for canonical in LIST_TERM_ALIASES.values())


def test_alias_to_unknown_skill_rejected():
    with pytest.raises(ValueError, match="unknown skill"):
        build_lexicon([("golang", SkillCategory.LANGUAGE, ())], {"go": "rust"})


def test_alias_shadowing_surface_form_rejected():
    with pytest.raises(ValueError, match="already a surface form"):
        build_lexicon([("golang", SkillCategory.LANGUAGE, ("go",))], {"go": "golang"})
