"""Tests for the required/preferred skill matcher."""

import pytest

from services.matcher import match


class TestScore:
    def test_no_targets_scores_100(self, lexicon):
        result = match({"python", "sql"}, [], [], lexicon)
        assert result.score == 100
        assert result.matched_skills == []
        assert result.missing_required == []
        assert result.missing_preferred == []

    def test_no_targets_and_no_skills_scores_100(self, lexicon):
        assert match([], [], [], lexicon).score == 100

    def test_half_required_no_preferred(self, lexicon):
        result = match({"python"}, ["python", "sql"], [], lexicon)
        assert result.score == 35
        assert result.matched_skills == ["python"]
        assert result.missing_required == ["sql"]

    def test_full_match(self, lexicon):
        result = match(["python", "sql", "docker"], ["python", "sql"], ["docker"], lexicon)
        assert result.score == 100

    def test_only_preferred(self, lexicon):
        result = match(["docker"], [], ["docker", "aws"], lexicon)
        assert result.score == 15
        assert result.missing_preferred == ["aws"]

    def test_rounded_to_two_decimals(self, lexicon):
        result = match(["python"], ["python", "sql", "java"], [], lexicon)
        assert result.score == pytest.approx(23.33)

    def test_monotonic_in_candidate_skills(self, lexicon):
        required, preferred = ["python", "sql", "java"], ["docker", "aws"]
        skills: list[str] = []
        previous = match(skills, required, preferred, lexicon).score
        for skill in ["docker", "python", "aws", "java", "sql"]:
            skills.append(skill)
            current = match(skills, required, preferred, lexicon).score
            assert current >= previous
            previous = current
        assert previous == 100


class TestCanonicalization:
    def test_synonyms_match_both_ways(self, lexicon):
        result = match(["k8s", "ReactJS"], ["Kubernetes", "react.js"], [], lexicon)
        assert result.score == 70
        assert result.matched_skills == ["kubernetes", "react"]

    def test_fuzzy_target_spelling(self, lexicon):
        result = match(["kubernetes"], ["Kubernets"], [], lexicon)
        assert result.matched_skills == ["kubernetes"]
        assert result.unrecognized == []

    def test_bare_list_terms_resolve(self, lexicon):
        result = match(
            ["node.js", "express.js", "golang", "spring boot"],
            ["Node", "Express", "Go", "Spring"],
            [],
            lexicon,
        )
        assert result.score == 70
        assert result.missing_required == []
        assert result.matched_skills == ["node.js", "express.js", "golang", "spring boot"]

    def test_missing_keeps_input_spelling(self, lexicon):
        result = match([], ["Node.JS", "PostgreSQL"], ["Amazon Web Services"], lexicon)
        assert result.missing_required == ["Node.JS", "PostgreSQL"]
        assert result.missing_preferred == ["Amazon Web Services"]

    def test_unrecognized_terms_compare_by_spelling(self, lexicon):
        result = match(["Blockchain"], ["blockchain", "Quantum Computing"], [], lexicon)
        assert result.matched_skills == ["blockchain"]
        assert result.missing_required == ["Quantum Computing"]
        assert result.unrecognized == ["blockchain", "Quantum Computing"]


class TestDuplicates:
    def test_duplicate_targets_count_once(self, lexicon):
        result = match(["python"], ["python", "Python", "python3", "sql"], [], lexicon)
        assert result.score == 35
        assert result.missing_required == ["sql"]

    def test_skill_in_both_lists_counts_toward_both(self, lexicon):
        result = match(["python"], ["python"], ["python", "docker"], lexicon)
        assert result.matched_skills == ["python"]
        assert result.missing_preferred == ["docker"]
        assert result.score == 85

    def test_every_target_met_in_overlapping_lists_scores_100(self, lexicon):
        result = match(["python"], ["python"], ["python"], lexicon)
        assert result.score == 100
        assert result.missing_preferred == []

    def test_overlap_missing_reported_in_both_lists(self, lexicon):
        result = match([], ["SQL"], ["sql", "docker"], lexicon)
        assert result.missing_required == ["SQL"]
        assert result.missing_preferred == ["sql", "docker"]
        assert result.score == 0

    def test_blank_targets_ignored(self, lexicon):
        assert match(["python"], ["python", "  ", ""], [], lexicon).score == 70

    def test_blank_candidates_ignored(self, lexicon):
        assert match(["", "   "], ["python"], [], lexicon).score == 0


def test_default_lexicon_used_when_none():
    assert match(["python"], ["python"], []).score == 70
