from services.bullet_parser import extract_bullets, find_achievements, has_quantified_achievement


def test_extract_bullets():
    text = """John Doe
Software Engineer

Experience:
• Built REST APIs serving 1M requests/day
- Led team of 5 engineers
* Improved test coverage from 40% to 90%
1. Deployed microservices on Kubernetes

Skills:
Python, JavaScript, Docker
"""
    bullets = extract_bullets(text)
    assert len(bullets) == 4
    assert "Built REST APIs serving 1M requests/day" in bullets
    assert "Deployed microservices on Kubernetes" in bullets


def test_extract_bullets_empty():
    assert extract_bullets("") == []
    assert extract_bullets("No bullets here\nJust plain text") == []


def test_extract_bullets_unicode_markers():
    text = "◆ Designed CI/CD pipeline\n■ Automated testing process\n→ Reduced deploy time"
    bullets = extract_bullets(text)
    assert len(bullets) == 3
    assert "Designed CI/CD pipeline" in bullets


class TestQuantifiedAchievement:
    def test_verb_and_percent(self):
        assert has_quantified_achievement("Reduced query latency by 35% using indexes")

    def test_verb_and_unit(self):
        assert has_quantified_achievement("Built a portal serving 10,000 users")

    def test_currency(self):
        assert has_quantified_achievement("Saved $20k per year in cloud costs")

    def test_metric_without_verb(self):
        assert not has_quantified_achievement("Latency went down 35%")

    def test_verb_without_metric(self):
        assert not has_quantified_achievement("Built a campus placement portal")

    def test_bare_number_is_not_a_metric(self):
        assert not has_quantified_achievement("Developed 3 microservices in 2023")

    def test_metric_outside_window(self):
        line = "Improved the design of the internal onboarding flow used across the whole company by 20%"
        assert not has_quantified_achievement(line)
        assert has_quantified_achievement(line, window=20)


def test_find_achievements_strips_markers():
    text = "Experience\n• Increased sign-ups by 25%\n• Wrote documentation"
    assert find_achievements(text) == ["Increased sign-ups by 25%"]
