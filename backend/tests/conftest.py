"""Shared test fixtures."""

import pytest

from models.schemas.profile import JobRequirements, StudentProfile
from models.schemas.skills import SkillCategory
from services.lexicon import build_lexicon, get_default_lexicon

SAMPLE_RESUME = """Priya Sharma
priya.sharma@example.com | +91 98765 43210
linkedin.com/in/priyasharma | github.com/priyasharma

Summary
Final-year computer science student focused on backend development.

Education
B.Tech in Computer Science, ABC Institute of Technology, 2021 - 2025
CGPA: 8.4/10

Experience
Software Engineering Intern | TechCorp | May 2024 - Jul 2024
• Built REST APIs in Python and Flask serving 10,000 users
• Reduced query latency by 35% by tuning PostgreSQL indexes

Projects
Campus Placement Portal
• Developed a React and Node.js web app used by 1200 students
• Deployed with Docker on AWS using GitHub Actions for CI/CD

Skills
Python, Java, JavaScript, React, Node.js, SQL, Docker, Git, Data Structures, Algorithms
"""


@pytest.fixture(scope="session")
def lexicon():
    return get_default_lexicon()


@pytest.fixture
def small_lexicon():
    return build_lexicon([
        ("python", SkillCategory.LANGUAGE, ("python3",)),
        ("react", SkillCategory.FRAMEWORK, ("reactjs", "react.js")),
        ("react native", SkillCategory.FRAMEWORK, ("react-native",)),
        ("machine learning", SkillCategory.DOMAIN, ("ml",)),
        ("sql", SkillCategory.LANGUAGE, ()),
        ("c++", SkillCategory.LANGUAGE, ("cpp",)),
    ])


@pytest.fixture
def sample_resume():
    return SAMPLE_RESUME


@pytest.fixture
def profile():
    return StudentProfile(cgpa=8.4, branch="CSE", backlogs=0, skills="Python, React, Kubernetes")


@pytest.fixture
def requirements():
    return JobRequirements(
        required_skills=["Python", "SQL", "Kubernetes"],
        preferred_skills=["Docker", "AWS"],
        min_cgpa=7.0,
    )
