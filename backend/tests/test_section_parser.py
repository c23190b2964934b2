from services.section_parser import (
    HeadingMatch,
    NotHeading,
    classify_heading,
    extract_contact_info,
    section_presence,
    segment,
)


def test_segment_detects_all(sample_resume):
    sections = segment(sample_resume)
    assert list(sections) == ["header", "summary", "education", "experience", "projects", "skills"]


def test_segment_content(sample_resume):
    sections = segment(sample_resume)
    assert "REST APIs" in sections["experience"]
    assert "Computer Science" in sections["education"]
    assert "Python" in sections["skills"]
    assert "priya.sharma@example.com" in sections["header"]


def test_segment_empty():
    assert segment("") == {}
    assert segment("   \n\n ") == {}


def test_segment_without_headings_is_all_header():
    sections = segment("Just some text\nwith two lines")
    assert sections == {"header": "Just some text\nwith two lines"}


def test_segment_repeated_heading_appends():
    text = "Projects\nFirst project\nSkills\nPython\nProjects\nSecond project"
    sections = segment(text)
    assert sections["projects"] == "First project\nSecond project"


def test_segment_heading_variants():
    text = "WORK EXPERIENCE:\nIntern at X\n\n## Technical Skills ##\nPython\nHonors & Awards\nRank 1"
    sections = segment(text)
    assert sections["experience"] == "Intern at X"
    assert sections["skills"] == "Python"
    assert sections["achievements"] == "Rank 1"


def test_classify_heading_rejects_sentences():
    assert classify_heading("Education.") == NotHeading("sentence punctuation")
    assert classify_heading("I have lots of experience building things") == NotHeading("unknown heading")
    assert classify_heading("") == NotHeading("blank")
    assert isinstance(classify_heading("x" * 80), NotHeading)


def test_classify_heading_accepts_keyword():
    assert classify_heading("  Education  ") == HeadingMatch(section="education", keyword="education")


def test_section_presence_lists_every_section(sample_resume):
    presence = section_presence(segment(sample_resume))
    assert presence["education"] is True
    assert presence["publications"] is False
    assert presence["header"] is True
    assert set(presence) >= {"contact", "certifications", "achievements"}


def test_extract_contact_info(sample_resume):
    contact = extract_contact_info(sample_resume)
    assert contact.email == "priya.sharma@example.com"
    assert contact.phone == "+91 98765 43210"
    assert contact.linkedin == "linkedin.com/in/priyasharma"
    assert contact.github == "github.com/priyasharma"


def test_extract_contact_info_ignores_short_numbers():
    contact = extract_contact_info("Graduated 2021 - 2025 with 8.4 CGPA")
    assert contact.phone is None
    assert contact.email is None
