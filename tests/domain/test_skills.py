"""Tests for resume keyword detectors."""

from resume_ai.domain.skills import (
    JUNIOR,
    MID,
    SENIOR,
    detect_seniority,
    detect_skills,
    primary_role,
    related_skills,
)


def test_detect_skills_in_keyword_order():
    text = "Built GraphQL APIs with TypeScript and React; deployed on AWS with Docker."
    assert detect_skills(text) == ["React", "TypeScript", "AWS", "Docker", "GraphQL"]


def test_detect_skills_is_case_insensitive_and_multiword():
    assert detect_skills("MACHINE LEARNING and Full Stack work") == ["Machine Learning", "Full Stack"]


def test_detect_skills_empty():
    assert detect_skills("") == []


def test_detect_seniority():
    assert detect_seniority("Senior engineer") is SENIOR
    assert detect_seniority("Tech lead for payments") is SENIOR
    assert detect_seniority("7+ years of experience") is SENIOR
    assert detect_seniority("Entry-level analyst") is JUNIOR
    assert detect_seniority("1-2 years in QA") is JUNIOR
    assert detect_seniority("Software engineer") is MID
    assert SENIOR.salary_range == "$130k-$180k"


def test_primary_role():
    assert primary_role("frontend engineer") == "Frontend Developer"
    assert primary_role("react developer") == "Frontend Developer"
    assert primary_role("react and backend services") == "Backend Developer"
    assert primary_role("rest api design") == "Backend Developer"
    assert primary_role("infrastructure as code") == "DevOps Engineer"
    assert primary_role("machine learning pipelines") == "Data Engineer"
    assert primary_role("generalist") == "Full Stack Developer"


def test_related_skills_excludes_known_and_dedupes():
    suggestions = related_skills(["React", "TypeScript"], limit=20)
    assert "React" not in suggestions
    assert "TypeScript" not in suggestions
    assert suggestions[:3] == ["Next.js", "Redux", "Tailwind CSS"]
    assert len(suggestions) == len(set(suggestions))


def test_related_skills_limit_and_unknown():
    assert len(related_skills(["Python", "Django", "AWS"], limit=4)) == 4
    assert related_skills(["COBOL"]) == []
    assert related_skills(iter(["python"]))[:2] == ["Django", "Flask"]
