"""Deterministic offline responses keyed on prompt content.

Used whenever no live credential is configured. Routes are evaluated in
order and the first matching predicate wins, so more specific routes must
sit above broader ones (``job_suggestion`` above ``skills``, which also
matches a bare "suggest").
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Callable, List, Sequence

from resume_ai.domain.skills import detect_seniority, detect_skills, primary_role

Predicate = Callable[[str], bool]
Builder = Callable[[str], str]


@dataclass(frozen=True)
class MockRoute:
    name: str
    predicate: Predicate
    build: Builder


def _dumps(value: Any) -> str:
    return json.dumps(value)


def _has(*needles: str) -> Predicate:
    """Case-sensitive: true when any needle occurs in the prompt."""
    return lambda prompt: any(n in prompt for n in needles)


# ---------------------------------------------------------------------------
# Predicates that need more than substring presence
# ---------------------------------------------------------------------------


def _is_job_suggestion(prompt: str) -> bool:
    lowered = prompt.lower()
    if "job" not in lowered:
        return False
    return "suggest" in lowered or "roles" in lowered or "suitable" in lowered


def _is_job_match(prompt: str) -> bool:
    return "job" in prompt and "match" in prompt


def _is_skills(prompt: str) -> bool:
    return "skills" in prompt or ("suggest" in prompt and "job" not in prompt)


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def build_career(_: str) -> str:
    return _dumps(
        {
            "skillGaps": ["Advanced TypeScript", "System Design", "Cloud Architecture", "Microservices"],
            "salaryInsights": "Based on your experience, expected salary range is $120k-$180k (estimate only)",
            "progression": ["Senior Developer", "Lead Developer", "Engineering Manager", "Technical Director"],
            "interviewPrep": [
                "Practice system design questions",
                "Review data structures",
                "Prepare behavioral examples",
                "Study company culture",
            ],
        }
    )


def build_certifications(_: str) -> str:
    return _dumps(
        {
            "items": [
                {"name": "AWS Solutions Architect", "issuer": "Amazon Web Services", "priority": "high"},
                {"name": "Google Cloud Professional", "issuer": "Google Cloud", "priority": "medium"},
                {"name": "Certified Kubernetes Administrator", "issuer": "CNCF", "priority": "high"},
                {"name": "Docker Certified Associate", "issuer": "Docker Inc.", "priority": "medium"},
            ]
        }
    )


def build_interests(_: str) -> str:
    return _dumps(
        {
            "items": [
                "Open Source Contributing",
                "Technical Writing",
                "Mentoring Junior Developers",
                "AI/ML Research",
                "Cloud Architecture",
            ]
        }
    )


def _bump_salary(salary_range: str, delta: int = 20) -> str:
    return re.sub(r"\d+k", lambda m: f"{int(m.group(0)[:-1]) + delta}k", salary_range)


def build_job_suggestions(prompt: str) -> str:
    """Four postings shaped by the skills, seniority and role found in *prompt*."""
    skills = detect_skills(prompt)
    seniority = detect_seniority(prompt)
    role = primary_role(prompt)
    level, salary = seniority.level, seniority.salary_range
    stack = skills or ["JavaScript", "Web Development"]

    def top(n: int) -> str:
        return ", ".join(stack[:n])

    cloud = "AWS" in skills or "Azure" in skills
    jobs: List[dict] = [
        {
            "title": f"{level} {role}",
            "company": "TechCorp Solutions",
            "location": "San Francisco, CA (Remote)",
            "description": (
                f"Join our innovative team building cutting-edge applications. "
                f"Work with {top(3)} and modern technologies."
            ),
            "keywords": skills[:5] or ["JavaScript", "Web Development"],
            "jobDescriptionText": (
                f"We're seeking a {level} {role} with expertise in {top(3)}. You'll work on challenging "
                f"projects, collaborate with cross-functional teams, and drive technical decisions. "
                f"Requirements: {top(5)}, strong problem-solving skills, experience with modern development "
                f"practices. Benefits: Competitive salary ({salary}), equity, health insurance, unlimited PTO, "
                f"professional development budget."
            ),
        },
        {
            "title": f"Lead {role}",
            "company": "Digital Innovations Inc",
            "location": "New York, NY (Hybrid)",
            "description": (
                "Lead a team of talented engineers building scalable solutions. "
                "Drive technical excellence and mentor team members."
            ),
            "keywords": skills[:3] + ["Leadership", "Architecture"],
            "jobDescriptionText": (
                f"Digital Innovations is looking for a Lead {role} to guide our engineering team. You'll be "
                f"responsible for system architecture, code reviews, and technical mentorship using {top(4)}. "
                f"Must have strong leadership and system design skills. Tech stack: {', '.join(stack)}. "
                f"Compensation: {_bump_salary(salary)}, stock options, full benefits."
            ),
        },
        {
            "title": "Frontend Specialist" if "Full Stack" in role else f"{role} (Remote)",
            "company": "InnovateTech",
            "location": "Austin, TX (Remote)",
            "description": (
                f"Build exceptional user experiences and scalable systems. Work with {' and '.join(stack[:2])}."
            ),
            "keywords": skills[:4] or ["Programming", "Development"],
            "jobDescriptionText": (
                f"We need a talented {role} to join our remote team. Focus on {top(3)} development. "
                f"Qualifications: Experience with {', '.join(stack)}, strong coding skills, passion for clean "
                f"code. Stack: Modern tech stack including {top(5)}. Offer: {salary}, full remote, flexible "
                f"hours, equity options."
            ),
        },
        {
            "title": f"{level} Software Engineer",
            "company": "CloudScale Systems",
            "location": "Seattle, WA",
            "description": (
                "Build infrastructure and applications that serve millions. "
                + ("Cloud experience highly valued." if cloud else "Modern tech stack.")
            ),
            "keywords": skills[:3] + ["Scalability", "Performance"],
            "jobDescriptionText": (
                f"CloudScale is hiring a {level} Software Engineer to work on distributed systems. "
                f"Responsibilities include building scalable applications, optimizing performance, and ensuring "
                f"reliability using {top(4)}. Skills needed: {', '.join(stack)}, experience with large-scale "
                f"systems. Benefits: {salary}, health benefits, 401k matching, learning budget $2000/year."
            ),
        },
    ]
    return _dumps(jobs)


def build_ats_score(_: str) -> str:
    return _dumps(
        {
            "score": 85,
            "feedback": "Good keyword match. Consider adding more industry-specific terms.",
            "suggestions": [
                "Add more quantified achievements",
                "Include relevant certifications",
                "Use stronger action verbs",
            ],
        }
    )


def build_bullets(_: str) -> str:
    return _dumps(
        [
            "Developed and maintained scalable web applications using React and Node.js, serving 100K+ users",
            "Implemented CI/CD pipelines that reduced deployment time by 60% and improved code quality",
            "Led cross-functional team of 5 developers to deliver projects 20% ahead of schedule",
        ]
    )


def build_job_match(_: str) -> str:
    return _dumps(
        {
            "matchScore": 87,
            "strengths": ["Technical skills alignment", "Experience level match", "Industry knowledge"],
            "gaps": ["Domain-specific experience", "Leadership experience"],
            "recommendations": ["Highlight relevant projects", "Emphasize transferable skills"],
        }
    )


def build_skills(_: str) -> str:
    return _dumps(
        ["React", "TypeScript", "Node.js", "Python", "Docker", "Kubernetes", "AWS", "GraphQL", "PostgreSQL", "Redis"]
    )


def build_summary(_: str) -> str:
    return (
        "Results-driven Full Stack Developer with 5+ years of experience building scalable web applications. "
        "Proven track record of delivering high-impact solutions using React, Node.js, and cloud technologies. "
        "Strong problem-solving skills and experience leading cross-functional teams to achieve business objectives."
    )


def build_default(_: str) -> str:
    return _dumps(
        {
            "message": "Mock AI response - configure your Gemini API key for production use",
            "data": [],
            "status": "development_mode",
        }
    )


DEFAULT_ROUTES: Sequence[MockRoute] = (
    MockRoute("career", _has("career", "skillGaps", "salaryInsights"), build_career),
    MockRoute("certifications", _has("certifications"), build_certifications),
    MockRoute("interests", _has("interests"), build_interests),
    MockRoute("job_suggestion", _is_job_suggestion, build_job_suggestions),
    MockRoute("ats_score", _has("ATS", "score"), build_ats_score),
    MockRoute("bullets", _has("bullet", "improve"), build_bullets),
    MockRoute("job_match", _is_job_match, build_job_match),
    MockRoute("skills", _is_skills, build_skills),
    MockRoute("summary", _has("summary"), build_summary),
)


class MockOracle:
    """Synthesize a response for *prompt* from the first matching route."""

    def __init__(self, routes: Sequence[MockRoute] = DEFAULT_ROUTES, default: Builder = build_default) -> None:
        self.routes = tuple(routes)
        self.default = default

    def route_for(self, prompt: str) -> str:
        """Name of the route that would answer *prompt*."""
        for route in self.routes:
            if route.predicate(prompt):
                return route.name
        return "default"

    def synthesize(self, prompt: str) -> str:
        for route in self.routes:
            if route.predicate(prompt):
                return route.build(prompt)
        return self.default(prompt)
