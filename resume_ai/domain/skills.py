"""Keyword detectors for skills, seniority and role over free text.

All functions operate on content strings -- no file I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Ordered: detection order is output order.
SKILL_KEYWORDS: Dict[str, str] = {
    "react": "React",
    "vue": "Vue.js",
    "angular": "Angular",
    "node": "Node.js",
    "python": "Python",
    "java": "Java",
    "javascript": "JavaScript",
    "typescript": "TypeScript",
    "aws": "AWS",
    "azure": "Azure",
    "gcp": "Google Cloud",
    "docker": "Docker",
    "kubernetes": "Kubernetes",
    "mongodb": "MongoDB",
    "postgresql": "PostgreSQL",
    "sql": "SQL",
    "graphql": "GraphQL",
    "nextjs": "Next.js",
    "express": "Express",
    "django": "Django",
    "machine learning": "Machine Learning",
    "ai": "AI",
    "data": "Data Analysis",
    "devops": "DevOps",
    "ci/cd": "CI/CD",
    "terraform": "Terraform",
    "frontend": "Frontend",
    "backend": "Backend",
    "full stack": "Full Stack",
}

SKILL_RELATIONSHIPS: Dict[str, List[str]] = {
    "React": ["Next.js", "Redux", "TypeScript", "Tailwind CSS", "React Router", "React Query", "Jest"],
    "Vue.js": ["Nuxt.js", "Vuex", "Pinia", "Vue Router", "TypeScript", "Vite"],
    "Angular": ["TypeScript", "RxJS", "NgRx", "Angular Material", "Jasmine"],
    "Next.js": ["React", "TypeScript", "Tailwind CSS", "Vercel", "Server Components"],
    "TypeScript": ["JavaScript", "React", "Node.js", "Express", "Next.js"],
    "JavaScript": ["TypeScript", "React", "Node.js", "Express", "Vue.js", "Webpack"],
    "Node.js": ["Express", "NestJS", "MongoDB", "PostgreSQL", "REST APIs", "GraphQL", "TypeScript"],
    "Python": ["Django", "Flask", "FastAPI", "Pandas", "NumPy", "PostgreSQL", "SQLAlchemy", "PyTest"],
    "Django": ["Python", "PostgreSQL", "Django REST Framework", "Celery", "Redis"],
    "FastAPI": ["Python", "Pydantic", "REST APIs", "PostgreSQL", "Docker", "OpenAPI"],
    "AWS": ["EC2", "S3", "Lambda", "CloudFormation", "Terraform", "Docker", "Kubernetes"],
    "Docker": ["Kubernetes", "Docker Compose", "CI/CD", "Linux", "Microservices"],
    "Kubernetes": ["Docker", "Helm", "Terraform", "Prometheus", "Microservices"],
    "PostgreSQL": ["SQL", "Redis", "Database Design", "Query Optimization"],
    "Machine Learning": ["Python", "TensorFlow", "PyTorch", "scikit-learn", "Pandas", "NumPy"],
}

_SENIOR_MARKERS = ("senior", "lead", "5+ year", "7+ year")
_JUNIOR_MARKERS = ("junior", "entry", "1-2 year")


@dataclass(frozen=True)
class Seniority:
    level: str
    salary_range: str


SENIOR = Seniority("Senior", "$130k-$180k")
MID = Seniority("Mid-level", "$80k-$120k")
JUNIOR = Seniority("Junior", "$60k-$90k")


# ---------------------------------------------------------------------------
# Detectors
# ---------------------------------------------------------------------------


def detect_skills(text: str) -> List[str]:
    """Return display names of skills whose keyword appears in *text*."""
    lowered = text.lower()
    return [name for key, name in SKILL_KEYWORDS.items() if key in lowered]


def detect_seniority(text: str) -> Seniority:
    lowered = text.lower()
    if any(marker in lowered for marker in _SENIOR_MARKERS):
        return SENIOR
    if any(marker in lowered for marker in _JUNIOR_MARKERS):
        return JUNIOR
    return MID


def primary_role(text: str) -> str:
    """Guess the role family a resume is written for."""
    lowered = text.lower()
    if "frontend" in lowered or ("react" in lowered and "backend" not in lowered):
        return "Frontend Developer"
    if "backend" in lowered or ("api" in lowered and "frontend" not in lowered):
        return "Backend Developer"
    if "devops" in lowered or "infrastructure" in lowered:
        return "DevOps Engineer"
    if "data" in lowered or "machine learning" in lowered:
        return "Data Engineer"
    return "Full Stack Developer"


def related_skills(skills: Iterable[str], limit: int = 10) -> List[str]:
    """Suggest skills related to *skills*, excluding ones already listed.

    Matching is case-insensitive; suggestions keep relationship order and are
    de-duplicated.
    """
    skills = list(skills)
    known = {s.strip().lower() for s in skills if s and s.strip()}
    by_lower = {name.lower(): name for name in SKILL_RELATIONSHIPS}
    suggestions: List[str] = []
    seen = set(known)
    for skill in skills:
        canonical = by_lower.get((skill or "").strip().lower())
        if canonical is None:
            continue
        for related in SKILL_RELATIONSHIPS[canonical]:
            key = related.lower()
            if key in seen:
                continue
            seen.add(key)
            suggestions.append(related)
            if len(suggestions) >= limit:
                return suggestions
    return suggestions
