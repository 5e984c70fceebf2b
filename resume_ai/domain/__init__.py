"""Resume AI Domain - pure keyword logic over resume text.

This package contains pure functions with no file system or generation dependencies.
"""

from .skills import Seniority, detect_seniority, detect_skills, primary_role, related_skills

__all__ = [
    "Seniority",
    "detect_skills",
    "detect_seniority",
    "primary_role",
    "related_skills",
]
