"""Resume content helpers built on the generation client."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from resume_ai.core.extraction import extract_structured
from resume_ai.core.generation import GenerationClient

ASSISTANT_GREETING = (
    "I'm a helpful resume and career assistant. I can help you improve your resume, optimize it for ATS "
    "systems, provide career guidance, and suggest relevant skills and certifications. How can I assist you today?"
)

JOB_SUGGESTION_PROMPT = """Based on the resume below, suggest 4 job roles this candidate is suitable for.
Return ONLY a JSON array of objects with keys: title, company, location, description, keywords, jobDescriptionText.

Resume:
{resume}
"""


def render_job_description(role: str, company: str, industry: str, requirements: str) -> str:
    """Markdown job description from a fixed template."""
    return f"""## {role} - {company}

**About the Role:**
We are seeking a talented {role} to join our {industry} team. This is an exciting opportunity to work with cutting-edge technologies and make a significant impact on our products and services.

**Key Responsibilities:**
• Design and develop high-quality software solutions
• Collaborate with cross-functional teams to deliver features
• Participate in code reviews and maintain coding standards
• Contribute to technical decision-making and architecture discussions

**Requirements:**
{requirements}

**What We Offer:**
• Competitive salary and benefits package
• Professional development opportunities
• Flexible working arrangements
• Collaborative and inclusive work environment"""


def improve_summary(current_summary: str, role: str, seniority: str, industry: str, skills: Sequence[str]) -> str:
    # current_summary is replaced wholesale
    top_skills = ", ".join(list(skills)[:3])
    return (
        f"Results-driven {seniority} {role} with expertise in {top_skills}. Proven track record of delivering "
        f"high-impact solutions in the {industry} industry, with strong analytical and problem-solving abilities. "
        f"Passionate about leveraging technology to drive business outcomes and mentor team members to achieve "
        f"excellence."
    )


def assistant_reply() -> str:
    return ASSISTANT_GREETING


def _is_posting_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, dict) for item in value)


async def suggest_jobs(client: GenerationClient, resume_text: str) -> List[Dict[str, Any]]:
    """Job postings suited to *resume_text*; empty on any generation or parse failure."""
    result = await client.generate_text(JOB_SUGGESTION_PROMPT.format(resume=resume_text), temperature=0.4)
    if not result.ok:
        return []
    outcome = extract_structured(result.text, [], validate=_is_posting_list)
    return outcome.value
