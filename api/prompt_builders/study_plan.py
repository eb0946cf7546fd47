"""Study plan prompt builder. Uses library core template."""

from __future__ import annotations

from agents.core.prompt_builder import build_from_template, numbered_list

PLAN_SECTIONS = (
    "Overview",
    "Weekly breakdown",
    "Daily study schedule",
    "Milestones",
    "Assessments",
    "Resources",
    "Learning tips",
)

TEMPLATE_STUDY_PLAN = """Create a personalized study plan:

Subject: {subject}
Level: {level}
Duration: {duration}
Goals: {goals}

Include:
{sections}"""


def build_study_plan_prompt(*, subject: str, level: str, duration: str, goals: str) -> str:
    return build_from_template(
        TEMPLATE_STUDY_PLAN,
        subject=subject,
        level=level,
        duration=duration,
        goals=goals,
        sections=numbered_list(PLAN_SECTIONS),
    )
