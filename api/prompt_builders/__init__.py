"""
App prompt builders. All prompt content and templates live here; agents receive built prompts.
"""

from api.prompt_builders.study_plan import PLAN_SECTIONS, build_study_plan_prompt

__all__ = [
    "PLAN_SECTIONS",
    "build_study_plan_prompt",
]
