"""
Template study plan used when no model produced a usable answer.

Pure: the same (subject, level, duration, goals) always renders the same text.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

DEFAULT_WEEKS = 4

_DIGITS = re.compile(r"\d+")

FALLBACK_NOTE = "(This is a fallback plan when AI is unavailable.)"


@dataclass(frozen=True)
class PhaseWeeks:
    """Week labels for the four plan phases, e.g. `Week 1-2`."""

    foundation: str
    core: str
    advanced: str
    review: str


def parse_duration_weeks(duration: str) -> int:
    """First run of digits in `duration`; DEFAULT_WEEKS if there is none (or it is 0)."""
    m = _DIGITS.search(duration or "")
    weeks = int(m.group(0)) if m else 0
    return weeks or DEFAULT_WEEKS


def compute_phases(weeks: int) -> PhaseWeeks:
    core_end = math.ceil(weeks * 0.7)
    if weeks > 2:
        foundation = "Week 1-2"
        core = f"Week 3-{core_end}"
    else:
        foundation = "Week 1"
        core = "Week 2"
    return PhaseWeeks(
        foundation=foundation,
        core=core,
        advanced=f"Week {core_end + 1}-{weeks - 1}",
        review="Final Week",
    )


def _milestones(weeks: int) -> str:
    lines = ["Week 1: Foundation", "Week 2: Core modules"]
    if weeks > 2:
        lines.append("Week 3: Applications")
    if weeks > 3:
        lines.append("Week 4: Mastery")
    lines.append("Final Week: Goal ready!")
    return "\n".join(lines)


def generate_fallback_plan(subject: str, level: str, duration: str, goals: str) -> str:
    weeks = parse_duration_weeks(duration)
    phases = compute_phases(weeks)

    return f"""Study Plan for {subject} ({level} Level)
Duration: {duration}
Goals: {goals}

=== STUDY PLAN OVERVIEW ===

Phase 1: Foundation ({phases.foundation})
- Review fundamental concepts
- Gather materials
- Establish routine (1-2 hrs/day)
- Do basic exercises

Phase 2: Core Learning ({phases.core})
- Deep dive into core topics
- Practice problem-solving
- Create notes/mind maps

Phase 3: Advanced Application ({phases.advanced})
- Complex topics + real-world use
- Case studies and scenarios
- Integration of topics

Phase 4: Review & Mastery ({phases.review})
- Final revision
- Mock tests
- Confidence boosting

=== DAILY STRUCTURE ===

Morning: Recap previous, prep new (~30 min)
Midday: Learn/practice new (~60–90 min)
Evening: Summarize & plan (~15 min)

=== WEEKLY MILESTONES ===

{_milestones(weeks)}

Tips:
- Use Pomodoro
- Review often
- Join groups / Ask questions
- Be consistent

{FALLBACK_NOTE}"""
