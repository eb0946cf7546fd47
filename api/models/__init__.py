"""
API data models. Single import surface for DB entities.

DB entities (api.models.models):
- StudyPlan
"""

from api.models.models import StudyPlan

__all__ = [
    "StudyPlan",
]
