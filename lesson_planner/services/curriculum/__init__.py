"""
Curriculum Ranking Pipeline

Provides curriculum-aligned context to the LLM by:
1. Loading the Lgr22 reference documents into an immutable in-memory store
2. Ranking them lexically against topic + grade + subjects at request time
3. Rendering the top documents into the lesson plan prompt
"""

from lesson_planner.services.curriculum.context import assemble_context, count_curriculum_references
from lesson_planner.services.curriculum.ranking import rank_curriculum
from lesson_planner.services.curriculum.store import CurriculumStore, get_curriculum_store

__all__ = [
    "assemble_context",
    "count_curriculum_references",
    "rank_curriculum",
    "CurriculumStore",
    "get_curriculum_store",
]
