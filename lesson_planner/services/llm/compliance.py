"""
Lesson Plan Compliance Validator

Scores a generated lesson plan against a fixed Lgr22 rubric.
Scoring starts at 1.0 and each failed check subtracts a penalty:

- Required elements   – 0.15 per missing element (core content, abilities, ...)
- Pedagogical terms   – 0.1 if fewer than 3 of the expected terms are used
- Minimum length      – 0.2 if the plan is shorter than 200 characters
- Structure           – 0.1 if markdown headings or list items are missing

The final score never goes below 0. Pure and synchronous.
"""

import re
from dataclasses import dataclass

from lesson_planner.models.plan import ComplianceReport


HEADING_RE = re.compile(r"^[ \t]*#{1,3}\s", re.MULTILINE)
BULLET_RE = re.compile(r"^[ \t]*[-*+]\s", re.MULTILINE)
NUMBERED_RE = re.compile(r"^[ \t]*\d+\.\s", re.MULTILINE)


@dataclass(frozen=True)
class ComplianceRubric:
    required_elements: tuple[str, ...] = (
        "core content",
        "abilities",
        "knowledge requirements",
        "lgr22",
        "curriculum",
    )
    pedagogical_terms: tuple[str, ...] = (
        "students will",
        "develop",
        "knowledge",
        "ability",
        "reflection",
        "assessment",
        "progression",
        "variation",
        "differentiation",
    )
    min_pedagogical_terms: int = 3
    min_length: int = 200
    missing_element_penalty: float = 0.15
    terminology_penalty: float = 0.1
    length_penalty: float = 0.2
    structure_penalty: float = 0.1


DEFAULT_RUBRIC = ComplianceRubric()


def validate_compliance(plan: str, rubric: ComplianceRubric = DEFAULT_RUBRIC) -> ComplianceReport:
    """Score a lesson plan and list the rubric checks it fails."""
    issues: list[str] = []
    score = 1.0
    plan_lower = plan.lower()

    missing = [element for element in rubric.required_elements if element.lower() not in plan_lower]
    if missing:
        issues.append(f"Missing required Lgr22 elements: {', '.join(missing)}")
        score -= len(missing) * rubric.missing_element_penalty

    found_terms = [term for term in rubric.pedagogical_terms if term.lower() in plan_lower]
    if len(found_terms) < rubric.min_pedagogical_terms:
        issues.append("Limited use of pedagogical terminology")
        score -= rubric.terminology_penalty

    if len(plan) < rubric.min_length:
        issues.append(
            f"Lesson plan is too short ({len(plan)} characters, minimum {rubric.min_length})"
        )
        score -= rubric.length_penalty

    has_headings = HEADING_RE.search(plan) is not None
    has_lists = BULLET_RE.search(plan) is not None or NUMBERED_RE.search(plan) is not None
    if not has_headings or not has_lists:
        issues.append("Missing clear structure with headings and bullet lists")
        score -= rubric.structure_penalty

    return ComplianceReport(
        score=max(score, 0.0),
        issues=issues,
        meets_required_elements=not missing,
    )
