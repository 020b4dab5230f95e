"""
Prompt Compiler Service

Converts a lesson plan request plus the assembled curriculum context into
one clear, complete LLM prompt. The prompt is built once per request and
reused unchanged for every generation attempt.
"""

from lesson_planner.models.plan import PlanRequest
from lesson_planner.services.curriculum.corpus import KINDERGARTEN


def get_grade_description(grade: str) -> str:
    """Convert grade code to human-readable description."""
    grade_map = {
        KINDERGARTEN: "Kindergarten / förskoleklass (ages 6-7)",
        "1": "Grade 1 (ages 7-8)",
        "2": "Grade 2 (ages 8-9)",
        "3": "Grade 3 (ages 9-10)",
        "4": "Grade 4 (ages 10-11)",
        "5": "Grade 5 (ages 11-12)",
        "6": "Grade 6 (ages 12-13)",
    }
    return grade_map.get(grade.strip().lower(), f"Grade {grade}")


def compile_plan_prompt(request: PlanRequest, curriculum_context: str) -> str:
    """
    Compile the lesson plan generation prompt.

    Args:
        request: The validated lesson plan request
        curriculum_context: Output of the curriculum context assembler

    Returns:
        Prompt string for the LLM
    """
    grade_desc = get_grade_description(request.grade)
    subject_list = ", ".join(request.subjects) if request.subjects else "cross-curricular"

    notes_section = ""
    if request.notes:
        notes_section = f"\n**SPECIAL REQUESTS:**\n{request.notes}\n"

    prompt = f"""You are an experienced Swedish teacher who writes detailed lesson plans following the Lgr22 curriculum.

**ASSIGNMENT:**
Create a complete lesson plan on the theme "{request.topic}" for {grade_desc} within the subjects {subject_list}. The lesson should last {request.duration}.

**CURRICULUM CONTEXT:**
{curriculum_context}

**MANDATORY REQUIREMENTS (Lgr22 compliance):**
- Refer explicitly to the core content of the Lgr22 curriculum
- Specify which abilities the students will develop
- Include knowledge requirements and assessment criteria
- Use correct pedagogical terminology
- Ensure progression and variation
- Include differentiation for students with different needs

**STRUCTURE (use markdown):**
# Lesson plan: {request.topic}

## Purpose and goals
- Link to Lgr22 core content
- Abilities developed
- Learning goals for the lesson

## Lesson structure ({request.duration})
- Detailed timing
- Activities with clear instructions
- Transitions between activities

## Activities and methods
- Varied ways of working
- Concrete implementation
- Student engagement and participation

## Assessment and follow-up
- Formative assessment during the lesson
- Knowledge requirements being assessed
- Documentation and feedback

## Materials and resources
- Concrete materials needed
- Digital tools if applicable
- Teacher preparation

## Differentiation and adaptations
- Support for students who need extra help
- Challenges for students who need more depth
- Language support and accessibility
{notes_section}
**QUALITY REQUIREMENTS:**
- Use concrete Swedish examples and references
- Include practical implementation, not just theory
- Make sure every activity has clear instructions
- Balance individual work, pair work and group work
- Suggest realistic materials available in Swedish schools
- Adapt language level and content to the selected grade

Write an inspiring and practical lesson plan that follows Swedish school culture and Lgr22!"""

    return prompt.strip()
