"""
Curriculum Context Assembler

Renders ranked reference documents into the text block that is injected into
the lesson plan prompt.
"""

from lesson_planner.models.curriculum import RankingResult


def assemble_context(result: RankingResult) -> str:
    """Format ranked documents for the prompt, or a fallback notice if none matched."""
    if not result.documents:
        subjects = ", ".join(result.subjects) if result.subjects else "the selected subjects"
        return (
            f'**NOTE:** No specific curriculum content was found for "{result.topic}" '
            f"in grade {result.grade}. Use the general Lgr22 guidelines for {subjects}."
        )

    blocks = []
    for item in result.documents:
        doc = item.document
        blocks.append(
            f"**{doc.subject} ({', '.join(doc.grades)}):**\n"
            f"{doc.content}\n"
            f"**Activities:** {', '.join(doc.activities)}\n"
            f"**Source:** {doc.source}"
        )
    return "\n\n".join(blocks)


def count_curriculum_references(context: str) -> int:
    """Number of Lgr22 citations in an assembled context."""
    return context.count("Lgr22")
