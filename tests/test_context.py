from __future__ import annotations

from lesson_planner.models.curriculum import RankingResult
from lesson_planner.services.curriculum.context import assemble_context, count_curriculum_references
from lesson_planner.services.curriculum.ranking import rank_curriculum
from lesson_planner.services.curriculum.store import CurriculumStore


def test_context_lists_ranked_documents_in_order(store: CurriculumStore) -> None:
    result = rank_curriculum("forest animals", "2", ["Science"], store=store)
    context = assemble_context(result)

    blocks = context.split("\n\n")
    assert len(blocks) == len(result.documents)
    first = store.get(1)
    assert blocks[0].startswith(f"**Science ({', '.join(first.grades)}):**\n{first.content}")
    assert f"**Source:** {first.source}" in blocks[0]
    assert "**Activities:** " + ", ".join(first.activities) in blocks[0]


def test_empty_ranking_renders_fallback_notice() -> None:
    context = assemble_context(RankingResult(topic="volcanoes", grade="4", subjects=("Science", "Art")))
    assert context == (
        '**NOTE:** No specific curriculum content was found for "volcanoes" in grade 4. '
        "Use the general Lgr22 guidelines for Science, Art."
    )


def test_fallback_without_subjects() -> None:
    context = assemble_context(RankingResult(topic="volcanoes", grade="4"))
    assert context.endswith("Use the general Lgr22 guidelines for the selected subjects.")


def test_reference_count_matches_sources(store: CurriculumStore) -> None:
    result = rank_curriculum("forest animals", "2", ["Science"], store=store)
    context = assemble_context(result)
    assert count_curriculum_references(context) >= len(result.documents)
    assert count_curriculum_references("no citations here") == 0
