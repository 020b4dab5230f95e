"""
Curriculum Relevance Scorer

Pure lexical scoring of one reference document against a request.
Three independent sub-scores, each in [0, 1]:

1. Subject  – does any requested subject name the document's subject area?
2. Theme    – how strongly do the topic words hit the document's keywords,
              content and concept tags (plus associated terms)?
3. Grade    – how close is the requested grade to the document's grades?

They are combined as 0.4 * subject + 0.4 * theme + 0.2 * grade.
Only the theme score can be 0; subject and grade have non-zero floors so a
document stays reachable through the other signals.
"""

import re
from collections.abc import Mapping, Sequence
from types import MappingProxyType

from lesson_planner.models.curriculum import ReferenceDocument
from lesson_planner.services.curriculum.corpus import KINDERGARTEN


SUBJECT_WEIGHT = 0.4
THEME_WEIGHT = 0.4
GRADE_WEIGHT = 0.2

# Theme hit weights
KEYWORD_HIT = 1.0
CONTENT_HIT = 0.5
CONCEPT_TAG_HIT = 0.7
ASSOCIATION_HIT = 0.3

# Theme word -> related terms looked up in keywords, concept tags and content
DEFAULT_THEME_ASSOCIATIONS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "animals": ("nature", "biology", "ecology", "habitat", "species", "observation"),
    "space": ("astronomy", "planets", "stars", "universe", "physics", "models"),
    "environment": ("sustainability", "climate", "recycling", "ecology", "natural resources"),
    "history": ("past", "heritage", "tradition", "chronology", "source criticism"),
    "body": ("health", "anatomy", "senses", "movement", "hygiene", "emotions"),
    "food": ("nutrition", "groceries", "health", "growing", "food culture", "diet"),
    "transport": ("vehicles", "technology", "movement", "development", "innovation"),
    "family": ("home", "relationships", "traditions", "stories", "identity"),
    "mathematics": ("numbers", "counting", "geometry", "measurement", "problems", "logic"),
    "language": ("reading", "writing", "communication", "story", "vocabulary"),
})

_LEADING_INT_RE = re.compile(r"^\s*(\d+)")


def normalise(value: str) -> str:
    """Lowercase and collapse whitespace."""
    return " ".join(value.split()).lower()


def _parse_grade(grade: str) -> int | None:
    match = _LEADING_INT_RE.match(grade)
    return int(match.group(1)) if match else None


def _matches_either_way(term: str, word: str) -> bool:
    return word in term or term in word


# ── Sub-scores ───────────────────────────────────────────────────────────────

def subject_score(subjects: Sequence[str], document: ReferenceDocument) -> float:
    """1.0 on a subject match, 0.2 otherwise, 0.5 when no subject filter is given."""
    wanted = [normalise(subject) for subject in subjects if subject.strip()]
    if not wanted:
        return 0.5

    doc_subject = normalise(document.subject)
    if any(_matches_either_way(doc_subject, subject) for subject in wanted):
        return 1.0
    return 0.2


def theme_score(
    topic: str,
    document: ReferenceDocument,
    associations: Mapping[str, Sequence[str]] | None = None,
) -> float:
    """
    Average weight of all lexical hits between the topic and the document.

    Every (keyword, word) and (concept tag, word) pair matching in either
    direction is a hit, as is every topic word found in the content and
    every associated term of a topic word found anywhere in the document.
    Returns exactly 0.0 when nothing matches.
    """
    if associations is None:
        associations = DEFAULT_THEME_ASSOCIATIONS

    words = normalise(topic).split()
    keywords = [normalise(keyword) for keyword in document.keywords]
    tags = [normalise(tag) for tag in document.concept_tags]
    content = normalise(document.content)

    total = 0.0
    hits = 0

    for keyword in keywords:
        for word in words:
            if _matches_either_way(keyword, word):
                total += KEYWORD_HIT
                hits += 1

    for word in words:
        if word in content:
            total += CONTENT_HIT
            hits += 1

    for tag in tags:
        for word in words:
            if _matches_either_way(tag, word):
                total += CONCEPT_TAG_HIT
                hits += 1

    for word in words:
        for related in associations.get(word, ()):
            related = normalise(related)
            if (
                any(related in keyword for keyword in keywords)
                or any(related in tag for tag in tags)
                or related in content
            ):
                total += ASSOCIATION_HIT
                hits += 1

    if hits == 0:
        return 0.0
    return min(total / max(hits, 1), 1.0)


def grade_score(grade: str, document: ReferenceDocument) -> float:
    """
    Proximity of the requested grade to the document's grades.

    Exact match 1.0; numeric distance 1/2/3 gives 0.8/0.6/0.4; kindergarten
    and grade 1 are adjacent (0.8); anything else, including unparseable
    grades, gets the 0.2 floor.
    """
    wanted = normalise(grade)
    doc_grades = [normalise(doc_grade) for doc_grade in document.grades]

    if wanted in doc_grades:
        return 1.0

    wanted_number = _parse_grade(wanted)
    if wanted_number is not None:
        distances = [
            abs(wanted_number - number)
            for number in (_parse_grade(doc_grade) for doc_grade in doc_grades)
            if number is not None
        ]
        if distances:
            distance = min(distances)
            if distance <= 1:
                return 0.8
            if distance <= 2:
                return 0.6
            if distance <= 3:
                return 0.4

    if wanted == KINDERGARTEN and "1" in doc_grades:
        return 0.8
    if wanted == "1" and KINDERGARTEN in doc_grades:
        return 0.8

    return 0.2


def combine_scores(subject: float, theme: float, grade: float) -> float:
    return SUBJECT_WEIGHT * subject + THEME_WEIGHT * theme + GRADE_WEIGHT * grade
