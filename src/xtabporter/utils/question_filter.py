"""Filters applied to parsed questions before they are presented."""

from typing import TYPE_CHECKING

from ..core.constants import KEYWORDS

if TYPE_CHECKING:
    from ..models.crosstab import Question


def is_summary_question(question: "Question") -> bool:
    """True when the id or description mentions a summary (case-insensitive)."""
    keyword = KEYWORDS.SUMMARY_KEYWORD
    return keyword in question.id.lower() or keyword in question.description.lower()


def filter_out_summary_questions(questions: list["Question"]) -> list["Question"]:
    """Drop summary questions, keeping the order of the rest."""
    return [q for q in questions if not is_summary_question(q)]
