"""Check submitted answers against generated quiz questions."""
from __future__ import annotations

from collections.abc import Sequence

from vocab_quiz.models import FillQuestion, MCQQuestion, QuizQuestion, Score, TFQuestion

CORRECT = "correct"
INCORRECT = "incorrect"
UNANSWERED = "unanswered"

_TRUE_WORDS = {"t", "true", "y", "yes"}
_FALSE_WORDS = {"f", "false", "n", "no"}


def _is_unanswered(answer) -> bool:
    return answer is None or answer == ""


def grade_answer(question: QuizQuestion, answer) -> str:
    """Return ``"correct"``, ``"incorrect"`` or ``"unanswered"``.

    mcq: exact string match.  tf: the answer must be a bool equal to the
    stored truth value.  fill: trimmed, case-insensitive match.
    """
    if _is_unanswered(answer):
        return UNANSWERED

    if isinstance(question, MCQQuestion):
        ok = answer == question.answer
    elif isinstance(question, TFQuestion):
        ok = isinstance(answer, bool) and answer == question.answer
    elif isinstance(question, FillQuestion):
        ok = str(answer).strip().lower() == question.answer.strip().lower()
    else:
        raise TypeError(f"not a quiz question: {type(question).__name__}")
    return CORRECT if ok else INCORRECT


def grade_quiz(quiz: Sequence[QuizQuestion], answers: Sequence) -> list[str]:
    """Grade every question; answers missing past the end count as unanswered."""
    return [
        grade_answer(q, answers[i] if i < len(answers) else None)
        for i, q in enumerate(quiz)
    ]


def score_quiz(quiz: Sequence[QuizQuestion], answers: Sequence) -> Score:
    statuses = grade_quiz(quiz, answers)
    return Score(correct=statuses.count(CORRECT), total=len(quiz))


def parse_tf_answer(text: str) -> bool | None:
    """Map typed input like ``y`` / ``False`` to a bool; ``None`` if unclear."""
    word = text.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    return None
