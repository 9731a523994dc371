"""Build randomized quizzes (multiple-choice, true/false, fill-in) from vocabulary."""
from __future__ import annotations

import logging
from collections.abc import Collection, Sequence

from vocab_quiz.models import (
    QUIZ_KINDS,
    FillQuestion,
    MCQQuestion,
    Quiz,
    QuizQuestion,
    TFQuestion,
    VocabEntry,
)
from vocab_quiz.randomness import RandomSource, default_source

_log = logging.getLogger("vocab_quiz.qgen")

MCQ_CHOICES = 4

# Minimum number of quiz-eligible entries before a kind can be offered
MIN_CANDIDATES = {
    "mcq": 4,
    "tf": 2,
    "fill": 0,
}


def _available_kinds(kinds: Collection[str], candidate_count: int) -> list[str]:
    available = []
    for kind in QUIZ_KINDS:
        if kind not in kinds:
            continue
        if candidate_count < MIN_CANDIDATES[kind]:
            _log.debug("Excluding %s: %d candidates, %d required",
                       kind, candidate_count, MIN_CANDIDATES[kind])
            continue
        available.append(kind)
    unknown = set(kinds) - set(QUIZ_KINDS)
    if unknown:
        _log.debug("Ignoring unknown quiz kinds: %s", ", ".join(sorted(unknown)))
    return available


def _build_mcq(
    entries: Sequence[VocabEntry],
    index: int,
    rng: RandomSource,
    choices: int = MCQ_CHOICES,
) -> MCQQuestion:
    """Multiple-choice: the correct meaning plus up to ``choices - 1`` others.

    Distractors are distinct meanings of the other entries.  With too few of
    them the question just has fewer options.
    """
    entry = entries[index]
    correct = entry.meaning
    pool = list(dict.fromkeys(
        e.meaning for i, e in enumerate(entries)
        if i != index and e.meaning and e.meaning != correct
    ))
    distractors = rng.shuffled(pool)[:max(0, choices - 1)]
    options = rng.shuffled([correct, *distractors])
    return MCQQuestion(question=entry.word, options=options, answer=correct)


def _build_tf(entries: Sequence[VocabEntry], index: int, rng: RandomSource) -> TFQuestion:
    entry = entries[index]
    correct = entry.meaning
    if rng.coin():
        return TFQuestion(question=entry.word, meaning=correct, answer=True)

    others = [
        e for i, e in enumerate(entries)
        if i != index and e.meaning and e.meaning != correct
    ]
    if others:
        shown = rng.choice(others).meaning
    else:
        shown = "Not " + correct
    return TFQuestion(question=entry.word, meaning=shown, answer=False)


def _build_fill(entries: Sequence[VocabEntry], index: int) -> FillQuestion:
    entry = entries[index]
    return FillQuestion(question=entry.word, answer=entry.meaning)


def _build_question(
    kind: str,
    entries: Sequence[VocabEntry],
    index: int,
    rng: RandomSource,
    choices: int,
) -> QuizQuestion:
    if kind == "mcq":
        return _build_mcq(entries, index, rng, choices)
    if kind == "tf":
        return _build_tf(entries, index, rng)
    if kind == "fill":
        return _build_fill(entries, index)
    raise ValueError(f"unknown quiz kind: {kind!r}")


def generate_quiz(
    entries: Sequence[VocabEntry],
    kinds: Collection[str],
    count: int,
    rng: RandomSource | None = None,
    choices: int = MCQ_CHOICES,
) -> Quiz:
    """Generate a quiz of up to *count* questions from *entries*.

    Each quiz-eligible entry (non-empty word and meaning) is used at most
    once.  Every question gets a kind drawn uniformly from the requested
    *kinds* that the vocabulary can support.  Returns an empty list whenever
    nothing can be generated; never raises for bad input.
    """
    if not entries or not kinds:
        return []
    if rng is None:
        rng = default_source()

    candidates = [i for i, e in enumerate(entries) if e.quiz_eligible]
    if not candidates:
        return []

    available = _available_kinds(kinds, len(candidates))
    if not available:
        _log.info("No quiz kinds available for %d candidates (requested: %s)",
                  len(candidates), ", ".join(sorted(kinds)))
        return []

    n = max(0, min(count, len(candidates)))
    selected = rng.shuffled(candidates)[:n]

    quiz: Quiz = []
    for index in selected:
        kind = rng.choice(available)
        quiz.append(_build_question(kind, entries, index, rng, choices))

    _log.info("Generated %d questions from %d candidates (kinds: %s)",
              len(quiz), len(candidates), ", ".join(available))
    return quiz
