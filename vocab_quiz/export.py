"""CSV / JSON export of decks and quizzes."""
from __future__ import annotations

import json
import re
from collections.abc import Sequence

from vocab_quiz.models import QuizQuestion, VocabEntry, question_to_dict

CSV_HEADER = ("word", "ipa", "meaning")


def _quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def entries_to_csv(entries: Sequence[VocabEntry]) -> str:
    lines = [",".join(CSV_HEADER)]
    for e in entries:
        lines.append(",".join(_quote(v) for v in (e.word, e.ipa, e.meaning)))
    return "\n".join(lines)


def entries_to_json(entries: Sequence[VocabEntry]) -> str:
    return json.dumps([e.to_dict() for e in entries], indent=2, ensure_ascii=False)


def quiz_to_json(quiz: Sequence[QuizQuestion]) -> str:
    return json.dumps([question_to_dict(q) for q in quiz], indent=2, ensure_ascii=False)


def export_filename(title: str, ext: str) -> str:
    """``"My Vocab Deck", "csv"`` -> ``"My_Vocab_Deck.csv"``.

    Every whitespace run becomes one ``_``, leading and trailing runs
    included, so ``" Deck "`` gives ``"_Deck_"``. Only an empty title
    falls back to ``"deck"``.
    """
    stem = re.sub(r"\s+", "_", title) or "deck"
    return f"{stem}.{ext}"
