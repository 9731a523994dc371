from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Literal, Union

# Canonical order; generation draws kinds from this sequence
QUIZ_KINDS: tuple[str, ...] = ("mcq", "tf", "fill")


@dataclass(frozen=True)
class VocabEntry:
    word: str
    ipa: str = ""
    meaning: str = ""

    @property
    def quiz_eligible(self) -> bool:
        return bool(self.word) and bool(self.meaning)

    def to_dict(self) -> dict:
        return {"word": self.word, "ipa": self.ipa, "meaning": self.meaning}

    @classmethod
    def from_dict(cls, data: Mapping) -> VocabEntry:
        """Build an entry from any ``{word, ipa, meaning}`` mapping.

        Missing or null keys become empty strings.  No other validation is
        done, so externally supplied triples pass through as-is.
        """
        return cls(
            word=_as_text(data.get("word")),
            ipa=_as_text(data.get("ipa")),
            meaning=_as_text(data.get("meaning")),
        )


def _as_text(value) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True)
class MCQQuestion:
    question: str
    options: list[str]
    answer: str
    type: Literal["mcq"] = field(default="mcq", init=False)


@dataclass(frozen=True)
class TFQuestion:
    question: str
    meaning: str  # proposition shown to the user
    answer: bool
    type: Literal["tf"] = field(default="tf", init=False)


@dataclass(frozen=True)
class FillQuestion:
    question: str
    answer: str
    type: Literal["fill"] = field(default="fill", init=False)


QuizQuestion = Union[MCQQuestion, TFQuestion, FillQuestion]
Quiz = list[QuizQuestion]


@dataclass
class Score:
    correct: int = 0
    total: int = 0

    def to_dict(self) -> dict:
        return {"correct": self.correct, "total": self.total}


def question_to_dict(q: QuizQuestion) -> dict:
    if isinstance(q, MCQQuestion):
        return {"type": q.type, "question": q.question, "options": list(q.options), "answer": q.answer}
    if isinstance(q, TFQuestion):
        return {"type": q.type, "question": q.question, "meaning": q.meaning, "answer": q.answer}
    if isinstance(q, FillQuestion):
        return {"type": q.type, "question": q.question, "answer": q.answer}
    raise TypeError(f"not a quiz question: {type(q).__name__}")


def question_from_dict(data: Mapping) -> QuizQuestion:
    """Rebuild a question from its JSON shape.

    Raises ``ValueError`` when ``type`` is unknown or a required key is
    missing or of the wrong type.
    """
    if not isinstance(data, Mapping):
        raise ValueError(f"question must be an object, got {type(data).__name__}")
    qtype = data.get("type")
    question = data.get("question")
    if not isinstance(question, str):
        raise ValueError("question text missing")

    if qtype == "mcq":
        options = data.get("options")
        answer = data.get("answer")
        if not isinstance(options, list) or not all(isinstance(o, str) for o in options):
            raise ValueError("mcq options must be a list of strings")
        if not isinstance(answer, str):
            raise ValueError("mcq answer must be a string")
        return MCQQuestion(question=question, options=list(options), answer=answer)
    if qtype == "tf":
        meaning = data.get("meaning")
        answer = data.get("answer")
        if not isinstance(meaning, str):
            raise ValueError("tf meaning must be a string")
        if not isinstance(answer, bool):
            raise ValueError("tf answer must be a boolean")
        return TFQuestion(question=question, meaning=meaning, answer=answer)
    if qtype == "fill":
        answer = data.get("answer")
        if not isinstance(answer, str):
            raise ValueError("fill answer must be a string")
        return FillQuestion(question=question, answer=answer)
    raise ValueError(f"unknown question type: {qtype!r}")
