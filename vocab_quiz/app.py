"""FastAPI application with all routes."""
from __future__ import annotations

import dataclasses
import logging
import re
from urllib.parse import quote

logging.basicConfig(level=logging.INFO, format="%(name)s | %(message)s")

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import Response

from vocab_quiz.config import Settings, load_settings, save_settings, validate_settings
from vocab_quiz.export import entries_to_csv, entries_to_json, export_filename, quiz_to_json
from vocab_quiz.grading import grade_quiz, score_quiz
from vocab_quiz.models import VocabEntry, question_from_dict, question_to_dict
from vocab_quiz.parsers.tabular_parser import parse_text_to_vocab_rows
from vocab_quiz.quiz_generator import generate_quiz

app = FastAPI(title="Vocab Quiz")

_log = logging.getLogger("vocab_quiz.api")

# Loaded on first use (tests may set it directly)
_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


async def _json_body(request: Request) -> dict:
    if not await request.body():
        return {}
    try:
        body = await request.json()
    except ValueError:
        raise HTTPException(400, "Request body is not valid JSON")
    if not isinstance(body, dict):
        raise HTTPException(400, "Request body must be a JSON object")
    return body


def _entries_from_body(body: dict) -> list[VocabEntry]:
    raw = body.get("entries")
    if not isinstance(raw, list) or not all(isinstance(r, dict) for r in raw):
        raise HTTPException(400, "entries must be a list of {word, ipa, meaning} objects")
    return [VocabEntry.from_dict(r) for r in raw]


def _quiz_from_body(body: dict):
    raw = body.get("quiz")
    if not isinstance(raw, list):
        raise HTTPException(400, "quiz must be a list of questions")
    try:
        return [question_from_dict(q) for q in raw]
    except ValueError as e:
        raise HTTPException(400, f"Invalid question: {e}")


def _download(content: str, filename: str, media_type: str) -> Response:
    # Header values are latin-1; non-ASCII names travel in filename* (RFC 6266)
    fallback = re.sub(r'[^\x20-\x7e]|["\\]', "_", filename)
    disposition = f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"
    return Response(
        content=content,
        media_type=f"{media_type}; charset=utf-8",
        headers={"Content-Disposition": disposition},
    )


# ── API: Settings ─────────────────────────────────────────────────────────

@app.get("/api/settings")
async def api_get_settings():
    return get_settings().to_dict()


@app.put("/api/settings")
async def api_update_settings(request: Request):
    body = await _json_body(request)
    s = get_settings()
    known = {f.name for f in Settings.__dataclass_fields__.values()}
    updates = {k: v for k, v in body.items() if k in known}
    reason = validate_settings(dataclasses.replace(s, **updates))
    if reason:
        raise HTTPException(400, reason)
    for k, v in updates.items():
        setattr(s, k, v)
    save_settings(s)
    _log.info("Settings updated: %s", sorted(updates))
    return s.to_dict()


# ── API: Parse ────────────────────────────────────────────────────────────

@app.post("/api/parse")
async def api_parse(request: Request):
    body = await _json_body(request)
    text = body.get("text")
    if not isinstance(text, str):
        raise HTTPException(400, "No text provided")
    entries = parse_text_to_vocab_rows(text)
    return {
        "entries": [e.to_dict() for e in entries],
        "count": len(entries),
    }


# ── API: Quiz ─────────────────────────────────────────────────────────────

@app.post("/api/quiz")
async def api_quiz(request: Request):
    body = await _json_body(request)
    s = get_settings()
    entries = _entries_from_body(body)

    kinds = body.get("kinds", s.default_kinds)
    if not isinstance(kinds, list) or not all(isinstance(k, str) for k in kinds):
        raise HTTPException(400, "kinds must be a list of strings")

    count = body.get("count", s.default_question_count)
    if isinstance(count, bool) or not isinstance(count, int):
        raise HTTPException(400, "count must be an integer")
    count = s.clamp_question_count(count)

    quiz = generate_quiz(entries, set(kinds), count, choices=s.mcq_choices)
    _log.info("Quiz request: %d entries, kinds=%s, count=%d -> %d questions",
              len(entries), ",".join(kinds), count, len(quiz))
    return {
        "quiz": [question_to_dict(q) for q in quiz],
        "count": len(quiz),
    }


@app.post("/api/grade")
async def api_grade(request: Request):
    body = await _json_body(request)
    quiz = _quiz_from_body(body)
    answers = body.get("answers", [])
    if not isinstance(answers, list):
        raise HTTPException(400, "answers must be a list")
    return {
        "statuses": grade_quiz(quiz, answers),
        "score": score_quiz(quiz, answers).to_dict(),
    }


# ── API: Export ───────────────────────────────────────────────────────────

@app.post("/api/export/csv")
async def api_export_csv(request: Request):
    body = await _json_body(request)
    entries = _entries_from_body(body)
    title = body.get("title") or get_settings().deck_title
    return _download(entries_to_csv(entries), export_filename(str(title), "csv"), "text/csv")


@app.post("/api/export/json")
async def api_export_json(request: Request):
    body = await _json_body(request)
    entries = _entries_from_body(body)
    title = body.get("title") or get_settings().deck_title
    return _download(entries_to_json(entries), export_filename(str(title), "json"), "application/json")


@app.post("/api/export/quiz")
async def api_export_quiz(request: Request):
    body = await _json_body(request)
    quiz = _quiz_from_body(body)
    return _download(quiz_to_json(quiz), "quiz.json", "application/json")
