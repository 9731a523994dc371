"""Parse pasted or uploaded word lists into VocabEntry objects.

Accepts comma- or tab-separated rows in any of these shapes:
  word
  word,meaning
  word,ipa,meaning[,more meaning...]

The first line decides the delimiter (tab if it has one, comma otherwise)
and is dropped when it looks like a ``word,ipa,meaning`` header.
"""
from __future__ import annotations

import logging
import re
from pathlib import Path

from vocab_quiz.models import VocabEntry

_log = logging.getLogger("vocab_quiz.parser")

_QUOTED = re.compile(r'^"(.*)"$', re.DOTALL)


def _skip_blanks(line: str, i: int, delim: str) -> int:
    while i < len(line) and line[i] in " \t" and line[i] != delim:
        i += 1
    return i


def _closing_quote_end(line: str, start: int, delim: str) -> int | None:
    """Index just past a quoted field opened at *start*, or None.

    The field closes at a ``"`` followed (after blanks) by the delimiter or
    the end of the line.
    """
    j = start + 1
    while j < len(line):
        if line[j] == '"':
            k = _skip_blanks(line, j + 1, delim)
            if k == len(line) or line[k] == delim:
                return k
        j += 1
    return None


def _split_fields(line: str, delim: str) -> list[str]:
    """Split *line* on *delim*, keeping delimiters inside a quoted field.

    A field counts as quoted only when ``"`` is its first non-blank
    character; quotes elsewhere (``12" ruler``) are plain text.
    """
    fields: list[str] = []
    start = 0
    while True:
        first = _skip_blanks(line, start, delim)
        end = None
        if first < len(line) and line[first] == '"':
            end = _closing_quote_end(line, first, delim)
        if end is None:
            end = line.find(delim, start)
            if end == -1:
                end = len(line)
        fields.append(line[start:end])
        if end >= len(line):
            return fields
        start = end + 1


def _clean_field(raw: str) -> str:
    # Strip one enclosing pair of quotes; inner "" is left as-is
    return _QUOTED.sub(r"\1", raw.strip())


def _is_header(cols: list[str]) -> bool:
    header = ",".join(cols).lower()
    return "word" in header and ("meaning" in header or "ipa" in header)


def _row_to_entry(cols: list[str]) -> VocabEntry:
    if len(cols) == 1:
        return VocabEntry(word=cols[0])
    if len(cols) == 2:
        return VocabEntry(word=cols[0], meaning=cols[1])
    return VocabEntry(word=cols[0], ipa=cols[1], meaning=" ".join(cols[2:]))


def parse_text_to_vocab_rows(text: str) -> list[VocabEntry]:
    lines = [line.strip() for line in re.split(r"\r?\n", text)]
    lines = [line for line in lines if line]
    if not lines:
        return []

    delim = "\t" if "\t" in lines[0] else ","
    rows = [[_clean_field(c) for c in _split_fields(line, delim)] for line in lines]

    if _is_header(rows[0]):
        _log.debug("Dropping header row: %s", rows[0])
        rows = rows[1:]

    entries = [_row_to_entry(cols) for cols in rows]
    entries = [e for e in entries if e.word]
    _log.info("Parsed %d entries (%s-delimited)", len(entries), "tab" if delim == "\t" else "comma")
    return entries


def parse_vocab_file(path: Path) -> list[VocabEntry]:
    # utf-8-sig drops the BOM spreadsheet exports like to prepend
    text = Path(path).read_text(encoding="utf-8-sig")
    return parse_text_to_vocab_rows(text)
