"""CLI entry point for vocab-quiz.

Usage:
  python -m vocab_quiz serve [--host HOST] [--port PORT]
  python -m vocab_quiz parse FILE
  python -m vocab_quiz quiz FILE [--count N] [--kinds mcq,tf,fill]
  python -m vocab_quiz export FILE [--format csv|json] [--title TITLE]
"""
from __future__ import annotations

import sys
from pathlib import Path


def main():
    args = sys.argv[1:]
    command = args[0] if args else "serve"

    if command == "serve":
        _serve(args[1:])
    elif command == "parse":
        _parse(args[1:])
    elif command == "quiz":
        _quiz(args[1:])
    elif command == "export":
        _export(args[1:])
    else:
        print(f"Unknown command: {command}")
        print("Commands: serve, parse, quiz, export")
        sys.exit(1)


def _parse_flag(args: list[str], name: str, default: str) -> str:
    for i, a in enumerate(args):
        if a == name and i + 1 < len(args):
            return args[i + 1]
    return default


def _int_flag(args: list[str], name: str, default: int) -> int:
    value = _parse_flag(args, name, str(default))
    try:
        return int(value)
    except ValueError:
        print(f"{name} expects an integer, got {value!r}")
        sys.exit(1)


def _input_file(args: list[str]) -> Path:
    if not args or args[0].startswith("--"):
        print("Missing FILE argument.")
        sys.exit(1)
    path = Path(args[0])
    if not path.exists():
        print(f"File not found: {path}")
        sys.exit(1)
    return path


def _serve(args: list[str]):
    import uvicorn

    from vocab_quiz.config import load_settings

    settings = load_settings()
    host = _parse_flag(args, "--host", settings.host)
    port = _int_flag(args, "--port", settings.port)

    print(f"Starting Vocab Quiz on http://{host}:{port}")
    print("Press Ctrl+C to stop\n")
    uvicorn.run(
        "vocab_quiz.app:app",
        host=host,
        port=port,
        reload=False,
        timeout_graceful_shutdown=5,
    )


def _parse(args: list[str]):
    from vocab_quiz.parsers.tabular_parser import parse_vocab_file

    entries = parse_vocab_file(_input_file(args))
    for e in entries:
        ipa = f" [{e.ipa}]" if e.ipa else ""
        print(f"  {e.word}{ipa}: {e.meaning or '(no meaning)'}")
    eligible = sum(1 for e in entries if e.quiz_eligible)
    print(f"\n{len(entries)} entries, {eligible} usable in a quiz")


def _ask(index: int, question) -> object:
    from vocab_quiz.grading import parse_tf_answer
    from vocab_quiz.models import MCQQuestion, TFQuestion

    print(f"{index}. {question.question}")
    if isinstance(question, MCQQuestion):
        for i, option in enumerate(question.options, 1):
            print(f"   {i}) {option}")
        reply = input("   > ").strip()
        if reply.isdigit() and 1 <= int(reply) <= len(question.options):
            return question.options[int(reply) - 1]
        return reply
    if isinstance(question, TFQuestion):
        print(f"   means: {question.meaning}")
        return parse_tf_answer(input("   true/false > "))
    return input("   meaning > ")


def _quiz(args: list[str]):
    from vocab_quiz.config import load_settings
    from vocab_quiz.grading import CORRECT, UNANSWERED, grade_answer
    from vocab_quiz.models import Score, TFQuestion
    from vocab_quiz.parsers.tabular_parser import parse_vocab_file
    from vocab_quiz.quiz_generator import generate_quiz

    settings = load_settings()
    entries = parse_vocab_file(_input_file(args))
    count = settings.clamp_question_count(_int_flag(args, "--count", settings.default_question_count))
    kinds_arg = _parse_flag(args, "--kinds", ",".join(settings.default_kinds))
    kinds = {k.strip() for k in kinds_arg.split(",") if k.strip()}

    quiz = generate_quiz(entries, kinds, count, choices=settings.mcq_choices)
    if not quiz:
        print("Not enough vocabulary for the requested quiz types.")
        sys.exit(1)

    print(f"Quiz ({len(quiz)} questions)\n")
    score = Score(total=len(quiz))
    for i, q in enumerate(quiz, 1):
        status = grade_answer(q, _ask(i, q))
        if status == CORRECT:
            score.correct += 1
            print("   Correct!\n")
        elif status == UNANSWERED:
            print("   (skipped)\n")
        else:
            expected = ("true" if q.answer else "false") if isinstance(q, TFQuestion) else q.answer
            print(f"   Incorrect. Answer: {expected}\n")

    print(f"Score: {score.correct} / {score.total}")


def _export(args: list[str]):
    from vocab_quiz.export import entries_to_csv, entries_to_json, export_filename
    from vocab_quiz.parsers.tabular_parser import parse_vocab_file

    entries = parse_vocab_file(_input_file(args))
    fmt = _parse_flag(args, "--format", "csv")
    if fmt == "csv":
        content = entries_to_csv(entries)
    elif fmt == "json":
        content = entries_to_json(entries)
    else:
        print(f"Unknown format: {fmt} (expected csv or json)")
        sys.exit(1)

    # Without --title the deck goes to stdout
    title = _parse_flag(args, "--title", "")
    if not title:
        print(content)
        return
    out = Path(export_filename(title, fmt))
    out.write_text(content + "\n", encoding="utf-8")
    print(f"Wrote {len(entries)} entries to {out}")


if __name__ == "__main__":
    main()
