from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.json"

DEFAULTS = {
    "default_question_count": 10,
    "min_question_count": 1,
    "max_question_count": 20,
    "default_kinds": ["mcq"],
    "mcq_choices": 4,
    "deck_title": "My Vocab Deck",
    "host": "127.0.0.1",
    "port": 8765,
}


@dataclass
class Settings:
    default_question_count: int = DEFAULTS["default_question_count"]
    min_question_count: int = DEFAULTS["min_question_count"]
    max_question_count: int = DEFAULTS["max_question_count"]
    default_kinds: list[str] = field(default_factory=lambda: list(DEFAULTS["default_kinds"]))
    mcq_choices: int = DEFAULTS["mcq_choices"]
    deck_title: str = DEFAULTS["deck_title"]
    host: str = DEFAULTS["host"]
    port: int = DEFAULTS["port"]

    def clamp_question_count(self, count: int) -> int:
        return max(self.min_question_count, min(self.max_question_count, count))

    def to_dict(self) -> dict:
        return {
            "default_question_count": self.default_question_count,
            "min_question_count": self.min_question_count,
            "max_question_count": self.max_question_count,
            "default_kinds": self.default_kinds,
            "mcq_choices": self.mcq_choices,
            "deck_title": self.deck_title,
            "host": self.host,
            "port": self.port,
        }


def load_settings() -> Settings:
    if CONFIG_PATH.exists():
        raw = json.loads(CONFIG_PATH.read_text())
        known = {f.name for f in Settings.__dataclass_fields__.values()}
        filtered = {k: v for k, v in raw.items() if k in known}
        settings = Settings(**filtered)
        reason = validate_settings(settings)
        if reason:
            raise ValueError(f"Invalid settings in {CONFIG_PATH}: {reason}")
        return settings
    return Settings()


def save_settings(settings: Settings) -> None:
    CONFIG_PATH.write_text(json.dumps(settings.to_dict(), indent=4) + "\n")


def _type_error(key: str, value) -> str | None:
    expected = DEFAULTS[key]
    if isinstance(expected, list):
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            return f"{key} must be a list of strings"
    elif isinstance(expected, int):
        if isinstance(value, bool) or not isinstance(value, int):
            return f"{key} must be an integer"
    elif not isinstance(value, str):
        return f"{key} must be a string"
    return None


def validate_settings(settings: Settings) -> str | None:
    """Return the reason *settings* is unusable, or None if it is fine."""
    for key, value in settings.to_dict().items():
        reason = _type_error(key, value)
        if reason:
            return reason
    if settings.mcq_choices < 2:
        return "mcq_choices must be at least 2"
    if settings.min_question_count > settings.max_question_count:
        return "min_question_count must not exceed max_question_count"
    return None
