from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    log_level: str
    skills_dictionary_path: str | None
    heuristics_config_path: str | None
    log_text_preview_chars: int


settings = Settings(
    log_level=(_get_env("LOG_LEVEL", "INFO") or "INFO").strip().upper(),
    skills_dictionary_path=_get_env("SKILLS_DICTIONARY_PATH"),
    heuristics_config_path=_get_env("HEURISTICS_CONFIG_PATH"),
    log_text_preview_chars=_get_env_int("LOG_TEXT_PREVIEW_CHARS", 120),
)

if settings.log_text_preview_chars < 0:
    raise RuntimeError("LOG_TEXT_PREVIEW_CHARS must be zero or a positive integer.")
