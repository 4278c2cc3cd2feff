from __future__ import annotations

import re
from datetime import date

from resume_engine.core.heuristics import get_heuristic_int

FRESHER_LABEL = "Fresher/Entry Level"
UNSPECIFIED_LABEL = "Experience level not specified"

# Order matters: the first pattern that matches wins.
_EXPLICIT_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(\d+)\+?\s*years?\s*of\s*experience", re.IGNORECASE),
    re.compile(r"(\d+)\+?\s*years?\s*experience", re.IGNORECASE),
    re.compile(r"experience\s*:?\s*(\d+)\+?\s*years?", re.IGNORECASE),
    re.compile(r"(\d+)\+?\s*yrs?\s*experience", re.IGNORECASE),
    re.compile(r"(\d+)\+?\s*year\s*experience", re.IGNORECASE),
)
_YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")
_FRESHER_KEYWORDS: tuple[str, ...] = ("intern", "internship", "fresher", "graduate", "entry level")


def _explicit_mention(text: str) -> str | None:
    for pattern in _EXPLICIT_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(0)
    return None


def _inferred_years(text: str, current_year: int) -> int | None:
    years = {int(token) for token in _YEAR_RE.findall(text)}
    if len(years) < 2:
        return None
    span = current_year - min(years)
    if 0 < span < get_heuristic_int("experience.max_inferred_years", 50):
        return span
    return None


def estimate_experience(text: str, *, today: date | None = None) -> str:
    if not text:
        return UNSPECIFIED_LABEL

    explicit = _explicit_mention(text)
    if explicit:
        return explicit

    current_year = (today or date.today()).year
    span = _inferred_years(text, current_year)
    if span is not None:
        return f"Approximately {span} years"

    lowered = text.lower()
    if any(keyword in lowered for keyword in _FRESHER_KEYWORDS):
        return FRESHER_LABEL

    return UNSPECIFIED_LABEL
