from __future__ import annotations

import re

from resume_engine.core.heuristics import get_heuristic_int
from resume_engine.taxonomy import SkillDictionary, SkillEntry, get_default_skill_dictionary

from .sections import find_sections

SKILL_SECTION_HEADERS: tuple[str, ...] = (
    "skills",
    "technical skills",
    "technologies",
    "expertise",
    "tools",
    "programming languages",
)
_TOKEN_SPLIT_RE = re.compile(r"[,;|\n•·\-*]")
_LABELED_LINE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(?:programming )?languages?:?\s*([^\n]+)", re.IGNORECASE),
    re.compile(r"technologies?:?\s*([^\n]+)", re.IGNORECASE),
)


def _entry_in_text(entry: SkillEntry, lowered_text: str) -> bool:
    if entry.pattern.search(lowered_text):
        return True
    return any(variant in lowered_text for variant in entry.variants)


def _whole_text_matches(lowered_text: str, dictionary: SkillDictionary) -> set[str]:
    return {entry.name for entry in dictionary.entries if _entry_in_text(entry, lowered_text)}


def _section_matches(text: str, dictionary: SkillDictionary) -> set[str]:
    found: set[str] = set()
    min_token_chars = get_heuristic_int("skills.min_token_chars", 2)
    for section in find_sections(text, SKILL_SECTION_HEADERS):
        for raw_token in _TOKEN_SPLIT_RE.split(section.content):
            token = raw_token.strip().lower()
            if len(token) < min_token_chars:
                continue
            for entry in dictionary.entries:
                if entry.lowered in token or token in entry.lowered:
                    found.add(entry.name)
    return found


def _labeled_line_matches(text: str, dictionary: SkillDictionary) -> set[str]:
    found: set[str] = set()
    for pattern in _LABELED_LINE_PATTERNS:
        for match in pattern.finditer(text):
            labeled = match.group(1).lower()
            for entry in dictionary.entries:
                if entry.lowered in labeled:
                    found.add(entry.name)
    return found


def match_skills(text: str, dictionary: SkillDictionary | None = None) -> list[str]:
    """Canonical skill names found in ``text``, sorted by code point.

    Union of a whole-text boundary/variant pass, a pass over dedicated skill
    sections and a pass over ``Languages:``/``Technologies:`` style lines.
    """
    vocabulary = dictionary if dictionary is not None else get_default_skill_dictionary()
    if not text:
        return []

    found = _whole_text_matches(text.lower(), vocabulary)
    found |= _section_matches(text, vocabulary)
    found |= _labeled_line_matches(text, vocabulary)
    return sorted(found)


def match_skills_in_line(line: str, dictionary: SkillDictionary | None = None) -> list[str]:
    vocabulary = dictionary if dictionary is not None else get_default_skill_dictionary()
    lowered = (line or "").lower()
    if not lowered:
        return []
    return [entry.name for entry in vocabulary.entries if _entry_in_text(entry, lowered)]
