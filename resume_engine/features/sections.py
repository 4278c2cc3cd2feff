from __future__ import annotations

from typing import Iterable

from resume_engine.core.heuristics import get_heuristic_int
from resume_engine.normalize.utils import split_lines
from resume_engine.schemas import SectionBody

COMMON_SECTION_WORDS: tuple[str, ...] = (
    "experience",
    "education",
    "skills",
    "projects",
    "work",
    "employment",
    "qualifications",
    "certifications",
    "achievements",
    "summary",
    "objective",
    "contact",
    "personal",
    "references",
    "languages",
    "interests",
    "hobbies",
)


def _header_max_chars() -> int:
    return get_heuristic_int("sections.header_max_chars", 50)


def looks_like_header(line: str) -> bool:
    """Short lines mentioning a common résumé section word.

    Deliberately over-triggers so a section body stops before it can swallow
    the next section.
    """
    stripped = (line or "").strip()
    min_chars = get_heuristic_int("sections.header_min_chars", 3)
    if not min_chars <= len(stripped) < _header_max_chars():
        return False
    lowered = stripped.lower()
    return any(word in lowered for word in COMMON_SECTION_WORDS)


def _matches_wanted_header(lowered_line: str, names: tuple[str, ...]) -> bool:
    if len(lowered_line) >= _header_max_chars():
        return False
    return any(name in lowered_line for name in names)


def find_sections(text: str, candidate_headers: Iterable[str]) -> list[SectionBody]:
    names = tuple(name.strip().lower() for name in candidate_headers if name and name.strip())
    if not names:
        return []

    max_body_chars = get_heuristic_int("sections.max_body_chars", 2000)
    lines = split_lines(text)
    sections: list[SectionBody] = []

    for index, raw_line in enumerate(lines):
        header = raw_line.strip()
        if not _matches_wanted_header(header.lower(), names):
            continue

        content = ""
        for next_line in lines[index + 1 :]:
            stripped = next_line.strip()
            if looks_like_header(stripped):
                break
            content += f"{stripped}\n"
            if len(content) > max_body_chars:
                break

        body = content.strip()
        if body:
            sections.append(SectionBody(header_matched=header, content=body))

    return sections
