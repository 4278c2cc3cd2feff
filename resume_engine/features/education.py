from __future__ import annotations

from resume_engine.core.heuristics import get_heuristic_int
from resume_engine.normalize.utils import split_lines
from resume_engine.schemas.profile import MAX_EDUCATION_ENTRIES

from .sections import find_sections

EDUCATION_KEYWORDS: tuple[str, ...] = (
    "B.Tech",
    "B.E.",
    "Bachelor",
    "Master",
    "M.Tech",
    "M.E.",
    "MBA",
    "PhD",
    "Doctorate",
    "Diploma",
    "Certificate",
    "Associate",
    "B.Sc",
    "M.Sc",
    "B.A.",
    "M.A.",
    "B.Com",
    "M.Com",
    "Computer Science",
    "Information Technology",
    "Software Engineering",
    "Electronics",
    "Mechanical",
    "Civil",
    "Electrical",
    "Chemical",
    "Biotechnology",
    "Mathematics",
    "Physics",
    "Chemistry",
    "Biology",
    "Business Administration",
    "Management",
)
EDUCATION_SECTION_HEADERS: tuple[str, ...] = ("education", "academic", "qualification")


def extract_education(text: str) -> list[str]:
    if not text:
        return []

    entries: dict[str, None] = {}
    lowered_text = text.lower()
    lines = split_lines(text)

    for keyword in EDUCATION_KEYWORDS:
        lowered_keyword = keyword.lower()
        if lowered_keyword not in lowered_text:
            continue
        matched_lines = [line.strip() for line in lines if lowered_keyword in line.lower()]
        if matched_lines:
            for line in matched_lines:
                entries.setdefault(line, None)
        else:
            entries.setdefault(keyword, None)

    min_line_chars = get_heuristic_int("education.min_section_line_chars", 11)
    for section in find_sections(text, EDUCATION_SECTION_HEADERS):
        for line in split_lines(section.content):
            stripped = line.strip()
            if len(stripped) >= min_line_chars:
                entries.setdefault(stripped, None)

    return list(entries)[:MAX_EDUCATION_ENTRIES]
