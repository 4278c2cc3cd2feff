from __future__ import annotations

from dataclasses import dataclass, field

from resume_engine.core.heuristics import get_heuristic_int
from resume_engine.normalize.utils import contains_any, dedupe_preserving_order, split_lines, truncate_with_ellipsis
from resume_engine.schemas import ProjectRecord
from resume_engine.schemas.profile import MAX_PROJECT_RECORDS, PROJECT_SUMMARY_MAX_CHARS
from resume_engine.taxonomy import SkillDictionary, get_default_skill_dictionary

from .sections import find_sections
from .skill_matcher import match_skills_in_line

PROJECT_SECTION_HEADERS: tuple[str, ...] = (
    "projects",
    "project work",
    "key projects",
    "major projects",
    "academic projects",
    "personal projects",
)
PROJECT_ACTION_KEYWORDS: tuple[str, ...] = (
    "developed",
    "built",
    "created",
    "designed",
    "implemented",
    "worked on",
)
_TITLE_FILLER_WORDS = frozenset({"the", "this", "that", "with", "using", "developed", "created", "built"})


@dataclass(slots=True)
class _ProjectDraft:
    title: str
    summary: str = ""
    technologies: list[str] = field(default_factory=list)


def is_project_title(line: str) -> bool:
    """Cheap title heuristic: short, capitalised, little descriptive filler."""
    if len(line) > get_heuristic_int("projects.title_max_chars", 100):
        return False
    if len(line) < get_heuristic_int("projects.title_min_chars", 3):
        return False

    first_char = line[0]
    if first_char != first_char.upper():
        return False

    filler_count = sum(1 for word in line.lower().split(" ") if word in _TITLE_FILLER_WORDS)
    return filler_count < get_heuristic_int("projects.max_filler_words", 2)


def _untitled_draft(line: str, technologies: list[str]) -> _ProjectDraft:
    preview_chars = get_heuristic_int("projects.title_preview_chars", 50)
    return _ProjectDraft(
        title=truncate_with_ellipsis(line, preview_chars),
        summary=line,
        technologies=list(technologies),
    )


def _drafts_from_section(content: str, dictionary: SkillDictionary) -> list[_ProjectDraft]:
    summary_min_chars = get_heuristic_int("projects.summary_line_min_chars", 11)
    untitled_min_chars = get_heuristic_int("projects.untitled_line_min_chars", 21)

    drafts: list[_ProjectDraft] = []
    current: _ProjectDraft | None = None

    for raw_line in split_lines(content):
        line = raw_line.strip()
        if not line:
            continue

        if is_project_title(line):
            if current is not None:
                drafts.append(current)
            current = _ProjectDraft(title=line)
        elif current is not None:
            if len(line) >= summary_min_chars:
                current.summary = f"{current.summary} {line}" if current.summary else line
                current.technologies.extend(match_skills_in_line(line, dictionary))
        elif len(line) >= untitled_min_chars:
            technologies = match_skills_in_line(line, dictionary)
            if technologies:
                drafts.append(_untitled_draft(line, technologies))

    if current is not None:
        drafts.append(current)
    return drafts


def _fallback_drafts(text: str, dictionary: SkillDictionary) -> list[_ProjectDraft]:
    min_chars = get_heuristic_int("projects.fallback_line_min_chars", 31)
    drafts: list[_ProjectDraft] = []
    for raw_line in split_lines(text):
        line = raw_line.strip()
        if len(line) < min_chars or not contains_any(line, PROJECT_ACTION_KEYWORDS):
            continue
        technologies = match_skills_in_line(line, dictionary)
        if technologies:
            drafts.append(_untitled_draft(line, technologies))
    return drafts


def extract_projects(text: str, dictionary: SkillDictionary | None = None) -> list[ProjectRecord]:
    if not text:
        return []
    vocabulary = dictionary if dictionary is not None else get_default_skill_dictionary()

    drafts: list[_ProjectDraft] = []
    for section in find_sections(text, PROJECT_SECTION_HEADERS):
        drafts.extend(_drafts_from_section(section.content, vocabulary))

    if not drafts:
        drafts = _fallback_drafts(text, vocabulary)

    return [
        ProjectRecord(
            title=draft.title,
            summary=draft.summary[:PROJECT_SUMMARY_MAX_CHARS],
            technologies=dedupe_preserving_order(draft.technologies),
        )
        for draft in drafts[:MAX_PROJECT_RECORDS]
    ]
