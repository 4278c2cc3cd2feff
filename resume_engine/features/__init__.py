from .contact import extract_contact, redact_pii
from .education import extract_education
from .experience import estimate_experience
from .projects import extract_projects, is_project_title
from .sections import find_sections, looks_like_header
from .skill_matcher import match_skills, match_skills_in_line
from .text_stats import build_raw_meta, readability_score

__all__ = [
    "find_sections",
    "looks_like_header",
    "match_skills",
    "match_skills_in_line",
    "estimate_experience",
    "extract_education",
    "extract_projects",
    "is_project_title",
    "extract_contact",
    "redact_pii",
    "build_raw_meta",
    "readability_score",
]
