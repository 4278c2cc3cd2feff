from functools import lru_cache

from resume_engine.core.config import settings

from .local_taxonomy import LocalSkillDictionary, build_skill_entry
from .provider import SkillDictionary, SkillEntry


@lru_cache(maxsize=1)
def get_default_skill_dictionary() -> LocalSkillDictionary:
    return LocalSkillDictionary(skills_path=settings.skills_dictionary_path)


__all__ = [
    "SkillDictionary",
    "SkillEntry",
    "LocalSkillDictionary",
    "build_skill_entry",
    "get_default_skill_dictionary",
]
