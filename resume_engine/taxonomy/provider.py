from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class SkillEntry:
    name: str
    lowered: str
    pattern: re.Pattern[str]
    variants: tuple[str, ...]


class SkillDictionary(Protocol):
    @property
    def entries(self) -> tuple[SkillEntry, ...]:
        """Return canonical skills in dictionary order."""
