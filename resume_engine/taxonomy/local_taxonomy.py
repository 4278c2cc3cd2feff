from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Iterable

from .provider import SkillDictionary, SkillEntry


def _variants(lowered: str) -> tuple[str, ...]:
    # "node.js" -> "nodejs", "scikit-learn" -> "scikitlearn", "power bi" -> "powerbi"
    candidates = (
        lowered.replace(".", ""),
        lowered.replace("-", ""),
        re.sub(r"\s+", "", lowered),
    )
    output: list[str] = []
    for candidate in candidates:
        if candidate and candidate != lowered and candidate not in output:
            output.append(candidate)
    return tuple(output)


def build_skill_entry(name: str) -> SkillEntry:
    lowered = name.lower()
    pattern = re.compile(rf"(?<!\w){re.escape(lowered)}(?!\w)", re.IGNORECASE)
    return SkillEntry(name=name, lowered=lowered, pattern=pattern, variants=_variants(lowered))


class LocalSkillDictionary(SkillDictionary):
    def __init__(self, names: Iterable[str] | None = None, *, skills_path: str | Path | None = None) -> None:
        if names is None:
            path = Path(skills_path) if skills_path else Path(__file__).with_name("skills.json")
            names = self._load_names(path)
        self._entries = self._build_entries(names)

    @staticmethod
    def _load_names(path: Path) -> list[str]:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        if not isinstance(raw, list):
            raise ValueError(f"Skill dictionary '{path}' must be a JSON list of names.")
        return [str(item) for item in raw]

    @staticmethod
    def _build_entries(names: Iterable[str]) -> tuple[SkillEntry, ...]:
        seen: set[str] = set()
        entries: list[SkillEntry] = []
        for raw_name in names:
            name = raw_name.strip()
            if not name or name in seen:
                continue
            seen.add(name)
            entries.append(build_skill_entry(name))
        return tuple(entries)

    @property
    def entries(self) -> tuple[SkillEntry, ...]:
        return self._entries

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(entry.name for entry in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return any(entry.name == name for entry in self._entries)
