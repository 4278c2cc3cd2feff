from __future__ import annotations

from typing import Iterable


def split_lines(text: str) -> list[str]:
    return (text or "").split("\n")


def contains_any(text: str, markers: Iterable[str]) -> bool:
    lowered = text.lower()
    return any(marker in lowered for marker in markers)


def truncate_with_ellipsis(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return f"{text[:limit]}..."


def dedupe_preserving_order(items: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(items))
