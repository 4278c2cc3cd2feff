from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from resume_engine.core.config import settings

_HEURISTICS_CACHE: dict[str, Any] | None = None
_DEFAULT_HEURISTICS_PATH = Path(__file__).with_name("heuristics.yaml")


def _heuristics_path() -> Path:
    if settings.heuristics_config_path:
        return Path(settings.heuristics_config_path)
    return _DEFAULT_HEURISTICS_PATH


def get_heuristics_config() -> dict[str, Any]:
    """Load the extraction thresholds from heuristics.yaml and cache them."""
    global _HEURISTICS_CACHE

    if _HEURISTICS_CACHE is not None:
        return _HEURISTICS_CACHE

    path = _heuristics_path()
    if not path.exists():
        raise RuntimeError(
            f"Heuristics config not found at '{path}'. "
            "Set HEURISTICS_CONFIG_PATH or restore resume_engine/core/heuristics.yaml."
        )

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(f"Failed to read heuristics config '{path}': {exc}") from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid YAML in heuristics config '{path}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(f"Invalid heuristics config '{path}': expected a top-level mapping.")

    _HEURISTICS_CACHE = parsed
    return _HEURISTICS_CACHE


def get_heuristic_value(path: str, default: Any = None) -> Any:
    """Get nested threshold using dot path notation, e.g. 'sections.header_max_chars'."""
    if not path:
        return default

    current: Any = get_heuristics_config()
    for key in path.split("."):
        if not isinstance(current, dict):
            return default
        if key not in current:
            return default
        current = current[key]
    return current


def get_heuristic_int(path: str, default: int) -> int:
    value = get_heuristic_value(path, default)
    try:
        return int(value)
    except (TypeError, ValueError):
        return default
