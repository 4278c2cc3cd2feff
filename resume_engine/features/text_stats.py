from __future__ import annotations

import re

from resume_engine.schemas import RawTextMeta

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_SYLLABLE_SUFFIX_RE = re.compile(r"(?:[^laeiouy]es|ed|[^laeiouy]e)$")
_VOWEL_GROUP_RE = re.compile(r"[aeiouy]{1,2}")


def count_syllables(word: str) -> int:
    lowered = word.lower()
    if len(lowered) <= 3:
        return 1
    lowered = _SYLLABLE_SUFFIX_RE.sub("", lowered)
    if lowered.startswith("y"):
        lowered = lowered[1:]
    groups = _VOWEL_GROUP_RE.findall(lowered)
    return len(groups) if groups else 1


def readability_score(text: str) -> int:
    """Simplified Flesch reading ease, clamped to 0-100."""
    sentences = [s.strip() for s in _SENTENCE_SPLIT_RE.split(text or "") if s.strip()]
    words = (text or "").split()
    if not sentences or not words:
        return 0

    syllables = sum(count_syllables(word) for word in words)
    words_per_sentence = len(words) / len(sentences)
    syllables_per_word = syllables / len(words)
    score = 206.835 - (1.015 * words_per_sentence) - (84.6 * syllables_per_word)
    return max(0, min(100, round(score)))


def build_raw_meta(original_text: str) -> RawTextMeta:
    text = original_text or ""
    return RawTextMeta(
        original_text=text,
        char_count=len(text),
        word_count=len(text.split()),
        line_count=len(text.splitlines()),
        readability_score=readability_score(text),
    )
