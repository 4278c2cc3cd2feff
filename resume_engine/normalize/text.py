from __future__ import annotations

import re

_LINE_ENDING_RE = re.compile(r"\r\n?")
_INLINE_SPACE_RE = re.compile(r"[ \t]+")
_SPACE_AROUND_NEWLINE_RE = re.compile(r" *\n *")
_BLANK_RUN_RE = re.compile(r"\n{3,}")


def normalize_text(text: str | None) -> str:
    """Canonical form shared by every extractor.

    Line endings become ``\\n``, runs of spaces and tabs collapse to a single
    space, three or more consecutive newlines collapse to one blank line and
    the result is trimmed. Applying it twice gives the same string.
    """
    if not text:
        return ""
    normalized = _LINE_ENDING_RE.sub("\n", text)
    normalized = _INLINE_SPACE_RE.sub(" ", normalized)
    normalized = _SPACE_AROUND_NEWLINE_RE.sub("\n", normalized)
    normalized = _BLANK_RUN_RE.sub("\n\n", normalized)
    return normalized.strip()
