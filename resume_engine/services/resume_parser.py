from __future__ import annotations

import hashlib
import json
import logging
import time
from datetime import date, datetime, timezone

from resume_engine.core.config import settings
from resume_engine.features import (
    build_raw_meta,
    estimate_experience,
    extract_contact,
    extract_education,
    extract_projects,
    match_skills,
    redact_pii,
)
from resume_engine.normalize.text import normalize_text
from resume_engine.parsing.errors import DecodeError, UnsupportedFormatError
from resume_engine.parsing.models import DocumentFormat, RawDocument
from resume_engine.parsing.parse import extract_text
from resume_engine.schemas import ParseErrorKind, ParseFailure, ResumeProfile
from resume_engine.taxonomy import SkillDictionary, get_default_skill_dictionary

logger = logging.getLogger(__name__)


class ParseError(RuntimeError):
    def __init__(self, kind: ParseErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def to_failure(self) -> ParseFailure:
        return ParseFailure(kind=self.kind, message=self.message)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _short_hash(value: str) -> str:
    return hashlib.sha256(value.encode("utf-8", errors="ignore")).hexdigest()[:12]


def _preview(text: str) -> str:
    limit = settings.log_text_preview_chars
    if limit <= 0:
        return ""
    return redact_pii(text[:limit]).replace("\n", " ")


def _assemble_profile(
    raw_text: str,
    source_format: DocumentFormat,
    dictionary: SkillDictionary | None,
    today: date | None,
) -> ResumeProfile:
    vocabulary = dictionary if dictionary is not None else get_default_skill_dictionary()

    cleaned = normalize_text(raw_text)
    return ResumeProfile(
        cleaned_text=cleaned,
        skills=match_skills(cleaned, vocabulary),
        experience=estimate_experience(cleaned, today=today),
        education=extract_education(cleaned),
        projects=extract_projects(cleaned, vocabulary),
        contact=extract_contact(cleaned),
        raw=build_raw_meta(raw_text),
        source_format=source_format.value,
        extracted_at=_utc_now(),
    )


def _log_failure(kind: ParseErrorKind, exc: Exception, started_at: float) -> None:
    logger.warning(
        json.dumps(
            {
                "event": "resume_parse_failed",
                "kind": kind,
                "error": str(exc),
                "duration_ms": int((time.perf_counter() - started_at) * 1000),
            }
        )
    )


def _internal_error(exc: Exception, started_at: float, *, stage: str, text: str = "") -> ParseError:
    logger.exception(
        json.dumps(
            {
                "event": "resume_parse_failed",
                "kind": "InternalError",
                "stage": stage,
                "error": str(exc),
                "text_hash": _short_hash(text) if text else None,
                "duration_ms": int((time.perf_counter() - started_at) * 1000),
            }
        )
    )
    return ParseError("InternalError", f"Resume {stage} failed: {exc}")


def _analyse(
    raw_text: str,
    source_format: DocumentFormat,
    dictionary: SkillDictionary | None,
    today: date | None,
    started_at: float,
) -> ResumeProfile:
    try:
        profile = _assemble_profile(raw_text, source_format, dictionary, today)
    except Exception as exc:
        raise _internal_error(exc, started_at, stage="analysis", text=raw_text) from exc

    logger.info(
        json.dumps(
            {
                "event": "resume_parse_complete",
                "source_format": profile.source_format,
                "text_len": len(profile.cleaned_text),
                "text_hash": _short_hash(profile.cleaned_text),
                "text_preview": _preview(profile.cleaned_text),
                "skills": len(profile.skills),
                "education": len(profile.education),
                "projects": len(profile.projects),
                "experience": profile.experience,
                "duration_ms": int((time.perf_counter() - started_at) * 1000),
            }
        )
    )
    return profile


def build_profile(
    raw_text: str,
    source_format: DocumentFormat | str,
    *,
    dictionary: SkillDictionary | None = None,
    today: date | None = None,
) -> ResumeProfile:
    """Run normalization and every extractor over already-extracted text.

    Fails with ``ParseError`` exactly like ``parse_resume``.
    """
    started_at = time.perf_counter()

    try:
        resolved_format = DocumentFormat.from_declared(source_format)
    except UnsupportedFormatError as exc:
        _log_failure("UnsupportedFormat", exc, started_at)
        raise ParseError("UnsupportedFormat", str(exc)) from exc

    return _analyse(raw_text, resolved_format, dictionary, today, started_at)


def parse_resume(
    doc: RawDocument,
    *,
    dictionary: SkillDictionary | None = None,
    today: date | None = None,
) -> ResumeProfile:
    """Extract, normalize and analyse one document. All-or-nothing."""
    started_at = time.perf_counter()

    try:
        source_format = DocumentFormat.from_declared(doc.declared_format)
        raw_text = extract_text(doc)
    except UnsupportedFormatError as exc:
        _log_failure("UnsupportedFormat", exc, started_at)
        raise ParseError("UnsupportedFormat", str(exc)) from exc
    except DecodeError as exc:
        _log_failure("DecodeError", exc, started_at)
        raise ParseError("DecodeError", str(exc)) from exc
    except Exception as exc:
        raise _internal_error(exc, started_at, stage="extraction") from exc

    return _analyse(raw_text, source_format, dictionary, today, started_at)


class ResumeParser:
    """Binds a skill dictionary for callers that supply their own vocabulary."""

    def __init__(self, dictionary: SkillDictionary | None = None) -> None:
        self._dictionary = dictionary if dictionary is not None else get_default_skill_dictionary()

    @property
    def dictionary(self) -> SkillDictionary:
        return self._dictionary

    def parse(self, doc: RawDocument, *, today: date | None = None) -> ResumeProfile:
        return parse_resume(doc, dictionary=self._dictionary, today=today)

    def parse_text(self, raw_text: str, source_format: DocumentFormat | str, *, today: date | None = None) -> ResumeProfile:
        return build_profile(raw_text, source_format, dictionary=self._dictionary, today=today)
