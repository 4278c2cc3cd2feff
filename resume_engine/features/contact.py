from __future__ import annotations

import re

from resume_engine.normalize.utils import dedupe_preserving_order
from resume_engine.schemas import ContactDetails

_EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
_PHONE_RE = re.compile(r"(?:\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")
_URL_RE = re.compile(
    r"https?://(?:www\.)?[-a-zA-Z0-9@:%._+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}\b[-a-zA-Z0-9()@:%_+.~#?&/=]*"
)
_ADDRESS_RE = re.compile(
    r"\d+\s+[A-Za-z\s]+(?:Street|St|Avenue|Ave|Road|Rd|Drive|Dr|Lane|Ln|Boulevard|Blvd)\b",
    re.IGNORECASE,
)


def extract_contact(text: str) -> ContactDetails:
    if not text:
        return ContactDetails()
    return ContactDetails(
        emails=dedupe_preserving_order(_EMAIL_RE.findall(text)),
        phones=dedupe_preserving_order(match.strip() for match in _PHONE_RE.findall(text)),
        urls=dedupe_preserving_order(_URL_RE.findall(text)),
    )


def redact_pii(text: str) -> str:
    """Mask emails, phone numbers and street addresses."""
    redacted = _EMAIL_RE.sub("[EMAIL]", text or "")
    redacted = _PHONE_RE.sub("[PHONE]", redacted)
    return _ADDRESS_RE.sub("[ADDRESS]", redacted)
