from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator

ParseErrorKind = Literal["UnsupportedFormat", "DecodeError", "InternalError"]

PROJECT_SUMMARY_MAX_CHARS = 300
MAX_EDUCATION_ENTRIES = 5
MAX_PROJECT_RECORDS = 8


class SectionBody(BaseModel):
    header_matched: str
    content: str


class ProjectRecord(BaseModel):
    title: str
    summary: str = Field(default="", max_length=PROJECT_SUMMARY_MAX_CHARS)
    technologies: list[str] = Field(default_factory=list)

    @field_validator("technologies")
    @classmethod
    def _dedupe_technologies(cls, value: list[str]) -> list[str]:
        return list(dict.fromkeys(value))


class ContactDetails(BaseModel):
    emails: list[str] = Field(default_factory=list)
    phones: list[str] = Field(default_factory=list)
    urls: list[str] = Field(default_factory=list)


class RawTextMeta(BaseModel):
    original_text: str
    char_count: int = Field(ge=0)
    word_count: int = Field(ge=0)
    line_count: int = Field(ge=0)
    readability_score: int = Field(ge=0, le=100)


class ResumeProfile(BaseModel):
    cleaned_text: str
    skills: list[str] = Field(default_factory=list)
    experience: str
    education: list[str] = Field(default_factory=list, max_length=MAX_EDUCATION_ENTRIES)
    projects: list[ProjectRecord] = Field(default_factory=list, max_length=MAX_PROJECT_RECORDS)
    contact: ContactDetails = Field(default_factory=ContactDetails)
    raw: RawTextMeta
    source_format: str
    extracted_at: datetime

    @field_validator("cleaned_text")
    @classmethod
    def _validate_cleaned_text(cls, value: str) -> str:
        if "\r" in value or "\n\n\n" in value or value != value.strip():
            raise ValueError("cleaned_text must be normalized before building a profile")
        return value


class ParseFailure(BaseModel):
    kind: ParseErrorKind
    message: str
