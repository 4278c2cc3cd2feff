from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

from .errors import UnsupportedFormatError

PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class DocumentFormat(str, Enum):
    PDF = "pdf"
    DOCX = "docx"

    @property
    def mime_type(self) -> str:
        return PDF_MIME_TYPE if self is DocumentFormat.PDF else DOCX_MIME_TYPE

    @classmethod
    def from_declared(cls, declared: str | DocumentFormat) -> DocumentFormat:
        if isinstance(declared, DocumentFormat):
            return declared
        normalized = (declared or "").strip().lower().lstrip(".")
        if normalized in {"pdf", PDF_MIME_TYPE}:
            return cls.PDF
        if normalized in {"docx", DOCX_MIME_TYPE}:
            return cls.DOCX
        raise UnsupportedFormatError(declared)


class RawDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    content: bytes
    declared_format: str

    @field_validator("declared_format", mode="before")
    @classmethod
    def _coerce_declared_format(cls, value: object) -> str:
        if isinstance(value, DocumentFormat):
            return value.value
        return str(value)
