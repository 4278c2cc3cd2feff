from __future__ import annotations


class ExtractionError(RuntimeError):
    """Base class for failures turning a document into text."""


class UnsupportedFormatError(ExtractionError):
    def __init__(self, declared_format: str):
        super().__init__(
            f"Unsupported file format '{declared_format}'. Supported formats: pdf, docx"
        )
        self.declared_format = declared_format


class DecodeError(ExtractionError):
    pass


class PdfDecodeError(DecodeError):
    pass


class DocxDecodeError(DecodeError):
    pass
