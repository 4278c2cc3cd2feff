from __future__ import annotations

import json
import logging
from io import BytesIO
from pathlib import Path

from docx import Document
from pypdf import PdfReader

from .errors import DocxDecodeError, PdfDecodeError
from .models import DocumentFormat, RawDocument

logger = logging.getLogger(__name__)

# pypdf reports recoverable stream problems through logging
logging.getLogger("pypdf").setLevel(logging.ERROR)


def _parse_pdf(content: bytes) -> str:
    try:
        reader = PdfReader(BytesIO(content))
        text_parts: list[str] = []
        for page in reader.pages:
            page_text = (page.extract_text() or "").strip()
            if page_text:
                text_parts.append(page_text)
    except Exception as exc:
        raise PdfDecodeError(f"PDF parsing failed: {exc}") from exc

    if not text_parts:
        raise PdfDecodeError("PDF parsing failed: no extractable text found in PDF.")
    return "\n".join(text_parts)


def _parse_docx(content: bytes) -> str:
    try:
        document = Document(BytesIO(content))
        parts = [p.text.strip() for p in document.paragraphs if p.text and p.text.strip()]
        for table in document.tables:
            for row in table.rows:
                cells = [cell.text.strip() for cell in row.cells if cell.text and cell.text.strip()]
                if cells:
                    parts.append(" | ".join(cells))
    except Exception as exc:
        raise DocxDecodeError(f"DOCX parsing failed: {exc}") from exc

    if not parts:
        raise DocxDecodeError("DOCX parsing failed: no extractable text found in DOCX.")
    return "\n".join(parts)


def extract_text(doc: RawDocument) -> str:
    source_format = DocumentFormat.from_declared(doc.declared_format)
    if source_format is DocumentFormat.PDF:
        text = _parse_pdf(doc.content)
    else:
        text = _parse_docx(doc.content)
    logger.debug(
        json.dumps(
            {
                "event": "document_text_extracted",
                "format": source_format.value,
                "bytes": len(doc.content),
                "chars": len(text),
            }
        )
    )
    return text


def read_document(file_path: str | Path, declared_format: str | None = None) -> RawDocument:
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Input document not found: '{path}'")
    return RawDocument(
        content=path.read_bytes(),
        declared_format=declared_format or path.suffix.lower(),
    )


def extract_text_from_path(file_path: str | Path, declared_format: str | None = None) -> str:
    return extract_text(read_document(file_path, declared_format))
