import io
from collections.abc import Callable
from typing import ClassVar

import pdfplumber
import pymupdf

from clientreport.extraction.base import BaseExtractor
from clientreport.extraction.models import ExtractedContent, FileFormat, SourceFile
from clientreport.extraction.placeholder import placeholder_content
from clientreport.processor.exceptions import ParseFailureError


def extract_with_pdfplumber(pdf_bytes: bytes) -> str:
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def extract_with_pymupdf(pdf_bytes: bytes) -> str:
    with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
        pages = [page.get_text() for page in doc]
    return "\n".join(pages).strip()


class PdfExtractor(BaseExtractor):
    """Extracts the PDF text layer with the configured engine.

    Documents without a text layer (scans) and the ``placeholder`` engine
    produce a placeholder block instead of text.
    """

    ENGINES: ClassVar[dict[str, Callable[[bytes], str] | None]] = {
        "pdfplumber": extract_with_pdfplumber,
        "pymupdf": extract_with_pymupdf,
        "placeholder": None,
    }

    def __init__(self, engine: str = "pdfplumber") -> None:
        engine = engine.lower()
        if engine not in self.ENGINES:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(self.ENGINES)}"
            )
        self._engine = engine

    def extract(self, source: SourceFile) -> ExtractedContent:
        engine_fn = self.ENGINES[self._engine]
        if engine_fn is None:
            return placeholder_content(source, FileFormat.PDF, "PDF text extraction disabled")
        try:
            text = engine_fn(source.data)
        except Exception as exc:
            raise ParseFailureError(
                f"{self._engine} extraction failed for {source.file_name}: {exc}"
            ) from exc
        if not text:
            return placeholder_content(source, FileFormat.PDF, "no extractable text layer")
        return ExtractedContent(file_format=FileFormat.PDF, text=text)
