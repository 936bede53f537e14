import io

import docx

from clientreport.extraction.base import BaseExtractor
from clientreport.extraction.models import ExtractedContent, FileFormat, SourceFile
from clientreport.extraction.placeholder import placeholder_content
from clientreport.processor.exceptions import ParseFailureError


class DocxExtractor(BaseExtractor):
    """Joins non-empty paragraphs of a Word document."""

    def extract(self, source: SourceFile) -> ExtractedContent:
        try:
            document = docx.Document(io.BytesIO(source.data))
        except Exception as exc:
            raise ParseFailureError(
                f"DOCX parsing failed for {source.file_name}: {exc}"
            ) from exc
        paragraphs = [p.text for p in document.paragraphs if p.text.strip()]
        text = "\n".join(paragraphs).strip()
        if not text:
            return placeholder_content(source, FileFormat.DOCX, "document has no paragraph text")
        return ExtractedContent(file_format=FileFormat.DOCX, text=text)
