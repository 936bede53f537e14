from clientreport.extraction.base import BaseExtractor
from clientreport.extraction.models import ExtractedContent, FileFormat, SourceFile
from clientreport.processor.exceptions import EmptyContentError, ParseFailureError


class PlainTextExtractor(BaseExtractor):
    """Uses decoded file text verbatim."""

    def extract(self, source: SourceFile) -> ExtractedContent:
        try:
            text = source.data.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise ParseFailureError(
                f"{source.file_name} is not valid UTF-8 text: {exc}"
            ) from exc
        if not text.strip():
            raise EmptyContentError(f"{source.file_name} appears to be empty")
        return ExtractedContent(file_format=FileFormat.TEXT, text=text)
