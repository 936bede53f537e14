from clientreport.config.settings import Settings
from clientreport.extraction.base import BaseExtractor
from clientreport.extraction.classifier import require_supported
from clientreport.extraction.docx_extractor import DocxExtractor
from clientreport.extraction.models import ExtractedContent, FileFormat, SourceFile
from clientreport.extraction.pdf_extractor import PdfExtractor
from clientreport.extraction.tabular import CsvExtractor, ExcelExtractor
from clientreport.extraction.text_extractor import PlainTextExtractor


class ContentExtractor:
    """Dispatches a source file to the extractor registered for its format."""

    def __init__(self, extractors: dict[FileFormat, BaseExtractor]) -> None:
        missing = [
            f.value for f in FileFormat if f is not FileFormat.UNSUPPORTED and f not in extractors
        ]
        if missing:
            raise ValueError(f"No extractor registered for formats: {missing}")
        self._extractors = extractors

    def extract(self, source: SourceFile) -> ExtractedContent:
        """Classify and extract.

        Raises:
            UnsupportedFormatError: if the file maps to no known format.
        """
        file_format = require_supported(source.media_type, source.file_name)
        return self._extractors[file_format].extract(source)


class ExtractorFactory:
    """Creates the per-format extractor set from settings."""

    @classmethod
    def create(cls, settings: Settings) -> ContentExtractor:
        return ContentExtractor(
            {
                FileFormat.CSV: CsvExtractor(),
                FileFormat.EXCEL: ExcelExtractor(),
                FileFormat.PDF: PdfExtractor(settings.pdf_engine),
                FileFormat.DOCX: DocxExtractor(),
                FileFormat.TEXT: PlainTextExtractor(),
            }
        )
