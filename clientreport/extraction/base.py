from abc import ABC, abstractmethod

from clientreport.extraction.models import ExtractedContent, SourceFile


class BaseExtractor(ABC):
    """Contract for all per-format content extractors."""

    @abstractmethod
    def extract(self, source: SourceFile) -> ExtractedContent:
        """Produce normalized text (and rows, for tabular formats) from raw bytes.

        Args:
            source: Upload name, declared media type and bytes.

        Returns:
            ExtractedContent for the extractor's format.

        Raises:
            ParseFailureError: if the content is malformed for this format.
            EmptyContentError: if a text file contains only whitespace.
        """
