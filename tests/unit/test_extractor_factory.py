from unittest.mock import MagicMock

import pytest

from clientreport.config.settings import Settings
from clientreport.extraction.factory import ContentExtractor, ExtractorFactory
from clientreport.extraction.models import ExtractedContent, FileFormat, SourceFile
from clientreport.processor.exceptions import UnsupportedFormatError


class TestContentExtractor:
    def test_dispatches_by_format(self) -> None:
        extractors = {f: MagicMock() for f in FileFormat if f is not FileFormat.UNSUPPORTED}
        expected = ExtractedContent(file_format=FileFormat.CSV, text="a\n")
        extractors[FileFormat.CSV].extract.return_value = expected
        source = SourceFile(file_name="x.csv", media_type="", data=b"a\n")

        result = ContentExtractor(extractors).extract(source)

        assert result is expected
        extractors[FileFormat.CSV].extract.assert_called_once_with(source)
        extractors[FileFormat.TEXT].extract.assert_not_called()

    def test_rejects_incomplete_registry(self) -> None:
        with pytest.raises(ValueError, match="docx"):
            ContentExtractor({FileFormat.CSV: MagicMock()})

    def test_unsupported_file_raises(self) -> None:
        extractor = ExtractorFactory.create(Settings())
        with pytest.raises(UnsupportedFormatError):
            extractor.extract(SourceFile(file_name="tool.exe", media_type="", data=b"MZ"))


class TestExtractorFactory:
    def test_end_to_end_csv(self) -> None:
        extractor = ExtractorFactory.create(Settings())

        content = extractor.extract(
            SourceFile(file_name="data.csv", media_type="text/csv", data=b"a,b\n1,2\n")
        )

        assert content.rows == [{"a": "1", "b": "2"}]

    def test_unknown_pdf_engine_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown PDF engine"):
            ExtractorFactory.create(Settings(pdf_engine="nope"))
