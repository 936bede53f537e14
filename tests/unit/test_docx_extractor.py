import pytest

from clientreport.extraction.docx_extractor import DocxExtractor
from clientreport.extraction.models import FileFormat, SourceFile
from clientreport.processor.exceptions import ParseFailureError

_DOCX_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class TestDocxExtractor:
    def test_joins_non_empty_paragraphs(self, docx_bytes: bytes) -> None:
        source = SourceFile(file_name="memo.docx", media_type=_DOCX_TYPE, data=docx_bytes)

        content = DocxExtractor().extract(source)

        assert content.file_format == FileFormat.DOCX
        assert content.text == "Quarterly summary\nChurn fell to 3% on 2024-01-31"
        assert content.is_placeholder is False

    def test_empty_document_yields_placeholder(self, empty_docx_bytes: bytes) -> None:
        source = SourceFile(file_name="memo.docx", media_type=_DOCX_TYPE, data=empty_docx_bytes)

        content = DocxExtractor().extract(source)

        assert content.is_placeholder is True
        assert "memo.docx" in content.text

    def test_invalid_bytes_raise_parse_failure(self) -> None:
        source = SourceFile(file_name="memo.docx", media_type=_DOCX_TYPE, data=b"garbage")

        with pytest.raises(ParseFailureError, match="memo.docx"):
            DocxExtractor().extract(source)
