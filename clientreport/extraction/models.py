from dataclasses import dataclass, field
from enum import Enum


class FileFormat(str, Enum):
    """Closed set of formats an upload can be routed to."""

    CSV = "csv"
    EXCEL = "excel"
    PDF = "pdf"
    DOCX = "docx"
    TEXT = "text"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class SourceFile:
    """Raw upload handed to an extractor."""

    file_name: str
    media_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass
class ExtractedContent:
    """Normalized text of one file plus tabular rows where the format has them."""

    file_format: FileFormat
    text: str
    rows: list[dict[str, str]] = field(default_factory=list)
    sheet_names: list[str] = field(default_factory=list)
    is_placeholder: bool = False
