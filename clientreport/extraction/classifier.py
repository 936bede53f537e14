"""Routes an upload to a FileFormat from its media type and file name."""

from types import MappingProxyType

from clientreport.extraction.models import FileFormat
from clientreport.processor.exceptions import UnsupportedFormatError

# Insertion order is the match priority.
MEDIA_TYPES: MappingProxyType[FileFormat, frozenset[str]] = MappingProxyType(
    {
        FileFormat.CSV: frozenset({"text/csv", "application/csv"}),
        FileFormat.EXCEL: frozenset(
            {
                "application/vnd.ms-excel",
                "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            }
        ),
        FileFormat.PDF: frozenset({"application/pdf"}),
        FileFormat.DOCX: frozenset(
            {"application/vnd.openxmlformats-officedocument.wordprocessingml.document"}
        ),
        FileFormat.TEXT: frozenset({"text/plain"}),
    }
)

EXTENSIONS: MappingProxyType[FileFormat, tuple[str, ...]] = MappingProxyType(
    {
        FileFormat.CSV: (".csv",),
        FileFormat.EXCEL: (".xls", ".xlsx"),
        FileFormat.PDF: (".pdf",),
        FileFormat.DOCX: (".docx",),
        FileFormat.TEXT: (".txt",),
    }
)


def classify(media_type: str | None, file_name: str) -> FileFormat:
    """Exact media type first, then case-insensitive extension."""
    declared = (media_type or "").strip().lower()
    for file_format, media_types in MEDIA_TYPES.items():
        if declared in media_types:
            return file_format

    lowered = file_name.lower()
    for file_format, extensions in EXTENSIONS.items():
        if lowered.endswith(extensions):
            return file_format

    return FileFormat.UNSUPPORTED


def require_supported(media_type: str | None, file_name: str) -> FileFormat:
    """Like classify(), but raises UnsupportedFormatError instead of returning UNSUPPORTED."""
    file_format = classify(media_type, file_name)
    if file_format is FileFormat.UNSUPPORTED:
        raise UnsupportedFormatError(
            f"Unsupported file type: {media_type or 'unknown'} ({file_name})"
        )
    return file_format
