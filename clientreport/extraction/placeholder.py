from clientreport.extraction.models import ExtractedContent, FileFormat, SourceFile


def placeholder_content(source: SourceFile, file_format: FileFormat, reason: str) -> ExtractedContent:
    """Describe a file whose text could not be extracted.

    The block is marked so it is never mistaken for document text.
    """
    label = file_format.value.upper()
    text = (
        f"[{label} text unavailable: {reason}]\n"
        f"File: {source.file_name}\n"
        f"Size: {source.size / 1024:.1f} KB\n"
        f"Type: {source.media_type or 'unknown'}"
    )
    return ExtractedContent(file_format=file_format, text=text, is_placeholder=True)
