"""CSV and spreadsheet extractors built on pandas."""

import io

import pandas as pd

from clientreport.extraction.base import BaseExtractor
from clientreport.extraction.models import ExtractedContent, FileFormat, SourceFile
from clientreport.processor.exceptions import ParseFailureError

ROW_DELIMITER = ", "


def frame_to_rows(frame: pd.DataFrame) -> list[dict[str, str]]:
    """Row mappings keyed by header, every cell as a string."""
    frame = frame.fillna("")
    columns = [str(column) for column in frame.columns]
    return [
        {column: str(value) for column, value in zip(columns, values)}
        for values in frame.itertuples(index=False, name=None)
    ]


def rows_to_text(header: list[str], rows: list[dict[str, str]]) -> str:
    """Header line followed by one delimiter-joined line per row."""
    lines = [ROW_DELIMITER.join(header)] if header else []
    lines.extend(ROW_DELIMITER.join(row.values()) for row in rows)
    return "".join(f"{line}\n" for line in lines)


class CsvExtractor(BaseExtractor):
    """Parses CSV with the first row as header."""

    def extract(self, source: SourceFile) -> ExtractedContent:
        try:
            frame = pd.read_csv(
                io.BytesIO(source.data),
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
            )
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
            raise ParseFailureError(f"CSV parsing failed for {source.file_name}: {exc}") from exc

        header = [str(column) for column in frame.columns]
        rows = frame_to_rows(frame)
        return ExtractedContent(
            file_format=FileFormat.CSV,
            text=rows_to_text(header, rows),
            rows=rows,
        )


class ExcelExtractor(BaseExtractor):
    """Parses the first sheet of an .xls/.xlsx workbook."""

    def extract(self, source: SourceFile) -> ExtractedContent:
        try:
            workbook = pd.ExcelFile(io.BytesIO(source.data))
            sheet_names = [str(name) for name in workbook.sheet_names]
            frame = workbook.parse(sheet_name=0, dtype=str)
        except Exception as exc:
            raise ParseFailureError(
                f"Spreadsheet parsing failed for {source.file_name}: {exc}"
            ) from exc

        header = [str(column) for column in frame.columns]
        rows = frame_to_rows(frame)
        return ExtractedContent(
            file_format=FileFormat.EXCEL,
            text=rows_to_text(header, rows),
            rows=rows,
            sheet_names=sheet_names,
        )
