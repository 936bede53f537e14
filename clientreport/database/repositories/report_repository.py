from typing import Any

import psycopg
from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from clientreport.database.connection import get_connection
from clientreport.database.models import ReportRecord
from clientreport.processor.exceptions import PersistFailureError, ReportNotFoundError

_COLUMNS = (
    "id, project_id, file_id, title, content, summary, insights, "
    "generated_by, generated_at, status"
)


def _to_record(row: dict[str, Any]) -> ReportRecord:
    return ReportRecord(
        id=row["id"],
        project_id=row["project_id"],
        file_id=row["file_id"],
        title=row["title"] or "",
        content=row["content"] or "",
        summary=row["summary"] or "",
        insights=row["insights"] or {},
        generated_by=str(row["generated_by"]),
        generated_at=row["generated_at"],
        status=row["status"],
    )


class ReportRepository:
    """Database operations for the reports table."""

    def create(
        self,
        *,
        project_id: int,
        file_id: int | None,
        title: str,
        content: str,
        summary: str,
        generated_by: str,
        insights: dict[str, Any] | None = None,
        status: str = "completed",
    ) -> ReportRecord:
        """Insert a report in a single statement.

        Raises:
            PersistFailureError: if the insert fails; nothing is written in that case.
        """
        try:
            with get_connection() as conn:
                with conn.cursor(row_factory=dict_row) as cur:
                    cur.execute(
                        f"""
                        INSERT INTO reports
                        (project_id, file_id, title, content, summary, insights,
                         generated_by, status)
                        VALUES (%s, %s, %s, %s, %s, %s, %s, %s)
                        RETURNING {_COLUMNS}
                        """,
                        (
                            project_id,
                            file_id,
                            title,
                            content,
                            summary,
                            Jsonb(insights or {}),
                            generated_by,
                            status,
                        ),
                    )
                    row = cur.fetchone()
                conn.commit()
        except psycopg.Error as exc:
            raise PersistFailureError(f"Failed to persist report: {exc}") from exc
        if row is None:
            raise PersistFailureError("Report insert returned no row")
        return _to_record(row)

    def find_by_id(self, report_id: int) -> ReportRecord:
        """Raises ReportNotFoundError if no report with this ID exists."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(f"SELECT {_COLUMNS} FROM reports WHERE id = %s", (report_id,))
                row = cur.fetchone()
        if row is None:
            raise ReportNotFoundError(f"Report {report_id} not found")
        return _to_record(row)

    def list_by_project(self, project_id: int) -> list[ReportRecord]:
        """Reports of a project, newest first."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"""
                    SELECT {_COLUMNS}
                    FROM reports
                    WHERE project_id = %s
                    ORDER BY generated_at DESC
                    """,
                    (project_id,),
                )
                rows = cur.fetchall()
        return [_to_record(row) for row in rows]
