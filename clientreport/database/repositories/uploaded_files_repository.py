from typing import Any

import psycopg
from psycopg.rows import dict_row

from clientreport.database.connection import get_connection
from clientreport.database.models import UploadedFileRecord
from clientreport.processor.exceptions import FileNotFoundInProjectError, PersistFailureError

_COLUMNS = (
    "id, project_id, file_name, media_type, file_size, storage_path, "
    "uploaded_by, created_at"
)


def _to_record(row: dict[str, Any]) -> UploadedFileRecord:
    return UploadedFileRecord(
        id=row["id"],
        project_id=row["project_id"],
        file_name=row["file_name"],
        media_type=row["media_type"] or "",
        file_size=row["file_size"],
        storage_path=row["storage_path"],
        uploaded_by=str(row["uploaded_by"]),
        created_at=row["created_at"],
    )


class UploadedFilesRepository:
    """Database operations for the files table."""

    def create(
        self,
        *,
        project_id: int,
        file_name: str,
        media_type: str,
        file_size: int,
        storage_path: str,
        uploaded_by: str,
    ) -> UploadedFileRecord:
        """Record an uploaded file.

        Raises:
            PersistFailureError: if the insert fails (including an unknown project).
        """
        try:
            with get_connection() as conn:
                with conn.cursor(row_factory=dict_row) as cur:
                    cur.execute(
                        f"""
                        INSERT INTO files
                        (project_id, file_name, media_type, file_size, storage_path, uploaded_by)
                        VALUES (%s, %s, %s, %s, %s, %s)
                        RETURNING {_COLUMNS}
                        """,
                        (project_id, file_name, media_type, file_size, storage_path, uploaded_by),
                    )
                    row = cur.fetchone()
                conn.commit()
        except psycopg.Error as exc:
            raise PersistFailureError(f"Failed to record file {file_name!r}: {exc}") from exc
        if row is None:
            raise PersistFailureError("File insert returned no row")
        return _to_record(row)

    def find_by_id(self, file_id: int) -> UploadedFileRecord:
        """Raises FileNotFoundInProjectError if no file with this ID exists."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(f"SELECT {_COLUMNS} FROM files WHERE id = %s", (file_id,))
                row = cur.fetchone()
        if row is None:
            raise FileNotFoundInProjectError(f"File {file_id} not found")
        return _to_record(row)

    def list_by_project(self, project_id: int) -> list[UploadedFileRecord]:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"""
                    SELECT {_COLUMNS}
                    FROM files
                    WHERE project_id = %s
                    ORDER BY created_at DESC
                    """,
                    (project_id,),
                )
                rows = cur.fetchall()
        return [_to_record(row) for row in rows]

    def delete(self, file_id: int) -> None:
        """Delete a file record. Reports keep pointing at nothing (file_id set NULL).

        Raises:
            FileNotFoundInProjectError: if no file with this ID exists.
        """
        try:
            with get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute("DELETE FROM files WHERE id = %s", (file_id,))
                    if cur.rowcount == 0:
                        raise FileNotFoundInProjectError(f"File {file_id} not found")
                conn.commit()
        except psycopg.Error as exc:
            raise PersistFailureError(f"Failed to delete file {file_id}: {exc}") from exc
