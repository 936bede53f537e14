from typing import Any

import psycopg
from psycopg.rows import dict_row

from clientreport.database.connection import get_connection
from clientreport.database.models import ProjectRecord
from clientreport.processor.exceptions import PersistFailureError, ProjectNotFoundError

_COLUMNS = "id, name, description, owner_id, created_at"


def _to_record(row: dict[str, Any]) -> ProjectRecord:
    return ProjectRecord(
        id=row["id"],
        name=row["name"],
        description=row["description"] or "",
        owner_id=str(row["owner_id"]),
        created_at=row["created_at"],
    )


class ProjectRepository:
    """Database operations for the projects table."""

    def create(self, name: str, owner_id: str, description: str = "") -> ProjectRecord:
        """Insert a project owned by *owner_id*.

        Raises:
            PersistFailureError: if the insert fails.
        """
        try:
            with get_connection() as conn:
                with conn.cursor(row_factory=dict_row) as cur:
                    cur.execute(
                        f"""
                        INSERT INTO projects (name, description, owner_id)
                        VALUES (%s, %s, %s)
                        RETURNING {_COLUMNS}
                        """,
                        (name, description, owner_id),
                    )
                    row = cur.fetchone()
                conn.commit()
        except psycopg.Error as exc:
            raise PersistFailureError(f"Failed to create project: {exc}") from exc
        if row is None:
            raise PersistFailureError("Project insert returned no row")
        return _to_record(row)

    def find_by_id(self, project_id: int) -> ProjectRecord:
        """Find a project by ID.

        Raises:
            ProjectNotFoundError: if no project with this ID exists.
        """
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"SELECT {_COLUMNS} FROM projects WHERE id = %s",
                    (project_id,),
                )
                row = cur.fetchone()

        if row is None:
            raise ProjectNotFoundError(f"Project {project_id} not found")
        return _to_record(row)

    def list_by_owner(self, owner_id: str) -> list[ProjectRecord]:
        """Projects owned by *owner_id*, newest first."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"""
                    SELECT {_COLUMNS}
                    FROM projects
                    WHERE owner_id = %s
                    ORDER BY created_at DESC
                    """,
                    (owner_id,),
                )
                rows = cur.fetchall()
        return [_to_record(row) for row in rows]

    def update(
        self,
        project_id: int,
        *,
        name: str | None = None,
        description: str | None = None,
    ) -> ProjectRecord:
        """Update name and/or description. Unset fields keep their value.

        Raises:
            ProjectNotFoundError: if no project with this ID exists.
            PersistFailureError: if the update fails.
        """
        try:
            with get_connection() as conn:
                with conn.cursor(row_factory=dict_row) as cur:
                    cur.execute(
                        f"""
                        UPDATE projects
                        SET name = COALESCE(%s, name),
                            description = COALESCE(%s, description)
                        WHERE id = %s
                        RETURNING {_COLUMNS}
                        """,
                        (name, description, project_id),
                    )
                    row = cur.fetchone()
                conn.commit()
        except psycopg.Error as exc:
            raise PersistFailureError(f"Failed to update project {project_id}: {exc}") from exc
        if row is None:
            raise ProjectNotFoundError(f"Project {project_id} not found")
        return _to_record(row)

    def delete(self, project_id: int) -> None:
        """Delete a project. Files and reports go with it via FK cascade.

        Raises:
            ProjectNotFoundError: if no project with this ID exists.
        """
        try:
            with get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute("DELETE FROM projects WHERE id = %s", (project_id,))
                    if cur.rowcount == 0:
                        raise ProjectNotFoundError(f"Project {project_id} not found")
                conn.commit()
        except psycopg.Error as exc:
            raise PersistFailureError(f"Failed to delete project {project_id}: {exc}") from exc
