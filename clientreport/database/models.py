from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class ProjectRecord:
    """Represents a row from the projects table."""

    id: int
    name: str
    owner_id: str
    description: str = ""
    created_at: datetime | None = None


@dataclass(frozen=True)
class UploadedFileRecord:
    """Represents a row from the files table."""

    id: int
    project_id: int
    file_name: str
    media_type: str
    file_size: int
    storage_path: str
    uploaded_by: str
    created_at: datetime | None = None


@dataclass(frozen=True)
class ReportRecord:
    """Represents a row from the reports table."""

    id: int
    project_id: int
    file_id: int | None
    title: str
    content: str
    summary: str
    generated_by: str
    status: str = "completed"
    insights: dict[str, Any] = field(default_factory=dict)
    generated_at: datetime | None = None
