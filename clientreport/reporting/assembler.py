from dataclasses import dataclass, field
from typing import Any

from clientreport.analysis.models import Insight
from clientreport.database.models import ReportRecord, UploadedFileRecord
from clientreport.database.repositories.report_repository import ReportRepository
from clientreport.logging.logger import Log


@dataclass(frozen=True)
class NewReport:
    """A report ready to be inserted."""

    project_id: int
    file_id: int
    title: str
    content: str
    summary: str
    generated_by: str
    insights: dict[str, Any] = field(default_factory=dict)
    status: str = "completed"


def default_title(file_name: str) -> str:
    return f"Report for {file_name}"


class ReportAssembler:
    """Packages an Insight and file metadata into a persisted report."""

    def __init__(self, report_repo: ReportRepository, max_content_chars: int = 5000) -> None:
        self._report_repo = report_repo
        self._max_content_chars = max_content_chars

    def assemble(
        self,
        uploaded_file: UploadedFileRecord,
        text: str,
        insight: Insight,
        generated_by: str,
        title: str | None = None,
    ) -> NewReport:
        return NewReport(
            project_id=uploaded_file.project_id,
            file_id=uploaded_file.id,
            title=title or default_title(uploaded_file.file_name),
            content=text[: self._max_content_chars],
            summary=insight.summary,
            generated_by=generated_by,
            insights=insight.to_dict(),
        )

    def persist(self, report: NewReport) -> ReportRecord:
        """Insert the report in one statement.

        Raises:
            PersistFailureError: if the write does not succeed.
        """
        record = self._report_repo.create(
            project_id=report.project_id,
            file_id=report.file_id,
            title=report.title,
            content=report.content,
            summary=report.summary,
            generated_by=report.generated_by,
            insights=report.insights,
            status=report.status,
        )
        Log.info(f"Report {record.id} persisted", project=record.project_id, file=record.file_id)
        return record
