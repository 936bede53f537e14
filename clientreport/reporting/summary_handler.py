"""Summarize-and-store operation: content excerpt in, summary and report id out."""

from dataclasses import dataclass
from typing import Any

from clientreport.database.repositories.report_repository import ReportRepository
from clientreport.logging.logger import Log
from clientreport.processor.exceptions import ProcessorError
from clientreport.summarization.base import BaseSummarizer
from clientreport.summarization.exceptions import SummarizerError


@dataclass(frozen=True)
class SummaryRequest:
    content: str
    project_id: int
    file_id: int | None
    user_id: str


@dataclass(frozen=True)
class SummaryResponse:
    """Success carries summary and report_id; failure carries error."""

    success: bool
    summary: str = ""
    report_id: int | None = None
    error: str = ""

    def to_payload(self) -> dict[str, Any]:
        if self.success:
            return {"success": True, "summary": self.summary, "reportId": self.report_id}
        return {"success": False, "error": self.error}

    @classmethod
    def from_payload(cls, payload: Any) -> "SummaryResponse":
        """Parse a response payload. Anything malformed is a failure."""
        if not isinstance(payload, dict):
            return cls(success=False, error="Malformed summary response")
        if payload.get("success") is not True:
            error = payload.get("error")
            return cls(
                success=False,
                error=error if isinstance(error, str) and error else "Failed to generate summary",
            )
        summary = payload.get("summary")
        report_id = payload.get("reportId")
        if not isinstance(summary, str) or not isinstance(report_id, int):
            return cls(success=False, error="Malformed summary response")
        return cls(success=True, summary=summary, report_id=report_id)


class SummaryHandler:
    """Summarizes a content excerpt with the configured summarizer and stores a report."""

    NO_SUMMARY = "No summary generated"

    def __init__(
        self,
        summarizer: BaseSummarizer,
        report_repo: ReportRepository,
        max_content_chars: int = 10000,
    ) -> None:
        self._summarizer = summarizer
        self._report_repo = report_repo
        self._max_content_chars = max_content_chars

    def handle(self, request: SummaryRequest) -> SummaryResponse:
        try:
            if not request.content.strip():
                raise ValueError("Content is empty")
            content = request.content[: self._max_content_chars]
            summary = self._summarizer.summarize(content) or self.NO_SUMMARY
            report = self._report_repo.create(
                project_id=request.project_id,
                file_id=request.file_id,
                title="AI summary",
                content="",
                summary=summary,
                generated_by=request.user_id,
            )
        except (SummarizerError, ProcessorError, ValueError) as exc:
            Log.error(f"Summary generation failed: {exc}", project=request.project_id)
            return SummaryResponse(success=False, error=str(exc))

        Log.info(f"Summary report {report.id} created", project=request.project_id)
        return SummaryResponse(success=True, summary=summary, report_id=report.id)
