from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from clientreport.analysis.models import Insight, Metric
from clientreport.database.models import ProjectRecord, ReportRecord, UploadedFileRecord
from clientreport.extraction.models import ExtractedContent
from clientreport.processor.models import PipelineStage, UploadRequest


@dataclass(slots=True)
class PipelineContext:
    """Per-upload state handed from step to step."""

    request: UploadRequest
    stage: PipelineStage = PipelineStage.VALIDATING
    project: ProjectRecord | None = None
    storage_path: str = ""
    uploaded_file: UploadedFileRecord | None = None
    content: ExtractedContent | None = None
    metrics: list[Metric] = field(default_factory=list)
    insight: Insight | None = None
    report: ReportRecord | None = None
    failed_stage: PipelineStage | None = None
    error_message: str = ""


class PipelineStep(ABC):
    stage: PipelineStage

    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
