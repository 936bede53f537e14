from pathlib import Path

from clientreport.analysis.aggregator import InsightAggregator
from clientreport.analysis.metrics import MetricScanner
from clientreport.config.settings import Settings
from clientreport.database.repositories.project_repository import ProjectRepository
from clientreport.database.repositories.report_repository import ReportRepository
from clientreport.database.repositories.uploaded_files_repository import UploadedFilesRepository
from clientreport.extraction.factory import ExtractorFactory
from clientreport.logging.logger import Log
from clientreport.processor.models import PipelineStage, UploadRequest
from clientreport.processor.pipeline import PipelineContext, PipelineStep
from clientreport.processor.steps import (
    AggregateInsightStep,
    AssembleReportStep,
    ExtractContentStep,
    MarkFailedStep,
    RecordFileStep,
    ScanMetricsStep,
    StoreFileStep,
    ValidateUploadStep,
)
from clientreport.processor.validator import UploadValidator
from clientreport.reporting.assembler import ReportAssembler
from clientreport.storage.file_storage import FileStorage
from clientreport.summarization.base import BaseSummarizer
from clientreport.summarization.factory import SummarizerFactory


class Processor:
    """Runs one upload through the pipeline.

    Pipeline: validate -> store -> record file -> extract -> scan -> aggregate -> report.
    A failing step moves the context to FAILED and the error is re-raised;
    there is no resumption, the caller re-submits the file.
    """

    def __init__(self, steps: list[PipelineStep], failed_step: PipelineStep) -> None:
        self._steps = steps
        self._failed_step = failed_step

    def process(self, request: UploadRequest) -> PipelineContext:
        Log.info(f"Processing upload {request.file_name}", project=request.project_id)
        context = PipelineContext(request=request)
        for step in self._steps:
            context.stage = step.stage
            try:
                context = step.run(context)
            except Exception as exc:
                context.failed_stage = context.stage
                context.error_message = str(exc)
                self._failed_step.run(context)
                raise
        context.stage = PipelineStage.DONE
        Log.info(
            f"Upload {request.file_name} done",
            report=context.report.id if context.report else None,
        )
        return context


def build_aggregator(settings: Settings, summarizer: BaseSummarizer | None = None) -> InsightAggregator:
    return InsightAggregator(summarizer or SummarizerFactory.create(settings))


def build_processor(
    settings: Settings,
    files_root: Path | None = None,
    summarizer: BaseSummarizer | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    storage = FileStorage(
        files_root if files_root is not None else Path(settings.files_root),
        storage_disk=settings.storage_disk,
    )
    file_repo = UploadedFilesRepository()
    steps: list[PipelineStep] = [
        ValidateUploadStep(UploadValidator.from_settings(settings), ProjectRepository()),
        StoreFileStep(storage),
        RecordFileStep(file_repo, storage),
        ExtractContentStep(ExtractorFactory.create(settings)),
        ScanMetricsStep(MetricScanner(limit=settings.metric_limit)),
        AggregateInsightStep(build_aggregator(settings, summarizer)),
        AssembleReportStep(
            ReportAssembler(ReportRepository(), max_content_chars=settings.stored_content_max_chars)
        ),
    ]
    return Processor(steps=steps, failed_step=MarkFailedStep())
