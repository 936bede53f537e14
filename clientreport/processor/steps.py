from clientreport.analysis.aggregator import InsightAggregator
from clientreport.analysis.metrics import MetricScanner
from clientreport.database.repositories.project_repository import ProjectRepository
from clientreport.database.repositories.uploaded_files_repository import UploadedFilesRepository
from clientreport.extraction.factory import ContentExtractor
from clientreport.extraction.models import SourceFile
from clientreport.logging.logger import Log
from clientreport.processor.exceptions import PersistFailureError, ProjectNotFoundError
from clientreport.processor.models import PipelineStage
from clientreport.processor.pipeline import PipelineContext, PipelineStep
from clientreport.processor.validator import UploadValidator
from clientreport.reporting.assembler import ReportAssembler
from clientreport.storage.file_storage import FileStorage


class ValidateUploadStep(PipelineStep):
    stage = PipelineStage.VALIDATING

    def __init__(self, validator: UploadValidator, project_repo: ProjectRepository) -> None:
        self._validator = validator
        self._project_repo = project_repo

    def run(self, context: PipelineContext) -> PipelineContext:
        request = context.request
        self._validator.validate(request)
        if request.project_id is None:
            raise ValueError("UploadRequest.project_id must be set after validation")
        project = self._project_repo.find_by_id(request.project_id)
        if project.owner_id != request.owner_id:
            raise ProjectNotFoundError(f"Project {project.id} not found")
        context.project = project
        return context


class StoreFileStep(PipelineStep):
    stage = PipelineStage.UPLOADING

    def __init__(self, storage: FileStorage) -> None:
        self._storage = storage

    def run(self, context: PipelineContext) -> PipelineContext:
        request = context.request
        if context.project is None:
            raise ValueError("PipelineContext.project must be set before storing the file")
        context.storage_path = self._storage.save(
            request.owner_id, context.project.id, request.file_name, request.data
        )
        Log.info(f"Stored {request.size} bytes at {context.storage_path}")
        return context


class RecordFileStep(PipelineStep):
    stage = PipelineStage.RECORDING_FILE

    def __init__(self, file_repo: UploadedFilesRepository, storage: FileStorage) -> None:
        self._file_repo = file_repo
        self._storage = storage

    def run(self, context: PipelineContext) -> PipelineContext:
        request = context.request
        if context.project is None:
            raise ValueError("PipelineContext.project must be set before recording the file")
        try:
            context.uploaded_file = self._file_repo.create(
                project_id=context.project.id,
                file_name=request.file_name,
                media_type=request.media_type,
                file_size=request.size,
                storage_path=context.storage_path,
                uploaded_by=request.owner_id,
            )
        except PersistFailureError:
            self._storage.delete(context.storage_path)
            raise
        Log.info(f"Recorded file {context.uploaded_file.id}", project=context.project.id)
        return context


class ExtractContentStep(PipelineStep):
    stage = PipelineStage.EXTRACTING_CONTENT

    def __init__(self, content_extractor: ContentExtractor) -> None:
        self._content_extractor = content_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        request = context.request
        context.content = self._content_extractor.extract(
            SourceFile(file_name=request.file_name, media_type=request.media_type, data=request.data)
        )
        Log.info(
            f"Extracted {len(context.content.text)} chars from {request.file_name}",
            format=context.content.file_format.value,
            placeholder=context.content.is_placeholder,
        )
        return context


class ScanMetricsStep(PipelineStep):
    stage = PipelineStage.SCANNING_METRICS

    def __init__(self, scanner: MetricScanner) -> None:
        self._scanner = scanner

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.content is None:
            raise ValueError("PipelineContext.content must be set before metric scanning")
        context.metrics = self._scanner.scan(context.content.text)
        Log.info(f"Found {len(context.metrics)} metrics in {context.request.file_name}")
        return context


class AggregateInsightStep(PipelineStep):
    stage = PipelineStage.AGGREGATING

    def __init__(self, aggregator: InsightAggregator) -> None:
        self._aggregator = aggregator

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.content is None:
            raise ValueError("PipelineContext.content must be set before aggregation")
        context.insight = self._aggregator.aggregate(context.content.text, context.metrics)
        Log.info(f"Insight ready for {context.request.file_name}", source=context.insight.source)
        return context


class AssembleReportStep(PipelineStep):
    stage = PipelineStage.ASSEMBLING_REPORT

    def __init__(self, assembler: ReportAssembler) -> None:
        self._assembler = assembler

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.uploaded_file is None or context.content is None or context.insight is None:
            raise ValueError(
                "PipelineContext.uploaded_file, content and insight must be set before assembly"
            )
        new_report = self._assembler.assemble(
            context.uploaded_file,
            context.content.text,
            context.insight,
            generated_by=context.request.owner_id,
            title=context.request.title,
        )
        context.report = self._assembler.persist(new_report)
        return context


class MarkFailedStep(PipelineStep):
    stage = PipelineStage.FAILED

    def run(self, context: PipelineContext) -> PipelineContext:
        context.stage = PipelineStage.FAILED
        Log.error(
            f"Upload of {context.request.file_name} failed: {context.error_message}",
            stage=context.failed_stage.value if context.failed_stage else "unknown",
        )
        return context
