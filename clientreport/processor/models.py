from dataclasses import dataclass
from enum import Enum


class PipelineStage(str, Enum):
    """States of one upload, in execution order, plus the two terminals."""

    VALIDATING = "validating"
    UPLOADING = "uploading"
    RECORDING_FILE = "recording_file"
    EXTRACTING_CONTENT = "extracting_content"
    SCANNING_METRICS = "scanning_metrics"
    AGGREGATING = "aggregating"
    ASSEMBLING_REPORT = "assembling_report"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class UploadRequest:
    """One file submitted by an authenticated user into a project."""

    project_id: int | None
    owner_id: str
    file_name: str
    media_type: str
    data: bytes
    title: str | None = None

    @property
    def size(self) -> int:
        return len(self.data)
