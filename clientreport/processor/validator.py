from clientreport.config.settings import Settings
from clientreport.processor.exceptions import UploadValidationError
from clientreport.processor.models import UploadRequest


class UploadValidator:
    """Synchronous size/type gate. Performs no I/O."""

    def __init__(
        self,
        *,
        max_bytes: int,
        allowed_extensions: list[str],
        allowed_media_types: list[str],
    ) -> None:
        self._max_bytes = max_bytes
        self._allowed_extensions = tuple(ext.lower() for ext in allowed_extensions)
        self._allowed_media_types = frozenset(t.lower() for t in allowed_media_types)

    @classmethod
    def from_settings(cls, settings: Settings) -> "UploadValidator":
        return cls(
            max_bytes=settings.max_upload_bytes,
            allowed_extensions=settings.allowed_extensions,
            allowed_media_types=settings.allowed_media_types,
        )

    def validate(self, request: UploadRequest) -> None:
        """Raises UploadValidationError with a user-facing message."""
        if request.project_id is None:
            raise UploadValidationError("Please select a project first")
        if not request.file_name.strip():
            raise UploadValidationError("File name is required")
        if request.size > self._max_bytes:
            raise UploadValidationError(
                f"File size must be less than {self._max_bytes // (1024 * 1024)}MB"
            )
        has_valid_type = request.media_type.lower() in self._allowed_media_types or (
            request.file_name.lower().endswith(self._allowed_extensions)
        )
        if not has_valid_type:
            raise UploadValidationError(f"Only {self._describe_extensions()} files are supported")

    def _describe_extensions(self) -> str:
        exts = list(self._allowed_extensions)
        if len(exts) == 1:
            return exts[0]
        if len(exts) == 2:
            return f"{exts[0]} and {exts[1]}"
        return f"{', '.join(exts[:-1])}, and {exts[-1]}"
