class ProcessorError(Exception):
    """Base exception for all upload pipeline errors."""


class UploadValidationError(ProcessorError):
    """Raised when an upload is rejected before any side effect (size, type, project)."""


class UnsupportedFormatError(ProcessorError):
    """Raised when neither media type nor file extension maps to a known format."""


class EmptyContentError(ProcessorError):
    """Raised when a text file has no content after stripping whitespace."""


class ParseFailureError(ProcessorError):
    """Raised when file content is malformed for its declared format."""


class PersistFailureError(ProcessorError):
    """Raised when a database write does not succeed."""


class NotFoundError(ProcessorError):
    """Raised when a requested row does not exist."""


class ProjectNotFoundError(NotFoundError):
    """Raised when a project cannot be found in the database."""


class FileNotFoundInProjectError(NotFoundError):
    """Raised when an uploaded file record cannot be found."""


class ReportNotFoundError(NotFoundError):
    """Raised when a report cannot be found."""


class UnsupportedStorageDiskError(ProcessorError):
    """Raised when settings select a storage disk other than 'local'."""


class StorageError(ProcessorError):
    """Raised when file bytes cannot be written, read or removed."""
