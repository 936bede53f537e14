from clientreport.database.models import ProjectRecord, ReportRecord, UploadedFileRecord
from clientreport.database.repositories.project_repository import ProjectRepository
from clientreport.database.repositories.report_repository import ReportRepository
from clientreport.database.repositories.uploaded_files_repository import UploadedFilesRepository
from clientreport.logging.logger import Log
from clientreport.processor.exceptions import ProjectNotFoundError, UploadValidationError
from clientreport.storage.file_storage import FileStorage


class ProjectService:
    """Owner-scoped project, file and report operations."""

    def __init__(
        self,
        project_repo: ProjectRepository,
        file_repo: UploadedFilesRepository,
        report_repo: ReportRepository,
        storage: FileStorage,
    ) -> None:
        self._project_repo = project_repo
        self._file_repo = file_repo
        self._report_repo = report_repo
        self._storage = storage

    def create_project(self, owner_id: str, name: str, description: str = "") -> ProjectRecord:
        if not name.strip():
            raise UploadValidationError("Project name is required")
        project = self._project_repo.create(name.strip(), owner_id, description)
        Log.info(f"Created project {project.id}", owner=owner_id)
        return project

    def list_projects(self, owner_id: str) -> list[ProjectRecord]:
        return self._project_repo.list_by_owner(owner_id)

    def update_project(
        self,
        owner_id: str,
        project_id: int,
        *,
        name: str | None = None,
        description: str | None = None,
    ) -> ProjectRecord:
        self.get_project(owner_id, project_id)
        return self._project_repo.update(project_id, name=name, description=description)

    def delete_project(self, owner_id: str, project_id: int) -> None:
        """Delete the project row; files and reports cascade in the database.

        Stored bytes are removed after the row delete succeeds.
        """
        self.get_project(owner_id, project_id)
        stored_paths = [f.storage_path for f in self._file_repo.list_by_project(project_id)]
        self._project_repo.delete(project_id)
        for storage_path in stored_paths:
            self._storage.delete(storage_path)
        Log.info(f"Deleted project {project_id}", owner=owner_id)

    def list_files(self, owner_id: str, project_id: int) -> list[UploadedFileRecord]:
        self.get_project(owner_id, project_id)
        return self._file_repo.list_by_project(project_id)

    def delete_file(self, owner_id: str, file_id: int) -> None:
        uploaded = self._file_repo.find_by_id(file_id)
        self.get_project(owner_id, uploaded.project_id)
        self._file_repo.delete(file_id)
        self._storage.delete(uploaded.storage_path)
        Log.info(f"Deleted file {file_id}", project=uploaded.project_id)

    def list_reports(self, owner_id: str, project_id: int) -> list[ReportRecord]:
        self.get_project(owner_id, project_id)
        return self._report_repo.list_by_project(project_id)

    def get_report(self, owner_id: str, report_id: int) -> ReportRecord:
        report = self._report_repo.find_by_id(report_id)
        self.get_project(owner_id, report.project_id)
        return report

    def get_project(self, owner_id: str, project_id: int) -> ProjectRecord:
        """Raises ProjectNotFoundError unless *owner_id* owns the project."""
        project = self._project_repo.find_by_id(project_id)
        if project.owner_id != owner_id:
            # Other tenants' projects are indistinguishable from missing ones.
            raise ProjectNotFoundError(f"Project {project_id} not found")
        return project
