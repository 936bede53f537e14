import argparse
import json
import mimetypes
import sys
from collections.abc import Sequence
from pathlib import Path

from clientreport.config.settings import Settings
from clientreport.database.connection import close_pool, init_pool
from clientreport.database.repositories.project_repository import ProjectRepository
from clientreport.database.repositories.report_repository import ReportRepository
from clientreport.database.repositories.uploaded_files_repository import UploadedFilesRepository
from clientreport.extraction.factory import ExtractorFactory
from clientreport.extraction.models import SourceFile
from clientreport.logging.logger import Log
from clientreport.processor.exceptions import ProcessorError
from clientreport.processor.models import UploadRequest
from clientreport.processor.processor import build_aggregator, build_processor
from clientreport.projects.service import ProjectService
from clientreport.reporting.pdf_export import ReportPdfExporter
from clientreport.reporting.summary_handler import SummaryHandler, SummaryRequest
from clientreport.storage.file_storage import FileStorage
from clientreport.summarization.factory import SummarizerFactory


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="clientreport",
        description="Upload client files and generate summary reports",
    )
    parser.add_argument("--owner", required=True, help="Authenticated user id")
    sub = parser.add_subparsers(dest="command", required=True)

    create = sub.add_parser("create-project", help="Create a project")
    create.add_argument("name")
    create.add_argument("--description", default="")

    sub.add_parser("list-projects", help="List your projects, newest first")

    update = sub.add_parser("update-project", help="Rename or re-describe a project")
    update.add_argument("project_id", type=int)
    update.add_argument("--name")
    update.add_argument("--description")

    delete = sub.add_parser("delete-project", help="Delete a project with its files and reports")
    delete.add_argument("project_id", type=int)

    upload = sub.add_parser("upload", help="Upload a file and generate its report")
    upload.add_argument("project_id", type=int)
    upload.add_argument("path", type=Path)
    upload.add_argument("--media-type", help="Declared media type (guessed from the name if omitted)")
    upload.add_argument("--title", help="Report title (default: 'Report for <file name>')")

    list_files = sub.add_parser("list-files", help="List files of a project")
    list_files.add_argument("project_id", type=int)

    delete_file = sub.add_parser("delete-file", help="Delete an uploaded file")
    delete_file.add_argument("file_id", type=int)

    list_reports = sub.add_parser("list-reports", help="List reports of a project")
    list_reports.add_argument("project_id", type=int)

    export = sub.add_parser("export-pdf", help="Write a report as PDF")
    export.add_argument("report_id", type=int)
    export.add_argument("output", type=Path)

    ask = sub.add_parser("ask", help="Ask a question about an uploaded file")
    ask.add_argument("file_id", type=int)
    ask.add_argument("question")

    summarize = sub.add_parser("summarize", help="Summarize text and store it as a report")
    summarize.add_argument("project_id", type=int)
    summarize.add_argument("path", type=Path)
    summarize.add_argument("--file-id", type=int)

    return parser.parse_args(argv)


def _guess_media_type(path: Path) -> str:
    media_type, _ = mimetypes.guess_type(path.name)
    return media_type or "application/octet-stream"


def run(args: argparse.Namespace, settings: Settings) -> int:
    storage = FileStorage(Path(settings.files_root), storage_disk=settings.storage_disk)
    project_repo = ProjectRepository()
    file_repo = UploadedFilesRepository()
    report_repo = ReportRepository()
    service = ProjectService(project_repo, file_repo, report_repo, storage)
    owner = args.owner

    if args.command == "create-project":
        project = service.create_project(owner, args.name, args.description)
        print(f"{project.id}\t{project.name}")
    elif args.command == "list-projects":
        for project in service.list_projects(owner):
            print(f"{project.id}\t{project.name}\t{project.description}")
    elif args.command == "update-project":
        project = service.update_project(
            owner, args.project_id, name=args.name, description=args.description
        )
        print(f"{project.id}\t{project.name}\t{project.description}")
    elif args.command == "delete-project":
        service.delete_project(owner, args.project_id)
    elif args.command == "upload":
        request = UploadRequest(
            project_id=args.project_id,
            owner_id=owner,
            file_name=args.path.name,
            media_type=args.media_type or _guess_media_type(args.path),
            data=args.path.read_bytes(),
            title=args.title,
        )
        report = build_processor(settings).process(request).report
        if report is None:
            raise ValueError(f"Upload of {request.file_name} produced no report")
        print(f"{report.id}\t{report.title}")
        print(report.summary)
    elif args.command == "list-files":
        for uploaded in service.list_files(owner, args.project_id):
            print(f"{uploaded.id}\t{uploaded.file_name}\t{uploaded.file_size}")
    elif args.command == "delete-file":
        service.delete_file(owner, args.file_id)
    elif args.command == "list-reports":
        for report in service.list_reports(owner, args.project_id):
            print(f"{report.id}\t{report.title}\t{report.generated_at}")
    elif args.command == "export-pdf":
        report = service.get_report(owner, args.report_id)
        args.output.write_bytes(ReportPdfExporter().export(report))
        print(args.output)
    elif args.command == "ask":
        uploaded = file_repo.find_by_id(args.file_id)
        service.get_project(owner, uploaded.project_id)
        content = ExtractorFactory.create(settings).extract(
            SourceFile(
                file_name=uploaded.file_name,
                media_type=uploaded.media_type,
                data=storage.load(uploaded.storage_path),
            )
        )
        print(build_aggregator(settings).ask(content.text, args.question))
    elif args.command == "summarize":
        service.get_project(owner, args.project_id)
        handler = SummaryHandler(
            SummarizerFactory.create(settings),
            report_repo,
            max_content_chars=settings.summarizer_content_max_chars,
        )
        response = handler.handle(
            SummaryRequest(
                content=args.path.read_text(encoding="utf-8"),
                project_id=args.project_id,
                file_id=args.file_id,
                user_id=owner,
            )
        )
        print(json.dumps(response.to_payload(), indent=2))
        return 0 if response.success else 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: parse args -> configure -> initialize pool -> run command."""
    args = parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)
    init_pool(settings)
    try:
        return run(args, settings)
    except (ProcessorError, OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    finally:
        close_pool()


if __name__ == "__main__":
    sys.exit(main())
